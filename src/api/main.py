from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum
from api import routers
from core.config import get_settings
from core.logging_config import configure_logging
from starlette.middleware.base import BaseHTTPMiddleware


settings = get_settings()
configure_logging(settings.LOG_LEVEL)

ACTIONS_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Content-Encoding, Accept-Encoding",
}

app = FastAPI(
    title="Ethereum Donate Action",
    root_path=settings.ROOT_PATH
)

# Action renderers fetch from arbitrary origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["*"],
)

# Custom middleware to add CORS headers to ALL responses (for API Gateway)
class CORSHeaderMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(ACTIONS_CORS_HEADERS)
        return response

app.add_middleware(CORSHeaderMiddleware)

# Handle OPTIONS requests explicitly for API Gateway
@app.options("/{full_path:path}")
async def options_handler(request: Request, full_path: str):
    return JSONResponse(content={}, headers=ACTIONS_CORS_HEADERS)

@app.get("/")
def read_root():
    return {"message": "Welcome to the Ethereum Donate Action API"}


app.include_router(routers.router, prefix=settings.ACTIONS_BASE_PATH.rstrip("/"))

handler = Mangum(app)
