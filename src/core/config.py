from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):

    ETHEREUM_RPC_URL: str
    RPC_TIMEOUT_SECONDS: float = 10.0

    DONATION_DESTINATION_WALLET: str = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
    DONATION_AMOUNT_ETH_OPTIONS: list[str] = ["0.01", "0.05", "0.1"]
    DEFAULT_DONATION_AMOUNT_ETH: str = "0.01"
    DONATION_GAS_LIMIT: int = 21000  # Standard gas limit for ETH transfers

    ACTION_ICON_URL: str = (
        "https://ucarecdn.com/7aa46c85-08a4-4bc7-9376-88ec48bb146c85-08a4-4bc7-9376-88ec48bb1f43"
        "/-/preview/880x864/-/quality/smart/-/format/auto/"
    )
    ACTION_TITLE: str = "Donate to Alice"
    ACTION_DESCRIPTION: str = "Ethereum Enthusiast | Support my research with an ETH donation."

    ACTIONS_BASE_PATH: str = "/api/donate"
    ROOT_PATH: str = ""
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
