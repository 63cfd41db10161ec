import json

import pytest
from fastapi.testclient import TestClient

from conftest import DESTINATION, SENDER, FakeChainClient, build_service
from api.main import app
from core.dependencies import get_donation_service


@pytest.fixture
def chain_client():
    return FakeChainClient(nonce=3, gas_price=12_000_000_000)


@pytest.fixture
def client(chain_client):
    app.dependency_overrides[get_donation_service] = lambda: build_service(chain_client)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "message" in resp.json()


def test_discovery_document(client):
    resp = client.get("/api/donate/")
    assert resp.status_code == 200

    data = resp.json()
    assert data["label"] == "0.01 ETH"
    assert data["title"] == "Donate to Alice"
    labels = [a["label"] for a in data["links"]["actions"]]
    assert labels == ["0.01 ETH", "0.05 ETH", "0.1 ETH", "Donate"]
    # unset optional fields are left out of the document
    assert "disabled" not in data
    assert "parameters" not in data["links"]["actions"][0]


def test_amount_document(client):
    resp = client.get("/api/donate/0.1")
    assert resp.status_code == 200

    data = resp.json()
    assert data["label"] == "0.1 ETH"
    assert "links" not in data


def test_post_amount(client):
    resp = client.post("/api/donate/0.1", json={"account": SENDER})
    assert resp.status_code == 200

    transaction = json.loads(resp.json()["transaction"])
    assert transaction == {
        "to": DESTINATION,
        "value": 100000000000000000,
        "nonce": 3,
        "gasLimit": 21000,
        "gasPrice": 12000000000,
    }


def test_post_without_amount_uses_default(client):
    resp = client.post("/api/donate/", json={"account": SENDER})
    assert resp.status_code == 200
    assert json.loads(resp.json()["transaction"])["value"] == 10 ** 16


def test_post_invalid_amount(client, chain_client):
    resp = client.post("/api/donate/abc", json={"account": SENDER})
    assert resp.status_code == 400
    assert "abc" in resp.json()["detail"]
    assert chain_client.calls == []


def test_post_rpc_failure():
    chain_client = FakeChainClient(nonce_error=ConnectionError("node down"))
    app.dependency_overrides[get_donation_service] = lambda: build_service(chain_client)
    try:
        resp = TestClient(app).post("/api/donate/0.05", json={"account": SENDER})
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 502
    assert "node down" in resp.json()["detail"]


def test_post_requires_account(client):
    resp = client.post("/api/donate/0.1", json={})
    assert resp.status_code == 422


def test_post_rejects_non_address_account(client, chain_client):
    resp = client.post("/api/donate/0.1", json={"account": "not-an-address"})
    assert resp.status_code == 422
    assert chain_client.calls == []


def test_cors_headers(client):
    resp = client.get("/api/donate/")
    assert resp.headers["access-control-allow-origin"] == "*"

    resp = client.options("/api/donate/0.1")
    assert resp.status_code == 200
    assert "POST" in resp.headers["access-control-allow-methods"]


@pytest.mark.parametrize("amount", ["1" + "0" * 60, "1" * 5000])
def test_post_oversized_amount(client, chain_client, amount):
    resp = client.post(f"/api/donate/{amount}", json={"account": SENDER})
    assert resp.status_code == 400
    assert "exceeds uint256" in resp.json()["detail"]
    assert chain_client.calls == []


def test_base_path_without_trailing_slash(client):
    resp = client.get("/api/donate", follow_redirects=False)
    assert resp.status_code == 200
    assert resp.json()["label"] == "0.01 ETH"

    resp = client.post("/api/donate", json={"account": SENDER}, follow_redirects=False)
    assert resp.status_code == 200
    assert json.loads(resp.json()["transaction"])["value"] == 10 ** 16


def test_cors_methods_match_routes(client):
    resp = client.options("/api/donate/0.1")
    assert resp.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert "authorization" not in resp.headers["access-control-allow-headers"].lower()
