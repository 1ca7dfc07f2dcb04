"""End-to-end tests for the fitshot API.

The app runs with a temporary database and upload folder. OpenRouter is
replaced by an httpx mock transport, so no network access is needed.
"""

import json
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

import api.dependencies as dependencies
from api.server import create_app
from services.generation_service import GenerationService
from services.openrouter_service import OpenRouterService
from utils.config import load_config

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64

DESCRIPTIONS = {
    "descriptions": [
        {"headline": "Crisp cotton tee", "tagline": "Everyday ease", "body": "Soft and light.", "tone": "casual"},
        {"headline": "Studio staple", "tagline": "Clean lines", "body": "Built to layer.", "tone": "minimal"},
        {"headline": "Weekend ready", "tagline": "Made to move", "body": "Relaxed fit.", "tone": "playful"},
    ]
}


def openrouter_handler(request: httpx.Request) -> httpx.Response:
    body = json.loads(request.content)
    if "response_format" in body:
        content = json.dumps(DESCRIPTIONS)
        return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})

    text = body["messages"][1]["content"][0]["text"]
    number = text.split(":", 1)[0].split()[-1]
    return httpx.Response(
        200,
        json={"choices": [{"message": {"images": [{"image_url": {"url": f"https://cdn.test/{number}.png"}}]}}]},
    )


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "test-key")
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "db" / "fitshot.db"))
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setenv("PUBLIC_ASSET_BASE_URL", "")
    monkeypatch.setenv("STARTING_COINS", "2")

    monkeypatch.setattr(dependencies, "_store", None)
    monkeypatch.setattr(dependencies, "_generation_service", None)
    openrouter = OpenRouterService(
        api_key="test-key",
        base_url="https://openrouter.test/api/v1",
        transport=httpx.MockTransport(openrouter_handler),
    )
    monkeypatch.setattr(dependencies, "_openrouter_service", openrouter)

    app = create_app(load_config())
    app.dependency_overrides[dependencies.get_generation_service] = lambda: GenerationService(openrouter)

    with TestClient(app) as test_client:
        yield test_client


def register(client: TestClient, email: str = "ada@example.com", **extra) -> dict:
    response = client.post("/api/accounts", json={"email": email, "accept_privacy": True, **extra})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.integration
def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Fitshot API", "version": "1.0.0"}
    health = client.get("/api/health").json()
    assert health["status"] == "healthy"
    assert health["openrouter"] == {
        "configured": True,
        "image_model": "google/gemini-2.5-flash-image-preview",
        "description_model": "openai/gpt-5-nano",
    }


@pytest.mark.integration
def test_catalog_listing_hides_prompt_text(client):
    data = client.get("/api/catalog").json()

    assert data["prompt_count"] == 205
    assert [g["id"] for g in data["genders"]] == ["male", "female"]
    first = data["genders"][0]["categories"][0]["groups"][0]["prompts"][0]
    assert first["id"] == "male-upper-01"
    assert "prompt" not in first


@pytest.mark.integration
def test_category_routes(client):
    upper = client.get("/api/catalog/male/upper").json()
    assert upper["default_prompt_ids"] == [f"male-upper-{n:02d}" for n in range(1, 6)]

    rings = client.get("/api/catalog/standalone/rings").json()
    assert rings["id"] == "rings"
    assert rings["scope"] == "standalone"

    assert client.get("/api/catalog/male/rings").status_code == 404
    assert client.get("/api/catalog/standalone/upper").status_code == 404


@pytest.mark.integration
def test_selection_route(client):
    sunglasses = client.get("/api/catalog/selection", params={"category_id": "sunglasses"}).json()
    assert sunglasses["prompts"]
    assert all(p["category_id"] == "sunglasses" for p in sunglasses["prompts"])

    missing = client.get("/api/catalog/selection", params={"gender_id": "male", "category_id": "nope"})
    assert missing.status_code == 200
    assert missing.json()["prompts"] == []


@pytest.mark.integration
def test_resolve_route(client):
    resolved = client.get("/api/prompts/resolve", params={"ids": "male-upper-03,bogus,male-upper-01"}).json()
    assert [p["id"] for p in resolved["prompts"]] == ["male-upper-03", "male-upper-01"]
    assert resolved["used_default"] is False

    fallback = client.get("/api/prompts/resolve").json()
    assert fallback["used_default"] is True
    assert len(fallback["prompts"]) == 5


@pytest.mark.integration
def test_account_registration(client):
    account = register(client, name="Ada")
    assert account["coins"] == 2

    duplicate = client.post("/api/accounts", json={"email": "ada@example.com", "accept_privacy": True})
    assert duplicate.status_code == 409

    no_consent = client.post("/api/accounts", json={"email": "bob@example.com"})
    assert no_consent.status_code == 400

    invalid = client.post("/api/accounts", json={"email": "not-an-email", "accept_privacy": True})
    assert invalid.status_code == 422

    me = client.get("/api/accounts/me", headers={"X-Account-Id": account["id"]})
    assert me.json()["email"] == "ada@example.com"
    assert client.get("/api/accounts/me").status_code == 401
    assert client.get("/api/accounts/me", headers={"X-Account-Id": "unknown"}).status_code == 401


@pytest.mark.integration
def test_generate_images_charges_coins_and_saves_session(client):
    account = register(client)
    headers = {"X-Account-Id": account["id"]}

    response = client.post(
        "/api/generate-images",
        headers=headers,
        files={"image": ("shirt.png", PNG_BYTES, "image/png")},
        data={"prompts": ["male-upper-02", "male-upper-01"]},
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["images"] == ["https://cdn.test/1.png", "https://cdn.test/2.png"]
    assert [p["id"] for p in data["prompts"]] == ["male-upper-02", "male-upper-01"]
    assert data["used_default"] is False
    assert data["coins_charged"] == 2
    assert data["coins"] == 0
    assert data["source_image"].startswith("http://testserver/uploads/")

    uploaded = client.get(data["source_image"].replace("http://testserver", ""))
    assert uploaded.status_code == 200
    assert uploaded.content == PNG_BYTES

    sessions = client.get("/api/sessions", headers=headers).json()["sessions"]
    assert [s["id"] for s in sessions] == [data["session_id"]]

    detail = client.get(f"/api/sessions/{data['session_id']}", headers=headers).json()
    assert detail["images"] == data["images"]

    deleted = client.delete(f"/api/sessions/{data['session_id']}", headers=headers)
    assert deleted.json() == {"message": "Session deleted successfully"}
    assert client.get(f"/api/sessions/{data['session_id']}", headers=headers).status_code == 404


@pytest.mark.integration
def test_generate_images_needs_enough_coins(client):
    account = register(client)

    response = client.post(
        "/api/generate-images",
        headers={"X-Account-Id": account["id"]},
        files={"image": ("shirt.png", PNG_BYTES, "image/png")},
    )

    # Empty selection falls back to five default prompts, more than the balance
    assert response.status_code == 402
    assert response.json()["detail"] == {
        "error": "Generation needs 5 coin(s) but only 2 available",
        "required": 5,
        "available": 2,
    }
    me = client.get("/api/accounts/me", headers={"X-Account-Id": account["id"]}).json()
    assert me["coins"] == 2
    assert list(Path(load_config()["upload_dir"]).iterdir()) == []


@pytest.mark.integration
def test_failed_generation_refunds_and_removes_upload(client):
    account = register(client)
    headers = {"X-Account-Id": account["id"]}

    def failing_handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": {"message": "Model overloaded"}})

    failing = OpenRouterService(
        api_key="test-key",
        base_url="https://openrouter.test/api/v1",
        transport=httpx.MockTransport(failing_handler),
    )
    client.app.dependency_overrides[dependencies.get_generation_service] = lambda: GenerationService(failing)

    response = client.post(
        "/api/generate-images",
        headers=headers,
        files={"image": ("shirt.png", PNG_BYTES, "image/png")},
        data={"prompts": "male-upper-01"},
    )

    assert response.status_code == 503
    assert response.json()["detail"] == "Model overloaded"
    assert client.get("/api/accounts/me", headers=headers).json()["coins"] == 2
    assert client.get("/api/sessions", headers=headers).json() == {"sessions": []}
    assert list(Path(load_config()["upload_dir"]).iterdir()) == []


@pytest.mark.integration
def test_generate_images_requires_image_and_account(client):
    account = register(client)

    missing_image = client.post(
        "/api/generate-images",
        headers={"X-Account-Id": account["id"]},
        data={"prompts": "male-upper-01"},
    )
    assert missing_image.status_code == 400

    anonymous = client.post(
        "/api/generate-images",
        files={"image": ("shirt.png", PNG_BYTES, "image/png")},
    )
    assert anonymous.status_code == 401


@pytest.mark.integration
def test_sessions_are_private(client):
    owner = register(client, "owner@example.com")
    other = register(client, "other@example.com")

    created = client.post(
        "/api/generate-images",
        headers={"X-Account-Id": owner["id"]},
        files={"image": ("shirt.png", PNG_BYTES, "image/png")},
        data={"prompts": '["hats-01"]'},
    ).json()

    other_headers = {"X-Account-Id": other["id"]}
    assert client.get("/api/sessions", headers=other_headers).json() == {"sessions": []}
    assert client.get(f"/api/sessions/{created['session_id']}", headers=other_headers).status_code == 404
    assert client.delete(f"/api/sessions/{created['session_id']}", headers=other_headers).status_code == 404


@pytest.mark.integration
def test_generate_descriptions(client):
    response = client.post(
        "/api/generate-descriptions",
        json={
            "reference_image": "data:image/png;base64,QUJD",
            "prompts": ["male-upper-01", "hats-01"],
        },
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert [d["headline"] for d in data["descriptions"]] == [
        "Crisp cotton tee",
        "Studio staple",
        "Weekend ready",
    ]
    assert data["image_attached"] is True


@pytest.mark.integration
def test_generate_descriptions_requires_reference_image(client):
    response = client.post("/api/generate-descriptions", json={"prompts": "male-upper-01"})

    assert response.status_code == 400
    assert response.json()["detail"] == "reference_image is required"
