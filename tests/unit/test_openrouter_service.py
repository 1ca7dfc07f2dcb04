"""Unit tests for the OpenRouter client and its response parsing."""

import json

import httpx
import pytest

from services.openrouter_service import (
    OpenRouterService,
    OpenRouterServiceError,
    extract_image_from_response,
    extract_text_content,
    normalize_base64_payload,
)
from services.prompts import MISSING_IMAGE_NOTE


def _completion(message: dict) -> dict:
    return {"choices": [{"message": message}]}


def _service(handler) -> OpenRouterService:
    return OpenRouterService(
        api_key="test-key",
        base_url="https://openrouter.test/api/v1",
        site_url="https://fitshot.test",
        site_name="Fitshot",
        transport=httpx.MockTransport(handler),
    )


class TestNormalizeBase64:
    """Tests for normalize_base64_payload()."""

    def test_strips_data_url_prefix(self):
        assert normalize_base64_payload("data:image/png;base64,QUJD") == "QUJD"

    def test_removes_whitespace(self):
        assert normalize_base64_payload("  QU\nJD  ") == "QUJD"

    def test_rejects_urls_and_non_strings(self):
        assert normalize_base64_payload("https://cdn.test/a.png") == ""
        assert normalize_base64_payload(None) == ""
        assert normalize_base64_payload(123) == ""
        assert normalize_base64_payload("   ") == ""


class TestExtractImage:
    """Tests for extract_image_from_response()."""

    def test_prefers_message_images(self):
        data = _completion(
            {
                "images": [{"image_url": {"url": "https://cdn.test/out.png"}}],
                "content": [{"type": "image", "image_base64": "QUJD"}],
            }
        )
        assert extract_image_from_response(data) == "https://cdn.test/out.png"

    def test_base64_image_becomes_data_url(self):
        data = _completion({"images": [{"image_base64": "QUJD"}]})
        assert extract_image_from_response(data) == "data:image/png;base64,QUJD"

    def test_falls_back_to_content_blocks(self):
        data = _completion(
            {
                "content": [
                    {"type": "text", "text": "here you go"},
                    {"type": "output_image", "image_url": {"url": "https://cdn.test/b.png"}},
                ]
            }
        )
        assert extract_image_from_response(data) == "https://cdn.test/b.png"

    def test_missing_image_raises_bad_gateway(self):
        with pytest.raises(OpenRouterServiceError) as exc_info:
            extract_image_from_response(_completion({"content": "sorry, text only"}))
        assert exc_info.value.status_code == 502

    def test_missing_message_raises(self):
        with pytest.raises(OpenRouterServiceError, match="No message"):
            extract_image_from_response({"choices": []})


class TestExtractText:
    """Tests for extract_text_content()."""

    def test_string_content(self):
        assert extract_text_content(_completion({"content": '{"a": 1}'})) == '{"a": 1}'

    def test_text_blocks(self):
        data = _completion({"content": [{"type": "output_text", "text": "hello"}]})
        assert extract_text_content(data) == "hello"

    def test_list_without_text_block(self):
        data = _completion({"content": [{"type": "image", "image_base64": "QUJD"}]})
        with pytest.raises(OpenRouterServiceError, match="Unexpected description format"):
            extract_text_content(data)

    def test_empty_content(self):
        with pytest.raises(OpenRouterServiceError, match="no description content"):
            extract_text_content(_completion({"content": "  "}))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_chat_completion_sends_attribution_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["headers"] = request.headers
        return httpx.Response(200, json=_completion({"content": "ok"}))

    service = _service(handler)
    try:
        data = await service.chat_completion({"model": "m", "messages": []})
    finally:
        await service.close()

    assert data["choices"][0]["message"]["content"] == "ok"
    assert seen["path"] == "/api/v1/chat/completions"
    assert seen["headers"]["authorization"] == "Bearer test-key"
    assert seen["headers"]["http-referer"] == "https://fitshot.test"
    assert seen["headers"]["x-title"] == "Fitshot"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_chat_completion_maps_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": {"message": "Rate limited"}})

    service = _service(handler)
    try:
        with pytest.raises(OpenRouterServiceError) as exc_info:
            await service.chat_completion({})
    finally:
        await service.close()

    assert exc_info.value.status_code == 429
    assert exc_info.value.message == "Rate limited"
    assert exc_info.value.payload == {"error": {"message": "Rate limited"}}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_chat_completion_maps_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    service = _service(handler)
    try:
        with pytest.raises(OpenRouterServiceError) as exc_info:
            await service.chat_completion({})
    finally:
        await service.close()

    assert exc_info.value.status_code == 504


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_variation_retries_with_base64_on_400():
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        bodies.append(body)
        media = body["messages"][1]["content"][1]
        if media["type"] == "image_url":
            return httpx.Response(400, json={"error": {"message": "Cannot fetch image"}})
        return httpx.Response(200, json=_completion({"images": [{"image_base64": "T1VU"}]}))

    service = _service(handler)
    try:
        image = await service.generate_variation("Variation 1: studio shot", "https://x.test/a.png", "QUJD")
    finally:
        await service.close()

    assert image == "data:image/png;base64,T1VU"
    assert len(bodies) == 2
    assert bodies[1]["messages"][1]["content"][1] == {"type": "image", "image_base64": "QUJD"}
    assert bodies[0]["messages"][1]["content"][0]["text"].startswith("Variation 1: studio shot\n")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_variation_does_not_retry_other_errors():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, json={"error": {"message": "boom"}})

    service = _service(handler)
    try:
        with pytest.raises(OpenRouterServiceError) as exc_info:
            await service.generate_variation("prompt", "https://x.test/a.png", "QUJD")
    finally:
        await service.close()

    assert exc_info.value.status_code == 500
    assert len(calls) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_descriptions_parses_fenced_json():
    payload = {"descriptions": [{"headline": "H", "tagline": "T", "body": "B", "tone": "warm"}]}

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        assert body["response_format"]["type"] == "json_schema"
        return httpx.Response(
            200, json=_completion({"content": f"```json\n{json.dumps(payload)}\n```"})
        )

    service = _service(handler)
    try:
        parsed, attached = await service.generate_descriptions("Write copy", image_url="https://x.test/a.png")
    finally:
        await service.close()

    assert parsed == payload
    assert attached is True


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_descriptions_retries_without_image():
    contents = []

    def handler(request: httpx.Request) -> httpx.Response:
        content = json.loads(request.content)["messages"][1]["content"]
        contents.append(content)
        if isinstance(content, list):
            return httpx.Response(400, json={"error": {"message": "bad image"}})
        return httpx.Response(200, json=_completion({"content": '{"descriptions": []}'}))

    service = _service(handler)
    try:
        parsed, attached = await service.generate_descriptions("Write copy", image_base64="QUJD")
    finally:
        await service.close()

    assert parsed == {"descriptions": []}
    assert attached is False
    assert contents[1] == f"Write copy\n{MISSING_IMAGE_NOTE}"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_descriptions_invalid_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_completion({"content": "not json at all"}))

    service = _service(handler)
    try:
        with pytest.raises(OpenRouterServiceError, match="Failed to parse") as exc_info:
            await service.generate_descriptions("Write copy", image_base64="QUJD")
    finally:
        await service.close()

    assert exc_info.value.status_code == 502


@pytest.mark.unit
@pytest.mark.asyncio
async def test_health_reports_configuration():
    service = OpenRouterService(api_key="")
    try:
        assert service.is_configured() is False
        assert (await service.check_health())["configured"] is False
    finally:
        await service.close()
