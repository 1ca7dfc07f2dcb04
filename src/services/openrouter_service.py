"""OpenRouter Service - chat completions for product variations and copy."""

import json
import logging
from typing import Any, Optional

import httpx

from services.prompts import (
    DESCRIPTION_RESPONSE_FORMAT,
    DESCRIPTION_SYSTEM_INSTRUCTION,
    MISSING_IMAGE_NOTE,
    VARIATION_SYSTEM_INSTRUCTION,
    VARIATION_USER_SUFFIX,
    strip_code_fences,
)

logger = logging.getLogger(__name__)

OPENROUTER_API_BASE = "https://openrouter.ai/api/v1"
DEFAULT_IMAGE_MODEL = "google/gemini-2.5-flash-image-preview"
DEFAULT_DESCRIPTION_MODEL = "openai/gpt-5-nano"

# Content block types that may carry an output image
IMAGE_BLOCK_TYPES = ("output_image", "image", "image_url")
TEXT_BLOCK_TYPES = ("output_text", "text")


class OpenRouterServiceError(Exception):
    """Error from the OpenRouter API or an unusable model response."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


def normalize_base64_payload(value: Any) -> str:
    """Return bare base64 from a data URL or raw base64 string.

    URLs, non-strings and blank strings give an empty string.
    """
    if not isinstance(value, str):
        return ""

    trimmed = value.strip()
    if not trimmed or trimmed.startswith("http"):
        return ""

    comma_index = trimmed.find(",")
    base64_data = trimmed[comma_index + 1:] if comma_index >= 0 else trimmed
    return "".join(base64_data.split())


def _first_message(data: Any) -> Optional[dict]:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    return message if isinstance(message, dict) else None


def _image_from_item(item: Any) -> Optional[str]:
    if not isinstance(item, dict):
        return None
    if item.get("image_base64"):
        return f"data:image/png;base64,{item['image_base64']}"
    image_url = item.get("image_url")
    if isinstance(image_url, dict) and image_url.get("url"):
        return image_url["url"]
    return None


def extract_image_from_response(data: Any) -> str:
    """Pull the generated image out of a chat completion response.

    Looks at ``message.images`` first, then at image-typed content blocks.

    Raises:
        OpenRouterServiceError: If the response carries no image
    """
    message = _first_message(data)
    if message is None:
        raise OpenRouterServiceError("No message returned from image model", status_code=502)

    for item in message.get("images") or []:
        image = _image_from_item(item)
        if image:
            return image

    content = message.get("content")
    blocks = content if isinstance(content, list) else []
    for block in blocks:
        if isinstance(block, dict) and block.get("type", "") in IMAGE_BLOCK_TYPES:
            image = _image_from_item(block)
            if image:
                return image
            break

    raise OpenRouterServiceError("Model response did not include an output image", status_code=502)


def extract_text_content(data: Any) -> str:
    """Return the text of the first choice, from a string or text blocks."""
    message = _first_message(data)
    content = message.get("content") if message else None

    if isinstance(content, str) and content.strip():
        return content

    if isinstance(content, list) and content:
        for block in content:
            if isinstance(block, dict) and block.get("type") in TEXT_BLOCK_TYPES and block.get("text"):
                return block["text"]
        raise OpenRouterServiceError("Unexpected description format from model", status_code=502)

    raise OpenRouterServiceError("Model returned no description content", status_code=502)


class OpenRouterService:
    """Client for OpenRouter's chat completions endpoint."""

    def __init__(
        self,
        api_key: str = "",
        base_url: str = OPENROUTER_API_BASE,
        site_url: Optional[str] = None,
        site_name: Optional[str] = None,
        image_model: str = DEFAULT_IMAGE_MODEL,
        description_model: str = DEFAULT_DESCRIPTION_MODEL,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the OpenRouter client.

        Args:
            api_key: OpenRouter API key
            base_url: API base URL
            site_url: Optional attribution URL (HTTP-Referer header)
            site_name: Optional attribution name (X-Title header)
            image_model: Model used for image variations
            description_model: Model used for description copy
            timeout: Request timeout in seconds (image generation is slow)
            transport: Optional httpx transport, used by tests
        """
        self.api_key = api_key
        self.image_model = image_model
        self.description_model = description_model

        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        if site_url:
            headers["HTTP-Referer"] = site_url
        if site_name:
            headers["X-Title"] = site_name

        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def is_configured(self) -> bool:
        """Check if the OpenRouter API key is configured."""
        return bool(self.api_key)

    async def check_health(self) -> dict:
        if not self.is_configured():
            return {
                "configured": False,
                "error": "OPENROUTER_API_KEY not configured",
            }
        return {
            "configured": True,
            "image_model": self.image_model,
            "description_model": self.description_model,
        }

    async def chat_completion(self, payload: dict) -> dict:
        """POST a chat completion and return the decoded JSON body.

        Raises:
            OpenRouterServiceError: On HTTP errors, timeouts or invalid JSON
        """
        try:
            response = await self.client.post("/chat/completions", json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.TimeoutException:
            raise OpenRouterServiceError("OpenRouter request timed out", status_code=504)
        except httpx.HTTPStatusError as e:
            error_data: Any = None
            message = ""
            try:
                error_data = e.response.json()
                error = error_data.get("error") if isinstance(error_data, dict) else None
                if isinstance(error, dict):
                    message = error.get("message") or ""
            except ValueError:
                error_data = e.response.text
            raise OpenRouterServiceError(
                message or f"OpenRouter API error ({e.response.status_code})",
                status_code=e.response.status_code,
                payload=error_data,
            )
        except httpx.HTTPError as e:
            raise OpenRouterServiceError(f"OpenRouter request failed: {e}", status_code=502)
        except ValueError:
            raise OpenRouterServiceError("OpenRouter returned invalid JSON", status_code=502)

    async def generate_variation(
        self,
        prompt: str,
        image_url: str,
        base64_fallback: Optional[str] = None,
    ) -> str:
        """Generate one product variation from a reference image.

        Sends the image by URL first. If the model rejects that with HTTP 400
        and a base64 copy is available, retries once with inline base64.

        Returns:
            Image URL or data URL
        """
        user_text = f"{prompt}\n{VARIATION_USER_SUFFIX}"

        def build_payload(media: dict) -> dict:
            return {
                "model": self.image_model,
                "messages": [
                    {"role": "system", "content": VARIATION_SYSTEM_INSTRUCTION},
                    {
                        "role": "user",
                        "content": [{"type": "text", "text": user_text}, media],
                    },
                ],
            }

        try:
            data = await self.chat_completion(
                build_payload({"type": "image_url", "image_url": {"url": image_url}})
            )
        except OpenRouterServiceError as e:
            if e.status_code != 400 or not base64_fallback:
                raise
            logger.warning("Variation request failed with image_url; retrying with base64 payload")
            data = await self.chat_completion(
                build_payload({"type": "image", "image_base64": base64_fallback})
            )

        return extract_image_from_response(data)

    async def generate_descriptions(
        self,
        instruction: str,
        image_url: str = "",
        image_base64: str = "",
    ) -> tuple[dict, bool]:
        """Generate structured description copy for a product photo.

        Args:
            instruction: Full user instruction text
            image_url: Public URL of the reference image, if any
            image_base64: Base64 copy of the reference image, if any

        Returns:
            Tuple of (parsed JSON object, whether the image was attached)

        Raises:
            OpenRouterServiceError: On upstream failure or unparseable output
        """
        system_message = {"role": "system", "content": DESCRIPTION_SYSTEM_INSTRUCTION}

        def build_payload(user_content: Any) -> dict:
            return {
                "model": self.description_model,
                "response_format": DESCRIPTION_RESPONSE_FORMAT,
                "messages": [system_message, {"role": "user", "content": user_content}],
            }

        if image_url:
            media = {"type": "image_url", "image_url": {"url": image_url}}
        else:
            media = {"type": "image", "image_base64": image_base64}

        image_attached = True
        try:
            data = await self.chat_completion(
                build_payload([{"type": "text", "text": instruction}, media])
            )
        except OpenRouterServiceError as e:
            if e.status_code != 400:
                raise
            if image_url and image_base64:
                logger.warning("Description model rejected image_url; retrying with base64 payload")
                data = await self.chat_completion(
                    build_payload([
                        {"type": "text", "text": instruction},
                        {"type": "image", "image_base64": image_base64},
                    ])
                )
            else:
                logger.warning("Description model rejected the image; retrying without media attachment")
                image_attached = False
                data = await self.chat_completion(build_payload(f"{instruction}\n{MISSING_IMAGE_NOTE}"))

        text = extract_text_content(data)
        try:
            parsed = json.loads(strip_code_fences(text))
        except json.JSONDecodeError as e:
            logger.error(f"Description JSON parse error: {e}")
            raise OpenRouterServiceError("Failed to parse description output", status_code=502)

        if not isinstance(parsed, dict):
            raise OpenRouterServiceError("Failed to parse description output", status_code=502)

        return parsed, image_attached

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
