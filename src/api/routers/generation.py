"""Generation routes for the fitshot API (image variations and description copy)."""

import base64
import logging
import secrets
import time
import uuid
from pathlib import Path

from api.dependencies import (
    get_catalog,
    get_current_account,
    get_default_sequence,
    get_generation_service,
    get_store,
)
from api.schemas import DescriptionRequest, DescriptionResponse, GenerationResponse
from api.store import Store
from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from models.generation import Account
from models.prompt_catalog import Catalog, PromptTemplate
from services.generation_service import GenerationService, InsufficientCoinsError
from services.openrouter_service import OpenRouterServiceError
from services.prompt_catalog import parse_prompt_ids, resolve_prompt_ids
from utils.config import get_supported_image_formats, load_config
from utils.logging import clear_request_context, set_request_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Generation"])


def _collect_prompt_ids(values: list[str] | None) -> list[str]:
    """Flatten repeated form fields, each of which may be a JSON array or CSV."""
    if not values:
        return []
    if len(values) == 1:
        return parse_prompt_ids(values[0])
    ids: list[str] = []
    for value in values:
        ids.extend(parse_prompt_ids(value))
    return ids


def get_asset_base_url(request: Request, config: dict) -> str:
    """Base URL under which uploaded files are publicly reachable."""
    if config.get("public_asset_base_url"):
        return config["public_asset_base_url"].rstrip("/")

    forwarded_proto = request.headers.get("x-forwarded-proto", "")
    scheme = forwarded_proto.split(",")[0].strip() or request.url.scheme or "http"
    host = request.headers.get("host") or request.url.netloc
    return f"{scheme.rstrip(':')}://{host}"


async def save_upload(file: UploadFile, upload_dir: str, max_bytes: int) -> Path:
    """Persist an uploaded image under a unique name.

    Raises:
        HTTPException: 413 if the file exceeds the size limit
    """
    content = await file.read()
    if len(content) > max_bytes:
        raise HTTPException(status_code=413, detail="Image exceeds the upload size limit")

    ext = Path(file.filename or "").suffix.lower()
    if ext not in get_supported_image_formats():
        ext = ".png"

    target_dir = Path(upload_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    file_path = target_dir / f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{ext}"
    file_path.write_bytes(content)
    return file_path


def discard_upload(file_path: Path | None) -> None:
    """Remove an upload that no saved session refers to."""
    if file_path is None:
        return
    file_path.unlink(missing_ok=True)
    logger.debug(f"Removed unused upload {file_path.name}")


def _upstream_error(e: OpenRouterServiceError, what: str) -> HTTPException:
    status = e.status_code or 500
    logger.error(f"{what} failed ({status}): {e.payload or e.message}")
    return HTTPException(status_code=status, detail=e.message or f"{what} failed")


@router.post(
    "/api/generate-images",
    response_model=GenerationResponse,
    summary="Generate image variations",
    description="Upload a product photo and prompt ids; returns one variation per resolved prompt.",
    responses={
        400: {"description": "Image missing"},
        401: {"description": "Missing or unknown account"},
        402: {"description": "Not enough coins"},
        413: {"description": "Image too large"},
    },
)
async def generate_images(
    request: Request,
    image: UploadFile | None = File(default=None),
    prompts: list[str] | None = Form(default=None),
    styles: list[str] | None = Form(default=None),
    account: Account = Depends(get_current_account),
    catalog: Catalog = Depends(get_catalog),
    default_sequence: tuple[PromptTemplate, ...] = Depends(get_default_sequence),
    service: GenerationService = Depends(get_generation_service),
    store: Store = Depends(get_store),
) -> dict:
    config = load_config()

    if not service.openrouter.is_configured():
        raise HTTPException(status_code=500, detail="OPENROUTER_API_KEY is not configured")

    if image is None:
        raise HTTPException(status_code=400, detail="Image file is required")

    set_request_context(uuid.uuid4().hex[:12])
    file_path: Path | None = None
    try:
        resolution = resolve_prompt_ids(
            catalog, _collect_prompt_ids(prompts or styles), default_sequence
        )

        file_path = await save_upload(image, config["upload_dir"], config["max_upload_mb"] * 1024 * 1024)
        image_url = f"{get_asset_base_url(request, config)}/uploads/{file_path.name}"
        base64_fallback = base64.b64encode(file_path.read_bytes()).decode("ascii")

        logger.info(
            f"Account {account.id} requested {len(resolution.templates)} variation(s) "
            f"(default selection: {resolution.used_default})"
        )

        result, session, remaining = await service.generate_for_account(
            store, account.id, resolution.templates, image_url, base64_fallback
        )
    except InsufficientCoinsError as e:
        discard_upload(file_path)
        raise HTTPException(
            status_code=402,
            detail={"error": str(e), "required": e.required, "available": e.available},
        )
    except OpenRouterServiceError as e:
        discard_upload(file_path)
        raise _upstream_error(e, "Image generation")
    finally:
        clear_request_context()

    response = result.to_dict()
    response.update(
        {
            "session_id": session.id,
            "used_default": resolution.used_default,
            "coins": remaining,
        }
    )
    return response


@router.post(
    "/api/generate-descriptions",
    response_model=DescriptionResponse,
    summary="Generate product descriptions",
    description="Three e-commerce descriptions grounded in the reference photo and selected prompts.",
    responses={400: {"description": "Reference image missing"}},
)
async def generate_descriptions(
    request: DescriptionRequest,
    catalog: Catalog = Depends(get_catalog),
    default_sequence: tuple[PromptTemplate, ...] = Depends(get_default_sequence),
    service: GenerationService = Depends(get_generation_service),
) -> dict:
    if not service.openrouter.is_configured():
        raise HTTPException(status_code=500, detail="OPENROUTER_API_KEY is not configured")

    resolution = resolve_prompt_ids(catalog, parse_prompt_ids(request.prompts), default_sequence)

    set_request_context(uuid.uuid4().hex[:12])
    try:
        result = await service.describe(
            request.reference_image,
            request.reference_image_fallback,
            resolution.templates,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OpenRouterServiceError as e:
        raise _upstream_error(e, "Description generation")
    finally:
        clear_request_context()

    return result.to_dict()
