"""Prompt catalog routes for the fitshot API."""

from api.dependencies import get_catalog, get_default_sequence
from api.schemas import PromptResolutionResponse, SelectionResponse
from fastapi import APIRouter, Depends, HTTPException, Query
from models.prompt_catalog import Catalog, PromptTemplate
from services.prompt_catalog import parse_prompt_ids, resolve_prompt_ids

router = APIRouter(tags=["Catalog"])


@router.get(
    "/api/catalog",
    summary="Prompt catalog",
    description="Genders, categories, groups and prompt templates (without raw prompt text).",
)
async def get_full_catalog(catalog: Catalog = Depends(get_catalog)) -> dict:
    return catalog.to_dict(include_prompt=False)


@router.get(
    "/api/catalog/selection",
    response_model=SelectionResponse,
    summary="Prompts for a selection",
    description="Templates offered for a gender/category pick. An unknown selection returns an empty list.",
)
async def get_selection(
    gender_id: str | None = Query(default=None),
    category_id: str | None = Query(default=None),
    catalog: Catalog = Depends(get_catalog),
) -> dict:
    prompts = catalog.prompts_for_selection(gender_id, category_id)
    return {
        "gender_id": gender_id,
        "category_id": category_id,
        "prompts": [p.to_dict(include_prompt=False) for p in prompts],
    }


@router.get(
    "/api/catalog/standalone/{category_id}",
    summary="Standalone category",
    responses={404: {"description": "Category not found"}},
)
async def get_standalone_category(category_id: str, catalog: Catalog = Depends(get_catalog)) -> dict:
    category = catalog.get_standalone_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category.to_dict()


@router.get(
    "/api/catalog/{gender_id}/{category_id}",
    summary="Gendered category",
    responses={404: {"description": "Category not found"}},
)
async def get_gendered_category(
    gender_id: str, category_id: str, catalog: Catalog = Depends(get_catalog)
) -> dict:
    category = catalog.get_category(gender_id, category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category.to_dict()


@router.get(
    "/api/prompts/resolve",
    response_model=PromptResolutionResponse,
    summary="Resolve prompt ids",
    description="Preview which templates a generation would use for the given ids.",
)
async def resolve_prompts(
    ids: str | None = Query(default=None, description="Comma separated ids or a JSON array"),
    catalog: Catalog = Depends(get_catalog),
    default_sequence: tuple[PromptTemplate, ...] = Depends(get_default_sequence),
) -> dict:
    resolution = resolve_prompt_ids(catalog, parse_prompt_ids(ids), default_sequence)
    return resolution.to_dict()
