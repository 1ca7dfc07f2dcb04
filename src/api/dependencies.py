"""Service singletons and dependency injection for the fitshot API."""

from fastapi import Depends, Header, HTTPException

from api.store import Store
from models.generation import Account
from models.prompt_catalog import Catalog, PromptTemplate
from services.generation_service import GenerationService
from services.openrouter_service import OpenRouterService
from services.prompt_catalog import build_catalog, default_prompt_sequence
from services.prompts import GENDERED_CATALOG, STANDALONE_CATALOG
from utils.config import load_config

# Service singletons
_catalog: Catalog | None = None
_default_sequence: tuple[PromptTemplate, ...] | None = None
_openrouter_service: OpenRouterService | None = None
_generation_service: GenerationService | None = None
_store: Store | None = None


def get_catalog() -> Catalog:
    """Get the prompt catalog, building it on first use."""
    global _catalog
    if _catalog is None:
        _catalog = build_catalog(GENDERED_CATALOG, STANDALONE_CATALOG)
    return _catalog


def get_default_sequence() -> tuple[PromptTemplate, ...]:
    """Templates used when a request selects no usable prompt ids."""
    global _default_sequence
    if _default_sequence is None:
        _default_sequence = default_prompt_sequence(get_catalog())
    return _default_sequence


def get_openrouter_service() -> OpenRouterService:
    """Get or create the OpenRouter client."""
    global _openrouter_service
    if _openrouter_service is None:
        config = load_config()
        _openrouter_service = OpenRouterService(
            api_key=config.get("openrouter_api_key", ""),
            base_url=config["openrouter_base_url"],
            site_url=config.get("openrouter_site_url"),
            site_name=config.get("openrouter_site_name"),
            image_model=config["image_model"],
            description_model=config["description_model"],
            timeout=config["openrouter_timeout"],
        )
    return _openrouter_service


def get_generation_service() -> GenerationService:
    """Get or create the generation service."""
    global _generation_service
    if _generation_service is None:
        config = load_config()
        _generation_service = GenerationService(
            openrouter=get_openrouter_service(),
            coins_per_image=config["coins_per_image"],
        )
    return _generation_service


async def get_store() -> Store:
    """Get or create the store, connecting on first use."""
    global _store
    if _store is None:
        config = load_config()
        store = Store(
            db_path=config["database_path"],
            starting_coins=config["starting_coins"],
            referral_bonus_coins=config["referral_bonus_coins"],
            referrer_reward_coins=config["referrer_reward_coins"],
        )
        await store.connect()
        _store = store
    return _store


async def close_services() -> None:
    """Close network clients and the database. Call on application shutdown."""
    global _store, _openrouter_service, _generation_service
    if _store is not None:
        await _store.close()
        _store = None
    if _openrouter_service is not None:
        await _openrouter_service.close()
        _openrouter_service = None
        _generation_service = None


async def get_current_account(
    x_account_id: str | None = Header(default=None),
    store: Store = Depends(get_store),
) -> Account:
    """Resolve the calling account from the ``X-Account-Id`` header."""
    if not x_account_id:
        raise HTTPException(status_code=401, detail="Authentication required.")
    account = await store.get_account(x_account_id)
    if account is None:
        raise HTTPException(status_code=401, detail="Authentication required.")
    return account
