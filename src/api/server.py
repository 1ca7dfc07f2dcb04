#!/usr/bin/env python
"""FastAPI server for the fitshot web client."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

# Add src directory to Python path for imports
src_dir = Path(__file__).parent.parent
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.dependencies import close_services, get_catalog, get_default_sequence, get_store
from api.routers import accounts, catalog, core, generation, sessions
from utils.config import load_config, validate_config
from utils.logging import setup_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the catalog and open the store before serving requests."""
    config = load_config()
    for problem in validate_config(config):
        logger.warning("config_problem", detail=problem)

    prompt_catalog = get_catalog()
    get_default_sequence()
    await get_store()
    logger.info(
        "startup_complete",
        prompts=len(prompt_catalog.prompts_by_id),
        genders=len(prompt_catalog.genders),
        standalone_categories=len(prompt_catalog.standalone_categories),
    )

    yield

    await close_services()
    logger.info("shutdown_complete")


def create_app(config: dict | None = None) -> FastAPI:
    """Create the FastAPI application."""
    config = config or load_config()

    app = FastAPI(title="Fitshot API", version=core.API_VERSION, lifespan=lifespan)

    origin = config.get("client_origin") or "*"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in origin.split(",") if o.strip()],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(core.router)
    app.include_router(catalog.router)
    app.include_router(accounts.router)
    app.include_router(generation.router)
    app.include_router(sessions.router)

    upload_dir = Path(config["upload_dir"])
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")

    return app


_config = load_config()
setup_logging(_config["log_level"], json_output=_config["log_json"])
app = create_app(_config)
