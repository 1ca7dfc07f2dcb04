"""Configuration loading and validation for fitshot."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Get the project root directory (parent of src)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load environment variables from .env file in project root
load_dotenv(PROJECT_ROOT / ".env")


def load_config() -> dict:
    """Load configuration from environment variables."""

    # Helper function to resolve paths relative to project root
    def resolve_path(path: str | None, default_relative: str) -> str:
        if not path:
            return str(PROJECT_ROOT / default_relative)
        if Path(path).is_absolute():
            return path
        return str(PROJECT_ROOT / path)

    config = {
        # OpenRouter
        "openrouter_api_key": os.getenv("OPENROUTER_API_KEY", ""),
        "openrouter_base_url": os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1"),
        "openrouter_site_url": os.getenv("OPENROUTER_SITE_URL"),
        "openrouter_site_name": os.getenv("OPENROUTER_SITE_NAME"),
        "openrouter_timeout": float(os.getenv("OPENROUTER_TIMEOUT_SECONDS", "120")),
        # Models
        "image_model": os.getenv("IMAGE_MODEL", "google/gemini-2.5-flash-image-preview"),
        "description_model": os.getenv("DESCRIPTION_MODEL", "openai/gpt-5-nano"),
        # Server
        "port": int(os.getenv("PORT", "5000")),
        "client_origin": os.getenv("CLIENT_ORIGIN", "*"),
        "public_asset_base_url": os.getenv("PUBLIC_ASSET_BASE_URL"),
        # Uploads
        "upload_dir": resolve_path(os.getenv("UPLOAD_DIR"), "uploads"),
        "max_upload_mb": int(os.getenv("MAX_UPLOAD_MB", "10")),
        # Storage
        "database_path": resolve_path(os.getenv("DATABASE_PATH"), ".fitshot/fitshot.db"),
        # Coins
        "starting_coins": int(os.getenv("STARTING_COINS", "2")),
        "referral_bonus_coins": int(os.getenv("REFERRAL_BONUS_COINS", "2")),
        "referrer_reward_coins": int(os.getenv("REFERRER_REWARD_COINS", "4")),
        "coins_per_image": int(os.getenv("COINS_PER_IMAGE", "1")),
        # Logging
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "log_json": os.getenv("LOG_JSON", "false").lower() == "true",
    }

    return config


def validate_config(config: dict) -> list[str]:
    """Validate configuration and return list of errors."""
    errors = []

    if not config.get("openrouter_api_key"):
        errors.append("OPENROUTER_API_KEY is not set. API routes will fail until configured.")

    if config.get("max_upload_mb", 0) <= 0:
        errors.append("MAX_UPLOAD_MB must be positive")

    if config.get("coins_per_image", 0) < 0:
        errors.append("COINS_PER_IMAGE cannot be negative")

    for key in ("starting_coins", "referral_bonus_coins", "referrer_reward_coins"):
        if config.get(key, 0) < 0:
            errors.append(f"{key.upper()} cannot be negative")

    if config.get("upload_dir"):
        try:
            Path(config["upload_dir"]).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            errors.append(f"Cannot create upload folder: {e}")

    return errors


def get_supported_image_formats() -> list[str]:
    """Return list of accepted upload image extensions."""
    return [".png", ".jpg", ".jpeg", ".webp", ".gif", ".heic"]
