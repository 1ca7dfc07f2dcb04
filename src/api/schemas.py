"""Pydantic request/response models for the fitshot API."""

from typing import Any

from pydantic import BaseModel, EmailStr, Field

# =============================================================================
# Response Models
# =============================================================================


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class RootResponse(BaseModel):
    """Root endpoint response."""

    message: str
    version: str

    model_config = {"json_schema_extra": {"examples": [{"message": "Fitshot API", "version": "1.0.0"}]}}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    openrouter: dict[str, Any] | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "openrouter": {
                        "configured": True,
                        "image_model": "google/gemini-2.5-flash-image-preview",
                        "description_model": "openai/gpt-5-nano",
                    },
                }
            ]
        }
    }


class PromptSummary(BaseModel):
    """Prompt template metadata (raw prompt text omitted)."""

    id: str
    scope: str
    owner_id: str
    category_id: str
    gender_id: str | None = None
    group: str
    name: str
    title: str
    description: str
    order: int

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "male-upper-01",
                    "scope": "gendered",
                    "owner_id": "male",
                    "category_id": "upper",
                    "gender_id": "male",
                    "group": "Studio Editorials",
                    "name": "Studio_Model_FrontPose",
                    "title": "Studio Model Frontpose (Upper Body)",
                    "description": "Create a premium studio editorial photo showing my garment on a European male model standing front facing with strong posture.",
                    "order": 0,
                }
            ]
        }
    }


class PromptResolutionResponse(BaseModel):
    """Resolved prompt selection."""

    prompts: list[PromptSummary]
    used_default: bool


class SelectionResponse(BaseModel):
    """Prompts offered for a picker selection."""

    gender_id: str | None = None
    category_id: str | None = None
    prompts: list[PromptSummary]


class AccountResponse(BaseModel):
    """Account details."""

    id: str
    email: str
    name: str
    coins: int
    referral_code: str
    referred_by: str | None = None
    referral_count: int = 0
    marketing_opt_in: bool = False
    privacy_accepted_at: str | None = None
    created_at: str | None = None


class GenerationResponse(BaseModel):
    """Result of a variation generation."""

    session_id: str
    images: list[str]
    source_image: str
    prompts: list[PromptSummary]
    used_default: bool
    coins: int
    coins_charged: int


class ProductDescriptionResponse(BaseModel):
    headline: str
    tagline: str
    body: str
    tone: str


class DescriptionResponse(BaseModel):
    """Three generated product descriptions."""

    descriptions: list[ProductDescriptionResponse]
    model: str
    image_attached: bool


class SessionResponse(BaseModel):
    """A saved generation session."""

    id: str
    account_id: str
    source_image: str
    images: list[str]
    prompts: list[PromptSummary]
    coins_charged: int = 0
    created_at: str


class SessionListResponse(BaseModel):
    sessions: list[SessionResponse]


# =============================================================================
# Request Models
# =============================================================================


class AccountCreateRequest(BaseModel):
    """Request body for account registration."""

    email: EmailStr
    name: str | None = Field(default=None, max_length=120)
    accept_privacy: bool = False
    referral_code: str | None = Field(default=None, max_length=32)
    marketing_opt_in: bool = False


class DescriptionRequest(BaseModel):
    """Request body for description generation."""

    reference_image: str | None = Field(
        default=None, description="Public image URL, data URL or raw base64"
    )
    reference_image_fallback: str | None = Field(
        default=None, description="Base64 copy used when the model cannot fetch the URL"
    )
    prompts: list[str] | str | None = Field(
        default=None, description="Prompt ids as a list, JSON array or comma separated string"
    )
