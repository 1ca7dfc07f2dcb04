"""Models for product image variations and description copy."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from models.prompt_catalog import PromptTemplate


@dataclass
class VariationRequest:
    """One variation to request from the image model."""

    template: PromptTemplate
    prompt: str


@dataclass
class GeneratedVariation:
    """A single generated variation and the template that produced it."""

    image: str  # URL or data:image/png;base64,...
    template: PromptTemplate


@dataclass
class GenerationResult:
    """Result of a variation generation request."""

    source_image: str
    variations: list[GeneratedVariation]
    model: str
    generation_time_ms: int
    coins_charged: int = 0

    @property
    def images(self) -> list[str]:
        return [v.image for v in self.variations]

    @property
    def templates(self) -> list[PromptTemplate]:
        return [v.template for v in self.variations]

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "images": self.images,
            "source_image": self.source_image,
            "prompts": [t.to_dict(include_prompt=False) for t in self.templates],
            "model": self.model,
            "generation_time_ms": self.generation_time_ms,
            "coins_charged": self.coins_charged,
        }


@dataclass
class ProductDescription:
    """One e-commerce description returned by the copy model."""

    headline: str
    tagline: str
    body: str
    tone: str

    @classmethod
    def from_dict(cls, data: dict) -> "ProductDescription":
        return cls(
            headline=str(data.get("headline", "")),
            tagline=str(data.get("tagline", "")),
            body=str(data.get("body", "")),
            tone=str(data.get("tone", "")),
        )

    def to_dict(self) -> dict:
        return {
            "headline": self.headline,
            "tagline": self.tagline,
            "body": self.body,
            "tone": self.tone,
        }


@dataclass
class DescriptionResult:
    """Result of a description generation request."""

    descriptions: list[ProductDescription]
    model: str
    image_attached: bool = True

    def to_dict(self) -> dict:
        return {
            "descriptions": [d.to_dict() for d in self.descriptions],
            "model": self.model,
            "image_attached": self.image_attached,
        }


@dataclass
class GenerationSession:
    """A saved generation, listed again from the account's history."""

    id: str
    account_id: str
    source_image: str
    images: list[str]
    prompts: list[dict]
    coins_charged: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_result(cls, session_id: str, account_id: str, result: GenerationResult) -> "GenerationSession":
        return cls(
            id=session_id,
            account_id=account_id,
            source_image=result.source_image,
            images=result.images,
            prompts=[t.to_dict(include_prompt=False) for t in result.templates],
            coins_charged=result.coins_charged,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses and storage."""
        return {
            "id": self.id,
            "account_id": self.account_id,
            "source_image": self.source_image,
            "images": self.images,
            "prompts": self.prompts,
            "coins_charged": self.coins_charged,
            "created_at": self.created_at.isoformat(),
        }


@dataclass
class Account:
    """A user account with its coin balance."""

    id: str
    email: str
    name: str
    coins: int
    referral_code: str
    referred_by: Optional[str] = None
    referral_count: int = 0
    marketing_opt_in: bool = False
    privacy_accepted_at: Optional[str] = None
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "coins": self.coins,
            "referral_code": self.referral_code,
            "referred_by": self.referred_by,
            "referral_count": self.referral_count,
            "marketing_opt_in": self.marketing_opt_in,
            "privacy_accepted_at": self.privacy_accepted_at,
            "created_at": self.created_at,
        }
