"""Generation Service - product variations, description copy and coin charges."""

import asyncio
import logging
import time
import uuid
from typing import Optional, Sequence

from models.generation import (
    DescriptionResult,
    GeneratedVariation,
    GenerationResult,
    GenerationSession,
    ProductDescription,
    VariationRequest,
)
from models.prompt_catalog import PromptTemplate
from services.openrouter_service import (
    OpenRouterService,
    OpenRouterServiceError,
    normalize_base64_payload,
)
from services.prompts import (
    DESCRIPTION_INSTRUCTION_HEADER,
    DESCRIPTION_INSTRUCTION_LINES,
    NO_CUES_LINE,
    STYLING_CUES_LINE,
    VARIATION_BASE_INSTRUCTION,
    VARIATION_TEMPLATE,
)

logger = logging.getLogger(__name__)


class InsufficientCoinsError(Exception):
    """Raised when an account cannot pay for a generation."""

    def __init__(self, required: int, available: int):
        super().__init__(f"Generation needs {required} coin(s) but only {available} available")
        self.required = required
        self.available = available


def build_variation_requests(templates: Sequence[PromptTemplate]) -> list[VariationRequest]:
    """Wrap each template's prompt in the shared variation instruction."""
    return [
        VariationRequest(
            template=template,
            prompt=VARIATION_TEMPLATE.format(
                base=VARIATION_BASE_INSTRUCTION, name=template.name, prompt=template.prompt
            ),
        )
        for template in templates
    ]


def build_description_instruction(templates: Sequence[PromptTemplate]) -> str:
    """Build the copywriting instruction, citing the selected templates as cues."""
    if templates:
        cues = "; ".join(f"{t.group} - {t.name}" for t in templates)
        cue_line = STYLING_CUES_LINE.format(cues=cues)
    else:
        cue_line = NO_CUES_LINE
    return "\n".join([DESCRIPTION_INSTRUCTION_HEADER, cue_line, *DESCRIPTION_INSTRUCTION_LINES])


class GenerationService:
    """Orchestrates model calls for a generation request."""

    def __init__(self, openrouter: OpenRouterService, coins_per_image: int = 1):
        """Initialize the generation service.

        Args:
            openrouter: Configured OpenRouter client
            coins_per_image: Coins charged for each generated variation
        """
        self.openrouter = openrouter
        self.coins_per_image = coins_per_image

    def cost_for(self, templates: Sequence[PromptTemplate]) -> int:
        return self.coins_per_image * len(templates)

    async def generate_variations(
        self,
        templates: Sequence[PromptTemplate],
        image_url: str,
        base64_fallback: Optional[str] = None,
    ) -> GenerationResult:
        """Generate one variation per template, concurrently.

        Any failing variation fails the whole request.

        Raises:
            OpenRouterServiceError: If a model call fails
        """
        requests = build_variation_requests(templates)
        logger.info(f"Generating {len(requests)} variation(s) with {self.openrouter.image_model}")

        start_time = time.time()
        images = await asyncio.gather(
            *[
                self.openrouter.generate_variation(
                    prompt=f"Variation {index}: {request.prompt}",
                    image_url=image_url,
                    base64_fallback=base64_fallback,
                )
                for index, request in enumerate(requests, start=1)
            ]
        )
        generation_time_ms = int((time.time() - start_time) * 1000)

        logger.info(f"Generated {len(images)} variation(s) in {generation_time_ms}ms")

        return GenerationResult(
            source_image=image_url,
            variations=[
                GeneratedVariation(image=image, template=request.template)
                for image, request in zip(images, requests)
            ],
            model=self.openrouter.image_model,
            generation_time_ms=generation_time_ms,
        )

    async def generate_for_account(
        self,
        store,
        account_id: str,
        templates: Sequence[PromptTemplate],
        image_url: str,
        base64_fallback: Optional[str] = None,
    ) -> tuple[GenerationResult, GenerationSession, int]:
        """Charge the account, generate variations and save the session.

        The cost is reserved up front and refunded if generation fails.

        Args:
            store: Connected ``api.store.Store``
            account_id: Account paying for the generation
            templates: Resolved prompt templates
            image_url: Public URL of the uploaded source image
            base64_fallback: Base64 copy of the source image

        Returns:
            Tuple of (result, saved session, remaining coins)

        Raises:
            InsufficientCoinsError: If the balance does not cover the cost
            OpenRouterServiceError: If a model call fails
        """
        cost = self.cost_for(templates)
        remaining = await store.adjust_coins(account_id, -cost)
        if remaining is None:
            account = await store.get_account(account_id)
            raise InsufficientCoinsError(cost, account.coins if account else 0)

        try:
            result = await self.generate_variations(templates, image_url, base64_fallback)
        except Exception:
            await store.adjust_coins(account_id, cost)
            logger.info(f"Refunded {cost} coin(s) to account {account_id} after failed generation")
            raise

        result.coins_charged = cost
        session = GenerationSession.from_result(uuid.uuid4().hex, account_id, result)
        await store.create_session(session)

        return result, session, remaining

    async def describe(
        self,
        reference_image: Optional[str],
        reference_image_fallback: Optional[str],
        templates: Sequence[PromptTemplate],
    ) -> DescriptionResult:
        """Generate three product descriptions for a reference image.

        ``reference_image`` may be a public URL or inline base64 (optionally a
        data URL). ``reference_image_fallback`` is a base64 copy used when the
        model cannot fetch the URL.

        Raises:
            ValueError: If no usable reference image was supplied
            OpenRouterServiceError: On upstream failure or unusable output
        """
        image_url = ""
        if isinstance(reference_image, str) and reference_image.strip().startswith("http"):
            image_url = reference_image.strip()

        if image_url:
            image_base64 = normalize_base64_payload(reference_image_fallback)
        else:
            image_base64 = normalize_base64_payload(reference_image) or normalize_base64_payload(
                reference_image_fallback
            )

        if not image_url and not image_base64:
            raise ValueError("reference_image is required")

        instruction = build_description_instruction(templates)
        parsed, image_attached = await self.openrouter.generate_descriptions(
            instruction, image_url=image_url, image_base64=image_base64
        )

        raw_descriptions = parsed.get("descriptions")
        if not isinstance(raw_descriptions, list):
            raise OpenRouterServiceError("Description output is missing 'descriptions'", status_code=502)

        return DescriptionResult(
            descriptions=[ProductDescription.from_dict(d) for d in raw_descriptions if isinstance(d, dict)],
            model=self.openrouter.description_model,
            image_attached=image_attached,
        )
