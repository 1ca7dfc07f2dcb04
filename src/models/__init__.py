# Data models for fitshot
from .prompt_catalog import (
    Catalog,
    Category,
    CategoryKey,
    Gender,
    PromptGroup,
    PromptResolution,
    PromptScope,
    PromptTemplate,
)
from .generation import (
    Account,
    DescriptionResult,
    GeneratedVariation,
    GenerationResult,
    GenerationSession,
    ProductDescription,
    VariationRequest,
)

__all__ = [
    # Prompt catalog
    "Catalog",
    "Category",
    "CategoryKey",
    "Gender",
    "PromptGroup",
    "PromptResolution",
    "PromptScope",
    "PromptTemplate",
    # Generation
    "Account",
    "DescriptionResult",
    "GeneratedVariation",
    "GenerationResult",
    "GenerationSession",
    "ProductDescription",
    "VariationRequest",
]
