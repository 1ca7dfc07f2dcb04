"""Prompts module - authored prompt catalog data and model instructions.

Re-exports the raw catalog data and instruction templates:
    from services.prompts import GENDERED_CATALOG, STANDALONE_CATALOG
    from services.prompts import VARIATION_BASE_INSTRUCTION, strip_code_fences
"""

from services.prompts._base import strip_code_fences
from services.prompts.accessories import STANDALONE_CATALOG
from services.prompts.garments import GENDERED_CATALOG
from services.prompts.instructions import (
    DESCRIPTION_INSTRUCTION_HEADER,
    DESCRIPTION_INSTRUCTION_LINES,
    DESCRIPTION_RESPONSE_FORMAT,
    DESCRIPTION_SYSTEM_INSTRUCTION,
    MISSING_IMAGE_NOTE,
    NO_CUES_LINE,
    STYLING_CUES_LINE,
    VARIATION_BASE_INSTRUCTION,
    VARIATION_SYSTEM_INSTRUCTION,
    VARIATION_TEMPLATE,
    VARIATION_USER_SUFFIX,
)

__all__ = [
    # Utilities
    "strip_code_fences",
    # Catalog data
    "GENDERED_CATALOG",
    "STANDALONE_CATALOG",
    # Image variation instructions
    "VARIATION_BASE_INSTRUCTION",
    "VARIATION_TEMPLATE",
    "VARIATION_SYSTEM_INSTRUCTION",
    "VARIATION_USER_SUFFIX",
    # Description instructions
    "DESCRIPTION_SYSTEM_INSTRUCTION",
    "DESCRIPTION_INSTRUCTION_HEADER",
    "DESCRIPTION_INSTRUCTION_LINES",
    "DESCRIPTION_RESPONSE_FORMAT",
    "STYLING_CUES_LINE",
    "NO_CUES_LINE",
    "MISSING_IMAGE_NOTE",
]
