"""Shared helpers for prompt modules."""

import re

_FENCE_OPEN = re.compile(r"^```[a-zA-Z0-9_-]*\s*")
_FENCE_CLOSE = re.compile(r"\s*```$")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence from model output.

    Models asked for JSON sometimes wrap it in ```json ... ``` even when a
    response format is requested.

    Args:
        text: Raw model text

    Returns:
        Text without the opening and closing fence
    """
    text = text.strip()
    text = _FENCE_OPEN.sub("", text, count=1)
    text = _FENCE_CLOSE.sub("", text, count=1)
    return text.strip()
