"""Prompt catalog normalization and prompt selection.

Turns the hand-authored nested prompt data in ``services.prompts`` into the
flat, indexed ``Catalog`` and resolves caller-supplied prompt ids against it.
Prompt ids are persisted with saved sessions, so id generation must stay
deterministic: same input, same ids, same order.
"""

import json
import logging
import re
from typing import Any, Iterable, Mapping, Optional

from models.prompt_catalog import (
    Catalog,
    Category,
    CategoryKey,
    Gender,
    PromptGroup,
    PromptResolution,
    PromptScope,
    PromptTemplate,
)

logger = logging.getLogger(__name__)

MAX_DEFAULT_PROMPTS = 5
MAX_DESCRIPTION_LENGTH = 180

# Category whose defaults seed the fallback sequence for empty selections
DEFAULT_SEQUENCE_GENDER = "male"
DEFAULT_SEQUENCE_CATEGORY = "upper"

_TOKEN_SPLIT = re.compile(r"[_\s]+")


class CatalogBuildError(Exception):
    """Raised when the authored prompt data cannot be normalized."""

    pass


def to_title_case(value: str) -> str:
    """Convert ``Snake_or_mixedCase`` names to space separated Title Case.

    >>> to_title_case("Studio_Model_FrontPose")
    'Studio Model Frontpose'
    """
    words = [w for w in _TOKEN_SPLIT.split(value) if w]
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def build_prompt_id(
    scope: PromptScope,
    owner_id: str,
    category_id: str,
    suffix: Optional[str],
    index: int,
) -> str:
    """Build the stable id for a template.

    The serial is the authored suffix, or the 1-based position zero-padded to
    two digits when no suffix was authored.
    """
    serial = suffix or f"{index + 1:02d}"
    if scope == PromptScope.GENDERED:
        return f"{owner_id}-{category_id}-{serial}"
    return f"{category_id}-{serial}"


def create_description(text: Any) -> str:
    """Summarize a prompt as its first sentence, capped at 180 characters."""
    if not text or not isinstance(text, str):
        return ""

    sentences = [segment.strip() for segment in text.split(".")]
    sentences = [s for s in sentences if s]
    if not sentences:
        return text.strip()

    summary = sentences[0]
    if not summary.endswith("."):
        summary += "."

    if len(summary) > MAX_DESCRIPTION_LENGTH:
        return f"{summary[:MAX_DESCRIPTION_LENGTH - 3]}..."
    return summary


def create_title(title: Optional[str], name: Optional[str], category_label: Optional[str]) -> str:
    """Derive a display title, adding the category label when it is missing."""
    if title:
        return title

    base = to_title_case(name) if name else "Prompt"
    if not category_label:
        return base

    normalized_category = category_label.strip().lower()
    if not normalized_category:
        return base

    if normalized_category in base.lower():
        return base
    return f"{base} ({category_label})"


def _require_text(entry: Mapping, key: str, where: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value.strip():
        raise CatalogBuildError(f"Template {where} is missing required field '{key}'")
    return value


def normalize_category(
    scope: PromptScope,
    owner_id: str,
    category_id: str,
    definition: Mapping[str, Any],
    gender_id: Optional[str] = None,
) -> Category:
    """Normalize one authored category into a ``Category``.

    Args:
        scope: Gendered or standalone
        owner_id: Gender id (gendered) or the category id (standalone)
        category_id: Category identifier
        definition: ``{"label", "groups", "default_prompt_suffixes"?}``
        gender_id: Gender attached to each template, None for standalone

    Raises:
        CatalogBuildError: On missing fields or a duplicate id in the category
    """
    authored_label = definition.get("label")
    label = authored_label or category_id
    groups: list[PromptGroup] = []
    prompts: list[PromptTemplate] = []
    seen_ids: set[str] = set()

    for group_label, entries in (definition.get("groups") or {}).items():
        group_prompts = []
        for index, entry in enumerate(entries or []):
            prompt_id = build_prompt_id(scope, owner_id, category_id, entry.get("id_suffix"), index)
            where = f"{prompt_id} ({group_label})"
            name = _require_text(entry, "name", where)
            prompt_text = _require_text(entry, "prompt", where)

            if prompt_id in seen_ids:
                raise CatalogBuildError(f"Duplicate prompt id '{prompt_id}' in category '{category_id}'")
            seen_ids.add(prompt_id)

            record = PromptTemplate(
                id=prompt_id,
                scope=scope,
                owner_id=owner_id,
                category_id=category_id,
                group=group_label,
                name=name,
                title=create_title(entry.get("title"), name, authored_label),
                description=entry.get("description") or create_description(prompt_text),
                prompt=prompt_text,
                order=index,
                gender_id=gender_id,
            )
            group_prompts.append(record)
            prompts.append(record)

        groups.append(PromptGroup(id=group_label, label=group_label, prompts=tuple(group_prompts)))

    authored_defaults = definition.get("default_prompt_suffixes")
    default_ids: list[str] = []
    if isinstance(authored_defaults, (list, tuple)):
        default_ids = [
            build_prompt_id(scope, owner_id, category_id, suffix, index)
            for index, suffix in enumerate(authored_defaults)
        ]
        default_ids = [pid for pid in default_ids if pid in seen_ids]

    if not default_ids:
        default_ids = [p.id for p in prompts[:MAX_DEFAULT_PROMPTS]]

    return Category(
        id=category_id,
        label=label,
        scope=scope,
        owner_id=owner_id,
        groups=tuple(groups),
        prompts=tuple(prompts),
        default_prompt_ids=tuple(default_ids),
    )


def build_catalog(
    gendered_data: Mapping[str, Any],
    standalone_data: Mapping[str, Any],
) -> Catalog:
    """Build the immutable catalog from authored prompt data.

    Args:
        gendered_data: gender id -> ``{"label", "categories": {...}}``
        standalone_data: category id -> category definition

    Returns:
        Catalog with registry and lookup indices

    Raises:
        CatalogBuildError: If an entry is malformed or two entries share an id
    """
    prompts_by_id: dict[str, PromptTemplate] = {}
    category_lookup: dict[CategoryKey, Category] = {}

    def register(category: Category) -> None:
        for prompt in category.prompts:
            if prompt.id in prompts_by_id:
                raise CatalogBuildError(f"Duplicate prompt id '{prompt.id}'")
            prompts_by_id[prompt.id] = prompt
        category_lookup[category.key] = category

    genders = []
    for gender_id, gender_definition in gendered_data.items():
        categories = []
        for category_id, definition in (gender_definition.get("categories") or {}).items():
            category = normalize_category(
                PromptScope.GENDERED, gender_id, category_id, definition, gender_id=gender_id
            )
            register(category)
            categories.append(category)
        genders.append(
            Gender(
                id=gender_id,
                label=gender_definition.get("label") or gender_id,
                categories=tuple(categories),
            )
        )

    standalone = []
    for category_id, definition in standalone_data.items():
        category = normalize_category(PromptScope.STANDALONE, category_id, category_id, definition)
        register(category)
        standalone.append(category)

    logger.debug(
        f"Built prompt catalog: {len(genders)} genders, {len(standalone)} standalone "
        f"categories, {len(prompts_by_id)} prompts"
    )

    return Catalog(
        genders=tuple(genders),
        standalone_categories=tuple(standalone),
        prompts_by_id=prompts_by_id,
        category_lookup=category_lookup,
        gender_lookup={g.id: g for g in genders},
        standalone_lookup={c.id: c for c in standalone},
    )


def default_prompt_sequence(
    catalog: Catalog,
    gender_id: str = DEFAULT_SEQUENCE_GENDER,
    category_id: str = DEFAULT_SEQUENCE_CATEGORY,
) -> tuple[PromptTemplate, ...]:
    """Templates used when a caller selects nothing usable.

    Uses the designated category's defaults, or the first entries of the
    registry when that category is not available.
    """
    category = catalog.get_category(gender_id, category_id)
    if category is not None and category.default_prompt_ids:
        ids = category.default_prompt_ids[:MAX_DEFAULT_PROMPTS]
    else:
        ids = list(catalog.prompts_by_id)[:MAX_DEFAULT_PROMPTS]
    return tuple(catalog.prompts_by_id[pid] for pid in ids if pid in catalog.prompts_by_id)


def resolve_prompt_ids(
    catalog: Catalog,
    ids: Iterable[str],
    default_sequence: Optional[Iterable[PromptTemplate]] = None,
) -> PromptResolution:
    """Resolve prompt ids in caller order.

    Duplicates collapse to their first occurrence and unknown ids are dropped.
    An empty result falls back to the default sequence.
    """
    resolved: list[PromptTemplate] = []
    seen: set[str] = set()

    for prompt_id in ids:
        template = catalog.prompts_by_id.get(prompt_id)
        if template is None or template.id in seen:
            continue
        resolved.append(template)
        seen.add(template.id)

    if resolved:
        return PromptResolution(templates=tuple(resolved), used_default=False)

    if default_sequence is None:
        default_sequence = default_prompt_sequence(catalog)
    return PromptResolution(templates=tuple(default_sequence), used_default=True)


def parse_prompt_ids(raw: Any) -> list[str]:
    """Normalize prompt ids from a form field or JSON body.

    Accepts a list, a JSON array string, or a comma separated string.
    """
    if not raw:
        return []

    if isinstance(raw, (list, tuple)):
        return [str(value) for value in raw if value is not None and str(value)]

    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return [str(value) for value in parsed if value is not None and str(value)]

        return [value.strip() for value in raw.split(",") if value.strip()]

    return []
