"""Models for the prompt catalog (templates, groups, categories, genders)."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional


class PromptScope(str, Enum):
    """Whether a category sits under a gender or stands on its own."""

    GENDERED = "gendered"
    STANDALONE = "standalone"


class CategoryKey(NamedTuple):
    """Composite lookup key for a category.

    For gendered categories ``owner_id`` is the gender id; for standalone
    categories it is the category id itself.
    """

    scope: PromptScope
    owner_id: str
    category_id: str


@dataclass(frozen=True)
class PromptTemplate:
    """A single generation directive belonging to a group within a category."""

    id: str
    scope: PromptScope
    owner_id: str
    category_id: str
    group: str
    name: str
    title: str
    description: str
    prompt: str
    order: int
    gender_id: Optional[str] = None

    def to_dict(self, include_prompt: bool = True) -> dict:
        """Convert to dictionary for API responses.

        Args:
            include_prompt: Include the raw prompt text. Public listings and
                generation provenance leave it out.
        """
        result = {
            "id": self.id,
            "scope": self.scope.value,
            "owner_id": self.owner_id,
            "category_id": self.category_id,
            "gender_id": self.gender_id,
            "group": self.group,
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "order": self.order,
        }
        if include_prompt:
            result["prompt"] = self.prompt
        return result


@dataclass(frozen=True)
class PromptGroup:
    """Authored sub-partition of a category, used for display ordering."""

    id: str
    label: str
    prompts: tuple[PromptTemplate, ...] = ()

    def to_dict(self, include_prompt: bool = False) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "prompts": [p.to_dict(include_prompt=include_prompt) for p in self.prompts],
        }


@dataclass(frozen=True)
class Category:
    """A named collection of templates for one body region or accessory type."""

    id: str
    label: str
    scope: PromptScope
    owner_id: str
    groups: tuple[PromptGroup, ...] = ()
    prompts: tuple[PromptTemplate, ...] = ()
    default_prompt_ids: tuple[str, ...] = ()

    @property
    def has_prompts(self) -> bool:
        """True when the category holds at least one template."""
        return len(self.prompts) > 0

    @property
    def key(self) -> CategoryKey:
        return CategoryKey(self.scope, self.owner_id, self.id)

    def to_dict(self, include_prompt: bool = False) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "label": self.label,
            "scope": self.scope.value,
            "owner_id": self.owner_id,
            "has_prompts": self.has_prompts,
            "default_prompt_ids": list(self.default_prompt_ids),
            "groups": [g.to_dict(include_prompt=include_prompt) for g in self.groups],
        }


@dataclass(frozen=True)
class Gender:
    """Top-level grouping of gendered categories."""

    id: str
    label: str
    categories: tuple[Category, ...] = ()

    def to_dict(self, include_prompt: bool = False) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "categories": [c.to_dict(include_prompt=include_prompt) for c in self.categories],
        }


def _frozen(mapping: Optional[Mapping]) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Catalog:
    """The normalized, read-only prompt catalog.

    Built once at startup by ``services.prompt_catalog.build_catalog`` and
    shared by every request. All lookups return ``None`` (or an empty tuple)
    on a miss; absence is an expected outcome, not an error.
    """

    genders: tuple[Gender, ...] = ()
    standalone_categories: tuple[Category, ...] = ()
    prompts_by_id: Mapping[str, PromptTemplate] = field(default_factory=dict)
    category_lookup: Mapping[CategoryKey, Category] = field(default_factory=dict)
    gender_lookup: Mapping[str, Gender] = field(default_factory=dict)
    standalone_lookup: Mapping[str, Category] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the indices so callers cannot mutate the shared catalog.
        object.__setattr__(self, "prompts_by_id", _frozen(self.prompts_by_id))
        object.__setattr__(self, "category_lookup", _frozen(self.category_lookup))
        object.__setattr__(self, "gender_lookup", _frozen(self.gender_lookup))
        object.__setattr__(self, "standalone_lookup", _frozen(self.standalone_lookup))

    def get_gender(self, gender_id: Optional[str]) -> Optional[Gender]:
        if not gender_id:
            return None
        return self.gender_lookup.get(gender_id)

    def get_category(self, gender_id: Optional[str], category_id: Optional[str]) -> Optional[Category]:
        """Look up a gendered category. Returns None without a gender id."""
        if not gender_id or not category_id:
            return None
        return self.category_lookup.get(CategoryKey(PromptScope.GENDERED, gender_id, category_id))

    def get_standalone_category(self, category_id: Optional[str]) -> Optional[Category]:
        """Look up a standalone (accessory) category."""
        if not category_id:
            return None
        return self.standalone_lookup.get(category_id)

    def get_prompt(self, prompt_id: str) -> Optional[PromptTemplate]:
        return self.prompts_by_id.get(prompt_id)

    def prompts_for_selection(
        self, gender_id: Optional[str], category_id: Optional[str]
    ) -> tuple[PromptTemplate, ...]:
        """Return the templates a picker should offer for a selection.

        Standalone categories resolve without a gender. Gendered categories
        need both ids. Unknown selections yield an empty tuple.
        """
        if not category_id:
            return ()

        standalone = self.get_standalone_category(category_id)
        if standalone is not None:
            return standalone.prompts

        category = self.get_category(gender_id, category_id)
        return category.prompts if category else ()

    def to_dict(self, include_prompt: bool = False) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "genders": [g.to_dict(include_prompt=include_prompt) for g in self.genders],
            "standalone_categories": [
                c.to_dict(include_prompt=include_prompt) for c in self.standalone_categories
            ],
            "prompt_count": len(self.prompts_by_id),
        }


@dataclass(frozen=True)
class PromptResolution:
    """Outcome of resolving caller-supplied prompt ids."""

    templates: tuple[PromptTemplate, ...]
    used_default: bool = False

    @property
    def ids(self) -> list[str]:
        return [t.id for t in self.templates]

    def to_dict(self) -> dict:
        return {
            "prompts": [t.to_dict(include_prompt=False) for t in self.templates],
            "used_default": self.used_default,
        }
