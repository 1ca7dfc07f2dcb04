"""Shared pytest fixtures for fitshot tests."""

import sys
from pathlib import Path
from typing import Dict

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


def make_entries(count: int, start: int = 1, with_suffix: bool = True) -> list[dict]:
    """Build ``count`` authored template entries."""
    entries = []
    for number in range(start, start + count):
        entry = {
            "name": f"Sample_Prompt_{number:02d}",
            "prompt": f"Create sample shot number {number}. Keep the background neutral.",
        }
        if with_suffix:
            entry["id_suffix"] = f"{number:02d}"
        entries.append(entry)
    return entries


@pytest.fixture
def sample_gendered_data() -> Dict:
    """Two genders; male/upper has 20 templates in 4 groups of 5."""
    return {
        "male": {
            "label": "Male",
            "categories": {
                "upper": {
                    "label": "Upper Body",
                    "groups": {
                        "Studio Editorials": make_entries(5, start=1),
                        "Lifestyle Editorials": make_entries(5, start=6),
                        "Studio Close-ups": make_entries(5, start=11),
                        "Product Hero Shots": make_entries(5, start=16),
                    },
                },
                "lower": {
                    "label": "Lower Body",
                    "groups": {
                        "Studio Editorials": make_entries(3, with_suffix=False),
                    },
                },
            },
        },
        "female": {
            "label": "Female",
            "categories": {
                "footwear": {
                    "label": "Footwear",
                    "default_prompt_suffixes": ["02", "99", "01"],
                    "groups": {
                        "Studio Presentation": make_entries(4),
                    },
                },
            },
        },
    }


@pytest.fixture
def sample_standalone_data() -> Dict:
    """Two accessory categories, one of them still empty."""
    return {
        "sunglasses": {
            "label": "Sunglasses",
            "groups": {
                "Male Models": make_entries(2),
                "Female Models": make_entries(2, start=3),
            },
        },
        "hats": {
            "label": "Hats",
            "groups": {},
        },
    }


@pytest.fixture
def sample_catalog(sample_gendered_data, sample_standalone_data):
    """Catalog built from the sample data."""
    from services.prompt_catalog import build_catalog

    return build_catalog(sample_gendered_data, sample_standalone_data)
