"""Unit tests for prompt catalog normalization."""

import copy

import pytest

from models.prompt_catalog import CategoryKey, PromptScope
from services.prompt_catalog import (
    MAX_DEFAULT_PROMPTS,
    CatalogBuildError,
    build_catalog,
    build_prompt_id,
    create_description,
    create_title,
    to_title_case,
)
from services.prompts import GENDERED_CATALOG, STANDALONE_CATALOG

pytestmark = pytest.mark.unit


class TestHelpers:
    """Tests for id, title and description derivation."""

    def test_to_title_case(self):
        assert to_title_case("Studio_Model_FrontPose") == "Studio Model Frontpose"
        assert to_title_case("  detail__camera cutout ") == "Detail Camera Cutout"
        assert to_title_case("") == ""

    def test_gendered_id_uses_owner_and_category(self):
        assert build_prompt_id(PromptScope.GENDERED, "male", "upper", "07", 0) == "male-upper-07"

    def test_standalone_id_omits_owner(self):
        assert build_prompt_id(PromptScope.STANDALONE, "hats", "hats", "03", 0) == "hats-03"

    def test_positional_serial_is_zero_padded(self):
        assert build_prompt_id(PromptScope.GENDERED, "female", "lower", None, 0) == "female-lower-01"
        assert build_prompt_id(PromptScope.STANDALONE, "rings", "rings", "", 11) == "rings-12"

    def test_title_appends_category_label(self):
        title = create_title(None, "Studio_Model_FrontPose", "Upper Body")
        assert title == "Studio Model Frontpose (Upper Body)"

    def test_title_skips_label_already_present(self):
        assert create_title(None, "Upper_Body_Closeup", "Upper Body") == "Upper Body Closeup"
        assert create_title(None, "Footwear_SideProfile", "footwear") == "Footwear Sideprofile"

    def test_authored_title_is_verbatim(self):
        assert create_title("Hero Shot", "Ignored_Name", "Bags") == "Hero Shot"

    def test_title_without_name(self):
        assert create_title(None, None, "Hats") == "Prompt (Hats)"
        assert create_title(None, "Plain", "  ") == "Plain"

    def test_description_first_sentence(self):
        text = "Create a studio shot of my bag.  Background is grey. No text."
        assert create_description(text) == "Create a studio shot of my bag."

    def test_description_truncates_to_180_characters(self):
        long_sentence = "Create " + "a" * 300 + ". Second sentence."
        description = create_description(long_sentence)
        assert len(description) == 180
        assert description.endswith("...")
        assert description[:177] == long_sentence[:177]

    def test_description_of_exactly_180_is_kept(self):
        sentence = "x" * 179 + "."
        assert create_description(sentence) == sentence

    def test_description_edge_inputs(self):
        assert create_description("") == ""
        assert create_description(None) == ""
        assert create_description(42) == ""
        assert create_description(" ... ") == "..."
        assert create_description("No period here") == "No period here."


class TestBuildCatalog:
    """Tests for build_catalog()."""

    def test_structure_preserves_authored_order(self, sample_catalog):
        assert [g.id for g in sample_catalog.genders] == ["male", "female"]
        male = sample_catalog.genders[0]
        assert [c.id for c in male.categories] == ["upper", "lower"]
        upper = male.categories[0]
        assert [g.label for g in upper.groups] == [
            "Studio Editorials",
            "Lifestyle Editorials",
            "Studio Close-ups",
            "Product Hero Shots",
        ]
        assert [s.id for s in sample_catalog.standalone_categories] == ["sunglasses", "hats"]

    def test_template_fields(self, sample_catalog):
        template = sample_catalog.prompts_by_id["male-upper-06"]
        assert template.scope == PromptScope.GENDERED
        assert template.owner_id == "male"
        assert template.category_id == "upper"
        assert template.gender_id == "male"
        assert template.group == "Lifestyle Editorials"
        assert template.order == 0
        assert template.title == "Sample Prompt 06 (Upper Body)"
        assert template.description == "Create sample shot number 6."

        accessory = sample_catalog.prompts_by_id["sunglasses-03"]
        assert accessory.scope == PromptScope.STANDALONE
        assert accessory.owner_id == "sunglasses"
        assert accessory.gender_id is None
        assert accessory.order == 0

    def test_determinism(self, sample_gendered_data, sample_standalone_data):
        first = build_catalog(sample_gendered_data, sample_standalone_data)
        second = build_catalog(sample_gendered_data, sample_standalone_data)

        assert list(first.prompts_by_id) == list(second.prompts_by_id)
        assert dict(first.prompts_by_id) == dict(second.prompts_by_id)
        for gender_a, gender_b in zip(first.genders, second.genders):
            for cat_a, cat_b in zip(gender_a.categories, gender_b.categories):
                for group_a, group_b in zip(cat_a.groups, cat_b.groups):
                    assert [p.id for p in group_a.prompts] == [p.id for p in group_b.prompts]

    def test_input_is_not_mutated(self, sample_gendered_data, sample_standalone_data):
        gendered_before = copy.deepcopy(sample_gendered_data)
        standalone_before = copy.deepcopy(sample_standalone_data)

        build_catalog(sample_gendered_data, sample_standalone_data)

        assert sample_gendered_data == gendered_before
        assert sample_standalone_data == standalone_before

    def test_completeness(self, sample_gendered_data, sample_standalone_data, sample_catalog):
        authored = 0
        for gender in sample_gendered_data.values():
            for category in gender["categories"].values():
                authored += sum(len(entries) for entries in category["groups"].values())
        for category in sample_standalone_data.values():
            authored += sum(len(entries) for entries in category["groups"].values())

        flat = [p for g in sample_catalog.genders for c in g.categories for p in c.prompts]
        flat += [p for c in sample_catalog.standalone_categories for p in c.prompts]

        assert len(flat) == authored
        assert len({p.id for p in flat}) == authored
        assert len(sample_catalog.prompts_by_id) == authored

    def test_flat_prompts_concatenate_groups(self, sample_catalog):
        upper = sample_catalog.get_category("male", "upper")
        from_groups = [p.id for group in upper.groups for p in group.prompts]
        assert [p.id for p in upper.prompts] == from_groups

    def test_default_ids_are_first_group_for_four_groups_of_five(self, sample_catalog):
        upper = sample_catalog.get_category("male", "upper")
        assert len(upper.prompts) == 20
        assert list(upper.default_prompt_ids) == [p.id for p in upper.groups[0].prompts]
        assert len(upper.default_prompt_ids) == MAX_DEFAULT_PROMPTS

    def test_default_ids_for_small_category(self, sample_catalog):
        lower = sample_catalog.get_category("male", "lower")
        assert list(lower.default_prompt_ids) == ["male-lower-01", "male-lower-02", "male-lower-03"]

    def test_authored_default_suffixes_are_filtered(self, sample_catalog):
        footwear = sample_catalog.get_category("female", "footwear")
        assert list(footwear.default_prompt_ids) == ["female-footwear-02", "female-footwear-01"]

    def test_authored_default_suffixes_without_match_fall_back(self, sample_gendered_data):
        sample_gendered_data["female"]["categories"]["footwear"]["default_prompt_suffixes"] = ["98", "99"]
        catalog = build_catalog(sample_gendered_data, {})
        footwear = catalog.get_category("female", "footwear")
        assert list(footwear.default_prompt_ids) == [p.id for p in footwear.prompts[:4]]

    def test_empty_category(self, sample_catalog):
        hats = sample_catalog.get_standalone_category("hats")
        assert hats is not None
        assert hats.has_prompts is False
        assert hats.prompts == ()
        assert hats.default_prompt_ids == ()

    def test_duplicate_suffix_in_category_fails_build(self, sample_gendered_data):
        groups = sample_gendered_data["male"]["categories"]["upper"]["groups"]
        groups["Product Hero Shots"][0]["id_suffix"] = "01"

        with pytest.raises(CatalogBuildError, match="male-upper-01"):
            build_catalog(sample_gendered_data, {})

    def test_duplicate_positional_ids_across_groups_fail_build(self):
        data = {
            "male": {
                "label": "Male",
                "categories": {
                    "upper": {
                        "label": "Upper Body",
                        "groups": {
                            "A": [{"name": "One", "prompt": "First."}],
                            "B": [{"name": "Two", "prompt": "Second."}],
                        },
                    }
                },
            }
        }
        with pytest.raises(CatalogBuildError, match="Duplicate prompt id"):
            build_catalog(data, {})

    def test_missing_prompt_fails_build(self):
        data = {"bags": {"label": "Bags", "groups": {"Studio": [{"name": "Hero"}]}}}
        with pytest.raises(CatalogBuildError, match="prompt"):
            build_catalog({}, data)

    def test_missing_name_fails_build(self):
        data = {"bags": {"label": "Bags", "groups": {"Studio": [{"prompt": "Shot."}]}}}
        with pytest.raises(CatalogBuildError, match="name"):
            build_catalog({}, data)

    def test_unlabelled_category_titles_have_no_suffix(self):
        data = {"totes": {"groups": {"Studio": [{"name": "Tote_Hero", "prompt": "Shot of my tote."}]}}}

        catalog = build_catalog({}, data)

        assert catalog.prompts_by_id["totes-01"].title == "Tote Hero"
        assert catalog.get_standalone_category("totes").label == "totes"

    def test_authored_title_and_description(self):
        data = {
            "bags": {
                "label": "Bags",
                "groups": {
                    "Studio": [
                        {
                            "name": "Hero",
                            "title": "Bag hero",
                            "description": "A custom summary",
                            "prompt": "Shot of my bag.",
                        }
                    ]
                },
            }
        }
        template = build_catalog({}, data).prompts_by_id["bags-01"]
        assert template.title == "Bag hero"
        assert template.description == "A custom summary"


class TestCatalogLookups:
    """Tests for Catalog lookups and immutability."""

    def test_category_lookup_uses_structured_keys(self, sample_catalog):
        key = CategoryKey(PromptScope.GENDERED, "male", "upper")
        assert sample_catalog.category_lookup[key] is sample_catalog.get_category("male", "upper")

        standalone_key = CategoryKey(PromptScope.STANDALONE, "sunglasses", "sunglasses")
        assert sample_catalog.category_lookup[standalone_key].label == "Sunglasses"

    def test_lookup_misses_return_none(self, sample_catalog):
        assert sample_catalog.get_category("male", "footwear") is None
        assert sample_catalog.get_category("", "upper") is None
        assert sample_catalog.get_category(None, "upper") is None
        assert sample_catalog.get_standalone_category("phoneCases") is None
        assert sample_catalog.get_gender("other") is None
        assert sample_catalog.get_prompt("male-upper-99") is None

    def test_prompts_for_selection(self, sample_catalog):
        upper = sample_catalog.prompts_for_selection("male", "upper")
        assert len(upper) == 20
        assert sample_catalog.prompts_for_selection(None, "upper") == ()
        assert sample_catalog.prompts_for_selection("male", None) == ()
        assert sample_catalog.prompts_for_selection("male", "unknown") == ()

    def test_standalone_selection_is_uniform(self, sample_catalog):
        sunglasses = sample_catalog.prompts_for_selection(None, "sunglasses")
        assert [p.id for p in sunglasses] == ["sunglasses-01", "sunglasses-02", "sunglasses-03", "sunglasses-04"]
        # Any standalone category resolves, not only sunglasses
        assert sample_catalog.prompts_for_selection("female", "hats") == ()
        assert sample_catalog.get_standalone_category("hats") is not None

    def test_indices_are_read_only(self, sample_catalog):
        with pytest.raises(TypeError):
            sample_catalog.prompts_by_id["new"] = None
        with pytest.raises(TypeError):
            sample_catalog.standalone_lookup["new"] = None

    def test_templates_are_frozen(self, sample_catalog):
        template = sample_catalog.prompts_by_id["male-upper-01"]
        with pytest.raises(AttributeError):
            template.prompt = "changed"

    def test_to_dict_hides_prompt_text(self, sample_catalog):
        data = sample_catalog.to_dict()
        first = data["genders"][0]["categories"][0]["groups"][0]["prompts"][0]
        assert "prompt" not in first
        assert first["id"] == "male-upper-01"
        assert data["prompt_count"] == len(sample_catalog.prompts_by_id)


class TestAuthoredCatalog:
    """Sanity checks on the shipped prompt data."""

    @pytest.fixture(scope="class")
    def catalog(self):
        return build_catalog(GENDERED_CATALOG, STANDALONE_CATALOG)

    def test_builds_without_duplicates(self, catalog):
        assert len(catalog.prompts_by_id) == 205

    def test_gendered_regions(self, catalog):
        for gender in catalog.genders:
            assert [c.id for c in gender.categories] == ["upper", "lower", "footwear"]
            for category in gender.categories:
                assert category.has_prompts
                assert len(category.default_prompt_ids) == MAX_DEFAULT_PROMPTS

    def test_standalone_categories(self, catalog):
        assert [c.id for c in catalog.standalone_categories] == [
            "sunglasses",
            "phoneCases",
            "hats",
            "earrings",
            "necklaces",
            "rings",
            "bracelets",
            "bags",
        ]

    def test_known_ids_are_stable(self, catalog):
        template = catalog.prompts_by_id["male-upper-01"]
        assert template.name == "Studio_Model_FrontPose"
        assert template.title == "Studio Model Frontpose (Upper Body)"

    def test_phone_case_ids_keep_authored_key(self, catalog):
        phone_cases = catalog.get_standalone_category("phoneCases")
        assert phone_cases.prompts[0].id == "phoneCases-01"
        assert all(p.id.startswith("phoneCases-") for p in phone_cases.prompts)
        assert "phone_cases-01" not in catalog.prompts_by_id
        assert catalog.prompts_for_selection(None, "phoneCases") == phone_cases.prompts

    def test_descriptions_are_bounded(self, catalog):
        for template in catalog.prompts_by_id.values():
            assert 0 < len(template.description) <= 180
