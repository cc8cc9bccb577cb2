"""Tests for the default variable registry."""

from pathlib import Path

import pytest

from buildstate.variables import (
    AttributeValue,
    DefaultRegistryError,
    ProficiencyRank,
    ProficiencyValue,
    VariableStore,
    VariableType,
    load_default_registry,
)
from buildstate.variables.defaults import DEFAULT_REGISTRY_PATH


class TestPackagedRegistry:
    """Tests for the registry shipped with the package."""

    def test_packaged_file_exists(self):
        assert DEFAULT_REGISTRY_PATH.exists()

    def test_registry_is_cached_and_read_only(self):
        registry = load_default_registry()
        assert load_default_registry() is registry
        with pytest.raises(TypeError):
            registry["LEVEL"] = registry["SPEED"]  # type: ignore[index]

    def test_attributes_start_at_zero(self):
        registry = load_default_registry()
        assert registry["ATTRIBUTE_STR"].type == VariableType.ATTR
        assert registry["ATTRIBUTE_STR"].value == AttributeValue(score=0, partial=False)

    def test_linked_proficiencies(self):
        registry = load_default_registry()
        assert registry["SAVE_FORT"].value == ProficiencyValue(
            rank=ProficiencyRank.UNTRAINED, attribute="ATTRIBUTE_CON"
        )
        assert registry["SKILL_ATHLETICS"].value.attribute == "ATTRIBUTE_STR"
        assert registry["PERCEPTION"].value.attribute == "ATTRIBUTE_WIS"
        assert registry["CLASS_DC"].value == ProficiencyValue()

    def test_seeded_values(self):
        registry = load_default_registry()
        assert registry["SENSES_PRECISE"].value == ("NORMAL_VISION",)
        assert registry["SENSES_IMPRECISE"].value == ("HEARING",)
        assert registry["SENSES_VAGUE"].value == ("SMELL",)
        assert registry["PAGE_CONTEXT"].value == "OUTSIDE"
        assert registry["UNARMORED"].value is False
        assert registry["PRIMARY_BUILDER_TABS"].value == (
            "skills-actions",
            "inventory",
            "feats-features",
            "details",
            "notes",
        )

    def test_names_match_keys(self):
        for name, variable in load_default_registry().items():
            assert variable.name == name


class TestCustomRegistry:
    """Tests for loading a registry from another file."""

    def write(self, tmp_path: Path, text: str) -> Path:
        path = tmp_path / "registry.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_custom_registry_seeds_store(self, tmp_path: Path, settings):
        path = self.write(
            tmp_path,
            "variables:\n  HERO_POINTS: {type: num, value: 1}\n  NOTES: {type: str}\n",
        )
        settings = settings.model_copy(update={"default_registry_path": path})
        store = VariableStore("CHARACTER", settings=settings)
        assert store.get_variable("HERO_POINTS").value == 1
        assert store.get_variable("LEVEL") is None
        assert len(store) == 2

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "other: {}\n",
            "variables: [1, 2]\n",
            "variables:\n  LEVEL: {value: 1}\n",
            "variables:\n  LEVEL: {type: num, value: high}\n",
            "variables:\n  LEVEL: {type: decimal}\n",
            "variables: {LEVEL: [unclosed\n",
            "variables\n",
            "- variables\n",
        ],
    )
    def test_malformed_registry(self, tmp_path: Path, text: str):
        with pytest.raises(DefaultRegistryError):
            load_default_registry(self.write(tmp_path, text))

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(DefaultRegistryError):
            load_default_registry(tmp_path / "missing.yaml")
