"""Tests for the skillsets.yaml expander."""
import pytest

from ccskill.core.errors import (
    ConfigError,
    ConfigInvalidError,
    ConfigMissingError,
    SetNotFoundError,
)
from ccskill.core.skillsets import expand, load_skillsets


class TestLoadSkillsets:
    """Test load_skillsets()."""

    def test_load_sets(self, tmp_path, sample_skillsets_yaml):
        """Test loading block and flow style sets."""
        # Given: a skillsets.yaml
        config = tmp_path / "skillsets.yaml"
        config.write_text(sample_skillsets_yaml)

        # When: we load it
        skillsets = load_skillsets(config)

        # Then: sets should be parsed in document order
        assert list(skillsets) == ["writing", "partial", "empty"]
        assert skillsets["writing"] == ["skill-c", "skill-a", "skill-b"]
        assert skillsets["partial"] == ["skill-a", "missing-skill", "skill-c"]
        assert skillsets["empty"] == []

    def test_load_json_document(self, tmp_path):
        """Test that a JSON document is accepted."""
        config = tmp_path / "skillsets.yaml"
        config.write_text('{"dev": ["z", "a", "m"]}')

        assert load_skillsets(config) == {"dev": ["z", "a", "m"]}

    def test_empty_document(self, tmp_path):
        """Test that an empty document defines no sets."""
        config = tmp_path / "skillsets.yaml"
        config.write_text("")

        assert load_skillsets(config) == {}

    def test_missing_document(self, tmp_path):
        """Test that a missing document raises ConfigMissing."""
        with pytest.raises(ConfigMissingError):
            load_skillsets(tmp_path / "skillsets.yaml")

    def test_malformed_yaml(self, tmp_path):
        """Test that a syntax error raises ConfigInvalid."""
        config = tmp_path / "skillsets.yaml"
        config.write_text("writing: [skill-a, skill-b\n")

        with pytest.raises(ConfigInvalidError, match="Failed to parse"):
            load_skillsets(config)

    @pytest.mark.parametrize("content", [
        "- skill-a\n- skill-b\n",
        "writing: skill-a\n",
        "writing:\n  name: skill-a\n",
        "writing:\n  - [nested]\n",
        "writing:\n  - 42\n",
    ])
    def test_wrong_shape(self, tmp_path, content):
        """Test that documents with the wrong shape are rejected."""
        config = tmp_path / "skillsets.yaml"
        config.write_text(content)

        with pytest.raises(ConfigInvalidError):
            load_skillsets(config)

    def test_invalid_set_rejects_whole_document(self, tmp_path):
        """Test that one bad set invalidates the document."""
        config = tmp_path / "skillsets.yaml"
        config.write_text("good:\n  - skill-a\nbad: 3\n")

        with pytest.raises(ConfigInvalidError, match="bad"):
            load_skillsets(config)


class TestExpand:
    """Test expand()."""

    def test_preserves_order(self, tmp_path):
        """Test that expansion keeps the configured order."""
        config = tmp_path / "skillsets.yaml"
        config.write_text("dev:\n  - z\n  - a\n  - m\n")

        assert expand(config, "dev") == ["z", "a", "m"]

    def test_unknown_set(self, tmp_path, sample_skillsets_yaml):
        """Test that an unknown key raises SetNotFound with the known sets."""
        config = tmp_path / "skillsets.yaml"
        config.write_text(sample_skillsets_yaml)

        with pytest.raises(SetNotFoundError) as exc_info:
            expand(config, "nope")

        assert exc_info.value.set_name == "nope"
        assert exc_info.value.available == ["writing", "partial", "empty"]
        assert "writing" in str(exc_info.value)
        assert isinstance(exc_info.value, ConfigError)

    def test_missing_document(self, tmp_path):
        """Test that expanding without a document raises ConfigMissing."""
        with pytest.raises(ConfigMissingError):
            expand(tmp_path / "skillsets.yaml", "writing")
