"""Tests for seed file loading."""

import pytest
from pydantic import ValidationError

from safedict.exceptions import InvalidArgument
from safedict.utils.config import load_seed
from safedict.utils.schema import SeedSchema


class TestSeedSchema:
    """Test SeedSchema validation."""

    def test_defaults(self):
        """Test that an empty seed has no entries and no description."""
        seed = SeedSchema()

        assert seed.entries == {}
        assert seed.description is None

    def test_entries_keep_values(self):
        """Test that entry values of any type are kept as given."""
        seed = SeedSchema(entries={"toString": 1, "__proto__": None, "list": [1, 2]}, description="Seed")

        assert seed.entries == {"toString": 1, "__proto__": None, "list": [1, 2]}
        assert seed.description == "Seed"

    def test_non_string_keys_rejected(self):
        """Test that entry keys must already be strings."""
        with pytest.raises(ValidationError):
            SeedSchema(entries={1: "a"})

    def test_unknown_fields_rejected(self):
        """Test that unexpected top-level fields are rejected."""
        with pytest.raises(ValidationError):
            SeedSchema(entries={}, extra_field=True)


class TestLoadSeed:
    """Test load_seed()."""

    def test_load_seed(self, write_seed):
        """Test loading a valid seed file."""
        path = write_seed({"description": "Collisions", "entries": {"constructor": 2, "": "empty"}})

        seed = load_seed(path)

        assert seed.description == "Collisions"
        assert seed.entries == {"constructor": 2, "": "empty"}

    def test_load_seed_accepts_string_path(self, write_seed):
        """Test that a plain string path is accepted."""
        path = write_seed({"entries": {"a": 1}})

        assert load_seed(str(path)).entries == {"a": 1}

    def test_load_empty_seed(self, write_seed):
        """Test that an empty file yields an empty seed."""
        path = write_seed("")

        assert load_seed(path).entries == {}

    def test_missing_seed(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Seed file not found"):
            load_seed(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, write_seed):
        """Test that unparseable YAML raises InvalidArgument."""
        path = write_seed("entries: {a: 1\n")

        with pytest.raises(InvalidArgument, match="Invalid seed file format"):
            load_seed(path)

    def test_top_level_not_mapping(self, write_seed):
        """Test that a list at the top level is rejected."""
        path = write_seed("- a\n- b\n")

        with pytest.raises(InvalidArgument, match="mapping at the top level"):
            load_seed(path)

    def test_friendly_validation_errors(self, write_seed):
        """Test that pydantic errors are reported one per line."""
        path = write_seed("entries:\n  1: one\nbogus: true\n")

        with pytest.raises(InvalidArgument) as exc_info:
            load_seed(path)

        message = str(exc_info.value)
        assert message.startswith("Seed validation failed:")
        assert "bogus: Unknown field" in message
        assert "entries.1" in message

    def test_entries_not_mapping(self, write_seed):
        """Test that entries must be a mapping."""
        path = write_seed({"entries": ["a", "b"]})

        with pytest.raises(InvalidArgument, match="entries"):
            load_seed(path)
