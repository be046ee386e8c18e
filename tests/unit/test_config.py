"""Unit tests for environment-based configuration"""

import os

import pytest

from src.config import load_environment, load_search_options, parse_facet_dimensions


class TestLoadSearchOptions:
    """Test SearchOptions built from SEARCH_* variables"""

    def test_defaults(self):
        """Test defaults when nothing is set"""
        options = load_search_options()

        assert options.context_length == 50
        assert options.min_score_threshold == 0.1
        assert options.field_weights.title == 1.5
        assert options.field_weights.speaker == 0.8
        assert options.facet_dimensions == ("type",)
        assert options.type_labels["action_item"] == "Action item"

    def test_overrides(self, monkeypatch):
        """Test each variable is applied"""
        monkeypatch.setenv("SEARCH_CONTEXT_LENGTH", "20")
        monkeypatch.setenv("SEARCH_MIN_SCORE_THRESHOLD", "0.3")
        monkeypatch.setenv("SEARCH_WEIGHT_TITLE", "2.0")
        monkeypatch.setenv("SEARCH_WEIGHT_CONTENT", "0.5")
        monkeypatch.setenv("SEARCH_FACETS", "type, Participant,date")

        options = load_search_options()

        assert options.context_length == 20
        assert options.min_score_threshold == 0.3
        assert options.field_weights.title == 2.0
        assert options.field_weights.content == 0.5
        assert options.field_weights.summary == 1.2
        assert options.facet_dimensions == ("type", "participant", "date")

    def test_empty_values_use_defaults(self, monkeypatch):
        """Test blank variables fall back to defaults"""
        monkeypatch.setenv("SEARCH_CONTEXT_LENGTH", " ")
        monkeypatch.setenv("SEARCH_FACETS", "")

        options = load_search_options()

        assert options.context_length == 50
        assert options.facet_dimensions == ("type",)

    @pytest.mark.parametrize("name,value,message", [
        ("SEARCH_CONTEXT_LENGTH", "abc", "must be an integer"),
        ("SEARCH_CONTEXT_LENGTH", "-1", "must be >= 0"),
        ("SEARCH_MIN_SCORE_THRESHOLD", "high", "must be a number"),
        ("SEARCH_WEIGHT_SPEAKER", "-0.5", "must be non-negative"),
        ("SEARCH_FACETS", "type,speaker", "Unknown facet dimension"),
    ])
    def test_invalid_values(self, monkeypatch, name, value, message):
        """Test invalid configuration fails fast"""
        monkeypatch.setenv(name, value)

        with pytest.raises(ValueError, match=message):
            load_search_options()


class TestLoadEnvironment:
    """Test .env.local / .env selection"""

    def test_env_local_takes_priority(self, tmp_path, monkeypatch):
        """Test .env.local wins over .env"""
        monkeypatch.setenv("SEARCH_CONTEXT_LENGTH", "50")
        (tmp_path / ".env").write_text("SEARCH_CONTEXT_LENGTH=10\n")
        (tmp_path / ".env.local").write_text("SEARCH_CONTEXT_LENGTH=30\n")

        loaded = load_environment(tmp_path)

        assert loaded == tmp_path / ".env.local"
        assert os.environ["SEARCH_CONTEXT_LENGTH"] == "30"
        assert load_search_options().context_length == 30

    def test_env_fallback(self, tmp_path, monkeypatch):
        """Test .env is used when .env.local is missing"""
        monkeypatch.setenv("SEARCH_FACETS", "type")
        (tmp_path / ".env").write_text("SEARCH_FACETS=type,date\n")

        loaded = load_environment(tmp_path)

        assert loaded == tmp_path / ".env"
        assert load_search_options().facet_dimensions == ("type", "date")

    def test_no_env_files(self, tmp_path, caplog):
        """Test missing files are reported but not fatal"""
        with caplog.at_level("WARNING"):
            loaded = load_environment(tmp_path)

        assert loaded is None
        assert "No .env.local or .env file found" in caplog.text


class TestParseFacetDimensions:
    """Test comma-separated facet parsing shared by config and the CLI"""

    @pytest.mark.parametrize("value,expected", [
        (None, ("type",)),
        ("", ("type",)),
        ("date", ("date",)),
        (" Type ,participant,", ("type", "participant")),
    ])
    def test_parsing(self, value, expected):
        """Test trimming, lower-casing and the default"""
        assert parse_facet_dimensions(value) == expected

    def test_unknown_dimension(self):
        """Test invalid names list the valid options"""
        with pytest.raises(ValueError, match="Valid options: type, participant, date"):
            parse_facet_dimensions("speaker")
