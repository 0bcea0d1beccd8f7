"""Tests for ilslogic.config."""

import yaml

from ilslogic.config import Config, LogicConfig, default_config_dir


def test_default_config_dir_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("ILSLOGIC_CONFIG_DIR", str(tmp_path))
    assert default_config_dir() == tmp_path


def test_load_config_missing_file(tmp_path):
    config = Config(tmp_path)
    assert config.as_dict() == {}
    assert config.get("Catalog.holds_mode", "all") == "all"


def test_load_config_valid(tmp_path):
    (tmp_path / "config.yaml").write_text(
        yaml.safe_dump({"Catalog": {"holds_mode": "holds"}})
    )
    config = Config(tmp_path)
    assert config.get("Catalog.holds_mode") == "holds"
    assert config.get("Catalog.missing") is None


def test_load_config_invalid_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("Catalog: [unclosed")
    config = Config(tmp_path)
    assert config.as_dict() == {}


def test_load_config_non_mapping(tmp_path):
    (tmp_path / "config.yaml").write_text("- just\n- a list\n")
    config = Config(tmp_path)
    assert config.as_dict() == {}


class TestLogicConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ILSLOGIC_HMAC_KEY", raising=False)
        config = LogicConfig.from_dict({})
        assert config.hide_holdings == ()
        assert config.allow_holds_override is False
        assert config.holdings_grouping == "holdings_id,location"
        assert config.holds_mode == "all"
        assert config.title_level_holds_mode == "disabled"
        assert config.hmac_key == ""
        assert config.default_search_backend == "Solr"
        assert config.holdings_text_fields == ("holdings_notes", "summary", "supplements", "indexes")

    def test_sections(self):
        config = LogicConfig.from_dict({
            "Catalog": {
                "holds_mode": "availability",
                "title_level_holds_mode": "always",
                "allow_holds_override": "true",
                "holdings_grouping": "location",
            },
            "Record": {"hide_holdings": ["ClosedStacks", "Storage"]},
            "Security": {"HMACkey": "secret"},
            "Site": {"defaultSearchBackend": "Summon", "defaultCurrency": "EUR"},
        })
        assert config.holds_mode == "availability"
        assert config.title_level_holds_mode == "always"
        assert config.allow_holds_override is True
        assert config.holdings_grouping == "location"
        assert config.hide_holdings == ("ClosedStacks", "Storage")
        assert config.hmac_key == "secret"
        assert config.default_search_backend == "Summon"
        assert config.currency == "EUR"

    def test_single_hidden_location_and_ini_list(self):
        assert LogicConfig.from_dict({"Record": {"hide_holdings": "Attic"}}).hide_holdings == ("Attic",)
        assert LogicConfig.from_dict(
            {"Record": {"hide_holdings": {0: "A", 1: "B"}}}
        ).hide_holdings == ("A", "B")

    def test_boolean_strings(self):
        assert LogicConfig.from_dict({"Catalog": {"allow_holds_override": "0"}}).allow_holds_override is False
        assert LogicConfig.from_dict({"Catalog": {"allow_holds_override": "yes"}}).allow_holds_override is True

    def test_hmac_key_from_env(self, monkeypatch):
        monkeypatch.setenv("ILSLOGIC_HMAC_KEY", "from-env")
        assert LogicConfig.from_dict({}).hmac_key == "from-env"

    def test_from_config(self, tmp_path):
        (tmp_path / "config.yaml").write_text(
            yaml.safe_dump({"Catalog": {"holds_mode": "recalls"}})
        )
        assert LogicConfig.from_config(Config(tmp_path)).holds_mode == "recalls"
