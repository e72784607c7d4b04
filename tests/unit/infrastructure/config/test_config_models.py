# tests/unit/infrastructure/config/test_config_models.py

"""Test configuration models and loading"""

# Standard library imports
from json import dumps
from logging import WARNING

# Third party imports
from pytest import mark
from pytest import raises

# Local imports
from flexport.core.domain.enums import ExportType
from flexport.core.errors import InvalidConfigurationError
from flexport.infrastructure.config import AppConfig
from flexport.infrastructure.config import ConfigLoader
from flexport.infrastructure.config import get_config
from flexport.infrastructure.config import reset_config


class TestAppConfigDefaults:
    """Test default configuration values"""

    def test_defaults(self):
        config = AppConfig()
        assert config.export.type is ExportType.XML
        assert config.export.items_per_page == 20
        assert config.csv.properties == []
        assert config.csv.usergroups == []
        assert config.csv.delimiter == "\t"
        assert config.xml.pretty_print is True
        assert config.xml.encoding == "utf-8"
        assert config.output.csv_file_name == "findologic.csv"
        assert config.output.xml_file_name_template == "findologic_{start}_{count}.xml"
        assert config.logging.debug is False
        assert config.logging.log_file is None

    def test_to_dict_is_json_compatible(self):
        data = AppConfig().to_dict()
        assert data["export"]["type"] == 0
        assert dumps(data)


class TestAppConfigValidation:
    """Test validation of configuration values"""

    @mark.parametrize(
        "raw,expected",
        [
            ("csv", ExportType.CSV),
            ("XML", ExportType.XML),
            (1, ExportType.CSV),
            ("1", ExportType.CSV),
        ],
    )
    def test_export_type_forms(self, raw, expected):
        assert AppConfig.from_dict({"export": {"type": raw}}).export.type is expected

    @mark.parametrize(
        "data",
        [
            {"export": {"type": "json"}},
            {"export": {"type": 7}},
            {"export": {"items_per_page": 0}},
            {"csv": {"properties": ["sale", "sale"]}},
            {"csv": {"delimiter": ""}},
            {"csv": {"delimiter": ";;"}},
            {"output": {"xml_file_name_template": "page_{page}.xml"}},
            {"output": {"csv_file_name": ""}},
            {"xml": {"encoding": "no-such-codec"}},
        ],
    )
    def test_invalid_values_rejected(self, data):
        with raises(InvalidConfigurationError):
            AppConfig.from_dict(data)


class TestAppConfigLoad:
    """Test loading configuration files"""

    def test_load_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(
            dumps(
                {"export": {"type": "csv", "items_per_page": 50}, "csv": {"properties": ["sale"]}}
            ),
            encoding="utf-8",
        )

        config = AppConfig.load(config_file)
        assert config.export.type is ExportType.CSV
        assert config.export.items_per_page == 50
        assert config.csv.properties == ["sale"]
        # Unspecified sections keep their defaults
        assert config.xml.pretty_print is True

    def test_missing_file_falls_back_with_warning(self, tmp_path, caplog):
        with caplog.at_level(WARNING):
            config = AppConfig.load(str(tmp_path / "absent.json"))
        assert config == AppConfig()
        assert "not found" in caplog.text

    @mark.parametrize("content", ["{not json", dumps({"export": {"items_per_page": -1}})])
    def test_invalid_file_falls_back_with_warning(self, tmp_path, caplog, content):
        config_file = tmp_path / "config.json"
        config_file.write_text(content, encoding="utf-8")

        with caplog.at_level(WARNING):
            config = AppConfig.load(config_file)
        assert config == AppConfig()
        assert "Using defaults" in caplog.text

    def test_no_path_without_config_json(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert AppConfig.load() == AppConfig()

    def test_no_path_uses_config_json_in_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "config.json").write_text(dumps({"xml": {"pretty_print": False}}))
        assert AppConfig.load().xml.pretty_print is False


class TestConfigLoader:
    """Test the ConfigLoader wrapper and default instance"""

    def test_sections(self):
        loader = ConfigLoader.from_dict({"csv": {"usergroups": ["B2B"]}})
        assert loader.csv.usergroups == ["B2B"]
        assert loader.export.type is ExportType.XML
        assert loader.xml.pretty_print is True
        assert loader.output.csv_file_name == "findologic.csv"
        assert loader.logging.debug is False
        assert loader.config["csv"]["usergroups"] == ["B2B"]

    def test_from_dict_rejects_invalid_config(self):
        with raises(InvalidConfigurationError):
            ConfigLoader.from_dict({"export": {"items_per_page": 0}})

    def test_loads_path(self, tmp_path):
        config_file = tmp_path / "custom.json"
        config_file.write_text(dumps({"csv": {"delimiter": ";"}}), encoding="utf-8")

        loader = ConfigLoader(str(config_file))
        assert loader.config_path == str(config_file)
        assert loader.csv.delimiter == ";"

    def test_default_instance_is_cached(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert get_config() is get_config()

    def test_reset_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        first = get_config()
        reset_config()
        assert get_config() is not first

    def test_explicit_path_is_not_cached(self, tmp_path):
        config_file = tmp_path / "custom.json"
        config_file.write_text("{}", encoding="utf-8")
        assert get_config(str(config_file)) is not get_config(str(config_file))
