"""
Unit tests for TypeScript generator settings.
"""

import logging

import pytest
from django.apps import apps

from rail_tsgen.conf import TypeScriptGeneratorSettings, unknown_setting_keys
from rail_tsgen.defaults import LIBRARY_DEFAULTS

pytestmark = pytest.mark.unit


class TestTypeScriptGeneratorSettings:
    def test_defaults_match_library_defaults(self):
        defaults = LIBRARY_DEFAULTS["typescript_generation_settings"]
        settings = TypeScriptGeneratorSettings()
        for key, value in defaults.items():
            assert getattr(settings, key) == value

    def test_from_dict_ignores_unknown_keys(self):
        settings = TypeScriptGeneratorSettings.from_dict({"type_prefix": "T", "bogus": 1})
        assert settings.type_prefix == "T"

    def test_django_settings_are_merged(self, settings):
        settings.RAIL_TSGEN = {"type_prefix": "API", "merge_inherited": True}
        resolved = TypeScriptGeneratorSettings.from_django_settings()
        assert resolved.type_prefix == "API"
        assert resolved.merge_inherited is True
        assert resolved.context_type == "any"

    def test_overrides_take_precedence(self, settings):
        settings.RAIL_TSGEN = {"type_prefix": "API"}
        resolved = TypeScriptGeneratorSettings.from_django_settings(type_prefix="")
        assert resolved.type_prefix == ""

    def test_non_mapping_django_setting_is_ignored(self, settings):
        settings.RAIL_TSGEN = "GQL"
        assert TypeScriptGeneratorSettings.from_django_settings().type_prefix == "GQL"

    def test_runs_do_not_share_library_defaults(self):
        first = TypeScriptGeneratorSettings.from_django_settings()
        first.custom_scalar_mapping["DateTime"] = "string"

        second = TypeScriptGeneratorSettings.from_django_settings()
        assert second.custom_scalar_mapping == {}
        assert LIBRARY_DEFAULTS["typescript_generation_settings"]["custom_scalar_mapping"] == {}

    def test_runs_do_not_share_django_settings(self, settings):
        settings.RAIL_TSGEN = {"custom_scalar_mapping": {"DateTime": "string"}}
        first = TypeScriptGeneratorSettings.from_django_settings()
        first.custom_scalar_mapping["JSON"] = "unknown"

        second = TypeScriptGeneratorSettings.from_django_settings()
        assert second.custom_scalar_mapping == {"DateTime": "string"}
        assert settings.RAIL_TSGEN["custom_scalar_mapping"] == {"DateTime": "string"}

    def test_unknown_setting_keys(self):
        assert unknown_setting_keys({"type_prefix": "", "zeta": 1, "alpha": 2}) == ["alpha", "zeta"]


class TestAppConfigValidation:
    def test_warns_about_unknown_keys(self, settings, caplog):
        settings.RAIL_TSGEN = {"type_prefx": "API"}
        with caplog.at_level(logging.WARNING, logger="rail_tsgen.apps"):
            apps.get_app_config("rail_tsgen")._validate_configuration()
        assert "Ignoring unknown RAIL_TSGEN setting 'type_prefx'" in caplog.text

    def test_warns_about_non_mapping(self, settings, caplog):
        settings.RAIL_TSGEN = ["type_prefix"]
        with caplog.at_level(logging.WARNING, logger="rail_tsgen.apps"):
            apps.get_app_config("rail_tsgen")._validate_configuration()
        assert "RAIL_TSGEN must be a dict, got list" in caplog.text
