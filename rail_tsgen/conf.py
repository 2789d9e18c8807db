"""
Settings for TypeScript generation.

Values are resolved from, in increasing precedence:
1. Library defaults (``LIBRARY_DEFAULTS["typescript_generation_settings"]``)
2. The ``RAIL_TSGEN`` Django setting, when Django settings are configured
3. Explicit keyword overrides
"""

import copy
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

from django.conf import settings as django_settings

from .defaults import DJANGO_SETTINGS_KEY, LIBRARY_DEFAULTS


def _merge_settings_dicts(*dicts: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge multiple settings dictionaries with later ones taking precedence."""
    result = {}
    for d in dicts:
        if d: result.update(d)
    return result


def _get_library_defaults() -> dict[str, Any]:
    return copy.deepcopy(LIBRARY_DEFAULTS.get("typescript_generation_settings", {}))


def _get_django_settings() -> dict[str, Any]:
    """Get the RAIL_TSGEN dictionary from Django settings, if any."""
    if not django_settings.configured:
        return {}
    configured = getattr(django_settings, DJANGO_SETTINGS_KEY, None)
    return copy.deepcopy(dict(configured)) if isinstance(configured, Mapping) else {}


@dataclass
class TypeScriptGeneratorSettings:
    """Settings for controlling TypeScript generation."""
    type_prefix: str = "GQL"
    custom_scalar_mapping: Dict[str, str] = field(default_factory=dict)
    scalar_fallback_type: str = "any"
    context_type: str = "any"
    import_context: Optional[str] = None
    root_value_type: Optional[str] = None
    merge_inherited: bool = False
    global_output: bool = False
    enum_syntax_supported: bool = True
    omit_argument_fields: bool = False
    generate_resolvers: bool = True
    max_line_width: int = 80
    indent_size: int = 2

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TypeScriptGeneratorSettings":
        valid_fields = cls.field_names()
        return cls(**{k: v for k, v in data.items() if k in valid_fields})

    @classmethod
    def from_django_settings(cls, **overrides: Any) -> "TypeScriptGeneratorSettings":
        merged = _merge_settings_dicts(
            _get_library_defaults(), _get_django_settings(), overrides
        )
        return cls.from_dict(merged)


def unknown_setting_keys(data: Mapping[str, Any]) -> List[str]:
    """Keys of a settings dictionary that no setting consumes."""
    valid_fields = TypeScriptGeneratorSettings.field_names()
    return sorted(key for key in data if key not in valid_fields)
