"""
Default configuration for the rail-tsgen library.

Each section mirrors a settings dataclass; ``rail_tsgen.conf`` merges these
values with the ``RAIL_TSGEN`` Django setting and explicit overrides.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "rail-tsgen"

DJANGO_SETTINGS_KEY = "RAIL_TSGEN"


# --------------------------------------------------------------------------- #
# Library-wide defaults
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    "typescript_generation_settings": {
        "type_prefix": "GQL",
        "custom_scalar_mapping": {},
        "scalar_fallback_type": "any",
        "context_type": "any",
        "import_context": None,
        "root_value_type": None,
        "merge_inherited": False,
        "global_output": False,
        "enum_syntax_supported": True,
        "omit_argument_fields": False,
        "generate_resolvers": True,
        "max_line_width": 80,
        "indent_size": 2,
    },
}
