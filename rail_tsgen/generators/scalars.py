"""
Mapping of GraphQL scalars to TypeScript types.
"""

from typing import Dict, Mapping, Optional

PRIMITIVE_SCALARS: Dict[str, str] = {
    "Int": "number",
    "Float": "number",
    "String": "string",
    "ID": "string",
    "Boolean": "boolean",
}

DEFAULT_FALLBACK_TYPE = "any"


class ScalarMapper:
    """
    Resolve scalar names to TypeScript type expressions.

    Built-in scalars map to TypeScript primitives. Custom scalars are always
    referenced through a prefixed alias (``GQLDateTime``) whose target is the
    configured override or the permissive fallback type.
    """

    def __init__(
        self,
        type_prefix: str = "",
        overrides: Optional[Mapping[str, str]] = None,
        fallback_type: str = DEFAULT_FALLBACK_TYPE,
    ):
        self.type_prefix = type_prefix
        self.overrides = dict(overrides or {})
        self.fallback_type = fallback_type

    def is_primitive(self, scalar_name: str) -> bool:
        return scalar_name in PRIMITIVE_SCALARS

    def alias_name(self, scalar_name: str) -> str:
        return f"{self.type_prefix}{scalar_name}"

    def reference(self, scalar_name: str) -> str:
        """Type expression used wherever a field refers to the scalar."""
        if self.is_primitive(scalar_name):
            return self.overrides.get(scalar_name, PRIMITIVE_SCALARS[scalar_name])
        return self.alias_name(scalar_name)

    def alias_target(self, scalar_name: str) -> str:
        return self.overrides.get(scalar_name, self.fallback_type)

    def alias_declaration(self, scalar_name: str) -> Optional[str]:
        """
        Alias line for a custom scalar, or None when it would refer to itself.
        """
        alias = self.alias_name(scalar_name)
        target = self.alias_target(scalar_name)
        if target == alias:
            return None
        return f"export type {alias} = {target}"
