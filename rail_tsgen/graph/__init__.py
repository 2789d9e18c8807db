"""
Reflected schema model.

This package holds the immutable ``TypeGraph`` consumed by the generators and
the loaders that build it from introspection results, SDL or live schemas.
"""

from .loader import (
    graph_from_graphene,
    graph_from_introspection,
    graph_from_schema,
    graph_from_sdl,
    type_node_from_introspection,
)
from .types import (
    Deprecation,
    EnumType,
    EnumValue,
    Field,
    InputField,
    InputObjectType,
    InterfaceType,
    Modifier,
    ObjectType,
    ScalarType,
    TypeGraph,
    TypeKind,
    TypeNode,
    TypeRef,
    UnionType,
    is_builtin_type,
)

__all__ = [
    "TypeGraph",
    "TypeNode",
    "TypeKind",
    "TypeRef",
    "Modifier",
    "Deprecation",
    "EnumValue",
    "InputField",
    "Field",
    "ScalarType",
    "EnumType",
    "InputObjectType",
    "ObjectType",
    "InterfaceType",
    "UnionType",
    "is_builtin_type",
    "graph_from_introspection",
    "graph_from_schema",
    "graph_from_sdl",
    "graph_from_graphene",
    "type_node_from_introspection",
]
