"""
Build a ``TypeGraph`` from the shapes a GraphQL schema can arrive in.

Both a live introspection result and a schema definition text normalise to
the introspection dictionary format first, then to the immutable graph.
"""

import logging
from typing import Any, List, Mapping, Optional

from graphql import GraphQLSchema, build_schema, introspection_from_schema

from ..exceptions import UnknownTypeKind
from .types import (
    Deprecation,
    EnumType,
    EnumValue,
    Field,
    InputField,
    InputObjectType,
    InterfaceType,
    ObjectType,
    ScalarType,
    TypeGraph,
    TypeKind,
    TypeNode,
    TypeRef,
    UnionType,
)

logger = logging.getLogger(__name__)


def _deprecation(data: Mapping[str, Any]) -> Optional[Deprecation]:
    if not data.get("isDeprecated"):
        return None
    return Deprecation(reason=data.get("deprecationReason"))


def _type_ref(data: Optional[Mapping[str, Any]]) -> TypeRef:
    if not data:
        return TypeRef(kind="")
    of_type = data.get("ofType")
    return TypeRef(
        kind=data.get("kind") or "",
        name=data.get("name"),
        of_type=_type_ref(of_type) if of_type else None,
    )


def _input_field(data: Mapping[str, Any]) -> InputField:
    return InputField(
        name=data["name"],
        type_ref=_type_ref(data.get("type")),
        description=data.get("description"),
        default_value=data.get("defaultValue"),
        deprecation=_deprecation(data),
    )


def _field(data: Mapping[str, Any]) -> Field:
    return Field(
        name=data["name"],
        type_ref=_type_ref(data.get("type")),
        args=tuple(_input_field(arg) for arg in data.get("args") or []),
        description=data.get("description"),
        deprecation=_deprecation(data),
    )


def _names(refs: Optional[List[Mapping[str, Any]]]) -> tuple:
    return tuple(ref["name"] for ref in refs or [])


def type_node_from_introspection(data: Mapping[str, Any]) -> TypeNode:
    """Convert one entry of ``__schema.types`` into a type node."""
    name = data.get("name")
    raw_kind = data.get("kind")
    try:
        kind = TypeKind(raw_kind)
    except ValueError:
        raise UnknownTypeKind(
            f"Type '{name}' has unsupported kind '{raw_kind}'",
            type_name=name,
            kind=raw_kind,
        ) from None

    common = {"name": name, "description": data.get("description")}

    if kind is TypeKind.SCALAR:
        return ScalarType(**common)
    if kind is TypeKind.ENUM:
        values = tuple(
            EnumValue(
                name=value["name"],
                description=value.get("description"),
                deprecation=_deprecation(value),
            )
            for value in data.get("enumValues") or []
        )
        return EnumType(values=values, **common)
    if kind is TypeKind.INPUT_OBJECT:
        fields = tuple(_input_field(f) for f in data.get("inputFields") or [])
        return InputObjectType(fields=fields, **common)
    if kind is TypeKind.OBJECT:
        return ObjectType(
            fields=tuple(_field(f) for f in data.get("fields") or []),
            interface_names=_names(data.get("interfaces")),
            **common,
        )
    if kind is TypeKind.INTERFACE:
        return InterfaceType(
            fields=tuple(_field(f) for f in data.get("fields") or []),
            possible_type_names=_names(data.get("possibleTypes")),
            **common,
        )
    return UnionType(possible_type_names=_names(data.get("possibleTypes")), **common)


def graph_from_introspection(result: Mapping[str, Any]) -> TypeGraph:
    """
    Build a TypeGraph from an introspection query result.

    Accepts either the bare ``{"__schema": ...}`` payload or a full GraphQL
    response of the form ``{"data": {"__schema": ...}}``.
    """
    if "__schema" not in result and isinstance(result.get("data"), Mapping):
        result = result["data"]
    schema = result.get("__schema")
    if not isinstance(schema, Mapping):
        raise ValueError("Introspection result does not contain '__schema'")

    def root_name(key: str) -> Optional[str]:
        root = schema.get(key)
        return root.get("name") if root else None

    types = tuple(type_node_from_introspection(t) for t in schema.get("types") or [])
    logger.debug(f"Loaded {len(types)} types from introspection result")
    return TypeGraph(
        types=types,
        query_type_name=root_name("queryType"),
        mutation_type_name=root_name("mutationType"),
        subscription_type_name=root_name("subscriptionType"),
    )


def graph_from_schema(schema: GraphQLSchema) -> TypeGraph:
    """Build a TypeGraph from a graphql-core schema object."""
    return graph_from_introspection(introspection_from_schema(schema))


def graph_from_sdl(source: str) -> TypeGraph:
    """Build a TypeGraph from schema definition language text."""
    return graph_from_schema(build_schema(source))


def graph_from_graphene(schema: Any) -> TypeGraph:
    """Build a TypeGraph from a graphene ``Schema`` instance."""
    return graph_from_schema(schema.graphql_schema)

