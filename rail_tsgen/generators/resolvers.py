"""
Resolver signature types for every output type of a schema.

For each field of an object or interface this builds an arguments interface
(when the field takes arguments) and a field resolver type, collects them in
a per-type resolver interface, and registers everything in one aggregate
resolver map together with custom scalar handlers and ``__resolveType``
discriminators for interfaces and unions.
"""

import logging
from dataclasses import dataclass
from functools import reduce
from itertools import chain
from typing import Iterator, List, Optional, Tuple, Union

from ..conf import TypeScriptGeneratorSettings
from ..exceptions import UnknownTypeKind
from ..graph.types import (
    EnumType,
    Field,
    InputObjectType,
    InterfaceType,
    ObjectType,
    ScalarType,
    TypeGraph,
    TypeNode,
    UnionType,
)
from .declarations import DeclarationEmitter
from .formatting import description_to_jsdoc
from .inheritance import InheritanceMerger
from .naming import (
    args_type_name,
    check_generated_names,
    field_resolver_name,
    prefixed_name,
    resolver_map_name,
    resolvers_interface_name,
    type_resolver_name,
)
from .scalars import ScalarMapper
from .type_refs import TypeRefResolver

logger = logging.getLogger(__name__)

RESOLVER_HELPER_TYPES = [
    "export type Result<T> = T | null | Promise<T | null>",
    "",
    "export type GQLField<T, P, Args, Ctx> =",
    "  | Result<T>",
    "  | ((parent: P, args: Args, context: Ctx, info: GraphQLResolveInfo) => Result<T>)",
    "",
    "export type GQLTypeResolver<P, Ctx, T> =",
    "  (parent: P, context: Ctx, info: GraphQLResolveInfo) => T",
    "",
]

RESOLVER_HELPER_NAMES = ("Result", "GQLField", "GQLTypeResolver")

RESOLVER_MAP_DOC = [
    "/**",
    " * This interface defines the shape of your resolvers.",
    " * It is designed to be compatible with graphql-tools resolver maps;",
    " * the generated per-type interfaces can also be used on their own.",
    " */",
]


@dataclass(frozen=True)
class ResolverFragment:
    """Resolver map entries and declarations contributed by one type."""
    map_entries: Tuple[str, ...] = ()
    declarations: Tuple[str, ...] = ()

    def __add__(self, other: "ResolverFragment") -> "ResolverFragment":
        return ResolverFragment(
            self.map_entries + other.map_entries,
            self.declarations + other.declarations,
        )


class ResolverSignatureBuilder:
    """Build the resolver declarations of a type graph."""

    def __init__(self, graph: TypeGraph, settings: Optional[TypeScriptGeneratorSettings] = None):
        self.graph = graph
        self.settings = settings or TypeScriptGeneratorSettings()
        self.type_prefix = self.settings.type_prefix
        self.context_type = self.settings.context_type or "any"
        self.scalars = ScalarMapper(
            self.type_prefix,
            self.settings.custom_scalar_mapping,
            self.settings.scalar_fallback_type,
        )
        self.type_refs = TypeRefResolver(self.scalars, self.type_prefix)
        self.merger = InheritanceMerger(graph)

    def header_lines(self) -> Tuple[str, ...]:
        """Import statements required by the resolver declarations."""
        has_custom_scalar = any(isinstance(t, ScalarType) for t in self.graph.user_types())
        imports = "GraphQLResolveInfo, GraphQLScalarType" if has_custom_scalar else "GraphQLResolveInfo"
        header = [f"import {{ {imports} }} from 'graphql'"]
        if self.settings.import_context:
            header.append(self.settings.import_context)
        return tuple(header)

    def build(self) -> Tuple[str, ...]:
        """Helper types, the aggregate resolver map, then per-type declarations."""
        check_generated_names(chain(
            DeclarationEmitter(self.graph, self.settings).declared_names(),
            self.declared_names(),
        ))
        combined = reduce(
            lambda acc, node: acc + self.fragment(node),
            self.graph.user_types(),
            ResolverFragment(),
        )
        return (
            "",
            *RESOLVER_HELPER_TYPES,
            *RESOLVER_MAP_DOC,
            f"export interface {resolver_map_name(self.type_prefix)} {{",
            *combined.map_entries,
            "}",
            *combined.declarations,
        )

    def declared_names(self) -> Iterator[Tuple[str, Optional[str], str]]:
        """(type, field, generated name) for every resolver declaration."""
        for helper in RESOLVER_HELPER_NAMES:
            yield "resolver helpers", None, helper
        yield "resolver map", None, resolver_map_name(self.type_prefix)
        for node in self.graph.user_types():
            if isinstance(node, (InterfaceType, UnionType)):
                yield node.name, None, type_resolver_name(self.type_prefix, node.name)
            if not isinstance(node, (ObjectType, InterfaceType)):
                continue
            yield node.name, None, resolvers_interface_name(self.type_prefix, node.name)
            for f in self._resolver_fields(node):
                yield node.name, f.name, field_resolver_name(node.name, f.name)
                if f.args:
                    yield node.name, f.name, args_type_name(node.name, f.name)

    def fragment(self, node: TypeNode) -> ResolverFragment:
        if isinstance(node, ScalarType):
            # e.g. scalar DateTime
            return ResolverFragment(map_entries=(f"{node.name}?: GraphQLScalarType",))
        if isinstance(node, ObjectType):
            return ResolverFragment(
                map_entries=(
                    f"{node.name}?: {resolvers_interface_name(self.type_prefix, node.name)}",
                ),
                declarations=tuple(self._type_resolvers(node)),
            )
        if isinstance(node, InterfaceType):
            return self._discriminator(node) + ResolverFragment(
                declarations=tuple(self._type_resolvers(node))
            )
        if isinstance(node, UnionType):
            return self._discriminator(node)
        if isinstance(node, (EnumType, InputObjectType)):
            return ResolverFragment()
        raise UnknownTypeKind(
            f"Unknown type kind {getattr(node, 'kind', None)!r} for type '{node.name}'",
            type_name=node.name,
            kind=str(getattr(node, "kind", None)),
        )

    def _discriminator(self, node: Union[InterfaceType, UnionType]) -> ResolverFragment:
        """``__resolveType`` signature, e.g. for union SearchResult = Movie | User"""
        name = type_resolver_name(self.type_prefix, node.name)
        literals = [f"'{n}'" for n in node.possible_type_names] or ["never"]
        head = f"export type {name}<P = {{}}> = GQLTypeResolver<"
        declaration = [f"{head}P, {self.context_type}, {' | '.join(literals)}>"]
        if len(declaration[0]) > self.settings.max_line_width and len(literals) > 1:
            declaration = [
                head,
                "  P,",
                f"  {self.context_type},",
                *(f"  | {literal}" for literal in literals),
                ">",
            ]
        return ResolverFragment(
            map_entries=(f"{node.name}?: {{ __resolveType: {name} }}",),
            declarations=("", f"// MARK: --- {name}", "", *declaration),
        )

    def _resolver_fields(self, node: Union[ObjectType, InterfaceType]) -> List[Field]:
        inheritance = self.merger.resolve(node)
        return [
            f for f in node.fields
            if not (self.settings.merge_inherited and inheritance.is_inherited(f.name))
        ]

    def _parent_type(self, node: TypeNode) -> str:
        if self.settings.root_value_type and node.name in self.graph.root_type_names:
            return self.settings.root_value_type
        return prefixed_name(self.type_prefix, node.name)

    # e.g. type User { posts(first: Int): [Post!]! }
    def _type_resolvers(self, node: Union[ObjectType, InterfaceType]) -> List[str]:
        interface_name = resolvers_interface_name(self.type_prefix, node.name)
        parent_type = self._parent_type(node)
        inheritance = self.merger.resolve(node)

        fields = self._resolver_fields(node)

        extends = ""
        if inheritance.interfaces:
            parents = ", ".join(
                f"{resolvers_interface_name(self.type_prefix, name)}<P>"
                for name in inheritance.interface_names
            )
            extends = f"extends {parents} "

        entries: List[str] = []
        field_types: List[str] = []
        for f in fields:
            resolver_name = field_resolver_name(node.name, f.name)
            entries.append(f"{f.name}?: {resolver_name}<P>")
            field_types.extend(self._field_resolver(node, f, parent_type))

        return [
            "",
            f"// MARK: --- {interface_name}",
            "",
            *description_to_jsdoc(node.description, node.deprecation),
            f"export interface {interface_name}<P = {parent_type}> {extends}{{",
            *entries,
            "}",
            *field_types,
        ]

    def _field_resolver(self, node: TypeNode, f: Field, parent_type: str) -> List[str]:
        lines: List[str] = []
        args_type = "{}"
        if f.args:
            args_type = args_type_name(node.name, f.name)
            lines.extend([
                "",
                f"export interface {args_type} {{",
                *(
                    self.type_refs.declare(
                        arg.name, arg.type_ref, node.name, path=f"{f.name}.{arg.name}"
                    )
                    for arg in f.args
                ),
                "}",
            ])

        value_type = self.type_refs.resolve(f.type_ref, node.name, f.name)
        lines.extend([
            "",
            *description_to_jsdoc(f.description, f.deprecation),
            f"export type {field_resolver_name(node.name, f.name)}<P = {parent_type}> = "
            f"GQLField<{value_type}, P, {args_type}, {self.context_type}>",
        ])
        return lines
