"""
Plain TypeScript declarations for every schema type.

Scalars become aliases, enums become enums (or string unions), input objects
and output types become interfaces, and unions become type aliases plus the
helper types used to discriminate between their members.
"""

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from ..conf import TypeScriptGeneratorSettings
from ..exceptions import UnknownTypeKind
from ..graph.types import (
    EnumType,
    Field,
    InputField,
    InputObjectType,
    InterfaceType,
    ObjectType,
    ScalarType,
    TypeGraph,
    TypeKind,
    TypeNode,
    UnionType,
)
from .formatting import description_to_jsdoc, union_declaration
from .inheritance import InheritanceMerger
from .naming import (
    check_generated_names,
    name_map_name,
    possible_type_names_name,
    prefixed_name,
)
from .scalars import ScalarMapper
from .type_refs import TypeRefResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedDeclaration:
    """Lines generated for one schema type."""
    name: str
    lines: Tuple[str, ...]


class DeclarationEmitter:
    """Render the plain type declarations of a type graph."""

    def __init__(self, graph: TypeGraph, settings: Optional[TypeScriptGeneratorSettings] = None):
        self.graph = graph
        self.settings = settings or TypeScriptGeneratorSettings()
        self.type_prefix = self.settings.type_prefix
        self.scalars = ScalarMapper(
            self.type_prefix,
            self.settings.custom_scalar_mapping,
            self.settings.scalar_fallback_type,
        )
        self.type_refs = TypeRefResolver(self.scalars, self.type_prefix)
        self.merger = InheritanceMerger(graph)
        self._handlers: Dict[TypeKind, Callable[[TypeNode], List[str]]] = {
            TypeKind.SCALAR: self._scalar_lines,
            TypeKind.ENUM: self._enum_lines,
            TypeKind.INPUT_OBJECT: self._input_object_lines,
            TypeKind.OBJECT: self._object_lines,
            TypeKind.INTERFACE: self._object_lines,
            TypeKind.UNION: self._union_lines,
        }

    def emit(self, node: TypeNode) -> GeneratedDeclaration:
        kind = getattr(node, "kind", None)
        handler = self._handlers.get(kind) if isinstance(kind, TypeKind) else None
        if handler is None:
            raise UnknownTypeKind(
                f"Unknown type kind {kind!r} for type '{node.name}'",
                type_name=node.name,
                kind=str(kind),
            )
        logger.debug(f"Emitting {kind.value} declaration for '{node.name}'")
        return GeneratedDeclaration(node.name, tuple(handler(node)))

    def emit_all(self) -> Tuple[str, ...]:
        """Declarations of every user type, each block followed by a blank line."""
        check_generated_names(self.declared_names())
        return reduce(
            lambda lines, node: lines + self.emit(node).lines + ("",),
            self.graph.user_types(),
            ("",),
        )

    def declared_names(self) -> Iterator[Tuple[str, Optional[str], str]]:
        """(type, field, generated name) for every plain declaration."""
        for node in self.graph.user_types():
            if isinstance(node, ScalarType):
                if self.scalars.alias_declaration(node.name) is None:
                    continue
                yield node.name, None, self.scalars.alias_name(node.name)
                continue
            yield node.name, None, prefixed_name(self.type_prefix, node.name)
            if isinstance(node, (UnionType, InterfaceType)):
                yield node.name, None, possible_type_names_name(self.type_prefix, node.name)
                yield node.name, None, name_map_name(self.type_prefix, node.name)

    def _union(self, name: str, members: Sequence[str]) -> List[str]:
        return union_declaration(name, members, self.settings.max_line_width)

    def _field_lines(
        self, owner: TypeNode, fields: Sequence[Union[Field, InputField]]
    ) -> List[str]:
        """Property lines; a described property is separated by a blank line."""
        body: List[str] = []
        for f in fields:
            jsdoc = description_to_jsdoc(f.description, f.deprecation)
            declaration = self.type_refs.declare(f.name, f.type_ref, owner.name)
            if jsdoc:
                body.extend(["", *jsdoc])
            body.append(declaration)
        return body

    # e.g. scalar DateTime
    def _scalar_lines(self, node: ScalarType) -> List[str]:
        alias = self.scalars.alias_declaration(node.name)
        if alias is None:
            return []
        return [*description_to_jsdoc(node.description, node.deprecation), alias]

    # e.g. enum Role { ADMIN USER }
    def _enum_lines(self, node: EnumType) -> List[str]:
        name = prefixed_name(self.type_prefix, node.name)
        jsdoc = description_to_jsdoc(node.description, node.deprecation)
        literals = [f"'{value.name}'" for value in node.values]

        if not self.settings.enum_syntax_supported:
            return [*jsdoc, *self._union(name, literals)]

        if self.settings.global_output:
            return [
                *jsdoc,
                *self._union(name, literals),
                f"// NOTE: enum {node.name} is generated as string union instead of "
                "string enum because the types are generated under global scope",
            ]

        body: List[str] = []
        for index, value in enumerate(node.values):
            separator = "," if index < len(node.values) - 1 else ""
            body.extend(description_to_jsdoc(value.description, value.deprecation))
            body.append(f"{value.name} = '{value.name}'{separator}")
        return [*jsdoc, f"export enum {name} {{", *body, "}"]

    # e.g. input UserInput { name: String! }
    def _input_object_lines(self, node: InputObjectType) -> List[str]:
        return [
            *description_to_jsdoc(node.description, node.deprecation),
            f"export interface {prefixed_name(self.type_prefix, node.name)} {{",
            *self._field_lines(node, node.fields),
            "}",
        ]

    # e.g. union SearchResult = Movie | User
    def _union_lines(self, node: UnionType) -> List[str]:
        members = []
        for member_name in node.possible_type_names:
            member = self.graph.get(member_name)
            if isinstance(member, ScalarType):
                members.append(self.scalars.reference(member_name))
            else:
                members.append(prefixed_name(self.type_prefix, member_name))
        return [
            *description_to_jsdoc(node.description, node.deprecation),
            *self._union(prefixed_name(self.type_prefix, node.name), members),
            *self._possible_type_helpers(node, "union"),
        ]

    def _possible_type_helpers(
        self, node: Union[UnionType, InterfaceType], term: str
    ) -> List[str]:
        """String-literal union of member names and the name-to-type map."""
        names = node.possible_type_names
        return [
            "",
            f"/** Use this to resolve {term} type {node.name} */",
            *self._union(
                possible_type_names_name(self.type_prefix, node.name),
                [f"'{name}'" for name in names],
            ),
            "",
            f"export interface {name_map_name(self.type_prefix, node.name)} {{",
            f"{node.name}: {prefixed_name(self.type_prefix, node.name)}",
            *(f"{name}: {prefixed_name(self.type_prefix, name)}" for name in names),
            "}",
        ]

    # e.g. type User implements Node { id: ID! }
    def _object_lines(self, node: Union[ObjectType, InterfaceType]) -> List[str]:
        model_name = prefixed_name(self.type_prefix, node.name)
        inheritance = self.merger.resolve(node)

        fields = [
            f for f in node.fields
            if not (self.settings.merge_inherited and inheritance.is_inherited(f.name))
            and not (self.settings.omit_argument_fields and f.args)
        ]

        extends = ""
        if inheritance.interfaces:
            parents = ", ".join(
                prefixed_name(self.type_prefix, name) for name in inheritance.interface_names
            )
            extends = f"extends {parents} "

        lines = [
            f"// MARK: --- {model_name}",
            "",
            *description_to_jsdoc(node.description, node.deprecation),
            f"export interface {model_name} {extends}{{",
            *self._field_lines(node, fields),
            "}",
        ]
        if isinstance(node, InterfaceType):
            lines.extend(self._possible_type_helpers(node, "interface"))
        return lines
