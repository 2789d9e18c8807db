"""
TypeScript generators package.

This package provides the building blocks of a generation run: type
reference translation, scalar mapping, interface inheritance, line
formatting, plain declarations and resolver signatures.
"""

from .declarations import DeclarationEmitter, GeneratedDeclaration
from .formatting import description_to_jsdoc, indent_lines, wrap_union_declaration
from .inheritance import InheritanceInfo, InheritanceMerger
from .resolvers import ResolverSignatureBuilder
from .scalars import ScalarMapper
from .type_refs import (
    DecomposedRef,
    TypeRefResolver,
    decompose,
    render_field_declaration,
    render_type,
)

__all__ = [
    "DeclarationEmitter",
    "GeneratedDeclaration",
    "ResolverSignatureBuilder",
    "InheritanceMerger",
    "InheritanceInfo",
    "ScalarMapper",
    "TypeRefResolver",
    "DecomposedRef",
    "decompose",
    "render_type",
    "render_field_declaration",
    "wrap_union_declaration",
    "description_to_jsdoc",
    "indent_lines",
]
