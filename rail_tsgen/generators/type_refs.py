"""
Translation of GraphQL type references into TypeScript type expressions.

A reference such as ``[User!]!`` is decomposed into a modifier stack read
outer-to-inner (``NON_NULL, LIST, NON_NULL``) ending in a named leaf, then
recomposed from a fixed table. Stacks outside the table are rejected rather
than guessed.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from ..exceptions import UnsupportedNesting, UnsupportedTypeShape
from ..graph.types import Modifier, TypeKind, TypeRef
from .scalars import ScalarMapper

NON_NULL = Modifier.NON_NULL
LIST = Modifier.LIST

_MODIFIER_KINDS = {modifier.value for modifier in Modifier}

TYPE_TEMPLATES: Dict[Tuple[Modifier, ...], str] = {
    (): "{leaf} | null",                                   # User
    (NON_NULL,): "{leaf}",                                 # User!
    (LIST,): "({leaf} | null)[] | null",                   # [User]
    (LIST, NON_NULL): "{leaf}[] | null",                   # [User!]
    (NON_NULL, LIST): "({leaf} | null)[]",                 # [User]!
    (NON_NULL, LIST, NON_NULL): "{leaf}[]",                # [User!]!
}


@dataclass(frozen=True)
class DecomposedRef:
    """Canonical form of a type reference."""
    modifiers: Tuple[Modifier, ...]
    leaf_kind: TypeKind
    leaf_name: str


def _describe(modifiers: Sequence[Modifier]) -> str:
    return " ".join(m.value for m in modifiers) or "(none)"


def decompose(
    ref: Optional[TypeRef],
    type_name: Optional[str] = None,
    field_name: Optional[str] = None,
) -> DecomposedRef:
    """Peel LIST/NON_NULL wrappers off a reference until the named leaf."""
    modifiers = []
    current = ref
    while current is not None and current.kind in _MODIFIER_KINDS:
        modifiers.append(Modifier(current.kind))
        current = current.of_type

    if current is None or not current.name:
        raise UnsupportedTypeShape(
            f"Type reference of '{type_name}.{field_name}' does not end in a named type",
            type_name=type_name,
            field_name=field_name,
        )
    try:
        leaf_kind = TypeKind(current.kind)
    except ValueError:
        raise UnsupportedTypeShape(
            f"Type reference of '{type_name}.{field_name}' ends in '{current.name}' "
            f"of unsupported kind '{current.kind}'",
            type_name=type_name,
            field_name=field_name,
        ) from None
    return DecomposedRef(tuple(modifiers), leaf_kind, current.name)


def render_type(
    modifiers: Sequence[Modifier],
    leaf: str,
    type_name: Optional[str] = None,
    field_name: Optional[str] = None,
) -> str:
    """Wrap an already resolved leaf expression according to its modifiers."""
    template = TYPE_TEMPLATES.get(tuple(modifiers))
    if template is not None:
        return template.format(leaf=leaf)

    if list(modifiers).count(LIST) > 1:
        raise UnsupportedNesting(
            f"Nested lists are not supported ('{type_name}.{field_name}': "
            f"{_describe(modifiers)})",
            type_name=type_name,
            field_name=field_name,
            modifiers=[m.value for m in modifiers],
        )
    raise UnsupportedTypeShape(
        f"Invalid modifier stack for '{type_name}.{field_name}': {_describe(modifiers)}",
        type_name=type_name,
        field_name=field_name,
    )


def is_required(modifiers: Sequence[Modifier]) -> bool:
    """A field is required only when its outermost modifier is NON_NULL."""
    return bool(modifiers) and modifiers[0] is NON_NULL


def render_field_declaration(
    field_name: str,
    modifiers: Sequence[Modifier],
    leaf: str,
    type_name: Optional[str] = None,
    path: Optional[str] = None,
) -> str:
    """
    e.g. ``tags?: (string | null)[] | null`` or ``age: number``

    ``path`` names the property in errors when it differs from
    ``field_name``, e.g. ``posts.first`` for an argument of ``posts``.
    """
    rendered = render_type(modifiers, leaf, type_name=type_name, field_name=path or field_name)
    marker = "" if is_required(modifiers) else "?"
    return f"{field_name}{marker}: {rendered}"


class TypeRefResolver:
    """Resolve type references against the naming rules of one generation run."""

    def __init__(self, scalars: ScalarMapper, type_prefix: str = ""):
        self.scalars = scalars
        self.type_prefix = type_prefix

    def leaf_expression(self, ref: DecomposedRef) -> str:
        if ref.leaf_kind is TypeKind.SCALAR:
            return self.scalars.reference(ref.leaf_name)
        return f"{self.type_prefix}{ref.leaf_name}"

    def resolve(
        self,
        ref: TypeRef,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ) -> str:
        """Full TypeScript type expression for a reference."""
        decomposed = decompose(ref, type_name, field_name)
        return render_type(
            decomposed.modifiers,
            self.leaf_expression(decomposed),
            type_name=type_name,
            field_name=field_name,
        )

    def declare(
        self,
        field_name: str,
        ref: TypeRef,
        type_name: Optional[str] = None,
        path: Optional[str] = None,
    ) -> str:
        """Property declaration line for a field or argument."""
        decomposed = decompose(ref, type_name, path or field_name)
        return render_field_declaration(
            field_name,
            decomposed.modifiers,
            self.leaf_expression(decomposed),
            type_name=type_name,
            path=path,
        )
