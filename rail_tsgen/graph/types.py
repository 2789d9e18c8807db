"""
Data classes describing a reflected GraphQL schema.

A ``TypeGraph`` is built once by a loader and treated as read-only input by
every generator. Ordered collections are tuples so nodes stay hashable and
immutable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Iterator, Optional, Tuple

from ..exceptions import NamingCollisionError


class TypeKind(Enum):
    """Kinds of named GraphQL types."""
    SCALAR = "SCALAR"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"


class Modifier(Enum):
    """Wrappers that can surround a named type in a type reference."""
    NON_NULL = "NON_NULL"
    LIST = "LIST"


BUILTIN_SCALAR_NAMES = frozenset({"Int", "Float", "String", "Boolean", "ID"})
BUILTIN_ENUM_NAMES = frozenset({"__TypeKind", "__DirectiveLocation"})
BUILTIN_OBJECT_NAMES = frozenset({
    "__Schema",
    "__Type",
    "__Field",
    "__InputValue",
    "__Directive",
    "__EnumValue",
})


@dataclass(frozen=True)
class TypeRef:
    """Raw reference to a named type through NON_NULL/LIST wrappers."""
    kind: str
    name: Optional[str] = None
    of_type: Optional["TypeRef"] = None

    @classmethod
    def named(cls, kind: TypeKind, name: str) -> "TypeRef":
        return cls(kind=kind.value, name=name)

    @classmethod
    def non_null(cls, of_type: "TypeRef") -> "TypeRef":
        return cls(kind=Modifier.NON_NULL.value, of_type=of_type)

    @classmethod
    def list_of(cls, of_type: "TypeRef") -> "TypeRef":
        return cls(kind=Modifier.LIST.value, of_type=of_type)

    def __str__(self) -> str:
        if self.kind == Modifier.NON_NULL.value:
            return f"{self.of_type}!"
        if self.kind == Modifier.LIST.value:
            return f"[{self.of_type}]"
        return str(self.name)


@dataclass(frozen=True)
class Deprecation:
    """Deprecation marker with an optional reason."""
    reason: Optional[str] = None


@dataclass(frozen=True)
class EnumValue:
    """A single value of an enum type."""
    name: str
    description: Optional[str] = None
    deprecation: Optional[Deprecation] = None


@dataclass(frozen=True)
class InputField:
    """An input object field or a field argument."""
    name: str
    type_ref: TypeRef
    description: Optional[str] = None
    default_value: Optional[str] = None
    deprecation: Optional[Deprecation] = None


@dataclass(frozen=True)
class Field:
    """An output field of an object or interface type."""
    name: str
    type_ref: TypeRef
    args: Tuple[InputField, ...] = ()
    description: Optional[str] = None
    deprecation: Optional[Deprecation] = None


@dataclass(frozen=True)
class TypeNode:
    """Common attributes of every named type."""
    kind: ClassVar[TypeKind]

    name: str
    description: Optional[str] = None
    deprecation: Optional[Deprecation] = None


@dataclass(frozen=True)
class ScalarType(TypeNode):
    kind: ClassVar[TypeKind] = TypeKind.SCALAR


@dataclass(frozen=True)
class EnumType(TypeNode):
    kind: ClassVar[TypeKind] = TypeKind.ENUM

    values: Tuple[EnumValue, ...] = ()


@dataclass(frozen=True)
class InputObjectType(TypeNode):
    kind: ClassVar[TypeKind] = TypeKind.INPUT_OBJECT

    fields: Tuple[InputField, ...] = ()


@dataclass(frozen=True)
class ObjectType(TypeNode):
    kind: ClassVar[TypeKind] = TypeKind.OBJECT

    fields: Tuple[Field, ...] = ()
    interface_names: Tuple[str, ...] = ()


@dataclass(frozen=True)
class InterfaceType(TypeNode):
    kind: ClassVar[TypeKind] = TypeKind.INTERFACE

    fields: Tuple[Field, ...] = ()
    possible_type_names: Tuple[str, ...] = ()


@dataclass(frozen=True)
class UnionType(TypeNode):
    kind: ClassVar[TypeKind] = TypeKind.UNION

    possible_type_names: Tuple[str, ...] = ()


def is_builtin_type(kind: TypeKind, name: str) -> bool:
    """Check if a named type is a GraphQL built-in (primitive or introspection)."""
    return (
        (kind is TypeKind.SCALAR and name in BUILTIN_SCALAR_NAMES)
        or (kind is TypeKind.ENUM and name in BUILTIN_ENUM_NAMES)
        or (kind is TypeKind.OBJECT and name in BUILTIN_OBJECT_NAMES)
    )


@dataclass(frozen=True)
class TypeGraph:
    """Ordered, uniquely named collection of type nodes."""
    types: Tuple[TypeNode, ...] = ()
    query_type_name: Optional[str] = None
    mutation_type_name: Optional[str] = None
    subscription_type_name: Optional[str] = None
    _index: Dict[str, TypeNode] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        index: Dict[str, TypeNode] = {}
        for node in self.types:
            if node.name in index:
                raise NamingCollisionError(
                    f"Type '{node.name}' is declared more than once",
                    type_name=node.name,
                    generated_name=node.name,
                )
            index[node.name] = node
        object.__setattr__(self, "_index", index)

    def __iter__(self) -> Iterator[TypeNode]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def get(self, name: str) -> Optional[TypeNode]:
        return self._index.get(name)

    @property
    def root_type_names(self) -> Tuple[str, ...]:
        names = (
            self.query_type_name,
            self.mutation_type_name,
            self.subscription_type_name,
        )
        return tuple(name for name in names if name)

    def user_types(self) -> Tuple[TypeNode, ...]:
        """Types declared by the schema, excluding GraphQL built-ins."""
        return tuple(
            node for node in self.types
            if not (
                isinstance(getattr(node, "kind", None), TypeKind)
                and is_builtin_type(node.kind, node.name)
            )
        )
