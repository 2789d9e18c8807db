"""
Custom exceptions for TypeScript generation.

Every generation error is fatal for the whole run: the generator never
returns partial output once one of these has been raised.
"""

from typing import Optional, Sequence


class TypeScriptGenerationError(Exception):
    """Base exception for TypeScript generation errors."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(message)


class UnsupportedTypeShape(TypeScriptGenerationError):
    """Raised when a type reference does not end in a named type."""


class UnsupportedNesting(TypeScriptGenerationError):
    """Raised when a modifier stack nests lists inside lists."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
        modifiers: Sequence[str] = (),
    ):
        self.modifiers = tuple(modifiers)
        super().__init__(message, type_name, field_name)


class DanglingInterfaceReference(TypeScriptGenerationError):
    """Raised when an object implements an interface missing from the graph."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        interface_name: Optional[str] = None,
    ):
        self.interface_name = interface_name
        super().__init__(message, type_name)


class UnknownTypeKind(TypeScriptGenerationError):
    """Raised when a type node carries a kind outside the supported set."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        kind: Optional[str] = None,
    ):
        self.kind = kind
        super().__init__(message, type_name)


class NamingCollisionError(TypeScriptGenerationError):
    """Raised when two schema elements map to the same generated name."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
        generated_name: Optional[str] = None,
    ):
        self.generated_name = generated_name
        super().__init__(message, type_name, field_name)


class SchemaSourceError(Exception):
    """Raised when a schema cannot be read, fetched or introspected."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message)
