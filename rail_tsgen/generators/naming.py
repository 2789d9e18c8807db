"""
Deterministic names for generated TypeScript declarations.

Every generated name is derived by plain concatenation, so distinct schema
elements can map to the same identifier: ``name`` and ``Name`` on one type
both give ``Owner_Name``, and type ``X_Y`` field ``z`` clashes with type ``X``
field ``y_Z``. ``check_generated_names`` rejects such collisions across the
whole output.
"""

from typing import Dict, Iterable, Optional, Tuple

from ..exceptions import NamingCollisionError


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def prefixed_name(type_prefix: str, type_name: str) -> str:
    return f"{type_prefix}{type_name}"


def field_resolver_name(owner_name: str, field_name: str) -> str:
    """e.g. ``User`` + ``posts`` -> ``User_Posts``"""
    return f"{owner_name}_{upper_first(field_name)}"


def args_type_name(owner_name: str, field_name: str) -> str:
    """e.g. ``User`` + ``posts`` -> ``User_Posts_Args``"""
    return f"{field_resolver_name(owner_name, field_name)}_Args"


def resolvers_interface_name(type_prefix: str, type_name: str) -> str:
    return f"{type_prefix}{type_name}Resolvers"


def type_resolver_name(type_prefix: str, type_name: str) -> str:
    return f"{type_prefix}{type_name}_TypeResolver"


def possible_type_names_name(type_prefix: str, type_name: str) -> str:
    return f"{type_prefix}Possible{type_name}TypeNames"


def name_map_name(type_prefix: str, type_name: str) -> str:
    return f"{type_prefix}{type_name}NameMap"


def resolver_map_name(type_prefix: str) -> str:
    return f"{type_prefix}ResolverMap"


def check_generated_names(named: Iterable[Tuple[str, Optional[str], str]]) -> None:
    """
    Ensure every generated declaration name is used once in the output.

    Args:
        named: Triples of (type name, field name or None, generated name),
            one per declaration.

    Raises:
        NamingCollisionError: If two declarations share a generated name.
    """
    seen: Dict[str, str] = {}
    for type_name, field_name, generated in named:
        origin = f"{type_name}.{field_name}" if field_name else type_name
        previous = seen.get(generated)
        if previous is not None:
            raise NamingCollisionError(
                f"'{previous}' and '{origin}' both generate '{generated}'",
                type_name=type_name,
                field_name=field_name,
                generated_name=generated,
            )
        seen[generated] = origin
