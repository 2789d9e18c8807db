"""
Interface field inheritance for object types.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Mapping, Tuple

from ..exceptions import DanglingInterfaceReference
from ..graph.types import InterfaceType, ObjectType, TypeGraph, TypeNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InheritanceInfo:
    """Interfaces an object extends and the fields they contribute."""
    type_name: str
    interfaces: Tuple[InterfaceType, ...] = ()
    inherited_field_counts: Mapping[str, int] = field(default_factory=dict)

    @property
    def interface_names(self) -> Tuple[str, ...]:
        return tuple(interface.name for interface in self.interfaces)

    def is_inherited(self, field_name: str) -> bool:
        return self.inherited_field_counts.get(field_name, 0) > 0


class InheritanceMerger:
    """Resolve implemented interfaces against the full type graph."""

    def __init__(self, graph: TypeGraph):
        self.graph = graph

    def resolve(self, node: TypeNode) -> InheritanceInfo:
        """
        Compute the interfaces of ``node`` in its own declaration order.

        Only object types implement interfaces; every other kind yields an
        empty result.

        Raises:
            DanglingInterfaceReference: If a named interface is absent from
                the graph or names a type that is not an interface.
        """
        if not isinstance(node, ObjectType):
            return InheritanceInfo(type_name=node.name)

        interfaces = []
        counts: Counter = Counter()
        for interface_name in node.interface_names:
            interface = self.graph.get(interface_name)
            if not isinstance(interface, InterfaceType):
                raise DanglingInterfaceReference(
                    f"Type '{node.name}' implements unknown interface '{interface_name}'",
                    type_name=node.name,
                    interface_name=interface_name,
                )
            interfaces.append(interface)
            counts.update(f.name for f in interface.fields)

        if interfaces:
            logger.debug(f"Type '{node.name}' extends {', '.join(node.interface_names)}")
        return InheritanceInfo(
            type_name=node.name,
            interfaces=tuple(interfaces),
            inherited_field_counts=counts,
        )
