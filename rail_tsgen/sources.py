"""
Schema sources for TypeScript generation.

These helpers perform the I/O around the generator: discovering schema
definition files, reading introspection dumps and querying live GraphQL
endpoints. Each returns a ``TypeGraph``.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

import requests
from graphql import GraphQLError, get_introspection_query

from .exceptions import SchemaSourceError
from .graph import TypeGraph, graph_from_graphene, graph_from_introspection, graph_from_sdl

logger = logging.getLogger(__name__)

SCHEMA_FILE_PATTERN = re.compile(r"\.(graphql|gql)$")

PathLike = Union[str, Path]


def discover_schema_files(path: PathLike) -> List[Path]:
    """
    Find schema definition files under ``path``.

    A file path is returned as-is; a directory is walked recursively for
    ``*.graphql`` and ``*.gql`` files, in sorted order.
    """
    root = Path(path)
    if not root.exists():
        raise SchemaSourceError(f"Schema path '{root}' does not exist", source=str(root))
    if root.is_file():
        return [root]
    return sorted(p for p in root.rglob("*") if p.is_file() and SCHEMA_FILE_PATTERN.search(p.name))


def read_schema_sdl(paths: Iterable[PathLike]) -> str:
    """Concatenate the contents of every schema file found under ``paths``."""
    files = [f for path in paths for f in discover_schema_files(path)]
    if not files:
        raise SchemaSourceError("No GraphQL schema files found")
    logger.debug(f"Reading {len(files)} schema files")
    return "\n".join(f.read_text(encoding="utf-8") for f in files)


def load_sdl_graph(paths: Iterable[PathLike]) -> TypeGraph:
    """Build a TypeGraph from schema definition files or directories."""
    paths = list(paths)
    source = read_schema_sdl(paths)
    try:
        return graph_from_sdl(source)
    except (GraphQLError, TypeError) as e:
        raise SchemaSourceError(f"Invalid schema definition: {e}", source=", ".join(map(str, paths))) from e


def load_introspection_file(path: PathLike) -> TypeGraph:
    """Build a TypeGraph from a JSON file holding an introspection result."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SchemaSourceError(f"Could not read introspection file '{path}': {e}", source=str(path)) from e
    try:
        return graph_from_introspection(data)
    except ValueError as e:
        raise SchemaSourceError(str(e), source=str(path)) from e


def fetch_introspection(
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    timeout: float = 30.0,
) -> dict[str, Any]:
    """Run the standard introspection query against a live endpoint."""
    logger.info(f"Fetching schema introspection from {url}")
    try:
        response = requests.post(
            url,
            json={"query": get_introspection_query(descriptions=True)},
            headers=dict(headers or {}),
            timeout=timeout,
        )
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        raise SchemaSourceError(f"Introspection request failed: {e}", source=url) from e
    except ValueError as e:
        raise SchemaSourceError(f"Endpoint did not return JSON: {e}", source=url) from e

    if payload.get("errors"):
        raise SchemaSourceError(f"Introspection failed: {payload['errors']}", source=url)
    return payload


def load_endpoint_graph(
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    timeout: float = 30.0,
) -> TypeGraph:
    """Build a TypeGraph from a live GraphQL endpoint."""
    payload = fetch_introspection(url, headers=headers, timeout=timeout)
    try:
        return graph_from_introspection(payload)
    except ValueError as e:
        raise SchemaSourceError(str(e), source=url) from e


def load_graphene_graph(schema: Any) -> TypeGraph:
    """Build a TypeGraph from a graphene schema, e.g. ``GRAPHENE["SCHEMA"]``."""
    if not schema:
        raise SchemaSourceError("GRAPHENE.SCHEMA is not configured or could not be loaded.")
    return graph_from_graphene(schema)


def parse_header(value: str) -> tuple[str, str]:
    """Parse ``"Name: value"`` into a header pair."""
    name, separator, header_value = value.partition(":")
    if not separator or not name.strip():
        raise ValueError(f"Invalid header '{value}', expected 'Name: value'")
    return name.strip(), header_value.strip()
