"""
Text helpers shared by the declaration and resolver generators.
"""

import re
from typing import List, Optional, Sequence, Union

from ..graph.types import Deprecation

DEFAULT_LINE_WIDTH = 80
DEFAULT_INDENT_SIZE = 2

_OPENERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_CLOSERS = {")", "]", "}", ">"}
_LEADING_PIPE = re.compile(r"=\s*\|\s*")


def split_union_members(expression: str) -> List[str]:
    """
    Split a type expression on its top-level ``|`` separators.

    Separators inside brackets, generics or string literals are kept, so
    ``(A | null)[] | B`` yields ``["(A | null)[]", "B"]``.
    """
    members = []
    depth = 0
    quote: Optional[str] = None
    start = 0
    for index, char in enumerate(expression):
        if quote:
            if char == quote and expression[index - 1] != "\\":
                quote = None
        elif char in ("'", '"', "`"):
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            # ``=>`` in a function type is not a closing bracket
            if char == ">" and expression[index - 1] == "=":
                continue
            depth = max(depth - 1, 0)
        elif char == "|" and depth == 0:
            members.append(expression[start:index].strip())
            start = index + 1
    members.append(expression[start:].strip())
    return [member for member in members if member]


def _collapse(declaration: Union[str, Sequence[str]]) -> str:
    if isinstance(declaration, str):
        declaration = declaration.splitlines()
    parts = [line.strip() for line in declaration if line.strip()]
    return _LEADING_PIPE.sub("= ", " ".join(parts), count=1)


def wrap_union_declaration(
    declaration: Union[str, Sequence[str]],
    width: int = DEFAULT_LINE_WIDTH,
) -> List[str]:
    """
    Keep a union declaration on one line or break it at its members.

    ``export type X = A | B | C`` becomes::

        export type X =
          | A
          | B
          | C

    when it does not fit in ``width`` columns. Already wrapped input is
    collapsed first, so wrapping is idempotent.
    """
    line = _collapse(declaration)
    if len(line) <= width:
        return [line]
    head, separator, expression = line.partition(" = ")
    if not separator:
        return [line]
    members = split_union_members(expression)
    if len(members) < 2:
        return [line]
    return [f"{head} ="] + [f"  | {member}" for member in members]


def union_declaration(
    name: str,
    members: Sequence[str],
    width: int = DEFAULT_LINE_WIDTH,
) -> List[str]:
    """``export type <name> = <members>``; an empty union is ``never``."""
    expression = " | ".join(members) if members else "never"
    return wrap_union_declaration(f"export type {name} = {expression}", width)


def description_to_jsdoc(
    description: Optional[str] = None,
    deprecation: Optional[Deprecation] = None,
) -> List[str]:
    """Convert a description and deprecation marker into a JSDoc block."""
    lines = description.splitlines() if description else []
    if deprecation is not None:
        lines.append(
            f"@deprecated {deprecation.reason}" if deprecation.reason else "@deprecated"
        )
    if not lines:
        return []
    escaped = (line.replace("*/", "*\\/") for line in lines)
    body = [f" * {line}".rstrip() for line in escaped]
    return ["/**", *body, " */"]


def _is_comment(stripped: str) -> bool:
    return stripped.startswith(("/**", "*", "//"))


def indent_lines(lines: Sequence[str], indent_size: int = DEFAULT_INDENT_SIZE) -> List[str]:
    """Indent lines by brace depth; comments never change the depth."""
    result = []
    indent = 0
    for line in lines:
        stripped = line.strip()
        if not stripped:
            result.append("")
            continue
        if not _is_comment(stripped) and stripped.startswith("}"):
            indent = max(indent - indent_size, 0)
        result.append(" " * indent + line)
        if not _is_comment(stripped) and stripped.endswith("{"):
            indent += indent_size
    return result
