"""
Unit tests for the text helpers used by the generators.
"""

import pytest

from rail_tsgen.generators.formatting import (
    description_to_jsdoc,
    indent_lines,
    split_union_members,
    union_declaration,
    wrap_union_declaration,
)
from rail_tsgen.graph import Deprecation

pytestmark = pytest.mark.unit


class TestSplitUnionMembers:
    def test_top_level_split(self):
        assert split_union_members("A | B | C") == ["A", "B", "C"]

    def test_nested_members_are_kept(self):
        assert split_union_members("(A | null)[] | Promise<B | null>") == [
            "(A | null)[]",
            "Promise<B | null>",
        ]

    def test_string_literals_are_kept(self):
        assert split_union_members("'a|b' | 'c'") == ["'a|b'", "'c'"]

    def test_arrow_functions(self):
        expression = "Result<T> | ((parent: P) => Result<T>)"
        assert split_union_members(expression) == [
            "Result<T>",
            "((parent: P) => Result<T>)",
        ]


class TestWrapUnionDeclaration:
    def test_short_declaration_stays_on_one_line(self):
        assert wrap_union_declaration("export type U = A | B") == ["export type U = A | B"]

    def test_long_declaration_is_wrapped(self):
        members = [f"'Member{i}'" for i in range(10)]
        lines = union_declaration("GQLPossibleLongTypeNames", members)
        assert lines[0] == "export type GQLPossibleLongTypeNames ="
        assert lines[1:] == [f"  | {member}" for member in members]

    def test_wrapping_is_idempotent(self):
        members = [f"'Member{i}'" for i in range(10)]
        once = union_declaration("GQLLong", members)
        assert wrap_union_declaration(once) == once
        assert wrap_union_declaration("\n".join(once)) == once

    def test_respects_width(self):
        declaration = "export type U = AAAA | BBBB"
        assert len(wrap_union_declaration(declaration, width=20)) == 3
        assert len(wrap_union_declaration(declaration, width=200)) == 1

    def test_single_member_is_not_split(self):
        declaration = "export type Long = " + "X" * 100
        assert wrap_union_declaration(declaration) == [declaration]

    def test_empty_union_is_never(self):
        assert union_declaration("GQLEmpty", []) == ["export type GQLEmpty = never"]


class TestDescriptionToJsdoc:
    def test_no_description(self):
        assert description_to_jsdoc(None) == []
        assert description_to_jsdoc("") == []

    def test_multiline_description(self):
        assert description_to_jsdoc("First line\n\nSecond line") == [
            "/**",
            " * First line",
            " *",
            " * Second line",
            " */",
        ]

    def test_deprecation(self):
        assert description_to_jsdoc("Old field", Deprecation("Use newField")) == [
            "/**",
            " * Old field",
            " * @deprecated Use newField",
            " */",
        ]
        assert description_to_jsdoc(None, Deprecation()) == ["/**", " * @deprecated", " */"]

    def test_comment_terminator_is_escaped(self):
        assert description_to_jsdoc("Matches */ here")[1] == " * Matches *\\/ here"


class TestIndentLines:
    def test_braces_control_depth(self):
        lines = [
            "export interface GQLUser {",
            "id: string",
            "}",
            "",
            "declare global {",
            "export enum GQLRole {",
            "ADMIN = 'ADMIN'",
            "}",
            "}",
        ]
        assert indent_lines(lines) == [
            "export interface GQLUser {",
            "  id: string",
            "}",
            "",
            "declare global {",
            "  export enum GQLRole {",
            "    ADMIN = 'ADMIN'",
            "  }",
            "}",
        ]

    def test_comments_do_not_change_depth(self):
        lines = ["interface A {", "/**", " * ends with {", " */", "// x {", "a: string", "}"]
        assert indent_lines(lines, indent_size=4) == [
            "interface A {",
            "    /**",
            "     * ends with {",
            "     */",
            "    // x {",
            "    a: string",
            "}",
        ]

    def test_inline_braces_do_not_change_depth(self):
        lines = ["interface M {", "U?: { __resolveType: R }", "}"]
        assert indent_lines(lines) == ["interface M {", "  U?: { __resolveType: R }", "}"]
