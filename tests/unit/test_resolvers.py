"""
Unit tests for ResolverSignatureBuilder.
"""

import pytest

from rail_tsgen.conf import TypeScriptGeneratorSettings
from rail_tsgen.exceptions import NamingCollisionError, UnsupportedNesting
from rail_tsgen.generators.resolvers import RESOLVER_HELPER_TYPES, ResolverSignatureBuilder
from rail_tsgen.graph import Field, InputField, ObjectType, TypeGraph, UnionType
from tests.schemas import (
    ID,
    INT,
    STRING,
    blog_graph,
    inheritance_graph,
    list_of,
    non_null,
    union_graph,
)

pytestmark = pytest.mark.unit


def _builder(graph, **settings):
    return ResolverSignatureBuilder(graph, TypeScriptGeneratorSettings(**settings))


def _declarations(graph, name, **settings):
    return list(_builder(graph, **settings).fragment(graph.get(name)).declarations)


class TestHeader:
    def test_scalar_import_only_with_custom_scalars(self):
        assert _builder(blog_graph()).header_lines() == (
            "import { GraphQLResolveInfo, GraphQLScalarType } from 'graphql'",
        )
        assert _builder(union_graph()).header_lines() == (
            "import { GraphQLResolveInfo } from 'graphql'",
        )

    def test_context_import(self):
        header = _builder(
            union_graph(), import_context="import { Context } from './context'"
        ).header_lines()
        assert header[-1] == "import { Context } from './context'"


class TestResolverMap:
    def test_entries_follow_graph_order(self):
        lines = list(_builder(blog_graph()).build())
        start = lines.index("export interface GQLResolverMap {")
        end = lines.index("}", start)
        assert lines[start + 1:end] == [
            "DateTime?: GraphQLScalarType",
            "Node?: { __resolveType: GQLNode_TypeResolver }",
            "User?: GQLUserResolvers",
            "Post?: GQLPostResolvers",
            "SearchResult?: { __resolveType: GQLSearchResult_TypeResolver }",
            "Query?: GQLQueryResolvers",
        ]

    def test_helpers_precede_map(self):
        lines = list(_builder(union_graph()).build())
        assert lines[1:1 + len(RESOLVER_HELPER_TYPES)] == RESOLVER_HELPER_TYPES
        assert lines.index("export interface GQLResolverMap {") > len(RESOLVER_HELPER_TYPES)

    def test_prefix_applies_to_map(self):
        lines = _builder(union_graph(), type_prefix="").build()
        assert "export interface ResolverMap {" in lines
        assert "P1?: P1Resolvers" in lines


class TestTypeResolvers:
    def test_object_resolvers(self):
        assert _declarations(blog_graph(), "User") == [
            "",
            "// MARK: --- GQLUserResolvers",
            "",
            "/**",
            " * A registered user",
            " */",
            "export interface GQLUserResolvers<P = GQLUser> extends GQLNodeResolvers<P> {",
            "id?: User_Id<P>",
            "age?: User_Age<P>",
            "tags?: User_Tags<P>",
            "posts?: User_Posts<P>",
            "}",
            "",
            "export type User_Id<P = GQLUser> = GQLField<string, P, {}, any>",
            "",
            "export type User_Age<P = GQLUser> = GQLField<number, P, {}, any>",
            "",
            "export type User_Tags<P = GQLUser> = GQLField<(string | null)[] | null, P, {}, any>",
            "",
            "export interface User_Posts_Args {",
            "first?: number | null",
            "after: string",
            "}",
            "",
            "export type User_Posts<P = GQLUser> = GQLField<GQLPost[], P, User_Posts_Args, any>",
        ]

    def test_single_args_type_per_field(self):
        lines = _declarations(blog_graph(), "User")
        assert lines.count("export interface User_Posts_Args {") == 1
        assert not any("User_Age_Args" in line for line in lines)

    def test_context_type(self):
        lines = _declarations(blog_graph(), "Post", context_type="Context")
        assert "export type Post_Title<P = GQLPost> = GQLField<string, P, {}, Context>" in lines

    def test_root_value_type(self):
        lines = _declarations(blog_graph(), "Query", root_value_type="RootValue")
        assert "export interface GQLQueryResolvers<P = RootValue> {" in lines
        assert (
            "export type Query_Search<P = RootValue> = "
            "GQLField<(GQLSearchResult | null)[], P, Query_Search_Args, any>"
        ) in lines

    def test_root_value_type_ignored_for_other_types(self):
        lines = _declarations(blog_graph(), "Post", root_value_type="RootValue")
        assert "export interface GQLPostResolvers<P = GQLPost> {" in lines

    def test_merge_inherited(self):
        lines = _declarations(inheritance_graph(), "B", merge_inherited=True)
        assert "export interface GQLBResolvers<P = GQLB> extends GQLAResolvers<P> {" in lines
        assert "y?: B_Y<P>" in lines
        assert "x?: B_X<P>" not in lines
        assert not any(line.startswith("export type B_X") for line in lines)

    def test_inherited_resolvers_by_default(self):
        lines = _declarations(inheritance_graph(), "B")
        assert "x?: B_X<P>" in lines
        assert "export type B_X<P = GQLB> = GQLField<string, P, {}, any>" in lines

    def test_naming_collision(self):
        graph = TypeGraph(types=(
            ObjectType(
                name="Thing",
                fields=(
                    Field(name="name", type_ref=STRING),
                    Field(name="Name", type_ref=non_null(INT)),
                ),
            ),
        ))
        with pytest.raises(NamingCollisionError) as exc:
            _builder(graph).build()
        assert exc.value.type_name == "Thing"
        assert exc.value.generated_name == "Thing_Name"

    def test_naming_collision_across_types(self):
        graph = TypeGraph(types=(
            ObjectType(name="X_Y", fields=(Field(name="z", type_ref=STRING),)),
            ObjectType(name="X", fields=(Field(name="y_Z", type_ref=STRING),)),
        ))
        with pytest.raises(NamingCollisionError) as exc:
            _builder(graph).build()
        assert exc.value.type_name == "X"
        assert exc.value.field_name == "y_Z"
        assert exc.value.generated_name == "X_Y_Z"

    def test_field_resolver_clashes_with_type_name(self):
        graph = TypeGraph(types=(
            ObjectType(name="User_Posts", fields=(Field(name="id", type_ref=non_null(ID)),)),
            ObjectType(
                name="User",
                fields=(
                    Field(
                        name="posts",
                        type_ref=list_of(STRING),
                        args=(InputField(name="first", type_ref=INT),),
                    ),
                ),
            ),
        ))
        with pytest.raises(NamingCollisionError) as exc:
            _builder(graph, type_prefix="").build()
        assert exc.value.type_name == "User"
        assert exc.value.generated_name == "User_Posts"

    def test_type_clashes_with_helper_type(self):
        graph = TypeGraph(types=(ObjectType(name="Field", fields=(Field(name="id", type_ref=ID),)),))
        with pytest.raises(NamingCollisionError) as exc:
            _builder(graph).build()
        assert exc.value.generated_name == "GQLField"

    def test_argument_errors_name_the_field(self):
        graph = TypeGraph(types=(
            ObjectType(
                name="Grid",
                fields=(
                    Field(
                        name="cells",
                        type_ref=STRING,
                        args=(InputField(name="shape", type_ref=list_of(list_of(INT))),),
                    ),
                ),
            ),
        ))
        with pytest.raises(UnsupportedNesting) as exc:
            _builder(graph).build()
        assert exc.value.type_name == "Grid"
        assert exc.value.field_name == "cells.shape"


class TestDiscriminators:
    def test_union(self):
        fragment = _builder(union_graph()).fragment(union_graph().get("U"))
        assert fragment.map_entries == ("U?: { __resolveType: GQLU_TypeResolver }",)
        assert fragment.declarations == (
            "",
            "// MARK: --- GQLU_TypeResolver",
            "",
            "export type GQLU_TypeResolver<P = {}> = GQLTypeResolver<P, any, 'P1' | 'P2'>",
        )

    def test_interface_has_discriminator_and_field_resolvers(self):
        graph = inheritance_graph()
        fragment = _builder(graph, context_type="Ctx").fragment(graph.get("A"))
        assert fragment.map_entries == ("A?: { __resolveType: GQLA_TypeResolver }",)
        assert "export type GQLA_TypeResolver<P = {}> = GQLTypeResolver<P, Ctx, 'B'>" in (
            fragment.declarations
        )
        assert "export interface GQLAResolvers<P = GQLA> {" in fragment.declarations

    def test_enum_and_scalar_fragments(self):
        graph = blog_graph()
        builder = _builder(graph)
        assert builder.fragment(graph.get("Role")).map_entries == ()
        assert builder.fragment(graph.get("DateTime")).declarations == ()

    def test_long_discriminator_is_wrapped(self):
        names = tuple(f"Member{i}" for i in range(10))
        graph = TypeGraph(types=(UnionType(name="Wide", possible_type_names=names),))
        declarations = _builder(graph).fragment(graph.get("Wide")).declarations
        assert list(declarations[3:]) == [
            "export type GQLWide_TypeResolver<P = {}> = GQLTypeResolver<",
            "  P,",
            "  any,",
            *(f"  | '{name}'" for name in names),
            ">",
        ]
        assert all(len(line) <= 80 for line in declarations)
