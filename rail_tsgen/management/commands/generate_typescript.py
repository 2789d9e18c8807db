from django.core.management.base import BaseCommand, CommandError
from graphene_django.settings import graphene_settings

from rail_tsgen.conf import TypeScriptGeneratorSettings
from rail_tsgen.exceptions import SchemaSourceError, TypeScriptGenerationError
from rail_tsgen.generator import TypeScriptGenerator
from rail_tsgen.sources import (
    load_endpoint_graph,
    load_graphene_graph,
    load_introspection_file,
    load_sdl_graph,
    parse_header,
)

SETTING_OPTIONS = (
    "type_prefix",
    "context_type",
    "import_context",
    "root_value_type",
    "merge_inherited",
    "global_output",
    "enum_syntax_supported",
    "omit_argument_fields",
    "generate_resolvers",
)


class Command(BaseCommand):
    help = (
        "Generate TypeScript declarations from a GraphQL schema. "
        "Uses GRAPHENE.SCHEMA unless another source is given."
    )

    def add_arguments(self, parser):
        source = parser.add_mutually_exclusive_group()
        source.add_argument(
            "--schema",
            dest="schema_paths",
            action="append",
            help="SDL file or directory of *.graphql/*.gql files (repeatable).",
        )
        source.add_argument(
            "--introspection",
            dest="introspection_file",
            help="JSON file containing an introspection query result.",
        )
        source.add_argument(
            "--endpoint",
            help="URL of a live GraphQL endpoint to introspect.",
        )
        parser.add_argument(
            "--header",
            dest="headers",
            action="append",
            default=[],
            help="HTTP header for --endpoint, as 'Name: value' (repeatable).",
        )
        parser.add_argument(
            "--timeout",
            type=float,
            default=30.0,
            help="Timeout in seconds for --endpoint (default: 30).",
        )
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )
        parser.add_argument("--type-prefix", dest="type_prefix", help="Prefix for generated type names.")
        parser.add_argument("--context-type", dest="context_type", help="Resolver context type.")
        parser.add_argument(
            "--import-context",
            dest="import_context",
            help="Statement importing the context type, e.g. \"import { Context } from './context'\".",
        )
        parser.add_argument(
            "--root-value-type",
            dest="root_value_type",
            help="Parent type for Query/Mutation/Subscription resolvers.",
        )
        parser.add_argument(
            "--scalar",
            dest="scalars",
            action="append",
            default=[],
            help="Custom scalar mapping as NAME=TYPE, e.g. DateTime=string (repeatable).",
        )
        parser.add_argument(
            "--merge-inherited",
            dest="merge_inherited",
            action="store_true",
            default=None,
            help="Do not redeclare fields inherited from interfaces.",
        )
        parser.add_argument(
            "--global",
            dest="global_output",
            action="store_true",
            default=None,
            help="Declare the types in the global scope.",
        )
        parser.add_argument(
            "--no-enum-syntax",
            dest="enum_syntax_supported",
            action="store_false",
            default=None,
            help="Generate enums as string unions.",
        )
        parser.add_argument(
            "--omit-argument-fields",
            dest="omit_argument_fields",
            action="store_true",
            default=None,
            help="Leave fields with arguments out of the plain type declarations.",
        )
        parser.add_argument(
            "--no-resolvers",
            dest="generate_resolvers",
            action="store_false",
            default=None,
            help="Only generate plain type declarations.",
        )

    def handle(self, *args, **options):
        settings = self._build_settings(options)
        graph = self._load_graph(options)

        try:
            output = TypeScriptGenerator(settings).generate_text(graph)
        except TypeScriptGenerationError as e:
            raise CommandError(f"TypeScript generation failed: {e}") from e

        if options["output_file"]:
            with open(options["output_file"], "w", encoding="utf-8") as f:
                f.write(output)
            self.stdout.write(self.style.SUCCESS(f"TypeScript declarations written to {options['output_file']}"))
        else:
            self.stdout.write(output, ending="")

    def _build_settings(self, options):
        overrides = {
            key: options[key] for key in SETTING_OPTIONS if options.get(key) is not None
        }
        settings = TypeScriptGeneratorSettings.from_django_settings(**overrides)

        scalars = {}
        for value in options["scalars"]:
            name, separator, ts_type = value.partition("=")
            if not separator or not name.strip() or not ts_type.strip():
                raise CommandError(f"Invalid --scalar '{value}', expected NAME=TYPE")
            scalars[name.strip()] = ts_type.strip()
        if scalars:
            settings.custom_scalar_mapping = {**settings.custom_scalar_mapping, **scalars}
        return settings

    def _load_graph(self, options):
        try:
            if options.get("schema_paths"):
                return load_sdl_graph(options["schema_paths"])
            if options.get("introspection_file"):
                return load_introspection_file(options["introspection_file"])
            if options.get("endpoint"):
                try:
                    headers = dict(parse_header(h) for h in options["headers"])
                except ValueError as e:
                    raise CommandError(str(e)) from e
                return load_endpoint_graph(options["endpoint"], headers=headers, timeout=options["timeout"])
            return load_graphene_graph(graphene_settings.SCHEMA)
        except SchemaSourceError as e:
            raise CommandError(str(e)) from e
        except TypeScriptGenerationError as e:
            raise CommandError(f"TypeScript generation failed: {e}") from e
