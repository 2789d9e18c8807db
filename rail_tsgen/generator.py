"""
TypeScriptGenerator implementation.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .conf import TypeScriptGeneratorSettings
from .defaults import LIBRARY_NAME
from .exceptions import TypeScriptGenerationError
from .generators import DeclarationEmitter, ResolverSignatureBuilder, indent_lines
from .graph import TypeGraph

logger = logging.getLogger(__name__)

GENERATED_BANNER = (
    f"// This file is generated by {LIBRARY_NAME}. Do not edit it by hand.",
)


@dataclass(frozen=True)
class GenerationResult:
    """Complete output of one generation run."""
    header: Tuple[str, ...]
    type_declarations: Tuple[str, ...]
    resolver_declarations: Tuple[str, ...] = ()
    global_output: bool = False
    indent_size: int = 2

    def lines(self) -> List[str]:
        """Header, plain declarations and resolver declarations, in order."""
        lines = [*GENERATED_BANNER, *self.header]
        if self.global_output:
            if not self.header:
                # declare global is only allowed inside a module
                lines.append("export {}")
            declarations = [
                line[len("export "):] if line.startswith("export ") else line
                for line in self.type_declarations
            ]
            lines.extend(["", "declare global {", *declarations, "}"])
        else:
            lines.extend(self.type_declarations)
        lines.extend(self.resolver_declarations)
        return indent_lines(lines, self.indent_size)

    def to_text(self) -> str:
        return "\n".join(self.lines()).rstrip("\n") + "\n"


class TypeScriptGenerator:
    """
    Generate TypeScript declarations from a reflected GraphQL schema.

    The whole output is computed before anything is returned; any
    TypeScriptGenerationError aborts the run without partial output.
    """

    def __init__(self, settings: Optional[TypeScriptGeneratorSettings] = None):
        self.settings = settings or TypeScriptGeneratorSettings()
        self.logger = logging.getLogger(__name__)

    def generate(self, graph: TypeGraph) -> GenerationResult:
        self.logger.info(f"Generating TypeScript declarations for {len(graph)} types")
        try:
            type_declarations = DeclarationEmitter(graph, self.settings).emit_all()
            header: Tuple[str, ...] = ()
            resolver_declarations: Tuple[str, ...] = ()
            if self.settings.generate_resolvers:
                builder = ResolverSignatureBuilder(graph, self.settings)
                header = builder.header_lines()
                resolver_declarations = builder.build()
        except TypeScriptGenerationError as e:
            self.logger.error(f"TypeScript generation failed: {e}")
            raise

        self.logger.info(
            f"Generated {len(type_declarations)} declaration lines and "
            f"{len(resolver_declarations)} resolver lines"
        )
        return GenerationResult(
            header=header,
            type_declarations=type_declarations,
            resolver_declarations=resolver_declarations,
            global_output=self.settings.global_output,
            indent_size=self.settings.indent_size,
        )

    def generate_text(self, graph: TypeGraph) -> str:
        return self.generate(graph).to_text()

    def write(self, graph: TypeGraph, output_path: Union[str, Path]) -> str:
        """Generate and write the declarations to ``output_path``."""
        content = self.generate_text(graph)
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self.logger.info(f"TypeScript declarations written to {path}")
        return content
