"""
Rail TSGen - TypeScript declarations from GraphQL schemas.

Translates a reflected GraphQL schema into TypeScript type aliases,
interfaces, enums, unions and resolver signatures.
"""

__version__ = "0.1.0"
