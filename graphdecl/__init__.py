from .build import build_schema, build_schema_async, load_resolvers
from .declarations import (
    field,
    field_resolver,
    input_type,
    interface_type,
    mutation,
    object_type,
    param,
    query,
    resolver,
)
from .emitting import emit_schema_definition_file, emit_schema_definition_file_async
from .errors import ConfigurationError, GraphError, ResolverLoadError, SchemaGenerationError
from .generator import generate_from_metadata, generate_from_metadata_async, SchemaGeneratorOptions
from .loading import load_resolvers_from_glob
from .options import BuildSchemaOptions, EmitSchemaFile, EmitSchemaFileOptions, resolve_emit_schema_file
from .printing import print_schema, PrintSchemaOptions
from .registry import ResolverRegistry
from .types import (
    Boolean,
    EnumType,
    Float,
    ID,
    Int,
    ListType,
    NullableType,
    String,
)


__all__ = [
    "build_schema",
    "build_schema_async",
    "load_resolvers",

    "field",
    "field_resolver",
    "input_type",
    "interface_type",
    "mutation",
    "object_type",
    "param",
    "query",
    "resolver",

    "emit_schema_definition_file",
    "emit_schema_definition_file_async",

    "ConfigurationError",
    "GraphError",
    "ResolverLoadError",
    "SchemaGenerationError",

    "generate_from_metadata",
    "generate_from_metadata_async",
    "SchemaGeneratorOptions",

    "load_resolvers_from_glob",

    "BuildSchemaOptions",
    "EmitSchemaFile",
    "EmitSchemaFileOptions",
    "resolve_emit_schema_file",

    "print_schema",
    "PrintSchemaOptions",

    "ResolverRegistry",

    "Boolean",
    "EnumType",
    "Float",
    "ID",
    "Int",
    "ListType",
    "NullableType",
    "String",
]
