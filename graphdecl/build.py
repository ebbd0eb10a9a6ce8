import logging

from graphql import lexicographic_sort_schema

from . import iterables
from .emitting import emit_schema_definition_file, emit_schema_definition_file_async
from .errors import ConfigurationError
from .generator import generate_from_metadata, generate_from_metadata_async
from .loading import load_resolvers_from_glob
from .options import BuildSchemaOptions


logger = logging.getLogger(__name__)


def build_schema(options=None, **kwargs):
    options = _to_build_schema_options(options, kwargs)
    resolvers = load_resolvers(options)
    unsorted_schema = generate_from_metadata(options.generator_options(resolvers))
    schema = _sort_schema(options, unsorted_schema)

    emit_schema_file = options.emit_schema_file
    if emit_schema_file.enabled:
        emit_schema_definition_file(emit_schema_file.path, schema, emit_schema_file.print_options)

    return schema


async def build_schema_async(options=None, **kwargs):
    options = _to_build_schema_options(options, kwargs)
    resolvers = load_resolvers(options)
    unsorted_schema = await generate_from_metadata_async(options.generator_options(resolvers))
    schema = _sort_schema(options, unsorted_schema)

    emit_schema_file = options.emit_schema_file
    if emit_schema_file.enabled:
        await emit_schema_definition_file_async(emit_schema_file.path, schema, emit_schema_file.print_options)

    return schema


def load_resolvers(options):
    if options.resolvers is not None:
        return _load_resolver_list(options.resolvers, registry=options.registry)

    resolver_classes = options.resolver_classes or ()
    resolver_globs = options.resolver_globs or ()

    if not resolver_classes and not resolver_globs:
        raise ConfigurationError("No resolvers found in build_schema options: pass `resolvers`, `resolver_classes` or `resolver_globs`")

    for pattern in resolver_globs:
        load_resolvers_from_glob(pattern, registry=options.registry)

    if resolver_classes:
        return iterables.unique(list(resolver_classes) + list(options.registry.resolvers))
    else:
        return None


def _load_resolver_list(resolvers, *, registry):
    if len(resolvers) == 0:
        raise ConfigurationError("Empty `resolvers` list found in build_schema options")

    if any(isinstance(resolver, str) for resolver in resolvers):
        patterns, ignored = iterables.partition(lambda resolver: isinstance(resolver, str), resolvers)
        if ignored:
            logger.warning(
                "`resolvers` mixes glob patterns and resolver classes: ignoring %d resolver classes %r",
                len(ignored),
                ignored,
            )

        for pattern in patterns:
            load_resolvers_from_glob(pattern, registry=registry)

        return None

    return resolvers


def _sort_schema(options, schema):
    if options.sort_schema:
        return lexicographic_sort_schema(schema)
    else:
        return schema


def _to_build_schema_options(options, kwargs):
    if options is None:
        return BuildSchemaOptions(**kwargs)
    elif kwargs:
        raise ConfigurationError("pass either a BuildSchemaOptions object or keyword arguments, not both")
    else:
        return options
