import collections.abc
import os

from .errors import ConfigurationError
from .generator import SchemaGeneratorOptions
from .printing import default_print_schema_options, PrintSchemaOptions
from .registry import ResolverRegistry


default_schema_file_name = "schema.gql"


class EmitSchemaFileOptions(PrintSchemaOptions):
    def __init__(self, *, path=None, comment_descriptions=False):
        super().__init__(comment_descriptions=comment_descriptions)
        self.path = path


class EmitSchemaFileKind(object):
    disabled = "disabled"
    default_path = "default_path"
    path_only = "path_only"
    full = "full"


class EmitSchemaFile(object):
    def __init__(self, kind, path=None, print_options=None):
        self.kind = kind
        self.path = path
        self.print_options = print_options

    @property
    def enabled(self):
        return self.kind != EmitSchemaFileKind.disabled

    def __repr__(self):
        return "EmitSchemaFile(kind={!r}, path={!r}, print_options={!r})".format(
            self.kind,
            self.path,
            self.print_options,
        )


def default_schema_file_path():
    return os.path.join(os.getcwd(), default_schema_file_name)


def resolve_emit_schema_file(value):
    if isinstance(value, collections.abc.Mapping):
        value = _emit_schema_file_options_from_mapping(value)

    if isinstance(value, EmitSchemaFile):
        return value

    elif isinstance(value, EmitSchemaFileOptions):
        return EmitSchemaFile(
            EmitSchemaFileKind.full,
            path=value.path or default_schema_file_path(),
            print_options=value,
        )

    elif value is True:
        return EmitSchemaFile(
            EmitSchemaFileKind.default_path,
            path=default_schema_file_path(),
            print_options=default_print_schema_options,
        )

    elif isinstance(value, (str, os.PathLike)) and value:
        return EmitSchemaFile(
            EmitSchemaFileKind.path_only,
            path=value,
            print_options=default_print_schema_options,
        )

    elif not value:
        return EmitSchemaFile(EmitSchemaFileKind.disabled)

    else:
        raise ConfigurationError("unsupported emit_schema_file value: {!r}".format(value))


def _emit_schema_file_options_from_mapping(mapping):
    try:
        return EmitSchemaFileOptions(**mapping)
    except TypeError as error:
        raise ConfigurationError("invalid emit_schema_file options: {}".format(error)) from error


class BuildSchemaOptions(object):
    def __init__(
        self,
        *,
        resolvers=None,
        resolver_classes=None,
        resolver_globs=None,
        emit_schema_file=None,
        sort_schema=False,
        orphaned_types=None,
        container=None,
        skip_check=False,
        registry=None,
    ):
        if resolvers is not None and (resolver_classes is not None or resolver_globs is not None):
            raise ConfigurationError("`resolvers` cannot be combined with `resolver_classes` or `resolver_globs`")

        for option_name, value in (
            ("resolvers", resolvers),
            ("resolver_classes", resolver_classes),
            ("resolver_globs", resolver_globs),
        ):
            if isinstance(value, (str, os.PathLike)):
                raise ConfigurationError(
                    "`{}` must be a list, not a single value: {!r}".format(option_name, value),
                )

        if registry is None:
            registry = ResolverRegistry()

        self.resolvers = resolvers
        self.resolver_classes = resolver_classes
        self.resolver_globs = resolver_globs
        self.emit_schema_file = resolve_emit_schema_file(emit_schema_file)
        self.sort_schema = sort_schema
        self.orphaned_types = orphaned_types
        self.container = container
        self.skip_check = skip_check
        self.registry = registry

    def generator_options(self, resolvers):
        return SchemaGeneratorOptions(
            resolvers=resolvers,
            orphaned_types=self.orphaned_types,
            container=self.container,
            skip_check=self.skip_check,
            registry=self.registry,
        )
