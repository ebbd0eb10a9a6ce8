import asyncio
import collections
import collections.abc
import logging

import graphql
from graphql.pyutils import Undefined

from . import declarations, iterables
from .declarations import OperationKind, TypeKind
from .errors import SchemaGenerationError
from .naming import snake_case_to_camel_case
from .registry import ResolverRegistry
from .types import EnumType, ListType, NullableType, ScalarType


logger = logging.getLogger(__name__)


class SchemaGeneratorOptions(object):
    def __init__(self, *, resolvers=None, orphaned_types=None, container=None, skip_check=False, registry=None):
        if orphaned_types is None:
            orphaned_types = ()
        if registry is None:
            registry = ResolverRegistry()

        self.resolvers = resolvers
        self.orphaned_types = tuple(orphaned_types)
        self.container = container
        self.skip_check = skip_check
        self.registry = registry


def generate_from_metadata(options):
    if options.resolvers is None:
        resolver_classes = options.registry.resolvers
    else:
        resolver_classes = tuple(options.resolvers)

    schema = create_graphql_schema(
        resolver_classes,
        orphaned_types=options.orphaned_types,
        container=options.container,
    )

    if not options.skip_check:
        errors = graphql.validate_schema(schema)
        if errors:
            raise SchemaGenerationError(
                "generated schema is invalid:\n{}".format("\n".join(error.message for error in errors)),
                errors=errors,
            )

    logger.debug(
        "Generated schema with %d types from %d resolver classes",
        len(schema.type_map),
        len(resolver_classes),
    )
    return schema


async def generate_from_metadata_async(options):
    return await asyncio.to_thread(generate_from_metadata, options)


def create_graphql_schema(resolver_classes, *, orphaned_types=(), container=None):
    if container is None:
        container = _create_default_container()

    for resolver_class in resolver_classes:
        if not declarations.is_resolver(resolver_class):
            raise SchemaGenerationError("{!r} is not a resolver class".format(resolver_class))

    graphql_types = {}
    type_names = {"Query": "the query root type", "Mutation": "the mutation root type"}
    pending_classes = collections.deque()
    fields_by_class = {}
    resolved_fields = {}

    for resolver_class in resolver_classes:
        resolver_fields = declarations.get_operations(resolver_class, OperationKind.field_resolver)
        if resolver_fields:
            of = declarations.get_resolver_definition(resolver_class).of
            if of is None:
                raise SchemaGenerationError(
                    "{} declares field resolvers but no type: use @resolver(of=...)".format(resolver_class.__name__),
                )
            resolved_fields.setdefault(of, []).extend(
                (resolver_class, resolver_field)
                for resolver_field in resolver_fields
            )

    def to_graphql_type(graph_type, *, is_input):
        graph_type = _resolve_thunk(graph_type)

        if isinstance(graph_type, NullableType):
            graphql_type = to_graphql_type(graph_type.element_type, is_input=is_input)
            return graphql.get_nullable_type(graphql_type)

        elif isinstance(graph_type, ListType):
            element_type = to_graphql_type(graph_type.element_type, is_input=is_input)
            return graphql.GraphQLNonNull(graphql.GraphQLList(element_type))

        else:
            return graphql.GraphQLNonNull(to_graphql_named_type(graph_type, is_input=is_input))

    def to_graphql_named_type(graph_type, *, is_input):
        if isinstance(graph_type, ScalarType):
            return graph_type.graphql_type

        if graph_type not in graphql_types:
            graphql_types[graph_type] = generate_graphql_type(graph_type)

        graphql_type = graphql_types[graph_type]

        if is_input is True and not graphql.is_input_type(graphql_type):
            raise SchemaGenerationError("{} cannot be used as an input type".format(graphql_type.name))
        elif is_input is False and not graphql.is_output_type(graphql_type):
            raise SchemaGenerationError("{} cannot be used as an output type".format(graphql_type.name))
        else:
            return graphql_type

    def generate_graphql_type(graph_type):
        if isinstance(graph_type, EnumType):
            graphql_type = graphql.GraphQLEnumType(
                graph_type.name,
                values=iterables.to_dict(
                    (member.name, graphql.GraphQLEnumValue(member))
                    for member in graph_type.enum
                ),
                description=graph_type.description,
            )
            claim_name(graphql_type.name, graph_type)
            return graphql_type

        definition = declarations.get_type_definition(graph_type)
        if definition is None:
            raise SchemaGenerationError("unsupported type: {!r}".format(graph_type))

        claim_name(definition.name, graph_type)
        pending_classes.append(graph_type)

        def fields():
            return fields_by_class[graph_type]

        if definition.kind == TypeKind.input:
            return graphql.GraphQLInputObjectType(
                name=definition.name,
                fields=fields,
                description=definition.description,
                out_type=input_object_creator(graph_type),
            )

        elif definition.kind == TypeKind.interface:
            return graphql.GraphQLInterfaceType(
                name=definition.name,
                fields=fields,
                description=definition.description,
                resolve_type=resolve_declared_type,
            )

        else:
            return graphql.GraphQLObjectType(
                name=definition.name,
                fields=fields,
                interfaces=tuple(
                    to_graphql_named_type(_resolve_thunk(interface), is_input=False)
                    for interface in declarations.get_interfaces(graph_type)
                ),
                description=definition.description,
            )

    def claim_name(name, graph_type):
        owner = type_names.setdefault(name, graph_type)
        if owner is not graph_type:
            raise SchemaGenerationError(
                "schema must contain uniquely named types but {!r} and {!r} are both named {}".format(
                    owner,
                    graph_type,
                    name,
                ),
            )

    def generate_fields(cls):
        definition = declarations.get_type_definition(cls)

        if definition.kind == TypeKind.input:
            return _to_field_map(definition.name, [
                (graphql_field_name(graph_field), to_graphql_input_field(graph_field))
                for graph_field in declarations.get_fields(cls)
            ])
        else:
            object_fields = [
                (graphql_field_name(graph_field), to_graphql_field(graph_field, resolve=source_resolver(graph_field)))
                for graph_field in declarations.get_fields(cls)
            ]
            extra_fields = [
                (
                    graphql_field_name(graph_field),
                    to_graphql_field(graph_field, resolve=resolved_field_resolver(resolver_class, graph_field)),
                )
                for resolver_class, graph_field in resolved_fields.get(cls, ())
            ]
            return _to_field_map(definition.name, object_fields + extra_fields)

    def to_graphql_input_field(graph_field):
        graphql_type = to_graphql_type(graph_field.type, is_input=True)

        if graph_field.has_default:
            graphql_type = graphql.get_nullable_type(graphql_type)

        return graphql.GraphQLInputField(
            type_=graphql_type,
            default_value=graph_field.default if graph_field.has_default else Undefined,
            description=graph_field.description,
            deprecation_reason=graph_field.deprecation_reason,
            out_name=graph_field.python_name,
        )

    def to_graphql_field(graph_field, *, resolve):
        return graphql.GraphQLField(
            type_=to_graphql_type(graph_field.type, is_input=False),
            args=_to_argument_map(graphql_field_name(graph_field), [
                (snake_case_to_camel_case(param.name), to_graphql_argument(param))
                for param in graph_field.params
            ]),
            resolve=resolve,
            description=graph_field.description,
            deprecation_reason=graph_field.deprecation_reason,
        )

    def to_graphql_argument(param):
        graphql_type = to_graphql_type(param.type, is_input=True)

        if param.has_default:
            graphql_type = graphql.get_nullable_type(graphql_type)

        return graphql.GraphQLArgument(
            type_=graphql_type,
            default_value=param.default if param.has_default else Undefined,
            description=param.description,
            out_name=param.name,
        )

    def input_object_creator(cls):
        def create(values):
            instance = cls.__new__(cls)
            for graph_field in declarations.get_fields(cls):
                setattr(instance, graph_field.python_name, values.get(graph_field.python_name))
            return instance

        return create

    def resolve_declared_type(value, info, abstract_type):
        for cls in type(value).__mro__:
            definition = declarations.get_type_definition(cls)
            if definition is not None and definition.kind == TypeKind.object:
                return definition.name

        return None

    def source_resolver(graph_field):
        if graph_field.func is None:
            python_name = graph_field.python_name

            def resolve(source, info, **args):
                if isinstance(source, collections.abc.Mapping):
                    return source.get(python_name)
                else:
                    return getattr(source, python_name, None)

        else:
            func = graph_field.func

            def resolve(source, info, **args):
                return func(source, **args)

        return resolve

    def operation_resolver(resolver_class, graph_field):
        python_name = graph_field.python_name

        def resolve(source, info, **args):
            return getattr(container(resolver_class), python_name)(**args)

        return resolve

    def resolved_field_resolver(resolver_class, graph_field):
        python_name = graph_field.python_name

        def resolve(source, info, **args):
            return getattr(container(resolver_class), python_name)(source, **args)

        return resolve

    def operation_fields(type_name, kind):
        return _to_field_map(type_name, [
            (
                graphql_field_name(graph_field),
                to_graphql_field(graph_field, resolve=operation_resolver(resolver_class, graph_field)),
            )
            for resolver_class in resolver_classes
            for graph_field in declarations.get_operations(resolver_class, kind)
        ])

    query_fields = operation_fields("Query", OperationKind.query)
    if not query_fields:
        raise SchemaGenerationError("no queries found in resolvers: a schema requires at least one query")
    mutation_fields = operation_fields("Mutation", OperationKind.mutation)

    for orphaned_type in orphaned_types:
        to_graphql_named_type(_resolve_thunk(orphaned_type), is_input=None)

    for of in resolved_fields:
        to_graphql_named_type(of, is_input=False)

    while pending_classes:
        cls = pending_classes.popleft()
        fields_by_class[cls] = generate_fields(cls)

    graphql_query_type = graphql.GraphQLObjectType("Query", fields=query_fields)
    if mutation_fields:
        graphql_mutation_type = graphql.GraphQLObjectType("Mutation", fields=mutation_fields)
    else:
        graphql_mutation_type = None

    return graphql.GraphQLSchema(
        query=graphql_query_type,
        mutation=graphql_mutation_type,
        types=tuple(graphql_types.values()),
    )


def graphql_field_name(graph_field):
    if graph_field.name is None:
        return snake_case_to_camel_case(graph_field.python_name)
    else:
        return graph_field.name


def _resolve_thunk(graph_type):
    if callable(graph_type) and not isinstance(graph_type, type):
        return graph_type()
    else:
        return graph_type


def _create_default_container():
    instances = {}

    def get(resolver_class):
        if resolver_class not in instances:
            instances[resolver_class] = resolver_class()

        return instances[resolver_class]

    return get


def _to_field_map(type_name, fields):
    field_map = {}

    for field_name, graphql_field in fields:
        if field_name in field_map:
            raise SchemaGenerationError("{} has more than one field named {}".format(type_name, field_name))

        field_map[field_name] = graphql_field

    return field_map


def _to_argument_map(field_name, arguments):
    argument_map = {}

    for argument_name, graphql_argument in arguments:
        if argument_name in argument_map:
            raise SchemaGenerationError("{} has more than one argument named {}".format(field_name, argument_name))

        argument_map[argument_name] = graphql_argument

    return argument_map
