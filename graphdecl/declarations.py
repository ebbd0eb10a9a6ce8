import collections


_undefined = object()

_TYPE_ATTRIBUTE = "__graphdecl_type__"
_RESOLVER_ATTRIBUTE = "__graphdecl_resolver__"
_OPERATION_ATTRIBUTE = "__graphdecl_operation__"


class TypeKind(object):
    object = "object"
    interface = "interface"
    input = "input"


class TypeDefinition(object):
    def __init__(self, kind, name, description, interfaces):
        self.kind = kind
        self.name = name
        self.description = description
        self.interfaces = tuple(interfaces)

    def __repr__(self):
        return "TypeDefinition(kind={!r}, name={!r})".format(self.kind, self.name)


def object_type(name=None, *, description=None, implements=None):
    if implements is None:
        implements = ()

    return _declare_type(TypeKind.object, name=name, description=description, interfaces=implements)


def interface_type(name=None, *, description=None):
    return _declare_type(TypeKind.interface, name=name, description=description, interfaces=())


def input_type(name=None, *, description=None):
    return _declare_type(TypeKind.input, name=name, description=description, interfaces=())


def _declare_type(kind, *, name, description, interfaces):
    def register_type(cls):
        definition = TypeDefinition(
            kind=kind,
            name=cls.__name__ if name is None else name,
            description=description,
            interfaces=interfaces,
        )
        setattr(cls, _TYPE_ATTRIBUTE, definition)
        return cls

    return register_type


def get_type_definition(cls):
    if isinstance(cls, type):
        return cls.__dict__.get(_TYPE_ATTRIBUTE)
    else:
        return None


def field(type, name=None, *, description=None, deprecation_reason=None, params=None, default=_undefined):
    if params is None:
        params = ()

    return Field(
        type=type,
        name=name,
        description=description,
        deprecation_reason=deprecation_reason,
        params=params,
        default=default,
    )


class Field(object):
    """
    A field of a declared type.

    Used as a class attribute, the value is read from the source object.
    Used as a method decorator, the method is called with the source object
    and the field's arguments.
    """

    def __init__(self, type, name, description, deprecation_reason, params, default, func=None, python_name=None):
        self.type = type
        self.name = name
        self.description = description
        self.deprecation_reason = deprecation_reason
        self.params = tuple(params)
        self.default = default
        self.func = func
        self.python_name = python_name

    @property
    def has_default(self):
        return self.default is not _undefined

    def __call__(self, func):
        self.func = func
        self.python_name = func.__name__
        return self

    def __set_name__(self, owner, name):
        if self.python_name is None:
            self.python_name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        elif self.func is not None:
            return self.func.__get__(instance, owner)
        elif self.has_default:
            return self.default
        else:
            raise AttributeError("{!r} has no value for field {}".format(instance, self.python_name))

    def __repr__(self):
        return "Field(python_name={!r}, type={!r})".format(self.python_name, self.type)


def param(name, type, default=_undefined, *, description=None):
    return Parameter(name=name, type=type, default=default, description=description)


class Parameter(object):
    def __init__(self, name, type, default, description):
        self.name = name
        self.type = type
        self.default = default
        self.description = description

    @property
    def has_default(self):
        return self.default is not _undefined

    def __repr__(self):
        return "Parameter(name={!r}, type={!r})".format(self.name, self.type)


def get_fields(cls):
    fields = collections.OrderedDict()

    for klass in reversed(cls.__mro__):
        for value in klass.__dict__.values():
            if isinstance(value, Field):
                fields[value.python_name] = value

    return tuple(fields.values())


def get_interfaces(cls):
    definition = get_type_definition(cls)
    interfaces = list(definition.interfaces)

    for base in cls.__mro__[1:]:
        base_definition = get_type_definition(base)
        if base_definition is not None and base_definition.kind == TypeKind.interface and base not in interfaces:
            interfaces.append(base)

    return tuple(interfaces)


class ResolverDefinition(object):
    def __init__(self, of):
        self.of = of


def resolver(of=None):
    def register_resolver(cls):
        setattr(cls, _RESOLVER_ATTRIBUTE, ResolverDefinition(of=of))
        return cls

    return register_resolver


def get_resolver_definition(cls):
    if isinstance(cls, type):
        return cls.__dict__.get(_RESOLVER_ATTRIBUTE)
    else:
        return None


def is_resolver(value):
    return get_resolver_definition(value) is not None


class OperationKind(object):
    query = "query"
    mutation = "mutation"
    field_resolver = "field_resolver"


class Operation(object):
    def __init__(self, kind, field):
        self.kind = kind
        self.field = field


def query(type, name=None, **kwargs):
    return _declare_operation(OperationKind.query, type, name, kwargs)


def mutation(type, name=None, **kwargs):
    return _declare_operation(OperationKind.mutation, type, name, kwargs)


def field_resolver(type, name=None, **kwargs):
    return _declare_operation(OperationKind.field_resolver, type, name, kwargs)


def _declare_operation(kind, type, name, kwargs):
    def register_operation(func):
        operation_field = field(type, name, **kwargs)(func)
        setattr(func, _OPERATION_ATTRIBUTE, Operation(kind=kind, field=operation_field))
        return func

    return register_operation


def get_operations(cls, kind):
    operations = collections.OrderedDict()

    for klass in reversed(cls.__mro__):
        for attribute_name, value in klass.__dict__.items():
            operation = getattr(value, _OPERATION_ATTRIBUTE, None)
            if operation is not None:
                operations[attribute_name] = operation

    return tuple(
        operation.field
        for operation in operations.values()
        if operation.kind == kind
    )
