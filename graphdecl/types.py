import graphql


class ScalarType(object):
    def __init__(self, name, graphql_type):
        self.name = name
        self.graphql_type = graphql_type

    def __repr__(self):
        return "ScalarType(name={!r})".format(self.name)

    def __str__(self):
        return self.name


Boolean = ScalarType("Boolean", graphql.GraphQLBoolean)
Float = ScalarType("Float", graphql.GraphQLFloat)
ID = ScalarType("ID", graphql.GraphQLID)
Int = ScalarType("Int", graphql.GraphQLInt)
String = ScalarType("String", graphql.GraphQLString)


class EnumType(object):
    def __init__(self, enum, description=None):
        self.enum = enum
        self.description = description

    @property
    def name(self):
        return self.enum.__name__

    def __eq__(self, other):
        if isinstance(other, EnumType):
            return self.enum == other.enum
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.enum)

    def __repr__(self):
        return "EnumType(enum={!r})".format(self.enum)

    def __str__(self):
        return self.name


class ListType(object):
    def __init__(self, element_type):
        self.element_type = element_type

    def __eq__(self, other):
        if isinstance(other, ListType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.element_type)

    def __repr__(self):
        return "ListType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "List({})".format(self.element_type)


class NullableType(object):
    def __init__(self, element_type):
        self.element_type = element_type

    def __eq__(self, other):
        if isinstance(other, NullableType):
            return self.element_type == other.element_type
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.element_type)

    def __repr__(self):
        return "NullableType(element_type={!r})".format(self.element_type)

    def __str__(self):
        return "Nullable({})".format(self.element_type)
