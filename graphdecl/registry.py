from .declarations import is_resolver
from .errors import ConfigurationError


class ResolverRegistry(object):
    def __init__(self, resolvers=None):
        self._resolvers = []

        if resolvers is not None:
            for resolver_class in resolvers:
                self.register(resolver_class)

    @property
    def resolvers(self):
        return tuple(self._resolvers)

    def register(self, resolver_class):
        if not is_resolver(resolver_class):
            raise ConfigurationError("{!r} is not a resolver class".format(resolver_class))

        if resolver_class not in self._resolvers:
            self._resolvers.append(resolver_class)

        return resolver_class

    def register_module(self, module):
        resolver_classes = [
            value
            for value in vars(module).values()
            if is_resolver(value) and value.__module__ == module.__name__
        ]

        for resolver_class in resolver_classes:
            self.register(resolver_class)

        return resolver_classes

    def __contains__(self, resolver_class):
        return resolver_class in self._resolvers

    def __iter__(self):
        return iter(self._resolvers)

    def __len__(self):
        return len(self._resolvers)

    def __repr__(self):
        return "ResolverRegistry(resolvers={!r})".format(self._resolvers)
