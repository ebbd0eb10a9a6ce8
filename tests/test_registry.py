import types

import pytest
from precisely import assert_that, contains_exactly, equal_to

import graphdecl as g


def _resolver_class(name, module_name):
    return g.resolver()(type(name, (object, ), {"__module__": module_name}))


def test_registered_resolvers_keep_registration_order():
    first = _resolver_class("First", __name__)
    second = _resolver_class("Second", __name__)

    registry = g.ResolverRegistry()
    registry.register(second)
    registry.register(first)

    assert_that(registry.resolvers, contains_exactly(second, first))


def test_registering_resolver_twice_registers_it_once():
    resolver_class = _resolver_class("Resolver", __name__)

    registry = g.ResolverRegistry([resolver_class])
    registry.register(resolver_class)

    assert_that(len(registry), equal_to(1))
    assert_that(resolver_class in registry, equal_to(True))


def test_registering_class_without_resolver_declaration_raises_error():
    registry = g.ResolverRegistry()

    error = pytest.raises(g.ConfigurationError, lambda: registry.register(object))

    assert_that(str(error.value), equal_to("<class 'object'> is not a resolver class"))


def test_registering_module_registers_resolvers_defined_in_module():
    module = types.ModuleType("recipes")
    local_resolver = _resolver_class("RecipeResolver", "recipes")
    imported_resolver = _resolver_class("AuthorResolver", "authors")
    module.RecipeResolver = local_resolver
    module.AuthorResolver = imported_resolver
    module.Recipe = type("Recipe", (object, ), {"__module__": "recipes"})

    registry = g.ResolverRegistry()
    registered = registry.register_module(module)

    assert_that(registered, contains_exactly(local_resolver))
    assert_that(registry.resolvers, contains_exactly(local_resolver))
