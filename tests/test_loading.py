import sys

import pytest
from precisely import assert_that, contains_exactly, equal_to, has_attrs

import graphdecl as g
from graphdecl.loading import load_module_from_path


def _write_resolver_file(path, class_name, query_name):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        "import graphdecl as g\n"
        "\n"
        "\n"
        "@g.resolver()\n"
        "class {class_name}(object):\n"
        "    @g.query(g.String)\n"
        "    def {query_name}(self):\n"
        "        return {query_name!r}\n".format(class_name=class_name, query_name=query_name),
        encoding="utf-8",
    )


def test_resolver_classes_defined_in_matching_files_are_registered(tmp_path):
    _write_resolver_file(tmp_path / "recipes.py", "RecipeResolver", "recipes")
    _write_resolver_file(tmp_path / "authors.py", "AuthorResolver", "authors")

    registry = g.ResolverRegistry()
    resolver_classes = g.load_resolvers_from_glob(str(tmp_path / "*.py"), registry=registry)

    assert_that(resolver_classes, contains_exactly(
        has_attrs(__name__="AuthorResolver"),
        has_attrs(__name__="RecipeResolver"),
    ))
    assert_that(registry.resolvers, contains_exactly(
        has_attrs(__name__="AuthorResolver"),
        has_attrs(__name__="RecipeResolver"),
    ))


def test_recursive_glob_matches_files_in_subdirectories(tmp_path):
    _write_resolver_file(tmp_path / "app" / "recipes" / "resolvers.py", "RecipeResolver", "recipes")

    registry = g.ResolverRegistry()
    g.load_resolvers_from_glob(str(tmp_path / "app" / "**" / "*.py"), registry=registry)

    assert_that(registry.resolvers, contains_exactly(has_attrs(__name__="RecipeResolver")))


def test_files_other_than_python_modules_are_ignored(tmp_path):
    _write_resolver_file(tmp_path / "recipes.py", "RecipeResolver", "recipes")
    (tmp_path / "notes.txt").write_text("not python", encoding="utf-8")

    registry = g.ResolverRegistry()
    g.load_resolvers_from_glob(str(tmp_path / "*"), registry=registry)

    assert_that(registry.resolvers, contains_exactly(has_attrs(__name__="RecipeResolver")))


def test_glob_without_matching_files_raises_load_error(tmp_path):
    pattern = str(tmp_path / "missing" / "*.py")

    error = pytest.raises(
        g.ResolverLoadError,
        lambda: g.load_resolvers_from_glob(pattern, registry=g.ResolverRegistry()),
    )

    assert_that(str(error.value), equal_to("no resolver files match glob: {}".format(pattern)))


def test_error_raised_by_resolver_module_propagates_unchanged(tmp_path):
    path = tmp_path / "broken.py"
    path.write_text("raise ZeroDivisionError('broken resolver module')\n", encoding="utf-8")
    modules_before = set(sys.modules)

    error = pytest.raises(
        ZeroDivisionError,
        lambda: g.load_resolvers_from_glob(str(path), registry=g.ResolverRegistry()),
    )

    assert_that(str(error.value), equal_to("broken resolver module"))
    assert_that(set(sys.modules) - modules_before, equal_to(set()))


def test_loading_same_file_twice_reuses_module(tmp_path):
    path = tmp_path / "recipes.py"
    _write_resolver_file(path, "RecipeResolver", "recipes")

    first = load_module_from_path(str(path))
    second = load_module_from_path(str(path))

    assert first is second


def test_separate_registries_share_loaded_resolver_classes(tmp_path):
    _write_resolver_file(tmp_path / "recipes.py", "RecipeResolver", "recipes")
    pattern = str(tmp_path / "*.py")

    first_registry = g.ResolverRegistry()
    second_registry = g.ResolverRegistry()
    g.load_resolvers_from_glob(pattern, registry=first_registry)
    g.load_resolvers_from_glob(pattern, registry=second_registry)

    assert_that(first_registry.resolvers, equal_to(second_registry.resolvers))
    assert_that(len(second_registry), equal_to(1))
