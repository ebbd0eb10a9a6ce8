import os
import pathlib

import pytest
from precisely import assert_that, equal_to, has_attrs

import graphdecl as g
from graphdecl.printing import default_print_schema_options


def test_emission_is_disabled_when_emit_schema_file_is_falsy():
    for value in [None, False, ""]:
        emit_schema_file = g.resolve_emit_schema_file(value)

        assert_that(emit_schema_file, has_attrs(kind="disabled", enabled=False, path=None))


def test_true_emits_schema_to_default_path_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    emit_schema_file = g.resolve_emit_schema_file(True)

    assert_that(emit_schema_file, has_attrs(
        kind="default_path",
        enabled=True,
        path=os.path.join(os.getcwd(), "schema.gql"),
        print_options=default_print_schema_options,
    ))


def test_string_is_used_verbatim_as_path():
    emit_schema_file = g.resolve_emit_schema_file("out/s.gql")

    assert_that(emit_schema_file, has_attrs(
        kind="path_only",
        path="out/s.gql",
        print_options=default_print_schema_options,
    ))


def test_path_object_is_used_as_path():
    path = pathlib.Path("out") / "s.gql"

    emit_schema_file = g.resolve_emit_schema_file(path)

    assert_that(emit_schema_file, has_attrs(kind="path_only", path=path))


def test_options_object_provides_path_and_is_used_as_print_options():
    options = g.EmitSchemaFileOptions(path="out/s.gql", comment_descriptions=True)

    emit_schema_file = g.resolve_emit_schema_file(options)

    assert_that(emit_schema_file, has_attrs(kind="full", path="out/s.gql"))
    assert emit_schema_file.print_options is options


def test_options_object_with_empty_path_uses_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    emit_schema_file = g.resolve_emit_schema_file(g.EmitSchemaFileOptions(path=""))

    assert_that(emit_schema_file, has_attrs(kind="full", path=os.path.join(os.getcwd(), "schema.gql")))


def test_options_object_without_path_uses_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    options = g.EmitSchemaFileOptions(comment_descriptions=True)

    emit_schema_file = g.resolve_emit_schema_file(options)

    assert_that(emit_schema_file, has_attrs(kind="full", path=os.path.join(os.getcwd(), "schema.gql")))
    assert emit_schema_file.print_options is options


def test_mapping_is_converted_to_options_object():
    emit_schema_file = g.resolve_emit_schema_file({"path": "out/s.gql", "comment_descriptions": True})

    assert_that(emit_schema_file, has_attrs(
        kind="full",
        path="out/s.gql",
        print_options=equal_to(g.EmitSchemaFileOptions(path="out/s.gql", comment_descriptions=True)),
    ))


def test_mapping_with_unknown_keys_is_configuration_error():
    pytest.raises(g.ConfigurationError, lambda: g.resolve_emit_schema_file({"colour": "blue"}))


def test_unsupported_value_is_configuration_error():
    error = pytest.raises(g.ConfigurationError, lambda: g.resolve_emit_schema_file(42))

    assert_that(str(error.value), equal_to("unsupported emit_schema_file value: 42"))


def test_build_options_resolve_emit_schema_file_once():
    options = g.BuildSchemaOptions(resolvers=["resolvers/*.py"], emit_schema_file="out/s.gql")

    assert_that(options.emit_schema_file, has_attrs(kind="path_only", path="out/s.gql"))


def test_build_options_have_their_own_registry_by_default():
    first = g.BuildSchemaOptions(resolvers=["resolvers/*.py"])
    second = g.BuildSchemaOptions(resolvers=["resolvers/*.py"])

    assert first.registry is not second.registry


def test_resolvers_cannot_be_combined_with_explicit_resolver_fields():
    pytest.raises(
        g.ConfigurationError,
        lambda: g.BuildSchemaOptions(resolvers=["resolvers/*.py"], resolver_globs=["more/*.py"]),
    )


def test_generator_options_substitute_loaded_resolvers():
    registry = g.ResolverRegistry()
    options = g.BuildSchemaOptions(
        resolvers=["resolvers/*.py"],
        orphaned_types=[int],
        skip_check=True,
        registry=registry,
    )

    generator_options = options.generator_options(None)

    assert_that(generator_options, has_attrs(
        resolvers=None,
        orphaned_types=(int, ),
        skip_check=True,
        registry=registry,
    ))
