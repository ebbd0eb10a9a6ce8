from precisely import assert_that, equal_to

from graphdecl.cli import main
from graphdecl.emitting import generated_file_header


RESOLVER_SOURCE = """\
import graphdecl as g


@g.resolver()
class CliResolver(object):
    @g.query(g.String, description="Zebra")
    def zebra(self):
        return "z"

    @g.query(g.String)
    def aardvark(self):
        return "a"
"""


def test_schema_is_emitted_from_resolver_globs(tmp_path):
    (tmp_path / "resolvers.py").write_text(RESOLVER_SOURCE, encoding="utf-8")
    out = tmp_path / "out" / "schema.gql"

    exit_code = main([str(tmp_path / "*.py"), "--out", str(out), "--sort", "--comment-descriptions"])

    assert_that(exit_code, equal_to(0))
    assert_that(out.read_text(encoding="utf-8"), equal_to(
        generated_file_header + "\n"
        "type Query {\n"
        "  aardvark: String!\n"
        "\n"
        "  # Zebra\n"
        "  zebra: String!\n"
        "}\n"
    ))


def test_error_is_reported_when_glob_matches_nothing(tmp_path, capsys):
    exit_code = main([str(tmp_path / "*.py"), "--out", str(tmp_path / "schema.gql")])

    assert_that(exit_code, equal_to(1))
    assert "no resolver files match glob" in capsys.readouterr().err
    assert_that((tmp_path / "schema.gql").exists(), equal_to(False))
