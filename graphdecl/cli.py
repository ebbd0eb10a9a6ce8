import argparse
import logging
import os
import sys

from .build import build_schema
from .errors import GraphError
from .options import default_schema_file_name, EmitSchemaFileOptions


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="graphdecl-emit-schema",
        description="Build a GraphQL schema from resolver files and write it as SDL.",
    )
    parser.add_argument("globs", nargs="+", metavar="GLOB", help="glob pattern of resolver files")
    parser.add_argument("--out", default=default_schema_file_name, help="output path (default: %(default)s)")
    parser.add_argument("--sort", action="store_true", help="sort types and fields lexicographically")
    parser.add_argument(
        "--comment-descriptions",
        action="store_true",
        help="print descriptions as # comments",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Resolver files may import modules relative to the working directory.
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())

    try:
        build_schema(
            resolver_globs=args.globs,
            sort_schema=args.sort,
            emit_schema_file=EmitSchemaFileOptions(
                path=args.out,
                comment_descriptions=args.comment_descriptions,
            ),
        )
    except GraphError as error:
        print("error: {}".format(error), file=sys.stderr)
        return 1

    return 0
