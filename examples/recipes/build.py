import json
import logging
import os

import graphql

import graphdecl as g


def local_path(path):
    return os.path.join(os.path.dirname(__file__), path)


def main():
    logging.basicConfig(level=logging.DEBUG)

    schema = g.build_schema(
        resolvers=[local_path("resolvers/*.py")],
        sort_schema=True,
        emit_schema_file=local_path("schema.gql"),
    )

    result = graphql.graphql_sync(schema, """
        query {
            recipes(difficulty: medium) {
                title
                averageRating
            }
        }
    """)
    print(json.dumps(result.data, indent=4))


if __name__ == "__main__":
    main()
