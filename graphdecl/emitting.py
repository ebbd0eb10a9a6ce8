import asyncio
import logging
import os

from .printing import print_schema


logger = logging.getLogger(__name__)


generated_file_header = """\
# --------------------------------------------
# !!! THIS FILE WAS GENERATED BY GRAPHDECL !!!
# !!! DO NOT MODIFY THIS FILE BY YOURSELF  !!!
# --------------------------------------------
"""


def emit_schema_definition_file(path, schema, print_options=None):
    schema_file_content = generated_file_header + "\n" + print_schema(schema, print_options) + "\n"

    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)

    with open(path, "w", encoding="utf-8") as schema_file:
        schema_file.write(schema_file_content)

    logger.info("Emitted schema definition file to %s", path)


async def emit_schema_definition_file_async(path, schema, print_options=None):
    await asyncio.to_thread(emit_schema_definition_file, path, schema, print_options)
