import json

import graphql


class PrintSchemaOptions(object):
    def __init__(self, *, comment_descriptions=False):
        self.comment_descriptions = comment_descriptions

    def __eq__(self, other):
        if isinstance(other, PrintSchemaOptions):
            return vars(self) == vars(other)
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return "{}({})".format(type(self).__name__, ", ".join(
            "{}={!r}".format(key, value)
            for key, value in vars(self).items()
        ))


default_print_schema_options = PrintSchemaOptions()


def print_schema(schema, options=None):
    if options is None:
        options = default_print_schema_options

    printed_schema = graphql.print_schema(schema)

    if options.comment_descriptions:
        return _descriptions_to_comments(printed_schema)
    else:
        return printed_schema


def _descriptions_to_comments(printed_schema):
    lines = iter(printed_schema.split("\n"))
    result = []

    for line in lines:
        content = line.lstrip(" ")
        indentation = line[:len(line) - len(content)]

        if content.startswith('"""'):
            block = content[3:]
            block_lines = []
            while not _closes_block(block):
                block_lines.append(block)
                block = next(lines)[len(indentation):]
            block_lines.append(block[:-3])

            # Opening and closing quotes on their own lines leave empty edges.
            if len(block_lines) > 1 and block_lines[0] == "":
                block_lines.pop(0)
            if len(block_lines) > 1 and block_lines[-1] == "":
                block_lines.pop()

            result += [
                _comment(indentation, block_line.replace('\\"""', '"""'))
                for block_line in block_lines
            ]

        elif content.startswith('"'):
            result.append(_comment(indentation, json.loads(content)))

        else:
            result.append(line)

    return "\n".join(result)


def _comment(indentation, text):
    if text:
        return "{}# {}".format(indentation, text)
    else:
        return "{}#".format(indentation)


def _closes_block(block):
    # Quotes inside a description are printed escaped as \"""
    return block.endswith('"""') and not block.endswith('\\"""')
