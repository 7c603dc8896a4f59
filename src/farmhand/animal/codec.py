"""
Line codec for animals.

One animal per line, fields in the order id, name, age, species:

    1,Bessie,4,Cow
    2,"Bo, the ""Rex"" of the yard",3,Dog

Text fields holding a comma or a double quote are wrapped in double quotes
and inner quotes are doubled. Numbers are never quoted.

Decoding is best-effort: an unterminated quote simply runs to the end of the
line, and fields beyond the fourth are ignored. Numbers must be plain ASCII
digits with an optional sign.
"""

import re

from farmhand.animal.record import Animal
from farmhand.errors import ParseError

FIELD_COUNT = 4

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def _quote(value: str) -> str:
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def encode(animal: Animal) -> str:
    """Render an animal as a single line, without terminator."""
    return f"{animal.id},{_quote(animal.name)},{animal.age},{_quote(animal.species)}"


def split_fields(line: str) -> list[str]:
    """Split a line on unquoted commas, resolving quote escapes."""
    fields = []
    current = []
    in_quotes = False
    i = 0
    while i < len(line):
        c = line[i]
        if c == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif c == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(c)
        i += 1
    fields.append("".join(current))
    return fields


def _parse_int(field: str, label: str) -> int:
    if not _INTEGER.fullmatch(field):
        raise ParseError(f"{label} is not an integer: {field!r}")
    return int(field)


def decode(line: str) -> Animal:
    """
    Parse one stored line into an Animal.

    Raises:
        ParseError: if the line has fewer than four fields, or the id or age
            field is not an integer.
    """
    raw = line.rstrip("\r\n")
    fields = split_fields(raw)
    if len(fields) < FIELD_COUNT:
        raise ParseError(f"expected {FIELD_COUNT} fields, got {len(fields)}: {raw!r}")

    id_field, name, age_field, species = fields[:FIELD_COUNT]
    return Animal(
        id=_parse_int(id_field, "id"),
        name=name,
        age=_parse_int(age_field, "age"),
        species=species,
    )
