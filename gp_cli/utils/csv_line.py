"""Line-oriented CSV tokenizing."""

from __future__ import annotations

from typing import List


def parse_csv_line(line: str) -> List[str]:
    """Split one CSV line into unescaped fields.

    Quoted fields may contain commas; a doubled quote inside a quoted field is
    a literal quote. Malformed quoting is tolerated: an unbalanced quote simply
    leaves the rest of the line in one field.
    """
    fields: List[str] = []
    current: List[str] = []
    inside_quotes = False
    index = 0
    length = len(line)

    while index < length:
        char = line[index]
        if char == '"':
            if inside_quotes and index + 1 < length and line[index + 1] == '"':
                current.append('"')
                index += 1
            else:
                inside_quotes = not inside_quotes
        elif char == "," and not inside_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1

    fields.append("".join(current))
    return fields


def flatten_line_breaks(text: str) -> str:
    """Replace every line boundary that str.splitlines honours with a space."""
    return " ".join(text.splitlines())
