"""
Line based detection of exported TypeScript classes.

This is not a parser: the first line containing the marker wins and the
class name is the whitespace-separated token right after "class". A file that
exports several classes therefore registers only the first one.
"""

from __future__ import annotations

EXPORT_MARKER = "export class "


def extract_exported_class(text: str) -> str | None:
    """Return the name of the first exported class in a source text.

    Args:
        text: Contents of a TypeScript source file

    Returns:
        The class name, or None if no line contains the marker
    """
    for line in text.split("\n"):
        if EXPORT_MARKER not in line:
            continue

        # Tokens are counted from the marker so indentation does not shift them
        tokens = line[line.index(EXPORT_MARKER) :].split()
        # "export class" alone on a line: nothing to register for this file
        return tokens[2] if len(tokens) > 2 else None

    return None
