"""Parser for the java-style ``.properties`` files used by table metadata.

Supports ``key=value`` and ``key: value`` lines, ``#`` and ``!`` comments,
blank lines and the backslash escapes written by ``Properties.store``
(``\\:``, ``\\=``, ``\\\\``, ``\\t`` and ``\\uXXXX`` among them). Line
continuations are not used by table metadata writers and are not handled.
"""

import re

_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_CONTROL_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _unescape_match(match: re.Match[str]) -> str:
    escaped = match.group(1)
    if len(escaped) == 5:
        return chr(int(escaped[1:], 16))
    return _CONTROL_ESCAPES.get(escaped, escaped)


def unescape(text: str) -> str:
    """Resolve backslash escapes in a key or value.

    Unknown escapes stand for the escaped character itself, so ``\\:``
    becomes ``:``. A trailing lone backslash is kept.
    """
    return _ESCAPE_RE.sub(_unescape_match, text)


def _find_separator(line: str) -> int:
    """Position of the first unescaped '=' or ':', or -1."""
    escaped = False
    for pos, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in "=:":
            return pos
    return -1


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dictionary.

    Later duplicates override earlier ones. Lines without a separator map
    the whole (stripped) line to an empty value.

    Args:
        text: Content of a properties file.

    Returns:
        Dictionary of property names to values.
    """
    result: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in "#!":
            continue

        sep = _find_separator(line)
        if sep == -1:
            result[unescape(line)] = ""
            continue

        result[unescape(line[:sep].strip())] = unescape(line[sep + 1 :].strip())
    return result
