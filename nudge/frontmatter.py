"""Simple YAML frontmatter parser and writer (no pyyaml dependency).

Only flat ``key: value`` pairs are understood, plus one level of indented
``sub: value`` lines under a key with no value of its own (the ``tools`` and
``permission`` tables of agent files). Sub-values are kept as raw text.
"""

import math
import re
from collections.abc import Mapping

FieldValue = str | bool | float | dict[str, str]
Frontmatter = dict[str, FieldValue]

_FRONTMATTER_RE = re.compile(r"^---\r?\n(?:(.*?)\r?\n)??---(?:\r?\n|\Z)", re.DOTALL)

# Full-string decimal literal. float() alone would also accept "inf", "nan"
# and "1_000", which must stay strings.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_QUOTES = ('"', "'")


def is_number(text: str) -> bool:
    """Return True if text is, in full, a decimal number literal."""
    return _NUMBER_RE.fullmatch(text) is not None


def _coerce(raw: str) -> FieldValue:
    """Type a raw (already trimmed) header value."""
    if len(raw) >= 2 and raw[0] in _QUOTES and raw[0] == raw[-1]:
        return raw[1:-1]
    if raw == "true":
        return True
    if raw == "false":
        return False
    if is_number(raw):
        number = float(raw)
        # Literals past the float range stay strings
        if math.isfinite(number):
            return number
    return raw


def parse_frontmatter(content: str) -> tuple[Frontmatter, str]:
    """Parse YAML frontmatter from content.

    Returns (metadata_dict, body_without_frontmatter).
    If no valid frontmatter, returns ({}, content).
    Lines without a colon are skipped; a repeated key keeps its last value.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}, content

    raw = match.group(1) or ""
    metadata: Frontmatter = {}
    table_key: str | None = None
    table: dict[str, str] = {}
    indent = 0

    for line in raw.splitlines():
        if not line.strip():
            continue
        colon = line.find(":")

        if table_key is not None and line[0].isspace():
            if colon == -1:
                continue
            if not table:
                indent = len(line) - len(line.lstrip())
                metadata[table_key] = table
            # Deeper lines keep their extra indentation in the sub-key
            prefix = line[:indent]
            if prefix.strip():
                sub_key = line[:colon].strip()
            else:
                sub_key = line[indent:colon].rstrip()
            table[sub_key] = line[colon + 1 :].strip()
            continue

        table_key = None
        if colon == -1:
            continue
        key = line[:colon].strip()
        value = line[colon + 1 :].strip()
        if not key:
            continue
        metadata[key] = _coerce(value)
        if not value:
            table_key = key
            table = {}

    body = content[match.end() :]
    return metadata, body


def _needs_quotes(value: str) -> bool:
    """Whether a string would read back as something else if left bare."""
    return (
        value == ""
        or value != value.strip()
        or ":" in value
        or "#" in value
        or value.startswith(_QUOTES)
        or value in ("true", "false")
        or is_number(value)
    )


def _format_scalar(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        return str(value)
    value = str(value)
    if _needs_quotes(value):
        return f'"{value}"'
    return value


def serialize_frontmatter(metadata: Mapping[str, FieldValue | None]) -> str:
    """Render metadata as header lines, without the ``---`` markers.

    ``None`` values are skipped. Strings that would parse back as a boolean,
    a number or header syntax are double-quoted.
    """
    lines = []
    for key, value in metadata.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            lines.append(f"{key}:")
            for sub_key, sub_value in value.items():
                lines.append(f"  {sub_key}: {sub_value}".rstrip())
        else:
            lines.append(f"{key}: {_format_scalar(value)}")
    return "\n".join(lines)


def add_frontmatter(body: str, metadata: Mapping[str, FieldValue | None]) -> str:
    """Prepend YAML frontmatter to body.

    Args:
        body: The document body.
        metadata: Header fields, in output order.

    Returns:
        Content with frontmatter prepended.
    """
    lines = ["---"]
    header = serialize_frontmatter(metadata)
    if header:
        lines.append(header)
    lines.append("---")
    lines.append("")
    return "\n".join(lines) + body


def update_frontmatter(
    content: str, updates: Mapping[str, FieldValue | None]
) -> str:
    """Apply updates to the frontmatter of content, keeping the body as-is.

    A value of ``None`` or ``""`` removes the field. Existing fields keep
    their position; new fields are appended.
    """
    metadata, body = parse_frontmatter(content)
    for key, value in updates.items():
        if value is None or (isinstance(value, str) and value == ""):
            metadata.pop(key, None)
        else:
            metadata[key] = value
    return add_frontmatter(body, metadata)
