"""
Front-matter parsing for CMS-authored posts.

A front-matter document looks like:

    ---
    title: "Hello World"
    date: 2025-01-15
    summary: First post
    tags: [announcement, blog]
    ---
    Body in Markdown or HTML...

Only the flat `key: value` dialect the CMS writes is supported, not YAML.
"""

import re
from dataclasses import dataclass
from typing import Optional


DELIMITER = '---'

RECOGNIZED_KEYS = ('title', 'date', 'summary', 'tags')


@dataclass
class FrontMatter:
    """Metadata block plus the body that follows it."""
    metadata: dict
    body: str


def has_front_matter_delimiter(content: str) -> bool:
    """True if the file looks like an unwrapped CMS document."""
    return content.startswith(DELIMITER)


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == DELIMITER


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def parse_value(value: str):
    """Parse one metadata value: quoted string, [list] or bare string.

    Only a bare [...] is a list; "[draft]" in quotes stays a string.
    """
    value = value.strip()

    if value.startswith('[') and value.endswith(']'):
        inner = value[1:-1]
        if not inner.strip():
            return []
        return [item.strip().strip('"\'').strip() for item in inner.split(',')]

    return _strip_quotes(value)


def metadata_text(metadata: dict, key: str, default: str = '') -> str:
    """A metadata value as text; list values are joined with ', '."""
    value = metadata.get(key)
    if isinstance(value, (list, tuple)):
        value = ', '.join(str(v) for v in value if str(v).strip())
    return str(value) if value else default


def parse_front_matter(content: str) -> Optional[FrontMatter]:
    """Split a document into metadata and body.

    Returns None when the content does not open with a `---` line or the
    block is never closed; the caller then treats the file as HTML.
    """
    lines = content.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        return None

    for end, line in enumerate(lines[1:], start=1):
        if _is_delimiter(line):
            break
    else:
        return None

    metadata = {}
    for line in lines[1:end]:
        if ':' not in line:
            continue
        key, _, value = line.partition(':')
        key = key.strip()
        if not key:
            continue
        metadata[key] = parse_value(value)

    body = ''.join(lines[end + 1:])
    return FrontMatter(metadata=metadata, body=body)


def _format_value(value) -> str:
    if isinstance(value, (list, tuple)):
        return '[' + ', '.join(str(v) for v in value) + ']'
    return f'"{value}"'


def dump_front_matter(metadata: dict, body: str = '') -> str:
    """Serialize metadata (and an optional body) back to a document.

    Strings are double-quoted and lists use the bracket form, so list
    elements must not contain commas or quotes.
    """
    lines = [DELIMITER]
    for key, value in metadata.items():
        if re.search(r'[:\n]', str(key)):
            raise ValueError(f"Invalid front-matter key: {key!r}")
        lines.append(f"{key}: {_format_value(value)}")
    lines.append(DELIMITER)
    return '\n'.join(lines) + '\n' + body
