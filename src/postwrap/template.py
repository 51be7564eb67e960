"""
Post page template with named placeholders.

The template is a full HTML page containing {{ name }} markers, e.g.

    <title>{{ page_title }}</title>
    <meta name="description" content="{{ description }}" />
    <time datetime="{{ date_iso }}">{{ date }}</time>
    <div class="post-tags">{{ tags }}</div>
    <div class="post-content">{{ content }}</div>
"""

import re
from pathlib import Path


PLACEHOLDER_RE = re.compile(r'\{\{\s*([a-z_]+)\s*\}\}')

# Placeholders every post page needs
REQUIRED_PLACEHOLDERS = ('title', 'description', 'date', 'tags', 'content')

# Everything wrap_post() supplies
KNOWN_PLACEHOLDERS = REQUIRED_PLACEHOLDERS + (
    'page_title', 'date_iso', 'slug', 'site_name',
)


class TemplateError(ValueError):
    """The post template is missing or unusable; no post can be wrapped."""


class PostTemplate:
    """A loaded post template."""

    def __init__(self, text: str, path: Path = None):
        self.text = text
        self.path = path

    @classmethod
    def load(cls, path: Path) -> 'PostTemplate':
        path = Path(path)
        if not path.is_file():
            raise TemplateError(f"Template not found: {path}")
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise TemplateError(f"Could not read template {path}: {e}") from e
        return cls(text, path=path)

    @property
    def placeholders(self) -> set[str]:
        return set(PLACEHOLDER_RE.findall(self.text))

    def missing_placeholders(self) -> list[str]:
        """Required placeholders the template does not contain."""
        found = self.placeholders
        return [name for name in REQUIRED_PLACEHOLDERS if name not in found]

    def unknown_placeholders(self) -> list[str]:
        """Placeholders no post will ever fill (they render empty)."""
        return sorted(self.placeholders - set(KNOWN_PLACEHOLDERS))

    def render(self, values: dict) -> str:
        """Substitute every placeholder in one pass.

        Values are inserted as-is, so substituted text is never rescanned
        for placeholders. Names without a value render as ''.
        """
        def replace(match):
            value = values.get(match.group(1))
            return '' if value is None else str(value)

        return PLACEHOLDER_RE.sub(replace, self.text)
