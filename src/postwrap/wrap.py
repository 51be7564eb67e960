"""
Wrap CMS front-matter posts into full HTML pages.

Wrapping is destructive: the source file is overwritten with the rendered
page, after which it is indexed as an already-wrapped post.
"""

import html
import re
from pathlib import Path
from typing import Optional

from .config import SiteConfig
from .dates import format_display, resolve_date, to_iso
from .frontmatter import metadata_text, parse_front_matter
from .markdown import (
    convert_leftover_markdown,
    has_raw_markdown,
    looks_like_html,
    markdown_to_html,
)
from .schema import clean_tags, slug_for
from .template import PostTemplate


POST_CONTENT_RE = re.compile(r'(<div class="post-content">)([\s\S]*?)(</div>)')


def render_tags(tags) -> str:
    return ''.join(
        f'<span class="tag">{html.escape(tag, quote=False)}</span>'
        for tag in clean_tags(tags)
    )


def render_body(body: str) -> str:
    """Markdown bodies are converted; HTML bodies pass through."""
    if looks_like_html(body):
        return body.strip()
    return markdown_to_html(body).strip()


def wrap_post(metadata: dict, body: str, template: PostTemplate,
              slug: str, config: SiteConfig) -> str:
    """Render one post into the site template."""
    title = metadata_text(metadata, 'title', 'Blog Post')
    summary = metadata_text(metadata, 'summary').strip()
    published = resolve_date(metadata.get('date'), slug)

    values = {
        'title': html.escape(title, quote=False),
        'page_title': html.escape(config.page_title(title), quote=False),
        'description': html.escape(summary),
        'date': format_display(published),
        'date_iso': to_iso(published),
        'tags': render_tags(metadata.get('tags')),
        'content': render_body(body),
        'slug': slug,
        'site_name': html.escape(config.site_name, quote=False),
    }
    return template.render(values)


def wrap_file(path: Path, template: PostTemplate, config: SiteConfig,
              content: str = None) -> bool:
    """Wrap a front-matter file in place.

    Pass content if the file has already been read. Returns False if the
    file is not a front-matter document. OSError from reading or writing
    propagates to the caller.
    """
    if content is None:
        content = path.read_text(encoding='utf-8')
    parsed = parse_front_matter(content)
    if parsed is None:
        return False

    slug = slug_for(path.name)
    wrapped = wrap_post(parsed.metadata, parsed.body, template, slug, config)
    path.write_text(wrapped, encoding='utf-8')
    return True


def repair_post(page: str) -> Optional[str]:
    """Convert Markdown left inside an already-wrapped page's post content.

    Returns the updated page, or None if there is nothing to convert.
    """
    match = POST_CONTENT_RE.search(page)
    if not match or not has_raw_markdown(match.group(2)):
        return None

    converted = convert_leftover_markdown(match.group(2)).strip()
    replacement = f"{match.group(1)}\n        {converted}\n      {match.group(3)}"
    return page[:match.start()] + replacement + page[match.end():]


def repair_file(path: Path, page: str = None) -> bool:
    """Apply repair_post() to a file in place; True if it was rewritten."""
    if page is None:
        page = path.read_text(encoding='utf-8')
    repaired = repair_post(page)
    if repaired is None or repaired == page:
        return False
    path.write_text(repaired, encoding='utf-8')
    return True
