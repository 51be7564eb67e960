"""
Rebuild blog/index.json from the posts directory.

The index is derived data: it is regenerated from every post on each run
and written once at the end.
"""

import json
from datetime import datetime
from pathlib import Path

from .config import SiteConfig
from .dates import now_utc, parse_date, resolve_date, to_iso
from .extract import parse_html_post
from .frontmatter import FrontMatter, has_front_matter_delimiter, metadata_text, parse_front_matter
from .schema import PostIndexEntry, clean_tags, slug_for


def list_post_files(config: SiteConfig) -> list[Path]:
    """All *.html posts except the template, sorted by name."""
    posts_dir = config.posts_path
    if not posts_dir.is_dir():
        print(f"Warning: Posts directory not found: {posts_dir}")
        return []

    template = config.template_path.resolve()
    return sorted(
        path for path in posts_dir.glob('*.html')
        if path.is_file() and path.resolve() != template and path.name != 'template.html'
    )


def entry_from_front_matter(front_matter: FrontMatter, filename: str,
                            config: SiteConfig) -> PostIndexEntry:
    """Index entry for a post that has not been wrapped yet."""
    metadata = front_matter.metadata
    published = resolve_date(metadata.get('date'), filename)

    return PostIndexEntry(
        title=metadata_text(metadata, 'title', 'Untitled'),
        slug=slug_for(filename),
        date=to_iso(published),
        summary=metadata_text(metadata, 'summary').strip(),
        tags=clean_tags(metadata.get('tags')),
        path=config.post_url(filename),
    )


def entry_for_content(content: str, filename: str, config: SiteConfig) -> PostIndexEntry:
    """Classify a post's content and extract its index entry."""
    if has_front_matter_delimiter(content):
        parsed = parse_front_matter(content)
        if parsed is not None:
            return entry_from_front_matter(parsed, filename, config)
        print(f"Warning: {filename}: unterminated front matter, reading as HTML")
    return parse_html_post(content, filename, config)


def _sort_key(entry: PostIndexEntry) -> datetime:
    return parse_date(entry.date) or now_utc()


def sort_entries(entries: list[PostIndexEntry]) -> list[PostIndexEntry]:
    """Newest first."""
    return sorted(entries, key=_sort_key, reverse=True)


def build_index(config: SiteConfig) -> list[PostIndexEntry]:
    """Scan the posts directory and return sorted index entries."""
    entries = []
    for path in list_post_files(config):
        try:
            content = path.read_text(encoding='utf-8')
        except FileNotFoundError:
            print(f"Warning: Skipping {path.name} - file not found")
            continue
        except (OSError, UnicodeDecodeError) as e:
            print(f"Warning: Skipping {path.name} - could not read: {e}")
            continue

        entries.append(entry_for_content(content, path.name, config))

    return sort_entries(entries)


def index_document(entries: list[PostIndexEntry]) -> str:
    data = {'items': [entry.to_dict() for entry in entries]}
    return json.dumps(data, indent=2, ensure_ascii=False) + '\n'


def write_index(entries: list[PostIndexEntry], index_path: Path) -> None:
    """Write the index in one go. OSError propagates (fatal for the run)."""
    index_path.parent.mkdir(parents=True, exist_ok=True)
    index_path.write_text(index_document(entries), encoding='utf-8')


def read_index(index_path: Path) -> list[PostIndexEntry]:
    """Load an existing index; a missing or unreadable one is empty."""
    try:
        data = json.loads(index_path.read_text(encoding='utf-8'))
    except (OSError, ValueError):
        return []
    if not isinstance(data, dict):
        return []
    return [PostIndexEntry.from_dict(item) for item in data.get('items') or []
            if isinstance(item, dict) and 'slug' in item and 'date' in item]
