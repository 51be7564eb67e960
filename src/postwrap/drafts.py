"""
Create a new front-matter draft in the posts directory.

A draft is what the CMS would write: a metadata block and a Markdown
body. The next wrap-posts run turns it into a full page.

Usage:
    new-post "Shipping the New Site" --summary "What changed" --tags meta,blog
"""

import argparse
import re
import sys
import unicodedata
from pathlib import Path

from .config import ConfigError, load_config
from .dates import now_utc, parse_date
from .frontmatter import dump_front_matter
from .schema import clean_tags


def slugify(text: str) -> str:
    """Lowercase ASCII slug with runs of other characters turned into one dash."""
    text = unicodedata.normalize('NFKD', text)
    text = text.encode('ascii', 'ignore').decode('ascii')

    text = text.lower()
    text = re.sub(r'[^a-z0-9]+', '-', text)
    return text.strip('-')


def create_draft(title: str, posts_dir: Path, date: str = None,
                 summary: str = '', tags: list[str] = None,
                 body: str = None) -> Path:
    """Write <slug>.html with front matter and return its path."""
    published = parse_date(date) if date else now_utc()
    if published is None:
        raise ValueError(f"Unrecognised date: {date}")

    slug = slugify(title) or 'untitled'
    path = posts_dir / f"{slug}.html"

    # Handle slug collision
    counter = 1
    while path.exists():
        path = posts_dir / f"{slug}-{counter}.html"
        counter += 1

    metadata = {
        'title': title,
        'date': published.strftime('%Y-%m-%d'),
        'summary': summary or '',
        'tags': clean_tags(tags),
    }
    if body is None:
        body = f"# {title}\n\nWrite something here.\n"

    posts_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_front_matter(metadata, body), encoding='utf-8')
    return path


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Create a front-matter draft post for the next wrap-posts run'
    )
    parser.add_argument('title', help='Post title')
    parser.add_argument('--summary', default='', help='One-line summary')
    parser.add_argument('--tags', help='Comma-separated tags (e.g., meta,blog)')
    parser.add_argument('--date', help='Publish date (default: today)')
    parser.add_argument('--root', type=Path, help='Site root (default: current directory)')
    args = parser.parse_args(argv)

    tags = [t.strip() for t in args.tags.split(',')] if args.tags else None

    try:
        config = load_config(root=args.root)
        path = create_draft(args.title, config.posts_path, date=args.date,
                            summary=args.summary, tags=tags)
    except (ConfigError, ValueError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Created draft: {path.name}")
    print(f"  -> {path}")
    print("\nRun 'wrap-posts' to render it and update the index")


if __name__ == '__main__':
    main()
