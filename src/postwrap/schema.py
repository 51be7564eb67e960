"""
Schema for blog/index.json, the post manifest read by the blog page.

    {
      "items": [
        {
          "title": "Welcome to the Blog",
          "slug": "welcome-to-the-blog",
          "date": "2025-01-15T00:00:00.000Z",
          "summary": "An introduction to my blog",
          "tags": ["announcement", "blog"],
          "path": "/blog/posts/welcome-to-the-blog.html"
        }
      ]
    }
"""

from dataclasses import dataclass, field, asdict
from pathlib import PurePath


@dataclass
class PostIndexEntry:
    """One post in the manifest."""
    title: str
    slug: str
    date: str  # ISO timestamp, see dates.to_iso()
    summary: str = ''
    tags: list[str] = field(default_factory=list)
    path: str = ''

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'PostIndexEntry':
        return cls(
            title=data.get('title', 'Untitled'),
            slug=data['slug'],
            date=data['date'],
            summary=data.get('summary', ''),
            tags=clean_tags(data.get('tags')),
            path=data.get('path', ''),
        )


def slug_for(filename: str) -> str:
    """welcome-to-the-blog.html -> welcome-to-the-blog"""
    return PurePath(filename).stem


def clean_tags(tags) -> list[str]:
    """Drop empty and whitespace-only tags; always returns a list."""
    if not tags:
        return []
    if isinstance(tags, str):
        tags = [tags]
    return [str(tag).strip() for tag in tags if tag and str(tag).strip()]
