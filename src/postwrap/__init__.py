"""
postwrap - Wrap CMS-authored blog posts into static pages

Modules:
- frontmatter: front-matter parsing and serialization
- markdown: minimal Markdown to HTML conversion
- template: {{ placeholder }} post template
- wrap: render posts into the template, repair leftover Markdown
- extract: recover index fields from already-wrapped pages
- index: rebuild blog/index.json
- batch: the wrap-then-index run
"""

from .config import SiteConfig, ConfigError, load_config
from .frontmatter import FrontMatter, parse_front_matter, dump_front_matter
from .markdown import markdown_to_html, looks_like_html
from .template import PostTemplate, TemplateError
from .schema import PostIndexEntry
from .wrap import wrap_post, wrap_file, repair_post
from .extract import parse_html_post
from .index import build_index, write_index, read_index, sort_entries
from .batch import PostBatch

__version__ = "0.1.0"

__all__ = [
    # Configuration
    'SiteConfig',
    'ConfigError',
    'load_config',
    # Data structures
    'FrontMatter',
    'PostIndexEntry',
    'PostTemplate',
    'TemplateError',
    # Conversion
    'parse_front_matter',
    'dump_front_matter',
    'markdown_to_html',
    'looks_like_html',
    'wrap_post',
    'wrap_file',
    'repair_post',
    'parse_html_post',
    # Index
    'build_index',
    'write_index',
    'read_index',
    'sort_entries',
    # Batch processing
    'PostBatch',
]
