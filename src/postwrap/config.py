"""
Site configuration for the post wrapper.

Defaults match the site layout (blog/posts/*.html, blog/index.json).
An optional postwrap.yaml at the site root overrides them:

    site_name: Lamide
    posts_dir: blog/posts
    template: blog/posts/template.html
    index: blog/index.json
    url_prefix: /blog/posts/
    summary_suffixes:
      - about AI, automation, and product management
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml


CONFIG_FILENAME = 'postwrap.yaml'


class ConfigError(ValueError):
    """Raised when postwrap.yaml cannot be read or has bad values."""


@dataclass
class SiteConfig:
    """Paths and display settings for one site."""
    root: Path = field(default_factory=Path.cwd)
    posts_dir: str = 'blog/posts'
    template: str = 'blog/posts/template.html'
    index: str = 'blog/index.json'
    url_prefix: str = '/blog/posts/'
    site_name: str = 'Blog'
    title_separator: str = ' — '
    summary_suffixes: list[str] = field(default_factory=list)

    @property
    def posts_path(self) -> Path:
        return self.root / self.posts_dir

    @property
    def template_path(self) -> Path:
        return self.root / self.template

    @property
    def index_path(self) -> Path:
        return self.root / self.index

    def page_title(self, title: str) -> str:
        """Browser title for a post, e.g. 'Hello — Lamide'."""
        if not self.site_name:
            return title
        return f"{title}{self.title_separator}{self.site_name}"

    def post_url(self, filename: str) -> str:
        return f"{self.url_prefix}{filename}"

    @classmethod
    def from_yaml(cls, yaml_content: str, root: Optional[Path] = None) -> 'SiteConfig':
        """Parse from YAML content. Unknown keys are reported and ignored."""
        try:
            data = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("Config must be a mapping of settings")

        known = {f.name for f in fields(cls)} - {'root'}
        for key in sorted(set(data) - known):
            print(f"Warning: Unknown config key '{key}' ignored")

        values = {k: v for k, v in data.items() if k in known}

        suffixes = values.get('summary_suffixes', [])
        if isinstance(suffixes, str):
            suffixes = [suffixes]
        if not isinstance(suffixes, list):
            raise ConfigError("summary_suffixes must be a list of strings")
        values['summary_suffixes'] = [str(s) for s in suffixes if s]

        for key in known - {'summary_suffixes'}:
            if key in values and values[key] is not None:
                values[key] = str(values[key])
            elif key in values:
                del values[key]

        config = cls(**values)
        if root is not None:
            config.root = Path(root)
        return config


def load_config(root: Optional[Path] = None, config_file: Optional[Path] = None) -> SiteConfig:
    """Load the site config.

    Uses config_file if given, else <root>/postwrap.yaml if it exists,
    else built-in defaults.
    """
    root = Path(root) if root is not None else Path.cwd()

    if config_file is None:
        candidate = root / CONFIG_FILENAME
        if not candidate.exists():
            return SiteConfig(root=root)
        config_file = candidate

    try:
        content = Path(config_file).read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigError(f"Could not read config {config_file}: {e}") from e

    return SiteConfig.from_yaml(content, root=root)
