"""
Pytest configuration and shared fixtures
"""

import shutil
import sys
from pathlib import Path

import pytest

# Add src/ to the path so tests run without installing the package
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from postwrap.config import SiteConfig


@pytest.fixture
def fixtures_path():
    """Path to test fixtures directory"""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def site(tmp_path, fixtures_path):
    """A site root with an empty blog/posts/ and the post template"""
    posts = tmp_path / "blog" / "posts"
    posts.mkdir(parents=True)
    shutil.copy(fixtures_path / "template.html", posts / "template.html")
    return tmp_path


@pytest.fixture
def config(site):
    """Config for the temporary site"""
    return SiteConfig(root=site, site_name="Lamide")


@pytest.fixture
def write_post(config):
    """Write a post file into the site's posts directory"""
    def _write(name, content):
        path = config.posts_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_front_matter():
    """CMS document with a Markdown body"""
    return """---
title: "Hello World"
date: 2025-01-15
summary: 'A first post'
tags: [announcement, "", blog]
---
## Intro

**Hi** *there*

* one
* two
"""


@pytest.fixture
def sample_wrapped_html():
    """A page wrapped by an earlier run of the tool"""
    return """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Welcome to the Blog — Lamide</title>
  <meta name="description" content="An introduction to my blog"/>
</head>
<body>
  <h1 class="post-title">Welcome to the Blog</h1>
  <div class="post-meta">
    <span>January 15, 2025</span>
  </div>
  <span class="tag">announcement</span> <span class="tag">blog</span>
  <div class="post-content">
    <p>Hello.</p>
  </div>
</body>
</html>
"""
