#!/usr/bin/env python3
"""
Wrap CMS-created blog posts (with front matter) into full HTML pages and
update blog/index.json.

Run this locally from the site root:  python scripts/wrap_posts.py
The deploy hook runs the same thing through the wrap-posts command.
"""

import sys
from pathlib import Path

# Run from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from postwrap.cli import main


if __name__ == '__main__':
    main()
