"""
Command line entry point: wrap CMS posts into full pages and update
blog/index.json.

Usage:
    wrap-posts                  # run from the site root
    wrap-posts --index-only     # only regenerate the index
    python -m postwrap --root path/to/site
"""

import argparse
import sys
from pathlib import Path

from .batch import PostBatch
from .config import ConfigError, load_config
from .template import TemplateError


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Wrap CMS-created blog posts into full HTML pages and rebuild the post index'
    )
    parser.add_argument(
        '--root',
        type=Path,
        help='Site root directory (default: current directory)'
    )
    parser.add_argument(
        '-c', '--config',
        type=Path,
        help='Config file (default: <root>/postwrap.yaml if present)'
    )
    parser.add_argument(
        '--index-only',
        action='store_true',
        help='Skip wrapping and only regenerate the index'
    )
    parser.add_argument(
        '--no-repair',
        action='store_true',
        help='Do not convert Markdown left inside already-wrapped posts'
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(root=args.root, config_file=args.config)
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    batch = PostBatch(config, repair=not args.no_repair)

    try:
        batch.run(index_only=args.index_only)
    except (TemplateError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    batch.print_report()
    print("\nDone!")


if __name__ == '__main__':
    main()
