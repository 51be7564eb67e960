"""
Batch driver: wrap every CMS post, then rebuild the index.

    DISCOVER -> CLASSIFY -> RENDER_OR_SKIP -> REBUILD_INDEX -> DONE

Each file is handled on its own. A per-file failure is recorded and the
run still reaches the index rebuild; only a missing template or an
unwritable index aborts it.
"""

from pathlib import Path
from typing import Optional, Tuple

from .config import SiteConfig
from .frontmatter import has_front_matter_delimiter
from .index import build_index, list_post_files, read_index, write_index
from .template import PostTemplate
from .wrap import repair_file, wrap_file


class PostBatch:
    """Wraps CMS posts and regenerates the post index"""

    def __init__(self, config: SiteConfig, repair: bool = True):
        self.config = config
        self.repair = repair
        self.template: Optional[PostTemplate] = None

        self.stats = {
            'total_files': 0,
            'wrapped': [],
            'repaired': [],
            'skipped': 0,
            'failed_files': [],
            'indexed': 0,
            'previous_indexed': 0,
        }

    def load_template(self) -> PostTemplate:
        """Load the post template; raises TemplateError if it is missing."""
        template = PostTemplate.load(self.config.template_path)

        missing = template.missing_placeholders()
        if missing:
            print(f"Warning: Template has no placeholder for: {', '.join(missing)}")
        unknown = template.unknown_placeholders()
        if unknown:
            print(f"Warning: Template placeholders never filled: {', '.join(unknown)}")

        self.template = template
        return template

    def process_file(self, file_path: Path) -> Tuple[Optional[str], Optional[str]]:
        """
        Wrap or repair a single post

        Returns: (action taken or None, error message or None)
        """
        try:
            content = file_path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return None, "File not found"
        except (OSError, UnicodeDecodeError) as e:
            return None, f"Failed to read file: {e}"

        try:
            if has_front_matter_delimiter(content):
                if wrap_file(file_path, self.template, self.config, content):
                    return 'wrapped', None
                return None, "Unterminated front matter, left as is"

            if self.repair and repair_file(file_path, content):
                return 'repaired', None
        except OSError as e:
            return None, f"Failed to write file: {e}"

        return None, None

    def wrap_posts(self) -> None:
        if self.template is None:
            self.load_template()

        post_files = list_post_files(self.config)
        self.stats['total_files'] = len(post_files)
        print(f"Found {len(post_files)} post files in {self.config.posts_path}")

        for file_path in post_files:
            action, error = self.process_file(file_path)

            if error:
                print(f"Warning: {file_path.name}: {error}")
                self.stats['failed_files'].append({
                    'file': file_path.name,
                    'error': error,
                })
            elif action == 'wrapped':
                print(f"Wrapped {file_path.name}")
                self.stats['wrapped'].append(file_path.name)
            elif action == 'repaired':
                print(f"Converted markdown in {file_path.name}")
                self.stats['repaired'].append(file_path.name)
            else:
                self.stats['skipped'] += 1

    def rebuild_index(self) -> list:
        index_path = self.config.index_path
        self.stats['previous_indexed'] = len(read_index(index_path))

        entries = build_index(self.config)
        write_index(entries, index_path)
        self.stats['indexed'] = len(entries)
        return entries

    def run(self, index_only: bool = False) -> dict:
        """Run the whole batch and return the statistics dictionary."""
        if not index_only:
            self.wrap_posts()
        self.rebuild_index()
        return self.stats

    def print_report(self):
        """Print processing report"""
        wrapped = len(self.stats['wrapped'])
        repaired = len(self.stats['repaired'])

        if wrapped:
            print(f"\nWrapped {wrapped} post(s).")
        if repaired:
            print(f"Converted markdown in {repaired} post(s).")

        if self.stats['failed_files']:
            print(f"\nProblems ({len(self.stats['failed_files'])}):")
            for failure in self.stats['failed_files']:
                print(f"  {failure['file']}: {failure['error']}")

        print(f"\nUpdated {self.config.index} with {self.stats['indexed']} posts "
              f"(previously {self.stats['previous_indexed']})")
