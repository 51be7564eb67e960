"""
Minimal Markdown to HTML conversion for CMS post bodies.

Handles only what the CMS editor produces: headings (# to #####), bold,
italic, inline links, <https://...> autolinks, flat "* " lists, inline
code and paragraphs. No nested lists, tables, blockquotes or ordered
lists.

The renderer is not guarded against HTML input; callers check
looks_like_html() first. That sniff is a heuristic and mixed
Markdown/HTML bodies can slip past it (see repair_post in wrap.py).
"""

import re


# Element open tag such as <p>, <div class="x"> or <br/>; <https://..> is not one
HTML_TAG_RE = re.compile(r'<[a-z][a-z0-9]*(?:\s[^<>]*)?/?>', re.IGNORECASE)

# Markdown the CMS leaves behind inside already-wrapped content: a bold
# heading, a heading still wrapped in <p>, or a list opening the block
RAW_MARKDOWN_RE = re.compile(
    r'(?:^[ \t]*|<p>)#{1,5}[ \t]+\*\*|<p>#{1,5}[ \t]+\S|\A\s*\*[ \t]+\S',
    re.MULTILINE,
)

# Preformatted and code regions are never treated as Markdown
CODE_REGION_RE = re.compile(r'<pre[\s>][\s\S]*?</pre>|<code[\s>][\s\S]*?</code>', re.IGNORECASE)
STASHED_BLOCK_RE = re.compile(r'<p>\x00(\d+)\x00</p>')
STASHED_RE = re.compile(r'\x00(\d+)\x00')

BLOCK_TAG_RE = re.compile(r'^<(h[1-6]|ul|ol|li|p|pre|blockquote|div|table)[\s>/]')

PARAGRAPH_HEADING_RE = re.compile(r'<p>(#{1,5})\s+([\s\S]*?)</p>')
HEADING_RE = re.compile(r'^[ \t]*(#{1,5})[ \t]+(.+)$', re.MULTILINE)
EMPTY_PARAGRAPH_RE = re.compile(r'<p>\s*</p>')
BOLD_RE = re.compile(r'\*\*(.+?)\*\*')
ITALIC_RE = re.compile(r'(?<!\*)\*(?![\s*])([^*\n]+?)(?<!\s)\*(?!\*)')
LINK_RE = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
AUTOLINK_RE = re.compile(r'<(https?://[^\s>]+)>')
LIST_RUN_RE = re.compile(r'(?:^[ \t]*\*[ \t]+[^\n]+\n?)+', re.MULTILINE)
LIST_ITEM_RE = re.compile(r'^[ \t]*\*[ \t]+(.+)$')
CODE_RE = re.compile(r'`([^`]+)`')


def looks_like_html(text: str) -> bool:
    """True if the text already contains an HTML element."""
    return bool(HTML_TAG_RE.search(text or ''))


def has_raw_markdown(html: str) -> bool:
    """True if rendered content still carries Markdown markers.

    Only the markers the CMS is known to leave behind count, and never
    inside <pre> or <code>, so "C# for" or a shell comment is not Markdown.
    """
    return bool(RAW_MARKDOWN_RE.search(CODE_REGION_RE.sub('', html or '')))


def _heading(match: re.Match) -> str:
    level = len(match.group(1))
    return f"<h{level}>{match.group(2).strip()}</h{level}>"


def _autolink(match: re.Match) -> str:
    url = match.group(1)
    return f'<a href="{url}" target="_blank" rel="noopener">{url}</a>'


def _list(match: re.Match) -> str:
    """Turn a run of consecutive "* " lines into one <ul> block."""
    items = []
    for line in match.group(0).splitlines():
        item = LIST_ITEM_RE.match(line)
        if item:
            items.append(f"<li>{item.group(1).strip()}</li>\n")
    # Blank lines around the list keep adjacent text in its own paragraph
    return "\n<ul>\n" + ''.join(items) + "</ul>\n\n"


def markdown_to_html(markdown: str) -> str:
    """Convert a Markdown body to HTML.

    The steps run in a fixed order so later patterns never see the
    markers consumed by earlier ones (bold before italic, italic before
    list items).
    """
    if not markdown:
        return ''

    # Headings the CMS already wrapped in a paragraph, e.g. <p>##### Intro</p>
    html = PARAGRAPH_HEADING_RE.sub(_heading, markdown)

    # Escaped line breaks
    html = re.sub(r'\\\s*\\\s*\n', '\n\n', html)
    html = re.sub(r'\\\s*\n', '\n', html)

    html = HEADING_RE.sub(_heading, html)
    html = EMPTY_PARAGRAPH_RE.sub('', html)

    html = BOLD_RE.sub(r'<strong>\1</strong>', html)
    html = ITALIC_RE.sub(r'<em>\1</em>', html)

    html = LINK_RE.sub(r'<a href="\2">\1</a>', html)
    html = AUTOLINK_RE.sub(_autolink, html)

    html = LIST_RUN_RE.sub(_list, html)

    html = CODE_RE.sub(r'<code>\1</code>', html)

    blocks = []
    for block in re.split(r'\n\n+', html):
        block = block.strip()
        if not block:
            continue
        if BLOCK_TAG_RE.match(block):
            blocks.append(block)
        else:
            blocks.append(f"<p>{block}</p>")

    return '\n'.join(blocks)


def convert_leftover_markdown(html: str) -> str:
    """Render Markdown mixed into HTML, leaving <pre>/<code> regions as is."""
    stashed = []

    def _stash(match: re.Match) -> str:
        stashed.append(match.group(0))
        return f"\x00{len(stashed) - 1}\x00"

    def _restore(match: re.Match) -> str:
        return stashed[int(match.group(1))]

    converted = markdown_to_html(CODE_REGION_RE.sub(_stash, html))
    converted = STASHED_BLOCK_RE.sub(_restore, converted)
    return STASHED_RE.sub(_restore, converted)
