"""
Recover index fields from posts that were already wrapped into full pages.

Every lookup falls back to a default (title "Untitled", the current time,
empty summary and tags) so a malformed page never stops the batch.
"""

import re

from bs4 import BeautifulSoup

from .config import SiteConfig
from .dates import DISPLAY_DATE_RE, now_utc, parse_date, to_iso
from .schema import PostIndexEntry, clean_tags, slug_for


def extract_title(soup: BeautifulSoup, config: SiteConfig) -> str:
    """<title> minus the site suffix, else h1.post-title, else bare <title>."""
    title_tag = soup.find('title')
    page_title = title_tag.get_text().strip() if title_tag else ''

    suffix = f"{config.title_separator}{config.site_name}" if config.site_name else ''
    if suffix and page_title.endswith(suffix):
        title = page_title[:-len(suffix)].strip()
        if title:
            return title

    heading = soup.find('h1', class_='post-title')
    if heading:
        # Badges and icons live in spans inside the heading
        for span in heading.find_all('span'):
            span.decompose()
        title = heading.get_text().strip()
        if title:
            return title

    return page_title or 'Untitled'


def extract_date(soup: BeautifulSoup) -> str:
    for time_tag in soup.find_all('time'):
        parsed = parse_date(time_tag.get('datetime'))
        if parsed:
            return to_iso(parsed)

    for tag in soup.find_all(['span', 'time']):
        match = DISPLAY_DATE_RE.fullmatch(tag.get_text().strip())
        if match:
            parsed = parse_date(match.group(1))
            if parsed:
                return to_iso(parsed)

    return to_iso(now_utc())


def clean_summary(summary: str, suffixes: list[str]) -> str:
    """Strip boilerplate the site appends to every meta description."""
    cleaned = summary
    for suffix in suffixes:
        cleaned = re.sub(re.escape(suffix) + r'\.?\s*$', '', cleaned)
    cleaned = cleaned.strip()
    return cleaned or summary.strip()


def extract_summary(soup: BeautifulSoup, config: SiteConfig) -> str:
    meta = soup.find('meta', attrs={'name': 'description'})
    if not meta:
        return ''
    return clean_summary(meta.get('content') or '', config.summary_suffixes)


def extract_tags(soup: BeautifulSoup) -> list[str]:
    return clean_tags(span.get_text() for span in soup.find_all('span', class_='tag'))


def parse_html_post(html: str, filename: str, config: SiteConfig) -> PostIndexEntry:
    """Build an index entry from a rendered post page."""
    soup = BeautifulSoup(html or '', 'html.parser')

    date = extract_date(soup)
    summary = extract_summary(soup, config)
    tags = extract_tags(soup)
    # Last: it removes spans from the heading
    title = extract_title(soup, config)

    return PostIndexEntry(
        title=title,
        slug=slug_for(filename),
        date=date,
        summary=summary,
        tags=tags,
        path=config.post_url(filename),
    )
