"""
Loading Markdown posts from the content directory.

Posts are ``*.md`` files. A filename may start with a date,
``2024-03-01-monads-in-funk.md``, which gives the post's date and slug;
front matter ``title``, ``date``, ``slug`` and ``published`` override those.
"""

import datetime
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from django.utils.text import slugify

from blog.markdown.renderer import render_markdown

logger = logging.getLogger(__name__)

_DATED_FILENAME_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})-(.+)$")


@dataclass
class Post:
    source: Path
    slug: str
    title: str
    html: str
    date: Optional[datetime.date] = None
    published: bool = True
    metadata: dict = field(default_factory=dict)


def _parse_date(value) -> Optional[datetime.date]:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        logger.warning("Ignoring unparseable post date %r", value)
        return None


def split_filename(path: Path):
    """Return (date or None, slug) for a post filename."""
    match = _DATED_FILENAME_RE.match(path.stem)
    if not match:
        return None, slugify(path.stem)
    year, month, day, rest = match.groups()
    try:
        post_date = datetime.date(int(year), int(month), int(day))
    except ValueError:
        return None, slugify(path.stem)
    return post_date, slugify(rest)


def load_post(path: Path) -> Post:
    """Render one Markdown file into a Post."""
    context = {"source_path": path}
    html = render_markdown(path.read_text(encoding="utf-8"), context)
    metadata = context.get("front_matter", {})

    post_date, slug = split_filename(path)
    if "date" in metadata:
        post_date = _parse_date(metadata["date"]) or post_date
    if metadata.get("slug"):
        slug = slugify(metadata["slug"])

    title = metadata.get("title") or slug.replace("-", " ").title()

    return Post(
        source=path,
        slug=slug,
        title=title,
        html=html,
        date=post_date,
        published=metadata.get("published", True) is not False,
        metadata=metadata,
    )


def collect_posts(source_dir: Path) -> List[Post]:
    """Load every published post in ``source_dir``, newest first."""
    posts = []
    for path in sorted(source_dir.glob("*.md")):
        post = load_post(path)
        if not post.published:
            logger.info("Skipping unpublished post %s", path.name)
            continue
        posts.append(post)

    posts.sort(key=lambda p: (p.date or datetime.date.min, p.slug), reverse=True)
    return posts
