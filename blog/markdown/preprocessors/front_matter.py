# blog/markdown/preprocessors/front_matter.py
"""
Preprocessor that pulls a YAML front matter block off the top of a post.

    ---
    title: "Monads in Funk"
    date: 2024-03-01
    tags: [funk, monads]
    published: true
    ---
    Body text...

The block is removed from the text and parsed with ``yaml.safe_load`` into
``context["front_matter"]``. A block that is not valid YAML, or is not a
mapping, is still removed but yields empty front matter.
"""

import logging
import re

import yaml

logger = logging.getLogger(__name__)

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\n(?:(.*?)\n)?---[ \t]*(?:\n|\Z)", re.DOTALL)


def parse_front_matter(block: str) -> dict:
    try:
        metadata = yaml.safe_load(block) or {}
    except yaml.YAMLError as e:
        logger.error(f"Invalid front matter: {e}", exc_info=True)
        return {}

    if not isinstance(metadata, dict):
        logger.warning("Front matter is not a mapping, ignoring it")
        return {}
    return metadata


def front_matter(text: str, context: dict) -> str:
    """Strip the front matter block and record it in the context."""
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        context.setdefault("front_matter", {})
        return text

    context["front_matter"] = parse_front_matter(match.group(1) or "")
    return text[match.end():]


def front_matter_default(text: str, context: dict) -> str:
    return front_matter(text, context)
