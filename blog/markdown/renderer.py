# blog/markdown/renderer.py

import logging

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .postprocessors.utils import release_soup
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline using pypandoc

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data.
            Preprocessors write into it (e.g. "front_matter"), so pass a dict
            you keep a reference to if you need those values.
    """
    if context is None:
        context = {}

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text, context)

    # Markdown conversion using pypandoc
    pandoc_config = get_pandoc_config()

    html = pypandoc.convert_text(
        text,
        to="html5",
        format="markdown",
        extra_args=pandoc_config["extra_args"],
        filters=pandoc_config.get("filters", []),
    )

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)
    release_soup(context)

    logger.debug("Rendered %d characters of markdown", len(text))
    return html
