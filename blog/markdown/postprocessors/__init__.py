# blog/markdown/postprocessors/__init__.py

from .code_highlighter import code_highlighter_default
from .funk_redecorator import funk_redecorator_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    code_highlighter_default,  # Pygments highlighting for fenced code, language aliases applied
    funk_redecorator_default,  # Restyle Funk blocks; must run after code_highlighter
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
