# blog/markdown/preprocessors/__init__.py

from .front_matter import front_matter_default

PREPROCESSORS = [
    front_matter_default,  # Must run first: pandoc would render the block as text
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
