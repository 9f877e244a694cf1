# notices/markdown/postprocessors/__init__.py

from .notice_enhancer import notice_enhancer_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    notice_enhancer_default,  # Add roles, labels and a first paragraph to notice blocks
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
