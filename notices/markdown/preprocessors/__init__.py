# notices/markdown/preprocessors/__init__.py

from .notice_tags import notice_tags_default

PREPROCESSORS = [
    notice_tags_default,  # Expand {% info %}...{% endinfo %} into <aside> markup
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
