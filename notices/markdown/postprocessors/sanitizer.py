# notices/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach
from bleach.css_sanitizer import CSSSanitizer

from notices import conf

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "aside",  # notice blocks
            "mark",
            "ins",
            "del",
            "sup",
            "sub",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            # media
            "img",
            "figure",
            "figcaption",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title"],
        "a": ["href", "title", "rel", "role"],
        "img": ["src", "alt", "title", "width", "height"],
        "aside": ["class", "id", "role", "aria-label"],
        "section": ["class", "id", "role"],
        "th": ["colspan", "rowspan", "scope", "style"],
        "td": ["colspan", "rowspan", "style"],
        "ol": ["start", "type", "class"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    # Pandoc writes pipe table column alignment as inline text-align
    css_sanitizer = CSSSanitizer(allowed_css_properties=["text-align"])

    return allowed_tags, allowed_attrs, allowed_protocols, css_sanitizer


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor and should run before any other HTML modifications.
    """
    if not conf.sanitize_enabled():
        logger.debug("Sanitization disabled by NOTICES_SANITIZE")
        return html

    allowed_tags, allowed_attrs, allowed_protocols, css_sanitizer = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            css_sanitizer=css_sanitizer,
            strip=False,  # Keep disallowed tags but escape them
        )
    except ValueError as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        return html
