# notices/markdown/preprocessors/notice_tags.py
"""
Preprocessor that evaluates the page source as a Django template.

This expands notice blocks into their <aside> wrappers before Pandoc runs:

    {% info %}Remember to **save**.{% endinfo %}

becomes

    <aside class="notice info" markdown="1">
     Remember to **save**.
    </aside>

The source is compiled by a dedicated engine that knows the notice tags and
Django's default tags and filters, and no other tag library. Only the ``page``
entry of the processor context is visible to the template, so request and user
data cannot be reached from page text.

Page source is template source: literal template syntax such as ``{% raw %}``
raises TemplateSyntaxError and must be written inside
``{% verbatim %}...{% endverbatim %}``. Autoescaping is disabled because the
output is markdown source, not HTML.
"""

import logging
from functools import lru_cache

from django.template import Context, Engine

logger = logging.getLogger(__name__)

TEMPLATE_CONTEXT_KEYS = ("page",)


@lru_cache(maxsize=1)
def _get_engine() -> Engine:
    return Engine(
        builtins=["notices.templatetags.notice_tags"],
        libraries={},
        autoescape=False,
    )


def _has_template_syntax(text: str) -> bool:
    return "{%" in text or "{{" in text


def notice_tags(text: str, context: dict) -> str:
    if not _has_template_syntax(text):
        return text

    template_context = {key: context[key] for key in TEMPLATE_CONTEXT_KEYS if key in context}
    rendered = _get_engine().from_string(text).render(Context(template_context, autoescape=False))
    logger.debug("Expanded template tags in page source (%d chars)", len(text))
    return rendered


def notice_tags_default(text: str, context: dict) -> str:
    """
    Default configuration for notice_tags.

    This is the function that should be registered in PREPROCESSORS.
    """
    return notice_tags(text, context)
