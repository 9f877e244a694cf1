# notices/templatetags/notice_tags.py
"""
Block tags for styled notice callouts.

Usage in templates (the library is a template builtin, so no load is needed):

    {% warning %}Disk almost full{% endwarning %}

renders as

    <aside class="notice warning" markdown="1">
     Disk almost full
    </aside>

The same tag exists for standard, info, warning, success and error. The
markdown="1" attribute lets the markdown renderer parse the inner content.
"""

import logging
from dataclasses import dataclass

from django import template
from django.utils.safestring import mark_safe

logger = logging.getLogger(__name__)

register = template.Library()

NOTICE_KINDS = ("standard", "info", "warning", "success", "error")


@dataclass(frozen=True)
class Notice:
    kind: str
    body: str

    def to_html(self) -> str:
        return f'<aside class="notice {self.kind}" markdown="1">\n {self.body}\n</aside>\n'


class NoticeNode(template.Node):
    def __init__(self, kind, nodelist):
        self.kind = kind
        self.nodelist = nodelist

    def __repr__(self):
        return f"<{self.__class__.__qualname__}: {self.kind}>"

    def render(self, context):
        # Inner content is rendered (and escaped) by Django before wrapping
        body = self.nodelist.render(context)
        return mark_safe(Notice(self.kind, body).to_html())


def do_notice(parser, token):
    """
    Usage:
    {% info %}
        Content with {{ variable }} and {% other_tags %}
    {% endinfo %}

    Any arguments after the tag name are ignored.
    """
    kind = token.split_contents()[0]
    nodelist = parser.parse((f"end{kind}",))
    parser.delete_first_token()
    return NoticeNode(kind, nodelist)


for _kind in NOTICE_KINDS:
    register.tag(_kind, do_notice)

logger.debug("Registered notice block tags: %s", ", ".join(NOTICE_KINDS))
