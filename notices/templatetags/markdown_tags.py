# notices/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from notices.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value):
    """Render page source with notice blocks; only ``page`` reaches the page template"""
    processor_context = {"page": context.get("page")}
    return mark_safe(render_markdown(value, context=processor_context))
