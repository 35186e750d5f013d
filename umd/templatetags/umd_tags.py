# umd/templatetags/umd_tags.py

from django import template
from django.utils.safestring import mark_safe

from umd.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="umd")
def umd_filter(value):
    if not value:
        return ""
    return mark_safe(render_markdown(str(value)))


@register.simple_tag(takes_context=True)
def umd_with_context(context, value, base_url=None):
    """Template tag that passes template context to processors"""
    processor_context = {
        "user": context.get("user"),
        "request": context.get("request"),
        "base_url": base_url,
    }
    return mark_safe(render_markdown(str(value or ""), context=processor_context))
