from django import template
from django.utils.html import format_html_join

register = template.Library()


def _join(rendered):
    return format_html_join(" ", "{}", ((html,) for html in rendered))


@register.simple_tag
def toolbar_buttons(table):
    """
    Renders the visible toolbar buttons of a grid.
    Usage: {% toolbar_buttons table %}
    """
    return _join(button.render() for button in table.visible_buttons("toolbar"))


@register.simple_tag(takes_context=True)
def row_buttons(context, table, record, index=None):
    """
    Renders the visible row buttons of a grid for one record.
    Usage: {% row_buttons table record forloop.counter0 %}
    """
    csrf_token = context.get("csrf_token")
    return _join(
        button.render(item=record, index=index, grid_name=table.row_route_kwarg, csrf_token=csrf_token)
        for button in table.visible_buttons("rows")
    )
