import django_tables2 as tables
from django.middleware.csrf import get_token
from django.utils.html import format_html_join


class ButtonsColumn(tables.Column):
    """Renders the visible row buttons of the grid for each record."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("verbose_name", "")
        kwargs.setdefault("orderable", False)
        kwargs.setdefault("empty_values", ())
        kwargs.setdefault("exclude_from_export", True)
        kwargs.setdefault("attrs", {"td": {"class": "text-end text-nowrap"}})
        super().__init__(*args, **kwargs)

    def render(self, record, table, bound_row, **kwargs):
        index = getattr(bound_row, "row_counter", None)
        request = getattr(table, "request", None)
        csrf_token = get_token(request) if request is not None else None
        rendered = (
            (button.render(item=record, index=index, grid_name=table.row_route_kwarg, csrf_token=csrf_token),)
            for button in table.row_buttons()
        )
        return format_html_join(" ", "{}", rendered)
