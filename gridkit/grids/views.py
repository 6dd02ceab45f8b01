import logging

from django_tables2 import SingleTableView
from django_tables2.export import ExportMixin

from gridkit.utils.tables import get_validated_page_size

logger = logging.getLogger(__name__)


class GridView(ExportMixin, SingleTableView):
    """List view for a ``Grid``, with downloads driven by the grid's export button.

    ``grid_kwargs`` are passed to the grid on every instantiation, so the page and the
    export share the same button configuration.
    """

    template_name = "grids/grid.html"
    grid_kwargs = {}

    def get_queryset(self):
        if self.table_data is not None:
            return self.table_data
        return super().get_queryset()

    def get_table_kwargs(self):
        kwargs = super().get_table_kwargs()
        kwargs.update(self.grid_kwargs)
        return kwargs

    def get_paginate_by(self, table_data):
        return get_validated_page_size(self.request)

    def get_export_filename(self, export_format):
        name = self.grid_kwargs.get("id") or self.get_table_class().default_id()
        return f"{name}.{export_format}"

    def render_to_response(self, context, **response_kwargs):
        export_format = self.request.GET.get(self.export_trigger_param, None)
        if export_format:
            table = context[self.get_context_table_name(None)]
            if not table.can_export(export_format):
                logger.warning("Refused %s export of grid %s", export_format, table.id)
                return SingleTableView.render_to_response(self, context, **response_kwargs)
        return super().render_to_response(context, **response_kwargs)
