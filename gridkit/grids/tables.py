import re

import django_tables2 as tables
from django.conf import settings
from django.utils.text import slugify
from django_tables2.export import TableExport
from django_tables2.utils import AttributeDict

from gridkit.buttons.mixins import ConfiguresButtons
from gridkit.grids.columns import ButtonsColumn
from gridkit.utils.tables import merge_attrs

DEFAULT_EXPORT_FORMATS = ["csv", "xlsx", "json"]

GRID_OPTIONS = (
    "id",
    "name",
    "create_route_name",
    "view_route_name",
    "delete_route_name",
    "index_route_name",
    "allows_exporting",
    "export_formats",
    "buttons_to_generate",
    "render_buttons",
    "row_route_kwarg",
)


def _class_words(cls):
    name = re.sub(r"(Grid|Table)$", "", cls.__name__) or cls.__name__
    return re.findall(r"[A-Z]+(?=[A-Z][a-z]|$)|[A-Z]?[a-z0-9]+|[A-Z]+", name)


class Grid(ConfiguresButtons, tables.Table):
    """
    A django-tables2 table with toolbar and row buttons.

    Any of ``GRID_OPTIONS`` can be set as a class attribute or passed to the
    constructor, e.g.

        class ProductGrid(Grid):
            create_route_name = "products:create"
            view_route_name = "products:detail"

            class Meta:
                model = Product

        grid = ProductGrid(queryset, allows_exporting=True)

    Buttons are rebuilt on every instantiation: the defaults first, then whatever
    ``configure_buttons()`` adds or changes.
    """

    id = None
    name = None
    row_route_kwarg = "pk"

    def __init__(self, *args, **kwargs):
        for option in GRID_OPTIONS:
            if option in kwargs:
                setattr(self, option, kwargs.pop(option))
        if self.render_buttons:
            kwargs["extra_columns"] = [*kwargs.get("extra_columns", []), ("actions", ButtonsColumn())]
        super().__init__(*args, **kwargs)

        if self.id is None:
            self.id = self.default_id()
        if self.name is None:
            self.name = self.default_name()
        self.export_formats = self.get_export_formats()

        self.attrs = AttributeDict(merge_attrs(self.attrs or {}, {"id": self.id, "class": "grid"}))
        self.set_default_buttons()
        self.configure_buttons()

    @classmethod
    def default_id(cls):
        return cls.id or slugify("-".join(_class_words(cls) + ["grid"]))

    @classmethod
    def default_name(cls):
        return cls.name or " ".join(_class_words(cls))

    def configure_buttons(self):
        pass

    def get_export_formats(self):
        formats = self.export_formats
        if formats is None:
            formats = getattr(settings, "GRIDKIT_EXPORT_FORMATS", DEFAULT_EXPORT_FORMATS)
        return tuple(fmt for fmt in formats if TableExport.is_valid_format(fmt))

    def short_singular_grid_name(self):
        name = str(self.name).lower()
        if name.endswith("s") and not name.endswith("ss"):
            name = name[:-1]
        return name

    def can_export(self, export_format):
        export_button = self.buttons.get("toolbar", {}).get("export")
        if export_button is None or not export_button.visible():
            return False
        return export_format in self.export_formats

    def toolbar_buttons(self):
        return self.visible_buttons("toolbar")

    def row_buttons(self):
        return self.visible_buttons("rows")
