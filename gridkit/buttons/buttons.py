from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from django.db import models
from django.forms.utils import flatatt
from django.urls import reverse
from django.utils.html import format_html, format_html_join
from django.utils.translation import gettext_lazy as _


class ButtonTarget(models.TextChoices):
    rows = "rows", _("Rows")
    toolbar = "toolbar", _("Toolbar")


# visibility predicates, evaluated every time a button is about to be rendered


@dataclass(frozen=True)
class Always:
    def __call__(self):
        return True


@dataclass(frozen=True)
class Never:
    def __call__(self):
        return False


@dataclass(frozen=True)
class FlagSet:
    """Visible while ``owner.<attribute>`` is truthy."""

    owner: Any
    attribute: str

    def __call__(self):
        return bool(getattr(self.owner, self.attribute, False))


@dataclass(frozen=True)
class InGenerationList:
    """Visible while ``name`` is listed in the owner's buttons to generate."""

    owner: Any
    name: str
    list_attribute: str = "buttons_to_generate"

    def __call__(self):
        return self.name in (getattr(self.owner, self.list_attribute, None) or ())


class AnyOf:
    def __init__(self, *predicates):
        self.predicates = predicates

    def __call__(self):
        return any(predicate() for predicate in self.predicates)

    def __repr__(self):
        return f"AnyOf{self.predicates!r}"


def as_visibility(value):
    if isinstance(value, bool):
        return Always() if value else Never()
    if not callable(value):
        raise TypeError(f"Button visibility must be a bool or a predicate, got {value!r}")
    return value


def _item_pk(item):
    if isinstance(item, Mapping):
        return item.get("pk", item.get("id"))
    pk = getattr(item, "pk", None)
    return pk if pk is not None else getattr(item, "id", None)


@dataclass(frozen=True)
class RowRoute:
    """Resolves the URL of a row button for one record of the grid.

    ``grid_name`` is the URL kwarg that receives the record's primary key, ``ref`` is
    appended as a query parameter so the target view can link back to the grid.
    """

    route_name: str
    ref: Any = None

    def resolve(self, grid_name, item, index=None):
        url = reverse(self.route_name, kwargs={grid_name: _item_pk(item)})
        if self.ref is not None:
            url = f"{url}?{urlencode({'ref': self.ref})}"
        return url


class GenericButton:
    """A single button on a grid.

    Known properties live in ``fields`` and are plain attributes. Anything else passed
    in at construction or through ``update()`` is kept in ``extra`` and can still be
    read as an attribute.
    """

    fields = (
        "name",
        "label",
        "title",
        "icon",
        "css_class",
        "grid_id",
        "link",
        "url",
        "row_route",
        "visibility",
        "position",
        "attrs",
        "show_modal",
    )

    label = ""
    icon = ""
    css_class = "btn btn-sm btn-outline-secondary"
    show_modal = False
    default_attrs = {}

    def __init__(self, **properties):
        self.name = "unknown"
        self.title = ""
        self.grid_id = None
        self.link = None
        self.url = None
        self.row_route = None
        self.visibility = Always()
        self.position = None
        self.attrs = dict(self.default_attrs)
        self.extra = {}
        self.update(properties)

    def __getattr__(self, item):
        extra = self.__dict__.get("extra", {})
        if item in extra:
            return extra[item]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{item}'")

    def __repr__(self):
        return f"<{type(self).__name__} name={self.name!r}>"

    def update(self, properties):
        for key, value in properties.items():
            if key == "visibility":
                value = as_visibility(value)
            if key in self.fields:
                setattr(self, key, value)
            else:
                self.extra[key] = value

    def visible(self):
        return bool(self.visibility())

    def get_url(self, grid_name=None, item=None, index=None):
        if self.row_route is not None and item is not None:
            return self.row_route.resolve(grid_name or "pk", item, index)
        if self.url:
            return self.url
        if self.link:
            return reverse(self.link)
        return "#"

    def get_attrs(self):
        attrs = {"class": self.css_class, "title": self.title or self.label}
        if self.grid_id is not None:
            attrs["data-grid-id"] = self.grid_id
        if self.show_modal:
            attrs["data-modal"] = "true"
        attrs.update(self.attrs)
        return attrs

    def render(self, item=None, index=None, grid_name=None, csrf_token=None):
        icon = format_html('<i class="bi {}"></i> ', self.icon) if self.icon else ""
        return format_html(
            '<a href="{}"{}>{}{}</a>',
            self.get_url(grid_name=grid_name, item=item, index=index),
            flatatt(self.get_attrs()),
            icon,
            self.label or self.name,
        )


class CreateButton(GenericButton):
    label = _("Create")
    icon = "bi-plus-circle"
    css_class = "btn btn-sm btn-primary"


class ViewButton(GenericButton):
    label = _("View")
    icon = "bi-eye"
    css_class = "btn btn-sm btn-outline-primary"


class DeleteButton(GenericButton):
    """Submits a POST to the delete URL from a small form, after the browser confirms it."""

    label = _("Delete")
    icon = "bi-trash"
    css_class = "btn btn-sm btn-outline-danger"
    default_attrs = {"data-confirm": _("Are you sure you want to delete this item?")}

    def render(self, item=None, index=None, grid_name=None, csrf_token=None):
        attrs = self.get_attrs()
        confirm = attrs.pop("data-confirm", None)
        form_attrs = {"method": "post", "action": self.get_url(grid_name=grid_name, item=item, index=index)}
        if confirm:
            form_attrs.update({"data-confirm": confirm, "onsubmit": "return confirm(this.dataset.confirm);"})
        csrf_input = (
            format_html('<input type="hidden" name="csrfmiddlewaretoken" value="{}">', csrf_token) if csrf_token else ""
        )
        icon = format_html('<i class="bi {}"></i> ', self.icon) if self.icon else ""
        return format_html(
            '<form class="d-inline"{}>{}<button type="submit"{}>{}{}</button></form>',
            flatatt(form_attrs),
            csrf_input,
            flatatt(attrs),
            icon,
            self.label or self.name,
        )


class RefreshButton(GenericButton):
    label = _("Refresh")
    icon = "bi-arrow-clockwise"


class ExportButton(GenericButton):
    fields = GenericButton.fields + ("export_formats", "export_param")

    label = _("Export")
    icon = "bi-download"
    export_param = "_export"

    def __init__(self, **properties):
        self.export_formats = ()
        super().__init__(**properties)

    def export_urls(self):
        base_url = self.get_url()
        return [(fmt, f"{base_url}?{urlencode({self.export_param: fmt})}") for fmt in self.export_formats]

    def render(self, item=None, index=None, grid_name=None, csrf_token=None):
        if not self.export_formats:
            return super().render(item=item, index=index, grid_name=grid_name, csrf_token=csrf_token)
        links = format_html_join(
            "",
            '<a class="dropdown-item" href="{}">{}</a>',
            ((url, fmt.upper()) for fmt, url in self.export_urls()),
        )
        return format_html(
            '<div class="btn-group"><span{}><i class="bi {}"></i> {}</span>{}</div>',
            flatatt(self.get_attrs()),
            self.icon,
            self.label,
            links,
        )
