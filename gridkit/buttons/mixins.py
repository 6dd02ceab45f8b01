import logging

from django.conf import settings

from gridkit.buttons.buttons import (
    AnyOf,
    ButtonTarget,
    CreateButton,
    DeleteButton,
    ExportButton,
    FlagSet,
    GenericButton,
    InGenerationList,
    RefreshButton,
    RowRoute,
    ViewButton,
)
from gridkit.buttons.exceptions import InvalidButtonError, InvalidButtonTarget

logger = logging.getLogger(__name__)

DEFAULT_BUTTONS_TO_GENERATE = ["create", "view", "delete", "refresh", "export"]


def get_default_buttons_to_generate():
    return list(getattr(settings, "GRIDKIT_BUTTONS_TO_GENERATE", DEFAULT_BUTTONS_TO_GENERATE))


class ConfiguresButtons:
    """
    Keeps the buttons of a grid in two buckets, ``toolbar`` and ``rows``, each a
    mapping of button name to button.

    Classes using the mixin provide the grid context read by the default buttons:
    ``id``, ``name``, ``allows_exporting``, the ``*_route_name`` attributes and
    ``short_singular_grid_name()``. They also implement ``configure_buttons()``,
    which runs once the default buttons are in place.
    """

    render_buttons = True
    button_targets = [choice.value for choice in ButtonTarget]
    buttons_to_generate = None

    create_route_name = None
    view_route_name = None
    delete_route_name = None
    index_route_name = None
    allows_exporting = None
    export_formats = None

    @property
    def buttons(self):
        if "_buttons" not in self.__dict__:
            self._buttons = {}
        return self._buttons

    @buttons.setter
    def buttons(self, value):
        self._buttons = value

    def configure_buttons(self):
        """Add, remove or edit buttons here, e.g. with ``add_button()`` or ``edit_button_properties()``."""
        raise NotImplementedError

    def add_button(self, target: str, name: str, button: GenericButton):
        if target not in self.button_targets:
            raise InvalidButtonTarget(target, self.button_targets)
        target = str(target)
        bucket = self.buttons.setdefault(target, {})
        if name in bucket:
            logger.debug("Replacing %s button '%s' on grid %s", target, name, self.id)
        bucket[name] = button

    def add_toolbar_button(self, name: str, button: GenericButton):
        self.add_button(ButtonTarget.toolbar, name, button)

    def add_row_button(self, name: str, button: GenericButton):
        self.add_button(ButtonTarget.rows, name, button)

    def remove_button(self, target: str, name: str):
        self.get_button(target, name)
        del self.buttons[str(target)][name]

    def set_default_buttons(self):
        if self.buttons_to_generate is None:
            self.buttons_to_generate = get_default_buttons_to_generate()
        if self.allows_exporting is None:
            self.allows_exporting = getattr(settings, "GRIDKIT_ALLOWS_EXPORTING", False)
        self.buttons = {
            ButtonTarget.toolbar.value: {
                "create": self.make_create_button(),
                "refresh": self.make_refresh_button(),
                "export": self.make_export_button(),
            },
            ButtonTarget.rows.value: {
                "view": self.make_view_button(),
                "delete": self.make_delete_button(),
            },
        }

    def make_create_button(self) -> GenericButton:
        return CreateButton(
            name="create",
            grid_id=self.id,
            link=self.create_route_name,
            title=f"add new {self.short_singular_grid_name()}",
            visibility=InGenerationList(self, "create"),
        )

    def make_refresh_button(self) -> GenericButton:
        return RefreshButton(
            name="refresh",
            grid_id=self.id,
            link=self.index_route_name,
            title=f"refresh table for {str(self.name).lower()}",
            visibility=InGenerationList(self, "refresh"),
        )

    def make_export_button(self) -> GenericButton:
        return ExportButton(
            name="export",
            grid_id=self.id,
            link=self.index_route_name,
            export_formats=tuple(self.export_formats or ()),
            visibility=AnyOf(FlagSet(self, "allows_exporting"), InGenerationList(self, "export")),
        )

    def make_view_button(self) -> GenericButton:
        return ViewButton(
            name="view",
            grid_id=self.id,
            row_route=RowRoute(self.view_route_name, ref=self.id) if self.view_route_name else None,
        )

    def make_delete_button(self) -> GenericButton:
        return DeleteButton(
            name="delete",
            grid_id=self.id,
            row_route=RowRoute(self.delete_route_name, ref=self.id) if self.delete_route_name else None,
            visibility=InGenerationList(self, "delete"),
        )

    def make_custom_button(self, properties, position=None) -> GenericButton:
        """
        Build a ``GenericButton`` from ``properties`` and add it to the grid.

        The button goes to the toolbar when ``position`` is ``"toolbar"``, and to the
        rows otherwise.
        """
        name = properties.get("name", "unknown")
        button = GenericButton(**{**properties, "name": name})
        if position == ButtonTarget.toolbar:
            self.add_toolbar_button(name, button)
            return self.buttons[ButtonTarget.toolbar.value][name]
        self.add_row_button(name, button)
        return self.buttons[ButtonTarget.rows.value][name]

    def get_button(self, target: str, name: str) -> GenericButton:
        button = self.buttons.get(str(target), {}).get(name)
        self._ensure_button_instance_validity(button, name)
        return button

    def get_buttons(self, target: str):
        if target not in self.button_targets:
            raise InvalidButtonTarget(target, self.button_targets)
        return list(self.buttons.get(str(target), {}).values())

    def visible_buttons(self, target: str):
        if not self.render_buttons:
            return []
        return [button for button in self.get_buttons(target) if button.visible()]

    def edit_button_properties(self, target: str, name: str, properties):
        button = self.get_button(target, name)
        button.update(properties)
        logger.debug("Edited %s button '%s' on grid %s: %s", target, name, self.id, sorted(properties))

    def edit_row_button(self, name: str, properties):
        self.edit_button_properties(ButtonTarget.rows, name, properties)

    def edit_toolbar_button(self, name: str, properties):
        self.edit_button_properties(ButtonTarget.toolbar, name, properties)

    @staticmethod
    def _ensure_button_instance_validity(button, name):
        if button is None or not isinstance(button, GenericButton):
            raise InvalidButtonError(name)
