import pytest

from gridkit.buttons.buttons import ButtonTarget, GenericButton, RowRoute
from gridkit.buttons.exceptions import InvalidButtonError, InvalidButtonTarget
from gridkit.buttons.mixins import ConfiguresButtons


class StubGrid(ConfiguresButtons):
    id = "products-grid"
    name = "Products"
    create_route_name = "products:create"
    view_route_name = "products:detail"
    delete_route_name = "products:delete"
    index_route_name = "products:index"

    def __init__(self, buttons_to_generate=None, allows_exporting=False, populate=True):
        self.buttons_to_generate = buttons_to_generate
        self.allows_exporting = allows_exporting
        if populate:
            self.set_default_buttons()
            self.configure_buttons()

    def configure_buttons(self):
        pass

    def short_singular_grid_name(self):
        return "product"


@pytest.fixture
def grid():
    return StubGrid()


def test_configure_buttons_must_be_implemented():
    class Incomplete(ConfiguresButtons):
        pass

    with pytest.raises(NotImplementedError):
        Incomplete().configure_buttons()


class TestDefaultButtons:
    def test_buckets(self, grid):
        assert list(grid.buttons["toolbar"]) == ["create", "refresh", "export"]
        assert list(grid.buttons["rows"]) == ["view", "delete"]

    def test_generation_list_defaults_to_settings(self, settings):
        settings.GRIDKIT_BUTTONS_TO_GENERATE = ["create"]
        grid = StubGrid()
        assert grid.buttons_to_generate == ["create"]
        assert [b.name for b in grid.visible_buttons("toolbar")] == ["create"]
        assert [b.name for b in grid.visible_buttons("rows")] == ["view"]

    def test_titles_and_links(self, grid):
        create = grid.get_button("toolbar", "create")
        assert create.title == "add new product"
        assert create.link == "products:create"
        assert create.grid_id == "products-grid"
        refresh = grid.get_button("toolbar", "refresh")
        assert refresh.title == "refresh table for products"
        assert refresh.link == "products:index"
        assert grid.get_button("toolbar", "export").link == "products:index"

    def test_row_routes(self, grid):
        assert grid.get_button("rows", "view").row_route == RowRoute("products:detail", ref="products-grid")
        assert grid.get_button("rows", "delete").row_route == RowRoute("products:delete", ref="products-grid")

    def test_row_routes_without_route_names(self):
        grid = StubGrid(populate=False)
        grid.view_route_name = None
        grid.set_default_buttons()
        view = grid.get_button("rows", "view")
        assert view.row_route is None
        assert view.get_url(item={"pk": 1}) == "#"

    @pytest.mark.parametrize("name, target", [("create", "toolbar"), ("refresh", "toolbar"), ("delete", "rows")])
    def test_visible_iff_listed(self, name, target):
        assert StubGrid(buttons_to_generate=[name]).get_button(target, name).visible()
        others = [n for n in ["create", "view", "delete", "refresh", "export"] if n != name]
        assert not StubGrid(buttons_to_generate=others).get_button(target, name).visible()

    def test_view_always_visible(self):
        assert StubGrid(buttons_to_generate=[]).get_button("rows", "view").visible()

    @pytest.mark.parametrize(
        "allows_exporting, listed, expected",
        [
            (True, True, True),
            (True, False, True),
            (False, True, True),
            (False, False, False),
        ],
    )
    def test_export_visibility(self, allows_exporting, listed, expected):
        grid = StubGrid(buttons_to_generate=["export"] if listed else [], allows_exporting=allows_exporting)
        assert grid.get_button("toolbar", "export").visible() is expected

    @pytest.mark.parametrize("setting", [True, False])
    def test_unset_allows_exporting_resolves_from_settings(self, settings, setting):
        settings.GRIDKIT_ALLOWS_EXPORTING = setting
        grid = StubGrid(buttons_to_generate=[], allows_exporting=None)
        assert grid.allows_exporting is setting
        assert grid.get_button("toolbar", "export").visible() is setting

    def test_explicit_allows_exporting_is_kept(self, settings):
        settings.GRIDKIT_ALLOWS_EXPORTING = True
        grid = StubGrid(buttons_to_generate=[], allows_exporting=False)
        assert grid.allows_exporting is False
        assert not grid.get_button("toolbar", "export").visible()

    def test_visibility_follows_later_changes(self, grid):
        export = grid.get_button("toolbar", "export")
        grid.buttons_to_generate = []
        assert not export.visible()
        grid.allows_exporting = True
        assert export.visible()

    def test_set_default_buttons_overwrites(self, grid):
        grid.add_toolbar_button("bulk", GenericButton(name="bulk"))
        grid.set_default_buttons()
        assert "bulk" not in grid.buttons["toolbar"]


class TestAddButton:
    @pytest.mark.parametrize("target", ["toolbar", "rows"])
    def test_add_button(self, grid, target):
        before = {t: dict(bucket) for t, bucket in grid.buttons.items()}
        button = GenericButton(name="bulk")
        grid.add_button(target, "bulk", button)
        assert grid.get_button(target, "bulk") is button
        for t, bucket in before.items():
            for name, existing in bucket.items():
                assert grid.buttons[t][name] is existing

    @pytest.mark.parametrize("target", ["invalid", "row", "", None])
    def test_invalid_target(self, grid, target):
        with pytest.raises(InvalidButtonTarget) as exc_info:
            grid.add_button(target, "bulk", GenericButton(name="bulk"))
        assert '["rows", "toolbar"]' in str(exc_info.value)

    def test_invalid_target_is_value_error(self, grid):
        with pytest.raises(ValueError):
            grid.add_button("sidebar", "bulk", GenericButton())

    def test_last_write_wins(self, grid):
        first, second = GenericButton(name="bulk"), GenericButton(name="bulk")
        grid.add_button("rows", "bulk", first)
        grid.add_button("rows", "bulk", second)
        assert grid.get_button("rows", "bulk") is second
        assert list(grid.buttons["rows"]) == ["view", "delete", "bulk"]

    def test_same_name_in_both_buckets(self, grid):
        row_export = GenericButton(name="export")
        grid.add_row_button("export", row_export)
        assert grid.get_button("rows", "export") is row_export
        assert grid.get_button("toolbar", "export") is not row_export

    def test_add_on_empty_registry(self):
        grid = StubGrid(populate=False)
        button = GenericButton(name="bulk")
        grid.add_button(ButtonTarget.toolbar, "bulk", button)
        assert grid.buttons == {"toolbar": {"bulk": button}}

    def test_remove_button(self, grid):
        grid.remove_button("toolbar", "refresh")
        assert list(grid.buttons["toolbar"]) == ["create", "export"]
        with pytest.raises(InvalidButtonError):
            grid.remove_button("toolbar", "refresh")


class TestMakeCustomButton:
    def test_toolbar(self, grid):
        button = grid.make_custom_button({"name": "bulk", "label": "Bulk"}, "toolbar")
        assert grid.buttons["toolbar"]["bulk"] is button
        assert "bulk" not in grid.buttons["rows"]
        assert button.label == "Bulk"

    @pytest.mark.parametrize("position", [None, "rows", "row", "elsewhere"])
    def test_rows(self, grid, position):
        button = grid.make_custom_button({"name": "bulk"}, position)
        assert grid.buttons["rows"]["bulk"] is button
        assert "bulk" not in grid.buttons["toolbar"]

    def test_name_defaults_to_unknown(self, grid):
        button = grid.make_custom_button({"label": "Nameless"})
        assert button.name == "unknown"
        assert grid.buttons["rows"]["unknown"] is button

    def test_extra_properties(self, grid):
        button = grid.make_custom_button({"name": "sync", "endpoint": "/sync/"})
        assert button.endpoint == "/sync/"


class TestEditButtons:
    def test_edit_changes_only_the_given_property(self, grid):
        view = grid.get_button("rows", "view")
        delete = grid.get_button("rows", "delete")
        before = {key: getattr(view, key) for key in view.fields if key != "title"}
        delete_title = delete.title

        grid.edit_button_properties("rows", "view", {"title": "X"})

        assert grid.get_button("rows", "view") is view
        assert view.title == "X"
        assert {key: getattr(view, key) for key in view.fields if key != "title"} == before
        assert delete.title == delete_title

    def test_edit_row_button(self, grid):
        grid.edit_row_button("delete", {"label": "Remove", "confirm": "Really?"})
        delete = grid.get_button("rows", "delete")
        assert delete.label == "Remove"
        assert delete.extra == {"confirm": "Really?"}

    def test_edit_toolbar_button(self, grid):
        grid.edit_toolbar_button("create", {"visibility": False})
        assert not grid.get_button("toolbar", "create").visible()

    @pytest.mark.parametrize(
        "edit",
        [
            lambda grid: grid.edit_button_properties("rows", "missing", {"title": "X"}),
            lambda grid: grid.edit_button_properties("sidebar", "view", {"title": "X"}),
            lambda grid: grid.edit_row_button("missing", {"title": "X"}),
            lambda grid: grid.edit_toolbar_button("missing", {"title": "X"}),
        ],
    )
    def test_edit_missing_button(self, grid, edit):
        with pytest.raises(InvalidButtonError):
            edit(grid)

    def test_error_names_the_button(self, grid):
        with pytest.raises(InvalidButtonError, match="The button missing could not be found or is invalid."):
            grid.edit_row_button("missing", {})

    def test_edit_invalid_button(self, grid):
        grid.buttons["rows"]["broken"] = "not a button"
        with pytest.raises(InvalidButtonError):
            grid.edit_row_button("broken", {"title": "X"})

    def test_edit_before_population(self):
        grid = StubGrid(populate=False)
        with pytest.raises(InvalidButtonError):
            grid.edit_toolbar_button("create", {"title": "X"})


class TestVisibleButtons:
    def test_insertion_order(self, grid):
        grid.make_custom_button({"name": "first"}, "toolbar")
        grid.make_custom_button({"name": "second"}, "toolbar")
        assert [b.name for b in grid.visible_buttons("toolbar")] == ["create", "refresh", "export", "first", "second"]

    def test_render_buttons_switch(self, grid):
        grid.render_buttons = False
        assert grid.visible_buttons("toolbar") == []
        assert grid.visible_buttons("rows") == []

    def test_invalid_target(self, grid):
        with pytest.raises(InvalidButtonTarget):
            grid.get_buttons("sidebar")
