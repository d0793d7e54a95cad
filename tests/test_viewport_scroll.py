"""Test that the viewport follows the cursor."""

import pytest
from levorg.cursor import CursorPosition, Viewport, reconcile_viewport


def test_no_scroll_while_cursor_visible():
    viewport = Viewport(scroll_row=3)
    reconcile_viewport(viewport, CursorPosition(5, 0), 5)
    assert viewport.scroll_row == 3


def test_scrolls_up_to_cursor_above_view():
    viewport = Viewport(scroll_row=10)
    reconcile_viewport(viewport, CursorPosition(4, 0), 5)
    assert viewport.scroll_row == 4


def test_scrolls_down_so_cursor_is_last_visible_row():
    viewport = Viewport(scroll_row=0)
    reconcile_viewport(viewport, CursorPosition(5, 0), 5)
    assert viewport.scroll_row == 1


@pytest.mark.parametrize("scroll_row", [0, 3, 17, 40])
@pytest.mark.parametrize("cursor_row", [0, 1, 9, 20, 39])
@pytest.mark.parametrize("height", [1, 4, 10])
def test_cursor_always_visible_after_reconcile(scroll_row, cursor_row, height):
    viewport = Viewport(scroll_row=scroll_row)
    reconcile_viewport(viewport, CursorPosition(cursor_row, 0), height)
    assert viewport.scroll_row <= cursor_row < viewport.scroll_row + height


def test_horizontal_scroll_untouched_without_width():
    viewport = Viewport()
    reconcile_viewport(viewport, CursorPosition(0, 500), 10)
    assert viewport.scroll_col == 0


def test_horizontal_scroll_follows_cursor_when_enabled():
    viewport = Viewport()
    reconcile_viewport(viewport, CursorPosition(0, 25), 10, visible_width=20)
    assert viewport.scroll_col == 6
    reconcile_viewport(viewport, CursorPosition(0, 2), 10, visible_width=20)
    assert viewport.scroll_col == 2
