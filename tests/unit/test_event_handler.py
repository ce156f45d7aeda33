"""Unit tests for planner EventHandler mouse and keyboard handling."""

import pytest
from unittest.mock import Mock, patch

import pygame

from loophero.core.grid import Terrain
from loophero.core.landscape import LandscapeKind
from planner.controllers.event_handler import EventHandler
from planner.controllers.planner_state import PlannerState
from planner.rendering.board_renderer import board_layout


@pytest.fixture
def mock_pygame():
    """Initialize pygame for tests."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def planner_state():
    return PlannerState(3, 3, LandscapeKind.MEADOW)


@pytest.fixture
def event_handler(planner_state):
    """Create EventHandler with mock callbacks."""
    return EventHandler(
        state=planner_state,
        buttons=[],
        screen_width=800,
        screen_height=600,
        on_solve=Mock(),
        on_export=Mock(),
        on_resize=Mock(),
    )


class MockEvent:
    """Mock pygame event."""

    def __init__(self, type, **kwargs):
        self.type = type
        for k, v in kwargs.items():
            setattr(self, k, v)


def cell_center(handler, row, col):
    """Screen position of the middle of a board cell."""
    grid = handler.state.grid
    x, y, size = board_layout(handler.get_canvas_rect(), grid.rows, grid.cols)
    return (x + col * size + size // 2, y + row * size + size // 2)


def press(handler, key, mods=0):
    with patch("pygame.key.get_mods", return_value=mods):
        return handler.handle_events([MockEvent(pygame.KEYDOWN, key=key)])


def click(handler, pos, button=1):
    return handler.handle_events([MockEvent(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)])


class TestScreenToCell:
    def test_cell_centers_map_back(self, mock_pygame, event_handler):
        for row in range(3):
            for col in range(3):
                pos = cell_center(event_handler, row, col)
                assert event_handler.screen_to_cell(pos) == row * 3 + col

    def test_outside_board(self, mock_pygame, event_handler):
        assert event_handler.screen_to_cell((0, 0)) is None
        assert event_handler.screen_to_cell((799, 599)) is None

    def test_follows_resize(self, mock_pygame, event_handler):
        event_handler.update_screen_size(400, 300)
        pos = cell_center(event_handler, 2, 2)
        assert event_handler.screen_to_cell(pos) == 8


class TestMouse:
    def test_left_click_places_landscape(self, mock_pygame, event_handler):
        click(event_handler, cell_center(event_handler, 1, 1))
        assert event_handler.state.grid.tile(4).kind == Terrain.LANDSCAPE

    def test_right_click_extends_river(self, mock_pygame, event_handler):
        click(event_handler, cell_center(event_handler, 0, 0), button=3)
        click(event_handler, cell_center(event_handler, 0, 1), button=3)
        assert event_handler.state.grid.river_path == [0, 1]

    def test_middle_click_removes(self, mock_pygame, event_handler):
        click(event_handler, cell_center(event_handler, 2, 2))
        click(event_handler, cell_center(event_handler, 2, 2), button=2)
        assert event_handler.state.grid.filled_count == 0

    def test_click_off_board_is_ignored(self, mock_pygame, event_handler):
        assert click(event_handler, (1, 1)) is True
        assert event_handler.state.grid.filled_count == 0

    def test_motion_tracks_hover(self, mock_pygame, event_handler):
        pos = cell_center(event_handler, 0, 2)
        event_handler.handle_events([MockEvent(pygame.MOUSEMOTION, pos=pos)])
        assert event_handler.state.hover_cell == 2

    def test_buttons_receive_events(self, mock_pygame, event_handler):
        button = Mock()
        event_handler.buttons.append(button)
        event = MockEvent(pygame.MOUSEMOTION, pos=(5, 5))
        event_handler.handle_events([event])
        button.handle_event.assert_called_once_with(event)


class TestKeyboard:
    def test_ctrl_z_and_ctrl_y(self, mock_pygame, event_handler):
        event_handler.state.place_landscape(4)
        press(event_handler, pygame.K_z, pygame.KMOD_CTRL)
        assert event_handler.state.grid.filled_count == 0
        press(event_handler, pygame.K_y, pygame.KMOD_CTRL)
        assert event_handler.state.grid.filled_count == 1

    def test_delete_removes_hovered_tile(self, mock_pygame, event_handler):
        event_handler.state.place_landscape(5)
        event_handler.state.hover_cell = 5
        press(event_handler, pygame.K_DELETE)
        assert event_handler.state.grid.tile(5).kind == Terrain.EMPTY

    def test_o_optimizes(self, mock_pygame, event_handler):
        press(event_handler, pygame.K_o)
        event_handler.on_solve.assert_called_once()
        event_handler.on_export.assert_not_called()

    def test_p_exports_png(self, mock_pygame, event_handler):
        press(event_handler, pygame.K_p)
        event_handler.on_export.assert_called_once()

    def test_undo_after_landscape_switch(self, mock_pygame, event_handler):
        press(event_handler, pygame.K_3)
        press(event_handler, pygame.K_z, pygame.KMOD_CTRL)
        assert event_handler.state.landscape is LandscapeKind.MEADOW

    def test_c_clears(self, mock_pygame, event_handler):
        event_handler.state.place_river(0)
        press(event_handler, pygame.K_c)
        assert event_handler.state.grid.filled_count == 0

    def test_f_fills(self, mock_pygame, event_handler):
        press(event_handler, pygame.K_f)
        assert event_handler.state.grid.is_full

    def test_g_and_v_toggle_view(self, mock_pygame, event_handler):
        press(event_handler, pygame.K_g)
        press(event_handler, pygame.K_v)
        assert event_handler.state.show_grid is False
        assert event_handler.state.show_tile_scores is False

    def test_number_keys_switch_landscape(self, mock_pygame, event_handler):
        press(event_handler, pygame.K_2)
        assert event_handler.state.landscape is LandscapeKind.MOUNTAIN

    def test_escape_quits(self, mock_pygame, event_handler):
        assert press(event_handler, pygame.K_ESCAPE) is False


class TestWindowEvents:
    def test_quit(self, mock_pygame, event_handler):
        assert event_handler.handle_events([MockEvent(pygame.QUIT)]) is False

    def test_resize_calls_back(self, mock_pygame, event_handler):
        event_handler.handle_events([MockEvent(pygame.VIDEORESIZE, w=1024, h=768)])
        event_handler.on_resize.assert_called_once_with(1024, 768)
