from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import arcade

from ..config.settings import Settings
from ..engine.loop import EngineConfig, GameEngine
from ..game.events import GameStatus
from ..game.session import SeatingSession
from ..grid.position import Position
from ..animation.procession import approach
from . import palette

logger = logging.getLogger(__name__)

BUTTON_WIDTH = 260
BUTTON_HEIGHT = 44


class RestaurantWindow(arcade.Window):
    """
    Arcade window drawing the dining room and the seating procession.

    Responsibilities:
    - Lay out the grid, title, button and status text in window pixels
    - Slide the waiter and guests between tiles instead of jumping
    - Forward button clicks and SPACE/ENTER to ``SeatingSession.start()``
    """

    def __init__(self, session: SeatingSession, settings: Settings, max_steps: Optional[int] = None) -> None:
        self.session = session
        self.engine = GameEngine(session, EngineConfig(max_steps=max_steps, stop_when_settled=False))
        self.engine.start()
        self.settings = settings
        ws = settings.window
        self.cell = ws.cell_px
        self.pad = ws.padding_px
        width = session.grid.cols * self.cell + 2 * self.pad
        height = ws.header_px + session.grid.rows * self.cell + 2 * self.pad + ws.footer_px
        super().__init__(width=width, height=height, title=ws.title)
        self.background_color = palette.BACKGROUND

        self._grid_left = self.pad
        self._grid_top = ws.footer_px + self.pad + session.grid.rows * self.cell
        # Pixel speed so one tile is crossed in one step interval.
        interval = max(settings.timing.step_interval_seconds, 1e-3)
        self._speed = self.cell / interval
        self._sprites: List[Tuple[float, float]] = [self.cell_center(p) for p in session.positions]
        logger.info("RestaurantWindow initialized: %dx%d", width, height)

    # Geometry
    def cell_center(self, pos: Position) -> Tuple[float, float]:
        x = self._grid_left + pos.col * self.cell + self.cell / 2
        y = self._grid_top - pos.row * self.cell - self.cell / 2
        return x, y

    def button_rect(self) -> Tuple[float, float, float, float]:
        cx = self.width / 2
        bottom = 12
        return cx - BUTTON_WIDTH / 2, cx + BUTTON_WIDTH / 2, bottom, bottom + BUTTON_HEIGHT

    def _in_button(self, x: float, y: float) -> bool:
        left, right, bottom, top = self.button_rect()
        return left <= x <= right and bottom <= y <= top

    # Arcade lifecycle
    def on_update(self, delta_time: float):  # noqa: N802 (arcade API)
        if not self.engine.running:
            # max_steps reached
            self.close()
            return
        self.engine.update(delta_time)
        targets = [self.cell_center(p) for p in self.session.positions]
        if self.session.status is GameStatus.MOVING:
            step = self._speed * delta_time
            self._sprites = [approach(cur, tgt, step) for cur, tgt in zip(self._sprites, targets)]
        else:
            self._sprites = targets

    def on_draw(self):  # noqa: N802 (arcade API)
        self.clear()
        self._draw_header()
        self._draw_grid()
        self._draw_characters()
        self._draw_footer()

    def _draw_header(self) -> None:
        top = self.height
        arcade.draw_text(
            self.settings.window.title, self.width / 2, top - 34, palette.TITLE_COLOR, 22, anchor_x="center"
        )
        arcade.draw_text(
            "Help the waiter find the table!", self.width / 2, top - 58, palette.SUBTITLE_COLOR, 11, anchor_x="center"
        )

    def _draw_grid(self) -> None:
        grid = self.session.grid
        c = self.cell
        for pos, tile in grid.positions():
            left = self._grid_left + pos.col * c
            top = self._grid_top - pos.row * c
            on_path = self.session.is_path_cell(pos)
            arcade.draw_lrbt_rectangle_filled(left, left + c, top - c, top, palette.tile_color(tile, on_path))
            outline = palette.TILE_OUTLINES.get(tile)
            if outline is not None and not on_path:
                arcade.draw_lrbt_rectangle_outline(left + 1, left + c - 1, top - c + 1, top - 1, outline, 2)
            else:
                arcade.draw_lrbt_rectangle_outline(left, left + c, top - c, top, palette.CELL_BORDER, 1)
        arcade.draw_lrbt_rectangle_outline(
            self._grid_left - 4,
            self._grid_left + grid.cols * c + 4,
            self._grid_top - grid.rows * c - 4,
            self._grid_top + 4,
            palette.GRID_FRAME,
            4,
        )

    def _draw_characters(self) -> None:
        radius = self.cell / 2 - 4
        # Guests first so the waiter is drawn on top.
        for index in reversed(range(len(self._sprites))):
            x, y = self._sprites[index]
            color = palette.WAITER_COLOR if index == 0 else palette.GUEST_COLOR
            arcade.draw_circle_filled(x, y, radius, color)
            arcade.draw_circle_outline(x, y, radius, palette.CHARACTER_OUTLINE, 2)

    def _draw_footer(self) -> None:
        left, right, bottom, top = self.button_rect()
        color = palette.BUTTON_COLOR if self.session.button_enabled else palette.BUTTON_DISABLED_COLOR
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, color)
        arcade.draw_text(
            self.session.button_text,
            (left + right) / 2,
            bottom + 14,
            (255, 255, 255),
            14,
            anchor_x="center",
        )
        message = self.session.status_message
        if message:
            color = palette.FAILURE_COLOR if self.session.status is GameStatus.NO_PATH else palette.SUCCESS_COLOR
            arcade.draw_text(message, self.width / 2, top + 12, color, 12, anchor_x="center")

    # Input
    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):  # noqa: N802
        if button == arcade.MOUSE_BUTTON_LEFT and self._in_button(x, y):
            self.session.start()

    def on_key_press(self, symbol: int, modifiers: int):  # noqa: N802 (arcade API)
        if symbol in (arcade.key.SPACE, arcade.key.ENTER):
            self.session.start()
        elif symbol == arcade.key.ESCAPE:
            self.close()
