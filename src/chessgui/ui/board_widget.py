"""BoardWidget — paints controller snapshots and forwards mouse input."""

from __future__ import annotations

import time

from PyQt6.QtCore import QRect, Qt, QTimer
from PyQt6.QtGui import QColor, QFont, QMouseEvent, QPainter, QPaintEvent
from PyQt6.QtWidgets import QWidget

from chessgui.core.enums import Color, MouseButton
from chessgui.core.piece import PROMOTION_KINDS, Piece
from chessgui.core.types import Square, all_squares
from chessgui.game.controller import BoardController
from chessgui.game.state import BoardSnapshot
from chessgui.ui.resources import PieceAssets
from chessgui.ui.styles.theme import BoardTheme

_QT_BUTTONS: dict[Qt.MouseButton, MouseButton] = {
    Qt.MouseButton.LeftButton: MouseButton.PRIMARY,
    Qt.MouseButton.RightButton: MouseButton.SECONDARY,
}


class BoardWidget(QWidget):
    """Fixed-size view of one :class:`BoardController`.

    A ``QTimer`` drives the frame loop: every timeout advances the clocks
    by the elapsed wall time and schedules a repaint. Mouse releases are
    delivered by Qt between frames.
    """

    def __init__(
        self,
        controller: BoardController,
        assets: PieceAssets,
        *,
        frame_interval_ms: int = 16,
        theme: BoardTheme | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._assets = assets
        self._theme = theme or BoardTheme.default()
        self._last_frame = time.monotonic()

        width, height = controller.viewport.window_size()
        self.setFixedSize(width, height)

        tile = controller.viewport.layout.tile_size
        self._text_font = QFont(self._theme.font_family)
        self._text_font.setPixelSize(max(10, tile * 2 // 3))
        self._banner_font = QFont(self._theme.font_family)
        self._banner_font.setPixelSize(max(20, tile * 4 // 3))

        self._timer = QTimer(self)
        self._timer.setInterval(frame_interval_ms)
        self._timer.timeout.connect(self._on_frame)

    @property
    def controller(self) -> BoardController:
        return self._controller

    def start(self) -> None:
        self._last_frame = time.monotonic()
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def is_running(self) -> bool:
        return self._timer.isActive()

    # ── Frame loop ───────────────────────────────────────────────────────

    def _on_frame(self) -> None:
        now = time.monotonic()
        delta = max(0.0, now - self._last_frame)
        self._last_frame = now
        self._controller.tick(delta)
        self.update()

    # ── Qt events ────────────────────────────────────────────────────────

    def mouseReleaseEvent(self, event: QMouseEvent | None) -> None:
        if event is None:
            return
        button = _QT_BUTTONS.get(event.button(), MouseButton.OTHER)
        pos = event.position()
        self._controller.handle_click(pos.x(), pos.y(), button)
        self.update()

    def paintEvent(self, event: QPaintEvent | None) -> None:
        snapshot = self._controller.snapshot()
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), self._theme.background)
            self._draw_board(painter, snapshot)
            self._draw_panel(painter, snapshot)
            self._draw_end_message(painter, snapshot)
        finally:
            painter.end()

    # ── Drawing ──────────────────────────────────────────────────────────

    def _rect(self, rect: tuple[int, int, int, int]) -> QRect:
        return QRect(*rect)

    def _tile_color(self, square: Square, snapshot: BoardSnapshot) -> QColor:
        if square == snapshot.selected:
            return self._theme.selected
        if square in snapshot.highlighted:
            return self._theme.movable
        if (square.file + square.rank) % 2 == 0:
            return self._theme.dark_square
        return self._theme.light_square

    def _draw_board(self, painter: QPainter, snapshot: BoardSnapshot) -> None:
        viewport = self._controller.viewport
        tile = viewport.layout.tile_size
        for square in all_squares():
            rect = self._rect(viewport.square_rect(square))
            painter.fillRect(rect, self._tile_color(square, snapshot))
            piece = snapshot.piece_at(square)
            if piece is not None:
                painter.drawPixmap(rect.topLeft(), self._assets.pixmap(piece, tile))

    def _draw_text(
        self, painter: QPainter, row: int, text: str, color: QColor
    ) -> None:
        viewport = self._controller.viewport
        x, y, _, h = viewport.panel_cell(row)
        width = viewport.layout.panel_columns * viewport.layout.tile_size
        painter.setPen(color)
        painter.setFont(self._text_font)
        painter.drawText(
            QRect(x + 10, y, width - 10, h),
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
            text,
        )

    def _draw_panel(self, painter: QPainter, snapshot: BoardSnapshot) -> None:
        layout = self._controller.viewport.layout
        white_to_move = snapshot.side_to_move == Color.WHITE
        side_color = self._theme.side_color(white_to_move)

        self._draw_text(painter, layout.reset_row, "Reset", self._theme.text)
        self._draw_text(painter, layout.turn_row, snapshot.turn_text, side_color)
        self._draw_text(
            painter,
            layout.promotion_caption_row,
            "Choose piece to promote to:",
            self._theme.text,
        )
        self._draw_promotion_icons(painter, snapshot)
        self._draw_text(
            painter,
            layout.clock_row,
            f"Time left: {snapshot.active_clock_text}",
            side_color,
        )

    def _draw_promotion_icons(
        self, painter: QPainter, snapshot: BoardSnapshot
    ) -> None:
        viewport = self._controller.viewport
        tile = viewport.layout.tile_size
        for index, kind in enumerate(PROMOTION_KINDS):
            rect = self._rect(viewport.promotion_slot_rect(index))
            if kind == snapshot.active_promotion:
                painter.fillRect(rect, self._theme.selected)
            piece = Piece(snapshot.side_to_move, kind)
            painter.drawPixmap(rect.topLeft(), self._assets.pixmap(piece, tile))

    def _draw_end_message(self, painter: QPainter, snapshot: BoardSnapshot) -> None:
        message = snapshot.end_message
        if message is None:
            return
        winner_white = snapshot.winner == Color.WHITE
        painter.setPen(self._theme.side_color(winner_white))
        painter.setFont(self._banner_font)
        lay = self._controller.viewport.layout
        painter.drawText(
            QRect(lay.origin_x, lay.origin_y, lay.board_pixels, lay.board_pixels),
            Qt.AlignmentFlag.AlignCenter,
            message,
        )
