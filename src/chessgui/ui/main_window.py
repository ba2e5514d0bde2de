"""MainWindow — top-level window hosting the board widget."""

from __future__ import annotations

from PyQt6.QtGui import QCloseEvent, QShowEvent
from PyQt6.QtWidgets import QMainWindow, QWidget

from chessgui.game.controller import BoardController
from chessgui.settings import AppSettings
from chessgui.ui.board_widget import BoardWidget
from chessgui.ui.resources import PieceAssets, load_window_icon


class MainWindow(QMainWindow):
    """Non-resizable window sized to the board layout."""

    def __init__(
        self,
        assets: PieceAssets,
        settings: AppSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or AppSettings()

        self._controller = BoardController(
            time_control=self._settings.time_control,
            layout=self._settings.layout,
        )
        self._board = BoardWidget(
            self._controller,
            assets,
            frame_interval_ms=self._settings.frame_interval_ms,
        )
        self.setCentralWidget(self._board)
        self.setWindowTitle(self._settings.window_title)
        self.setWindowIcon(load_window_icon())
        self.setFixedSize(self._board.size())

    @property
    def controller(self) -> BoardController:
        return self._controller

    @property
    def board_widget(self) -> BoardWidget:
        return self._board

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        if not self._board.is_running():
            self._board.start()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._board.stop()
        super().closeEvent(event)
