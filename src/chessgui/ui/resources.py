"""Piece image loading.

All twelve piece images and the window icon are loaded once at startup;
a missing or unreadable file aborts startup.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QIcon, QImage, QPainter, QPixmap
from PyQt6.QtSvg import QSvgRenderer

from chessgui.core.enums import Color, PieceType
from chessgui.core.piece import Piece, all_pieces

_LOGGER = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"

_PIECE_NAMES: dict[PieceType, str] = {
    PieceType.PAWN: "pawn",
    PieceType.KNIGHT: "knight",
    PieceType.BISHOP: "bishop",
    PieceType.ROOK: "rook",
    PieceType.QUEEN: "queen",
    PieceType.KING: "king",
}

_COLOR_SUFFIX: dict[Color, str] = {
    Color.WHITE: "w",
    Color.BLACK: "b",
}


class MissingResourceError(FileNotFoundError):
    """A required asset could not be loaded."""


def _load_svg(path: Path) -> QSvgRenderer:
    if not path.is_file():
        raise MissingResourceError(f"Image not found: {path}")
    renderer = QSvgRenderer(str(path))
    if not renderer.isValid():
        raise MissingResourceError(f"Image is not a valid SVG: {path}")
    return renderer


def piece_asset_path(piece: Piece, assets_dir: Path | None = None) -> Path:
    """Path of the SVG for *piece*, e.g. ``pieces/knight-b.svg``."""
    root = assets_dir or ASSETS_DIR
    name = _PIECE_NAMES[piece.piece_type]
    suffix = _COLOR_SUFFIX[piece.color]
    return root / "pieces" / f"{name}-{suffix}.svg"


class PieceAssets:
    """Fixed mapping from :class:`Piece` to its SVG renderer."""

    __slots__ = ("_renderers", "_pixmaps")

    def __init__(self, renderers: dict[Piece, QSvgRenderer]) -> None:
        missing = [p for p in all_pieces() if p not in renderers]
        if missing:
            raise MissingResourceError(
                "No image for " + ", ".join(str(p) for p in missing)
            )
        self._renderers = dict(renderers)
        self._pixmaps: dict[tuple[Piece, int], QPixmap] = {}

    @classmethod
    def load(cls, assets_dir: Path | None = None) -> PieceAssets:
        """Load every piece image.

        Raises:
            MissingResourceError: a file is absent or not a valid SVG.
        """
        renderers = {
            piece: _load_svg(piece_asset_path(piece, assets_dir))
            for piece in all_pieces()
        }
        _LOGGER.debug("Loaded %d piece images", len(renderers))
        return cls(renderers)

    def renderer(self, piece: Piece) -> QSvgRenderer:
        return self._renderers[piece]

    def pixmap(self, piece: Piece, size: int) -> QPixmap:
        """Render *piece* as a *size* × *size* pixmap (cached)."""
        key = (piece, size)
        cached = self._pixmaps.get(key)
        if cached is not None:
            return cached

        image = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
        image.fill(Qt.GlobalColor.transparent)

        painter = QPainter(image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        self._renderers[piece].render(painter, QRectF(0, 0, size, size))
        painter.end()

        pixmap = QPixmap.fromImage(image)
        self._pixmaps[key] = pixmap
        return pixmap


def load_window_icon(assets_dir: Path | None = None, size: int = 64) -> QIcon:
    """Window icon rendered from ``icon.svg``.

    Raises:
        MissingResourceError: the file is absent or not a valid SVG.
    """
    renderer = _load_svg((assets_dir or ASSETS_DIR) / "icon.svg")
    image = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)
    painter = QPainter(image)
    renderer.render(painter, QRectF(0, 0, size, size))
    painter.end()
    return QIcon(QPixmap.fromImage(image))
