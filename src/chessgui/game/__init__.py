"""Interactive board controller — selection, promotion, clocks, snapshots.

Quick start::

    from chessgui.core import MouseButton
    from chessgui.game import BoardController

    ctrl = BoardController()
    ctrl.handle_click(202, 292, MouseButton.PRIMARY)  # select e2
    ctrl.tick(1 / 60)
    frame = ctrl.snapshot()
"""

from chessgui.game.clock import ClockManager, ClockSnapshot, format_time
from chessgui.game.controller import BoardController
from chessgui.game.interfaces import BoardLayout, IClock, TimeControl
from chessgui.game.promotion import DEFAULT_PROMOTION, PromotionSelector
from chessgui.game.selection import SelectionState
from chessgui.game.state import BoardSnapshot
from chessgui.game.viewport import (
    NO_REGION,
    RESET_BUTTON,
    BoardRegion,
    NoRegion,
    PromotionSlotRegion,
    Region,
    ResetRegion,
    ViewportMapper,
)

__all__ = [
    # Interfaces / configuration
    "BoardLayout",
    "IClock",
    "TimeControl",
    # Regions
    "NO_REGION",
    "RESET_BUTTON",
    "BoardRegion",
    "NoRegion",
    "PromotionSlotRegion",
    "Region",
    "ResetRegion",
    # Concrete
    "BoardController",
    "BoardSnapshot",
    "ClockManager",
    "ClockSnapshot",
    "DEFAULT_PROMOTION",
    "PromotionSelector",
    "SelectionState",
    "ViewportMapper",
    "format_time",
]
