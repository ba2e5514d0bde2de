"""Application-wide settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessgui.game.interfaces import BoardLayout, TimeControl


@dataclass
class AppSettings:
    """All startup-configurable settings."""

    # Game
    time_control: TimeControl = field(default_factory=TimeControl.rapid_10m)

    # Window
    layout: BoardLayout = field(default_factory=BoardLayout)
    window_title: str = "Chess"
    frame_interval_ms: int = 16  # ~60 fps

    # Logging
    log_level: str = "INFO"
