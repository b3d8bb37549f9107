"""Interactive authoring of Custom crosshair lines.

Two clicks make one segment. The author holds only the pending first
point; the line list itself lives in the configuration, which is replaced
(never mutated) on every append.
"""

import math
from enum import Enum, auto

from reticle.domain import CrosshairConfig, CrosshairStyle, CustomLine


class AuthoringState(Enum):
    """Authoring session state."""

    IDLE = auto()
    AWAITING_FIRST_POINT = auto()
    AWAITING_SECOND_POINT = auto()


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class CustomShapeAuthor:
    """Two-click-per-segment state machine for Custom mode.

    Transitions:
    - ``set_active(True)``: IDLE -> AWAITING_FIRST_POINT
    - ``click`` (first): AWAITING_FIRST_POINT -> AWAITING_SECOND_POINT
    - ``click`` (second): appends a line, -> AWAITING_FIRST_POINT
    - ``set_active(False)``: any -> IDLE, pending point discarded
    - ``clear``: empties the line list and cancels the pending point

    Example:
        author = CustomShapeAuthor(canvas_center=(150, 150))
        author.set_active(True)
        config = author.click(config, 150, 100)
        config = author.click(config, 150, 140)  # one line appended
    """

    def __init__(self, canvas_center: tuple[float, float] = (150.0, 150.0)) -> None:
        """Initialize the author.

        Args:
            canvas_center: Device position of the crosshair origin on the
                authoring canvas
        """
        self.canvas_center = canvas_center
        self._active = False
        self._pending: tuple[int, int] | None = None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def pending_point(self) -> tuple[int, int] | None:
        """First point of the segment being drawn, in local coordinates."""
        return self._pending

    @property
    def state(self) -> AuthoringState:
        if not self._active:
            return AuthoringState.IDLE
        if self._pending is None:
            return AuthoringState.AWAITING_FIRST_POINT
        return AuthoringState.AWAITING_SECOND_POINT

    def set_active(self, active: bool) -> None:
        """Start or stop authoring. Stopping drops any pending point."""
        self._active = active
        if not active:
            self._pending = None

    def to_local(self, x: float, y: float) -> tuple[int, int]:
        """Translate a canvas click into local integer coordinates."""
        cx, cy = self.canvas_center
        return (_round_half_up(x - cx), _round_half_up(y - cy))

    def click(self, config: CrosshairConfig, x: float, y: float) -> CrosshairConfig:
        """Handle a click on the authoring canvas.

        Clicks are ignored unless authoring is active and the style is Custom.
        The new segment takes the configuration's current thickness and color.

        Args:
            config: Current configuration
            x: Click X in canvas coordinates
            y: Click Y in canvas coordinates

        Returns:
            The configuration, with a line appended on every second click
        """
        if not self._active or config.style is not CrosshairStyle.CUSTOM:
            return config

        point = self.to_local(x, y)
        if self._pending is None:
            self._pending = point
            return config

        start = self._pending
        self._pending = None
        line = CustomLine(
            start_x=start[0],
            start_y=start[1],
            end_x=point[0],
            end_y=point[1],
            thickness=config.thickness,
            color=config.color,
        )
        return config.replace(lines=(*config.lines, line))

    def clear(self, config: CrosshairConfig) -> CrosshairConfig:
        """Remove every custom line and cancel the pending point."""
        self._pending = None
        return config.replace(lines=())
