"""Frame-by-frame animation of the torch overlay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from raycube.raycast import SCREEN_HEIGHT, SCREEN_WIDTH

FRAME_COUNT = 8
FRAME_SIZE = 400
DEFAULT_SPEED = 6
TORCH_POSITION = (
    (3 * SCREEN_WIDTH) // 4 - FRAME_SIZE // 2,
    SCREEN_HEIGHT - FRAME_SIZE - 20,
)


@dataclass
class TorchAnimation:
    """Cycles through ``frames``, holding each one for ``speed`` ticks."""

    frames: Sequence[Any]
    speed: int = DEFAULT_SPEED
    frame: int = 0
    counter: int = 0

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        self.frames = tuple(self.frames)

    def tick(self) -> Any:
        """Return the frame to draw now and advance the animation by one tick."""
        current = self.frames[self.frame]
        self.counter += 1
        if self.counter >= self.speed:
            self.frame = (self.frame + 1) % len(self.frames)
            self.counter = 0
        return current