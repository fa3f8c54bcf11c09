import logging
import time
from typing import Optional

from ..errors import ConfigurationError
from ..map_components.camera import Camera

logger = logging.getLogger(__name__)


class TickScheduler:
    """Fixed-rate camera ticker that goes idle once motion has converged.

    Callers pass ``now`` explicitly in tests; the run loop uses the
    monotonic clock.
    """

    def __init__(self, rate: float = 60.0, smoothness: float = 0.25) -> None:
        if rate <= 0:
            raise ConfigurationError("tick rate must be positive.")
        if not 0 < smoothness < 1:
            raise ConfigurationError("smoothness must be between 0 and 1 (exclusive).")
        self.interval = 1.0 / rate
        self.smoothness = smoothness
        self.active = False
        self.ticks = 0
        self._last_tick = 0.0

    def wake(self, now: Optional[float] = None) -> None:
        if self.active:
            return
        self.active = True
        self._last_tick = time.monotonic() if now is None else now

    def timeout(self, now: Optional[float] = None) -> Optional[float]:
        if not self.active:
            return None
        current = time.monotonic() if now is None else now
        return max(0.0, self._last_tick + self.interval - current)

    def due(self, now: Optional[float] = None) -> bool:
        return self.timeout(now) == 0.0

    def tick(self, camera: Camera, now: Optional[float] = None) -> bool:
        if not self.active:
            return False
        self._last_tick = time.monotonic() if now is None else now
        self.ticks += 1
        moving = camera.update(self.smoothness)
        if not moving:
            self.active = False
            logger.debug("Camera settled after %d tick(s): %r", self.ticks, camera)
            self.ticks = 0
        return moving
