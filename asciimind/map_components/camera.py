import math
from typing import Tuple

from .core import MAX_ZOOM, MIN_ZOOM

SNAP_THRESHOLD = 0.001
ZOOM_IN_FACTOR = 1.2
ZOOM_OUT_FACTOR = 0.8


def round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _clamp_zoom(value: float) -> float:
    return min(max(value, MIN_ZOOM), MAX_ZOOM)


class Camera:
    """Viewport into world space.

    ``x``/``y``/``zoom`` are what gets drawn. Panning and zooming only move
    the ``target_*`` values; :meth:`update` eases the current values toward
    them one tick at a time.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, zoom: float = 1.0) -> None:
        self.x = x
        self.y = y
        self.zoom = _clamp_zoom(zoom)
        self.target_x = self.x
        self.target_y = self.y
        self.target_zoom = self.zoom

    def world_to_screen(
        self, wx: float, wy: float, screen_width: int, screen_height: int
    ) -> Tuple[int, int]:
        center_x = screen_width / 2
        center_y = screen_height / 2
        sx = (wx - self.x) * self.zoom + center_x
        sy = (wy - self.y) * self.zoom + center_y
        return round_half_away(sx), round_half_away(sy)

    def screen_to_world(
        self, sx: int, sy: int, screen_width: int, screen_height: int
    ) -> Tuple[float, float]:
        center_x = screen_width / 2
        center_y = screen_height / 2
        wx = (sx - center_x) / self.zoom + self.x
        wy = (sy - center_y) / self.zoom + self.y
        return wx, wy

    def is_visible(self, wx: float, wy: float, screen_width: int, screen_height: int) -> bool:
        sx, sy = self.world_to_screen(wx, wy, screen_width, screen_height)
        return 0 <= sx < screen_width and 0 <= sy < screen_height

    def viewport_center(self) -> Tuple[float, float]:
        return self.x, self.y

    def pan(self, dx: float, dy: float) -> None:
        self.target_x += dx
        self.target_y += dy

    def zoom_in(self) -> None:
        self.target_zoom = _clamp_zoom(self.target_zoom * ZOOM_IN_FACTOR)

    def zoom_out(self) -> None:
        self.target_zoom = _clamp_zoom(self.target_zoom * ZOOM_OUT_FACTOR)

    def center_on(self, wx: float, wy: float) -> None:
        self.target_x = wx
        self.target_y = wy

    def reset(self) -> None:
        self.target_x = 0.0
        self.target_y = 0.0
        self.target_zoom = 1.0

    def anchor(self) -> None:
        self.zoom = _clamp_zoom(self.zoom)
        self.target_x = self.x
        self.target_y = self.y
        self.target_zoom = self.zoom

    def is_settled(self) -> bool:
        return (
            self.x == self.target_x
            and self.y == self.target_y
            and self.zoom == self.target_zoom
        )

    def update(self, smoothness: float) -> bool:
        """Advance one tick; return True while any value is still moving."""
        moving = False

        if abs(self.x - self.target_x) > SNAP_THRESHOLD:
            self.x += (self.target_x - self.x) * smoothness
            moving = True
        else:
            self.x = self.target_x

        if abs(self.y - self.target_y) > SNAP_THRESHOLD:
            self.y += (self.target_y - self.y) * smoothness
            moving = True
        else:
            self.y = self.target_y

        if abs(self.zoom - self.target_zoom) > SNAP_THRESHOLD:
            self.zoom += (self.target_zoom - self.zoom) * smoothness
            moving = True
        else:
            self.zoom = self.target_zoom

        return moving

    def __repr__(self) -> str:
        return f"Camera(x={self.x:.2f}, y={self.y:.2f}, zoom={self.zoom:.2f})"
