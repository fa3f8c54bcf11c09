"""Tests for the camera tick scheduler."""

import pytest

from asciimind.editor.scheduler import TickScheduler
from asciimind.errors import ConfigurationError
from asciimind.map_components.camera import Camera


class TestTickScheduler:
    def test_idle_until_woken(self) -> None:
        scheduler = TickScheduler()
        assert scheduler.timeout(0.0) is None
        assert not scheduler.due(0.0)
        assert scheduler.tick(Camera(), 0.0) is False

    def test_timeout_counts_down_to_next_tick(self) -> None:
        scheduler = TickScheduler(rate=10)
        scheduler.wake(now=5.0)
        assert scheduler.timeout(5.04) == pytest.approx(0.06)
        assert not scheduler.due(5.04)
        assert scheduler.due(5.2)
        assert scheduler.timeout(7.0) == 0.0

    def test_runs_until_camera_settles(self) -> None:
        scheduler = TickScheduler(rate=60, smoothness=0.5)
        camera = Camera()
        camera.pan(8.0, 0.0)
        scheduler.wake(now=0.0)

        now = 0.0
        while scheduler.active:
            now += scheduler.interval
            scheduler.tick(camera, now)
        assert camera.x == 8.0
        assert camera.is_settled()
        assert scheduler.timeout(now) is None

    def test_wake_is_idempotent(self) -> None:
        scheduler = TickScheduler(rate=10)
        scheduler.wake(now=1.0)
        scheduler.wake(now=3.0)
        assert scheduler.timeout(1.0) == pytest.approx(0.1)

    @pytest.mark.parametrize("rate, smoothness", [(0, 0.25), (-5, 0.25), (60, 0), (60, 1.0)])
    def test_rejects_bad_settings(self, rate: float, smoothness: float) -> None:
        with pytest.raises(ConfigurationError):
            TickScheduler(rate, smoothness)
