import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from ..errors import ConfigurationError
from ..map_components.core import DEFAULT_PALETTE

ENV_FILE = "ASCIIMIND_FILE"
ENV_SMOOTHNESS = "ASCIIMIND_SMOOTHNESS"
ENV_TICK_RATE = "ASCIIMIND_TICK_RATE"

DEFAULT_FILE = "mindmap.json"


@dataclass(frozen=True)
class EditorConfig:
    file_path: str = DEFAULT_FILE
    smoothness: float = 0.25
    tick_rate: float = 60.0
    pan_step: float = 5.0
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    width: int = 80
    height: int = 24

    def __post_init__(self) -> None:
        if not isinstance(self.file_path, str) or not self.file_path.strip():
            raise ConfigurationError("file_path must be a non-empty string.")
        for name in ("smoothness", "tick_rate", "pan_step"):
            if not isinstance(getattr(self, name), (int, float)):
                raise ConfigurationError(f"{name} must be a number.")
        if not 0 < self.smoothness < 1:
            raise ConfigurationError("smoothness must be between 0 and 1 (exclusive).")
        if self.tick_rate <= 0:
            raise ConfigurationError("tick_rate must be positive.")
        if self.pan_step <= 0:
            raise ConfigurationError("pan_step must be positive.")
        if not self.palette or not all(isinstance(color, str) for color in self.palette):
            raise ConfigurationError("palette must be a non-empty sequence of color strings.")
        for name, value, minimum in (("width", self.width, 10), ("height", self.height, 3)):
            if not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer.")
            if value < minimum:
                raise ConfigurationError(f"{name} must be at least {minimum}.")

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.tick_rate

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides: object
    ) -> "EditorConfig":
        env = os.environ if environ is None else environ
        values: dict = {}
        if env.get(ENV_FILE):
            values["file_path"] = env[ENV_FILE]
        for key, name in ((ENV_SMOOTHNESS, "smoothness"), (ENV_TICK_RATE, "tick_rate")):
            raw = env.get(key)
            if not raw:
                continue
            try:
                values[name] = float(raw)
            except ValueError as exc:
                raise ConfigurationError(f"{key} must be a number, got {raw!r}.") from exc
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
