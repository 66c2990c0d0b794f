"""Runtime settings read from BLURHASH_* environment variables."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from utils.constants import (
    DEFAULT_COMPONENTS_X,
    DEFAULT_COMPONENTS_Y,
    DEFAULT_PREVIEW_SIZE,
    MAX_COMPONENTS,
)

ENV_PREFIX = "BLURHASH_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BlurHashSettings:
    """Encoder/decoder defaults."""

    enabled: bool = True
    component_x: int = DEFAULT_COMPONENTS_X
    component_y: int = DEFAULT_COMPONENTS_Y
    preview_width: int = DEFAULT_PREVIEW_SIZE
    preview_height: int = DEFAULT_PREVIEW_SIZE
    punch: float = 1.0
    log_level: str = "INFO"

    def __post_init__(self):
        # Out-of-range component counts are clamped rather than rejected
        object.__setattr__(self, "component_x", min(max(self.component_x, 1), MAX_COMPONENTS))
        object.__setattr__(self, "component_y", min(max(self.component_y, 1), MAX_COMPONENTS))
        if self.preview_width <= 0 or self.preview_height <= 0:
            raise ValueError(
                f"Preview size must be positive, got {self.preview_width}x{self.preview_height}"
            )
        if self.punch < 0:
            raise ValueError(f"Punch must be >= 0, got {self.punch}")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_number(name: str, raw: str, kind):
    try:
        return kind(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be {kind.__name__}, got {raw!r}") from None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> BlurHashSettings:
    """Build settings from the environment, falling back to defaults."""
    env = os.environ if environ is None else environ
    values = {}

    def lookup(key):
        return env.get(ENV_PREFIX + key)

    raw = lookup("ENABLED")
    if raw is not None:
        values["enabled"] = _parse_bool(ENV_PREFIX + "ENABLED", raw)

    for key, field, kind in (
        ("COMPONENT_X", "component_x", int),
        ("COMPONENT_Y", "component_y", int),
        ("PREVIEW_WIDTH", "preview_width", int),
        ("PREVIEW_HEIGHT", "preview_height", int),
        ("PUNCH", "punch", float),
    ):
        raw = lookup(key)
        if raw is not None:
            values[field] = _parse_number(ENV_PREFIX + key, raw, kind)

    raw = lookup("LOG_LEVEL")
    if raw is not None:
        values["log_level"] = raw.strip().upper()

    return BlurHashSettings(**values)
