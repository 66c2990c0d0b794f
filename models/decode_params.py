"""Decode parameters."""

import math
from dataclasses import dataclass

from utils.config import BlurHashSettings
from utils.errors import InvalidDimensions


@dataclass
class DecodeParams:
    """Target preview size and contrast for decoding a token."""
    
    width: int = 32
    height: int = 32
    punch: float = 1.0
    
    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(self.width, self.height)
        if not math.isfinite(self.punch) or self.punch < 0:
            raise ValueError(f"Punch must be a finite number >= 0, got {self.punch}")
    
    @classmethod
    def from_settings(cls, settings: BlurHashSettings) -> "DecodeParams":
        return cls(
            width=settings.preview_width,
            height=settings.preview_height,
            punch=settings.punch,
        )
