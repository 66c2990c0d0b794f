"""Encode parameters."""

from dataclasses import dataclass

from utils.config import BlurHashSettings
from utils.constants import (
    DEFAULT_COMPONENTS_X,
    DEFAULT_COMPONENTS_Y,
    DEFAULT_PREVIEW_SIZE,
    MAX_COMPONENTS,
)


@dataclass
class EncodeParams:
    """Component grid and pre-scale size for encoding an image."""
    
    components_x: int = DEFAULT_COMPONENTS_X
    components_y: int = DEFAULT_COMPONENTS_Y
    scaled_width: int = DEFAULT_PREVIEW_SIZE
    scaled_height: int = DEFAULT_PREVIEW_SIZE
    
    def __post_init__(self):
        for name in ('components_x', 'components_y'):
            value = getattr(self, name)
            if not (1 <= value <= MAX_COMPONENTS):
                raise ValueError(f"{name} must be 1-{MAX_COMPONENTS}, got {value}")
        if self.scaled_width <= 0 or self.scaled_height <= 0:
            raise ValueError(
                f"Scaled size must be positive, got {self.scaled_width}x{self.scaled_height}"
            )
    
    @classmethod
    def from_settings(cls, settings: BlurHashSettings) -> "EncodeParams":
        return cls(
            components_x=settings.component_x,
            components_y=settings.component_y,
        )
