"""Decode result."""

from dataclasses import dataclass

import numpy as np

from models.blurhash_components import BlurHashComponents
from utils.image_io import pixels_to_array


@dataclass
class DecodeResult:
    """RGBA preview plus the components it was synthesised from."""
    
    pixels: bytes
    width: int
    height: int
    components: BlurHashComponents
    decode_time_ms: float = 0.0
    
    def to_array(self) -> np.ndarray:
        """(height, width, 4) uint8 view of the pixel buffer."""
        return pixels_to_array(self.pixels, self.width, self.height)
