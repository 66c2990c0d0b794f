"""Decoded colour coefficients of a token."""

from dataclasses import dataclass

import numpy as np


@dataclass
class BlurHashComponents:
    """Linear-light coefficients laid out as (num_y, num_x, 3).

    ``colors[j, i]`` is the coefficient for horizontal frequency ``i`` and
    vertical frequency ``j``; ``colors[0, 0]`` is the DC (average) colour.
    """
    
    num_x: int
    num_y: int
    quantized_max_ac: int
    max_ac: float
    colors: np.ndarray
    
    @property
    def dc(self) -> np.ndarray:
        return self.colors[0, 0]
    
    @property
    def ac(self) -> np.ndarray:
        """AC coefficients in token order, shape (num_x * num_y - 1, 3)."""
        return self.colors.reshape(-1, 3)[1:]
    
    @property
    def dc_rgb(self) -> tuple[int, int, int]:
        """Average colour as sRGB bytes."""
        from engines.color_space import linear_to_srgb_nearest
        return tuple(linear_to_srgb_nearest(c) for c in self.dc)
