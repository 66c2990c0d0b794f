"""Cosine-basis synthesis and analysis for blurhash components.

The basis is cos(pi * x * i / width) * cos(pi * y * j / height) with no
orthonormal scaling: the (0, 0) term is 1 everywhere, so the DC colour
contributes uniformly to every pixel.
"""

import numpy as np

from engines.color_space import linear_to_srgb_array
from utils.errors import InvalidDimensions


def cosine_table(size: int, components: int) -> np.ndarray:
    """(size, components) table of cos(pi * pos * k / size)."""
    pos = np.arange(size, dtype=np.float64)[:, None]
    k = np.arange(components, dtype=np.float64)[None, :]
    return np.cos(np.pi * pos * k / size)


def synthesize_linear(colors: np.ndarray, width: int, height: int) -> np.ndarray:
    """Sum the basis functions for every pixel; (height, width, 3) linear RGB."""
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    num_y, num_x, _ = colors.shape
    cos_x = cosine_table(width, num_x)
    cos_y = cosine_table(height, num_y)
    return np.einsum('yj,xi,jic->yxc', cos_y, cos_x, colors)


def synthesize_array(colors: np.ndarray, width: int, height: int) -> np.ndarray:
    """Rasterise components to an (height, width, 4) uint8 RGBA image."""
    linear = synthesize_linear(colors, width, height)
    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[:, :, :3] = linear_to_srgb_array(linear)
    rgba[:, :, 3] = 255
    return rgba


def synthesize(colors: np.ndarray, width: int, height: int) -> bytes:
    """Row-major RGBA buffer of width * height * 4 bytes."""
    return synthesize_array(colors, width, height).tobytes()


def compute_factors(linear_image: np.ndarray, num_x: int, num_y: int) -> np.ndarray:
    """Project a linear-light image onto the basis; (num_y, num_x, 3).

    AC factors are doubled relative to DC, matching what the decoder's
    unscaled basis expects.
    """
    height, width = linear_image.shape[:2]
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    cos_x = cosine_table(width, num_x)
    cos_y = cosine_table(height, num_y)
    factors = np.einsum('yj,xi,yxc->jic', cos_y, cos_x, linear_image) / (width * height)
    norm = np.full((num_y, num_x, 1), 2.0)
    norm[0, 0] = 1.0
    return factors * norm
