"""Quantization of the DC/AC terms packed into a token."""

import math

import numpy as np

from engines.color_space import (
    linear_to_srgb_nearest,
    sign_pow,
    sign_pow_array,
    srgb_to_linear,
)
from utils.constants import (
    AC_QUANT_CENTER,
    AC_QUANT_LEVELS,
    MAX_AC_DIVISOR,
    MAX_COMPONENTS,
    MAX_QUANTIZED_AC,
)

_LEVELS_SQ = AC_QUANT_LEVELS * AC_QUANT_LEVELS


def decode_size_flag(flag: int) -> tuple[int, int]:
    """Size flag to (num_x, num_y)."""
    return flag % MAX_COMPONENTS + 1, flag // MAX_COMPONENTS + 1


def encode_size_flag(num_x: int, num_y: int) -> int:
    return (num_x - 1) + (num_y - 1) * MAX_COMPONENTS


def dequantize_max_ac(quantized: int) -> float:
    return (quantized + 1) / MAX_AC_DIVISOR


def quantize_max_ac(max_value: float) -> tuple[int, float]:
    """Largest AC magnitude to (quantized value, scale used for AC terms).

    An image without AC energy uses a scale of 1 so AC terms stay neutral.
    """
    if max_value <= 0:
        return 0, 1.0
    quantized = int(max(0, min(MAX_QUANTIZED_AC, math.floor(max_value * MAX_AC_DIVISOR - 0.5))))
    return quantized, dequantize_max_ac(quantized)


def decode_dc(value: int) -> np.ndarray:
    """Packed 24-bit sRGB to a linear RGB triple."""
    r = (value >> 16) & 0xFF
    g = (value >> 8) & 0xFF
    b = value & 0xFF
    return np.array([srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)])


def encode_dc(color) -> int:
    r, g, b = (linear_to_srgb_nearest(c) for c in color)
    return (r << 16) + (g << 8) + b


def split_ac(value: int) -> tuple[int, int, int]:
    """Packed AC value to its three base-19 digits."""
    return (
        value // _LEVELS_SQ,
        (value // AC_QUANT_LEVELS) % AC_QUANT_LEVELS,
        value % AC_QUANT_LEVELS,
    )


def decode_ac(value: int, scale: float) -> np.ndarray:
    """Packed AC value to a linear RGB triple.

    ``scale`` is the dequantized max AC already multiplied by punch.
    """
    digits = np.array(split_ac(value), dtype=np.float64)
    unit = (digits - AC_QUANT_CENTER) / AC_QUANT_CENTER
    return sign_pow_array(unit, 2.0) * scale


def encode_ac(color, max_ac: float) -> int:
    quant = [
        int(max(0, min(AC_QUANT_LEVELS - 1,
                       math.floor(sign_pow(c / max_ac, 0.5) * AC_QUANT_CENTER + 9.5))))
        for c in color
    ]
    return quant[0] * _LEVELS_SQ + quant[1] * AC_QUANT_LEVELS + quant[2]
