"""sRGB <-> linear-light conversion."""

import math

import numpy as np


def srgb_to_linear(value: int) -> float:
    """sRGB byte (0-255) to linear 0.0-1.0."""
    v = value / 255.0
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def srgb_to_linear_array(values: np.ndarray) -> np.ndarray:
    """Element-wise srgb_to_linear."""
    v = np.asarray(values, dtype=np.float64) / 255.0
    return np.where(v <= 0.04045, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)


def linear_to_srgb(value: float) -> int:
    """Linear light to an sRGB byte, as the decoder rasterises it.

    The +0.5 bias before rounding is part of the decoder's output and is
    kept as is; results above 255 are clamped.
    """
    v = max(0.0, min(1.0, value))
    if v <= 0.0031308:
        srgb = v * 12.92 * 255 + 0.5
    else:
        srgb = (1.055 * v ** (1 / 2.4) - 0.055) * 255 + 0.5
    return max(0, min(255, math.floor(srgb + 0.5)))


def linear_to_srgb_array(values: np.ndarray) -> np.ndarray:
    """Element-wise linear_to_srgb, returns uint8."""
    v = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        v <= 0.0031308,
        v * 12.92 * 255,
        (1.055 * np.power(v, 1 / 2.4) - 0.055) * 255,
    ) + 0.5
    return np.clip(np.floor(srgb + 0.5), 0, 255).astype(np.uint8)


def linear_to_srgb_nearest(value: float) -> int:
    """Linear light to the nearest sRGB byte (encoder DC term)."""
    v = max(0.0, min(1.0, value))
    if v <= 0.0031308:
        srgb = v * 12.92
    else:
        srgb = 1.055 * v ** (1 / 2.4) - 0.055
    return max(0, min(255, math.floor(srgb * 255 + 0.5)))


def sign_pow(value: float, exp: float) -> float:
    """Sign-preserving power; sign_pow(0, e) == 0."""
    if value == 0:
        return 0.0
    return math.copysign(abs(value) ** exp, value)


def sign_pow_array(values: np.ndarray, exp: float) -> np.ndarray:
    """Element-wise sign_pow."""
    v = np.asarray(values, dtype=np.float64)
    return np.sign(v) * np.abs(v) ** exp
