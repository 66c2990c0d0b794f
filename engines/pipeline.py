"""Token validation, decoding and encoding."""

import math
from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np

from models.blurhash_components import BlurHashComponents
from models.decode_params import DecodeParams
from models.decode_result import DecodeResult
from models.encode_params import EncodeParams
from engines.base83 import decode_base83, encode_base83
from engines.color_space import srgb_to_linear_array
from engines.dct_engine import compute_factors, synthesize, synthesize_array
from engines.quantizer import (
    decode_ac,
    decode_dc,
    decode_size_flag,
    dequantize_max_ac,
    encode_ac,
    encode_dc,
    encode_size_flag,
    quantize_max_ac,
)
from engines.scaler import scale_down
from utils.config import BlurHashSettings, load_settings
from utils.constants import (
    AC_LENGTH,
    DC_LENGTH,
    MIN_TOKEN_LENGTH,
    expected_token_length,
)
from utils.errors import BlurHashError, InvalidDimensions, LengthMismatch, TokenTooShort
from utils.image_io import load_image, to_rgb
from utils.log import get_logger
from utils.metrics import Timer, compute_psnr_ssim, estimate_compression as _estimate_compression

log = get_logger("pipeline")

_DC_OFFSET = 2
_AC_OFFSET = _DC_OFFSET + DC_LENGTH


def validate(token: str, strict: bool = True) -> Tuple[int, int]:
    """Check a token's length against its size flag; returns (num_x, num_y).

    Only the size flag is decoded here. With ``strict=False`` trailing
    characters beyond the declared grid are tolerated.
    """
    if len(token) < MIN_TOKEN_LENGTH:
        raise TokenTooShort(len(token))

    num_x, num_y = decode_size_flag(decode_base83(token[0]))
    expected = expected_token_length(num_x, num_y)
    if len(token) < expected or (strict and len(token) != expected):
        raise LengthMismatch(expected, len(token))
    return num_x, num_y


def is_valid(token) -> bool:
    """True when ``token`` is a string whose length matches its size flag."""
    if not isinstance(token, str):
        return False
    try:
        validate(token)
    except BlurHashError:
        return False
    return True


def extract_components(token: str, punch: float = 1.0, strict: bool = True) -> BlurHashComponents:
    """Dequantize every DC/AC term of a token to linear RGB."""
    num_x, num_y = validate(token, strict)
    if not math.isfinite(punch) or punch < 0:
        raise ValueError(f"Punch must be a finite number >= 0, got {punch}")

    quantized_max_ac = decode_base83(token[1], offset=1)
    max_ac = dequantize_max_ac(quantized_max_ac)
    ac_scale = max_ac * punch

    colors = np.empty((num_x * num_y, 3), dtype=np.float64)
    colors[0] = decode_dc(decode_base83(token[_DC_OFFSET:_AC_OFFSET], offset=_DC_OFFSET))
    for m in range(1, num_x * num_y):
        start = _AC_OFFSET + AC_LENGTH * (m - 1)
        value = decode_base83(token[start:start + AC_LENGTH], offset=start)
        colors[m] = decode_ac(value, ac_scale)

    return BlurHashComponents(
        num_x=num_x,
        num_y=num_y,
        quantized_max_ac=quantized_max_ac,
        max_ac=max_ac,
        colors=colors.reshape(num_y, num_x, 3),
    )


def decode(token: str, width: int, height: int, punch: float = 1.0, strict: bool = True) -> bytes:
    """Decode a token to a row-major RGBA buffer of width * height * 4 bytes."""
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    components = extract_components(token, punch, strict)
    return synthesize(components.colors, width, height)


def decode_to_array(token: str, width: int, height: int, punch: float = 1.0,
                    strict: bool = True) -> np.ndarray:
    """Like decode(), but returns an (height, width, 4) uint8 array."""
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    components = extract_components(token, punch, strict)
    return synthesize_array(components.colors, width, height)


def decode_blurhash(token: str, params: Optional[DecodeParams] = None,
                    strict: bool = True) -> DecodeResult:
    """Decode with timing and the intermediate components attached."""
    if params is None:
        params = DecodeParams.from_settings(load_settings())
    timer = Timer()

    components = extract_components(token, params.punch, strict)
    pixels = timer.measure_decode(synthesize, components.colors, params.width, params.height)

    log.debug(
        "decoded %s (%dx%d grid) to %dx%d in %.2f ms",
        token, components.num_x, components.num_y,
        params.width, params.height, timer.decode_time_ms,
    )
    return DecodeResult(
        pixels=pixels,
        width=params.width,
        height=params.height,
        components=components,
        decode_time_ms=timer.decode_time_ms,
    )


def encode(image: np.ndarray, params: Optional[EncodeParams] = None) -> str:
    """Encode an (h, w, 3) sRGB uint8 image; an alpha channel is ignored."""
    if params is None:
        params = EncodeParams()
    rgb = to_rgb(image)
    if rgb.shape[0] == 0 or rgb.shape[1] == 0:
        raise InvalidDimensions(rgb.shape[1], rgb.shape[0])

    timer = Timer()
    scaled = scale_down(rgb, params.scaled_width, params.scaled_height)
    linear = srgb_to_linear_array(scaled)
    factors = timer.measure_encode(compute_factors, linear, params.components_x, params.components_y)

    flat = factors.reshape(-1, 3)
    max_value = float(np.max(np.abs(flat[1:]))) if len(flat) > 1 else 0.0
    quantized_max_ac, real_max_ac = quantize_max_ac(max_value)

    parts = [
        encode_base83(encode_size_flag(params.components_x, params.components_y), 1),
        encode_base83(quantized_max_ac, 1),
        encode_base83(encode_dc(flat[0]), DC_LENGTH),
    ]
    parts.extend(encode_base83(encode_ac(color, real_max_ac), AC_LENGTH) for color in flat[1:])
    token = "".join(parts)

    log.debug(
        "encoded %dx%d image (scaled %dx%d) with %dx%d components in %.2f ms: %s",
        rgb.shape[1], rgb.shape[0], scaled.shape[1], scaled.shape[0],
        params.components_x, params.components_y, timer.encode_time_ms, token,
    )
    return token


def encode_file(path, params: Optional[EncodeParams] = None,
                settings: Optional[BlurHashSettings] = None) -> Optional[str]:
    """Encode an image file; None when encoding is disabled in settings."""
    if settings is None:
        settings = load_settings()
    if not settings.enabled:
        log.debug("blurhash encoding disabled, skipping %s", path)
        return None
    if params is None:
        params = EncodeParams.from_settings(settings)
    return encode(load_image(str(Path(path))), params)


def placeholder_fidelity(image: np.ndarray, token: str, punch: float = 1.0,
                         params: Optional[EncodeParams] = None) -> Dict[str, float]:
    """PSNR/SSIM of a token's preview against the image at encoder scale."""
    if params is None:
        params = EncodeParams()
    reference = scale_down(to_rgb(image), params.scaled_width, params.scaled_height)
    height, width = reference.shape[:2]
    preview = decode_to_array(token, width, height, punch)
    return compute_psnr_ssim(reference, preview[:, :, :3])


def estimate_compression(token: str, width: int, height: int) -> Dict:
    """Token size against the RGBA preview it decodes to."""
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    return _estimate_compression(len(token), width, height)
