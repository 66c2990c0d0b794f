"""Tests for token validation and decoding."""

import numpy as np
import pytest
from engines.base83 import encode_base83
from engines.color_space import linear_to_srgb, srgb_to_linear
from engines.pipeline import (
    decode,
    decode_blurhash,
    decode_to_array,
    estimate_compression,
    extract_components,
    is_valid,
    validate,
)
from models.decode_params import DecodeParams
from utils.constants import BASE83_ALPHABET
from utils.errors import (
    BlurHashError,
    InvalidCharacter,
    InvalidDimensions,
    LengthMismatch,
    TokenTooShort,
)

REFERENCE = "LEHV6nWB2yk8pyo0adR*.7kCMdnj"
# Carries one character more than its 4x3 size flag allows
REFERENCE_TRAILING = "LEHV6nae2turtoM%NMI@]iz,q9Q*Q"


def _token_for_grid(num_x, num_y, length=None):
    flag = BASE83_ALPHABET[(num_x - 1) + (num_y - 1) * 9]
    if length is None:
        length = 4 + 2 * num_x * num_y
    return flag + "0" * (length - 1)


def test_length_invariant_every_grid():
    for nx in range(1, 10):
        for ny in range(1, 10):
            expected = 4 + 2 * nx * ny
            assert is_valid(_token_for_grid(nx, ny))
            assert not is_valid(_token_for_grid(nx, ny, expected + 1))
            assert not is_valid(_token_for_grid(nx, ny, expected - 1))


def test_validator_never_raises():
    for token in ["", "0", "00000", "!00000", None, 42, b"LEHV6n", REFERENCE_TRAILING]:
        assert is_valid(token) is False
    assert is_valid(REFERENCE) is True


def test_validate_returns_grid():
    assert validate(REFERENCE) == (4, 3)


def test_reject_empty_token():
    with pytest.raises(TokenTooShort) as exc_info:
        decode("", 32, 32)
    assert exc_info.value.length == 0


def test_reject_short_token():
    with pytest.raises(TokenTooShort):
        decode("LEHV6", 32, 32)


def test_reject_invalid_character():
    with pytest.raises(InvalidCharacter) as exc_info:
        decode("0!0000", 32, 32)
    assert exc_info.value.char == "!"
    assert exc_info.value.position == 1


def test_reject_invalid_size_flag_character():
    with pytest.raises(InvalidCharacter) as exc_info:
        decode("!00000", 32, 32)
    assert exc_info.value.position == 0


@pytest.mark.parametrize("position", [3, 5, 10, 27])
def test_invalid_character_position_in_dc_and_ac(position):
    """Bad characters in the DC block or an AC pair report their offset."""
    token = REFERENCE[:position] + " " + REFERENCE[position + 1:]
    with pytest.raises(InvalidCharacter) as exc_info:
        decode(token, 8, 8)
    assert exc_info.value.char == " "
    assert exc_info.value.position == position


@pytest.mark.parametrize("punch", [float("inf"), float("nan"), -1.0])
def test_reject_invalid_punch(punch):
    with pytest.raises(ValueError):
        decode(REFERENCE, 8, 8, punch=punch)
    with pytest.raises(ValueError):
        extract_components(REFERENCE, punch=punch)


def test_reject_length_mismatch_for_4x4_grid():
    token = _token_for_grid(4, 4, 30)
    with pytest.raises(LengthMismatch) as exc_info:
        decode(token, 32, 32)
    assert exc_info.value.expected == 36
    assert exc_info.value.actual == 30


def test_reject_invalid_dimensions():
    with pytest.raises(InvalidDimensions):
        decode(REFERENCE, 0, 32)
    with pytest.raises(InvalidDimensions):
        decode(REFERENCE, 32, -1)


def test_errors_share_base_class():
    for exc in (InvalidCharacter("!"), TokenTooShort(3), LengthMismatch(6, 7), InvalidDimensions(0, 0)):
        assert isinstance(exc, BlurHashError)
        assert isinstance(exc, ValueError)


def test_reference_vector_decodes():
    pixels = decode(REFERENCE, 32, 32)
    assert len(pixels) == 4096
    rgba = np.frombuffer(pixels, dtype=np.uint8).reshape(32, 32, 4)
    assert not (rgba == rgba[0, 0]).all()
    assert (rgba[:, :, 3] == 255).all()


def test_reference_components():
    components = extract_components(REFERENCE)
    assert (components.num_x, components.num_y) == (4, 3)
    assert components.quantized_max_ac == 14
    assert components.max_ac == pytest.approx(15 / 166)
    assert components.colors.shape == (3, 4, 3)
    assert components.dc_rgb == (151, 150, 149)
    assert components.ac.shape == (11, 3)


def test_trailing_characters_need_lenient_mode():
    with pytest.raises(LengthMismatch):
        decode(REFERENCE_TRAILING, 32, 32)
    pixels = decode(REFERENCE_TRAILING, 32, 32, strict=False)
    assert len(pixels) == 4096
    rgba = np.frombuffer(pixels, dtype=np.uint8).reshape(32, 32, 4)
    assert not (rgba == rgba[0, 0]).all()


def test_lenient_mode_still_rejects_truncated_tokens():
    with pytest.raises(LengthMismatch):
        decode(REFERENCE[:-2], 32, 32, strict=False)


def test_determinism():
    assert decode(REFERENCE, 24, 17, punch=1.3) == decode(REFERENCE, 24, 17, punch=1.3)


def test_dc_only_token_is_uniform():
    color = (0x7F, 0x3A, 0x10)
    token = "00" + encode_base83((color[0] << 16) | (color[1] << 8) | color[2], 4)
    rgba = decode_to_array(token, 16, 9)
    expected = [linear_to_srgb(srgb_to_linear(c)) for c in color] + [255]
    assert (rgba.reshape(-1, 4) == expected).all()


def test_punch_scales_ac_terms():
    base = extract_components(REFERENCE, punch=1.0)
    punched = extract_components(REFERENCE, punch=2.0)
    assert np.allclose(punched.dc, base.dc)
    nonzero = base.ac != 0
    assert nonzero.any()
    assert (np.abs(punched.ac[nonzero]) > np.abs(base.ac[nonzero])).all()
    assert decode(REFERENCE, 32, 32, punch=2.0) != decode(REFERENCE, 32, 32, punch=1.0)


def test_bounds_for_various_sizes():
    for width, height in [(1, 1), (3, 50), (64, 2)]:
        pixels = decode(REFERENCE, width, height, punch=1.8)
        assert len(pixels) == width * height * 4
        assert min(pixels) >= 0 and max(pixels) <= 255


def test_decode_blurhash_result():
    result = decode_blurhash(REFERENCE, DecodeParams(width=20, height=10, punch=1.0))
    assert result.width == 20
    assert result.height == 10
    assert result.pixels == decode(REFERENCE, 20, 10)
    assert result.to_array().shape == (10, 20, 4)
    assert result.decode_time_ms >= 0.0
    assert result.components.num_x == 4


def test_decode_params_validation():
    with pytest.raises(InvalidDimensions):
        DecodeParams(width=0, height=10)
    with pytest.raises(ValueError):
        DecodeParams(width=10, height=10, punch=float("nan"))
    with pytest.raises(ValueError):
        DecodeParams(width=10, height=10, punch=-1.0)


def test_estimate_compression():
    stats = estimate_compression(REFERENCE, 32, 32)
    assert stats['token_bytes'] == 28
    assert stats['raw_bytes'] == 4096
    assert stats['compression_ratio'] == pytest.approx(4096 / 28)
