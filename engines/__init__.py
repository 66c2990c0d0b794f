"""BlurHash engines - pure computation, no I/O beyond encode_file."""

from .base83 import decode_base83, encode_base83
from .color_space import srgb_to_linear, linear_to_srgb, sign_pow
from .quantizer import decode_size_flag, decode_dc, decode_ac, encode_dc, encode_ac
from .dct_engine import synthesize, synthesize_array, compute_factors
from .scaler import compute_fit, scale_down, placeholder_size
from utils.errors import (
    BlurHashError,
    InvalidCharacter,
    TokenTooShort,
    LengthMismatch,
    InvalidDimensions,
)
from .pipeline import (
    validate,
    is_valid,
    extract_components,
    decode,
    decode_to_array,
    decode_blurhash,
    encode,
    encode_file,
    placeholder_fidelity,
    estimate_compression,
)

__all__ = [
    'decode_base83',
    'encode_base83',
    'srgb_to_linear',
    'linear_to_srgb',
    'sign_pow',
    'decode_size_flag',
    'decode_dc',
    'decode_ac',
    'encode_dc',
    'encode_ac',
    'synthesize',
    'synthesize_array',
    'compute_factors',
    'compute_fit',
    'scale_down',
    'placeholder_size',
    'BlurHashError',
    'InvalidCharacter',
    'TokenTooShort',
    'LengthMismatch',
    'InvalidDimensions',
    'validate',
    'is_valid',
    'extract_components',
    'decode',
    'decode_to_array',
    'decode_blurhash',
    'encode',
    'encode_file',
    'placeholder_fidelity',
    'estimate_compression',
]
