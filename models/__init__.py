"""Data models for codec parameters and results."""

from .decode_params import DecodeParams
from .encode_params import EncodeParams
from .blurhash_components import BlurHashComponents
from .decode_result import DecodeResult

__all__ = ['DecodeParams', 'EncodeParams', 'BlurHashComponents', 'DecodeResult']
