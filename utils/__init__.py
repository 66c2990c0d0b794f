"""Shared utilities."""

from .constants import BASE83_ALPHABET, BASE83_LOOKUP, expected_token_length
from .errors import BlurHashError, InvalidCharacter, TokenTooShort, LengthMismatch, InvalidDimensions
from .config import BlurHashSettings, load_settings
from .log import setup_logging, get_logger
from .metrics import compute_psnr_ssim, Timer, estimate_compression
from .test_images import generate_solid, generate_gradient, generate_demo_image
from .image_io import load_image, save_image, pixels_to_array

__all__ = [
    'BASE83_ALPHABET',
    'BASE83_LOOKUP',
    'expected_token_length',
    'BlurHashError',
    'InvalidCharacter',
    'TokenTooShort',
    'LengthMismatch',
    'InvalidDimensions',
    'BlurHashSettings',
    'load_settings',
    'setup_logging',
    'get_logger',
    'compute_psnr_ssim',
    'Timer',
    'estimate_compression',
    'generate_solid',
    'generate_gradient',
    'generate_demo_image',
    'load_image',
    'save_image',
    'pixels_to_array',
]
