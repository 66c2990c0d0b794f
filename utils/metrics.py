"""Metrics: PSNR/SSIM of placeholders, timing, token size."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def compute_psnr_ssim(original_rgb: np.ndarray, reconstructed_rgb: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM on RGB and Y channel."""
    # SSIM window must be odd and fit inside the (small) preview
    win_size = min(7, *original_rgb.shape[:2])
    if win_size % 2 == 0:
        win_size -= 1
    if win_size < 3:
        raise ValueError(f"Images too small for SSIM: {original_rgb.shape[1]}x{original_rgb.shape[0]}")

    psnr_rgb = peak_signal_noise_ratio(original_rgb, reconstructed_rgb, data_range=255)
    ssim_rgb = structural_similarity(
        original_rgb, reconstructed_rgb, channel_axis=2, data_range=255, win_size=win_size
    )
    
    # Y channel (luminance) - BT.601
    original = original_rgb.astype(np.float64)
    recon = reconstructed_rgb.astype(np.float64)
    original_y = 0.299 * original[:, :, 0] + 0.587 * original[:, :, 1] + 0.114 * original[:, :, 2]
    recon_y = 0.299 * recon[:, :, 0] + 0.587 * recon[:, :, 1] + 0.114 * recon[:, :, 2]
    
    psnr_y = peak_signal_noise_ratio(original_y, recon_y, data_range=255)
    ssim_y = structural_similarity(original_y, recon_y, data_range=255, win_size=win_size)
    
    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb),
        'psnr_y': float(psnr_y),
        'ssim_y': float(ssim_y)
    }


class Timer:
    """Simple timer for encode/decode runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms = (time.perf_counter() - start) * 1000.0
        return result


def estimate_compression(token_length: int, width: int, height: int) -> Dict:
    """
    Compare a token's size with the RGBA preview it expands to.

    The token is ASCII, so its size in bytes equals its length.
    """
    raw_bytes = width * height * 4
    return {
        'token_bytes': int(token_length),
        'raw_bytes': int(raw_bytes),
        'compression_ratio': float(raw_bytes / max(token_length, 1)),
    }
