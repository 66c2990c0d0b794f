"""Image I/O using OpenCV."""

import cv2
import numpy as np


def load_image(path: str) -> np.ndarray:
    """Load image as RGB uint8."""
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def save_image(image: np.ndarray, path: str) -> None:
    """Save an RGB or RGBA image."""
    if image.ndim == 3 and image.shape[2] == 4:
        converted = cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)
    else:
        converted = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    try:
        written = cv2.imwrite(path, converted)
    except cv2.error as e:
        raise ValueError(f"Could not write image to {path}") from e
    if not written:
        raise ValueError(f"Could not write image to {path}")


def pixels_to_array(pixels: bytes, width: int, height: int) -> np.ndarray:
    """View a row-major RGBA buffer as an (height, width, 4) uint8 array."""
    expected = width * height * 4
    if len(pixels) != expected:
        raise ValueError(f"Expected {expected} bytes for {width}x{height} RGBA, got {len(pixels)}")
    return np.frombuffer(pixels, dtype=np.uint8).reshape(height, width, 4)


def to_rgb(image: np.ndarray) -> np.ndarray:
    """Drop alpha / expand grayscale so the result is (h, w, 3) uint8."""
    if image.ndim == 2:
        return np.stack([image] * 3, axis=-1).astype(np.uint8)
    if image.shape[2] == 4:
        return np.ascontiguousarray(image[:, :, :3])
    if image.shape[2] != 3:
        raise ValueError(f"Unsupported channel count: {image.shape[2]}")
    return image.astype(np.uint8, copy=False)
