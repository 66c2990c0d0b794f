"""Size calculations and pre-scaling around the codec."""

import cv2
import numpy as np

from utils.constants import PLACEHOLDER_MAX_HEIGHT
from utils.errors import InvalidDimensions


def compute_fit(w: int, h: int, tw: int, th: int) -> tuple[int, int]:
    """Compute dimensions to fit within target, preserving aspect ratio.

    The limiting side lands exactly on the target; the other side is
    truncated, never rounded up.
    """
    if tw * h <= th * w:
        return (tw, max(h * tw // w, 1))
    return (max(w * th // h, 1), th)


def scale_down(img: np.ndarray, max_w: int, max_h: int) -> np.ndarray:
    """Shrink to fit within max_w x max_h; smaller images are returned as is."""
    h, w = img.shape[:2]
    if w == 0 or h == 0:
        raise InvalidDimensions(w, h)
    if min(max_w / w, max_h / h) >= 1.0:
        return img
    new_w, new_h = compute_fit(w, h, max_w, max_h)
    return cv2.resize(img, (new_w, new_h), interpolation=cv2.INTER_LINEAR)


def placeholder_size(w: int, h: int, max_height: int = PLACEHOLDER_MAX_HEIGHT) -> tuple[int, int]:
    """Preview size for a w x h image: height capped, width proportional."""
    if w <= 0 or h <= 0:
        raise InvalidDimensions(w, h)
    out_h = min(h, max_height)
    out_w = max(int(w * (out_h / h)), 1)
    return out_w, out_h
