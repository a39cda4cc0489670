import cv2
import numpy as np

THRESHOLD_METHODS = ("none", "otsu", "adaptive", "fixed")

def auto_threshold_otsu(image_gray: np.ndarray):
    blur = cv2.GaussianBlur(image_gray, (5,5), 0)
    val, binary = cv2.threshold(blur, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)
    return binary, float(val)

def adaptive_threshold(image_gray: np.ndarray, block_size: int = 51, c: int = 10):
    if block_size % 2 == 0:
        block_size += 1
    return cv2.adaptiveThreshold(image_gray,255,cv2.ADAPTIVE_THRESH_MEAN_C,cv2.THRESH_BINARY,block_size,c)

def fixed_threshold(image_gray: np.ndarray, value: int = 127):
    _, binary = cv2.threshold(image_gray, value, 255, cv2.THRESH_BINARY)
    return binary

def invert_binary(binary: np.ndarray) -> np.ndarray:
    return cv2.bitwise_not(binary)

def apply_threshold(image_gray: np.ndarray, method: str = "none", value: int = 127,
                    block_size: int = 51, c: int = 10, invert: bool = False) -> np.ndarray:
    """Binarize to {0, 255}; ``invert`` turns dark strokes on light paper into foreground."""
    if method not in THRESHOLD_METHODS:
        raise ValueError(f"Unknown threshold method '{method}'.")
    if method == "otsu":
        binary, _ = auto_threshold_otsu(image_gray)
    elif method == "adaptive":
        binary = adaptive_threshold(image_gray, block_size=block_size, c=c)
    elif method == "fixed":
        binary = fixed_threshold(image_gray, value)
    else:
        binary = image_gray
    return invert_binary(binary) if invert else binary
