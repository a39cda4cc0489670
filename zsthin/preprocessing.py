import cv2
import numpy as np

def load_image(path: str) -> np.ndarray:
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise FileNotFoundError(f"Cannot load image '{path}'.")
    return img

def to_grayscale(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return image
    return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)

def denoise_image(image_gray: np.ndarray, method: str = None) -> np.ndarray:
    if method == "bilateral":
        return cv2.bilateralFilter(image_gray, 9, 75, 75)
    elif method == "median":
        return cv2.medianBlur(image_gray, 5)
    return image_gray
