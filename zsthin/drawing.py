import cv2
import numpy as np

from .grid import background_value, foreground_mask

def draw_skeleton_overlay(image, skeleton, color=(0,0,255), background=0):
    """Paint the skeleton's foreground pixels over a BGR copy of ``image``."""
    if image.shape[:2] != skeleton.shape[:2]:
        raise ValueError("Image and skeleton must have the same size.")
    if image.ndim == 2:
        canvas = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    else:
        canvas = image[:, :, :3].copy()
    mask = foreground_mask(skeleton, background_value(skeleton, background))
    canvas[mask] = np.array(color, dtype=canvas.dtype)
    return canvas

def show_image(title, image, wait=0):
    cv2.namedWindow(title)
    cv2.imshow(title, image)
    key = cv2.waitKey(wait)
    cv2.destroyWindow(title)
    return key
