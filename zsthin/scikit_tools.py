import numpy as np
from skimage.morphology import remove_small_holes, remove_small_objects

def clean_binary_scikit(binary_img: np.ndarray, min_size:int=64):
    """Drop specks and fill pinholes smaller than ``min_size`` pixels before thinning."""
    bool_img = binary_img>0
    cleaned = remove_small_objects(bool_img, min_size=min_size)
    cleaned = remove_small_holes(cleaned, area_threshold=min_size)
    return (cleaned.astype(np.uint8)*255)
