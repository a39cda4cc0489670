import logging
from pathlib import Path

import cv2
import numpy as np

def ensure_directory(path: str) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p

def save_image(img: np.ndarray, path) -> None:
    path = Path(path)
    ensure_directory(str(path.parent))
    if not cv2.imwrite(str(path), img):
        raise OSError(f"Cannot write image '{path}'.")

def setup_logging(level: str = "INFO", log_file: str = None):
    fmt = "%(asctime)s [%(levelname)s] %(message)s"
    numeric = getattr(logging, level.upper(), logging.INFO)
    if log_file:
        logging.basicConfig(level=numeric, format=fmt, filename=log_file, filemode="a")
    else:
        logging.basicConfig(level=numeric, format=fmt)
