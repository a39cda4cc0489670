import logging
import sys
from pathlib import Path

import cv2
import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
from zsthin.utils import ensure_directory, save_image, setup_logging


def test_ensure_directory(tmp_path):
    path = tmp_path / "subdir"
    ensure_directory(str(path))
    assert path.exists()


def test_save_image_creates_parents(tmp_path):
    img = np.zeros((4, 6), dtype=np.uint8)
    img[1, 2] = 255
    path = tmp_path / "a" / "b" / "out.png"
    save_image(img, path)
    np.testing.assert_array_equal(cv2.imread(str(path), cv2.IMREAD_GRAYSCALE), img)


def test_save_image_unknown_extension(tmp_path):
    with pytest.raises(Exception):
        save_image(np.zeros((2, 2), dtype=np.uint8), tmp_path / "out.unknownext")


def test_setup_logging_to_file(tmp_path):
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers = []
    try:
        log_file = tmp_path / "run.log"
        setup_logging("debug", str(log_file))
        logging.getLogger("zsthin.test").debug("hello %s", "file")
        for h in root.handlers:
            h.flush()
        assert "[DEBUG] hello file" in log_file.read_text()
    finally:
        for h in root.handlers:
            h.close()
        root.handlers = saved
