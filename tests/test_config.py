import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from zsthin.config import load_config_from_pyproject


def test_project_defaults():
    cfg = load_config_from_pyproject()
    assert cfg["background"] == 0
    assert cfg["engine"] == "vectorized"
    assert cfg["threshold"] == "none"


def test_custom_file(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool.zsthin]\nbackground = [0, 0, 255]\nengine = "scan"\n', encoding="utf-8")
    cfg = load_config_from_pyproject(path)
    assert cfg == {"background": [0, 0, 255], "engine": "scan"}


def test_missing_file(tmp_path):
    assert load_config_from_pyproject(tmp_path / "nope.toml") == {}


def test_unknown_keys_are_dropped(tmp_path, caplog):
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool.zsthin]\nengine = "scan"\ncolour = "red"\n', encoding="utf-8")
    cfg = load_config_from_pyproject(path)
    assert cfg == {"engine": "scan"}
    assert "colour" in caplog.text
