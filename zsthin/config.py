import logging
from pathlib import Path
try:
    import tomllib  # py>=3.11
    _LOADER = "tomllib"
except ImportError:
    try:
        import toml
        _LOADER = "toml"
    except ImportError:
        _LOADER = None

log = logging.getLogger(__name__)

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"

KNOWN_KEYS = {
    "background",
    "engine",
    "threshold",
    "fixed_threshold",
    "adaptive_block",
    "adaptive_c",
    "invert",
    "denoise_method",
    "min_small_size",
    "log_level",
}


def _read_toml(path: Path) -> dict:
    if _LOADER == "tomllib":
        with open(path, "rb") as f:
            return tomllib.load(f)
    with open(path, "r", encoding="utf-8") as f:
        return toml.load(f)


def load_config_from_pyproject(path: Path = None) -> dict:
    """Read the ``[tool.zsthin]`` table; missing file or parser gives ``{}``."""
    path = Path(path) if path is not None else PYPROJECT
    if _LOADER is None or not path.exists():
        return {}
    section = _read_toml(path).get("tool", {}).get("zsthin", {})
    unknown = sorted(set(section) - KNOWN_KEYS)
    if unknown:
        log.warning("Ignoring unknown [tool.zsthin] keys in %s: %s", path, ", ".join(unknown))
    return {k: v for k, v in section.items() if k in KNOWN_KEYS}
