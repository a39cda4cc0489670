from pathlib import Path
import argparse
import logging

from .config import load_config_from_pyproject
from .drawing import draw_skeleton_overlay, show_image
from .grid import count_foreground
from .passes import ENGINES
from .preprocessing import load_image, to_grayscale, denoise_image
from .scikit_tools import clean_binary_scikit
from .thinning import zs_thinning
from .thresholding import THRESHOLD_METHODS, apply_threshold
from .utils import save_image, setup_logging

log = logging.getLogger(__name__)
cfg = load_config_from_pyproject()

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp", ".tif", ".tiff"}


def parse_background(text):
    """``"0"`` -> 0, ``"1.5"`` -> 1.5, ``"0,0,255"`` -> (0, 0, 255)."""
    if isinstance(text, (int, float)):
        return text
    if isinstance(text, (list, tuple)):
        return tuple(text)
    parts = [p.strip() for p in str(text).split(",") if p.strip()]
    if not parts:
        raise argparse.ArgumentTypeError("background must not be empty")
    try:
        values = [float(p) if any(c in p for c in ".eE") else int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid background '{text}'")
    return values[0] if len(values) == 1 else tuple(values)


def process_image(image_path: str, output_path=None, args=None) -> dict:
    if args is None:
        args = build_parser().parse_args([image_path])
    log.info("Processing %s", image_path)

    img = load_image(image_path)
    if args.color:
        binary = img
    else:
        gray = to_grayscale(img)
        gray = denoise_image(gray, args.denoise_method)
        binary = apply_threshold(
            gray,
            method=args.threshold,
            value=args.fixed_threshold,
            block_size=args.adaptive_block,
            c=args.adaptive_c,
            invert=args.invert,
        )
        if args.clean_small_objects:
            binary = clean_binary_scikit(binary, args.min_small_size)

    before = count_foreground(binary, args.background)
    passes, skeleton = zs_thinning(binary, background=args.background, engine=args.engine)
    after = count_foreground(skeleton, args.background)
    log.info("%s: %d passes, %d -> %d foreground pixels", image_path, passes, before, after)

    if output_path:
        save_image(skeleton, output_path)
    if args.overlay:
        save_image(draw_skeleton_overlay(binary, skeleton, background=args.background), args.overlay)
    if args.show:
        show_image("result", skeleton)

    return {
        "binary": binary,
        "skeleton": skeleton,
        "passes": passes,
        "foreground_before": before,
        "foreground_after": after,
    }


def _batch_worker(job):
    path, out_path, args = job
    try:
        process_image(path, out_path, args)
    except Exception:
        log.exception("Failed on %s", path)
        raise
    return path


def process_batch(paths, output_root: Path, args) -> None:
    from concurrent.futures import ProcessPoolExecutor, as_completed

    jobs = [(p, Path(output_root) / f"{Path(p).stem}_skeleton.png", args) for p in paths]
    with ProcessPoolExecutor() as ex:
        futures = [ex.submit(_batch_worker, job) for job in jobs]
        for f in as_completed(futures):
            log.info("Finished %s", f.result())


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="zsthin – Zhang-Suen thinning of raster images")
    p.add_argument("input", nargs="?", help="Input image")
    p.add_argument("output", nargs="?", help="Where to write the skeleton")

    # thinning
    p.add_argument("--color", action="store_true", help="Thin the 3-channel image as read, no thresholding")
    p.add_argument("--background", type=parse_background, default=parse_background(cfg.get("background", 0)))
    p.add_argument("--engine", choices=sorted(ENGINES), default=cfg.get("engine", "vectorized"))

    # thresholding
    p.add_argument("--threshold", choices=THRESHOLD_METHODS, default=cfg.get("threshold", "none"))
    p.add_argument("--fixed-threshold", type=int, default=cfg.get("fixed_threshold", 127))
    p.add_argument("--adaptive-block", type=int, default=cfg.get("adaptive_block", 51))
    p.add_argument("--adaptive-c", type=int, default=cfg.get("adaptive_c", 10))
    p.add_argument("--invert", action=argparse.BooleanOptionalAction, default=cfg.get("invert", False))

    # denoising
    p.add_argument("--denoise-method", choices=["bilateral", "median"], default=cfg.get("denoise_method") or None)

    # morphology
    p.add_argument("--clean-small-objects", action="store_true")
    p.add_argument("--min-small-size", type=int, default=cfg.get("min_small_size", 64))

    # display
    p.add_argument("--overlay", help="Write the skeleton drawn over the input here")
    p.add_argument("--show", action="store_true", help="Open a window with the result")

    # batch
    p.add_argument("--batch-dir")
    p.add_argument("--batch-list")
    p.add_argument("--output-dir", default="results", help="Where batch results go")

    # logging
    p.add_argument("--log-level", default=cfg.get("log_level", "INFO"))
    p.add_argument("--log-file")

    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if args.color and args.threshold != "none":
        parser.error("--color cannot be combined with --threshold")
    if args.color and args.clean_small_objects:
        parser.error("--color cannot be combined with --clean-small-objects")

    if args.batch_dir or args.batch_list:
        if args.show or args.overlay:
            parser.error("--show and --overlay are single-image options")
        if args.batch_list:
            with open(args.batch_list) as f:
                paths = [line.strip() for line in f if line.strip()]
        else:
            paths = sorted(str(p) for p in Path(args.batch_dir).iterdir() if p.suffix.lower() in IMAGE_EXTENSIONS)
        process_batch(paths, Path(args.output_dir), args)
    else:
        if not args.input:
            parser.error("an input image is required unless batch mode is used")
        process_image(args.input, args.output, args)
    return 0


if __name__ == "__main__":
    main()
