"""
Batch-run corner detection across multiple images.

Saves per-image outputs and a CSV log with diagnostics:
- input_path, frame_shape, num_requested, num_found, corners_csv_path,
  overlay_path, response_path, plot_path, quantile, block_size, downscale, seconds

Usage (from project root):
python -m scripts.detect_demo data/Checkerboard_1.tif data/Checkerboard_2.jpg --quantile 0.005
"""

import os
import csv
import time
import argparse
from datetime import datetime

from io_utils.image_handler import read_image, save_image, prepare_frame
from io_utils.file_utils import make_result_filename, save_parameters_txt, save_corners_csv
from core.detector import detect_corners
from core.settings import DEFAULT_QUANTILE, BLOCK_SIZE, DOWNSCALE_FACTOR, RESULTS_DIR
from visuals.plots import corner_overlay, plot_corners, plot_response_map

csv_fields = [
    "input_path", "frame_shape", "num_requested", "num_found", "corners_csv_path",
    "overlay_path", "response_path", "plot_path", "quantile", "block_size", "downscale", "seconds",
]


def process_one_image(img_path, outdir, quantile=DEFAULT_QUANTILE, block_size=BLOCK_SIZE,
                      downscale=DOWNSCALE_FACTOR):
    arr, meta = read_image(img_path)
    frame = prepare_frame(arr, downscale_factor=downscale)

    base = os.path.splitext(os.path.basename(img_path))[0]
    run_dir = os.path.join(outdir, base)
    os.makedirs(run_dir, exist_ok=True)

    t0 = time.perf_counter()
    corners, inter = detect_corners(frame, quantile, block_size=block_size, return_intermediates=True)
    seconds = time.perf_counter() - t0

    if len(corners) < inter["num_corners"]:
        print(f" -> only {len(corners)} of {inter['num_corners']} requested corners are separable")

    corners_path = save_corners_csv(os.path.join(run_dir, "corners.csv"), corners, inter["response"])
    overlay_path = make_result_filename("harris", img_path, quantile, "overlay", outdir=run_dir)
    save_image(overlay_path, corner_overlay(frame.shape, corners))
    response_path = os.path.join(run_dir, "response_map.png")
    plot_path = make_result_filename("harris", img_path, quantile, "corners", outdir=run_dir)

    # save visualizations
    try:
        plot_response_map(inter["response"], out_path=response_path)
    except Exception as e:
        print("Warning: failed saving response map:", e)
    try:
        plot_corners(frame, corners, out_path=plot_path)
    except Exception as e:
        print("Warning: failed saving corner plot:", e)

    save_parameters_txt(run_dir, {
        "input_path": img_path,
        "source_mode": meta.get("mode"),
        "source_size": meta.get("size"),
        "frame_shape": frame.shape,
        "quantile": quantile,
        "block_size": block_size,
        "downscale": downscale,
    })

    return {
        "input_path": img_path,
        "frame_shape": f"{frame.shape[0]}x{frame.shape[1]}",
        "num_requested": inter["num_corners"],
        "num_found": len(corners),
        "corners_csv_path": corners_path,
        "overlay_path": overlay_path,
        "response_path": response_path,
        "plot_path": plot_path,
        "quantile": quantile,
        "block_size": block_size,
        "downscale": downscale,
        "seconds": round(seconds, 4),
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="FFT Harris corner detection over image files.")
    parser.add_argument("images", nargs="+", help="input image paths")
    parser.add_argument("--quantile", type=float, default=DEFAULT_QUANTILE,
                        help="fraction of pixels requested as corners, in (0, 1]")
    parser.add_argument("--block-size", type=int, default=BLOCK_SIZE,
                        help="exclusive suppression distance between accepted corners")
    parser.add_argument("--downscale", type=int, default=DOWNSCALE_FACTOR,
                        help="keep every N-th row and column before detection")
    parser.add_argument("--outdir", default=None, help="output directory (default results/detect_<timestamp>)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    outdir = args.outdir or os.path.join(
        RESULTS_DIR, f"detect_{datetime.now().strftime('%Y%m%dT%H%M%S')}"
    )
    os.makedirs(outdir, exist_ok=True)
    csv_path = os.path.join(outdir, "results.csv")

    with open(csv_path, "w", newline="", encoding="utf-8") as csvf:
        writer = csv.DictWriter(csvf, fieldnames=csv_fields)
        writer.writeheader()

        for img in args.images:
            if not os.path.exists(img):
                print("Skipping missing:", img)
                continue
            print("Processing:", img)
            rec = process_one_image(img, outdir, quantile=args.quantile,
                                    block_size=args.block_size, downscale=args.downscale)
            writer.writerow(rec)
            csvf.flush()
            print(" -> done. corners:", rec["num_found"], "/", rec["num_requested"],
                  "in", rec["seconds"], "s")

    print("Batch done. Results in:", outdir, "CSV:", csv_path)
    return csv_path


if __name__ == "__main__":
    main()
