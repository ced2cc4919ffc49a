import sys
import numpy as np
from io_utils.image_handler import read_image, prepare_frame
from core.convolution import spectral_convolve
from core.detector import detect_corners
from core.fft_engine import compute_ifft
from core.gradients import KERNEL_X
from visuals.plots import plot_magnitude_spectrum, plot_gradient_maps

# --- Config ---
QUANTILE = 0.005
DOWNSCALE = 2
OUTDIR = "results/debug"


def collect_diagnostics(frame: np.ndarray, quantile: float = QUANTILE) -> dict:
    """Run one convolution and the full pipeline on `frame`, keeping the intermediates."""
    # one convolution with intermediates; warns on imaginary residue after the inverse DFT
    _, conv = spectral_convolve(frame, KERNEL_X, return_intermediates=True)
    back = compute_ifft(conv["product"], normalize=True, suppress_warning=False)

    corners, inter = detect_corners(frame, quantile, return_intermediates=True)
    response = inter["response"]
    finite = np.isfinite(response)
    if finite.any():
        response_range = (float(response[finite].min()), float(response[finite].max()))
    else:
        response_range = None

    return {
        "conv": conv,
        "inter": inter,
        "corners": corners,
        "padded_zero_tail": not conv["image_padded"][-1, :].any() and not conv["image_padded"][:, -1].any(),
        "back_shape": back.shape,
        "response_range": response_range,
        "non_finite": int((~finite).sum()),
        "flat": int((response == 0.0).sum()),
    }


def print_diagnostics(frame: np.ndarray, diag: dict):
    inter = diag["inter"]
    corners = diag["corners"]
    print("\n=== DEBUG INTERMEDIATES ===")
    print("frame shape, min/max:", frame.shape, np.nanmin(frame), np.nanmax(frame))
    print("padded rows/cols zero beyond frame?", diag["padded_zero_tail"])
    print(f"gx min/max: {np.nanmin(inter['gx']):.4f}, {np.nanmax(inter['gx']):.4f}")
    print(f"gy min/max: {np.nanmin(inter['gy']):.4f}, {np.nanmax(inter['gy']):.4f}")
    if diag["response_range"] is None:
        print("response min/max: no finite responses")
    else:
        print("response min/max: {:.4e}, {:.4e}".format(*diag["response_range"]))
    print("non-finite responses:", diag["non_finite"])
    print("flat (zero) responses:", diag["flat"])
    print("corners found / requested:", len(corners), "/", inter["num_corners"])
    print("top 5 corners:", corners[:5].tolist())
    print("============================\n")


def main(img_path: str):
    arr, meta = read_image(img_path)
    frame = prepare_frame(arr, downscale_factor=DOWNSCALE)
    diag = collect_diagnostics(frame)
    print_diagnostics(frame, diag)
    plot_magnitude_spectrum(diag["conv"]["product"], out_path=f"{OUTDIR}/product_spectrum.png")
    plot_gradient_maps(diag["inter"]["gx"], diag["inter"]["gy"], out_path=f"{OUTDIR}/gradients.png")
    return diag


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "data/sample1.png")
