# io_utils/file_utils.py
"""
File naming and result recording helpers.
"""

import os
import csv
import datetime
from typing import Dict

import numpy as np


def make_result_filename(
    projname: str,
    input_path: str,
    quantile: float,
    desc: str,
    ext: str = "png",
    outdir: str = ".",
) -> str:
    base = os.path.splitext(os.path.basename(input_path))[0]
    timestamp = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
    safe_desc = str(desc).replace(" ", "_")
    fname = f"{projname}_{base}_q-{quantile}_{safe_desc}_{timestamp}.{ext}"
    os.makedirs(outdir, exist_ok=True)
    return os.path.join(outdir, fname)


def save_parameters_txt(outdir: str, params: Dict):
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, "parameters.txt")
    with open(path, "w", encoding="utf-8") as f:
        for k, v in params.items():
            f.write(f"{k}: {v}\n")
    return path


def save_corners_csv(path: str, corners: np.ndarray, response: np.ndarray = None):
    """
    Write one row per corner: rank, row, col (and score when a response map is given).
    """
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    fields = ["rank", "row", "col"] + (["score"] if response is not None else [])
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(fields)
        for rank, (u, v) in enumerate(np.asarray(corners).reshape(-1, 2)):
            row = [rank, int(u), int(v)]
            if response is not None:
                row.append(float(response[u, v]))
            writer.writerow(row)
    return path
