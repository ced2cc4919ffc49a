import csv
import os
import numpy as np
from PIL import Image
from scripts.detect_demo import main

def test_detect_demo_writes_outputs(tmp_path):
    arr = np.zeros((40, 48), dtype=np.uint8)
    arr[10:20, 12:30] = 255
    img_path = tmp_path / "square.png"
    Image.fromarray(arr).save(img_path)
    outdir = tmp_path / "run"

    csv_path = main([str(img_path), str(tmp_path / "missing.png"),
                     "--outdir", str(outdir), "--quantile", "0.01"])

    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    rec = rows[0]
    assert rec["frame_shape"] == "20x24"
    assert int(rec["num_requested"]) == 4
    assert 1 <= int(rec["num_found"]) <= 4
    for key in ("corners_csv_path", "overlay_path", "response_path", "plot_path"):
        assert os.path.exists(rec[key])
    assert os.path.exists(outdir / "square" / "parameters.txt")

def test_detect_demo_names_outputs_after_input(tmp_path):
    img_path = tmp_path / "frame.png"
    Image.fromarray(np.random.randint(0, 255, (16, 16), dtype=np.uint8)).save(img_path)
    csv_path = main([str(img_path), "--outdir", str(tmp_path / "run"), "--quantile", "0.05"])
    with open(csv_path, newline="", encoding="utf-8") as f:
        rec = next(csv.DictReader(f))
    assert os.path.basename(rec["overlay_path"]).startswith("harris_frame_q-0.05_overlay_")
    assert os.path.basename(rec["plot_path"]).startswith("harris_frame_q-0.05_corners_")
