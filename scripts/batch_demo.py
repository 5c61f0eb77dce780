"""
Batch-run every single-input operation across multiple images.

Saves per-image outputs and a CSV log with:
- input_path, operation, out_path, width, height, content_hash

Usage (from project root):
python -m scripts.batch_demo [image ...]

Without arguments the IMAGES list below is used.
"""

import os
import csv
import sys
from datetime import datetime

from picture import Operation, apply_operation
from io_utils.image_handler import read_image, save_image
from io_utils.file_utils import make_result_filename, save_parameters_txt

# CONFIG: list image paths (the data/ directory in the project) you want to run (edit as needed)
IMAGES = [
    "data/sample_1.png",
    "data/sample_2.jpg",
]

# operations applied to every image (multi-input ones are skipped)
OPERATIONS = [op for op in Operation if not op.multi_input]

DEFAULT_OUTDIR = "results"

csv_fields = ["input_path", "operation", "out_path", "width", "height", "content_hash"]


def process_one_image(img_path, run_dir, operations=OPERATIONS):
    """Apply each operation to one image; return one CSV record per operation."""
    picture, meta = read_image(img_path)
    base = os.path.splitext(os.path.basename(img_path))[0]
    img_dir = os.path.join(run_dir, base)
    os.makedirs(img_dir, exist_ok=True)

    records = []
    for op in operations:
        out = apply_operation(op, [picture])
        out_path = make_result_filename(img_path, op.value, ext="png", outdir=img_dir)
        save_image(out_path, out)
        records.append({
            "input_path": img_path,
            "operation": op.value,
            "out_path": out_path,
            "width": out.width,
            "height": out.height,
            "content_hash": out.content_hash(),
        })
    return records


def run_batch(images, outdir=DEFAULT_OUTDIR, operations=OPERATIONS):
    """Process `images` into a timestamped folder under `outdir`; return the CSV path."""
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    run_dir = os.path.join(outdir, f"batch_demo_{timestamp}")
    os.makedirs(run_dir, exist_ok=True)
    save_parameters_txt(run_dir, {
        "images": ", ".join(images),
        "operations": ", ".join(op.value for op in operations),
    })

    csv_path = os.path.join(run_dir, "results.csv")
    with open(csv_path, "w", newline="", encoding="utf-8") as csvf:
        writer = csv.DictWriter(csvf, fieldnames=csv_fields)
        writer.writeheader()

        for img in images:
            if not os.path.exists(img):
                print("Skipping missing:", img)
                continue
            print("Processing:", img)
            for rec in process_one_image(img, run_dir, operations):
                writer.writerow(rec)
            csvf.flush()

    print("Batch done. Results in:", run_dir, "CSV:", csv_path)
    return csv_path


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    run_batch(list(argv) or IMAGES)


if __name__ == "__main__":
    main()
