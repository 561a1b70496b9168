import sys

from models.segment import parse_segments
from rasterization.accumulator import accumulate, danger_zone, find_unsupported
from utils.text_io import read_text, extract_name
from visualization.save_outputs import save_all_outputs

from config import (
    INPUT_PATH,
    get_active_params,
)


def process_input(text: str, name: str = "vents", save_outputs: bool = None):
    """
    Runs the complete pipeline for one block of vent lines:
      1. Parse segments (fail-fast on malformed text)
      2. Report segments with unsupported geometry
      3. Accumulate overlap counts
      4. Reduce to the danger-zone value
      5. Optionally save the grid and heat map
         (save_outputs=None follows SAVE_OUTPUTS in config)

    Returns the danger-zone value.
    """

    params = get_active_params()
    if save_outputs is None:
        save_outputs = params["SAVE_OUTPUTS"]

    # ------------------------------
    # STEP 1 — PARSE
    # ------------------------------
    segments = parse_segments(text)
    if not segments:
        print(f"[WARN] No vent lines found in {name}.")

    # ------------------------------
    # STEP 2 — UNSUPPORTED GEOMETRY
    # ------------------------------
    for seg in find_unsupported(segments):
        print(f"[WARN] {seg} is neither axis-aligned nor 45 degrees; skipped.")

    # ------------------------------
    # STEP 3 — ACCUMULATE
    # ------------------------------
    overlap = accumulate(segments, include_diagonals=params["INCLUDE_DIAGONALS"])

    # ------------------------------
    # STEP 4 — DANGER ZONE
    # ------------------------------
    danger = danger_zone(overlap, threshold=params["DANGER_THRESHOLD"])

    # ------------------------------
    # STEP 5 — SAVE OUTPUTS
    # ------------------------------
    if save_outputs:
        for path in save_all_outputs(params["OUTPUT_FOLDER"], name, overlap, segments):
            print(f"[OK] Wrote {path}")

    return danger


def main(argv=None):
    """
    Main entry point:
      - Reads the input file (first argument, or INPUT_PATH)
      - Prints the danger-zone value
      - Returns a process exit status
    """
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else INPUT_PATH

    try:
        text = read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"[ERROR] Cannot read {path}: {exc}")
        return 1

    try:
        danger = process_input(text, extract_name(path))
    except ValueError as exc:
        # ParseError / FormatError, or a grid too large to save
        print(f"[ERROR] {path}: {exc}")
        return 1

    print(danger)
    return 0


if __name__ == "__main__":
    sys.exit(main())
