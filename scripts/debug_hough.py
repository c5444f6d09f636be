"""
Dump every intermediate stage of court line detection for one image.

Usage:
  python scripts/debug_hough.py -i res/image.raw
  python scripts/debug_hough.py -i res/image.raw -t 150 -o debug_hough
  python scripts/debug_hough.py -i court.png --binarize -1
"""
import argparse
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from courtlines.court import CourtLineDetector
from courtlines.exporter import Exporter
from courtlines.image import load, binarize
from courtlines.visualizer import Visualizer
import config


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("-i", "--input", required=True)
    ap.add_argument("-o", "--outdir", default="debug_hough")
    ap.add_argument("-t", "--threshold", type=float,
                    default=config.HOUGH_THRESHOLD)
    ap.add_argument("--width", type=int, default=config.IMAGE_WIDTH)
    ap.add_argument("--height", type=int, default=config.IMAGE_HEIGHT)
    ap.add_argument("--binarize", type=int, default=config.BINARIZE_THRESHOLD,
                    help="-1 to skip binarisation")
    args = ap.parse_args()

    grid = load(args.input, args.width, args.height)
    if args.binarize >= 0:
        grid = binarize(grid, args.binarize)
    print(f"Image: {grid.width}x{grid.height}  active={grid.active_count}\n")

    det = CourtLineDetector(threshold=args.threshold, debug=True)
    t0 = time.time()
    result = det.detect(grid)
    dt = int((time.time() - t0) * 1000)
    print(f"\n  Time       : {dt} ms")

    _print_lines(result.lines)
    _print_intersections("Raw crossings", result.raw_intersections)
    _print_intersections("Filtered crossings", result.intersections)

    viz = Visualizer()
    exp = Exporter(args.outdir)
    stem = Path(args.input).stem
    saved = [
        exp.save_image(viz.render_accumulator(result.accumulator),
                       f"{stem}_1_accumulator.png"),
        exp.save_image(viz.draw_hough_lines(grid, result.lines),
                       f"{stem}_2_hough_lines.png"),
        exp.save_image(
            viz.draw_markers(viz.to_bgr(grid),
                             result.raw_intersections.all_points()),
            f"{stem}_3_raw_intersections.png"),
        exp.save_image(
            viz.draw_classified(grid, result.court_lines.segments,
                                result.intersections.all_points()),
            f"{stem}_4_classified.png"),
        exp.export_csv(result.court_lines.final(), f"{stem}_lines.csv"),
    ]
    for p in saved:
        print(f"  Saved -> {p}")


def _print_lines(lines):
    print(f"\n  Hough lines ({len(lines)}):")
    for i, ln in enumerate(lines):
        kind = "V" if ln.is_vertical else "H"
        print(f"    #{i:<3} {kind}  r={ln.distance:7.1f}  theta={ln.angle:6.1f}")


def _print_intersections(title, imap):
    print(f"\n  {title}:")
    for group, name in ((imap.horizontal, "H"), (imap.vertical, "V")):
        for handle, pts in group.items():
            coords = " ".join(f"({p.x},{p.y})" for p in pts)
            print(f"    {name} #{handle:<3} n={len(pts)}  {coords}")


if __name__ == "__main__":
    main()
