"""
CLI entry point for the tennis court line classifier.
"""
import argparse
import sys
from pathlib import Path

import cv2

from courtlines.pipeline import Pipeline
import config


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Classify tennis court lines in a grayscale image",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        "--input", "-i",
        required=True,
        nargs="+",
        help="Path(s) to input images (.raw or any OpenCV format)"
    )

    parser.add_argument(
        "--output", "-o",
        default=str(config.RESULTS_DIR),
        help="Output directory for results"
    )

    parser.add_argument(
        "--width",
        type=int,
        default=config.IMAGE_WIDTH,
        help="Width of .raw input images"
    )

    parser.add_argument(
        "--height",
        type=int,
        default=config.IMAGE_HEIGHT,
        help="Height of .raw input images"
    )

    parser.add_argument(
        "--threshold", "-t",
        type=float,
        default=config.HOUGH_THRESHOLD,
        help="Minimum accumulator votes for a Hough line"
    )

    parser.add_argument(
        "--binarize", "-b",
        type=int,
        default=config.BINARIZE_THRESHOLD,
        help="Intensity threshold for binarisation (-1 = input already binary)"
    )

    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Print stage details and save debug images"
    )

    parser.add_argument(
        "--show",
        action="store_true",
        help="Display the classified lines in a window"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress progress output"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        print(f"Error: Invalid image size {args.width}x{args.height}")
        sys.exit(1)

    for p in args.input:
        if not Path(p).exists():
            print(f"Error: Input file not found: {p}")
            sys.exit(1)

    pipeline = Pipeline(
        output_dir=args.output,
        width=args.width,
        height=args.height,
        threshold=args.threshold,
        binarize_level=None if args.binarize < 0 else args.binarize,
        save_debug=args.debug,
        show_progress=not args.quiet,
        debug=args.debug,
    )

    try:
        results = pipeline.process_many(args.input)
    except KeyboardInterrupt:
        print("\nProcessing interrupted by user.")
        sys.exit(0)
    except Exception as e:
        print(f"Error during processing: {e}")
        sys.exit(1)

    print("\n--- Classification Complete ---")
    for path, result in results.items():
        final = result.court_lines.final()
        print(f"{path}: {len(final)} court lines")
        for name, count in sorted(result.court_lines.to_dict()["counts"].items()):
            print(f"  {name:<20} {count}")

        if args.show:
            grid = pipeline.load(path)
            cv2.imshow(f"Classified Lines - {Path(path).name}",
                       pipeline.render(grid, result))
    if args.show:
        cv2.waitKey()
        cv2.destroyAllWindows()
    print(f"Output directory: {args.output}")


if __name__ == "__main__":
    main()
