"""
Command-line interface for the GBM chart gallery.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional
from gbmcharts.config import GalleryConfig
from gbmcharts.gallery import GALLERY, run_gallery
from gbmcharts.simulation.path_generator import PathGenerator


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments
    """
    parser = argparse.ArgumentParser(
        description="Demo charts driven by Geometric Brownian Motion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render every chart group
  %(prog)s

  # Save bar and OHLC charts without opening windows
  %(prog)s bar ohlc --output-dir charts --no-plot --seed 7

  # Also write 1024x1024 PNG and 1024x512 JPG copies of the GBM OHLC chart
  %(prog)s ohlc --no-plot --export-images

  # Print a single simulated path
  %(prog)s path --start-price 100 --time-step 0.00274 --steps 10 --seed 1
        """,
    )

    parser.add_argument(
        "groups",
        nargs="*",
        help=f"Chart groups to render (default: all), or 'path' to print "
        f"one simulated path. Groups: {', '.join(GALLERY)}",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List chart groups and their demos, then exit",
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to save charts in (default: GBMCHARTS_OUTPUT_DIR or 'output')",
    )

    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Do not display the charts (useful for headless execution)",
    )

    parser.add_argument(
        "--export-images",
        action="store_true",
        help="Also write fixed-size PNG and JPG copies where supported "
        "(default: GBMCHARTS_EXPORT or off)",
    )

    parser.add_argument(
        "--dpi",
        type=int,
        default=None,
        help="Resolution of saved charts (default: GBMCHARTS_DPI or 150)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for simulated data (default: GBMCHARTS_SEED or unseeded)",
    )

    # Path mode options
    parser.add_argument(
        "--path",
        action="store_true",
        help="Print one simulated GBM path instead of rendering charts "
        "(same as the 'path' command)",
    )

    parser.add_argument(
        "--start-price",
        type=float,
        default=100.0,
        help="Starting price of the path (default: 100.0)",
    )

    parser.add_argument(
        "--time-step",
        type=float,
        default=1.0 / 365.0,
        help="Time step per point, in years (default: 1/365)",
    )

    parser.add_argument(
        "--steps",
        type=int,
        default=3000,
        help="Number of points in the path (default: 3000)",
    )

    parser.add_argument(
        "--drift",
        type=float,
        default=0.15,
        help="Drift coefficient mu (default: 0.15)",
    )

    parser.add_argument(
        "--diffusion",
        type=float,
        default=0.5,
        help="Diffusion coefficient sigma (default: 0.5)",
    )

    args = parser.parse_args(argv)

    # "path" as the first positional selects path mode
    if args.groups and args.groups[0] == "path":
        args.path = True
        args.groups = args.groups[1:]

    return args


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Raises
    ------
    ValueError
        If arguments are invalid
    """
    unknown = [group for group in args.groups if group not in GALLERY]
    if unknown:
        raise ValueError(
            f"Unknown chart group(s): {', '.join(unknown)}. "
            f"Choose from: {', '.join(GALLERY)}"
        )

    if args.path and args.groups:
        raise ValueError("path mode does not take chart groups")

    if args.steps < 1:
        raise ValueError("steps must be at least 1")

    if not args.time_step >= 0:
        raise ValueError("time-step must be non-negative")

    if args.dpi is not None and args.dpi <= 0:
        raise ValueError("dpi must be positive")


def list_groups() -> None:
    """Print every chart group with its demos."""
    for name, demos in GALLERY.items():
        print(f"{name}:")
        for demo in demos:
            print(f"  {demo.__name__}")


def run_path_mode(args: argparse.Namespace, config: GalleryConfig) -> int:
    """Print one simulated path, one value per line."""
    generator = PathGenerator(seed=config.seed)
    path = generator.generate(
        start_price=args.start_price,
        time_step=args.time_step,
        step_count=args.steps,
        drift=args.drift,
        diffusion=args.diffusion,
    )
    for value in path:
        print(repr(float(value)))
    return 0


def run_gallery_mode(args: argparse.Namespace, config: GalleryConfig) -> int:
    """Render the selected chart groups."""
    groups = args.groups or list(GALLERY)

    print("=" * 70)
    print("GBM Chart Gallery")
    print("=" * 70)
    print(f"Groups: {', '.join(groups)}")
    print(f"Output: {Path(config.output_dir).resolve()} | DPI: {config.dpi}")
    print(f"Seed: {config.seed if config.seed is not None else 'random'}")
    print("=" * 70)

    def report(demo_name: str, output_path: Optional[Path]) -> None:
        print(f"  ✓ {demo_name} -> {output_path}")

    results = run_gallery(
        groups,
        output_dir=config.output_dir,
        show_plot=config.show_plot,
        seed=config.seed,
        dpi=config.dpi,
        export_images=config.export_images,
        callback=report,
    )

    total = sum(len(figures) for figures in results.values())
    print(f"\n{total} charts rendered in {len(results)} group(s)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns
    -------
    int
        Exit code (0 for success, 1 for error)
    """
    try:
        args = parse_args(argv)
        validate_args(args)

        if args.list:
            list_groups()
            return 0

        config = GalleryConfig.from_env(
            output_dir=args.output_dir,
            dpi=args.dpi,
            seed=args.seed,
            show_plot=False if args.no_plot else None,
            export_images=True if args.export_images else None,
        )

        if args.path:
            return run_path_mode(args, config)

        return run_gallery_mode(args, config)

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
