"""Command-line entry point for mosaic generation."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog
from pydantic import ValidationError

from .config import MosaicParams, settings
from .render import FrameRecorder, make_image, save_image

logger = structlog.get_logger()


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Route structlog through stdlib logging at ``level``."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level.upper())
    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grow a mosaic image from random seeds along circumcircles"
    )
    parser.add_argument("--size", type=int, default=settings.default_size, help="Width and height in pixels")
    parser.add_argument("--samples", type=int, default=settings.default_num_samples, help="Placements sampled per growth attempt")
    parser.add_argument("--seeds", type=int, default=settings.default_num_seeds, help="Attempts spent scattering seed points")
    parser.add_argument("--circle-frac", type=float, default=settings.default_circle_frac, help="Fraction of each circle walked before giving up")
    parser.add_argument("--timeout", type=int, default=settings.default_timeout, help="Consecutive misses that end the run")
    parser.add_argument("--seed", type=int, default=settings.default_seed, help="Random seed")
    parser.add_argument("--output-dir", default=settings.output_dir, help="Directory for the generated files")
    parser.add_argument("--gif", action="store_true", default=settings.record_gif, help="Also write an animated GIF of the growth")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument("--log-format", choices=["console", "json"], default=settings.log_format, help="Logging format")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    try:
        params = MosaicParams(
            size=args.size,
            num_samples=args.samples,
            num_seeds=args.seeds,
            circle_frac=args.circle_frac,
            timeout=args.timeout,
            seed=args.seed,
        )
    except ValidationError as e:
        logger.error("Invalid parameters", errors=e.errors(include_url=False))
        return 2

    output_dir = Path(args.output_dir)
    png_path = output_dir / params.filename("png")
    print(png_path.name)

    recorder = FrameRecorder() if args.gif else None
    image = make_image(params, frame_recorder=recorder)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        save_image(image, png_path)
        if recorder is not None:
            recorder.save(output_dir / params.filename("gif"))
    except OSError as e:
        logger.error("Failed to write output", error=str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
