"""Command-line surface: ``sharp-score <path_to_image>``.

Prints the score with one fractional digit on stdout. Every failure is
reported on stderr with exit code 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from sharp_score.config import settings
from sharp_score.errors import DecodeError, InvalidImage, NotFoundError, UsageError
from sharp_score.pipeline import score_file
from sharp_score.scoring import ScoreCalibration, format_score

USAGE = "Usage: sharp-score <path_to_image>"

logger = logging.getLogger("sharp_score")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def setup_logging(level: str = "WARNING") -> logging.Logger:
    # stdout は結果専用。ログは stderr に出す。
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    # 再呼び出し時は既存ハンドラを破棄して作り直す
    logger.handlers = []
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sharp-score",
        description="Score image sharpness from 0 (blurry) to 10 (sharp) using the variance of the Laplacian.",
    )
    parser.add_argument("path", nargs="?", help="Image file to score")
    parser.add_argument("--workers", type=int, default=None, help="Threads for the Laplacian stage")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline statistics to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        if args.path is None:
            raise UsageError("missing image path")
        if args.workers is not None and args.workers < 1:
            raise UsageError("--workers must be >= 1")
    except UsageError as exc:
        print(USAGE, file=sys.stderr)
        logger.debug("Usage error: %s", exc)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.LOG_LEVEL)

    try:
        result = score_file(
            args.path,
            calibration=ScoreCalibration.from_settings(settings),
            workers=args.workers,
        )
    except NotFoundError:
        print(f"Error: File not found: {args.path}", file=sys.stderr)
        return 1
    except DecodeError as exc:
        print(f"Error decoding image: {exc}", file=sys.stderr)
        return 1
    except InvalidImage as exc:
        print(f"Error: invalid image: {exc}", file=sys.stderr)
        return 1

    print(format_score(result.score))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
