"""
Command-line class scorer
"""
import argparse
import json
import os
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from .competition import ClassResult, score_class
from .config import ScoringConfig, get_config
from .exceptions import ScoringError
from .schemas import ClassRound


def setup_logging(config: ScoringConfig):
    """Configure loguru sinks"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=config.log_level.upper()
    )
    if config.log_dir:
        logger.add(
            os.path.join(config.log_dir, "showjumping_{time:YYYY-MM-DD}.log"),
            rotation="1 day",
            retention="30 days",
            level="DEBUG"
        )


def print_standings(result: ClassResult, top_n: Optional[int] = None):
    """Standings table"""
    print(f"\n{'='*72}")
    print(f" {result.name}  (time allowed {result.time_allowed}s)")
    print(f"{'='*72}")
    print(f"{'Place':>6} {'Competitor':<28} {'Time':>8} {'Time pen':>9} {'Jump pen':>9} {'Total':>7}")
    print(f"{'-'*72}")

    standings = result.standings()
    if top_n:
        standings = standings[:top_n]

    for r in standings:
        row = r.row.to_dict()
        name = r.competitor if len(r.competitor) <= 28 else r.competitor[:26] + ".."
        print(
            f"{r.placing:>6} {name:<28} {row['time_including_rebuild']!s:>8} "
            f"{row['time_penalty']!s:>9} {row['jump_penalty']!s:>9} {row['total_penalty']!s:>7}"
        )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show jumping class scorer")
    parser.add_argument("class_file", type=str, help="Class round JSON file")
    parser.add_argument("--output", type=str, help="Write results JSON here")
    parser.add_argument("--tie-break-by-time", action="store_true", help="Split equal penalties on time")
    parser.add_argument("--top", type=int, help="Only print the top N")

    args = parser.parse_args(argv)

    config = get_config()
    setup_logging(config)

    try:
        with open(args.class_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        logger.error(f"{args.class_file}: cannot read file: {e}")
        return 2
    except json.JSONDecodeError as e:
        logger.error(f"{args.class_file}: invalid JSON: {e}")
        return 2

    try:
        class_round = ClassRound.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            logger.error(f"{args.class_file}: {field}: {error['msg']}")
        return 2

    if args.tie_break_by_time:
        class_round.tie_break_by_time = True

    try:
        result = score_class(class_round, config=config)
    except ScoringError as e:
        logger.error(f"Scoring failed: {e}")
        return 1

    print_standings(result, top_n=args.top)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
        logger.info(f"Results written: {args.output}")

    return 0

