"""Command-line entry point: match a profile against the lender catalog.

Usage:
    python -m src.main profile.json [--catalog lenders.json]

Prints a JSON report to stdout: match buckets, the next question to ask,
whether all hard requirements are known, and funding levers.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from src.config import settings
from src.conversation.flow import has_hard_requirements, next_question_group
from src.eligibility import CatalogError, compute_levers, load_catalog, match_all
from src.schemas.eligibility import BusinessProfile, LenderProduct

logger = logging.getLogger(__name__)


# ── Logging setup ────────────────────────────────────────────────────


def configure_logging(level: str, production: bool = False) -> None:
    """Route stdlib and structlog output to stderr; stdout carries the report.

    Production gets one JSON object per line, development the console renderer.
    """
    renderer = structlog.processors.JSONRenderer() if production else structlog.dev.ConsoleRenderer()
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


# ── Report ───────────────────────────────────────────────────────────


def build_report(
    profile: BusinessProfile,
    catalog: list[LenderProduct],
    lever_target: int,
) -> dict[str, Any]:
    """Everything the presentation layer needs for one profile snapshot."""
    buckets = match_all(profile, catalog)
    return {
        "matches": buckets.model_dump(mode="json", by_alias=True, exclude_none=True),
        "counts": buckets.counts,
        "nextQuestion": next_question_group(profile),
        "hasHardRequirements": has_hard_requirements(profile),
        "levers": compute_levers(profile, buckets, target=lever_target),
    }


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fundmatch", description=__doc__.splitlines()[0])
    parser.add_argument("profile", type=Path, help="JSON file with the (partial) business profile")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="JSON lender catalog (defaults to CATALOG_PATH, then the built-in catalog)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(settings.log_level, production=settings.is_production)
    log = structlog.get_logger(__name__)

    try:
        catalog = load_catalog(args.catalog or settings.matching.catalog_path)
    except CatalogError:
        logger.exception("Could not load lender catalog")
        return 1

    try:
        profile = BusinessProfile.model_validate_json(args.profile.read_text(encoding="utf-8"))
    except OSError:
        logger.exception("Could not read profile %s", args.profile)
        return 1
    except ValidationError as exc:
        logger.error("Invalid profile %s: %s", args.profile, exc)
        return 2

    report = build_report(profile, catalog, settings.matching.lever_target_matches)
    log.info("report_ready", environment=settings.environment, **report["counts"])

    print(json.dumps(report, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
