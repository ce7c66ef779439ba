"""Main entry point for Career Compass."""

import argparse
import json
import sys
from pathlib import Path

from src import __version__
from src.config.settings import Settings
from src.utils.logging import configure_logging


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("value must be a positive integer")
    return number


def _non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError("value must not be negative")
    return number


def _write_json(payload: object, out: Path | None) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    text = json.dumps(payload, indent=2, default=_default)
    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="career-compass",
        description="Career Compass: job/course match scoring and learning roadmaps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src recommend --profile profile.yaml --catalog jobs.yaml
  python -m src gaps --profile profile.yaml --role "Full Stack Developer"
  python -m src guide --profile profile.yaml --courses courses.yaml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--profile",
            type=Path,
            default=None,
            help="Path to profile YAML/JSON (defaults to PROFILE_PATH)",
        )
        sub.add_argument(
            "--out",
            type=Path,
            default=None,
            help="Write JSON output to this file instead of stdout",
        )

    def add_catalog(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--catalog",
            type=Path,
            default=None,
            help="Path to catalog YAML/JSON (defaults to CATALOG_PATH)",
        )
        sub.add_argument(
            "--domain",
            choices=["job", "course"],
            default="job",
            help="Kind of catalog entities (default: job)",
        )

    def add_registry(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--registry",
            type=Path,
            default=None,
            help="Role-skill template file (defaults to ROLE_REGISTRY_PATH)",
        )

    match_parser = subparsers.add_parser(
        "match",
        help="Score every catalog entity for a profile (no ranking)",
    )
    add_common(match_parser)
    add_catalog(match_parser)

    recommend_parser = subparsers.add_parser(
        "recommend",
        help="Rank catalog entities for a profile",
    )
    add_common(recommend_parser)
    add_catalog(recommend_parser)
    recommend_parser.add_argument(
        "--limit",
        type=_positive_int,
        default=None,
        help="Maximum results (default: 10)",
    )
    recommend_parser.add_argument(
        "--all",
        action="store_true",
        help="Return every ranked entity (ignores --limit)",
    )
    recommend_parser.add_argument(
        "--location",
        default=None,
        help="Preferred location; on-site jobs elsewhere are penalized",
    )
    recommend_parser.add_argument(
        "--salary-min",
        type=_non_negative_float,
        default=None,
        help="Salary floor; jobs with a lower minimum are penalized",
    )
    recommend_parser.add_argument(
        "--suitable-only",
        action="store_true",
        help="Skip courses whose prerequisites or difficulty do not fit",
    )

    gaps_parser = subparsers.add_parser(
        "gaps",
        help="Analyze skill gaps against a target role",
    )
    add_common(gaps_parser)
    add_registry(gaps_parser)
    gaps_parser.add_argument(
        "--role",
        default=None,
        help="Target role (defaults to the profile's target job title)",
    )

    guide_parser = subparsers.add_parser(
        "guide",
        help="Build a beginner career guide with roadmap and starter goals",
    )
    add_common(guide_parser)
    add_registry(guide_parser)
    guide_parser.add_argument(
        "--courses",
        type=Path,
        default=None,
        help="Course catalog YAML/JSON used for course recommendations",
    )

    return parser


def _load_registry(parsed: argparse.Namespace, settings: Settings):
    from src.gaps.config import get_gap_config
    from src.gaps.registry import RoleSkillRegistry

    default_role = get_gap_config().default_role
    path = getattr(parsed, "registry", None) or settings.role_registry_path
    if path is None:
        return RoleSkillRegistry.with_defaults(default_role=default_role)
    return RoleSkillRegistry.from_file(path, default_role=default_role)


def _run(parsed: argparse.Namespace, settings: Settings) -> object:
    from src.scoring.catalog import load_catalog
    from src.scoring.profile import ProfileService

    profile = ProfileService(settings).load_profile(parsed.profile)

    if parsed.mode == "match":
        from src.scoring.service import MatchScorer

        scorer = MatchScorer()
        catalog = load_catalog(parsed.catalog or settings.catalog_path, parsed.domain)
        return [
            {
                "entity_id": entity.id,
                "match": scorer.score(profile, entity, parsed.domain),
            }
            for entity in catalog
        ]

    if parsed.mode == "recommend":
        from src.recommend.models import RecommendOptions
        from src.recommend.service import RecommendationService

        catalog = load_catalog(parsed.catalog or settings.catalog_path, parsed.domain)
        options = RecommendOptions(
            location_preference=parsed.location,
            salary_min=parsed.salary_min,
            suitable_only=parsed.suitable_only,
        )
        if parsed.all:
            options.limit = None
        elif parsed.limit is not None:
            options.limit = parsed.limit
        return RecommendationService().recommend(
            profile, catalog, parsed.domain, options
        )

    if parsed.mode == "gaps":
        from src.gaps.analyzer import SkillGapAnalyzer

        analyzer = SkillGapAnalyzer(registry=_load_registry(parsed, settings))
        role = parsed.role or profile.target_job_title
        return analyzer.analyze_gaps(profile.skills, role)

    if parsed.mode == "guide":
        from src.gaps.analyzer import SkillGapAnalyzer
        from src.roadmap.guide import CareerGuideService

        courses = load_catalog(parsed.courses, "course") if parsed.courses else []
        service = CareerGuideService(
            analyzer=SkillGapAnalyzer(registry=_load_registry(parsed, settings))
        )
        return service.build_guide(profile, courses)

    raise ValueError(f"Unknown mode: {parsed.mode}")


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValueError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"Career Compass v{__version__} running {parsed.mode}")

    try:
        payload = _run(parsed, settings)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"{parsed.mode} failed: {e}")
        return 1

    _write_json(payload, parsed.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
