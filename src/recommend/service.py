"""Recommendation ranking service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from src.recommend.config import RecommendationConfig, get_recommendation_config
from src.recommend.models import Recommendation, RecommendOptions
from src.scoring.errors import InvalidInputError
from src.scoring.models import CatalogEntity, Course, JobPosting, MatchDomain, Profile
from src.scoring.service import MatchScorer, course_suits_profile, resolve_domain

logger = logging.getLogger(__name__)


class RecommendationService:
    """Score a catalog for a profile and return a ranked, annotated list.

    This is the only place entities are compared with each other; scoring
    itself is delegated to the entity-local MatchScorer.
    """

    def __init__(
        self,
        scorer: MatchScorer | None = None,
        config: RecommendationConfig | None = None,
    ) -> None:
        self.scorer = scorer or MatchScorer()
        self.config = config or get_recommendation_config()

    def recommend(
        self,
        profile: Profile,
        entities: Sequence[CatalogEntity],
        domain: MatchDomain | str,
        options: RecommendOptions | None = None,
        *,
        as_of: date | None = None,
    ) -> list[Recommendation]:
        """Rank `entities` for `profile`.

        Steps: score every entity, subtract preference penalties (never below
        0), sort by adjusted score descending keeping input order for ties,
        then truncate to `options.limit`.

        Raises:
            InvalidInputError: If profile or entities is missing, or the domain
                is unknown.
        """
        if profile is None:
            raise InvalidInputError("profile is required", argument="profile")
        if entities is None:
            raise InvalidInputError("entities are required", argument="entities")
        resolved = resolve_domain(domain)
        options = options or RecommendOptions()

        candidates = list(entities)
        if options.suitable_only and resolved is MatchDomain.COURSE:
            candidates = [
                entity
                for entity in candidates
                if isinstance(entity, Course) and course_suits_profile(entity, profile)
            ]

        recommendations: list[Recommendation] = []
        for entity in candidates:
            match = self.scorer.score(profile, entity, resolved, as_of=as_of)
            score = match.score
            adjustments: list[str] = []
            if isinstance(entity, JobPosting):
                score, adjustments = self._apply_job_penalties(entity, score, options)
            recommendations.append(
                Recommendation(
                    entity=entity,
                    match=match,
                    base_score=match.score,
                    score=score,
                    adjustments=adjustments,
                )
            )

        # sorted() is stable, so equal scores keep their input order
        ranked = sorted(recommendations, key=lambda rec: rec.score, reverse=True)
        if options.limit is not None:
            ranked = ranked[: options.limit]

        logger.info(
            "Ranked %d of %d %s entities",
            len(ranked),
            len(candidates),
            resolved.value,
        )
        return ranked

    def _apply_job_penalties(
        self, job: JobPosting, score: int, options: RecommendOptions
    ) -> tuple[int, list[str]]:
        adjustments: list[str] = []

        preference = (options.location_preference or "").strip()
        if preference and not job.is_remote and job.location is not None:
            # Jobs without any place set carry no location constraint
            place = job.location
            parts = (place.city, place.state, place.country)
            has_place = any((part or "").strip() for part in parts)
            if has_place and not job.location.mentions(preference):
                score -= self.config.location_penalty
                adjustments.append(
                    f"-{self.config.location_penalty}: outside preferred location "
                    f"({preference})"
                )

        floor = options.salary_min
        offered = job.salary.min if job.salary else None
        if floor and offered is not None and offered < floor:
            score -= self.config.salary_penalty
            adjustments.append(
                f"-{self.config.salary_penalty}: minimum salary below {floor:g}"
            )

        return max(0, score), adjustments
