"""Scoring engine: additive 0-10 fit score for a profile against required skills.

Points:
    match ratio * 7     skill in the profile or anywhere in the raw text
    +0.2 per skill      mentioned more than once
    +0.3 per skill      stated as "experience in <skill>"
Rounded half-up to one decimal, capped at 10.
"""

import logging
import math
import re
from typing import Any

from models.schemas.job_requirement import unique_skills
from models.schemas.profile import Profile
from services.exceptions import ConfigurationError
from services.pipeline.base import BaseModelService

logger = logging.getLogger(__name__)

MATCH_WEIGHT = 7.0
REPETITION_BONUS = 0.2
EXPLICIT_EXPERIENCE_BONUS = 0.3
MAX_SCORE = 10.0


def _round_half_up(value: float, digits: int = 1) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class ScoringEngine:
    """Pure scoring function; holds no state between calls."""

    def score(self, content: str, profile: Profile, required_skills) -> float:
        skills = unique_skills(required_skills)
        if not skills:
            raise ConfigurationError("Required skills must not be empty")

        content_lower = (content or "").lower()
        total = self.match_ratio(content_lower, profile, skills) * MATCH_WEIGHT

        for skill in skills:
            skill_lower = skill.lower()
            occurrences = len(re.findall(re.escape(skill_lower), content_lower, re.IGNORECASE))
            if occurrences > 1:
                total += REPETITION_BONUS
            if f"experience in {skill_lower}" in content_lower:
                total += EXPLICIT_EXPERIENCE_BONUS

        return min(_round_half_up(total), MAX_SCORE)

    @staticmethod
    def matched_skills(content_lower: str, profile: Profile, skills: list[str]) -> list[str]:
        """Skills found either in the extracted profile or as raw substrings."""
        return [
            s for s in skills
            if s.lower() in profile.skills or s.lower() in content_lower
        ]

    def match_ratio(self, content_lower: str, profile: Profile, skills: list[str]) -> float:
        return len(self.matched_skills(content_lower, profile, skills)) / len(skills)


class ScoringEngineService(BaseModelService):
    model_name = "scoring_engine"

    def __init__(self) -> None:
        self._engine = ScoringEngine()

    def load(self) -> None:
        # Rule-based: nothing to load
        logger.info("Scoring engine ready")

    def predict(self, **kwargs: Any) -> float:
        self.ensure_loaded()
        return self._engine.score(
            kwargs["content"], kwargs["profile"], kwargs["required_skills"]
        )
