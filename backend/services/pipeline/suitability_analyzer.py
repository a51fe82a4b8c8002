"""Suitability analysis: template-based strengths, gaps and recommendation.

Pure rules engine over the extracted profile and the score; no model needed.
"""

import logging
import re
from typing import Any

from models.schemas.profile import Profile
from models.schemas.verdict_result import SuitabilityVerdict
from services.pipeline.base import BaseModelService

logger = logging.getLogger(__name__)

_FIRST_INTEGER = re.compile(r"\d+")

HIGHLY_RECOMMENDED = (
    "Highly recommended for the position. The candidate shows strong alignment "
    "with job requirements and brings valuable experience."
)
CONSIDER_FOR_INTERVIEW = (
    "Consider for interview. While there are some gaps, the candidate shows "
    "potential and could be a good fit with some training."
)
NOT_RECOMMENDED = (
    "Not recommended for this position. The candidate's profile doesn't align "
    "well with the job requirements."
)


class SuitabilityAnalyzer:
    """Combines profile, score and required skills into a SuitabilityVerdict."""

    def analyze(
        self,
        content: str,
        profile: Profile,
        required_skills,
        score: float,
    ) -> SuitabilityVerdict:
        strengths: list[str] = []
        gaps: list[str] = []

        matched, missing = skill_gap(profile, required_skills)
        if matched:
            strengths.append(f"Strong match in key skills: {', '.join(matched)}")
        if missing:
            gaps.append(f"Missing required skills: {', '.join(missing)}")

        years = experience_years(profile.experience_mentions)
        if years >= 5:
            strengths.append(f"Strong industry experience with {years} years")
        elif years >= 2:
            strengths.append(f"Relevant experience with {years} years in the field")
        else:
            gaps.append("Limited professional experience")

        education = [e.lower() for e in profile.education_mentions]
        if education:
            if any("master" in e or "phd" in e for e in education):
                strengths.append("Advanced academic qualifications")
            elif any("bachelor" in e for e in education):
                strengths.append("Relevant academic background")
        else:
            gaps.append("No formal education details found")

        return SuitabilityVerdict(
            strengths=strengths,
            gaps=gaps,
            recommendation=recommendation_for(score),
        )


def skill_gap(profile: Profile, required_skills) -> tuple[list[str], list[str]]:
    """Split required skills into (matched, missing) by profile membership.

    Keeps the caller's order and spelling; case-insensitive duplicates count once.
    """
    matched: list[str] = []
    missing: list[str] = []
    seen: set[str] = set()
    for skill in required_skills:
        key = skill.strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        (matched if key in profile.skills else missing).append(skill.strip())
    return matched, missing


def experience_years(mentions) -> int:
    """Largest leading integer across experience sentences (first number per sentence)."""
    years = 0
    for mention in mentions:
        m = _FIRST_INTEGER.search(mention)
        if m:
            years = max(years, int(m.group()))
    return years


def recommendation_for(score: float) -> str:
    if score >= 7:
        return HIGHLY_RECOMMENDED
    if score >= 5:
        return CONSIDER_FOR_INTERVIEW
    return NOT_RECOMMENDED


class SuitabilityAnalyzerService(BaseModelService):
    model_name = "suitability_analyzer"

    def __init__(self) -> None:
        self._analyzer = SuitabilityAnalyzer()

    def load(self) -> None:
        logger.info("Suitability analyzer ready (template-based)")

    def predict(self, **kwargs: Any) -> SuitabilityVerdict:
        self.ensure_loaded()
        return self._analyzer.analyze(
            kwargs.get("content", ""),
            kwargs["profile"],
            kwargs["required_skills"],
            kwargs["score"],
        )
