"""Pipeline orchestrator: wires the three screening stages together.

Flow:
    resume_text + JobRequirement
      ├─ profile_extractor.predict(content)                   → Profile
      ├─ scoring_engine.predict(content, profile, skills)     → score (0-10)
      └─ suitability_analyzer.predict(profile, skills, score) → SuitabilityVerdict
                       ↓
         Resume record (id, score, profile fields, verdict)

Batches run one worker thread per resume; results are ranked by score.
"""

import asyncio
import logging
import uuid

from models.schemas.job_requirement import JobRequirement
from models.schemas.profile import Profile
from models.schemas.resume import Resume
from models.schemas.verdict_result import SuitabilityVerdict
from services.exceptions import ConfigurationError
from services.pipeline.model_registry import get_model

logger = logging.getLogger(__name__)


def screen_resume(content: str, job: JobRequirement | None) -> Resume:
    """Extract, score and analyse one resume against a job requirement."""
    if job is None:
        raise ConfigurationError("Please set job requirements first")

    required_skills = job.unique_skills()
    if not required_skills:
        raise ConfigurationError("Please set job requirements first")

    extractor = get_model("profile_extractor")
    scorer = get_model("scoring_engine")
    analyzer = get_model("suitability_analyzer")

    profile: Profile = extractor.predict(content=content)
    score: float = scorer.predict(
        content=content, profile=profile, required_skills=required_skills
    )
    verdict: SuitabilityVerdict = analyzer.predict(
        content=content, profile=profile, required_skills=required_skills, score=score
    )

    resume = Resume(
        id=uuid.uuid4().hex,
        content=content,
        score=score,
        skills=sorted(profile.skills),
        experience=list(profile.experience_mentions),
        education=list(profile.education_mentions),
        job_title=job.title,
        suitability_analysis=verdict,
    )
    logger.debug("Screened resume %s for %r: score %.1f", resume.id, job.title, score)
    return resume


def rank_resumes(resumes: list[Resume]) -> list[Resume]:
    """Highest score first; equal scores keep their original order."""
    return sorted(resumes, key=lambda r: r.score, reverse=True)


async def screen_batch(
    contents: list[str],
    job: JobRequirement | None,
    max_workers: int | None = None,
) -> list[Resume]:
    """Screen many resumes concurrently and return them ranked by score.

    Each resume is screened in a worker thread; at most max_workers run at
    once. A ConfigurationError from any resume propagates to the caller.
    """
    if job is None or not job.unique_skills():
        raise ConfigurationError("Please set job requirements first")
    if not contents:
        return []

    semaphore = asyncio.Semaphore(max_workers or len(contents))

    async def _screen(content: str) -> Resume:
        async with semaphore:
            return await asyncio.to_thread(screen_resume, content, job)

    results = await asyncio.gather(*(_screen(c) for c in contents))
    logger.info("Screened %d resumes for %r", len(results), job.title)
    return rank_resumes(list(results))
