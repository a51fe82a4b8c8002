"""Screened resume record assembled by the orchestrator."""

from pydantic import BaseModel

from models.schemas.verdict_result import SuitabilityVerdict


class Resume(BaseModel):
    """One uploaded resume with its score and verdict.

    Created once per upload and never mutated afterwards.
    """
    id: str
    content: str
    score: float = 0.0  # 0.0-10.0, one decimal
    skills: list[str] = []
    experience: list[str] = []
    education: list[str] = []
    job_title: str = ""
    suitability_analysis: SuitabilityVerdict = SuitabilityVerdict()

    model_config = {"frozen": True}
