"""Suitability verdict: strengths, gaps and a recommendation."""

from pydantic import BaseModel


class SuitabilityVerdict(BaseModel):
    """Structured output of the SuitabilityAnalyzer.

    Template-based: every line comes from a fixed template filled with the
    matched/missing skills and the detected years of experience.
    """
    strengths: list[str] = []
    gaps: list[str] = []
    recommendation: str = ""

    model_config = {"frozen": True}
