"""Pydantic contracts passed between the screening pipeline stages."""

from models.schemas.job_requirement import JobRequirement
from models.schemas.profile import Profile
from models.schemas.resume import Resume
from models.schemas.verdict_result import SuitabilityVerdict

__all__ = [
    "JobRequirement",
    "Profile",
    "Resume",
    "SuitabilityVerdict",
]
