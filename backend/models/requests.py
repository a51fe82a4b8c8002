from typing import Annotated

from pydantic import BaseModel, Field

from models.schemas.job_requirement import JobRequirement

ResumeText = Annotated[str, Field(max_length=50000)]


class ScreenRequest(BaseModel):
    resume_text: ResumeText = Field(..., description="Plain text resume content")
    job: JobRequirement | None = Field(None, description="Job requirement to screen against")


class BatchScreenRequest(BaseModel):
    resumes: list[ResumeText] = Field(..., max_length=50, description="Plain text resume contents")
    job: JobRequirement | None = Field(None, description="Job requirement to screen against")
