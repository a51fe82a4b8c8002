"""Structured profile extracted from free-form resume text."""

from pydantic import BaseModel, field_serializer


class Profile(BaseModel):
    """Output of the ProfileExtractor.

    skills: lower-cased, de-duplicated skill terms
    experience_mentions: sentences citing a number and the word "experience"
    education_mentions: sentences mentioning a degree, diploma or PhD
    """
    skills: frozenset[str] = frozenset()
    experience_mentions: tuple[str, ...] = ()
    education_mentions: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @field_serializer("skills")
    def _sorted_skills(self, skills: frozenset[str]) -> list[str]:
        return sorted(skills)
