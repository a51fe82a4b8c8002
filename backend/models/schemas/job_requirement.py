"""Job requirement captured once and reused for every resume scored against it."""

from pydantic import BaseModel, Field, field_validator


class JobRequirement(BaseModel):
    """A job title, its required skills and a free-text description.

    Skills are compared case-insensitively; duplicates count once.
    """
    title: str = ""
    required_skills: tuple[str, ...] = ()
    description: str = Field("", max_length=10000)

    model_config = {"frozen": True}

    @field_validator("required_skills", mode="before")
    @classmethod
    def _strip_skills(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        skills = []
        for skill in value:
            if isinstance(skill, str):
                skill = skill.strip()
                if not skill:
                    continue
            skills.append(skill)
        return tuple(skills)

    def unique_skills(self) -> list[str]:
        return unique_skills(self.required_skills)


def unique_skills(skills) -> list[str]:
    """De-duplicate skills case-insensitively, keeping first spelling and order."""
    seen: set[str] = set()
    result: list[str] = []
    for skill in skills:
        skill = skill.strip()
        key = skill.lower()
        if key and key not in seen:
            seen.add(key)
            result.append(skill)
    return result
