from pydantic import BaseModel

from models.schemas.resume import Resume


class BatchScreenResponse(BaseModel):
    results: list[Resume] = []  # highest score first
