from pydantic import BaseModel
from typing import Literal, Optional


class Submission(BaseModel):
    id: str = ""
    payload: Optional[bytes] = None
    filename: Optional[str] = None
    user: Optional[str] = None
    version: Optional[str] = None

    @property
    def has_file(self) -> bool:
        return self.payload is not None


class SubmissionResult(BaseModel):
    action: Literal["insert", "update"]
    rows_affected: int
