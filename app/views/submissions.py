"""Schemas for problem/solution submissions."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class SubmissionCreate(BaseModel):
    message: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    def is_complete(self) -> bool:
        """Both texts must contain something other than whitespace."""

        return bool(
            self.message
            and self.message.strip()
            and self.description
            and self.description.strip()
        )


class SubmissionAccepted(BaseModel):
    status: str = "submitted"
    message: str = "Now processing"
