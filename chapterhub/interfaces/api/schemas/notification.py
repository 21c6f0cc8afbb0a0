"""Pydantic models describing notification dispatch results."""

from pydantic import BaseModel, ConfigDict


class SweepReportRead(BaseModel):
    """Summary of a dispatcher sweep."""

    model_config = ConfigDict(from_attributes=True)

    processed: int
    already_sent: int
    pushes_sent: int
    pushes_failed: int
    recipients_without_token: int
