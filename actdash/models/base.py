"""Base model class for dashboard records."""

from pydantic import BaseModel


class RecordModel(BaseModel):
    """Base model for immutable dashboard records."""

    class Config:
        """Pydantic config."""

        frozen = True
