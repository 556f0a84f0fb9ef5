"""Allowed extension entry persisted per provider account."""

from pydantic import BaseModel, ConfigDict, Field


class AllowedExtension(BaseModel):
    """Extension permitted to use a provider account."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., description="Extension identifier")
    name: str = Field(..., description="Extension display name")
