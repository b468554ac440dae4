"""Pydantic schemas for Cloud Controller payloads returned by ``cf curl``.

Fields the listing does not use are ignored. Missing or null fields fall
back to empty values, so ``{}`` is a valid final page with no apps.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AppEntitySchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    state: str = ""

    @field_validator("name", "state", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v


class AppResourceSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    entity: AppEntitySchema = Field(default_factory=AppEntitySchema)

    @field_validator("entity", mode="before")
    @classmethod
    def null_entity(cls, v):
        return {} if v is None else v


class AppsPageSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    next_url: str | None = None
    resources: list[AppResourceSchema] = Field(default_factory=list)

    @field_validator("resources", mode="before")
    @classmethod
    def null_resources(cls, v):
        return [] if v is None else v


class CloudControllerErrorSchema(BaseModel):
    """Error body the Cloud Controller returns instead of a page."""

    model_config = ConfigDict(extra="ignore")

    code: int | None = None
    description: str | None = None
    error_code: str | None = None

    @property
    def message(self) -> str:
        return self.description or self.error_code or "Unknown Cloud Controller error"
