"""Wire schema of the remote location catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CatalogLocation(CatalogBaseModel):
    """One catalog entry; only name and coordinates travel over the wire."""

    name: str = ""
    latitude: float = Field(default=0.0, alias="lat")
    longitude: float = Field(default=0.0, alias="long")

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _null_coordinate(cls, value: object) -> object:
        return 0.0 if value is None else value


class CatalogResponse(CatalogBaseModel):
    locations: list[CatalogLocation]
