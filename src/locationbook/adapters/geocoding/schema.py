"""Response schema of a Nominatim-compatible ``/search`` endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class GeocoderPlace(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str | None = None
    display_name: str | None = None
    latitude: float | None = Field(default=None, alias="lat")
    longitude: float | None = Field(default=None, alias="lon")

    @property
    def label(self) -> str | None:
        for candidate in (self.name, self.display_name):
            if candidate and candidate.strip():
                return candidate.strip()
        return None


GeocoderResults = TypeAdapter(list[GeocoderPlace])
