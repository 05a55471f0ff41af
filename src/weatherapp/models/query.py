"""Location query model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Query(BaseModel):
    """One (city, country code) pair entered by the user."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    city: str
    country_code: str

    @property
    def location(self) -> str:
        """Value of the provider's ``q`` parameter."""
        return f"{self.city},{self.country_code}"
