from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RateProfile(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    technician_rate: float = Field(alias="techLaborRate", description="Technician labor, $/hour")
    laborer_rate: float = Field(alias="laborerRate", description="Laborer labor, $/hour")
    mileage_rate: float = Field(alias="mileageRate", description="Mileage, $/mile")


__all__ = ["RateProfile"]
