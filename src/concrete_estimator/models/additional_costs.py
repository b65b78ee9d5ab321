from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AdditionalCosts(BaseModel):
    """Job-level cost inputs that sit outside the itemized services."""

    model_config = ConfigDict(populate_by_name=True)

    mileage_distance: float = Field(default=0.0, alias="mileageDistance", description="One-way miles")
    mileage_trips: float = Field(default=1.0, alias="mileageTrips")
    tech_travel_hours: float = Field(default=0.0, alias="techTravelHours")
    trainee_travel_hours: float = Field(default=0.0, alias="traineeTravelHours")
    equipment_man_nights: float = Field(default=0.0, alias="equipmentManNights")
    per_diems: float = Field(default=0.0, alias="perDiems")
    outside_laborer_rate: float = Field(default=0.0, alias="outsideLaborerRate")
    outside_laborer_hours: float = Field(default=0.0, alias="outsideLaborerHours")
    overtime_premium: float = Field(default=0.0, alias="overtimePremium")
    slurry_disposal: float = Field(default=0.0, alias="slurryDisposal")
    avetta_fee: float = Field(default=0.0, alias="avettaFee")
    isn_fee: float = Field(default=0.0, alias="isnFee")
    materials: float = 0.0
    equipment_rentals: float = Field(default=0.0, alias="equipmentRentals")
    trucking: float = 0.0
    dump_fees: float = Field(default=0.0, alias="dumpFees")
    adjustments: float = Field(default=0.0, description="Manual correction, may be negative")


__all__ = ["AdditionalCosts"]
