from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ProjectInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    estimate_date: date = Field(default_factory=date.today, alias="date")
    contractor: str = ""
    contact_phone: str = Field(default="", alias="contactPhone")
    job_name: str = Field(default="", alias="jobName")


__all__ = ["ProjectInfo"]
