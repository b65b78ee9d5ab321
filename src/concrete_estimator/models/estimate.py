from __future__ import annotations

from typing import Iterator, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .additional_costs import AdditionalCosts
from .line_items import (
    Category,
    CoreDrillingItem,
    HandHeldChainSawItem,
    HandSawItem,
    LineItem,
    SlabSawingItem,
    StandaloneLaborItem,
    WallSawingItem,
)
from .project import ProjectInfo
from .rates import RateProfile


class EstimateRequest(BaseModel):
    """Snapshot of everything the estimator prices."""

    model_config = ConfigDict(populate_by_name=True)

    project: ProjectInfo = Field(default_factory=ProjectInfo)
    rates: RateProfile
    core_drilling: Sequence[CoreDrillingItem] = Field(default_factory=list)
    wall_sawing: Sequence[WallSawingItem] = Field(default_factory=list)
    hand_held_chain_saw: Sequence[HandHeldChainSawItem] = Field(default_factory=list)
    hand_saw: Sequence[HandSawItem] = Field(default_factory=list)
    slab_sawing: Sequence[SlabSawingItem] = Field(default_factory=list)
    standalone_labor: Sequence[StandaloneLaborItem] = Field(default_factory=list)
    additional_costs: AdditionalCosts = Field(default_factory=AdditionalCosts)

    def items_by_category(self) -> dict[Category, Sequence[LineItem]]:
        return {
            Category.core_drilling: self.core_drilling,
            Category.wall_sawing: self.wall_sawing,
            Category.hand_held_chain_saw: self.hand_held_chain_saw,
            Category.hand_saw: self.hand_saw,
            Category.slab_sawing: self.slab_sawing,
            Category.standalone_labor: self.standalone_labor,
        }

    def items(self) -> Iterator[LineItem]:
        for items in self.items_by_category().values():
            yield from items

    @property
    def item_count(self) -> int:
        return sum(len(items) for items in self.items_by_category().values())


class ItemCostBreakdown(BaseModel):
    item_id: str
    category: Category
    description: str = ""
    derived_quantity: float
    labor_hours: float
    labor_cost: float
    wear_cost: float
    base_cost: float
    complexity_pct: float
    final_cost: float


class AdditionalCostBreakdown(BaseModel):
    shop_fee: float
    mileage_cost: float
    travel_cost: float
    equipment_cost: float
    outside_labor_cost: float
    manual_entries: float
    total: float


class EstimateTotals(BaseModel):
    category_totals: Mapping[Category, float]
    services_subtotal: float
    shop_fee: float
    mileage_cost: float
    travel_cost: float
    equipment_cost: float
    outside_labor_cost: float
    additional_costs_total: float
    grand_total: float
    line_items: Sequence[ItemCostBreakdown] = Field(default_factory=list)

    @property
    def core_drilling_total(self) -> float:
        return self.category_totals[Category.core_drilling]

    @property
    def wall_sawing_total(self) -> float:
        return self.category_totals[Category.wall_sawing]

    @property
    def hand_held_chain_saw_total(self) -> float:
        return self.category_totals[Category.hand_held_chain_saw]

    @property
    def hand_saw_total(self) -> float:
        return self.category_totals[Category.hand_saw]

    @property
    def slab_sawing_total(self) -> float:
        return self.category_totals[Category.slab_sawing]

    @property
    def standalone_labor_total(self) -> float:
        return self.category_totals[Category.standalone_labor]


__all__ = [
    "EstimateRequest",
    "EstimateTotals",
    "ItemCostBreakdown",
    "AdditionalCostBreakdown",
]
