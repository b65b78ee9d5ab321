from __future__ import annotations

import uuid
from enum import Enum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    core_drilling = "core_drilling"
    wall_sawing = "wall_sawing"
    hand_held_chain_saw = "hand_held_chain_saw"
    hand_saw = "hand_saw"
    slab_sawing = "slab_sawing"
    standalone_labor = "standalone_labor"


def _new_item_id() -> str:
    return uuid.uuid4().hex


class _BaseItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: ClassVar[Category]

    id: str = Field(default_factory=_new_item_id)
    description: str = ""
    complexity_pct: float = Field(default=0.0, alias="complexity")


class CoreDrillingItem(_BaseItem):
    category: ClassVar[Category] = Category.core_drilling

    kind: Literal["core_drilling"] = "core_drilling"
    quantity: float = 0.0
    depth_inches: float = Field(default=0.0, alias="depth")
    # Shown on the job sheet only; drilling cost ignores them.
    width: float = 0.0
    length_interval: float = Field(default=0.0, alias="lengthInterval")
    width_interval: float = Field(default=0.0, alias="widthInterval")


class WallSawingItem(_BaseItem):
    category: ClassVar[Category] = Category.wall_sawing

    kind: Literal["wall_sawing"] = "wall_sawing"
    quantity: float = 0.0
    length_feet: float = Field(default=0.0, alias="length")
    depth_inches: float = Field(default=0.0, alias="depth")


class HandHeldChainSawItem(_BaseItem):
    category: ClassVar[Category] = Category.hand_held_chain_saw

    kind: Literal["hand_held_chain_saw"] = "hand_held_chain_saw"
    quantity: float = 0.0
    length_feet: float = Field(default=0.0, alias="length")


class HandSawItem(_BaseItem):
    category: ClassVar[Category] = Category.hand_saw

    kind: Literal["hand_saw"] = "hand_saw"
    quantity: float = 0.0
    length_feet: float = Field(default=0.0, alias="length")


class SlabSawingItem(_BaseItem):
    category: ClassVar[Category] = Category.slab_sawing

    kind: Literal["slab_sawing"] = "slab_sawing"
    quantity: float = 0.0
    length_feet: float = Field(default=0.0, alias="length")


class StandaloneLaborItem(_BaseItem):
    category: ClassVar[Category] = Category.standalone_labor

    kind: Literal["standalone_labor"] = "standalone_labor"
    hours: float = 0.0


LineItem = Annotated[
    Union[
        CoreDrillingItem,
        WallSawingItem,
        HandHeldChainSawItem,
        HandSawItem,
        SlabSawingItem,
        StandaloneLaborItem,
    ],
    Field(discriminator="kind"),
]


__all__ = [
    "Category",
    "CoreDrillingItem",
    "WallSawingItem",
    "HandHeldChainSawItem",
    "HandSawItem",
    "SlabSawingItem",
    "StandaloneLaborItem",
    "LineItem",
]
