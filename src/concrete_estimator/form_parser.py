from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping, Sequence, TypeVar

from pydantic import BaseModel, TypeAdapter

from .dictionaries import DEFAULT_RATES
from .models.additional_costs import AdditionalCosts
from .models.estimate import EstimateRequest
from .models.line_items import (
    CoreDrillingItem,
    HandHeldChainSawItem,
    HandSawItem,
    SlabSawingItem,
    StandaloneLaborItem,
    WallSawingItem,
)
from .models.project import ProjectInfo
from .models.rates import RateProfile

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Form payload key -> (request field, item model)
ITEM_SECTIONS: Mapping[str, tuple[str, type[BaseModel]]] = {
    "coreDrillingItems": ("core_drilling", CoreDrillingItem),
    "wallSawingItems": ("wall_sawing", WallSawingItem),
    "handHeldChainSawItems": ("hand_held_chain_saw", HandHeldChainSawItem),
    "handSawItems": ("hand_saw", HandSawItem),
    "slabSawingItems": ("slab_sawing", SlabSawingItem),
    "laborItems": ("standalone_labor", StandaloneLaborItem),
}


def coerce_number(value: Any) -> float:
    """Turn a raw form value into a finite float, falling back to 0.

    Strings are read from their leading numeric prefix, so ``"12 ft"`` gives
    12.0. Anything unreadable, NaN or infinite becomes 0.0.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value.strip())
        if not match:
            return 0.0
        number = float(match.group(0))
    else:
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _numeric_fields(model_cls: type[BaseModel]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for name, info in model_cls.model_fields.items():
        if info.annotation is float:
            fields[name] = info.alias or name
    return fields


def _coerce_model(model_cls: type[ModelT], raw: Any) -> ModelT:
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        # pydantic reports the wrong shape as a ValidationError
        return model_cls.model_validate(raw)
    raw = dict(raw)
    for name, alias in _numeric_fields(model_cls).items():
        for key in (alias, name):
            if key in raw:
                coerced = coerce_number(raw[key])
                if coerced == 0.0 and raw[key] not in (0, 0.0, "0"):
                    logger.debug(
                        "Coerced unreadable form value to 0",
                        extra={"model": model_cls.__name__, "field": name, "raw_value": repr(raw[key])},
                    )
                raw[key] = coerced
    return model_cls.model_validate(raw)


def parse_rates(project_info: Mapping[str, Any] | None) -> RateProfile:
    """Rates from the project header; missing keys keep the shop defaults."""
    if project_info is not None and not isinstance(project_info, Mapping):
        return RateProfile.model_validate(project_info)
    values = DEFAULT_RATES.model_dump(by_alias=True)
    values.update(
        {key: value for key, value in (project_info or {}).items() if key in values}
    )
    return _coerce_model(RateProfile, values)


def parse_project_info(project_info: Mapping[str, Any] | None) -> ProjectInfo:
    if project_info is not None and not isinstance(project_info, Mapping):
        return ProjectInfo.model_validate(project_info)
    raw = {
        key: value
        for key, value in (project_info or {}).items()
        if key in {"date", "contractor", "contactPhone", "jobName"} and value not in (None, "")
    }
    return ProjectInfo.model_validate(raw)


def parse_items(model_cls: type[ModelT], raw_items: Sequence[Mapping[str, Any]] | None) -> list[ModelT]:
    if raw_items is not None and not isinstance(raw_items, (list, tuple)):
        # pydantic reports the wrong shape as a ValidationError
        return TypeAdapter(list[model_cls]).validate_python(raw_items)
    return [_coerce_model(model_cls, raw) for raw in raw_items or ()]


def parse_estimate_form(form: Mapping[str, Any]) -> EstimateRequest:
    """Build an estimate request from the raw estimate form payload."""
    project_info = form.get("projectInfo")
    request_fields: dict[str, Any] = {
        "project": parse_project_info(project_info),
        "rates": parse_rates(project_info),
        "additional_costs": _coerce_model(AdditionalCosts, form.get("additionalCosts")),
    }
    for form_key, (field_name, model_cls) in ITEM_SECTIONS.items():
        request_fields[field_name] = parse_items(model_cls, form.get(form_key))
    return EstimateRequest(**request_fields)


__all__ = [
    "coerce_number",
    "parse_rates",
    "parse_project_info",
    "parse_items",
    "parse_estimate_form",
]
