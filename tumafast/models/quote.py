"""Value objects produced by the pricing engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from tumafast.core.enums import ServiceTier, VehicleClass


@dataclass(frozen=True, slots=True)
class PriceBreakdown:
    vehicle_class: Optional[VehicleClass]
    service_tier: Optional[ServiceTier]
    base_fare: float
    distance_km: float
    distance_cost: float
    extra_stop_fee: float
    intercity_surcharge: float
    multiplier: float
    raw_total: float
    minimum_fare: float
    minimum_applied: bool


@dataclass(frozen=True, slots=True)
class PriceQuote:
    final_price: int
    breakdown: PriceBreakdown


@dataclass(frozen=True, slots=True)
class ArrivalEstimate:
    service_tier: Optional[ServiceTier]
    estimated_arrival: datetime
    arrival_time: str
    arrival_date: str


@dataclass(frozen=True, slots=True)
class ServiceOption:
    service_tier: ServiceTier
    quote: PriceQuote
    arrival: ArrivalEstimate
