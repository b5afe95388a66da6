import logging
import math
from typing import Optional, Union

from tumafast.core.enums import ServiceTier, VehicleClass
from tumafast.core.exceptions import InvalidArgumentError
from tumafast.core.metrics import quote_price, quotes_issued, rate_fallbacks
from tumafast.models.quote import PriceBreakdown, PriceQuote
from tumafast.schemas.quote import MAX_DISTANCE_METERS, QuoteRequest

logger = logging.getLogger(__name__)

# Rates in KES
BASE_FARES = {
    VehicleClass.MOTORBIKE: 100,
    VehicleClass.TUKTUK: 250,
    VehicleClass.PICKUP: 800,
    VehicleClass.VAN: 1500,
    VehicleClass.LORRY: 3500,
    VehicleClass.TRAILER: 12000,
}
PER_KM_RATES = {
    VehicleClass.MOTORBIKE: 40,
    VehicleClass.TUKTUK: 60,
    VehicleClass.PICKUP: 120,
    VehicleClass.VAN: 180,
    VehicleClass.LORRY: 350,
    VehicleClass.TRAILER: 850,
}
STOP_SURCHARGES = {
    VehicleClass.MOTORBIKE: 40,
    VehicleClass.TUKTUK: 80,
    VehicleClass.PICKUP: 250,
    VehicleClass.VAN: 350,
    VehicleClass.LORRY: 1000,
    VehicleClass.TRAILER: 2500,
}
MINIMUM_FARES = {
    VehicleClass.MOTORBIKE: 100,
    VehicleClass.TUKTUK: 250,
    VehicleClass.PICKUP: 1000,
    VehicleClass.VAN: 2000,
    VehicleClass.LORRY: 5000,
    VehicleClass.TRAILER: 15000,
}
SERVICE_MULTIPLIERS = {
    ServiceTier.EXPRESS: 1.25,
    ServiceTier.STANDARD: 1.0,
    ServiceTier.ECONOMY: 0.75,
}

DEFAULT_VEHICLE = VehicleClass.MOTORBIKE
DEFAULT_MULTIPLIER = 1.0

INTERCITY_THRESHOLD_KM = 100
INTERCITY_SURCHARGE_RATE = 0.5
ECONOMY_MINIMUM_FACTOR = 0.8
PRICE_STEP = 50


def _resolve(enum_cls, value, field: str, strict: bool):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        if strict:
            raise InvalidArgumentError(f"Unknown {field}: {value!r}") from None
    logger.warning(f"Unknown {field} {value!r}, pricing with default rates")
    rate_fallbacks.labels(field=field).inc()
    return None


def resolve_vehicle_class(
    value: Union[VehicleClass, str, None], strict: bool = False
) -> Optional[VehicleClass]:
    """Map a vehicle value or label to a VehicleClass, or None when unknown."""
    return _resolve(VehicleClass, value, "vehicle_class", strict)


def resolve_service_tier(
    value: Union[ServiceTier, str, None], strict: bool = False
) -> Optional[ServiceTier]:
    """Map a tier value or label to a ServiceTier, or None when unknown."""
    return _resolve(ServiceTier, value, "service_tier", strict)


def validate_distance(distance_meters) -> float:
    if isinstance(distance_meters, bool) or not isinstance(distance_meters, (int, float)):
        raise InvalidArgumentError(f"distance_meters must be a number, got {distance_meters!r}")
    if not math.isfinite(distance_meters) or distance_meters < 0:
        raise InvalidArgumentError(
            f"distance_meters must be a finite, non-negative number, got {distance_meters!r}"
        )
    if distance_meters > MAX_DISTANCE_METERS:
        raise InvalidArgumentError(
            f"distance_meters must not exceed {MAX_DISTANCE_METERS}, got {distance_meters!r}"
        )
    return distance_meters


def _validate_stop_count(stop_count) -> int:
    if isinstance(stop_count, bool) or not isinstance(stop_count, int) or stop_count < 0:
        raise InvalidArgumentError(f"stop_count must be a non-negative integer, got {stop_count!r}")
    return stop_count


def compute_price(
    distance_meters: float,
    vehicle_class: Union[VehicleClass, str, None],
    service_tier: Union[ServiceTier, str, None],
    stop_count: int,
    strict: bool = False,
) -> PriceQuote:
    """Price a delivery.

    Unknown vehicle classes are priced as a motorbike and unknown tiers
    with a 1.0 multiplier unless ``strict`` is set, in which case they raise
    InvalidArgumentError. Distance 0 yields the minimum fare.
    """
    distance_meters = validate_distance(distance_meters)
    stop_count = _validate_stop_count(stop_count)

    vehicle = resolve_vehicle_class(vehicle_class, strict)
    tier = resolve_service_tier(service_tier, strict)
    rates_key = vehicle or DEFAULT_VEHICLE

    base = BASE_FARES[rates_key]
    per_km = PER_KM_RATES[rates_key]
    stop_surcharge = STOP_SURCHARGES[rates_key]
    multiplier = SERVICE_MULTIPLIERS[tier] if tier else DEFAULT_MULTIPLIER

    distance_km = distance_meters / 1000
    extra_stop_fee = max(0, stop_count - 1) * stop_surcharge
    intercity_surcharge = base * INTERCITY_SURCHARGE_RATE if distance_km > INTERCITY_THRESHOLD_KM else 0

    # Evaluation order matters for float parity with quotes issued by the booking app
    raw_total = (base + (distance_km * per_km) + extra_stop_fee + intercity_surcharge) * multiplier

    minimum = MINIMUM_FARES[rates_key] * (ECONOMY_MINIMUM_FACTOR if tier is ServiceTier.ECONOMY else 1)
    total = max(raw_total, minimum)
    final_price = math.ceil(total / PRICE_STEP) * PRICE_STEP

    quotes_issued.labels(
        vehicle_class=str(vehicle) if vehicle else "unknown",
        service_tier=str(tier) if tier else "unknown",
    ).inc()
    quote_price.labels(vehicle_class=str(rates_key)).observe(final_price)

    breakdown = PriceBreakdown(
        vehicle_class=vehicle,
        service_tier=tier,
        base_fare=base,
        distance_km=distance_km,
        distance_cost=distance_km * per_km,
        extra_stop_fee=extra_stop_fee,
        intercity_surcharge=intercity_surcharge,
        multiplier=multiplier,
        raw_total=raw_total,
        minimum_fare=minimum,
        minimum_applied=raw_total < minimum,
    )
    return PriceQuote(final_price=final_price, breakdown=breakdown)


def calculate_price(req: QuoteRequest, strict: bool = False) -> PriceQuote:
    return compute_price(
        req.distance_meters,
        req.vehicle_class,
        req.service_tier,
        req.stop_count,
        strict=strict,
    )
