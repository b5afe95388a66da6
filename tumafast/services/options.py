from datetime import datetime, tzinfo
from typing import List, Optional, Union

from tumafast.core.enums import ServiceTier, VehicleClass
from tumafast.models.quote import ServiceOption
from tumafast.services.arrival import ASAP, estimate_arrival
from tumafast.services.pricing import compute_price, resolve_vehicle_class, validate_distance


def quote_service_options(
    distance_meters: float,
    vehicle_class: Union[VehicleClass, str, None],
    stop_count: int,
    scheduled_time: Optional[str] = ASAP,
    *,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
    strict: bool = False,
) -> List[ServiceOption]:
    """Price and schedule the same delivery under every service tier.

    Options come back in Express, Standard, Economy order. Invalid input is
    rejected before any tier is priced.
    """
    validate_distance(distance_meters)
    vehicle = resolve_vehicle_class(vehicle_class, strict) or vehicle_class

    options = []
    for tier in ServiceTier:
        quote = compute_price(distance_meters, vehicle, tier, stop_count, strict=strict)
        arrival = estimate_arrival(distance_meters, tier, scheduled_time, now=now, tz=tz, strict=strict)
        options.append(ServiceOption(service_tier=tier, quote=quote, arrival=arrival))
    return options
