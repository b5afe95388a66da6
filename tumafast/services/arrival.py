"""Delivery arrival estimates.

Each service tier maps to a fixed fulfilment policy. Express dispatches
immediately, Standard is batched into a same-day window and Economy is a
next-day promise. Clock rules are applied in the service's local timezone.
"""
import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo

from tumafast.core.config import settings
from tumafast.core.enums import ServiceTier
from tumafast.core.exceptions import InvalidArgumentError
from tumafast.core.metrics import arrival_estimates
from tumafast.models.quote import ArrivalEstimate
from tumafast.services.pricing import resolve_service_tier, validate_distance

logger = logging.getLogger(__name__)

ASAP = "ASAP"
AVERAGE_SPEED_KMH = 35

EXPRESS_PICKUP_BUFFER = timedelta(minutes=20)
STANDARD_BATCH_WINDOW = timedelta(hours=4)
STANDARD_CUTOFF_HOUR = 18
STANDARD_NEXT_DAY_HOUR = 10
ECONOMY_DELIVERY_HOUR = 15


def local_timezone() -> tzinfo:
    return ZoneInfo(settings.TIMEZONE)


def parse_start_time(scheduled_time: Optional[str], tz: tzinfo, now: Optional[datetime] = None) -> datetime:
    """Resolve the dispatch instant: now for ASAP/absent, else the ISO-8601 timestamp.

    Timestamps without an offset are read in ``tz``. A date-only value such as
    ``"2024-03-12"`` is UTC midnight, as the booking app's ``new Date()`` reads it.
    """
    if not scheduled_time or scheduled_time == ASAP:
        if now is None:
            return datetime.now(tz)
        return now.astimezone(tz) if now.tzinfo else now.replace(tzinfo=tz)

    if not isinstance(scheduled_time, str):
        raise InvalidArgumentError(f"scheduled_time must be an ISO-8601 string, got {scheduled_time!r}")
    text = scheduled_time.strip()
    try:
        start = datetime.combine(date.fromisoformat(text), time(0), tzinfo=timezone.utc)
    except ValueError:
        try:
            start = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidArgumentError(f"Unparseable scheduled_time: {scheduled_time!r}") from None

    if start.tzinfo is None:
        return start.replace(tzinfo=tz)
    try:
        return start.astimezone(tz)
    except OverflowError:
        raise InvalidArgumentError(f"scheduled_time out of range: {scheduled_time!r}") from None


def _next_day_at(moment: datetime, hour: int, tz: tzinfo) -> datetime:
    return datetime.combine(moment.date() + timedelta(days=1), time(hour), tzinfo=tz)


def _after(moment: datetime, delta: timedelta, tz: tzinfo) -> datetime:
    # Absolute arithmetic in UTC, clock rules in local time
    return (moment.astimezone(timezone.utc) + delta).astimezone(tz)


def _apply_policy(start: datetime, travel: timedelta, tier: Optional[ServiceTier], tz: tzinfo) -> datetime:
    estimated = _after(start, travel, tz)

    if tier is ServiceTier.EXPRESS:
        estimated = _after(estimated, EXPRESS_PICKUP_BUFFER, tz)
    elif tier is ServiceTier.STANDARD:
        estimated = _after(estimated, STANDARD_BATCH_WINDOW, tz)
        if estimated.hour >= STANDARD_CUTOFF_HOUR:
            estimated = _next_day_at(estimated, STANDARD_NEXT_DAY_HOUR, tz)
    elif tier is ServiceTier.ECONOMY:
        estimated = _next_day_at(estimated, ECONOMY_DELIVERY_HOUR, tz)
    return estimated


def format_arrival_time(moment: datetime) -> str:
    return moment.strftime("%H:%M")


def format_arrival_date(moment: datetime) -> str:
    return f"{moment:%a}, {moment:%b} {moment.day}"


def estimate_arrival(
    distance_meters: float,
    service_tier: Union[ServiceTier, str, None],
    scheduled_time: Optional[str] = ASAP,
    *,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
    strict: bool = False,
) -> ArrivalEstimate:
    """Estimate when a delivery will arrive.

    ``now`` and ``tz`` override the wall clock and the configured timezone.
    An unknown tier gets travel time only unless ``strict`` is set.
    """
    distance_meters = validate_distance(distance_meters)
    tz = tz or local_timezone()
    tier = resolve_service_tier(service_tier, strict)
    start = parse_start_time(scheduled_time, tz, now)

    distance_km = distance_meters / 1000
    travel_time_ms = (distance_km / AVERAGE_SPEED_KMH) * 3_600_000

    try:
        estimated = _apply_policy(start, timedelta(milliseconds=travel_time_ms), tier, tz)
    except OverflowError:
        raise InvalidArgumentError(
            f"Arrival for {distance_meters!r} m from {start.isoformat()} is out of range"
        ) from None

    arrival_estimates.labels(
        service_tier=str(tier) if tier else "unknown",
        scheduled="false" if not scheduled_time or scheduled_time == ASAP else "true",
    ).inc()
    logger.debug(f"Arrival for {distance_km:.1f} km ({tier}): {estimated.isoformat()}")

    return ArrivalEstimate(
        service_tier=tier,
        estimated_arrival=estimated,
        arrival_time=format_arrival_time(estimated),
        arrival_date=format_arrival_date(estimated),
    )
