from dataclasses import asdict
from typing import List, Optional

from tumafast.core.config import settings
from tumafast.core.enums import VehicleClass
from tumafast.models.quote import ArrivalEstimate, PriceQuote, ServiceOption
from tumafast.schemas.quote import (
    ArrivalResponse,
    QuoteResponse,
    ServiceOptionOut,
    ServiceOptionsResponse,
    VehicleRecommendationResponse,
)


def build_quote_response(quote: PriceQuote) -> QuoteResponse:
    breakdown = asdict(quote.breakdown)
    for key in ("vehicle_class", "service_tier"):
        if breakdown[key] is not None:
            breakdown[key] = str(breakdown[key])
    return QuoteResponse(
        final_price=quote.final_price,
        currency=settings.CURRENCY,
        price_breakdown=breakdown,
    )


def build_arrival_response(estimate: ArrivalEstimate) -> ArrivalResponse:
    return ArrivalResponse(
        service_tier=str(estimate.service_tier) if estimate.service_tier else None,
        estimated_arrival=estimate.estimated_arrival,
        arrival_time=estimate.arrival_time,
        arrival_date=estimate.arrival_date,
    )


def build_option_response(option: ServiceOption) -> ServiceOptionOut:
    return ServiceOptionOut(
        service_tier=str(option.service_tier),
        label=option.service_tier.label,
        final_price=option.quote.final_price,
        currency=settings.CURRENCY,
        arrival_time=option.arrival.arrival_time,
        arrival_date=option.arrival.arrival_date,
        estimated_arrival=option.arrival.estimated_arrival,
    )


def build_options_response(options: List[ServiceOption]) -> ServiceOptionsResponse:
    vehicle = options[0].quote.breakdown.vehicle_class if options else None
    return ServiceOptionsResponse(
        vehicle_class=str(vehicle) if vehicle else None,
        options=[build_option_response(option) for option in options],
    )


def build_recommendation_response(
    vehicle: Optional[VehicleClass], quote: Optional[PriceQuote] = None
) -> VehicleRecommendationResponse:
    if vehicle is None:
        return VehicleRecommendationResponse()
    return VehicleRecommendationResponse(
        vehicle_class=str(vehicle),
        label=vehicle.label,
        standard_quote=build_quote_response(quote) if quote else None,
    )
