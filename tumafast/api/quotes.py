"""Pricing quote and arrival estimate endpoints"""
import logging
from fastapi import APIRouter, HTTPException

from tumafast.core.config import settings
from tumafast.core.enums import ServiceTier
from tumafast.core.exceptions import InvalidArgumentError
from tumafast.core.response_builders import (
    build_arrival_response,
    build_options_response,
    build_quote_response,
    build_recommendation_response,
)
from tumafast.schemas.quote import (
    ArrivalRequest,
    ArrivalResponse,
    QuoteRequest,
    QuoteResponse,
    ServiceOptionsRequest,
    ServiceOptionsResponse,
    VehicleRecommendationRequest,
    VehicleRecommendationResponse,
)
from tumafast.services.arrival import estimate_arrival
from tumafast.services.options import quote_service_options
from tumafast.services.pricing import calculate_price, compute_price
from tumafast.services.vehicles import recommend_vehicle

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quotes", tags=["quotes"])


def _bad_request(exc: InvalidArgumentError) -> HTTPException:
    logger.info(f"Rejected quote input: {exc}")
    return HTTPException(status_code=400, detail=str(exc))


@router.post("/calc", response_model=QuoteResponse)
async def calc_quote(req: QuoteRequest):
    try:
        quote = calculate_price(req, strict=settings.PRICING_STRICT_MODE)
    except InvalidArgumentError as e:
        raise _bad_request(e)
    return build_quote_response(quote)


@router.post("/arrival", response_model=ArrivalResponse)
async def arrival_estimate(req: ArrivalRequest):
    try:
        estimate = estimate_arrival(
            req.distance_meters,
            req.service_tier,
            req.scheduled_time,
            strict=settings.PRICING_STRICT_MODE,
        )
    except InvalidArgumentError as e:
        raise _bad_request(e)
    return build_arrival_response(estimate)


@router.post("/options", response_model=ServiceOptionsResponse)
async def service_options(req: ServiceOptionsRequest):
    try:
        options = quote_service_options(
            req.distance_meters,
            req.vehicle_class,
            req.stop_count,
            req.scheduled_time,
            strict=settings.PRICING_STRICT_MODE,
        )
    except InvalidArgumentError as e:
        raise _bad_request(e)
    return build_options_response(options)


@router.post("/recommend-vehicle", response_model=VehicleRecommendationResponse)
async def vehicle_recommendation(req: VehicleRecommendationRequest):
    vehicle = recommend_vehicle(req.description, req.distance_meters)
    if vehicle is None:
        return build_recommendation_response(None)

    quote = compute_price(req.distance_meters, vehicle, ServiceTier.STANDARD, 1)
    return build_recommendation_response(vehicle, quote)
