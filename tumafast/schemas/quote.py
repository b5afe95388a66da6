from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

# 100,000 km, far beyond any deliverable route
MAX_DISTANCE_METERS = 100_000_000


class QuoteRequest(BaseModel):
    distance_meters: float = Field(ge=0, le=MAX_DISTANCE_METERS, allow_inf_nan=False)
    vehicle_class: str
    service_tier: str
    stop_count: int = Field(ge=0)


class QuoteResponse(BaseModel):
    final_price: int
    currency: str
    price_breakdown: dict


class ArrivalRequest(BaseModel):
    distance_meters: float = Field(ge=0, le=MAX_DISTANCE_METERS, allow_inf_nan=False)
    service_tier: str
    scheduled_time: Optional[str] = "ASAP"


class ArrivalResponse(BaseModel):
    service_tier: Optional[str] = None
    estimated_arrival: datetime
    arrival_time: str
    arrival_date: str


class ServiceOptionsRequest(BaseModel):
    distance_meters: float = Field(ge=0, le=MAX_DISTANCE_METERS, allow_inf_nan=False)
    vehicle_class: str
    stop_count: int = Field(ge=0)
    scheduled_time: Optional[str] = "ASAP"


class ServiceOptionOut(BaseModel):
    service_tier: str
    label: str
    final_price: int
    currency: str
    arrival_time: str
    arrival_date: str
    estimated_arrival: datetime


class ServiceOptionsResponse(BaseModel):
    vehicle_class: Optional[str] = None
    options: List[ServiceOptionOut]


class VehicleRecommendationRequest(BaseModel):
    description: str = Field(min_length=1)
    distance_meters: float = Field(default=0, ge=0, le=MAX_DISTANCE_METERS, allow_inf_nan=False)


class VehicleRecommendationResponse(BaseModel):
    vehicle_class: Optional[str] = None
    label: Optional[str] = None
    standard_quote: Optional[QuoteResponse] = None
