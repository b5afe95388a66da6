from typing import Optional

from tumafast.core.enums import VehicleClass

HEAVY_KEYWORDS = (
    "cement", "sand", "ballast", "construction", "lorry", "truck",
    "tanks", "timber", "cargo", "gunia", "sack", "heavy",
)
FURNITURE_KEYWORDS = (
    "furniture", "bed", "sofa", "couch", "fridge", "refrigerator",
    "washing machine", "table", "desk", "wardrobe", "moving",
)
CONTAINER_KEYWORDS = ("container", "prime mover", "trailer", "shippin", "20ft", "40ft")
MEDIUM_KEYWORDS = (
    "box", "carton", "tv", "television", "microwave", "groceries",
    "shopping", "bags", "suitcase", "luggage",
)

SACK_PICKUP_MAX_KM = 50
HEAVY_LORRY_MIN_KM = 100
TUKTUK_MAX_KM = 15
LONG_HAUL_KM = 150


def _mentions(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def recommend_vehicle(description: str, distance_meters: float = 0) -> Optional[VehicleClass]:
    """Suggest a vehicle class from a free-text item description and route distance.

    Keyword groups are checked in order and the first match wins. Returns None
    for a blank description.
    """
    if not description or not description.strip():
        return None

    text = description.lower()
    distance_km = distance_meters / 1000

    if _mentions(text, HEAVY_KEYWORDS):
        if "sack" in text and distance_km < SACK_PICKUP_MAX_KM:
            recommended = VehicleClass.PICKUP
        elif "90kg" in text or "ton" in text:
            recommended = VehicleClass.LORRY
        else:
            recommended = VehicleClass.LORRY if distance_km > HEAVY_LORRY_MIN_KM else VehicleClass.PICKUP
    elif _mentions(text, FURNITURE_KEYWORDS):
        recommended = VehicleClass.PICKUP
    elif _mentions(text, CONTAINER_KEYWORDS):
        recommended = VehicleClass.TRAILER
    elif _mentions(text, MEDIUM_KEYWORDS):
        recommended = VehicleClass.TUKTUK if distance_km < TUKTUK_MAX_KM else VehicleClass.PICKUP
    else:
        recommended = VehicleClass.MOTORBIKE

    # two- and three-wheelers are not dispatched on long hauls
    if distance_km > LONG_HAUL_KM and recommended in (VehicleClass.MOTORBIKE, VehicleClass.TUKTUK):
        recommended = VehicleClass.PICKUP

    return recommended
