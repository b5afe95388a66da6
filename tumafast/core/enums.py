from enum import Enum


class _LabelledEnum(str, Enum):
    """String enum that also parses its customer-facing label."""

    def __new__(cls, value: str, label: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for member in cls:
            if key in (member.value, member.label.lower()):
                return member
        return None

    def __str__(self):
        return self.value


class VehicleClass(_LabelledEnum):
    MOTORBIKE = ("motorbike", "Boda Boda")
    TUKTUK = ("tuktuk", "Tuk-Tuk")
    PICKUP = ("pickup", "Pickup Truck")
    VAN = ("van", "Cargo Van")
    LORRY = ("lorry", "3T Lorry")
    TRAILER = ("trailer", "Container Trailer")


class ServiceTier(_LabelledEnum):
    EXPRESS = ("express", "Express Instant")
    STANDARD = ("standard", "Standard (Same Day)")
    ECONOMY = ("economy", "Economy (Next Day)")
