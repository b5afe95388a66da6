import pytest

from tumafast.core.enums import VehicleClass
from tumafast.services.vehicles import recommend_vehicle

pytestmark = [pytest.mark.unit, pytest.mark.recommendation]


class TestVehicleRecommendation:

    @pytest.mark.parametrize("description,distance,expected", [
        ("10 bags of cement", 20000, VehicleClass.PICKUP),
        ("10 bags of cement", 120000, VehicleClass.LORRY),
        ("sacks of maize", 30000, VehicleClass.PICKUP),
        ("2 tons of sand", 10000, VehicleClass.LORRY),
        ("90kg gunia of potatoes", 10000, VehicleClass.LORRY),
        ("Timber planks", 101000, VehicleClass.LORRY),
        ("3-seater sofa", 5000, VehicleClass.PICKUP),
        ("Fridge and washing machine", 12000, VehicleClass.PICKUP),
        ("40ft container", 30000, VehicleClass.TRAILER),
        ("shipping container to Mombasa", 480000, VehicleClass.TRAILER),
        ("a box of books", 5000, VehicleClass.TUKTUK),
        ("a box of books", 20000, VehicleClass.PICKUP),
        ("weekly groceries", 14999, VehicleClass.TUKTUK),
        ("documents", 3000, VehicleClass.MOTORBIKE),
        ("lunch order", 0, VehicleClass.MOTORBIKE),
    ])
    def test_keyword_rules(self, description, distance, expected):
        assert recommend_vehicle(description, distance) is expected

    def test_case_insensitive(self):
        assert recommend_vehicle("SOFA", 1000) is VehicleClass.PICKUP

    def test_heavy_rules_take_precedence(self):
        # "bags" is a medium keyword but "cement" wins
        assert recommend_vehicle("bags of cement", 1000) is VehicleClass.PICKUP

    def test_long_haul_upgrades_motorbike(self):
        assert recommend_vehicle("documents", 200000) is VehicleClass.PICKUP

    def test_long_haul_upgrades_tuktuk(self):
        assert recommend_vehicle("groceries", 10000) is VehicleClass.TUKTUK
        assert recommend_vehicle("groceries", 151000) is VehicleClass.PICKUP

    def test_long_haul_threshold_exclusive(self):
        assert recommend_vehicle("documents", 150000) is VehicleClass.MOTORBIKE

    def test_sack_over_fifty_km(self):
        assert recommend_vehicle("sack of rice", 60000) is VehicleClass.PICKUP
        assert recommend_vehicle("sack of rice", 110000) is VehicleClass.LORRY

    @pytest.mark.parametrize("description", ["", "   ", None])
    def test_blank_description(self, description):
        assert recommend_vehicle(description, 5000) is None
