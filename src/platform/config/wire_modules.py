"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.hotel.app.query import get_hotel_use_case, list_hotels_use_case
from src.service.hotel.driving_adapter.http_controller.auth import token_auth


WIRE_MODULES: list[ModuleType] = [
    list_hotels_use_case,
    get_hotel_use_case,
    token_auth,
]
