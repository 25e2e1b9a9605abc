from car_registry.infra.db.models.base import Base
from car_registry.infra.db.models.car import CarRow

__all__ = ["Base", "CarRow"]
