#!/usr/bin/env python3
"""
Seed the cars table with deterministic random data.

Features:
- Deterministic: fixed seed → same ids and values every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through SqlCarRepository, so seeded rows follow the same path as API writes

Usage:
    python scripts/seed_cars.py [--count N] [--seed S]
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import uuid
from decimal import Decimal

from car_registry.adapters.sql_car_repository import SqlCarRepository
from car_registry.domain.car import Car
from car_registry.infra.db.config import log_level
from car_registry.infra.db.session import get_session
from car_registry.infra.logging import setup_logging

logger = logging.getLogger("car_registry.scripts.seed_cars")


RANDOM_SEED = 42
NUM_CARS = 50
CURRENT_YEAR = 2026

# Base price band per make
PRICE_BANDS: dict[str, tuple[int, int]] = {
    "Nissan": (15000, 25000),
    "Kia": (15000, 25000),
    "Toyota": (25000, 45000),
    "Honda": (25000, 45000),
    "Ford": (25000, 45000),
    "BMW": (45000, 80000),
    "Audi": (45000, 80000),
}

MODELS_BY_MAKE: dict[str, list[str]] = {
    "Nissan": ["Versa", "Sentra", "Kicks"],
    "Kia": ["Rio", "Forte", "Sportage"],
    "Toyota": ["Corolla", "Camry", "RAV4"],
    "Honda": ["Civic", "Accord", "CR-V"],
    "Ford": ["Focus", "Escape", "Mustang"],
    "BMW": ["Serie 3", "X1", "X3"],
    "Audi": ["A3", "A4", "Q5"],
}


def calculate_price(make: str, year: int) -> Decimal:
    """
    Price from the make's band, depreciated ~10% per year (capped at 70%).

    Rounded to the nearest 100 with a floor of 5000.
    """
    low, high = PRICE_BANDS[make]
    base_price = Decimal(random.randint(low, high))

    years_old = max(0, CURRENT_YEAR - year)
    depreciation = min(Decimal("0.10") * years_old, Decimal("0.70"))
    price = base_price * (Decimal("1") - depreciation)

    price = (price / 100).quantize(Decimal("1")) * 100
    return max(price, Decimal("5000")).quantize(Decimal("0.01"))


def generate_car() -> Car:
    make = random.choice(list(MODELS_BY_MAKE))
    model = random.choice(MODELS_BY_MAKE[make])

    # Weighted toward newer years
    year = random.choices(
        range(CURRENT_YEAR - 9, CURRENT_YEAR + 1),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7],
        k=1,
    )[0]

    price = calculate_price(make, year)
    car_id = uuid.UUID(int=random.getrandbits(128), version=4)

    return Car(id=car_id, make=make, model=model, year=year, price=price)


def seed_cars(num_cars: int = NUM_CARS, seed: int = RANDOM_SEED) -> list[Car]:
    """
    Replace every stored car with a freshly generated set.

    Args:
        num_cars: Number of cars to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    with get_session() as session:
        repository = SqlCarRepository(session)

        deleted = repository.delete_all()
        logger.info("Cleared existing cars", extra={"deleted": deleted})

        cars = repository.save_all(generate_car() for _ in range(num_cars))
        logger.info("Seeded cars", extra={"count": len(cars), "seed": seed})

    return cars


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--count", type=int, default=NUM_CARS)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    args = parser.parse_args(argv)

    setup_logging(log_level())

    try:
        cars = seed_cars(num_cars=args.count, seed=args.seed)
    except Exception:
        logger.exception("Error seeding database")
        return 1

    for car in cars[:5]:
        print(f"{car.id}  {car.year} {car.make} {car.model}  {car.price}")
    if len(cars) > 5:
        print(f"... and {len(cars) - 5} more")

    return 0


if __name__ == "__main__":
    sys.exit(main())
