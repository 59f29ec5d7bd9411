"""Liskov Substitution Principle (LSP).

Objects of a supertype must be replaceable by objects of any subtype without
breaking the program. Capabilities that only some subtypes have are modelled
as separate protocols instead of methods that raise.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from ..display import HEADING

logger = logging.getLogger(__name__)

LOW_LEVEL_THRESHOLD = 20


# Violates LSP: OstrichBad cannot honour BirdBad.fly.
class BirdBad:
    def fly(self) -> None:
        logger.info("Flying in the air")


class SparrowBad(BirdBad):
    def fly(self) -> None:
        logger.info("Sparrow flying quickly")


class OstrichBad(BirdBad):
    def fly(self) -> None:
        raise NotImplementedError("Ostrich cannot fly")


def make_bird_fly_bad(bird: BirdBad) -> None:
    bird.fly()


@runtime_checkable
class Bird(Protocol):
    def eat(self) -> None: ...

    def make_sound(self) -> None: ...


@runtime_checkable
class FlyingBird(Bird, Protocol):
    def fly(self) -> None: ...


@runtime_checkable
class RunningBird(Bird, Protocol):
    def run(self) -> None: ...


@runtime_checkable
class SwimmingBird(Bird, Protocol):
    def swim(self) -> None: ...


class Sparrow:
    def eat(self) -> None:
        logger.info("Sparrow eating seeds")

    def make_sound(self) -> None:
        logger.info("Chirp chirp!")

    def fly(self) -> None:
        logger.info("Sparrow flying quickly through the air")


class Eagle:
    def eat(self) -> None:
        logger.info("Eagle hunting prey")

    def make_sound(self) -> None:
        logger.info("Screech!")

    def fly(self) -> None:
        logger.info("Eagle soaring majestically")


class Ostrich:
    def eat(self) -> None:
        logger.info("Ostrich eating plants")

    def make_sound(self) -> None:
        logger.info("Boom boom!")

    def run(self) -> None:
        logger.info("Ostrich running very fast on the ground")


class Penguin:
    def eat(self) -> None:
        logger.info("Penguin eating fish")

    def make_sound(self) -> None:
        logger.info("Honk honk!")

    def swim(self) -> None:
        logger.info("Penguin swimming gracefully underwater")


def feed_bird(bird: Bird) -> None:
    bird.eat()
    bird.make_sound()


def make_flying_bird_fly(bird: FlyingBird) -> None:
    bird.fly()


def make_running_bird_run(bird: RunningBird) -> None:
    bird.run()


def make_swimming_bird_swim(bird: SwimmingBird) -> None:
    bird.swim()


# Violates LSP: electric cars cannot refuel.
class VehicleBad(ABC):
    @abstractmethod
    def start_engine(self) -> None: ...

    @abstractmethod
    def accelerate(self) -> None: ...

    @abstractmethod
    def refuel(self) -> None: ...


class CarBad(VehicleBad):
    def start_engine(self) -> None:
        logger.info("Starting gas engine")

    def accelerate(self) -> None:
        logger.info("Car accelerating")

    def refuel(self) -> None:
        logger.info("Refueling with gasoline")


class ElectricCarBad(VehicleBad):
    def start_engine(self) -> None:
        logger.info("Starting electric motor")

    def accelerate(self) -> None:
        logger.info("Electric car accelerating silently")

    def refuel(self) -> None:
        raise NotImplementedError("Electric cars do not refuel, they recharge!")


class Vehicle(ABC):
    """Operations every vehicle supports."""

    @abstractmethod
    def start(self) -> None: ...

    @abstractmethod
    def accelerate(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...


@runtime_checkable
class FuelVehicle(Protocol):
    def refuel(self) -> None: ...

    def get_fuel_level(self) -> float: ...


@runtime_checkable
class ElectricVehicle(Protocol):
    def recharge(self) -> None: ...

    def get_battery_level(self) -> float: ...


class FuelTank:
    """Fuel level as a percentage of capacity."""

    def __init__(self, level: float = 100.0) -> None:
        self.level = level

    def consume(self, amount: float) -> None:
        self.level = max(0.0, self.level - amount)

    def fill(self) -> None:
        self.level = 100.0


class Battery:
    """Charge level as a percentage of capacity."""

    def __init__(self, level: float = 100.0) -> None:
        self.level = level

    def drain(self, amount: float) -> None:
        self.level = max(0.0, self.level - amount)

    def regenerate(self, amount: float) -> None:
        self.level = min(100.0, self.level + amount)

    def charge(self) -> None:
        self.level = 100.0


class Car(Vehicle):
    def __init__(self, tank: FuelTank | None = None) -> None:
        self.tank = tank or FuelTank()

    def start(self) -> None:
        logger.info("Starting gas engine")

    def accelerate(self) -> None:
        logger.info("Car accelerating with engine power")
        self.tank.consume(1)

    def stop(self) -> None:
        logger.info("Car stopping")

    def refuel(self) -> None:
        logger.info("Refueling with gasoline")
        self.tank.fill()

    def get_fuel_level(self) -> float:
        return self.tank.level


class ElectricCar(Vehicle):
    def __init__(self, battery: Battery | None = None) -> None:
        self.battery = battery or Battery()

    def start(self) -> None:
        logger.info("Starting electric motor")

    def accelerate(self) -> None:
        logger.info("Electric car accelerating silently")
        self.battery.drain(2)

    def stop(self) -> None:
        logger.info("Electric car stopping with regenerative braking")
        self.battery.regenerate(1)

    def recharge(self) -> None:
        logger.info("Recharging battery")
        self.battery.charge()

    def get_battery_level(self) -> float:
        return self.battery.level


class Bicycle(Vehicle):
    def start(self) -> None:
        logger.info("Ready to pedal")

    def accelerate(self) -> None:
        logger.info("Pedaling faster")

    def stop(self) -> None:
        logger.info("Stopping bicycle")


class HybridCar(Vehicle):
    """Satisfies both FuelVehicle and ElectricVehicle by holding a tank and a battery."""

    def __init__(self, tank: FuelTank | None = None, battery: Battery | None = None) -> None:
        self.tank = tank or FuelTank()
        self.battery = battery or Battery()

    def start(self) -> None:
        logger.info("Starting hybrid system")

    def accelerate(self) -> None:
        logger.info("Hybrid car accelerating efficiently")
        self.tank.consume(0.5)
        self.battery.drain(1)

    def stop(self) -> None:
        logger.info("Hybrid car stopping")

    def refuel(self) -> None:
        logger.info("Refueling hybrid car")
        self.tank.fill()

    def get_fuel_level(self) -> float:
        return self.tank.level

    def recharge(self) -> None:
        logger.info("Recharging hybrid battery")
        self.battery.charge()

    def get_battery_level(self) -> float:
        return self.battery.level


def operate_vehicle(vehicle: Vehicle) -> None:
    vehicle.start()
    vehicle.accelerate()
    vehicle.stop()


def maintain_fuel_vehicle(vehicle: FuelVehicle) -> None:
    if vehicle.get_fuel_level() < LOW_LEVEL_THRESHOLD:
        vehicle.refuel()


def maintain_electric_vehicle(vehicle: ElectricVehicle) -> None:
    if vehicle.get_battery_level() < LOW_LEVEL_THRESHOLD:
        vehicle.recharge()


def perform_maintenance(vehicle: Vehicle) -> None:
    """Service whichever energy capabilities ``vehicle`` has."""
    logger.info("Performing maintenance on %s", type(vehicle).__name__)
    if isinstance(vehicle, FuelVehicle):
        maintain_fuel_vehicle(vehicle)
    if isinstance(vehicle, ElectricVehicle):
        maintain_electric_vehicle(vehicle)


def demonstrate_lsp() -> None:
    logger.info("Liskov Substitution Principle", extra=HEADING)

    logger.info("--- Without LSP ---")
    for bird in (SparrowBad(), OstrichBad()):
        try:
            make_bird_fly_bad(bird)
        except NotImplementedError as exc:
            logger.warning("%s broke the BirdBad contract: %s", type(bird).__name__, exc)

    logger.info("Bird Example", extra=HEADING)
    birds: list[Bird] = [Sparrow(), Eagle(), Ostrich(), Penguin()]
    for bird in birds:
        feed_bird(bird)

    flying_birds: list[FlyingBird] = [Sparrow(), Eagle()]
    for flyer in flying_birds:
        make_flying_bird_fly(flyer)

    running_birds: list[RunningBird] = [Ostrich()]
    for runner in running_birds:
        make_running_bird_run(runner)

    swimming_birds: list[SwimmingBird] = [Penguin()]
    for swimmer in swimming_birds:
        make_swimming_bird_swim(swimmer)

    logger.info("Vehicle Example", extra=HEADING)
    vehicles: list[Vehicle] = [Car(), ElectricCar(), Bicycle(), HybridCar()]
    for vehicle in vehicles:
        operate_vehicle(vehicle)
        perform_maintenance(vehicle)
        logger.info("---")
