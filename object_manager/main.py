from object_manager.model.vehicle import SlowVehicle, Vehicle
from object_manager.registration import register_defaults
from object_manager.shared.cdi import resolve


def main() -> None:
    """
    - Registers the default bindings on the process-wide container.
    - Resolves a Vehicle built with arguments and drives it.
    - Resolves a SlowVehicle, whose behavior override beats the global binding.
    """
    register_defaults()

    vehicle = resolve(Vehicle, "Lets gooooo!", 5)
    vehicle.drive()

    slow_vehicle = resolve(SlowVehicle)
    slow_vehicle.drive()


if __name__ == "__main__":
    main()
