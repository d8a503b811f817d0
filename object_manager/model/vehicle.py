from typing import Optional

from object_manager.config.logger import get_logger
from object_manager.model.behavior import Drivable, SlowDriving
from object_manager.shared.annotations import Inject
from object_manager.shared.logger.base import Logger


class Vehicle(Drivable):
    """Drives with whatever Drivable is bound globally."""

    driving_behavior: Drivable = Inject()
    logger: Logger = Inject()

    def __init__(self, message: Optional[str] = None, noise: Optional[int] = None):
        self.message = message
        self.noise = noise
        if message is not None:
            get_logger().info(message)
        if noise is not None:
            get_logger().info(str(noise))

    def drive(self) -> None:
        self.driving_behavior.drive()


class SlowVehicle(Vehicle):
    # Even if FastDriving is bound globally, this vehicle always drives slowly
    driving_behavior: Drivable = Inject(concrete=SlowDriving)
