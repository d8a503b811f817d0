from abc import ABC, abstractmethod

from object_manager.shared.annotations import Inject
from object_manager.shared.logger.base import Logger


class Drivable(ABC):
    @abstractmethod
    def drive(self) -> None:
        pass


class FastDriving(Drivable):
    logger: Logger = Inject()

    def drive(self) -> None:
        self.logger.log("Drive really fast")


class SlowDriving(Drivable):
    logger: Logger = Inject()

    def drive(self) -> None:
        self.logger.log("Drive really slow")
