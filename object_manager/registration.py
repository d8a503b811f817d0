from typing import Optional

from object_manager.model.behavior import Drivable, FastDriving
from object_manager.shared.cdi import ObjectManager, get_container
from object_manager.shared.logger import ConsoleLogger, Logger


def register_defaults(container: Optional[ObjectManager] = None) -> ObjectManager:
    """Bind the application's default implementations."""
    container = container or get_container()
    container.bind(Logger, ConsoleLogger)
    container.bind(Drivable, FastDriving)
    return container
