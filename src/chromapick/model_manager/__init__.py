"""Generic helpers for managing Pydantic models.

- **PydanticPersistence**: load/save Pydantic models to JSON
- **ObserverManager**: generic observer pattern implementation
"""

from chromapick.model_manager.observer import ObserverManager
from chromapick.model_manager.persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]
