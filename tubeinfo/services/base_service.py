from abc import ABC, abstractmethod
from typing import Any


class BaseService(ABC):
    """
    A channel info client. Instances are built per request and must be initialized
    with `init()` before `get_channel_details()` is called.
    """

    @property
    @abstractmethod
    def service_name(self) -> str:
        pass

    @abstractmethod
    async def init(self) -> "BaseService":
        pass

    @abstractmethod
    async def get_channel_details(self, channel_id: str) -> dict[str, Any]:
        pass

    def close(self):
        pass
