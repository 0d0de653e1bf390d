from .base_service import BaseService
from .youtube import YouTubeService

__all__ = ["BaseService", "YouTubeService"]
