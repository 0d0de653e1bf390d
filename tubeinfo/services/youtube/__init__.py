from .api import YouTubeAPI as YouTubeService

__all__ = ["YouTubeService"]
