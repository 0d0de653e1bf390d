import asyncio
from typing import Any

import yt_dlp  # type: ignore

from tubeinfo.config import YouTubeOptions
from tubeinfo.services.base_service import BaseService
from tubeinfo.utils import utils


def log(*args, **kwargs):
    utils.module_log("youtube api", "dark_red", *args, **kwargs)


class YouTubeAPI(BaseService):
    def __init__(self, options: YouTubeOptions | None = None):
        self.options = options or YouTubeOptions()
        self._yt: yt_dlp.YoutubeDL | None = None

    @property
    def service_name(self):
        return "YouTube"

    @property
    def ready(self) -> bool:
        return self._yt is not None

    def get_ydl_opts(self) -> dict[str, Any]:
        ydl_opts: dict[str, Any] = {
            "extract_flat": self.options.extract_flat,
            "quiet": self.options.quiet,
            "no_warnings": self.options.quiet,
            "skip_download": True,
        }

        if self.options.cookie_file:
            ydl_opts["cookiefile"] = self.options.cookie_file
        if self.options.proxy:
            ydl_opts["proxy"] = self.options.proxy

        return ydl_opts

    def get_channel_url_from_id(self, channel_id: str) -> str:
        if utils.validate_url(channel_id):
            url = channel_id.rstrip("/")
        elif channel_id.startswith("@"):
            url = f"https://www.youtube.com/{channel_id}"
        else:
            url = f"https://www.youtube.com/channel/{channel_id}"

        if self.options.channel_tab:
            url += f"/{self.options.channel_tab}"

        return url

    async def init(self) -> "YouTubeAPI":
        # building YoutubeDL loads extractors and the cookie jar, keep it off the event loop
        self._yt = await asyncio.to_thread(yt_dlp.YoutubeDL, self.get_ydl_opts())
        return self

    async def get_channel_details(self, channel_id: str) -> dict[str, Any]:
        if self._yt is None:
            raise RuntimeError("client is not initialized, call init() first")

        channel_link = self.get_channel_url_from_id(channel_id)
        log(f"fetching {channel_link}")

        data = await asyncio.to_thread(self._yt.extract_info, channel_link, download=False)
        if data is None:
            raise yt_dlp.utils.DownloadError(f"no data returned for {channel_link}")

        # strips postprocessor internals and non-serializable values
        return self._yt.sanitize_info(data)

    def close(self):
        if self._yt is not None:
            self._yt.close()
            self._yt = None
