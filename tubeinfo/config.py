from contextlib import contextmanager
from os import getenv
from pathlib import Path
from typing import Iterator

import yaml
from pydantic import BaseModel

from tubeinfo import TUBEINFO_PATH
from tubeinfo.utils import utils

DEFAULT_CFG_PATH = TUBEINFO_PATH / "config.yaml"


def get_config_path() -> Path:
    override = getenv("TUBEINFO_CONFIG")
    if override:
        return Path(override).expanduser()

    return DEFAULT_CFG_PATH


class ServerOptions(BaseModel):
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class YouTubeOptions(BaseModel):
    quiet: bool = True
    extract_flat: bool = True  # don't resolve every video on the channel page

    cookie_file: str | None = None
    proxy: str | None = None

    # appended to the channel url, e.g. "about" or "videos". None fetches the channel root
    channel_tab: str | None = None


class Config(BaseModel):
    server: ServerOptions = ServerOptions()
    youtube: YouTubeOptions = YouTubeOptions()

    def dump(self):
        return self.model_dump()

    def save(self, path: Path | None = None):
        path = path or get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w") as f:
            yaml.dump(self.dump(), f, Dumper=utils.PrettyDumper, sort_keys=False)

    @staticmethod
    def load(path: Path | None = None):
        path = path or get_config_path()

        if not path.exists() or path.stat().st_size == 0:
            Config().save(path)

        with path.open("r") as f:
            yaml_data = yaml.safe_load(f)

            if not isinstance(yaml_data, dict):
                raise ValueError("YAML data is not a dictionary")

            return Config(**yaml_data)


@contextmanager
def load_config(path: Path | None = None) -> Iterator[Config]:
    config = Config.load(path)

    # config might be missing or have extra variables, save after validating
    config.save(path)

    yield config
