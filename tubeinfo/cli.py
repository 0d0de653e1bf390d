import asyncio
import json

import click
import yaml

from tubeinfo.config import get_config_path, load_config
from tubeinfo.lookup import lookup_channel
from tubeinfo.services.youtube import YouTubeService
from tubeinfo.utils import utils


@click.group()
def tubeinfo():
    pass


@tubeinfo.command()
@click.option("--host", default=None, help="Interface to bind, defaults to server.host from the config")
@click.option("--port", default=None, type=int, help="Port to bind, defaults to server.port from the config")
def serve(host, port):
    """
    Runs the channel lookup api
    """

    import tubeinfo.api.api as api

    api.run(host, port)


@tubeinfo.command()
@click.argument("channel_id", required=True)
def lookup(channel_id):
    """
    Looks up a channel and prints the api response
    """

    with load_config() as config:
        status, content = asyncio.run(lookup_channel(YouTubeService(config.youtube), channel_id))

    click.echo(json.dumps(content, ensure_ascii=False, indent=2))

    if status != 200:
        click.get_current_context().exit(1)


@tubeinfo.command()
def config():
    """
    Shows the config path and its contents
    """

    with load_config() as cfg:
        click.echo(f"Config file: {get_config_path()}\n")
        click.echo(yaml.dump(cfg.dump(), Dumper=utils.PrettyDumper, sort_keys=False))


if __name__ == "__main__":
    tubeinfo()
