from typing import Any

from tubeinfo.services.base_service import BaseService
from tubeinfo.utils import utils

MISSING_ID_ERROR = "No channel ID was specified."
USAGE = "Pass the channel ID in the 'id' query parameter. Example: /channel?id=UC-gL3K6S5J99fE-Wq-s1_zQ"
INIT_ERROR = "Failed to initialize the YouTube client on the server."
LOOKUP_ERROR = "Failed to fetch the channel information."
LOOKUP_FALLBACK_DETAILS = "The channel ID could not be found or the YouTube request failed."


def log(*args, **kwargs):
    utils.module_log("channel", "cyan", *args, **kwargs)


def close_client(client: BaseService):
    # the lookup result is already captured, a failing close must not change the response
    try:
        client.close()
    except Exception as e:
        utils.module_error("channel", f"failed to close {client.service_name} client:", repr(e))


def missing_id() -> tuple[int, dict[str, Any]]:
    return 400, {"error": MISSING_ID_ERROR, "usage": USAGE}


async def lookup_channel(client: BaseService, channel_id: str) -> tuple[int, dict[str, Any]]:
    """
    Initializes `client` and fetches the details for `channel_id`.

    Returns the http status and the response envelope. Every failure is logged and mapped to
    a status, nothing is raised: 500 when the client can't be initialized, 404 when the
    lookup fails (including channels that don't exist).
    """

    try:
        client = await client.init()
    except Exception as e:
        utils.module_error("channel", f"{client.service_name} client initialization failed:", repr(e))
        return 500, {"error": INIT_ERROR, "details": utils.error_message(e)}

    log(f"looking up channel {channel_id}")

    try:
        data = await client.get_channel_details(channel_id)
    except Exception as e:
        utils.module_error("channel", f"lookup failed for channel {channel_id}:", repr(e))
        close_client(client)
        return 404, {
            "error": LOOKUP_ERROR,
            "details": utils.error_message(e) or LOOKUP_FALLBACK_DETAILS,
            "channel_id": channel_id,
        }

    close_client(client)
    return 200, {"status": "success", "channel_id": channel_id, "data": data}
