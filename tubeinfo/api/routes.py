import json
from typing import Any

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from tubeinfo.lookup import lookup_channel, missing_id

router = APIRouter()


class PrettyJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


@router.get("/channel")
async def get_channel(
    request: Request,
    id: str | None = Query(None, description="Channel ID, @handle or channel URL"),
):
    # only the query string is read, a request body is never used for the id
    if not id:
        status, content = missing_id()
        return JSONResponse(status_code=status, content=content)

    # a fresh client for every request, nothing is shared between lookups
    client = request.app.state.client_factory()
    status, content = await lookup_channel(client, id)

    if status == 200:
        return PrettyJSONResponse(status_code=status, content=content)
    return JSONResponse(status_code=status, content=content)
