import json
import logging

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from cliphistory import __version__
from cliphistory.clipboard import ClipboardError, ClipboardSource
from cliphistory.schema import ContentPayload, StringMap
from cliphistory.services.history import HistoryCache
from cliphistory.utils.sniff import detect_content_type

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPES = {"application/json", "text/json"}

BAD_JSON = "Was not able to parse input JSON"
MISSING_CONTENT = "JSON needs to contain key 'content'"
SET_FAILED = "Was not able to set clipboard"


def _media_type(header: str) -> str:
    return header.split(";", 1)[0].strip().lower()


def _content_from_json(body: bytes) -> str:
    try:
        fields = StringMap.validate_python(json.loads(body))
    except (ValueError, ValidationError) as e:
        logger.error(f"Unable to decode input json: {e}")
        raise HTTPException(status_code=400, detail=BAD_JSON)

    if "content" not in fields:
        raise HTTPException(status_code=400, detail=MISSING_CONTENT)
    return fields["content"] or ""


async def _content_from_form(request: Request) -> str:
    # body fields win over the query string
    form = await request.form()
    value = form.get("content")
    if value is None:
        value = request.query_params.get("content", "")
    return value if isinstance(value, str) else ""


def create_app(cache: HistoryCache, source: ClipboardSource) -> FastAPI:
    """Build the HTTP interface around ``cache`` and ``source``.

    Reads come from the cache. ``/api/set`` writes straight to the
    clipboard; the cache only learns the new value on the next poll.
    """
    app = FastAPI(title="cliphistory", version=__version__)
    app.state.cache = cache
    app.state.source = source

    @app.get("/api/get")
    def get_current(request: Request):
        content = cache.head()

        if _media_type(request.headers.get("accept", "")) == "application/json":
            return JSONResponse(ContentPayload(content=content).model_dump())

        data = content.encode("utf-8")
        return Response(content=data, media_type=detect_content_type(data))

    @app.get("/api/list")
    def list_history():
        return JSONResponse(cache.list())

    @app.post("/api/set")
    async def set_current(request: Request):
        if _media_type(request.headers.get("content-type", "")) in JSON_MEDIA_TYPES:
            content = _content_from_json(await request.body())
        else:
            content = await _content_from_form(request)

        if content:
            try:
                await run_in_threadpool(source.write, content)
            except ClipboardError as e:
                logger.error(f"Unable to set clipboard: {e}")
                raise HTTPException(status_code=500, detail=SET_FAILED)

        return Response(status_code=200)

    return app
