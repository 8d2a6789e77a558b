from __future__ import annotations

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


# Plain def: Starlette runs each scrape on its own threadpool worker.
@router.get("")
def scrape(request: Request):
    request.app.state.stats.scrapes.inc()
    return Response(content=generate_latest(request.app.state.registry), media_type=CONTENT_TYPE_LATEST)
