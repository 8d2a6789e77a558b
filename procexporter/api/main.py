from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from prometheus_client import CollectorRegistry, GCCollector, PlatformCollector

from .. import __version__
from ..config import Config, get_config
from ..metrics import ProcessCollector, ProcessSampler, PsutilSampler, ScrapeStats
from .routers import metrics as metrics_router


def create_app(process_name: str, sampler: Optional[ProcessSampler] = None,
               cfg: Optional[Config] = None) -> FastAPI:
    """Build the exporter app with its own registry; nothing is registered globally."""
    cfg = cfg or get_config()
    registry = CollectorRegistry()
    stats = ScrapeStats()
    registry.register(ProcessCollector(process_name, sampler or PsutilSampler(), stats))
    stats.register(registry)
    if cfg.runtime_metrics:
        PlatformCollector(registry=registry)
        GCCollector(registry=registry)

    # /metrics is the only route
    app = FastAPI(title="procexporter", version=__version__, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.registry = registry
    app.state.stats = stats
    app.include_router(metrics_router.router, prefix="/metrics", tags=["metrics"])
    return app
