# procexporter/metrics/collector.py
from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from prometheus_client import CollectorRegistry, Counter, Summary
from prometheus_client.core import GaugeMetricFamily, Metric

from .sampler import ProcessSampler, ProcessSnapshot, SamplerError

logger = logging.getLogger(__name__)

# Metric schema: name -> (help, labels)
EXISTS = ("process_exists", "Whether the process exists (1 = exists, 0 = does not)", ["pid", "name"])
CPU = ("process_cpu_usage", "CPU usage percentage of the process", ["pid", "name"])
MEMORY = ("process_memory_usage_bytes", "Memory usage of the process in bytes", ["pid", "name"])
ARG = ("process_arg", "Command-line arguments of the process", ["pid", "name", "index", "value"])

SCHEMA = (EXISTS, CPU, MEMORY, ARG)


def _family(desc) -> GaugeMetricFamily:
    name, documentation, labels = desc
    return GaugeMetricFamily(name, documentation, labels=labels)


class ScrapeStats:
    """Exporter self-metrics.

    Register them after the ProcessCollector: the registry collects in
    registration order, and these are updated during the sampler pass.
    """

    def __init__(self):
        self.scrapes = Counter(
            "process_exporter_scrapes_total",
            "Number of metrics scrapes served",
            registry=None,
        )
        self.errors = Counter(
            "process_exporter_scrape_errors_total",
            "Number of scrapes where the process table could not be read",
            registry=None,
        )
        self.duration = Summary(
            "process_exporter_collection_duration_seconds",
            "Time spent sampling the process table",
            registry=None,
        )

    def register(self, registry: CollectorRegistry) -> None:
        for metric in (self.scrapes, self.errors, self.duration):
            registry.register(metric)


def render(snapshots: List[ProcessSnapshot]) -> List[Metric]:
    """Translate one sampler pass into gauge families; families without samples are left out."""
    exists, cpu, memory, arg = (_family(d) for d in SCHEMA)

    for snap in snapshots:
        pid = str(snap.pid)
        name = snap.name or ""
        exists.add_metric([pid, name], 1)
        if snap.cpu_percent is not None:
            cpu.add_metric([pid, name], snap.cpu_percent)
        if snap.resident_memory_bytes is not None:
            memory.add_metric([pid, name], float(snap.resident_memory_bytes))
        if snap.arguments is not None:
            for i, value in enumerate(snap.arguments):
                arg.add_metric([pid, name, str(i), value], 1)

    if not snapshots:
        exists.add_metric(["", ""], 0)

    return [f for f in (exists, cpu, memory, arg) if f.samples]


class ProcessCollector:
    """Custom collector: runs a fresh sampler pass on every registry collection."""

    def __init__(self, process_name: str, sampler: ProcessSampler, stats: Optional[ScrapeStats] = None):
        if not process_name:
            raise ValueError("process name must not be empty")
        self.process_name = process_name
        self.sampler = sampler
        self.stats = stats

    def describe(self) -> List[Metric]:
        return [_family(d) for d in SCHEMA]

    def collect(self) -> Iterator[Metric]:
        try:
            if self.stats is not None:
                with self.stats.duration.time():
                    snapshots = self.sampler.sample(self.process_name)
            else:
                snapshots = self.sampler.sample(self.process_name)
        except SamplerError as e:
            logger.error(f"Error retrieving processes: {e}")
            if self.stats is not None:
                self.stats.errors.inc()
            return
        yield from render(snapshots)
