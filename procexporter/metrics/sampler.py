# procexporter/metrics/sampler.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Protocol

import psutil

logger = logging.getLogger(__name__)

# Per-process lookups that mean "this process is gone or hidden from us"
_PROC_ERRORS = (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess, OSError)


class SamplerError(RuntimeError):
    """The process table could not be enumerated at all."""


@dataclass
class ProcessSnapshot:
    pid: int
    command_line: str
    name: Optional[str] = None
    cpu_percent: Optional[float] = None
    resident_memory_bytes: Optional[int] = None
    arguments: Optional[List[str]] = None


class ProcessSampler(Protocol):
    def sample(self, filter_substring: str) -> List[ProcessSnapshot]: ...


def _cpu_percent(p: psutil.Process) -> float:
    """Average CPU utilization over the process lifetime."""
    times = p.cpu_times()
    elapsed = time.time() - p.create_time()
    if elapsed <= 0:
        return 0.0
    return 100.0 * (times.user + times.system) / elapsed


class PsutilSampler:
    """Reads matching processes from the OS process table; keeps no state between calls."""

    def sample(self, filter_substring: str) -> List[ProcessSnapshot]:
        if not filter_substring:
            raise ValueError("filter substring must not be empty")

        try:
            procs = list(psutil.process_iter())
        except (psutil.Error, OSError) as e:
            raise SamplerError(f"cannot list processes: {e}") from e

        out: List[ProcessSnapshot] = []
        for p in procs:
            try:
                cmdline = " ".join(p.cmdline())
            except _PROC_ERRORS:
                continue
            if filter_substring not in cmdline:
                continue

            snap = ProcessSnapshot(pid=p.pid, command_line=cmdline)
            try:
                snap.name = p.name()
            except _PROC_ERRORS as e:
                logger.debug(f"pid={p.pid} name unavailable: {e!r}")
            try:
                snap.cpu_percent = float(_cpu_percent(p))
            except _PROC_ERRORS as e:
                logger.debug(f"pid={p.pid} cpu unavailable: {e!r}")
            try:
                snap.resident_memory_bytes = int(p.memory_info().rss)
            except _PROC_ERRORS as e:
                logger.debug(f"pid={p.pid} memory unavailable: {e!r}")
            try:
                snap.arguments = list(p.cmdline())
            except _PROC_ERRORS as e:
                logger.debug(f"pid={p.pid} arguments unavailable: {e!r}")
            out.append(snap)
        return out
