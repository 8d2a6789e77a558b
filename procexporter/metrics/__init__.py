from .sampler import ProcessSampler, ProcessSnapshot, PsutilSampler, SamplerError
from .collector import ProcessCollector, ScrapeStats, render

__all__ = [
    "ProcessSampler", "ProcessSnapshot", "PsutilSampler", "SamplerError",
    "ProcessCollector", "ScrapeStats", "render",
]
