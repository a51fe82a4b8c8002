"""Lazy-loading registry for the screening pipeline stages.

Global singletons created on first use; stages are stateless after load,
so one instance serves every request and worker thread.
"""

import logging
import threading

from services.pipeline.base import BaseModelService

logger = logging.getLogger(__name__)

STAGES = ("profile_extractor", "scoring_engine", "suitability_analyzer")

_registry: dict[str, BaseModelService] = {}
_lock = threading.Lock()


def _create_model(name: str) -> BaseModelService:
    """Factory: create a stage service by name with deferred imports."""
    from config import settings

    if name == "profile_extractor":
        from services.pipeline.profile_extractor import ProfileExtractorService
        return ProfileExtractorService(
            analyzer_name=settings.text_analyzer,
            extra_tech_terms=frozenset(t.lower() for t in settings.extra_tech_terms),
        )
    elif name == "scoring_engine":
        from services.pipeline.scoring_engine import ScoringEngineService
        return ScoringEngineService()
    elif name == "suitability_analyzer":
        from services.pipeline.suitability_analyzer import SuitabilityAnalyzerService
        return SuitabilityAnalyzerService()
    else:
        raise ValueError(f"Unknown model: {name}")


def get_model(name: str) -> BaseModelService:
    """Get a stage service by name, creating and loading it on first access."""
    with _lock:
        if name not in _registry:
            _registry[name] = _create_model(name)
        svc = _registry[name]
        svc.ensure_loaded()
    return svc


def preload(*names: str) -> None:
    """Pre-load multiple stages (e.g. at startup)."""
    for name in names:
        get_model(name)


def clear() -> None:
    """Unload all stages. Useful for testing."""
    with _lock:
        _registry.clear()
