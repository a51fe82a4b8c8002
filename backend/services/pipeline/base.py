"""Abstract base class for the screening pipeline stage services."""

from abc import ABC, abstractmethod
from typing import Any
import logging

logger = logging.getLogger(__name__)


class BaseModelService(ABC):
    """Base class for pipeline stages.

    Subclasses must implement:
        - model_name: identifier used in model_registry
        - load(): prepare analyzers/vocabulary
        - predict(**kwargs): run the stage and return its typed output
    """

    model_name: str = ""
    _loaded: bool = False

    @abstractmethod
    def load(self) -> None:
        """Prepare the stage. Called once by model_registry."""

    @abstractmethod
    def predict(self, **kwargs: Any) -> Any:
        """Run the stage. Returns a Pydantic schema or a score."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        """Load stage if not already loaded."""
        if not self._loaded:
            logger.info("Loading stage: %s", self.model_name)
            self.load()
            self._loaded = True
            logger.info("Stage loaded: %s", self.model_name)
