"""Base classes for metadata provider plugins."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class MetaProvider(ABC):
    """Contract for plugins that contribute fields to distribution metadata."""

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return a metadata fragment to be merged by the build pipeline."""
