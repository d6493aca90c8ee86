"""Resource providers - supply the raw word list buffer.

The store never reads files itself; it asks a provider for the bytes
behind a fixed key. Providers raise ResourceUnavailableError when the
resource is missing or empty.
"""

from abc import ABC, abstractmethod
from importlib import resources
from typing import Dict, Optional

from clock_words.core import ResourceUnavailableError

DEFAULT_WORD_LIST_KEY = "cet4_words.tsv"


class ResourceProvider(ABC):
    """Abstract source of embedded data buffers."""

    @abstractmethod
    def load(self, key: str) -> bytes:
        """
        Return the raw bytes stored under key.

        Args:
            key: Resource identifier (e.g., "cet4_words.tsv").

        Returns:
            A bytes object owned by the caller.

        Raises:
            ResourceUnavailableError: If the resource is missing or empty.
        """
        pass


class PackageResourceProvider(ResourceProvider):
    """Reads data files bundled inside a Python package."""

    def __init__(self, package: str = "clock_words.resources"):
        self._package = package

    def load(self, key: str) -> bytes:
        try:
            data = resources.files(self._package).joinpath(key).read_bytes()
        except (FileNotFoundError, ModuleNotFoundError, IsADirectoryError) as exc:
            raise ResourceUnavailableError(
                f"Resource '{key}' not found in {self._package}"
            ) from exc

        if not data:
            raise ResourceUnavailableError(f"Resource '{key}' is empty")
        return data


class InMemoryResourceProvider(ResourceProvider):
    """Serves buffers registered up front (embedding hosts, tests)."""

    def __init__(self, buffers: Optional[Dict[str, bytes]] = None):
        self._buffers: Dict[str, bytes] = dict(buffers or {})

    def add(self, key: str, data: bytes) -> None:
        self._buffers[key] = bytes(data)

    def load(self, key: str) -> bytes:
        data = self._buffers.get(key)
        if not data:
            raise ResourceUnavailableError(f"Resource '{key}' is not available")
        return bytes(data)
