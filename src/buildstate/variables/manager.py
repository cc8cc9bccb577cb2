"""Owner of the variable stores for every store ID.

Whatever orchestrates character builds holds one VariableManager and passes
it around; stores live as long as the manager does.
"""

import threading
from collections.abc import Mapping

import structlog

from buildstate.config import Settings, get_settings

from .defaults import load_default_registry
from .store import VariableStore
from .types import Variable

logger = structlog.get_logger(__name__)


class VariableManager:
    """Maps store IDs to their VariableStore, creating stores on first access."""

    def __init__(
        self,
        settings: Settings | None = None,
        registry: Mapping[str, Variable] | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._registry = registry
        self._stores: dict[str, VariableStore] = {}
        self._lock = threading.Lock()

    @property
    def registry(self) -> Mapping[str, Variable]:
        """The default registry new stores are seeded with."""
        if self._registry is None:
            self._registry = load_default_registry(self._settings.default_registry_path)
        return self._registry

    def get_store(self, store_id: str | None = None) -> VariableStore:
        """
        Get the store for a store ID, creating it from the registry if needed.

        Args:
            store_id: Store to get; the configured character store when omitted

        Returns:
            The VariableStore for that ID
        """
        store_id = store_id or self._settings.character_store_id
        with self._lock:
            store = self._stores.get(store_id)
            if store is None:
                store = VariableStore(store_id, registry=self.registry, settings=self._settings)
                self._stores[store_id] = store
                logger.debug("variable_store_created", store_id=store_id)
            return store

    def has_store(self, store_id: str) -> bool:
        """Check whether a store has been created for a store ID."""
        with self._lock:
            return store_id in self._stores

    def store_ids(self) -> list[str]:
        """Get the IDs of all stores created so far."""
        with self._lock:
            return list(self._stores)

    def reset_store(self, store_id: str) -> bool:
        """
        Clear one store back to the registry defaults.

        The store object is kept, so handles to it stay attached to this manager.

        Returns:
            True if a store existed for the ID
        """
        with self._lock:
            store = self._stores.get(store_id)
            if store is not None:
                store.clear()

        if store is not None:
            logger.info("variable_store_reset", store_id=store_id)
        return store is not None

    def reset_variables(self) -> None:
        """Clear the stores of every store ID at once."""
        with self._lock:
            stores = list(self._stores.values())
            for store in stores:
                store.clear()

        logger.info("variables_reset", store_count=len(stores))

    def __repr__(self) -> str:
        return f"VariableManager(stores={self.store_ids()!r})"
