"""
Service wiring.

This module provides the "container" that wires together all module
implementations over one shared store. Each module exposes its service
through an interface, and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings
from shared.storage import KeyValueStore, get_store

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.accounts.interfaces import IAccountService
    from modules.listings.interfaces import IListingService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached. Tests pass a
    store (usually an InMemoryStore) and settings explicitly.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._store = store
        self._settings = settings
        self._account_service: "IAccountService | None" = None
        self._listing_service: "IListingService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def store(self) -> KeyValueStore:
        if self._store is None:
            self._store = get_store()
        return self._store

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.accounts.service import AccountService
            self._account_service = AccountService(self.store, settings=self.settings)
        return self._account_service

    @property
    def listings(self) -> "IListingService":
        """Get the listing service instance."""
        if self._listing_service is None:
            from modules.listings.service import ListingService
            self._listing_service = ListingService(self.store, settings=self.settings)
        return self._listing_service

    def reset(self) -> None:
        """Drop cached services so the next access builds fresh ones."""
        self._account_service = None
        self._listing_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None
