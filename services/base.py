"""Base services container for dependency injection."""

from config import Config


class Services:
    """Container for all application services.

    One container owns one ledger. Nothing is shared between containers, so
    tests and the interactive shell each get an independent store.

    Args:
        config: Application configuration object.
        store: Optional record store for testing. If None, an empty one is created.
    """

    def __init__(self, config: Config, store=None):
        self.config = config

        # Lazy import to avoid circular dependencies
        from services.records import RecordStore
        from services.queries import QueryEngine

        self.records = store if store is not None else RecordStore()
        self.queries = QueryEngine(self.records)
