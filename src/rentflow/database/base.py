"""Abstract persistence gateway interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

TENANTS_NAMESPACE = "tenants"
PROPERTIES_NAMESPACE = "properties"
THEME_NAMESPACE = "theme"


class Database(ABC):
    """Abstract key-value document store for rentflow.

    Each namespace holds one JSON document that is overwritten wholesale on
    every save.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def load(self, namespace: str) -> Optional[Any]:
        """Load the JSON document stored under namespace.

        Returns None if nothing is stored or the stored text is not valid JSON.
        """
        pass

    @abstractmethod
    def save(self, namespace: str, payload: Any) -> bool:
        """Overwrite the document stored under namespace.

        Returns True on success. Failures are logged and reported as False,
        never raised.
        """
        pass
