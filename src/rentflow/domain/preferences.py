"""User preference domain service."""

import logging

from rentflow.database.base import Database, THEME_NAMESPACE

logger = logging.getLogger(__name__)


class PreferencesService:
    """Service for the dark-mode theme flag."""

    def __init__(self, db: Database):
        """Initialize preferences service.

        Args:
            db: Database instance
        """
        self.db = db
        stored = db.load(THEME_NAMESPACE)
        if stored is not None and not isinstance(stored, bool):
            logger.warning("Ignoring malformed theme flag %r", stored)
            stored = None
        self.dark_mode: bool = bool(stored)

    def toggle_theme(self) -> bool:
        """Flip the dark-mode flag and persist it.

        Returns:
            The new flag
        """
        self.dark_mode = not self.dark_mode
        if not self.db.save(THEME_NAMESPACE, self.dark_mode):
            logger.error("Theme flag was not saved")
        return self.dark_mode
