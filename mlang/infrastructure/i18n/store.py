"""In-memory translation store keyed by language code."""

from threading import Lock
from typing import Dict, FrozenSet, Optional

from mlang.core.logging import get_module_logger
from mlang.infrastructure.i18n.models import TranslationTable, normalize_language_code

logger = get_module_logger()


class TranslationStore:
    """Holds one fully parsed TranslationTable per language.

    Entries are only ever added, never evicted or replaced: the first table
    registered for a language wins. Lookups are lock-free; insertion and
    snapshots are guarded by a lock.
    """

    def __init__(self):
        self._tables: Dict[str, TranslationTable] = {}
        self._lock = Lock()

    def has(self, language: str) -> bool:
        return normalize_language_code(language) in self._tables

    def get(self, language: str, key: str) -> Optional[str]:
        """Look up a single translation.

        Args:
            language: Language code.
            key: Translation key (exact match).

        Returns:
            Translation string, or None when the language is not loaded or
            the key is absent.
        """
        table = self._tables.get(normalize_language_code(language))
        if table is None:
            return None
        return table.get(key)

    def get_table(self, language: str) -> Optional[TranslationTable]:
        return self._tables.get(normalize_language_code(language))

    def put(self, language: str, table: TranslationTable) -> bool:
        """Register a table for a language.

        Args:
            language: Language code the table is registered under.
            table: Fully parsed table for that language.

        Returns:
            True if the table was inserted, False if the language was already
            present (the existing table is kept).

        Raises:
            ValueError: If the table belongs to a different language.
        """
        language = normalize_language_code(language)
        if table.language != language:
            raise ValueError(
                f"Table for {table.language} cannot be stored under {language}"
            )

        with self._lock:
            if language in self._tables:
                logger.debug("language_already_stored", language=language)
                return False
            self._tables[language] = table

        logger.debug("stored_language", language=language, key_count=len(table))
        return True

    def list_loaded(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._tables)

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and bool(language.strip()) and self.has(language)

    def __len__(self) -> int:
        return len(self._tables)
