"""Translation resolver and language loader.

Core component of the language cache: makes a language available
(memory → local file → remote download) and resolves keys with fallback to
the default language.
"""

import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Callable, Dict, List, Optional

from mlang.core.logging import get_module_logger
from mlang.infrastructure.i18n import keys
from mlang.infrastructure.i18n.models import (
    Effect,
    Enchantment,
    EntityType,
    ItemStack,
    Material,
    normalize_language_code,
)
from mlang.infrastructure.i18n.repository import LanguageFileRepository
from mlang.infrastructure.i18n.source import LanguageAssetSource
from mlang.infrastructure.i18n.store import TranslationStore
from mlang.infrastructure.operations import OperationResult

logger = get_module_logger()

LoadCallback = Callable[[OperationResult], None]


class Translator:
    """Loads languages on demand and resolves translation keys.

    Each instance owns its own TranslationStore and default language/version;
    create one per host application and pass it to the code that needs it.

    Concurrent loads of the same language are collapsed: the first caller
    performs the download and parse, every other caller waits for and
    receives the same OperationResult.

    Attributes:
        repository: Local language file repository.
        source: Remote asset source used when no local file exists.
        store: In-memory tables of loaded languages.
        load_timeout: Upper bound in seconds for asynchronous loads.
    """

    def __init__(
        self,
        repository: LanguageFileRepository,
        source: LanguageAssetSource,
        default_language: str = "en_us",
        default_version: str = "1.20.4",
        store: Optional[TranslationStore] = None,
        load_timeout: Optional[float] = 60.0,
        max_workers: int = 4,
    ):
        self.repository = repository
        self.source = source
        self.store = store if store is not None else TranslationStore()
        self.load_timeout = load_timeout
        self.max_workers = max_workers
        self._default_language = normalize_language_code(default_language)
        self._default_version = self._validate_version(default_version)

        self._inflight: Dict[str, Future] = {}
        self._inflight_lock = Lock()

        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = Lock()
        self._executor_shutdown = False

        logger.info(
            "initialized_translator",
            default_language=self._default_language,
            default_version=self._default_version,
            languages_dir=str(repository.languages_dir),
        )

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def default_version(self) -> str:
        return self._default_version

    def set_default_language(self, language: str) -> None:
        """Set the default language (case-insensitive, stored lowercased).

        Raises:
            ValueError: If the language code is empty.
        """
        self._default_language = normalize_language_code(language)
        logger.info("default_language_changed", language=self._default_language)

    def set_default_version(self, version: str) -> None:
        """Set the game version used for default downloads (stored as-is).

        Raises:
            ValueError: If the version is empty.
        """
        self._default_version = self._validate_version(version)
        logger.info("default_version_changed", version=self._default_version)

    def is_loaded(self, language: str) -> bool:
        return self.store.has(language)

    def get_loaded_languages(self) -> List[str]:
        return sorted(self.store.list_loaded())

    def load_language(self, language: str, version: str) -> OperationResult:
        """Make a language available in memory.

        1. Already loaded: succeed without any I/O.
        2. No local file: download it from the asset source.
        3. Parse the local file and register the table.

        Failures are returned, never raised, and never leave a cache entry.

        Args:
            language: Language code (case-insensitive).
            version: Game version used to address the remote file. Only
                relevant the first time a language file is materialized.

        Returns:
            OperationResult; on success data is the TranslationTable.

        Raises:
            ValueError: If language or version is empty.
        """
        language = normalize_language_code(language)
        version = self._validate_version(version).lower()

        if self.store.has(language):
            return OperationResult.success(
                data=self.store.get_table(language), message="already_loaded"
            )

        with self._inflight_lock:
            pending = self._inflight.get(language)
            leader = pending is None
            if leader:
                pending = Future()
                self._inflight[language] = pending

        if not leader:
            logger.debug("awaiting_inflight_language_load", language=language)
            return pending.result()

        result = OperationResult.permanent_error(
            f"Loading {language} was interrupted", error_code="LOAD_ERROR"
        )
        try:
            result = self._load(language, version)
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("language_load_failed", language=language, error=str(e))
            result = OperationResult.permanent_error(
                f"Unexpected error loading {language}: {e}",
                error_code="LOAD_ERROR",
            )
        finally:
            with self._inflight_lock:
                self._inflight.pop(language, None)
            # Waiters must always be released, even on BaseException.
            pending.set_result(result)

        return result

    def _load(self, language: str, version: str) -> OperationResult:
        # Another leader may have finished between the fast-path check and
        # acquiring the in-flight slot.
        if self.store.has(language):
            return OperationResult.success(
                data=self.store.get_table(language), message="already_loaded"
            )

        if not self.repository.exists(language):
            downloaded = self.source.download(
                language, version, self.repository.path_for(language)
            )
            if not downloaded.is_success:
                return downloaded

        parsed = self.repository.read_table(language)
        if not parsed.is_success:
            return parsed

        self.store.put(language, parsed.data)
        logger.info(
            "loaded_language",
            language=language,
            version=version,
            key_count=len(parsed.data),
        )
        return OperationResult.success(
            data=self.store.get_table(language), message="loaded"
        )

    async def load_language_async(
        self,
        language: str,
        version: str,
        timeout: Optional[float] = None,
    ) -> OperationResult:
        """Load a language without blocking the event loop.

        The blocking load runs in a worker thread and is bounded by timeout
        (default: load_timeout). A timed-out load resolves to a
        TRANSIENT_ERROR with error_code LOAD_TIMEOUT.

        Args:
            language: Language code.
            version: Game version.
            timeout: Optional override of load_timeout, in seconds.

        Returns:
            OperationResult of the load.
        """
        timeout = self.load_timeout if timeout is None else timeout
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.load_language, language, version),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            logger.error(
                "language_load_timed_out",
                language=language,
                version=version,
                timeout=timeout,
            )
            return OperationResult.transient_error(
                f"Loading {language} timed out after {timeout}s",
                error_code="LOAD_TIMEOUT",
            )
        except ValueError:
            raise
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("language_load_failed", language=language, error=str(e))
            return OperationResult.permanent_error(
                f"Unexpected error loading {language}: {e}",
                error_code="LOAD_ERROR",
            )

    async def load_default_language_async(self) -> OperationResult:
        return await self.load_language_async(
            self._default_language, self._default_version
        )

    def submit_load(
        self,
        language: str,
        version: str,
        callback: Optional[LoadCallback] = None,
    ) -> Future:
        """Submit a language load to the background executor.

        Args:
            language: Language code.
            version: Game version.
            callback: Optional function called with the OperationResult once
                the load completes. Exceptions raised by it are logged.

        Returns:
            Future resolving to the OperationResult. If the executor has been
            shut down, the future is already completed with an error result.
        """
        executor = self._get_or_create_executor()
        if executor is None:
            logger.error("translator_executor_unavailable", language=language)
            future: Future = Future()
            result = OperationResult.permanent_error(
                "Translator has been shut down", error_code="EXECUTOR_SHUTDOWN"
            )
            future.set_result(result)
            self._run_callback(callback, result, language)
            return future

        return executor.submit(self._background_load, language, version, callback)

    def submit_default_load(self, callback: Optional[LoadCallback] = None) -> Future:
        return self.submit_load(self._default_language, self._default_version, callback)

    def _background_load(
        self, language: str, version: str, callback: Optional[LoadCallback]
    ) -> OperationResult:
        try:
            result = self.load_language(language, version)
        except ValueError as e:
            result = OperationResult.permanent_error(str(e), error_code="INVALID_INPUT")
        self._run_callback(callback, result, language)
        return result

    @staticmethod
    def _run_callback(
        callback: Optional[LoadCallback], result: OperationResult, language: str
    ) -> None:
        if callback is None:
            return
        try:
            callback(result)
        except Exception as e:  # pylint: disable=broad-except
            logger.exception(
                "language_load_callback_failed", language=language, error=str(e)
            )

    def _get_or_create_executor(self) -> Optional[ThreadPoolExecutor]:
        with self._executor_lock:
            if self._executor_shutdown:
                return None
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix="mlang-loader",
                )
                logger.debug(
                    "created_translator_executor", max_workers=self.max_workers
                )
            return self._executor

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the background executor and refuse further submissions.

        Idempotent.
        """
        with self._executor_lock:
            self._executor_shutdown = True
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)
            logger.debug("translator_executor_shut_down", wait=wait)

    def translate(self, key: str, language: Optional[str] = None) -> str:
        """Resolve a translation key.

        Lookup order: the requested language, then the default language,
        then the key itself. Never performs I/O and never raises.

        Args:
            key: Translation key (exact match).
            language: Language code; the default language when omitted.

        Returns:
            The translation, or key when no loaded language has it.
        """
        default_language = self._default_language
        try:
            language = normalize_language_code(language) if language else default_language
        except ValueError:
            language = default_language

        message = self.store.get(language, key)
        if message is not None:
            return message

        if language != default_language:
            return self.translate(key, default_language)

        logger.debug("translation_not_found", key=key, language=language)
        return key

    def translate_material(self, material: Material, language: Optional[str] = None) -> str:
        return self.translate(keys.material_key(material), language)

    def translate_effect(self, effect: Effect, language: Optional[str] = None) -> str:
        return self.translate(keys.effect_key(effect), language)

    def translate_enchantment(
        self, enchantment: Enchantment, language: Optional[str] = None
    ) -> str:
        return self.translate(keys.enchantment_key(enchantment), language)

    def translate_entity(
        self, entity_type: EntityType, language: Optional[str] = None
    ) -> str:
        return self.translate(keys.entity_key(entity_type), language)

    def translate_item_stack(
        self, item_stack: Optional[ItemStack], language: Optional[str] = None
    ) -> str:
        return self.translate(keys.item_stack_key(item_stack), language)

    def translate_custom(self, text: str, language: Optional[str] = None) -> str:
        return self.translate(keys.custom_key(text), language)

    @staticmethod
    def _validate_version(version: str) -> str:
        if version is None or not str(version).strip():
            raise ValueError("Version must not be empty")
        return version
