"""Factory functions for creating i18n components.

Provides convenience functions for building a Translator wired with the
local repository and remote asset source from settings.
"""

from pathlib import Path
from typing import Optional, Union

from mlang.core.config import Settings, get_settings
from mlang.core.logging import get_module_logger
from mlang.infrastructure.i18n.repository import LanguageFileRepository
from mlang.infrastructure.i18n.source import LanguageAssetSource
from mlang.infrastructure.i18n.store import TranslationStore
from mlang.infrastructure.i18n.translator import Translator

logger = get_module_logger()


def create_translator(
    data_dir: Optional[Union[str, Path]] = None,
    default_language: Optional[str] = None,
    default_version: Optional[str] = None,
    settings: Optional[Settings] = None,
    store: Optional[TranslationStore] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Language files are kept in <data_dir>/<languages_subdir>, which is
    created if missing.

    Args:
        data_dir: Writable data directory of the host (default: MLANG_DATA_DIR)
        default_language: Default language (default: MLANG_DEFAULT_LANGUAGE)
        default_version: Default game version (default: MLANG_DEFAULT_VERSION)
        settings: Settings to read from (default: process settings)
        store: Optional pre-built store, e.g. to share tables between translators

    Returns:
        Translator: Configured translator instance

    Usage:
        translator = create_translator(data_dir=plugin_data_dir)
        translator.set_default_language("ru_ru")
        await translator.load_default_language_async()
    """
    settings = settings or get_settings()
    config = settings.mlang

    languages_dir = Path(data_dir or config.data_dir) / config.languages_subdir
    repository = LanguageFileRepository(languages_dir)
    source = LanguageAssetSource(
        base_url=config.assets_base_url,
        timeout=(config.connect_timeout_seconds, config.read_timeout_seconds),
        chunk_size=config.download_chunk_size,
    )

    translator = Translator(
        repository=repository,
        source=source,
        default_language=default_language or config.default_language,
        default_version=default_version or config.default_version,
        store=store,
        load_timeout=config.load_timeout_seconds,
        max_workers=config.executor_max_workers,
    )
    logger.info(
        "translator_created",
        languages_dir=str(languages_dir),
        assets_base_url=config.assets_base_url,
    )
    return translator
