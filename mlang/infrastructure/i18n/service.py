"""Translation service for the host application.

Provides a class-based interface to the language cache for dependency
injection and easier testing.
"""

from concurrent.futures import Future
from typing import List, Optional

from mlang.infrastructure.i18n.factory import create_translator
from mlang.infrastructure.i18n.keys import parse_game_version
from mlang.infrastructure.i18n.models import (
    Effect,
    Enchantment,
    EntityType,
    ItemStack,
    Material,
)
from mlang.infrastructure.i18n.translator import LoadCallback, Translator
from mlang.infrastructure.operations import OperationResult


class MLangService:
    """Class-based translation service.

    Thin facade over a Translator; all actual work is delegated to it.

    Usage:
        service = MLangService.for_server(data_dir, "1.20.4-R0.1-SNAPSHOT")
        service.set_default_language("ru_ru")

        result = await service.load_default_language_async()
        if result.is_success:
            print(service.translate_material(Material("STONE", is_block=True)))
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    @classmethod
    def for_server(
        cls,
        data_dir,
        server_version: Optional[str] = None,
        default_language: Optional[str] = None,
    ) -> "MLangService":
        """Create a service whose default version is detected from the host.

        Args:
            data_dir: Writable data directory of the host application.
            server_version: Version string reported by the host server
                (e.g., "1.20.4-R0.1-SNAPSHOT"). Falls back to settings.
            default_language: Optional default language.

        Returns:
            Configured MLangService
        """
        translator = create_translator(
            data_dir=data_dir, default_language=default_language
        )
        translator.set_default_version(
            parse_game_version(server_version, fallback=translator.default_version)
        )
        return cls(translator)

    @property
    def translator(self) -> Translator:
        return self._translator

    @property
    def default_language(self) -> str:
        return self._translator.default_language

    @property
    def default_version(self) -> str:
        return self._translator.default_version

    def set_default_language(self, language: str) -> None:
        self._translator.set_default_language(language)

    def set_default_version(self, version: str) -> None:
        self._translator.set_default_version(version)

    def load_language(self, language: str, version: Optional[str] = None) -> OperationResult:
        """Load a language synchronously.

        Args:
            language: Language code
            version: Game version (default: the configured default version)

        Returns:
            OperationResult of the load
        """
        return self._translator.load_language(
            language, version or self._translator.default_version
        )

    async def load_language_async(
        self, language: str, version: Optional[str] = None
    ) -> OperationResult:
        return await self._translator.load_language_async(
            language, version or self._translator.default_version
        )

    async def load_default_language_async(self) -> OperationResult:
        return await self._translator.load_default_language_async()

    def submit_load(
        self,
        language: str,
        version: Optional[str] = None,
        callback: Optional[LoadCallback] = None,
    ) -> Future:
        return self._translator.submit_load(
            language, version or self._translator.default_version, callback
        )

    def submit_default_load(self, callback: Optional[LoadCallback] = None) -> Future:
        return self._translator.submit_default_load(callback)

    def translate(self, key: str, language: Optional[str] = None) -> str:
        return self._translator.translate(key, language)

    def translate_material(self, material: Material, language: Optional[str] = None) -> str:
        return self._translator.translate_material(material, language)

    def translate_effect(self, effect: Effect, language: Optional[str] = None) -> str:
        return self._translator.translate_effect(effect, language)

    def translate_enchantment(
        self, enchantment: Enchantment, language: Optional[str] = None
    ) -> str:
        return self._translator.translate_enchantment(enchantment, language)

    def translate_entity(
        self, entity_type: EntityType, language: Optional[str] = None
    ) -> str:
        return self._translator.translate_entity(entity_type, language)

    def translate_item_stack(
        self, item_stack: Optional[ItemStack], language: Optional[str] = None
    ) -> str:
        return self._translator.translate_item_stack(item_stack, language)

    def translate_custom(self, text: str, language: Optional[str] = None) -> str:
        return self._translator.translate_custom(text, language)

    def is_language_loaded(self, language: str) -> bool:
        return self._translator.is_loaded(language)

    def get_loaded_languages(self) -> List[str]:
        return self._translator.get_loaded_languages()

    def shutdown(self, wait: bool = True) -> None:
        """Stop background loads and release the HTTP session."""
        self._translator.shutdown(wait=wait)
        self._translator.source.close()
