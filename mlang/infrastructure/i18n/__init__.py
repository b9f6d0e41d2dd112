"""i18n system - Minecraft language cache and translation resolver.

Downloads the game's language files on demand, keeps them on disk and in
memory, and resolves translation keys with fallback to a default language.

Main components:
- models: TranslationTable and typed resource identifiers
- store: TranslationStore, the in-memory cache keyed by language
- repository: LanguageFileRepository for local language files
- source: LanguageAssetSource for the remote asset server
- translator: Translator, the loader/resolver
- keys: translation key generation for game resources
- service: MLangService facade for host applications
"""

from mlang.infrastructure.i18n.factory import create_translator
from mlang.infrastructure.i18n.models import (
    Effect,
    Enchantment,
    EntityType,
    ItemStack,
    Material,
    NamespacedKey,
    TranslationParseError,
    TranslationTable,
    normalize_language_code,
)
from mlang.infrastructure.i18n.repository import LanguageFileRepository
from mlang.infrastructure.i18n.service import MLangService
from mlang.infrastructure.i18n.source import LanguageAssetSource
from mlang.infrastructure.i18n.store import TranslationStore
from mlang.infrastructure.i18n.translator import Translator

__all__ = [
    "TranslationTable",
    "TranslationParseError",
    "normalize_language_code",
    "Material",
    "Effect",
    "Enchantment",
    "EntityType",
    "ItemStack",
    "NamespacedKey",
    "TranslationStore",
    "LanguageFileRepository",
    "LanguageAssetSource",
    "Translator",
    "MLangService",
    "create_translator",
]
