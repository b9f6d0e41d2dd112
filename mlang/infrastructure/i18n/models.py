"""Translation models for the language cache.

Defines the translation table loaded for a single language and the typed
game-resource identifiers that are mapped to translation keys.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional

from mlang.core.logging import get_module_logger

logger = get_module_logger()

MINECRAFT_NAMESPACE = "minecraft"


class TranslationParseError(ValueError):
    """Raised when language file content cannot be turned into a table."""


def normalize_language_code(language_code: str) -> str:
    """Normalize a language code for use as a cache key.

    Args:
        language_code: Language code (e.g., "en_US", " ru_ru ").

    Returns:
        Lowercased, stripped language code (e.g., "en_us").

    Raises:
        ValueError: If the language code is empty or blank.
    """
    if language_code is None or not str(language_code).strip():
        raise ValueError("Language code must not be empty")
    return str(language_code).strip().lower()


@dataclass(frozen=True)
class TranslationTable:
    """Complete key → string mapping for one loaded language.

    Immutable after load. Keys are exact-match and case-sensitive.

    Attributes:
        language: Normalized language code the table belongs to.
        messages: Read-only mapping of translation key to translation string.
        source: Local file the table was parsed from (if any).
        loaded_at: Timestamp (ISO 8601) when the table was built.
    """

    language: str
    messages: Mapping[str, str] = field(default_factory=dict)
    source: Optional[Path] = None
    loaded_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def __post_init__(self):
        object.__setattr__(self, "language", normalize_language_code(self.language))
        if not isinstance(self.messages, MappingProxyType):
            object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get(self, key: str) -> Optional[str]:
        """Retrieve a translation by key.

        Returns:
            Translation string, or None if the key is absent. An empty
            translation is returned as an empty string.
        """
        return self.messages.get(key)

    def has(self, key: str) -> bool:
        return key in self.messages

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)

    @classmethod
    def from_json_bytes(
        cls,
        language: str,
        raw: bytes,
        source: Optional[Path] = None,
    ) -> "TranslationTable":
        """Parse a flat JSON object into a table.

        Non-string values are skipped; the rest of the file is kept.

        Args:
            language: Language code of the file.
            raw: File content, UTF-8 encoded (a BOM is tolerated).
            source: Path the content was read from, for diagnostics.

        Returns:
            TranslationTable for the language.

        Raises:
            TranslationParseError: If the content is empty, not valid JSON,
                or not a JSON object.
        """
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise TranslationParseError(f"Language file is not UTF-8: {e}") from e

        if not text.strip():
            raise TranslationParseError("Language file is empty")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise TranslationParseError(f"Invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise TranslationParseError(
                f"Expected a JSON object, got {type(data).__name__}"
            )

        messages = {}
        for key, value in data.items():
            if not isinstance(value, str):
                logger.warning(
                    "skipped_non_string_translation",
                    language=language,
                    key=key,
                    value_type=type(value).__name__,
                )
                continue
            messages[key] = value

        return cls(language=language, messages=messages, source=source)


@dataclass(frozen=True)
class Material:
    """Block or item type.

    Attributes:
        name: Enum-style material name (e.g., "STONE", "DIAMOND_SWORD").
        is_block: Whether the material is placeable as a block.
    """

    name: str
    is_block: bool = False

    AIR: ClassVar["Material"]

    @property
    def is_air(self) -> bool:
        return self.name.upper() == "AIR"


Material.AIR = Material("AIR", is_block=True)


@dataclass(frozen=True)
class Effect:
    """Status effect type (e.g., "SPEED", "REGENERATION")."""

    name: str


@dataclass(frozen=True)
class NamespacedKey:
    """Namespaced resource key (e.g., "minecraft:sharpness").

    Attributes:
        namespace: Owning namespace ("minecraft" for core content).
        key: Resource path inside the namespace.
    """

    namespace: str
    key: str

    def __str__(self) -> str:
        return f"{self.namespace}:{self.key}"

    @classmethod
    def minecraft(cls, key: str) -> "NamespacedKey":
        return cls(namespace=MINECRAFT_NAMESPACE, key=key)

    @classmethod
    def from_string(cls, value: str) -> "NamespacedKey":
        """Create a NamespacedKey from "namespace:key" form.

        A value without a colon is placed in the core namespace.

        Raises:
            ValueError: If namespace or key is empty.
        """
        namespace, sep, key = value.partition(":")
        if not sep:
            namespace, key = MINECRAFT_NAMESPACE, namespace
        if not namespace or not key:
            raise ValueError(f"Namespaced key must be 'namespace:key': {value}")
        return cls(namespace=namespace, key=key)


@dataclass(frozen=True)
class Enchantment:
    """Enchantment identified by its namespaced key."""

    key: NamespacedKey


@dataclass(frozen=True)
class EntityType:
    """Entity type (e.g., "CREEPER", "ENDER_DRAGON")."""

    name: str


@dataclass(frozen=True)
class ItemStack:
    """Composed item: a material plus metadata.

    Attributes:
        type: Material of the stack, None for an empty slot.
        amount: Stack size.
    """

    type: Optional[Material] = None
    amount: int = 1

    @property
    def is_empty(self) -> bool:
        return self.type is None or self.type.is_air
