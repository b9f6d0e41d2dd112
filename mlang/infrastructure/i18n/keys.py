"""Translation key generation for game resources.

Pure functions mapping typed resource identifiers to the keys used in the
game's language files. The formats must match the asset files exactly.
"""

from typing import Optional

from mlang.infrastructure.i18n.models import (
    MINECRAFT_NAMESPACE,
    Effect,
    Enchantment,
    EntityType,
    ItemStack,
    Material,
)

AIR_KEY = "block.minecraft.air"
CUSTOM_PREFIX = "mlang."


def material_key(material: Material) -> str:
    """Generate translation key for a material.

    Returns:
        "block.minecraft.<name>" for blocks, "item.minecraft.<name>" otherwise.
    """
    if material.is_block:
        return f"block.minecraft.{material.name.lower()}"
    return f"item.minecraft.{material.name.lower()}"


def effect_key(effect: Effect) -> str:
    return f"effect.minecraft.{effect.name.lower()}"


def enchantment_key(enchantment: Enchantment) -> str:
    """Generate translation key for an enchantment.

    Core enchantments are lowercased; keys from other namespaces keep their
    case, e.g. "enchantment.myplugin.Lifesteal".
    """
    key = enchantment.key
    if key.namespace == MINECRAFT_NAMESPACE:
        return f"enchantment.minecraft.{key.key.lower()}"
    return f"enchantment.{key.namespace}.{key.key}"


def entity_key(entity_type: EntityType) -> str:
    return f"entity.minecraft.{entity_type.name.lower()}"


def item_stack_key(item_stack: Optional[ItemStack]) -> str:
    """Generate translation key for an item stack.

    Empty slots and air stacks map to "block.minecraft.air".
    """
    if item_stack is None or item_stack.is_empty:
        return AIR_KEY
    return material_key(item_stack.type)


def custom_key(text: str) -> str:
    """Generate translation key for free-form custom text.

    Example:
        custom_key("Welcome Message") -> "mlang.welcome_message"
    """
    return CUSTOM_PREFIX + text.lower().replace(" ", "_").replace("-", "_")


def parse_game_version(server_version: Optional[str], fallback: str) -> str:
    """Extract the game version from a server version string.

    Args:
        server_version: Version reported by the host (e.g., "1.20.4-R0.1-SNAPSHOT").
        fallback: Version to use when nothing can be detected.

    Returns:
        The part before the first "-" (e.g., "1.20.4"), or fallback.
    """
    if not server_version or not server_version.strip():
        return fallback
    version = server_version.strip().split("-", 1)[0]
    return version or fallback
