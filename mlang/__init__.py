"""mlang - Minecraft localization cache.

Usage:
    from mlang import MLangService, Material

    service = MLangService.for_server(plugin_data_dir, server_version)
    service.set_default_language("ru_ru")
    service.submit_default_load(
        lambda result: print(service.translate_material(Material("STONE", True)))
    )
"""

from mlang.infrastructure.i18n import (
    Effect,
    Enchantment,
    EntityType,
    ItemStack,
    Material,
    MLangService,
    NamespacedKey,
    Translator,
    create_translator,
)
from mlang.infrastructure.operations import OperationResult, OperationStatus

__version__ = "1.0.0"

__all__ = [
    "MLangService",
    "Translator",
    "create_translator",
    "OperationResult",
    "OperationStatus",
    "Material",
    "Effect",
    "Enchantment",
    "EntityType",
    "ItemStack",
    "NamespacedKey",
]
