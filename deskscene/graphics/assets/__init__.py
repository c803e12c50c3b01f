# deskscene/graphics/assets/__init__.py
from deskscene.graphics.assets.material_manager import Material, MaterialTable
from deskscene.graphics.assets.texture_manager import (
    RegistryState,
    TextureRecord,
    TextureRegistry,
)

__all__ = [
    "Material",
    "MaterialTable",
    "RegistryState",
    "TextureRecord",
    "TextureRegistry",
]
