# deskscene/assets/__init__.py
from deskscene.assets.importers.texture import TextureImporter
from deskscene.assets.types import TextureData

__all__ = [
    "TextureData",
    "TextureImporter",
]
