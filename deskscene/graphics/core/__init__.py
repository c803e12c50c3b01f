# deskscene/graphics/core/__init__.py
from deskscene.graphics.core.settings import RendererSettings

__all__ = ["RendererSettings"]
