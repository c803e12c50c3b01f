# deskscene/__init__.py
from deskscene.graphics.assets import Material, MaterialTable, TextureRegistry
from deskscene.graphics.core import RendererSettings
from deskscene.graphics.errors import (
    LightCapacityError,
    SceneConfigurationError,
    TextureCapacityError,
    TextureLifecycleError,
)
from deskscene.graphics.light import LightDescriptor, LightingConfigurator
from deskscene.graphics.render_context import RenderContext
from deskscene.graphics.uniform_bridge import ShaderDrawState, UniformBridge
from deskscene.math import TransformRequest, compose_transform
from deskscene.scene import DrawCommand, SceneAssembler, SceneSetup

__version__ = "0.1.0"

__all__ = [
    "DrawCommand",
    "LightCapacityError",
    "LightDescriptor",
    "LightingConfigurator",
    "Material",
    "MaterialTable",
    "RenderContext",
    "RendererSettings",
    "SceneAssembler",
    "SceneConfigurationError",
    "SceneSetup",
    "ShaderDrawState",
    "TextureCapacityError",
    "TextureLifecycleError",
    "TextureRegistry",
    "TransformRequest",
    "UniformBridge",
    "compose_transform",
]
