# deskscene/graphics/render_context.py
from __future__ import annotations

from dataclasses import dataclass

import moderngl

from deskscene.graphics.assets.material_manager import MaterialTable
from deskscene.graphics.assets.texture_manager import TextureRegistry
from deskscene.graphics.core.settings import RendererSettings
from deskscene.graphics.light import LightingConfigurator
from deskscene.graphics.uniform_bridge import UniformBridge


@dataclass(slots=True)
class RenderContext:
    """
    Everything a draw needs, passed explicitly by the frame driver.

    One context per shader program; the bridge's draw state belongs to it
    and is overwritten by every draw.
    """

    settings: RendererSettings
    textures: TextureRegistry
    materials: MaterialTable
    bridge: UniformBridge
    lighting: LightingConfigurator

    @classmethod
    def create(
        cls,
        gl: moderngl.Context,
        program: moderngl.Program,
        settings: RendererSettings | None = None,
    ) -> RenderContext:
        settings = settings or RendererSettings()
        textures = TextureRegistry(gl, max_slots=settings.max_texture_slots)
        bridge = UniformBridge(program, textures=textures)
        return cls(
            settings=settings,
            textures=textures,
            materials=MaterialTable(),
            bridge=bridge,
            lighting=LightingConfigurator(bridge, settings.max_lights),
        )
