# deskscene/scene.py
"""
Frame driver: turns an ordered list of draw commands into uniform writes
and mesh draws.

Mesh geometry is supplied by the caller through ``MeshProvider``; the
assembler only configures shader state and asks for a primitive to be drawn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

import moderngl

from deskscene.graphics.assets.material_manager import Material
from deskscene.graphics.core.settings import RendererSettings
from deskscene.graphics.light import LightDescriptor
from deskscene.graphics.render_context import RenderContext
from deskscene.math import TransformRequest

logger = logging.getLogger("deskscene")

WHITE = (1.0, 1.0, 1.0, 1.0)


class MeshProvider(Protocol):
    def load(self, primitive: str) -> None: ...

    def draw(self, primitive: str) -> None: ...


@dataclass(frozen=True, slots=True)
class DrawCommand:
    """
    One draw call.

    ``color`` and ``texture`` are mutually exclusive render modes. With
    neither set the primitive is drawn flat white. Without a uv_scale the
    renderer default applies.
    """

    primitive: str
    transform: TransformRequest = TransformRequest()
    material: Optional[str] = None
    color: Optional[Tuple[float, float, float, float]] = None
    texture: Optional[str] = None
    uv_scale: Optional[Tuple[float, float]] = None

    def __post_init__(self) -> None:
        if self.color is not None and self.texture is not None:
            raise ValueError(
                f"Draw of '{self.primitive}' sets both a color and a texture"
            )


@dataclass(slots=True)
class SceneSetup:
    """Resources a scene needs before its first draw."""

    textures: Sequence[Tuple[str | Path, str]] = ()
    materials: Sequence[Material] = ()
    global_ambient: Optional[Tuple[float, float, float]] = None
    lights: Sequence[LightDescriptor] = ()
    primitives: Sequence[str] = field(default_factory=lambda: ("plane", "box", "prism"))


class SceneAssembler:
    def __init__(
        self,
        gl: moderngl.Context,
        program: moderngl.Program,
        meshes: MeshProvider,
        settings: RendererSettings | None = None,
    ) -> None:
        self.context = RenderContext.create(gl, program, settings)
        self.meshes = meshes

    def prepare(self, setup: SceneSetup) -> List[str]:
        """
        Load materials, textures and lights, then the meshes.

        Returns the texture tags that failed to load; the scene still
        renders with whatever succeeded.
        """
        ctx = self.context
        ctx.materials.extend(setup.materials)

        failed = ctx.textures.load_many(setup.textures)
        if failed:
            logger.warning("Textures failed to load: %s", ", ".join(failed))

        ambient = setup.global_ambient or ctx.settings.global_ambient
        ctx.lighting.apply(ambient, setup.lights)

        for primitive in setup.primitives:
            self.meshes.load(primitive)
        return failed

    def draw(self, command: DrawCommand) -> None:
        """
        Configure shader state for one command and draw it.

        A command naming a texture that is not loaded is drawn flat white
        instead, so one failed image never stops the frame.
        """
        bridge = self.context.bridge

        bridge.set_transform(command.transform)
        if command.material is not None:
            bridge.apply_material(command.material, self.context.materials)

        if command.texture is None:
            bridge.set_flat_color(command.color or WHITE)
        elif command.texture not in self.context.textures:
            # A texture that failed to load must not leave the draw sampling
            # slot -1 or whatever unit the previous draw used.
            logger.warning(
                "Texture '%s' is not loaded; drawing '%s' flat white",
                command.texture,
                command.primitive,
            )
            bridge.set_flat_color(WHITE)
        else:
            bridge.set_texture(command.texture)

        bridge.set_uv_scale(*(command.uv_scale or self.context.settings.default_uv_scale))
        self.meshes.draw(command.primitive)

    def render(self, commands: Iterable[DrawCommand]) -> int:
        count = 0
        for command in commands:
            self.draw(command)
            count += 1
        return count

    def release(self) -> None:
        self.context.textures.release_all()
