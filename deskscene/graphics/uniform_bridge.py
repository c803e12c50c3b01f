# deskscene/graphics/uniform_bridge.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Set, Tuple

import moderngl
import numpy as np

from deskscene.graphics.assets.material_manager import Material, MaterialTable
from deskscene.graphics.errors import TextureLifecycleError
from deskscene.graphics.shaders.uniform_names import UniformNames
from deskscene.graphics.util.ids import NOT_FOUND
from deskscene.graphics.utils.uniforms import pack_mat4, set_uniform
from deskscene.math import TransformRequest

if TYPE_CHECKING:
    from deskscene.graphics.assets.texture_manager import TextureRegistry

logger = logging.getLogger("deskscene")

Color = Tuple[float, float, float, float]


@dataclass(slots=True)
class ShaderDrawState:
    """
    What the bridge last wrote for the current draw.

    The shader keeps whatever it was given until it is overwritten, so this
    is a record of bleed-through risk, not a cache: nothing is skipped
    because it matches a previous value.
    """

    model: Optional[np.ndarray] = None
    use_texture: bool = False
    use_lighting: bool = False
    active_color: Color = (1.0, 1.0, 1.0, 1.0)
    active_sampler_slot: int = NOT_FOUND
    active_material: Optional[Material] = None
    uv_scale: Tuple[float, float] = (1.0, 1.0)


class UniformBridge:
    """
    Writes named uniforms into a linked program.

    Every write goes straight to the program; there is no batching and no
    dirty tracking. Names the program does not expose are skipped (and
    logged once), matching how GL treats optimised-out uniforms.
    """

    def __init__(
        self,
        program: moderngl.Program,
        textures: Optional[TextureRegistry] = None,
    ) -> None:
        self.program = program
        self.textures = textures
        self.state = ShaderDrawState()
        self._missing: Set[str] = set()

    # -- Primitive writers --

    def _write(self, name: str, value) -> bool:
        if set_uniform(self.program, name, value):
            return True
        if name not in self._missing:
            self._missing.add(name)
            logger.debug("Uniform '%s' not found in program; write skipped", name)
        return False

    def set_matrix4(self, name: str, value: np.ndarray) -> bool:
        return self._write(name, pack_mat4(value))

    def set_vec4(self, name: str, value: Sequence[float]) -> bool:
        x, y, z, w = value
        return self._write(name, (float(x), float(y), float(z), float(w)))

    def set_vec3(self, name: str, value: Sequence[float]) -> bool:
        x, y, z = value
        return self._write(name, (float(x), float(y), float(z)))

    def set_vec2(self, name: str, value: Sequence[float]) -> bool:
        x, y = value
        return self._write(name, (float(x), float(y)))

    def set_float(self, name: str, value: float) -> bool:
        return self._write(name, float(value))

    def set_int(self, name: str, value: int) -> bool:
        return self._write(name, int(value))

    def set_bool(self, name: str, value: bool) -> bool:
        return self._write(name, bool(value))

    def set_texture_slot(self, name: str, slot_index: int) -> bool:
        return self._write(name, int(slot_index))

    # -- Per-draw state --

    def set_transform(self, transform: TransformRequest | np.ndarray) -> np.ndarray:
        """Compose (if needed) and upload the model matrix."""
        if isinstance(transform, TransformRequest):
            matrix = transform.matrix()
        else:
            matrix = np.asarray(transform, dtype=np.float32)

        self.set_matrix4(UniformNames.MODEL, matrix)
        self.state.model = matrix
        return matrix

    def set_flat_color(self, rgba: Sequence[float]) -> None:
        """Draw with a solid color. Turns texturing off for this draw."""
        if len(rgba) != 4:
            raise ValueError(f"Flat color needs 4 components, got {len(rgba)}")
        color = tuple(float(c) for c in rgba)

        self.set_bool(UniformNames.USE_TEXTURE, False)
        self.set_vec4(UniformNames.OBJECT_COLOR, color)
        self.state.use_texture = False
        self.state.active_color = color

    def set_texture(self, tag: str) -> bool:
        """
        Draw with the texture registered under ``tag``.

        Returns False if the tag is unknown. The -1 sentinel is still
        written, and a draw issued with it samples an undefined unit, so
        callers should check the result before drawing.
        """
        if self.textures is None:
            raise TextureLifecycleError("Bridge has no texture registry")
        self.textures.require_bound()

        slot = self.textures.resolve_slot(tag)

        self.set_bool(UniformNames.USE_TEXTURE, True)
        self.set_texture_slot(UniformNames.OBJECT_TEXTURE, slot)
        self.state.use_texture = True
        self.state.active_sampler_slot = slot

        if slot == NOT_FOUND:
            logger.warning("Texture '%s' is not registered; slot %d written", tag, slot)
            return False
        return True

    def set_uv_scale(self, u: float, v: float) -> None:
        self.set_vec2(UniformNames.UV_SCALE, (u, v))
        self.state.uv_scale = (float(u), float(v))

    def set_material(self, material: Material) -> None:
        self.set_vec3(UniformNames.MATERIAL_AMBIENT_COLOR, material.ambient_color)
        self.set_float(
            UniformNames.MATERIAL_AMBIENT_STRENGTH, material.ambient_strength
        )
        self.set_vec3(UniformNames.MATERIAL_DIFFUSE_COLOR, material.diffuse_color)
        self.set_vec3(UniformNames.MATERIAL_SPECULAR_COLOR, material.specular_color)
        self.set_float(UniformNames.MATERIAL_SHININESS, material.shininess)
        self.state.active_material = material

    def apply_material(self, tag: str, materials: MaterialTable) -> bool:
        """Look up ``tag`` and upload it. Unknown tags write nothing."""
        material = materials.find(tag)
        if material is None:
            logger.warning("Material '%s' is not defined; material unchanged", tag)
            return False
        self.set_material(material)
        return True

    def set_lighting_enabled(self, enabled: bool) -> None:
        self.set_bool(UniformNames.USE_LIGHTING, enabled)
        self.state.use_lighting = bool(enabled)

    def set_camera(
        self,
        view: np.ndarray,
        projection: np.ndarray,
        position: Sequence[float],
    ) -> None:
        self.set_matrix4(UniformNames.VIEW, view)
        self.set_matrix4(UniformNames.PROJECTION, projection)
        self.set_vec3(UniformNames.VIEW_POSITION, position)
