# deskscene/graphics/light.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from deskscene.graphics.errors import LightCapacityError
from deskscene.graphics.shaders.uniform_names import UniformNames, light_field
from deskscene.graphics.uniform_bridge import UniformBridge

logger = logging.getLogger("deskscene")


@dataclass(frozen=True)
class LightDescriptor:
    """
    Point light written to ``lightSources[index]``.

    focal_strength is the specular exponent used for this light's highlight;
    specular_intensity scales the highlight.
    """

    index: int
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    diffuse_color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    specular_color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    focal_strength: float = 32.0
    specular_intensity: float = 0.2


class LightingConfigurator:
    """Uploads the scene's lights. Holds no state of its own."""

    def __init__(self, bridge: UniformBridge, max_lights: int) -> None:
        self.bridge = bridge
        self.max_lights = max_lights

    def validate(self, lights: Sequence[LightDescriptor]) -> None:
        if len(lights) > self.max_lights:
            raise LightCapacityError(
                f"{len(lights)} lights given but the shader holds {self.max_lights}"
            )

        seen = set()
        for light in lights:
            if not 0 <= light.index < self.max_lights:
                raise LightCapacityError(
                    f"Light index {light.index} outside lightSources[0..{self.max_lights - 1}]"
                )
            if light.index in seen:
                raise ValueError(f"Light index {light.index} given twice")
            seen.add(light.index)

    def apply(
        self,
        global_ambient: Tuple[float, float, float],
        lights: Sequence[LightDescriptor],
    ) -> None:
        """Enable lighting and write the ambient term plus every light."""
        self.validate(lights)

        bridge = self.bridge
        bridge.set_lighting_enabled(True)
        bridge.set_vec3(UniformNames.GLOBAL_AMBIENT_COLOR, global_ambient)

        for light in lights:
            i = light.index
            bridge.set_vec3(light_field(i, "position"), light.position)
            bridge.set_vec3(light_field(i, "diffuseColor"), light.diffuse_color)
            bridge.set_vec3(light_field(i, "specularColor"), light.specular_color)
            bridge.set_float(light_field(i, "focalStrength"), light.focal_strength)
            bridge.set_float(
                light_field(i, "specularIntensity"), light.specular_intensity
            )

        logger.debug("Configured %d of %d lights", len(lights), self.max_lights)

    def disable(self) -> None:
        self.bridge.set_lighting_enabled(False)
