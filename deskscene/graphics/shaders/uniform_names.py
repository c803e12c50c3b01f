# deskscene/graphics/shaders/uniform_names.py
"""
Names of every uniform the scene shader is expected to declare.

Writers and the GLSL source must agree on these strings; a mismatch is not
an error in GL, the write just goes nowhere.
"""

from __future__ import annotations

from typing import Final, Tuple


class UniformNames:
    MODEL: Final = "model"
    VIEW: Final = "view"
    PROJECTION: Final = "projection"
    VIEW_POSITION: Final = "viewPosition"

    OBJECT_COLOR: Final = "objectColor"
    OBJECT_TEXTURE: Final = "objectTexture"
    USE_TEXTURE: Final = "bUseTexture"
    USE_LIGHTING: Final = "bUseLighting"
    UV_SCALE: Final = "UVscale"

    MATERIAL_AMBIENT_COLOR: Final = "material.ambientColor"
    MATERIAL_AMBIENT_STRENGTH: Final = "material.ambientStrength"
    MATERIAL_DIFFUSE_COLOR: Final = "material.diffuseColor"
    MATERIAL_SPECULAR_COLOR: Final = "material.specularColor"
    MATERIAL_SHININESS: Final = "material.shininess"

    GLOBAL_AMBIENT_COLOR: Final = "globalAmbientColor"
    LIGHT_ARRAY: Final = "lightSources"


# Fields of the GLSL LightSource struct, in declaration order.
LIGHT_FIELDS: Tuple[str, ...] = (
    "position",
    "diffuseColor",
    "specularColor",
    "focalStrength",
    "specularIntensity",
)


def light_field(index: int, field: str) -> str:
    """Uniform name of one field of lightSources[index]."""
    if field not in LIGHT_FIELDS:
        raise ValueError(f"Unknown light field '{field}'")
    return f"{UniformNames.LIGHT_ARRAY}[{index}].{field}"
