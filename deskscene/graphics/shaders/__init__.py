# deskscene/graphics/shaders/__init__.py
from deskscene.graphics.shaders.uniform_names import (
    LIGHT_FIELDS,
    UniformNames,
    light_field,
)

__all__ = [
    "UniformNames",
    "LIGHT_FIELDS",
    "light_field",
]
