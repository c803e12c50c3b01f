# deskscene/graphics/core/settings.py
from dataclasses import dataclass
from typing import Tuple

# Sampler units the shader's texture array is compiled for.
MAX_TEXTURE_SLOTS = 16


@dataclass(frozen=True, slots=True)
class RendererSettings:
    """
    Hardware and shader limits the core validates against.

    max_texture_slots matches the sampler units GL guarantees to a fragment
    shader; max_lights must equal the size of the shader's lightSources array.
    """

    max_texture_slots: int = MAX_TEXTURE_SLOTS
    max_lights: int = 5

    default_uv_scale: Tuple[float, float] = (1.0, 1.0)
    global_ambient: Tuple[float, float, float] = (0.2, 0.2, 0.2)

    def __post_init__(self) -> None:
        if not 1 <= self.max_texture_slots <= MAX_TEXTURE_SLOTS:
            raise ValueError(
                f"max_texture_slots must be between 1 and {MAX_TEXTURE_SLOTS}"
            )
        if self.max_lights < 0:
            raise ValueError("max_lights cannot be negative")
