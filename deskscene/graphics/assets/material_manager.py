# deskscene/graphics/assets/material_manager.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger("deskscene")


@dataclass(frozen=True, slots=True)
class Material:
    """
    Phong material fed to the shader's ``material`` struct.

    ambient_strength scales ambient_color; shininess is the specular
    exponent.
    """

    tag: str
    ambient_color: Tuple[float, float, float] = (0.2, 0.2, 0.2)
    ambient_strength: float = 0.5
    diffuse_color: Tuple[float, float, float] = (0.8, 0.8, 0.8)
    specular_color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    shininess: float = 32.0


class MaterialTable:
    """
    Ordered list of materials looked up by tag.

    Tags need not be unique, but lookup returns the first match, so a
    material added under a tag that is already present can never be found.
    Such adds are logged.
    """

    def __init__(self) -> None:
        self._materials: List[Material] = []

    def add(self, material: Material) -> None:
        if self.find(material.tag) is not None:
            logger.warning(
                "Material '%s' is already defined; the new entry is shadowed",
                material.tag,
            )
        self._materials.append(material)

    def extend(self, materials: Iterable[Material]) -> None:
        for material in materials:
            self.add(material)

    def find(self, tag: str) -> Optional[Material]:
        """Return the first material with this tag, or None."""
        for material in self._materials:
            if material.tag == tag:
                return material
        return None

    def __contains__(self, tag: str) -> bool:
        return self.find(tag) is not None

    def __len__(self) -> int:
        return len(self._materials)

    def __iter__(self) -> Iterator[Material]:
        return iter(self._materials)
