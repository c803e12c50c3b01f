import itertools
from typing import Any, Dict, List, Tuple

import moderngl
import pytest
from PIL import Image

from deskscene.graphics.assets.material_manager import Material
from deskscene.graphics.assets.texture_manager import TextureRegistry
from deskscene.graphics.shaders.uniform_names import (
    LIGHT_FIELDS,
    UniformNames,
    light_field,
)
from deskscene.graphics.uniform_bridge import UniformBridge


class FakeTexture:
    """Records what the registry does to a moderngl.Texture."""

    def __init__(self, glo: int, size: Tuple[int, int], components: int, data: bytes):
        self.glo = glo
        self.size = size
        self.components = components
        self.data = data
        self.repeat_x = False
        self.repeat_y = False
        self.filter = (moderngl.LINEAR_MIPMAP_LINEAR, moderngl.LINEAR)
        self.mipmaps_built = False
        self.units: List[int] = []
        self.release_count = 0

    def build_mipmaps(self, base: int = 0, max_level: int = 1000) -> None:
        self.mipmaps_built = True
        self.filter = (moderngl.LINEAR_MIPMAP_LINEAR, moderngl.LINEAR)

    def use(self, location: int = 0) -> None:
        self.units.append(location)

    def release(self) -> None:
        self.release_count += 1


class FakeContext:
    """Stand-in for moderngl.Context that only knows how to make textures."""

    def __init__(self) -> None:
        self._glo = itertools.count(1)
        self.textures: List[FakeTexture] = []

    def texture(self, size, components, data=None, **kwargs) -> FakeTexture:
        tex = FakeTexture(next(self._glo), size, components, data)
        self.textures.append(tex)
        return tex


class FakeUniform:
    def __init__(self, name: str) -> None:
        self.name = name
        self.history: List[Any] = []

    @property
    def value(self) -> Any:
        return self.history[-1] if self.history else None

    @value.setter
    def value(self, value: Any) -> None:
        self.history.append(value)

    def write(self, data: bytes) -> None:
        self.history.append(data)


class FakeProgram:
    """Stand-in for a linked moderngl.Program exposing the given uniforms."""

    def __init__(self, names) -> None:
        self._members: Dict[str, FakeUniform] = {n: FakeUniform(n) for n in names}
        self.log: List[Tuple[str, Any]] = []

    def get(self, name: str, default: Any = None) -> Any:
        member = self._members.get(name)
        if member is None:
            return default
        return _LoggingUniform(member, self.log)

    def __getitem__(self, name: str) -> FakeUniform:
        return self._members[name]

    def __contains__(self, name: str) -> bool:
        return name in self._members

    def written(self) -> List[str]:
        return [name for name, _ in self.log]


class _LoggingUniform:
    """Forwards writes to a FakeUniform and records the order they happen in."""

    def __init__(self, member: FakeUniform, log: List[Tuple[str, Any]]) -> None:
        self._member = member
        self._log = log

    @property
    def value(self) -> Any:
        return self._member.value

    @value.setter
    def value(self, value: Any) -> None:
        self._member.value = value
        self._log.append((self._member.name, value))

    def write(self, data: bytes) -> None:
        self._member.write(data)
        self._log.append((self._member.name, data))


def scene_uniform_names(max_lights: int = 5) -> List[str]:
    names = [
        value
        for key, value in vars(UniformNames).items()
        if key.isupper() and key != "LIGHT_ARRAY"
    ]
    for i in range(max_lights):
        names.extend(light_field(i, f) for f in LIGHT_FIELDS)
    return names


@pytest.fixture
def gl():
    return FakeContext()


@pytest.fixture
def program():
    return FakeProgram(scene_uniform_names())


@pytest.fixture
def registry(gl):
    return TextureRegistry(gl)


@pytest.fixture
def bridge(program, registry):
    return UniformBridge(program, textures=registry)


@pytest.fixture
def desk_material():
    return Material(
        tag="desk",
        ambient_color=(0.3, 0.3, 0.3),
        ambient_strength=0.5,
        diffuse_color=(0.6, 0.3, 0.3),
        specular_color=(0.5, 0.5, 0.5),
        shininess=16.0,
    )


@pytest.fixture
def make_image(tmp_path):
    """Write a small image file and return its path."""
    counter = itertools.count()

    def _make(mode: str = "RGB", size=(4, 2), color=None, suffix: str = ".png"):
        if color is None:
            color = {"RGB": (255, 0, 0), "RGBA": (255, 0, 0, 128)}.get(mode, 128)
        img = Image.new(mode, size, color=color)
        path = tmp_path / f"image_{next(counter)}{suffix}"
        img.save(path)
        return path

    return _make
