import numpy as np
import pytest

from deskscene.graphics.errors import TextureLifecycleError
from deskscene.graphics.assets.material_manager import MaterialTable
from deskscene.graphics.uniform_bridge import UniformBridge
from deskscene.math import TransformRequest, compose_transform
from tests.conftest import FakeProgram


def _decode_mat4(data: bytes) -> np.ndarray:
    # Column-major on the wire
    return np.frombuffer(data, dtype="f4").reshape(4, 4).T


def _bound(registry, make_image, *tags):
    for tag in tags:
        registry.load(make_image(), tag)
    registry.bind_all()


def test_primitive_writers(bridge, program):
    bridge.set_vec4("objectColor", (1, 0.5, 0.25, 1))
    bridge.set_vec3("globalAmbientColor", (0.2, 0.2, 0.2))
    bridge.set_vec2("UVscale", (10, 10))
    bridge.set_float("material.shininess", 32)
    bridge.set_int("objectTexture", 3)
    bridge.set_bool("bUseLighting", 1)

    assert program["objectColor"].value == (1.0, 0.5, 0.25, 1.0)
    assert program["globalAmbientColor"].value == (0.2, 0.2, 0.2)
    assert program["UVscale"].value == (10.0, 10.0)
    assert program["material.shininess"].value == 32.0
    assert program["objectTexture"].value == 3
    assert program["bUseLighting"].value is True


def test_matrix_is_uploaded_column_major(bridge, program):
    m = compose_transform((2, 1, 1), (0, 90, 0), (5, 0, 0))

    bridge.set_matrix4("model", m)

    np.testing.assert_allclose(_decode_mat4(program["model"].value), m)


def test_set_matrix4_rejects_wrong_shape(bridge):
    with pytest.raises(ValueError):
        bridge.set_matrix4("model", np.identity(3))


def test_missing_uniform_is_skipped(registry, caplog):
    program = FakeProgram(["model"])
    bridge = UniformBridge(program, textures=registry)

    with caplog.at_level("DEBUG", logger="deskscene"):
        assert not bridge.set_float("material.shininess", 1.0)
        assert not bridge.set_float("material.shininess", 2.0)

    assert program.log == []
    assert caplog.text.count("material.shininess") == 1


def test_set_transform_composes_request(bridge, program):
    request = TransformRequest(
        scale=(50.0, 1.0, 50.0), translation=(0.0, -1.0, 0.0)
    )

    matrix = bridge.set_transform(request)

    np.testing.assert_allclose(matrix, request.matrix())
    np.testing.assert_allclose(_decode_mat4(program["model"].value), matrix)
    assert bridge.state.model is matrix


def test_set_flat_color_disables_texture(bridge, program):
    bridge.set_flat_color((0.75, 0.75, 0.75, 1.0))

    assert program["bUseTexture"].value is False
    assert program["objectColor"].value == (0.75, 0.75, 0.75, 1.0)
    assert bridge.state.use_texture is False
    assert bridge.state.active_color == (0.75, 0.75, 0.75, 1.0)


def test_set_texture_writes_resolved_slot(bridge, program, registry, make_image):
    _bound(registry, make_image, "floor", "screen")

    assert bridge.set_texture("screen")

    assert program["bUseTexture"].value is True
    assert program["objectTexture"].value == 1
    assert bridge.state.active_sampler_slot == 1


def test_texture_then_color_leaves_texture_flag_off(bridge, program, registry, make_image):
    _bound(registry, make_image, "screen")

    bridge.set_texture("screen")
    bridge.set_flat_color((1, 1, 1, 1))

    assert program["bUseTexture"].value is False
    assert program["bUseTexture"].history == [True, False]
    assert bridge.state.use_texture is False


def test_unknown_texture_writes_sentinel(bridge, program, registry, make_image, caplog):
    _bound(registry, make_image, "floor")

    with caplog.at_level("WARNING", logger="deskscene"):
        assert not bridge.set_texture("nonexistent")

    assert program["objectTexture"].value == -1
    assert bridge.state.active_sampler_slot == -1
    assert "nonexistent" in caplog.text


def test_set_texture_before_bind_is_an_error(bridge, program, registry, make_image):
    registry.load(make_image(), "floor")

    with pytest.raises(TextureLifecycleError):
        bridge.set_texture("floor")

    assert program.log == []


def test_set_texture_without_registry_is_an_error(program):
    with pytest.raises(TextureLifecycleError):
        UniformBridge(program).set_texture("floor")


def test_set_uv_scale(bridge, program):
    bridge.set_uv_scale(10, 10)

    assert program["UVscale"].value == (10.0, 10.0)
    assert bridge.state.uv_scale == (10.0, 10.0)


def test_apply_material_writes_all_fields(bridge, program, desk_material):
    table = MaterialTable()
    table.add(desk_material)

    assert bridge.apply_material("desk", table)

    assert program["material.ambientColor"].value == (0.3, 0.3, 0.3)
    assert program["material.ambientStrength"].value == 0.5
    assert program["material.diffuseColor"].value == (0.6, 0.3, 0.3)
    assert program["material.specularColor"].value == (0.5, 0.5, 0.5)
    assert program["material.shininess"].value == 16.0
    assert bridge.state.active_material is desk_material


def test_apply_unknown_material_writes_nothing(bridge, program, desk_material):
    table = MaterialTable()
    table.add(desk_material)

    assert not bridge.apply_material("floor", table)
    assert program.log == []
    assert bridge.state.active_material is None


def test_every_write_reaches_the_program(bridge, program):
    bridge.set_flat_color((1, 0, 0, 1))
    bridge.set_flat_color((1, 0, 0, 1))

    assert program.written() == [
        "bUseTexture",
        "objectColor",
        "bUseTexture",
        "objectColor",
    ]


def test_set_camera(bridge, program):
    view = compose_transform((1, 1, 1), (0, 0, 0), (0, 0, -10))
    projection = np.identity(4, dtype=np.float32)

    bridge.set_camera(view, projection, (0, 0, 10))

    np.testing.assert_allclose(_decode_mat4(program["view"].value), view)
    np.testing.assert_allclose(_decode_mat4(program["projection"].value), projection)
    assert program["viewPosition"].value == (0.0, 0.0, 10.0)


def test_malformed_flat_color_writes_nothing(bridge, program):
    with pytest.raises(ValueError):
        bridge.set_flat_color((1.0, 0.0, 0.0))

    assert program.log == []
    assert bridge.state.active_color == (1.0, 1.0, 1.0, 1.0)
