# deskscene/scenes/desk.py
"""Corner desk scene: floor, L-shaped desk and keyboard."""

from deskscene.graphics.assets.material_manager import Material
from deskscene.graphics.light import LightDescriptor
from deskscene.math import TransformRequest
from deskscene.scene import DrawCommand, SceneSetup

TEXTURES = (
    ("textures/Wood-Floor_texture2.jpg", "floor"),
    ("textures/Monitor-Screen_texture.jpg", "screen"),
    ("textures/Desk_texture2.jpg", "desk"),
    ("textures/Keyboard_texture.jpg", "keyboard"),
    ("textures/glass_texture.jpg", "glass"),
)

MATERIALS = (
    Material(
        tag="floorMaterial",
        ambient_color=(0.2, 0.2, 0.2),
        ambient_strength=0.5,
        diffuse_color=(0.8, 0.8, 0.8),
        specular_color=(1.0, 1.0, 1.0),
        shininess=32.0,
    ),
    Material(
        tag="deskMaterial",
        ambient_color=(0.3, 0.3, 0.3),
        ambient_strength=0.5,
        diffuse_color=(0.6, 0.3, 0.3),
        specular_color=(0.5, 0.5, 0.5),
        shininess=16.0,
    ),
    Material(
        tag="keyboardMaterial",
        ambient_color=(0.2, 0.2, 0.2),
        ambient_strength=0.5,
        diffuse_color=(0.7, 0.7, 0.7),
        specular_color=(1.0, 1.0, 1.0),
        shininess=32.0,
    ),
    Material(
        tag="monitorMaterial",
        ambient_color=(0.2, 0.2, 0.2),
        ambient_strength=0.5,
        diffuse_color=(0.9, 0.9, 0.9),
        specular_color=(1.0, 1.0, 1.0),
        shininess=128.0,
    ),
    # Glass-like screen surface
    Material(
        tag="screenMaterial",
        ambient_color=(0.1, 0.1, 0.1),
        ambient_strength=0.5,
        diffuse_color=(0.5, 0.5, 0.5),
        specular_color=(1.0, 1.0, 1.0),
        shininess=256.0,
    ),
)

LIGHTS = (
    # Key light from above
    LightDescriptor(
        index=0,
        position=(0.0, 12.0, 0.0),
        diffuse_color=(0.4, 0.4, 0.4),
        specular_color=(7.0, 7.0, 7.0),
        focal_strength=32.0,
        specular_intensity=0.2,
    ),
    # Warm glow under the upper shelf
    LightDescriptor(
        index=1,
        position=(-9.8, 2.0, 3.0),
        diffuse_color=(1.0, 0.85, 0.5),
        specular_color=(1.0, 0.85, 0.5),
        focal_strength=32.0,
        specular_intensity=0.2,
    ),
    # Left monitor
    LightDescriptor(
        index=2,
        position=(8.0, 2.0, 3.0),
        diffuse_color=(0.6, 0.8, 1.0),
        specular_color=(0.6, 0.8, 1.0),
        focal_strength=32.0,
        specular_intensity=0.2,
    ),
)

SILVER = (192.0 / 255.0, 192.0 / 255.0, 192.0 / 255.0, 1.0)

COMMANDS = (
    DrawCommand(
        primitive="plane",
        transform=TransformRequest(scale=(50.0, 1.0, 50.0), translation=(0.0, -1.0, 0.0)),
        material="floorMaterial",
        texture="floor",
        uv_scale=(10.0, 10.0),
    ),
    # Corner piece joining the two desk surfaces
    DrawCommand(
        primitive="prism",
        transform=TransformRequest(
            scale=(12.0, 0.5, 7.0),
            rotation_degrees=(0.0, 1.8, 0.0),
            translation=(-0.8, 0.5, -1.5),
        ),
        material="deskMaterial",
        texture="desk",
    ),
    # Keyboard body, then a thin textured slab for its keys
    DrawCommand(
        primitive="box",
        transform=TransformRequest(
            scale=(9.0, 0.3, 3.0),
            rotation_degrees=(0.0, 1.8, 0.0),
            translation=(-0.8, 1.0, 1.5),
        ),
        material="keyboardMaterial",
        color=SILVER,
    ),
    DrawCommand(
        primitive="box",
        transform=TransformRequest(
            scale=(9.0, 0.1, 3.0),
            rotation_degrees=(0.0, 1.8, 0.0),
            translation=(-0.8, 1.15, 1.5),
        ),
        material="keyboardMaterial",
        texture="keyboard",
    ),
    DrawCommand(
        primitive="box",
        transform=TransformRequest(
            scale=(15.0, 0.5, 8.8),
            rotation_degrees=(0.0, 45.0, 0.0),
            translation=(-8.8, 0.5, 4.0),
        ),
        material="deskMaterial",
        texture="desk",
    ),
    DrawCommand(
        primitive="box",
        transform=TransformRequest(
            scale=(15.0, 0.5, 8.8),
            rotation_degrees=(0.0, -45.0, 0.0),
            translation=(7.0, 0.5, 4.0),
        ),
        material="deskMaterial",
        texture="desk",
    ),
)


def desk_setup() -> SceneSetup:
    return SceneSetup(
        textures=TEXTURES,
        materials=MATERIALS,
        global_ambient=(0.2, 0.2, 0.2),
        lights=LIGHTS,
    )
