# deskscene/graphics/errors.py
"""
Hard configuration errors.

Recoverable problems (an unreadable image, an unknown tag) are reported
through return values and the log instead; these exceptions mark setups
that would otherwise corrupt slot indices or shader state.
"""


class SceneConfigurationError(RuntimeError):
    """Base class for scene setup errors raised before any GPU call."""


class TextureCapacityError(SceneConfigurationError):
    """More textures requested than there are sampler slots."""


class LightCapacityError(SceneConfigurationError):
    """A light does not fit in the shader's light array."""


class TextureLifecycleError(SceneConfigurationError):
    """Textures used out of load -> bind -> draw order."""
