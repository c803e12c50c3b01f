# deskscene/assets/types.py
from dataclasses import dataclass


@dataclass(frozen=True)
class TextureData:
    """Decoded image pixels, rows ordered bottom-up for GL upload."""

    data: bytes
    width: int
    height: int
    components: int  # 3 (RGB) or 4 (RGBA) are uploadable, anything else is rejected
    path: str = ""  # For debugging / error reporting.
