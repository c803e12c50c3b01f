# deskscene/assets/importers/texture.py
from pathlib import Path

from PIL import Image

from deskscene.assets.importers.base import AssetImporter
from deskscene.assets.types import TextureData

# Modes Pillow can hand back that GL cannot take as-is.
_CONVERSIONS = {
    "CMYK": "RGB",
    "YCbCr": "RGB",
    "LAB": "RGB",
    "HSV": "RGB",
}


class TextureImporter(AssetImporter):
    """
    Decodes an image keeping its native channel count.

    Callers decide which channel counts they accept; grayscale images come
    back with components == 1 and grayscale+alpha with components == 2.
    """

    def import_file(self, path: Path) -> TextureData:
        with Image.open(path) as img:
            if img.mode == "P":
                converted = img.convert(
                    "RGBA" if "transparency" in img.info else "RGB"
                )
            elif img.mode in _CONVERSIONS:
                converted = img.convert(_CONVERSIONS[img.mode])
            else:
                converted = img.copy()

            # GL samples from the bottom-left corner.
            converted = converted.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

            width, height = converted.size
            components = len(converted.getbands())
            data = converted.tobytes()

        return TextureData(
            data=data,
            width=width,
            height=height,
            components=components,
            path=str(path),
        )
