# deskscene/graphics/assets/texture_manager.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import moderngl

from deskscene.assets.importers.texture import TextureImporter
from deskscene.graphics.core.settings import MAX_TEXTURE_SLOTS
from deskscene.graphics.errors import TextureCapacityError, TextureLifecycleError
from deskscene.graphics.util.ids import NOT_FOUND

logger = logging.getLogger("deskscene")

SUPPORTED_COMPONENTS = (3, 4)


class RegistryState(str, Enum):
    """Where the registry is in the load -> bind -> draw lifecycle."""

    EMPTY = "empty"
    LOADED = "loaded"
    BOUND = "bound"


@dataclass(slots=True)
class TextureRecord:
    """A GPU texture owned by the registry and the unit it is bound to."""

    tag: str
    texture: moderngl.Texture
    slot_index: int

    @property
    def gpu_id(self) -> int:
        return self.texture.glo


class TextureRegistry:
    """
    Loads image files into GPU textures and hands out fixed sampler slots.

    Slots are assigned in load order and never move: the first texture
    loaded is bound to unit 0, the second to unit 1, and so on up to
    ``max_slots``. Tags are unique; lookups by an unknown tag return -1.
    """

    def __init__(
        self,
        gl: moderngl.Context,
        *,
        max_slots: int = MAX_TEXTURE_SLOTS,
        importer: Optional[TextureImporter] = None,
    ) -> None:
        if not 1 <= max_slots <= MAX_TEXTURE_SLOTS:
            raise ValueError(
                f"max_slots must be between 1 and {MAX_TEXTURE_SLOTS}, got {max_slots}"
            )
        self._gl = gl
        self._max_slots = max_slots
        self._importer = importer or TextureImporter()
        self._records: Dict[str, TextureRecord] = {}
        self._state = RegistryState.EMPTY

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def capacity(self) -> int:
        return self._max_slots

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, tag: str) -> bool:
        return tag in self._records

    def __iter__(self) -> Iterator[TextureRecord]:
        return iter(self._records.values())

    def load(self, path: str | Path, tag: str) -> bool:
        """
        Decode an image and upload it as the next slot.

        Returns False, leaving the registry untouched, when the file cannot
        be decoded, has a channel count other than 3 or 4, or the tag is
        already taken. Raises TextureCapacityError when every slot is used.
        """
        if tag in self._records:
            logger.warning(
                "Texture tag '%s' already registered (slot %d); skipping %s",
                tag,
                self._records[tag].slot_index,
                path,
            )
            return False

        if len(self._records) >= self._max_slots:
            raise TextureCapacityError(
                f"Cannot load '{tag}' from {path}: all {self._max_slots} "
                "texture slots are in use"
            )

        try:
            image = self._importer.import_file(Path(path))
        except OSError as e:
            logger.warning("Could not load image %s: %s", path, e)
            return False

        if image.components not in SUPPORTED_COMPONENTS:
            logger.warning(
                "Not implemented to handle image %s with %d channels",
                path,
                image.components,
            )
            return False

        texture = self._gl.texture(
            (image.width, image.height), image.components, data=image.data
        )
        texture.repeat_x = True
        texture.repeat_y = True
        # build_mipmaps() switches the min filter to a mipmapped one, so the
        # plain linear filter is applied afterwards.
        texture.build_mipmaps()
        texture.filter = (moderngl.LINEAR, moderngl.LINEAR)

        slot = len(self._records)
        self._records[tag] = TextureRecord(tag=tag, texture=texture, slot_index=slot)
        self._state = RegistryState.LOADED

        logger.info(
            "Loaded image %s as '%s' (slot %d, %dx%d, %d channels)",
            path,
            tag,
            slot,
            image.width,
            image.height,
            image.components,
        )
        return True

    def load_many(self, entries: Iterable[Tuple[str | Path, str]]) -> List[str]:
        """
        Load (path, tag) pairs in order and bind the result.

        Returns the tags that failed to load. Binding is skipped when
        nothing could be loaded at all.
        """
        failed = []
        for path, tag in entries:
            if not self.load(path, tag):
                failed.append(tag)

        if self._records:
            self.bind_all()
        return failed

    def bind_all(self) -> None:
        """Bind every texture to the texture unit matching its slot."""
        if not self._records:
            raise TextureLifecycleError("No textures loaded; nothing to bind")

        for record in self._records.values():
            record.texture.use(location=record.slot_index)
        self._state = RegistryState.BOUND

    def require_bound(self) -> None:
        if self._state is not RegistryState.BOUND:
            raise TextureLifecycleError(
                f"Textures must be loaded and bound before drawing "
                f"(registry is {self._state.value})"
            )

    def get(self, tag: str) -> Optional[TextureRecord]:
        return self._records.get(tag)

    def resolve_id(self, tag: str) -> int:
        record = self._records.get(tag)
        return record.gpu_id if record is not None else NOT_FOUND

    def resolve_slot(self, tag: str) -> int:
        record = self._records.get(tag)
        return record.slot_index if record is not None else NOT_FOUND

    def release_all(self) -> None:
        """Delete every GPU texture. Safe to call more than once."""
        # Pop before release; a texture is never released twice
        while self._records:
            _, record = self._records.popitem()
            record.texture.release()
        self._state = RegistryState.EMPTY
