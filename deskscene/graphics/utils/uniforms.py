# deskscene/graphics/utils/uniforms.py
from __future__ import annotations

from typing import Any, Optional

import moderngl
import numpy as np

# Program members that share the uniform namespace but cannot take a value.
_NOT_WRITABLE = (moderngl.Attribute, moderngl.UniformBlock)


def pack_mat4(mat: np.ndarray) -> bytes:
    """
    Pack a row-major 4x4 numpy matrix for a GLSL mat4.

    GLSL reads matrices column by column, so the matrix is transposed
    before being flattened to float32 bytes.
    """
    mat = np.asarray(mat)
    if mat.shape != (4, 4):
        raise ValueError("Matrix must be 4x4")
    return np.ascontiguousarray(mat.T, dtype="f4").tobytes()


def find_uniform(program: Any, name: str) -> Optional[Any]:
    """Return the writable uniform called ``name`` or None if the program lacks it."""
    if program is None:
        return None

    member = program.get(name, None)
    if member is None or isinstance(member, _NOT_WRITABLE):
        return None
    return member


def set_uniform(program: Any, name: str, value: Any) -> bool:
    """
    Write a value to a uniform. Bytes go through ``write``, anything else
    through ``value``.

    Returns False when the program has no such uniform; GL drivers strip
    unused uniforms, so that is not treated as an error here.
    """
    member = find_uniform(program, name)
    if member is None:
        return False

    if isinstance(value, bytes):
        member.write(value)
    else:
        member.value = value
    return True
