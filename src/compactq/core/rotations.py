# Copyright 2026 CompactQ Developers
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from __future__ import annotations

import math

from loguru import logger

from .types import ComplexScalar, CompactUnitaryParams, RotationAxis

X_AXIS = RotationAxis(1.0, 0.0, 0.0)
Y_AXIS = RotationAxis(0.0, 1.0, 0.0)
Z_AXIS = RotationAxis(0.0, 0.0, 1.0)


def derive_rotation_params(angle: float, axis: RotationAxis) -> CompactUnitaryParams:
    """
    Compute the compact unitary of a rotation by ``angle`` around ``axis``.

    The axis is normalized first, so any non-zero length is accepted. With :math:`n` the unit axis and
    :math:`s = \\sin(\\theta/2)`, the result is :math:`\\alpha = \\cos(\\theta/2) - i s n_z` and
    :math:`\\beta = s n_y - i s n_x`.

    A zero-length axis is not rejected here: its components normalize to NaN, and so does the result, which
    every validation check then refuses.

    Args:
        angle (float): Rotation angle in radians.
        axis (RotationAxis): Rotation axis, of any non-zero length.

    Returns:
        CompactUnitaryParams: The (alpha, beta) pair of the rotation.
    """
    unit_axis = axis.normalized()
    if not all(math.isfinite(component) for component in (unit_axis.x, unit_axis.y, unit_axis.z)):
        logger.warning("Rotation axis ({}, {}, {}) cannot be normalized.", axis.x, axis.y, axis.z)

    half_sin = math.sin(angle / 2.0)
    alpha = ComplexScalar(real=math.cos(angle / 2.0), imag=-half_sin * unit_axis.z)
    beta = ComplexScalar(real=half_sin * unit_axis.y, imag=-half_sin * unit_axis.x)
    logger.debug("Rotation by {} around {} gives alpha={} beta={}", angle, unit_axis, alpha, beta)
    return CompactUnitaryParams(alpha=alpha, beta=beta)


def derive_conjugate_rotation_params(angle: float, axis: RotationAxis) -> CompactUnitaryParams:
    """Same as :func:`derive_rotation_params`, with the imaginary parts of alpha and beta negated."""
    return derive_rotation_params(angle, axis).conjugate()
