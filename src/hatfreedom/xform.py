## arbitrary axis rotation for the hat direction vectors

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from math import cos, isfinite, radians, sin

import numpy as np

from hatfreedom.errors import InvalidConfigurationError
from hatfreedom.geometry_utils import Vec3, to_vec3, vmag

## rotations are plain 3x3 matrices acting on column vectors.  The
## direction vectors are free vectors (they are only ever summed), so
## there is no need for the homogeneous 4x4 form here.

## below this length an axis is treated as zero
axis_epsilon = 1e-12


def unit_axis(axis):
    """return ``axis`` scaled to unit length, or raise
    ``InvalidConfigurationError`` if it has no usable direction"""
    u = to_vec3(axis)
    if not all(isfinite(c) for c in u):
        raise InvalidConfigurationError('non-finite rotation axis: {}'.format(u))
    m = vmag(u)
    if m < axis_epsilon:
        raise InvalidConfigurationError('zero-length rotation axis not allowed')
    return (u[0]/m, u[1]/m, u[2]/m)


# return the 3x3 arbitrary axis rotation matrix.  angle is in degrees,
# positive angles are anticlockwise looking down the axis
def Rotation(axis,angle,inverse=False):
    ux, uy, uz = unit_axis(axis)

    if inverse:
        angle *= -1.0
    rad = radians(angle % 360.0)

    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # Rodrigues, see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin]]
    return np.array(R, dtype=float)


def rotate(vec, axis, angle) -> Vec3:
    """rotate ``vec`` by ``angle`` degrees about ``axis`` (through the
    origin).  A zero angle returns the input components unchanged."""
    v = to_vec3(vec)
    u = unit_axis(axis)
    if angle % 360.0 == 0.0:
        return v
    r = Rotation(u, angle).dot(np.array(v, dtype=float))
    return (float(r[0]), float(r[1]), float(r[2]))
