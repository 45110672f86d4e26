"""Internal MC33 case resolution.

All symbols here are private.  Users should import only from
:mod:`surface3d.marching_cubes`.

Conventions
-----------
Corner values are ``v[j] = isovalue - f(corner j)`` with corners ordered

::

    0 (x, y, z)        4 (x+1, y, z)
    1 (x, y+1, z)      5 (x+1, y+1, z)
    2 (x, y+1, z+1)    6 (x+1, y+1, z+1)
    3 (x, y, z+1)      7 (x+1, y, z+1)

and the cell code has bit ``7 - j`` set when ``v[j] < 0``.

Faces used by :func:`_face_test`: 0 is ``z`` low (corners 0, 1, 4, 5),
1 is ``y`` high (1, 2, 5, 6), 2 is ``z`` high (2, 3, 6, 7), 3 is ``y`` low
(0, 3, 4, 7), 4 is ``x`` low (0..3) and 5 is ``x`` high (4..7).

Algorithms
----------
Face test: asymptotic decider on a cell face; the sign of
``v_a * v_c - v_b * v_d`` over the two diagonals tells which diagonal
pair of corners is joined through the face.

Interior test: evaluates the trilinear interpolant along the plane
``t = -b / 2a`` where its bilinear cross section is a saddle, to decide
whether two opposite corners are joined through the cell interior.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from _iso_common import relative_eq
from ._mc33_table import MC33_TABLE

# Cell code of case 13 used as the reference orientation for its face tests.
_CASE13_CODE = 0xA5


# ---------------------------------------------------------------------------
# Face and interior tests
# ---------------------------------------------------------------------------

def _face_sign(positive: bool, a: float, b: float) -> int:
    # -1 / +1 depending on which diagonal product dominates
    if a < b:
        return -1 if positive else 1
    return 1 if positive else -1


def _face_test(ind: int, v: Sequence[float]) -> Tuple[List[int], int]:
    """Run the face tests relevant to code *ind*.

    Returns the six per-face results (``-1``, ``0`` or ``1``; ``0`` when a
    face is not ambiguous for *ind*) and their sum.
    """
    face = [0] * 6
    if ind & 0x80:
        if (ind & 0xCC) == 0x84:
            face[0] = _face_sign(True, v[0] * v[5], v[1] * v[4])
        if (ind & 0x99) == 0x81:
            face[3] = _face_sign(True, v[0] * v[7], v[3] * v[4])
        if (ind & 0xF0) == 0xA0:
            face[4] = _face_sign(True, v[0] * v[2], v[1] * v[3])
    else:
        if (ind & 0xCC) == 0x48:
            face[0] = _face_sign(False, v[0] * v[5], v[1] * v[4])
        if (ind & 0x99) == 0x18:
            face[3] = _face_sign(False, v[0] * v[7], v[3] * v[4])
        if (ind & 0xF0) == 0x50:
            face[4] = _face_sign(False, v[0] * v[2], v[1] * v[3])

    if ind & 0x02:
        if (ind & 0x66) == 0x42:
            face[1] = _face_sign(True, v[1] * v[6], v[2] * v[5])
        if (ind & 0x33) == 0x12:
            face[2] = _face_sign(True, v[3] * v[6], v[2] * v[7])
        if (ind & 0x0F) == 0x0A:
            face[5] = _face_sign(True, v[4] * v[6], v[5] * v[7])
    else:
        if (ind & 0x66) == 0x24:
            face[1] = _face_sign(False, v[1] * v[6], v[2] * v[5])
        if (ind & 0x33) == 0x21:
            face[2] = _face_sign(False, v[3] * v[6], v[2] * v[7])
        if (ind & 0x0F) == 0x05:
            face[5] = _face_sign(False, v[4] * v[6], v[5] * v[7])

    return face, sum(face)


def _face_test1(face: int, v: Sequence[float]) -> int:
    """Bit mask of the two corners joined across *face*."""
    if face == 0:
        return 0x48 if v[0] * v[5] < v[1] * v[4] else 0x84
    if face == 1:
        return 0x24 if v[1] * v[6] < v[2] * v[5] else 0x42
    if face == 2:
        return 0x21 if v[3] * v[6] < v[2] * v[7] else 0x12
    if face == 3:
        return 0x18 if v[0] * v[7] < v[3] * v[4] else 0x81
    if face == 4:
        return 0x50 if v[0] * v[2] < v[1] * v[3] else 0xA0
    return 0x05 if v[4] * v[6] < v[5] * v[7] else 0x0A


def _interior_test(i: int, flag13: int, v: Sequence[float]) -> int:
    """Non-zero when the interior joins the corners selected by *i*.

    For case 13 (*flag13* = 1) the result is ``1 + flag13`` or ``0`` so
    the caller can tell 13.5.1 from 13.5.2.
    """
    at = v[4] - v[0]
    bt = v[5] - v[1]
    ct = v[6] - v[2]
    dt = v[7] - v[3]
    t = at * ct - bt * dt

    if t < 0.0:
        if i & 0x01:
            return 0
    elif not (i & 0x01) or relative_eq(t, 0.0):
        return 0

    t = 0.5 * (v[3] * bt - v[2] * at + v[1] * dt - v[0] * ct) / t
    if not 0.0 < t < 1.0:
        return 0

    at = v[0] + at * t
    bt = v[1] + bt * t
    ct = v[2] + ct * t
    dt = v[3] + dt * t
    ct *= at
    dt *= bt
    vi = v[i]
    if i & 0x01:
        if ct < dt and dt > 0.0:
            same = (bt <= 0.0 and vi <= 0.0) or (bt >= 0.0 and vi >= 0.0)
            return int(same) + flag13
    else:
        if ct > dt and ct > 0.0:
            same = (at <= 0.0 and vi <= 0.0) or (at >= 0.0 and vi >= 0.0)
            return int(same) + flag13
    return 0


# ---------------------------------------------------------------------------
# Case resolution
# ---------------------------------------------------------------------------

def _resolve_case(i: int, v: Sequence[float]) -> Tuple[int, bool]:
    """Locate the triangle list for cell code *i*.

    Returns
    -------
    (pcase, m)
        *pcase* is the table position just before the first triangle
        entry; *m* selects the triangle winding.
    """
    if i & 0x80:
        c = MC33_TABLE[i ^ 0xFF]
        m = (c & 0x0800) == 0
    else:
        c = MC33_TABLE[i]
        m = (c & 0x0800) != 0

    k = c & 0x07FF
    family = c >> 12
    ind = i if m else i ^ 0xFF

    if family == 0:
        # cases 1, 2, 5, 8, 9, 11 and 14
        return k, m

    if family == 1:
        # case 3
        if ind & _face_test1(k >> 2, v):
            return 183 + (k << 1), m
        return 159 + k, m

    if family == 2:
        # case 4
        if _interior_test(k, 0, v):
            return 239 + 6 * k, m
        return 231 + (k << 1), m

    if family == 3:
        # case 6
        if ind & _face_test1(k % 6, v):
            return 575 + 5 * k, m  # 6.2
        if _interior_test(k // 6, 0, v):
            return 407 + 7 * k, m  # 6.1.2
        return 335 + 3 * k, m  # 6.1.1

    if family == 4:
        # case 7
        face, s = _face_test(ind, v)
        if s == -3:
            return 695 + 3 * k, m  # 7.1
        if s == -1:
            # 7.2
            if face[4] + face[5] < 0:
                base = 759 if face[0] + face[2] < 0 else 799
            else:
                base = 719
            return base + 5 * k, m
        if s == 1:
            # 7.3
            if face[4] + face[5] < 0:
                base = 983
            else:
                base = 839 if face[0] + face[2] < 0 else 911
            return base + 9 * k, m
        # 7.4
        if _interior_test(k >> 1, 0, v):
            return 1095 + 9 * k, m
        return 1055 + 5 * k, m

    if family == 5:
        # case 10
        face, s = _face_test(ind, v)
        if s == -2:
            if k == 2:
                joined = _interior_test(0, 0, v)
            else:
                joined = _interior_test(0, 0, v) or _interior_test(1 if k else 3, 0, v)
            if joined:
                return 1213 + (k << 3), m  # 10.1.2
            return 1189 + (k << 2), m  # 10.1.1
        if s == 0:
            # 10.2
            base = 1261 if face[2 + k] < 0 else 1285
            return base + (k << 3), m
        if k == 2:
            joined = _interior_test(1, 0, v)
        else:
            joined = _interior_test(2, 0, v) or _interior_test(3 if k else 1, 0, v)
        if joined:
            return 1237 + (k << 3), m
        return 1201 + (k << 2), m

    if family == 6:
        # case 12
        face, s = _face_test(ind, v)
        if s == -2:
            # 12.1
            if _interior_test((0xDA010C >> (k << 1)) & 3, 0, v):
                return 1453 + (k << 3), m
            return 1357 + (k << 2), m
        if s == 0:
            # 12.2
            base = 1645 if face[k >> 1] < 0 else 1741
            return base + (k << 3), m
        if _interior_test((0xA7B7E5 >> (k << 1)) & 3, 0, v):
            return 1549 + (k << 3), m
        return 1405 + (k << 2), m

    # case 13
    face, s = _face_test(_CASE13_CODE, v)
    s = abs(s)
    if s == 0:
        k = (int(face[1] < 0) << 1) | int(face[5] < 0)
        if face[0] * face[1] == face[5]:
            return 2157 + 12 * k, m  # 13.4
        c = _interior_test(k, 1, v)  # 13.5.1 when 0, else 13.5.2
        if c:
            return 2285 + 10 * k - 40 * c, m
        return 2285 + 6 * k, m
    if s == 2:
        # 13.3
        a = int(face[2] > 0) if face[0] < 0 else 12 + int(face[2] < 0)
        b = int(face[3] < 0) if face[1] < 0 else 6 + int(face[3] > 0)
        pcase = 1917 + 10 * (a + b)
        if face[4] > 0:
            pcase += 30
        return pcase, m
    if s == 4:
        # 13.2
        k = 21 + 11 * face[0] + 4 * face[1] + 3 * face[2] + 2 * face[3] + face[4]
        if k >> 4:
            k -= 20 if k & 32 else 10
        return 1845 + 3 * k, m
    # 13.1
    return 1839 + 2 * face[0], m


def _triangles(pcase: int):
    """Yield the vertex-id triples of the triangle list after *pcase*.

    Ids come out lowest nibble first, which is also the order in which
    new vertices must be created.
    """
    more = True
    while more:
        pcase += 1
        entry = MC33_TABLE[pcase]
        yield (entry & 0x0F, (entry >> 4) & 0x0F, (entry >> 8) & 0x0F)
        more = (entry >> 12) != 0
