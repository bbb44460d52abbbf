#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve point in affine coordinates.

A Point is an immutable value: curve operations always return
either a new Point or one of their (immutable) operands,
so that no caller can ever observe aliasing.

The infinity point, i.e. the neutral element of the group,
has no coordinates at all: it is INF = Point().
"""

from dataclasses import dataclass
from typing import Optional

from eclib.exceptions import EClibTypeError
from eclib.utils import hex_string


@dataclass(frozen=True)
class Point:
    """Affine point (x, y), or the infinity point if without coordinates.

    Coordinates are not checked to be field elements,
    nor the point to be on any curve:
    see CurveGroup.is_on_curve for that.
    """

    x: Optional[int] = None
    y: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise EClibTypeError("a point must have both coordinates or none")

    def __str__(self) -> str:
        if self.x is None or self.y is None:
            return "INF"
        if self.x < 0 or self.y < 0:
            return f"({self.x}, {self.y})"
        return f"({hex_string(self.x)}, {hex_string(self.y)})"


INF = Point()
