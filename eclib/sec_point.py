#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed/uncompressed point representation.

With L being the byte-length of the field prime p:

* compressed: [0x02|0x03] || x (L bytes, big-endian)
* uncompressed: 0x04 || x (L bytes) || y (L bytes)

The 0x02 prefix marks an even y-coordinate, 0x03 an odd one.
"""

from eclib.alias import Octets
from eclib.curve_group import CurveGroup
from eclib.exceptions import EClibValueError, InvalidEncodingError
from eclib.point import Point
from eclib.utils import bytes_from_octets, hex_string


def bytes_from_point(Q: Point, ec: CurveGroup, compressed: bool = True) -> bytes:
    """Return a point as compressed/uncompressed octet sequence.

    Return a point as compressed (0x02, 0x03) or uncompressed (0x04)
    octet sequence, according to SEC 1 v.2, section 2.3.3.
    """

    if ec.is_infinite(Q):
        raise EClibValueError("no bytes representation for infinity point")
    ec.require_on_curve(Q)

    bytes_ = Q.x.to_bytes(ec.p_size, byteorder="big", signed=False)
    if compressed:
        return (b"\x03" if (Q.y & 1) else b"\x02") + bytes_

    return b"\x04" + bytes_ + Q.y.to_bytes(ec.p_size, byteorder="big", signed=False)


def point_from_octets(pub_key: Octets, ec: CurveGroup) -> Point:
    """Return a Point that belongs to the curve.

    Return a Point that belongs to the curve according to
    SEC 1 v.2, section 2.3.4.
    """

    try:
        pub_key = bytes_from_octets(pub_key)
    except ValueError as e:
        raise InvalidEncodingError(f"not an hex-string: {pub_key!r}") from e

    bsize = len(pub_key)  # bytes
    if bsize == 0:
        raise InvalidEncodingError("empty point encoding")

    if pub_key[0] in (0x02, 0x03):  # compressed point
        if bsize != ec.p_size + 1:
            err_msg = "invalid size for compressed point: "
            err_msg += f"{bsize} instead of {ec.p_size + 1}"
            raise InvalidEncodingError(err_msg)
        x_Q = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
        try:
            y_Q = ec.y_even(x_Q) if pub_key[0] == 0x02 else ec.y_odd(x_Q)
        except EClibValueError as e:
            msg = f"invalid x-coordinate: '{hex_string(x_Q)}'"
            raise InvalidEncodingError(msg) from e
        return Point(x_Q, y_Q)

    if pub_key[0] == 0x04:  # uncompressed point
        if bsize != 2 * ec.p_size + 1:
            err_msg = "invalid size for uncompressed point: "
            err_msg += f"{bsize} instead of {2 * ec.p_size + 1}"
            raise InvalidEncodingError(err_msg)
        x_Q = int.from_bytes(pub_key[1 : ec.p_size + 1], byteorder="big", signed=False)
        y_Q = int.from_bytes(pub_key[ec.p_size + 1 :], byteorder="big", signed=False)
        Q = Point(x_Q, y_Q)
        if x_Q < ec.p and y_Q < ec.p and ec.is_on_curve(Q):
            return Q
        raise InvalidEncodingError(f"point not on curve: {Q}")

    raise InvalidEncodingError(f"not a point: {pub_key!r}")
