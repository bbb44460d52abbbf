#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

The bindings are an optional extra (pip install eclib[secp256k1]):
when they are not installed, eclib just uses its own arithmetic.
"""

import contextlib
from typing import Any

from eclib.exceptions import EClibRuntimeError
from eclib.point import INF, Point

LIBSECP256K1_AVAILABLE = False
with contextlib.suppress(ImportError):
    from btclib_libsecp256k1 import ffi, lib

    LIBSECP256K1_AVAILABLE = True
    # Keeping a single one of these is most efficient.
    ctx = lib.secp256k1_context_create(769)
    EC_UNCOMPRESSED = 2  # lib.SECP256K1_EC_UNCOMPRESSED

# p, a, b, x_G, y_G, n
_SECP256K1 = (
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    0,
    7,
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
)


def is_available() -> bool:
    return LIBSECP256K1_AVAILABLE


def is_secp256k1(ec: Any) -> bool:
    "Return True if the curve has the secp256k1 domain parameters."
    return (ec.p, ec.a, ec.b, ec.G.x, ec.G.y, ec.n) == _SECP256K1


def mult(m: int) -> Point:
    """Multiply the secp256k1 generator point."""
    m %= _SECP256K1[-1]
    if m == 0:
        return INF

    pubkey_ptr = ffi.new("secp256k1_pubkey *")
    if not lib.secp256k1_ec_pubkey_create(ctx, pubkey_ptr, m.to_bytes(32, "big")):
        raise EClibRuntimeError("secp256k1_ec_pubkey_create failure")
    serialized_pubkey_ptr = ffi.new("char[65]")
    length = ffi.new("size_t *", 65)
    lib.secp256k1_ec_pubkey_serialize(
        ctx, serialized_pubkey_ptr, length, pubkey_ptr, EC_UNCOMPRESSED
    )  # according to documentation, it always returns 1
    pub_key = ffi.unpack(serialized_pubkey_ptr, 65)
    return Point(int.from_bytes(pub_key[1:33], "big"), int.from_bytes(pub_key[33:], "big"))
