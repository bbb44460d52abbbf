#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic in prime fields.

All functions assume the modulus p to be a prime:
this is never checked.

The Tonelli-Shanks implementation is based on
https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267
"""

from eclib.exceptions import EClibValueError
from eclib.utils import hex_string

HEX_THRESHOLD = 0xFFFFFFFF


def _int_repr(i: int) -> str:
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def mod_inv(a: int, p: int) -> int:
    """Return the inverse of a (mod p).

    Fermat's little theorem is used: a^(p-2) * a = a^(p-1) = 1 (mod p).
    """

    a %= p
    if a == 0:
        raise EClibValueError(f"No inverse for 0 mod {_int_repr(p)}")
    return pow(a, p - 2, p)


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    It returns 1 if a has a square root modulo p, -1 if it has not,
    and 0 if p divides a.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root (mod p) of a.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    p = 3 mod 4 (e.g. secp256k1 and secp256r1) uses a^((p+1)/4),
    p = 5 mod 8 uses a^((p+3)/8), possibly times 2^((p-1)/4),
    any other prime falls back to Tonelli-Shanks.
    """

    a %= p

    if p % 4 == 3:
        r = pow(a, (p >> 2) + 1, p)
    elif p % 8 == 5:
        r = pow(a, (p >> 3) + 1, p)
        if r * r % p != a:
            r = r * pow(2, p >> 2, p) % p
    else:
        return tonelli(a, p)

    if r * r % p != a:
        raise EClibValueError(f"no root for {_int_repr(a)} mod {_int_repr(p)}")
    return r


def tonelli(a: int, p: int) -> int:
    "Return a square root (mod p) of a using the Tonelli-Shanks algorithm."

    a %= p
    if a == 0 or p == 2:
        return a

    if legendre_symbol(a, p) != 1:
        raise EClibValueError(f"no root for {_int_repr(a)} mod {_int_repr(p)}")

    # p - 1 = q * 2^s, with q odd
    q, s = p - 1, 0
    while q & 1 == 0:
        s += 1
        q >>= 1

    # z must be a quadratic non residue
    z = 2
    while legendre_symbol(z, p) != -1:
        z += 1
    c = pow(z, q, p)
    r = pow(a, (q + 1) // 2, p)
    t = pow(a, q, p)
    m = s
    while t != 1:
        # lowest i such that t^(2^i) = 1
        i, t2i = 1, t * t % p
        while t2i != 1:
            i += 1
            t2i = t2i * t2i % p
        b = pow(c, 1 << (m - i - 1), p)
        r = r * b % p
        c = b * b % p
        t = t * c % p
        m = i

    return r
