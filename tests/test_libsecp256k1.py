#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eclib.libsecp256k1` module."

import secrets

import pytest

from eclib import libsecp256k1
from eclib.curve_group import mult_aff
from eclib.curves import secp256k1, secp256r1
from eclib.point import INF


def test_is_secp256k1() -> None:
    assert libsecp256k1.is_secp256k1(secp256k1)
    assert not libsecp256k1.is_secp256k1(secp256r1)


@pytest.mark.skipif(
    not libsecp256k1.is_available(), reason="libsecp256k1 bindings not installed"
)
def test_mult() -> None:
    ec = secp256k1
    assert libsecp256k1.mult(ec.n) == INF
    assert libsecp256k1.mult(1) == ec.G
    for _ in range(4):
        q = 1 + secrets.randbelow(ec.n - 1)
        assert libsecp256k1.mult(q) == mult_aff(q, ec.G, ec)
        assert ec.base_mult(q) == mult_aff(q, ec.G, ec)
