#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eclib.curve` module."

import secrets
from dataclasses import FrozenInstanceError
from typing import Dict

import pytest

from eclib.curve import Curve
from eclib.curves import CURVES
from eclib.exceptions import EClibValueError, InvalidGeneratorError
from eclib.point import INF, Point

# test curves: very low cardinality
low_card_curves: Dict[str, Curve] = {}
# 13 % 4 = 1; 13 % 8 = 5
low_card_curves["ec13_11"] = Curve(13, 7, 6, Point(1, 1), 11)
low_card_curves["ec13_19"] = Curve(13, 0, 2, Point(1, 9), 19)
# 17 % 4 = 1; 17 % 8 = 1
low_card_curves["ec17_13"] = Curve(17, 6, 8, Point(0, 12), 13)
low_card_curves["ec17_23"] = Curve(17, 3, 5, Point(1, 14), 23)
# 19 % 4 = 3; 19 % 8 = 3
low_card_curves["ec19_13"] = Curve(19, 0, 2, Point(4, 16), 13)
low_card_curves["ec19_23"] = Curve(19, 2, 9, Point(0, 16), 23)
# 23 % 4 = 3; 23 % 8 = 7
low_card_curves["ec23_19"] = Curve(23, 9, 7, Point(5, 4), 19)
low_card_curves["ec23_31"] = Curve(23, 5, 1, Point(0, 1), 31)

all_curves: Dict[str, Curve] = {}
all_curves.update(low_card_curves)
all_curves.update(CURVES)


def test_exceptions() -> None:

    # good curve
    Curve(13, 0, 2, Point(1, 9), 19)

    with pytest.raises(EClibValueError, match="invalid field prime: "):
        Curve(1, 0, 2, Point(1, 9), 19)

    with pytest.raises(InvalidGeneratorError, match="INF point cannot be a generator"):
        Curve(13, 0, 2, INF, 19)

    with pytest.raises(InvalidGeneratorError, match="generator is not on the curve"):
        Curve(13, 0, 2, Point(2, 9), 19)

    with pytest.raises(EClibValueError, match="non positive n: "):
        Curve(13, 0, 2, Point(1, 9), 0)


def test_immutability() -> None:
    ec = low_card_curves["ec23_31"]
    with pytest.raises(FrozenInstanceError):
        ec.n = 7  # type: ignore
    with pytest.raises(FrozenInstanceError):
        ec.G = INF  # type: ignore

    assert ec == Curve(23, 5, 1, Point(0, 1), 31)
    assert hash(ec) == hash(Curve(23, 5, 1, Point(0, 1), 31))
    assert ec != low_card_curves["ec23_19"]


def test_str() -> None:
    ec = low_card_curves["ec23_31"]
    assert str(ec) == "Curve\n p   = 23\n a   = 5\n b   = 1\n x_G = 0\n y_G = 1\n n   = 31"

    ec = CURVES["secp256k1"]
    ec_str = str(ec)
    assert "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF" in ec_str
    assert "79BE667E F9DCBBAC" in ec_str


def test_mult() -> None:
    for ec in all_curves.values():
        assert ec.mult(0) == INF
        assert ec.mult(0, INF) == INF
        assert ec.mult(1, INF) == INF
        assert ec.mult(1) == ec.G
        assert ec.mult(2) == ec.double_aff(ec.G)

        Q = ec.mult(ec.n - 1)
        assert ec.negate(ec.G) == Q
        assert ec.add(Q, ec.G) == INF

        # order law
        assert ec.mult(ec.n) == INF
        assert ec.mult(ec.n, ec.G) == INF
        assert ec.mult(ec.n + 1) == ec.G

        # Integer input
        assert ec.mult("02") == ec.mult(2)
        assert ec.mult(hex(ec.n)) == INF

        with pytest.raises(EClibValueError, match="negative m: "):
            ec.mult(-1)

    for ec in low_card_curves.values():
        Q = INF
        for q in range(ec.n + 1):
            assert ec.mult(q) == Q, f"{q}, {ec}"
            assert ec.base_mult(q) == Q, f"{q}, {ec}"
            if q not in (0, ec.n):
                assert ec.is_on_curve(Q), f"{q}, {ec}"
            Q = ec.add(Q, ec.G)


def test_base_mult() -> None:
    for ec in all_curves.values():
        assert ec.base_mult(0) == INF
        assert ec.base_mult(1) == ec.G
        assert ec.base_mult(ec.n) == INF

        # on-curve closure
        q = 1 + secrets.randbelow(ec.n - 1)
        Q = ec.base_mult(q)
        assert ec.is_on_curve(Q)
        assert Q == ec.mult(q, ec.G)

        with pytest.raises(EClibValueError, match="negative m: "):
            ec.base_mult(-1)


def test_distributivity() -> None:
    for ec in all_curves.values():
        q1 = 1 + secrets.randbelow(ec.n - 1)
        q2 = 1 + secrets.randbelow(ec.n - 1)
        Q1 = ec.base_mult(q1)
        Q2 = ec.base_mult(q2)
        assert ec.add(Q1, Q2) == ec.base_mult((q1 + q2) % ec.n)
        assert ec.mult(q2, Q1) == ec.mult(q1, Q2)
