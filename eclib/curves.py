#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curves.

SEC 2 v.2 curves
http://www.secg.org/sec2-v2.pdf

* secp256k1, the 256-bit Koblitz curve
* secp256r1, the 256-bit NIST pseudo-random curve (a.k.a. P-256)
"""

import json
import logging
import re
from os import path
from typing import Dict

from eclib.curve import Curve
from eclib.curve_group import CurveGroup
from eclib.exceptions import InvalidGeneratorError, ParameterParseError
from eclib.sec_point import point_from_octets

_LOGGER = logging.getLogger(__name__)

_HEX_DIGITS = re.compile("[0-9a-fA-F]+")


def _int_from_hex_digits(hex_digits: str, param_name: str) -> int:
    if not isinstance(hex_digits, str) or not _HEX_DIGITS.fullmatch(hex_digits):
        err_msg = f"invalid hex-string for {param_name}: {hex_digits!r}"
        raise ParameterParseError(err_msg)
    return int(hex_digits, 16)


def curve_from_hex(p: str, a: str, b: str, G: str, n: str) -> Curve:
    """Return the Curve for the given hex-string domain parameters.

    p, a, b, and n are hex-digit strings (no sign, no 0x prefix),
    with p at least 2 and n positive;
    G is the hex-string of the compressed/uncompressed
    SEC encoding of the generator.

    Primality of p and the order n of G are not checked.
    """

    p_ = _int_from_hex_digits(p, "p")
    if p_ < 2:
        raise ParameterParseError(f"invalid field prime: {p!r}")
    a_ = _int_from_hex_digits(a, "a")
    b_ = _int_from_hex_digits(b, "b")

    ec_group = CurveGroup(p_, a_, b_)
    try:
        G_ = point_from_octets(G, ec_group)
    except ValueError as e:
        raise InvalidGeneratorError(f"invalid generator: {G!r}") from e

    n_ = _int_from_hex_digits(n, "n")
    if n_ < 1:
        raise ParameterParseError(f"non positive n: {n!r}")

    ec = Curve(p_, a_, b_, G_, n_)
    _LOGGER.debug("curve created: p_size=%d bytes", ec.p_size)
    return ec


datadir = path.join(path.dirname(__file__), "data")

# curves included in both SEC 2 v.1 and SEC 2 v.2
# http://www.secg.org/sec2-v2.pdf
filename = path.join(datadir, "ec_SEC2v2.json")
with open(filename, "r", encoding="ascii") as file_:
    SEC2v2_params = json.load(file_)
CURVES: Dict[str, Curve] = {}
for ec_name, ec_params in SEC2v2_params.items():
    CURVES[ec_name] = curve_from_hex(*ec_params)
    _LOGGER.debug("loaded %s", ec_name)

secp256k1 = CURVES["secp256k1"]
secp256r1 = CURVES["secp256r1"]
