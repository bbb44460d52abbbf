#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by eclib from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the eclib versions are derived.
"""


class EClibValueError(ValueError):
    pass


class EClibTypeError(TypeError):
    pass


class EClibRuntimeError(RuntimeError):
    pass


class ParameterParseError(EClibValueError):
    "A curve parameter is not a valid hex-string."


class InvalidGeneratorError(EClibValueError):
    "The generator cannot be decoded, is off-curve, or is the infinity point."


class InvalidEncodingError(EClibValueError):
    "The octets are not a valid compressed/uncompressed curve point."
