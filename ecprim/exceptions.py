#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecprim from those raised by other codebase.

Note that point arithmetic never raises on algebraic failures
(e.g. a division by zero): those fail open to the infinity point.
Users are usually better off just dealing with the regular
ValueError and TypeError from which the ecprim versions are derived.
"""


class ECPrimValueError(ValueError):
    pass


class ECPrimTypeError(TypeError):
    pass
