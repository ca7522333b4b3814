#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecprim developers
#
# This file is part of ecprim. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecprim including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecprim package."

name = "ecprim"
__version__ = "2022.6.1"
__author__ = "The ecprim developers"
__author_email__ = "devs@ecprim.org"
__copyright__ = "Copyright (C) 2017-2022 The ecprim developers"
__license__ = "MIT License"
