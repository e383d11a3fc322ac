# SPDX-License-Identifier: LicenseRef-Rateslib-Dual
#
# Copyright (c) 2026 Siffrorna Technology Limited
#
# Dual-licensed: Free Educational Licence or Paid Commercial Licence (commercial/professional use)
# Source-available, not open source.
#
# See LICENSE and https://rateslib.com/py/en/latest/i_licence.html for details,
# and/or contact info (at) rateslib (dot) com
####################################################################################################

from onrates.enums.generics import Err, NoInput, Ok, Result
from onrates.enums.parameters import AveragingMethod, Segment

__all__ = [
    "AveragingMethod",
    "Segment",
    "NoInput",
    "Result",
    "Ok",
    "Err",
]
