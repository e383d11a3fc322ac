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

from onrates.curves.calibration import JacobianCalibrationInfo, calibration_info
from onrates.curves.zero import ZeroRateCurve

__all__ = [
    "JacobianCalibrationInfo",
    "ZeroRateCurve",
    "calibration_info",
]
