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


from __future__ import annotations

from enum import Enum
from typing import Any, Generic, NoReturn, TypeAlias, TypeVar

T = TypeVar("T")


class Err:
    """
    Standard result class indicating **failure** and containing some *Exception* type.
    """

    _exception: Exception

    def __init__(self, exception: Exception) -> None:
        self._exception = exception

    def __repr__(self) -> str:
        return f"<onrates.Err {type(self._exception).__name__} at {hex(id(self))}>"

    @property
    def is_err(self) -> bool:
        return True

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self._exception


class Ok(Generic[T]):
    """Standard result class indicating **success** and containing some value."""

    _value: T

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"<onrates.Ok {self._value.__repr__()}>"

    @property
    def is_err(self) -> bool:
        return False

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self._value


Result: TypeAlias = Ok[T] | Err


class NoInput(Enum):
    """
    Enumerable type to handle setting default values.

    ``NoInput.blank`` signals that an argument was not given and that a value from
    :class:`~onrates.default.Defaults` should be used in its place.
    """

    blank = 0


def _drb(default: Any, possible_ni: Any | NoInput) -> Any:
    """(D)efault (r)eplaces (b)lank"""
    return default if isinstance(possible_ni, NoInput) else possible_ni
