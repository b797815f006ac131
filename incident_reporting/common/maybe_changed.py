# Recidiviz - a data platform for criminal justice reform
# Copyright (C) 2024 Recidiviz, Inc.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""Values that may or may not have been changed by an operation.

Callers wrap the result of an update in Changed or Unchanged, so that follow-up
work such as logging or recording metrics runs only when something changed:

    report_or_unchanged.also_if_changed(lambda report: logging.info(...))
"""
from typing import Any, Callable, Generic, TypeVar

import attr

T = TypeVar("T")


@attr.s(frozen=True)
class MaybeChanged(Generic[T]):
    """Base class for a value plus whether it was changed."""

    value: T = attr.ib()

    @property
    def is_changed(self) -> bool:
        raise NotImplementedError

    def also_if_changed(self, block: Callable[[T], Any]) -> "MaybeChanged[T]":
        """Calls |block| with the value if it was changed. Returns self."""
        raise NotImplementedError

    # Consider MaybeChanged abstract and only allow instantiating subclasses
    def __new__(cls, *_: Any, **__: Any) -> "MaybeChanged[T]":
        if cls is MaybeChanged:
            raise TypeError("Abstract class cannot be instantiated")
        return super().__new__(cls)


@attr.s(frozen=True)
class Unchanged(MaybeChanged[T]):
    @property
    def is_changed(self) -> bool:
        return False

    def also_if_changed(self, block: Callable[[T], Any]) -> "Unchanged[T]":
        return self


@attr.s(frozen=True)
class Changed(MaybeChanged[T]):
    @property
    def is_changed(self) -> bool:
        return True

    def also_if_changed(self, block: Callable[[T], Any]) -> "Changed[T]":
        block(self.value)
        return self
