# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Unit-tagged scalars for lengths and angles

Every quantity handed to or returned from the coordinate conversions is
tagged with its unit. The tags are thin ``float`` subclasses, so they can be
passed straight to ``math``/``numpy`` functions, but arithmetic between two
*different* units is refused:

>>> Meters(10) + Meters(5)
Meters(15.0)
>>> Degrees(90) + Radians(1.0)
Traceback (most recent call last):
    ...
TypeError: cannot combine Degrees with Radians

Plain numbers have no unit and take on the unit of the tagged operand, so
``Meters(10) + 1`` is ``Meters(11.0)``. Convert angles explicitly with
:meth:`Degrees.radians` and :meth:`Radians.degrees`.

Unit tags do not survive numpy scalar arithmetic: numpy handles
``np.float64(1.0) + Meters(2)`` itself and returns a plain ``3.0``. Wrap the
result again, e.g. ``Meters(...)``, when the unit matters.
"""

from numbers import Real
from typing import ClassVar

from .constants import D2R, R2D


class UnitFloat(float):
    """Base class for unit-tagged floating point values.

    Attributes
    ----------
    SYMBOL : str
        Unit symbol used by ``str()``
    """

    __slots__ = ()

    SYMBOL: ClassVar[str] = ""

    def __new__(cls, value: float = 0.0):
        return float.__new__(cls, value)

    def f64(self) -> float:
        """Return the value as a plain float"""
        return float(self)

    def _plain(self, other):
        """Return ``other`` as a float, or NotImplemented if it has no meaning here

        Raises
        ------
        TypeError
            If ``other`` is tagged with a different unit
        """
        if isinstance(other, UnitFloat):
            if type(other) is not type(self):
                raise TypeError(
                    f"cannot combine {type(self).__name__} with {type(other).__name__}"
                )
            return float(other)
        if isinstance(other, Real):
            return float(other)
        return NotImplemented

    def _wrap(self, value: float):
        return type(self)(value)

    # Arithmetic
    def __add__(self, other):
        value = self._plain(other)
        if value is NotImplemented:
            return value
        return self._wrap(float(self) + value)

    __radd__ = __add__

    def __sub__(self, other):
        value = self._plain(other)
        if value is NotImplemented:
            return value
        return self._wrap(float(self) - value)

    def __rsub__(self, other):
        value = self._plain(other)
        if value is NotImplemented:
            return value
        return self._wrap(value - float(self))

    def __mul__(self, k):
        # Scaling only; a product of two lengths is not a length
        if isinstance(k, UnitFloat) or not isinstance(k, Real):
            return NotImplemented
        return self._wrap(float(self) * float(k))

    __rmul__ = __mul__

    def __truediv__(self, k):
        if isinstance(k, UnitFloat):
            # Ratio of two values in the same unit is dimensionless
            return float(self) / self._plain(k)
        if not isinstance(k, Real):
            return NotImplemented
        return self._wrap(float(self) / float(k))

    def __neg__(self):
        return self._wrap(-float(self))

    def __pos__(self):
        return self

    def __abs__(self):
        return self._wrap(abs(float(self)))

    # Comparison
    def __eq__(self, other):
        if isinstance(other, UnitFloat) and type(other) is not type(self):
            return False
        return float.__eq__(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__

    def __lt__(self, other):
        value = self._plain(other)
        if value is NotImplemented:
            return value
        return float(self) < value

    def __le__(self, other):
        value = self._plain(other)
        if value is NotImplemented:
            return value
        return float(self) <= value

    def __gt__(self, other):
        value = self._plain(other)
        if value is NotImplemented:
            return value
        return float(self) > value

    def __ge__(self, other):
        value = self._plain(other)
        if value is NotImplemented:
            return value
        return float(self) >= value

    def __repr__(self):
        return f"{type(self).__name__}({float(self)!r})"

    def __str__(self):
        return f"{float(self)} {self.SYMBOL}"


class Meters(UnitFloat):
    """Length in meters"""

    __slots__ = ()
    SYMBOL = "m"


class Degrees(UnitFloat):
    """Angle in degrees"""

    __slots__ = ()
    SYMBOL = "deg"

    def radians(self) -> "Radians":
        """Return the angle in radians"""
        return Radians(float(self) * D2R)


class Radians(UnitFloat):
    """Angle in radians"""

    __slots__ = ()
    SYMBOL = "rad"

    def degrees(self) -> Degrees:
        """Return the angle in degrees"""
        return Degrees(float(self) * R2D)


__all__ = ["UnitFloat", "Meters", "Degrees", "Radians"]
