"""Type definitions for periodic-series planetary theories.

Provides the immutable building blocks of a VSOP87-style theory:

- :class:`Term`: one periodic summand ``A * cos(B + C * τ)``.
- :class:`Series`: the ordered terms multiplying one power of ``τ`` for
  one coordinate axis.
- :class:`Table`: every series of a body, keyed by :class:`Axis`.
- :class:`TruncationSpec`: per-axis thresholds and a time horizon used
  to drop negligible terms.

All containers validate their contents on construction, so a
structurally invalid table fails where it is built rather than when it
is evaluated.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NamedTuple

import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from ephemjax.body import Body
from ephemjax.config import get_dtype
from ephemjax.constants import AS2RAD

MAX_POWER: int = 5
"""Highest power of ``τ`` a series may multiply."""


class Axis(enum.Enum):
    """Coordinate component a series contributes to.

    Attributes:
        L: Heliocentric ecliptic longitude [rad].
        B: Heliocentric ecliptic latitude [rad].
        R: Radius vector [AU].
        X: Rectangular x [AU].
        Y: Rectangular y [AU].
        Z: Rectangular z [AU].
    """

    L = "L"
    B = "B"
    R = "R"
    X = "X"
    Y = "Y"
    Z = "Z"

    @property
    def is_spherical(self) -> bool:
        """``True`` for the L, B and R axes."""
        return self in _SPHERICAL_AXES

    @property
    def is_angle(self) -> bool:
        """``True`` for axes measured in radians (L and B)."""
        return self in (Axis.L, Axis.B)

    @classmethod
    def from_name(cls, name: str | Axis) -> Axis:
        """Return the axis named *name* (case-insensitive).

        Raises:
            ValueError: If *name* is not an axis name.
        """
        if isinstance(name, Axis):
            return name
        try:
            return cls(str(name).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown axis '{name}'. Must be one of: "
                f"{', '.join(a.value for a in cls)}"
            ) from None


_SPHERICAL_AXES = (Axis.L, Axis.B, Axis.R)
_RECTANGULAR_AXES = (Axis.X, Axis.Y, Axis.Z)


class Equinox(enum.Enum):
    """Reference equinox the coordinates of a table are measured from.

    Attributes:
        J2000: Fixed mean dynamical equinox of J2000.0 (VSOP87 A, B, E).
        DATE: Mean dynamical equinox of the date (VSOP87 C, D).
    """

    J2000 = "j2000"
    DATE = "date"


class Term(NamedTuple):
    """One periodic term ``amplitude * cos(phase + frequency * τ)``.

    Attributes:
        amplitude: Amplitude in the native unit of the axis (rad or AU).
        phase: Phase at J2000.0 [rad].
        frequency: Angular frequency [rad / Julian millennium].
    """

    amplitude: float
    phase: float
    frequency: float

    def normalized(self) -> Term:
        """Return an equivalent term with a non-negative amplitude.

        A negative amplitude is folded into the phase, since
        ``-A cos(x) == A cos(x + π)``.
        """
        if self.amplitude < 0.0:
            return Term(-self.amplitude, self.phase + math.pi, self.frequency)
        return self

    def value(self, tau: ArrayLike) -> Array:
        """Evaluate the term at ``τ`` Julian millennia from J2000.0."""
        return self.amplitude * jnp.cos(self.phase + self.frequency * tau)


def _as_term(raw) -> Term:
    term = Term(*(float(v) for v in raw))
    if not all(math.isfinite(v) for v in term):
        raise ValueError(f"Term coefficients must be finite, got {tuple(raw)}")
    return term.normalized()


@dataclass(frozen=True)
class Series:
    """Ordered terms multiplying ``τ**power`` for one axis.

    Terms are kept in source order; evaluation always sums every term in
    that order, so repeated evaluation is bit-reproducible.

    Attributes:
        axis: Axis the series contributes to.
        power: Power of ``τ`` multiplying the series, ``0 <= power <= 5``.
        terms: Periodic terms, amplitudes normalized to be non-negative.

    Raises:
        ValueError: If *power* is out of range or a coefficient is not finite.
    """

    axis: Axis
    power: int
    terms: tuple[Term, ...] = ()
    _coefficients: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        axis = Axis.from_name(self.axis)
        if isinstance(self.power, bool) or int(self.power) != self.power:
            raise ValueError(f"Series power must be an integer, got {self.power!r}")
        if not 0 <= self.power <= MAX_POWER:
            raise ValueError(
                f"Series power must be between 0 and {MAX_POWER}, got {self.power}"
            )
        terms = tuple(_as_term(t) for t in self.terms)
        object.__setattr__(self, "axis", axis)
        object.__setattr__(self, "power", int(self.power))
        object.__setattr__(self, "terms", terms)
        coefficients = np.array(terms, dtype=np.float64).reshape(len(terms), 3)
        coefficients.setflags(write=False)
        object.__setattr__(self, "_coefficients", coefficients)

    def __len__(self) -> int:
        return len(self.terms)

    @property
    def coefficients(self) -> np.ndarray:
        """Read-only ``(N, 3)`` array of ``[amplitude, phase, frequency]`` rows."""
        return self._coefficients

    def value(self, tau: ArrayLike) -> Array:
        """Sum every term of the series at ``τ``.

        Args:
            tau: Julian millennia from J2000.0.

        Returns:
            ``Σ A * cos(B + C * τ)``; zero for an empty series.
        """
        dtype = get_dtype()
        tau = jnp.asarray(tau, dtype=dtype)
        if not self.terms:
            return jnp.zeros_like(tau)
        c = jnp.asarray(self._coefficients, dtype=dtype)
        arg = c[:, 1] + c[:, 2] * tau[..., None]
        return jnp.sum(c[:, 0] * jnp.cos(arg), axis=-1)


@dataclass(frozen=True)
class Table:
    """Complete periodic-series theory for one body.

    ``axes[axis][n]`` is the series multiplying ``τ**n``.  Powers must be
    contiguous from zero; an axis may be absent entirely, in which case
    it evaluates to zero.  Spherical (L, B, R) and rectangular (X, Y, Z)
    axes cannot be mixed in one table.

    Attributes:
        name: Human-readable identifier, e.g. ``"VSOP87D venus"``.
        axes: Read-only mapping of axis to series ordered by power.
        equinox: Equinox the table's coordinates are referred to.
        body: Body the table describes, if known.

    Raises:
        ValueError: If the table is empty or a series is misplaced.
    """

    name: str
    axes: Mapping[Axis, tuple[Series, ...]]
    equinox: Equinox = Equinox.DATE
    body: Body | None = None

    def __post_init__(self):
        if not self.axes:
            raise ValueError(f"Table '{self.name}' has no series")

        axes = {}
        for key, series_list in self.axes.items():
            axis = Axis.from_name(key)
            series_list = tuple(series_list)
            if not series_list:
                raise ValueError(f"Table '{self.name}' axis {axis.value} has no series")
            for n, series in enumerate(series_list):
                if not isinstance(series, Series):
                    raise ValueError(
                        f"Table '{self.name}' axis {axis.value} entry {n} is not a Series"
                    )
                if series.axis is not axis:
                    raise ValueError(
                        f"Table '{self.name}': series for axis {series.axis.value} "
                        f"stored under axis {axis.value}"
                    )
                if series.power != n:
                    raise ValueError(
                        f"Table '{self.name}' axis {axis.value}: expected power {n} "
                        f"at position {n}, got {series.power}"
                    )
            axes[axis] = series_list

        if any(a.is_spherical for a in axes) and not all(a.is_spherical for a in axes):
            raise ValueError(
                f"Table '{self.name}' mixes spherical and rectangular axes"
            )

        object.__setattr__(self, "axes", MappingProxyType(axes))
        object.__setattr__(self, "equinox", Equinox(self.equinox))

    @property
    def is_spherical(self) -> bool:
        """``True`` if the table holds L, B, R series."""
        return next(iter(self.axes)).is_spherical

    def series(self, axis: Axis | str, power: int) -> Series | None:
        """Return the series for (*axis*, *power*), or ``None`` if absent."""
        series_list = self.axes.get(Axis.from_name(axis), ())
        if 0 <= power < len(series_list):
            return series_list[power]
        return None

    def term_count(self, axis: Axis | str | None = None) -> int:
        """Number of terms in the table, or in one axis if given."""
        if axis is not None:
            return sum(len(s) for s in self.axes.get(Axis.from_name(axis), ()))
        return sum(len(s) for series_list in self.axes.values() for s in series_list)

    @classmethod
    def from_coefficients(
        cls,
        name: str,
        coefficients: Mapping[Axis | str, Sequence[Iterable[Sequence[float]]]],
        equinox: Equinox = Equinox.DATE,
        body: Body | None = None,
        amplitude_scale: float = 1.0,
    ) -> Table:
        """Build a table from nested ``[A, B, C]`` coefficient lists.

        Args:
            name: Table name.
            coefficients: Mapping of axis (or axis name) to a list, indexed
                by power, of term lists ``[[A, B, C], ...]``.
            equinox: Equinox of the coefficients. Default: ``Equinox.DATE``.
            body: Body described by the table.
            amplitude_scale: Factor applied to every amplitude, e.g. ``1e-8``
                for tables tabulated in units of 1e-8 rad.

        Returns:
            Validated, immutable :class:`Table`.

        Examples:
            ```python
            from ephemjax.series import Table
            table = Table.from_coefficients(
                "toy", {"L": [[[1.0, 0.0, 0.0]], [[1.0, 0.0, 0.0]]]}
            )
            ```
        """
        axes = {}
        for key, powers in coefficients.items():
            axis = Axis.from_name(key)
            axes[axis] = tuple(
                Series(
                    axis,
                    n,
                    tuple(
                        (amplitude_scale * float(t[0]), t[1], t[2]) for t in terms
                    ),
                )
                for n, terms in enumerate(powers)
            )
        return cls(name=name, axes=axes, equinox=equinox, body=body)


@dataclass(frozen=True)
class TruncationSpec:
    """Per-axis thresholds and time horizon for series truncation.

    Attributes:
        thresholds: Minimum worst-case contribution per axis, in the native
            unit of the axis (rad for L and B, AU for R, X, Y, Z).  Axes
            without a threshold are left untouched.
        horizon: Time span ``T`` in Julian centuries over which the
            worst-case contribution ``|A| * T**n`` of a term is bounded.

    Raises:
        ValueError: If the horizon or a threshold is non-positive or not finite.
    """

    thresholds: Mapping[Axis, float]
    horizon: float

    def __post_init__(self):
        horizon = float(self.horizon)
        if not math.isfinite(horizon) or horizon <= 0.0:
            raise ValueError(
                f"Truncation horizon must be a positive finite number of "
                f"centuries, got {self.horizon}"
            )
        thresholds = {}
        for key, value in self.thresholds.items():
            axis = Axis.from_name(key)
            value = float(value)
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(
                    f"Truncation threshold for axis {axis.value} must be a "
                    f"positive finite number, got {value}"
                )
            thresholds[axis] = value
        object.__setattr__(self, "horizon", horizon)
        object.__setattr__(self, "thresholds", MappingProxyType(thresholds))

    def threshold(self, axis: Axis | str) -> float | None:
        """Threshold for *axis*, or ``None`` if the axis is not truncated."""
        return self.thresholds.get(Axis.from_name(axis))

    @classmethod
    def from_arcseconds(
        cls,
        horizon: float,
        L: float | None = None,
        B: float | None = None,
        R: float | None = None,
    ) -> TruncationSpec:
        """Build truncation settings with angular thresholds given in arcseconds.

        Args:
            horizon: Time horizon in Julian centuries.
            L: Longitude threshold [arcsec].
            B: Latitude threshold [arcsec].
            R: Radius threshold [AU].

        Returns:
            :class:`TruncationSpec` with L and B converted to radians.

        Examples:
            ```python
            from ephemjax.series import TruncationSpec
            spec = TruncationSpec.from_arcseconds(30.0, L=0.001, B=0.001, R=1e-8)
            ```
        """
        thresholds = {}
        if L is not None:
            thresholds[Axis.L] = L * AS2RAD
        if B is not None:
            thresholds[Axis.B] = B * AS2RAD
        if R is not None:
            thresholds[Axis.R] = R
        return cls(thresholds=thresholds, horizon=horizon)
