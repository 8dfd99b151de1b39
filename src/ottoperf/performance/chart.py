"""Digitized PA-28-161 takeoff performance chart.

This module holds the reference data from the POH takeoff distance chart
(Figure 5-6, flaps 0°, paved level dry runway) and exposes it through a
read-only lookup surface.

Distances are stored as a 3-D array indexed ``(altitude, temperature, weight)``.
The published chart lists, for each altitude, one row per weight with one
column per temperature; the rows are transposed once when the store is built.

Typical usage example:
    from ottoperf.performance.chart import PA28_161_CHART, ChartAxis

    top = PA28_161_CHART.axis_value(ChartAxis.ALTITUDE, 7)  # 7000.0
    sea_level = PA28_161_CHART.base_distance(0, 0, 0)  # 900.0
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np
import numpy.typing as npt

from ottoperf.performance.errors import ChartError, IndexOutOfRangeError


class ChartAxis(Enum):
    """Independent dimensions of the chart."""

    ALTITUDE = "altitude"
    TEMPERATURE = "temperature"
    WEIGHT = "weight"
    HEADWIND = "headwind"
    TAILWIND = "tailwind"


@dataclass(frozen=True)
class Axis:
    """Ordered breakpoints along one chart dimension.

    Attributes:
        name: Human readable axis name.
        values: Strictly increasing breakpoint values.
    """

    name: str
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ChartError(f"Axis '{self.name}' has no breakpoints")
        for lower, upper in zip(self.values, self.values[1:]):
            if upper <= lower:
                raise ChartError(
                    f"Axis '{self.name}' breakpoints must be strictly increasing "
                    f"({lower} followed by {upper})"
                )

    def __len__(self) -> int:
        return len(self.values)

    @property
    def minimum(self) -> float:
        return self.values[0]

    @property
    def maximum(self) -> float:
        return self.values[-1]

    def value(self, index: int) -> float:
        """Get the breakpoint at ``index``.

        Raises:
            IndexOutOfRangeError: If index is outside [0, len(axis)).
        """
        _check_index(self.name, index, len(self.values))
        return self.values[index]


def _check_index(axis: str, index: int, size: int) -> None:
    # Negative indices are rejected rather than wrapped.
    if not 0 <= index < size:
        raise IndexOutOfRangeError(axis, index, size)


def _frozen(values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    array = np.array(values, dtype=np.float64)
    array.flags.writeable = False
    return array


class ChartStore:
    """Immutable store of axis breakpoints and tabulated chart values.

    The store is built once and never mutated, so a single instance can be
    shared by any number of concurrent calculations.

    Examples:
        >>> chart = ChartStore(altitudes=[0, 1000], temperatures=[0], weights=[2000],
        ...                    headwinds=[0], tailwinds=[0],
        ...                    distances=[[[1500]], [[1600]]],
        ...                    liftoff_speeds=[46], barrier_speeds=[52])
        >>> chart.base_distance(1, 0, 0)
        1600.0
    """

    def __init__(
        self,
        altitudes: Sequence[float],
        temperatures: Sequence[float],
        weights: Sequence[float],
        headwinds: Sequence[float],
        tailwinds: Sequence[float],
        distances: npt.ArrayLike,
        liftoff_speeds: Sequence[float],
        barrier_speeds: Sequence[float],
    ) -> None:
        """Build the store and verify table shapes against the axes.

        Args:
            altitudes: Pressure altitude breakpoints (ft).
            temperatures: Outside air temperature breakpoints (°C).
            weights: Takeoff weight breakpoints (lbs).
            headwinds: Headwind breakpoints (kts).
            tailwinds: Tailwind breakpoints (kts).
            distances: Distances over 50 ft (ft), shaped
                (altitudes, temperatures, weights).
            liftoff_speeds: Liftoff speed per weight (KIAS).
            barrier_speeds: 50 ft barrier speed per weight (KIAS).

        Raises:
            ChartError: If an axis is malformed or a table does not match
                the axis dimensions.
        """
        self._axes = {
            ChartAxis.ALTITUDE: Axis("altitude", tuple(float(v) for v in altitudes)),
            ChartAxis.TEMPERATURE: Axis("temperature", tuple(float(v) for v in temperatures)),
            ChartAxis.WEIGHT: Axis("weight", tuple(float(v) for v in weights)),
            ChartAxis.HEADWIND: Axis("headwind", tuple(float(v) for v in headwinds)),
            ChartAxis.TAILWIND: Axis("tailwind", tuple(float(v) for v in tailwinds)),
        }

        self._distances = _frozen(distances)
        self._liftoff_speeds = _frozen(liftoff_speeds)
        self._barrier_speeds = _frozen(barrier_speeds)

        expected = (len(self.altitudes), len(self.temperatures), len(self.weights))
        if self._distances.shape != expected:
            raise ChartError(
                f"Distance table shape {self._distances.shape} does not match axes {expected}"
            )
        for label, table in (("liftoff", self._liftoff_speeds), ("barrier", self._barrier_speeds)):
            if table.shape != (len(self.weights),):
                raise ChartError(
                    f"{label.capitalize()} speed table has {table.size} entries, "
                    f"expected {len(self.weights)}"
                )

    @property
    def altitudes(self) -> Axis:
        return self._axes[ChartAxis.ALTITUDE]

    @property
    def temperatures(self) -> Axis:
        return self._axes[ChartAxis.TEMPERATURE]

    @property
    def weights(self) -> Axis:
        return self._axes[ChartAxis.WEIGHT]

    @property
    def headwinds(self) -> Axis:
        return self._axes[ChartAxis.HEADWIND]

    @property
    def tailwinds(self) -> Axis:
        return self._axes[ChartAxis.TAILWIND]

    def axis_value(self, axis: ChartAxis, index: int) -> float:
        """Get a breakpoint value.

        Args:
            axis: Which chart dimension to read.
            index: Breakpoint index along that dimension.

        Returns:
            The breakpoint value.

        Raises:
            IndexOutOfRangeError: If index is outside the axis.
        """
        return self._axes[axis].value(index)

    def base_distance(self, altitude_index: int, temperature_index: int, weight_index: int) -> float:
        """Get the zero-wind distance over 50 ft at an exact grid point.

        Raises:
            IndexOutOfRangeError: If any index is outside its axis.
        """
        _check_index("altitude", altitude_index, len(self.altitudes))
        _check_index("temperature", temperature_index, len(self.temperatures))
        _check_index("weight", weight_index, len(self.weights))
        return float(self._distances[altitude_index, temperature_index, weight_index])

    def liftoff_speed(self, weight_index: int) -> float:
        """Get the liftoff speed (KIAS) at a weight breakpoint."""
        _check_index("weight", weight_index, len(self.weights))
        return float(self._liftoff_speeds[weight_index])

    def barrier_speed(self, weight_index: int) -> float:
        """Get the 50 ft barrier speed (KIAS) at a weight breakpoint."""
        _check_index("weight", weight_index, len(self.weights))
        return float(self._barrier_speeds[weight_index])


# Figure 5-6 rows: one row per weight (1600, 1800, 2000, 2200, 2325 lbs),
# columns are -40, -20, 0, 20, 40 °C.
_FIGURE_5_6 = (
    # 0 ft
    ((900, 1050, 1200, 1350, 1500),
     (1050, 1200, 1350, 1500, 1650),
     (1200, 1350, 1500, 1650, 1800),
     (1350, 1500, 1650, 1800, 1950),
     (1450, 1600, 1750, 1900, 2050)),
    # 1000 ft
    ((1000, 1150, 1300, 1450, 1600),
     (1150, 1300, 1450, 1600, 1750),
     (1300, 1450, 1600, 1750, 1900),
     (1450, 1600, 1750, 1900, 2050),
     (1550, 1700, 1850, 2000, 2150)),
    # 2000 ft
    ((1100, 1250, 1400, 1550, 1700),
     (1250, 1400, 1550, 1700, 1850),
     (1400, 1550, 1700, 1850, 2000),
     (1550, 1700, 1850, 2000, 2150),
     (1650, 1800, 1950, 2100, 2250)),
    # 3000 ft
    ((1200, 1350, 1500, 1650, 1800),
     (1350, 1500, 1650, 1800, 1950),
     (1500, 1650, 1800, 1950, 2100),
     (1650, 1800, 1950, 2100, 2250),
     (1750, 1900, 2050, 2200, 2350)),
    # 4000 ft
    ((1300, 1450, 1600, 1750, 1900),
     (1450, 1600, 1750, 1900, 2050),
     (1600, 1750, 1900, 2050, 2200),
     (1750, 1900, 2050, 2200, 2350),
     (1850, 2000, 2150, 2300, 2450)),
    # 5000 ft
    ((1450, 1600, 1750, 1900, 2050),
     (1600, 1750, 1900, 2050, 2200),
     (1750, 1900, 2050, 2200, 2350),
     (1900, 2050, 2200, 2350, 2500),
     (2000, 2150, 2300, 2450, 2600)),
    # 6000 ft
    ((1600, 1750, 1900, 2050, 2200),
     (1750, 1900, 2050, 2200, 2350),
     (1900, 2050, 2200, 2350, 2500),
     (2050, 2200, 2350, 2500, 2650),
     (2150, 2300, 2450, 2600, 2750)),
    # 7000 ft
    ((1750, 1900, 2050, 2200, 2350),
     (1900, 2050, 2200, 2350, 2500),
     (2050, 2200, 2350, 2500, 2650),
     (2200, 2350, 2500, 2650, 2800),
     (2300, 2450, 2600, 2750, 2900)),
)  # fmt: skip

PA28_161_CHART = ChartStore(
    altitudes=(0, 1000, 2000, 3000, 4000, 5000, 6000, 7000),
    temperatures=(-40, -20, 0, 20, 40),
    weights=(1600, 1800, 2000, 2200, 2325),
    headwinds=(0, 5, 10, 15),
    tailwinds=(0, 5),
    distances=np.transpose(np.array(_FIGURE_5_6), (0, 2, 1)),
    liftoff_speeds=(42, 44, 46, 48, 50),
    barrier_speeds=(48, 50, 52, 54, 55),
)
