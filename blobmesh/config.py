import math
from dataclasses import dataclass, replace
from typing import Tuple

from blobmesh.constants import CELL_SIZE, EXTENT, NORMAL_STEP
from blobmesh.errors import ConfigurationError

Vec3 = Tuple[float, float, float]


# Axis-aligned box walked in cubic cells of cell_size
@dataclass(frozen=True)
class GridConfig:
    lower: Vec3 = (-EXTENT, -EXTENT, -EXTENT)
    upper: Vec3 = (EXTENT, EXTENT, EXTENT)
    cell_size: float = CELL_SIZE
    normal_step: float = NORMAL_STEP

    @classmethod
    def cube(cls, extent=EXTENT, cell_size=CELL_SIZE, normal_step=NORMAL_STEP):
        extent = _number("extent", extent)
        if not math.isfinite(extent) or extent <= 0:
            raise ConfigurationError(f"extent must be a positive number, got {extent!r}")
        return cls(
            lower=(-extent, -extent, -extent),
            upper=(extent, extent, extent),
            cell_size=cell_size,
            normal_step=normal_step,
        )

    @classmethod
    def from_env(cls):
        return cls.cube(EXTENT, CELL_SIZE, NORMAL_STEP)

    def validate(self):
        """Return a float-coerced copy, or raise ``ConfigurationError``."""
        cell_size = _number("cell_size", self.cell_size)
        normal_step = _number("normal_step", self.normal_step)
        lower = _point("lower", self.lower)
        upper = _point("upper", self.upper)
        if not math.isfinite(cell_size) or cell_size <= 0:
            raise ConfigurationError(f"cell_size must be a positive number, got {cell_size!r}")
        if not math.isfinite(normal_step) or normal_step <= 0:
            raise ConfigurationError(
                f"normal_step must be a positive number, got {normal_step!r}"
            )
        for axis, lo, hi in zip("xyz", lower, upper):
            if not (math.isfinite(lo) and math.isfinite(hi)) or hi <= lo:
                raise ConfigurationError(
                    f"empty grid region on {axis}: lower={lo!r} upper={hi!r}"
                )
        return replace(
            self, lower=lower, upper=upper, cell_size=cell_size, normal_step=normal_step
        )

    def cell_counts(self):
        # Same count as stepping lower, lower + cell, ... while below upper;
        # the slack absorbs spans that are an exact multiple of cell_size.
        return tuple(
            max(1, math.ceil((hi - lo) / self.cell_size - 1e-9))
            for lo, hi in zip(self.lower, self.upper)
        )

    def cell_count(self):
        nx, ny, nz = self.cell_counts()
        return nx * ny * nz


def _number(name, value):
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc


def _point(name, value):
    try:
        point = tuple(float(c) for c in value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be three numbers, got {value!r}") from exc
    if len(point) != 3:
        raise ConfigurationError(f"{name} must be three numbers, got {value!r}")
    return point
