import logging
import math
import time
from collections import namedtuple
from dataclasses import dataclass, field as dataclass_field
from typing import List, Tuple

import numpy as np

from blobmesh.config import GridConfig
from blobmesh.constants import DEGENERATE_GRADIENT, NORMAL_STEP
from blobmesh.errors import FieldEvaluationError
from blobmesh.fields import as_field
from blobmesh.tables import CUBE_CORNERS, CUBE_EDGES, case_triangles

logger = logging.getLogger(__name__)

CellSample = namedtuple("CellSample", ["triangles", "values", "case"])


@dataclass
class MeshBuffers:
    vertices: List[Tuple[float, float, float]] = dataclass_field(default_factory=list)
    normals: List[Tuple[float, float, float]] = dataclass_field(default_factory=list)
    indices: List[int] = dataclass_field(default_factory=list)

    def clear(self):
        self.vertices.clear()
        self.normals.clear()
        self.indices.clear()

    @property
    def triangle_count(self):
        return len(self.indices) // 3

    def as_arrays(self):
        vertices = np.asarray(self.vertices, dtype=np.float32).reshape(-1, 3)
        normals = np.asarray(self.normals, dtype=np.float32).reshape(-1, 3)
        indices = np.asarray(self.indices, dtype=np.int32)
        return vertices, normals, indices


def _evaluate(field, x, y, z):
    try:
        value = float(field(x, y, z))
    except Exception as exc:
        logger.error("Scalar field failed at (%g, %g, %g): %s", x, y, z, exc)
        raise FieldEvaluationError(
            f"scalar field failed at ({x}, {y}, {z}): {exc}", point=(x, y, z)
        ) from exc
    if not math.isfinite(value):
        logger.error("Scalar field returned %r at (%g, %g, %g)", value, x, y, z)
        raise FieldEvaluationError(
            f"scalar field returned {value!r} at ({x}, {y}, {z})", point=(x, y, z)
        )
    return value


def _sample_cell(field, origin, cell_size):
    corners = CUBE_CORNERS * cell_size + np.asarray(origin, dtype=np.float64)
    values = [_evaluate(field, x, y, z) for x, y, z in corners.tolist()]
    case = 0
    for i, value in enumerate(values):
        if value > 0:
            case |= 1 << i
    return CellSample(case_triangles(case), values, case)


def _estimate_normal(field, point, step):
    x, y, z = (float(c) for c in point)
    gradient = np.array(
        [
            _evaluate(field, x + step, y, z) - _evaluate(field, x - step, y, z),
            _evaluate(field, x, y + step, z) - _evaluate(field, x, y - step, z),
            _evaluate(field, x, y, z + step) - _evaluate(field, x, y, z - step),
        ]
    )
    length = np.linalg.norm(gradient)
    if length < DEGENERATE_GRADIENT:
        return np.zeros(3)
    # Differences point inward for a positive-inside field
    return -gradient / length


# --- Cell sampling ---
def sample_cell(field, origin, cell_size):
    """Evaluate the 8 corners of one cell and look up its case."""
    return _sample_cell(as_field(field), origin, cell_size)


# --- Edge interpolation ---
def interpolate_edge(edge, values, origin, cell_size):
    v0, v1 = CUBE_EDGES[edge]
    f0, f1 = values[v0], values[v1]
    denom = f1 - f0
    if denom == 0:
        # Equal endpoint values: snap to v0
        t = 1.0
    else:
        t = min(max(f1 / denom, 0.0), 1.0)
    local = CUBE_CORNERS[v0] * t + CUBE_CORNERS[v1] * (1 - t)
    return local * cell_size + np.asarray(origin, dtype=np.float64)


def estimate_normal(field, point, step=NORMAL_STEP):
    return _estimate_normal(as_field(field), point, step)


# --- Grid walk ---
def _walk(field, config, mesh):
    cell_size = config.cell_size
    lower = np.asarray(config.lower, dtype=np.float64)
    nx, ny, nz = config.cell_counts()
    for ix in range(nx):
        for iy in range(ny):
            for iz in range(nz):
                origin = lower + np.array([ix, iy, iz], dtype=np.float64) * cell_size
                triangles, values, _ = _sample_cell(field, origin, cell_size)
                for triangle in triangles:
                    # Table order is the winding order
                    for edge in triangle:
                        position = interpolate_edge(edge, values, origin, cell_size)
                        normal = _estimate_normal(field, position, config.normal_step)
                        mesh.indices.append(len(mesh.vertices))
                        mesh.vertices.append(tuple(position.tolist()))
                        mesh.normals.append(tuple(normal.tolist()))


def extract(field, config=None, out=None):
    """Run one full marching cubes pass over ``config``'s region.

    Cells are visited x outer, y middle, z inner. ``out`` is cleared and
    refilled when given; a failed pass leaves it empty.
    """
    if config is None:
        config = GridConfig.from_env()
    config = config.validate()
    field = as_field(field)
    mesh = out if out is not None else MeshBuffers()
    mesh.clear()

    started = time.perf_counter()
    try:
        _walk(field, config, mesh)
    except FieldEvaluationError:
        mesh.clear()
        raise

    logger.debug(
        "Extracted %d triangles from %d cells in %.3fs",
        mesh.triangle_count,
        config.cell_count(),
        time.perf_counter() - started,
    )
    return mesh
