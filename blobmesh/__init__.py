from blobmesh.config import GridConfig
from blobmesh.core import (CellSample, MeshBuffers, estimate_normal, extract,
                           interpolate_edge, sample_cell)
from blobmesh.errors import (ConfigurationError, FieldEvaluationError,
                             MeshingError)
from blobmesh.fields import (MetaBall, MetaBallField, as_field, constant_field,
                             sphere_field)

__version__ = "0.1.0"
