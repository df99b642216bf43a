# Constants
import os

EXTENT = float(os.environ.get("BLOB_EXTENT", 4.0))
CELL_SIZE = float(os.environ.get("BLOB_CELL_SIZE", 0.28))
NORMAL_STEP = float(os.environ.get("BLOB_NORMAL_STEP", 0.001))

# Below this the central-difference gradient is treated as flat
DEGENERATE_GRADIENT = 1e-12

###Demo
FRAMES = int(os.environ.get("BLOB_FRAMES", 10))
TIME_STEP = float(os.environ.get("BLOB_TIME_STEP", 0.05))
