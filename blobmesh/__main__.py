import logging
import time

from blobmesh.config import GridConfig
from blobmesh.constants import FRAMES, TIME_STEP
from blobmesh.core import MeshBuffers, extract
from blobmesh.fields import MetaBallField

logger = logging.getLogger("blobmesh")


class BlobAnimation:
    """Headless stand-in for a render loop: one extraction per frame."""

    def __init__(self, field=None, config=None):
        self.field = field if field is not None else MetaBallField()
        self.config = config if config is not None else GridConfig.from_env()
        self.mesh = MeshBuffers()
        self.current_time = 0.0
        # --- FPS Counter ---
        self.last_fps_time = time.time()
        self.frame_count = 0
        self.fps = 0

    def update_frame(self):
        self.current_time += TIME_STEP
        self.field.update(self.current_time)
        extract(self.field, self.config, out=self.mesh)

        self.frame_count += 1
        now = time.time()
        elapsed_fps = now - self.last_fps_time
        if elapsed_fps >= 0.25:
            self.fps = self.frame_count / elapsed_fps
            self.last_fps_time = now
            self.frame_count = 0
        return self.mesh


def main(frames=FRAMES):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    animation = BlobAnimation()
    logger.info(
        "Walking %d cells per frame (cell size %g)",
        animation.config.cell_count(),
        animation.config.cell_size,
    )
    for frame in range(frames):
        mesh = animation.update_frame()
        logger.info(
            "frame %d t=%.2f: %d triangles, %.1f fps",
            frame,
            animation.current_time,
            mesh.triangle_count,
            animation.fps,
        )
    return animation.mesh


if __name__ == "__main__":
    main()
