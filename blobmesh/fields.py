import math

# Scalar fields: positive inside, non-positive outside.


def as_field(field):
    evaluate = getattr(field, "evaluate", None)
    if callable(evaluate):
        return evaluate
    if callable(field):
        return field
    raise TypeError(
        f"expected a callable or an object with evaluate(x, y, z), got {type(field).__name__}"
    )


def sphere_field(radius=1.0, center=(0.0, 0.0, 0.0)):
    cx, cy, cz = center

    def field(x, y, z):
        return radius - math.sqrt((x - cx) ** 2 + (y - cy) ** 2 + (z - cz) ** 2)

    return field


def constant_field(value):
    def field(x, y, z):
        return value

    return field


# --- Metaballs ---

# Squared distance floor so a ball's own center stays finite
MIN_DIST_SQ = 1e-12


class MetaBall:
    def __init__(self, center, radius, orbit=(0.0, 0.0, 0.0), speed=(0.0, 0.0, 0.0)):
        self.rest = tuple(float(c) for c in center)
        self.center = self.rest
        self.radius = float(radius)
        self.orbit = tuple(float(a) for a in orbit)
        self.speed = tuple(float(w) for w in speed)

    def move(self, time: float):
        # Lissajous orbit around the rest position
        self.center = tuple(
            c + a * math.sin(w * time + phase)
            for c, a, w, phase in zip(self.rest, self.orbit, self.speed, (0.0, 1.3, 2.6))
        )

    def contribution(self, x, y, z):
        cx, cy, cz = self.center
        dist_sq = (x - cx) ** 2 + (y - cy) ** 2 + (z - cz) ** 2
        return self.radius * self.radius / max(dist_sq, MIN_DIST_SQ)


class MetaBallField:
    """Sum of inverse-square blobs minus one.

    A lone ball is exactly the sphere of its radius. Call ``update`` once per
    frame; between updates the field is a pure function of position.
    """

    def __init__(self, balls=None):
        if balls is None:
            balls = default_balls()
        self.balls = list(balls)
        self.update(0.0)

    def update(self, time: float):
        self.time = time
        for ball in self.balls:
            ball.move(time)

    def evaluate(self, x, y, z):
        total = 0.0
        for ball in self.balls:
            total += ball.contribution(x, y, z)
        return total - 1.0

    def __call__(self, x, y, z):
        return self.evaluate(x, y, z)


def default_balls():
    return [
        MetaBall((0.0, 0.0, 0.0), 1.0, orbit=(0.5, 0.3, 0.2), speed=(1.0, 1.7, 0.6)),
        MetaBall((1.2, 0.4, 0.0), 0.8, orbit=(0.8, 0.6, 0.4), speed=(0.9, 1.1, 1.4)),
        MetaBall((-1.0, -0.6, 0.5), 0.7, orbit=(0.4, 0.9, 0.7), speed=(1.3, 0.7, 1.0)),
    ]
