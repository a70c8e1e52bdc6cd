import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

import constants
from body import Body
from quadtree import QuadTree

logger = logging.getLogger(__name__)

# render(position, radius, color)
RenderSink = Callable[[Tuple[float, float], float, Tuple[int, int, int]], None]

SOLVERS = ("direct", "barnes-hut")


class Simulation:
    """Owns the bodies of one gravity sandbox and advances them frame by frame.

    Bodies are queued with `add` while the simulation is being set up. `start`
    moves them into the active set once; from then on every `step` runs three
    phases over the whole set:

    1. every acceleration, from one snapshot of positions
    2. every velocity
    3. every position, each followed by a hand-off to the render sink
    """

    def __init__(self, G: float = constants.G, dt: float = 1.0, solver: str = "direct",
                 theta: float = 0.5, workers: int = 1):
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        if solver not in SOLVERS:
            raise ValueError(f"unknown solver {solver!r}, expected one of {SOLVERS}")
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")

        self.G = G
        self.dt = dt
        self.solver = solver
        self.tick = 0
        self._pending: List[Body] = []
        self._active: List[Body] = []
        self._running = False
        self.quadtree = QuadTree(theta=theta) if solver == "barnes-hut" else None

        # Phase 1 writes only each body's own acceleration, so it can fan out
        self.workers = workers
        self.executor = ThreadPoolExecutor(max_workers=workers) if workers > 1 else None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        if self.executor is not None:
            self.executor.shutdown(wait=True)
            self.executor = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def bodies(self) -> Tuple[Body, ...]:
        """Active bodies once running, pending bodies before that."""
        return tuple(self._active if self._running else self._pending)

    def add(self, body: Body) -> Body:
        if self._running:
            raise RuntimeError("cannot add bodies to a running simulation")
        self._pending.append(body)
        return body

    def extend(self, bodies: Iterable[Body]) -> None:
        for body in bodies:
            self.add(body)

    def start(self) -> None:
        """Freeze the pending bodies into the active set and begin integrating."""
        if self._running:
            return
        self._active = self._pending
        self._pending = []
        self._running = True
        logger.info("Simulation started with %d bodies (solver=%s, workers=%d)",
                    len(self._active), self.solver, self.workers)

    def step(self, render: Optional[RenderSink] = None) -> bool:
        """Advance the simulation by one timestep.

        Returns False without doing anything until `start` has been called.
        """
        if not self._running:
            return False

        self.tick += 1
        bodies = self._active

        self._update_accelerations(bodies)

        for body in bodies:
            body.update_velocity(self.dt)

        for body in bodies:
            body.update_position(self.dt)
            if render is not None:
                render((body.x, body.y), body.radius, body.color)

        logger.debug("tick %d: %d bodies", self.tick, len(bodies))
        return True

    def run(self, ticks: int, render: Optional[RenderSink] = None) -> None:
        for _ in range(ticks):
            self.step(render)

    def _update_accelerations(self, bodies: List[Body]) -> None:
        if self.quadtree is not None:
            self.quadtree.build(np.array([b.pos for b in bodies]).reshape(-1, 2),
                                np.array([b.mass for b in bodies]))
            compute = self._compute_tree_chunk
        else:
            compute = self._compute_direct_chunk

        n_bodies = len(bodies)
        if self.executor is None or n_bodies < 2:
            compute(bodies, (0, n_bodies))
            return

        # Create chunks for parallel processing
        chunk_size = max(1, math.ceil(n_bodies / self.workers))
        chunks = [(start, min(start + chunk_size, n_bodies))
                  for start in range(0, n_bodies, chunk_size)]
        futures = [self.executor.submit(compute, bodies, chunk) for chunk in chunks]
        # Every acceleration must land before any velocity moves
        for future in futures:
            future.result()

    def _compute_direct_chunk(self, bodies: List[Body], chunk_range: Tuple[int, int]) -> None:
        start_idx, end_idx = chunk_range
        for i in range(start_idx, end_idx):
            bodies[i].update_acceleration(bodies, self.G)

    def _compute_tree_chunk(self, bodies: List[Body], chunk_range: Tuple[int, int]) -> None:
        start_idx, end_idx = chunk_range
        for i in range(start_idx, end_idx):
            bodies[i].acc = self.quadtree.compute_acceleration(i, self.G)

    # Diagnostics

    def total_momentum(self) -> np.ndarray:
        momentum = np.zeros(2, dtype=np.float64)
        for body in self.bodies:
            momentum += body.mass * body.vel
        return momentum

    def total_energy(self) -> float:
        """Kinetic plus pairwise potential energy of the current bodies."""
        bodies = self.bodies
        kinetic = sum(0.5 * b.mass * float(b.vel @ b.vel) for b in bodies)
        potential = 0.0
        for i, a in enumerate(bodies):
            for b in bodies[i + 1:]:
                r = b.pos - a.pos
                r_mag = math.sqrt(float(r @ r))
                if r_mag > 0:
                    potential -= self.G * a.mass * b.mass / r_mag
        return kinetic + potential
