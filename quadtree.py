import numpy as np
from typing import List, Optional

import constants


class QuadNode:
    __slots__ = ['center', 'size', 'mass', 'com', 'children', 'body_indices', 'is_leaf']

    def __init__(self, center: np.ndarray, size: float):
        self.center = center
        self.size = size  # Side length of the square cell
        self.mass = 0.0
        self.com = np.zeros(2, dtype=np.float64)  # Center of mass
        self.children: List["QuadNode"] = []  # NW, NE, SW, SE once split
        self.body_indices: List[int] = []
        self.is_leaf = True

    def contains(self, pos: np.ndarray) -> bool:
        half = self.size / 2
        return bool(np.all(np.abs(pos - self.center) <= half))


class QuadTree:
    """Barnes-Hut quadtree over a snapshot of body positions.

    Cells whose size / distance ratio falls below `theta` act as a single mass
    at their center of mass; everything else is opened down to the leaves,
    which are summed body by body. With theta=0 every cell is opened and the
    result is the exact pairwise sum.
    """

    def __init__(self, theta: float = 0.5, leaf_capacity: int = 16, max_depth: int = 32):
        if theta < 0:
            raise ValueError(f"theta must be >= 0, got {theta}")
        self.theta = theta
        self.leaf_capacity = max(1, leaf_capacity)
        self.max_depth = max_depth
        self.root: Optional[QuadNode] = None
        self.positions: Optional[np.ndarray] = None
        self.masses: Optional[np.ndarray] = None

    def build(self, positions: np.ndarray, masses: np.ndarray) -> None:
        self.positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
        self.masses = np.asarray(masses, dtype=np.float64)
        if len(self.positions) == 0:
            self.root = None
            return

        # Find bounds
        min_pos = np.min(self.positions, axis=0)
        max_pos = np.max(self.positions, axis=0)
        center = (min_pos + max_pos) / 2
        size = max(max_pos[0] - min_pos[0], max_pos[1] - min_pos[1]) * 1.1
        if size == 0.0:
            size = 1.0  # Every body at one point

        self.root = QuadNode(center, size)
        self.root.body_indices = list(range(len(self.positions)))
        self._subdivide(self.root, 0)

    def _subdivide(self, node: QuadNode, depth: int) -> None:
        indices = node.body_indices
        if len(indices) <= self.leaf_capacity or depth >= self.max_depth:
            # Compute center of mass for leaf node
            node.mass = float(np.sum(self.masses[indices]))
            if node.mass > 0:
                node.com = np.average(self.positions[indices], weights=self.masses[indices], axis=0)
            return

        # Create child nodes
        node.is_leaf = False
        quarter = node.size / 4
        for i in range(4):
            dx = quarter * (1 if i in [1, 3] else -1)
            dy = quarter * (1 if i in [0, 1] else -1)
            node.children.append(QuadNode(node.center + np.array([dx, dy]), node.size / 2))

        # Distribute bodies to children
        for idx in indices:
            quadrant = self._get_quadrant(self.positions[idx], node.center)
            node.children[quadrant].body_indices.append(idx)
        node.body_indices = []

        node.mass = 0.0
        weighted = np.zeros(2, dtype=np.float64)
        for child in node.children:
            if child.body_indices:
                self._subdivide(child, depth + 1)
                node.mass += child.mass
                weighted += child.mass * child.com
        if node.mass > 0:
            node.com = weighted / node.mass

    def _get_quadrant(self, pos: np.ndarray, center: np.ndarray) -> int:
        if pos[0] >= center[0]:
            return 1 if pos[1] >= center[1] else 3
        return 0 if pos[1] >= center[1] else 2

    def compute_acceleration(self, body_idx: int, G: float = constants.G) -> np.ndarray:
        """Gravitational acceleration on body `body_idx` from every other body."""
        acc = np.zeros(2, dtype=np.float64)
        if self.root is not None:
            self._accumulate(self.root, self.positions[body_idx], G, acc)
        return acc

    def _accumulate(self, node: QuadNode, pos: np.ndarray, G: float, acc: np.ndarray) -> None:
        if node.mass <= 0:
            return

        if node.is_leaf:
            idx = node.body_indices
            r = self.positions[idx] - pos
            r_sq = np.einsum('ij,ij->i', r, r)
            # Self and coincident bodies sit at r_sq == 0
            mask = r_sq > 0
            if np.any(mask):
                r_sq = r_sq[mask]
                scale = G * self.masses[idx][mask] / (r_sq * np.sqrt(r_sq))
                acc += scale @ r[mask]
            return

        # A far-away cell that cannot hold the body acts as one point mass
        r = node.com - pos
        r_mag = np.sqrt(r @ r)
        if r_mag > 0 and node.size / r_mag < self.theta and not node.contains(pos):
            acc += (G * node.mass / r_mag ** 3) * r
            return

        for child in node.children:
            self._accumulate(child, pos, G, acc)
