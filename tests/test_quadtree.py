import numpy as np
import pytest

from body import Body
from quadtree import QuadTree


def direct_accelerations(positions, masses, G=1.0):
    bodies = [Body(m, x, y, 0, 0, 1, (0, 0, 0)) for m, (x, y) in zip(masses, positions)]
    for b in bodies:
        b.update_acceleration(bodies, G)
    return np.array([b.acc for b in bodies])


def tree_accelerations(tree, positions, masses, G=1.0):
    tree.build(positions, masses)
    return np.array([tree.compute_acceleration(i, G) for i in range(len(positions))])


def test_empty_tree():
    tree = QuadTree()
    tree.build(np.zeros((0, 2)), np.zeros(0))
    assert tree.root is None


def test_single_body_feels_nothing():
    tree = QuadTree()
    tree.build(np.array([[3.0, 4.0]]), np.array([10.0]))
    np.testing.assert_array_equal(tree.compute_acceleration(0), [0.0, 0.0])


def test_zero_theta_matches_direct_sum():
    rng = np.random.default_rng(11)
    positions = rng.uniform(-100, 100, (80, 2))
    masses = rng.uniform(1, 10, 80)
    expected = direct_accelerations(positions, masses)
    got = tree_accelerations(QuadTree(theta=0.0, leaf_capacity=4), positions, masses)
    np.testing.assert_allclose(got, expected, rtol=1e-9, atol=1e-12)


def test_approximation_stays_close():
    rng = np.random.default_rng(2)
    positions = rng.normal(0, 50, (200, 2))
    masses = rng.uniform(1, 2, 200)
    expected = direct_accelerations(positions, masses)
    got = tree_accelerations(QuadTree(theta=0.5, leaf_capacity=4), positions, masses)
    error = np.linalg.norm(got - expected) / np.linalg.norm(expected)
    assert error < 0.05


def test_coincident_bodies_are_skipped():
    positions = np.array([[0.0, 0.0]] * 20 + [[10.0, 0.0]])
    masses = np.ones(21)
    got = tree_accelerations(QuadTree(theta=0.5, leaf_capacity=2), positions, masses)
    assert np.all(np.isfinite(got))
    # Each stacked body only feels the one off to the side
    np.testing.assert_allclose(got[:20], [[0.01, 0.0]] * 20)
    assert got[20][0] == pytest.approx(-20 * 0.01)


def test_rebuild_replaces_previous_snapshot():
    tree = QuadTree(theta=0.0)
    tree.build(np.array([[0.0, 0.0], [1.0, 0.0]]), np.array([1.0, 1.0]))
    tree.build(np.array([[0.0, 0.0], [2.0, 0.0]]), np.array([1.0, 1.0]))
    assert tree.compute_acceleration(0, G=1.0)[0] == pytest.approx(0.25)
