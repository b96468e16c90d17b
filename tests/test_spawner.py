"""
Tests for obstacle creation and spawn thresholds.
"""

import random

from flappy_term.constants import GameConfig
from flappy_term.data_models import Edge
from flappy_term.spawner import ObstacleSpawner


class TestObstacleSpawner:
    """Test cases for the ObstacleSpawner class."""

    def test_threshold_band(self, rng):
        """Every threshold lies in [50, 75)."""
        spawner = ObstacleSpawner(rng=rng)
        draws = [spawner.draw_threshold() for _ in range(2000)]
        assert all(50 <= t < 75 for t in draws)
        assert min(draws) == 50
        assert max(draws) == 74

    def test_gap_height_band(self, rng):
        """gap_height lies in (2H/3 - H/4, 2H/3]."""
        spawner = ObstacleSpawner(rng=rng)
        low, high = 2 / 3 * 30 - 30 / 4, 2 / 3 * 30
        for _ in range(500):
            obstacle = spawner.create(0.275)
            assert low < obstacle.gap_height <= high

    def test_block_layout(self, rng):
        """Blocks fill width * (int(gap_height) - 1) cells flush to the right edge."""
        spawner = ObstacleSpawner(rng=rng)
        for _ in range(200):
            obstacle = spawner.create(0.275)
            rows_per_column = int(obstacle.gap_height) - 1
            assert obstacle.width == 2
            assert len(obstacle.blocks) == 2 * rows_per_column
            assert {b.position.column for b in obstacle.blocks} == {50, 49}
            assert all(b.x_float == float(b.position.column) for b in obstacle.blocks)

            rows = sorted({b.row for b in obstacle.blocks})
            if obstacle.edge is Edge.CEILING:
                assert rows == list(range(0, rows_per_column))
            else:
                assert rows == list(range(30 - rows_per_column, 30))

    def test_shared_velocity_and_edge(self, rng):
        """Every obstacle carries the velocity it was created with."""
        spawner = ObstacleSpawner(rng=rng)
        obstacle = spawner.create(0.5)
        assert obstacle.velocity == 0.5
        assert not obstacle.offscreen
        assert spawner.create().velocity == 0.275

    def test_both_edges_are_used(self, rng):
        """The anchoring edge is drawn at random."""
        spawner = ObstacleSpawner(rng=rng)
        edges = {spawner.create().edge for _ in range(100)}
        assert edges == {Edge.CEILING, Edge.FLOOR}

    def test_seeded_rng_is_reproducible(self):
        """Two spawners with the same seed build the same walls."""
        first = ObstacleSpawner(rng=random.Random(7))
        second = ObstacleSpawner(rng=random.Random(7))
        for _ in range(10):
            assert first.create() == second.create()
            assert first.draw_threshold() == second.draw_threshold()

    def test_grid_size_from_config(self, rng):
        """Columns and rows follow the configured grid."""
        config = GameConfig(grid_width=20, grid_height=12)
        obstacle = ObstacleSpawner(config, rng).create()
        assert {b.position.column for b in obstacle.blocks} == {20, 19}
        assert all(0 <= b.row < 12 for b in obstacle.blocks)
