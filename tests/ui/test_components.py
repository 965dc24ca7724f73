"""Tests for the pure helpers behind the inspector components."""

from lodestone.engine.dice import DiceSpec
from lodestone.ui.components.aspect_table import aspect_rows
from lodestone.ui.components.sample_chart import sample_outcomes


class TestAspectRows:
    def test_longsword(self):
        rows = aspect_rows(DiceSpec(dice=2, sides=6), 0)
        assert rows == [
            ("Minimise", 2),
            ("Average", 7),
            ("Maximise", 12),
            ("Extremify", 12),
        ]


class TestSampleOutcomes:
    def test_counts_and_bounds(self):
        spec = DiceSpec(base=1, dice=2, sides=4)
        tally = sample_outcomes(spec, 0, seed=12345, count=500)
        assert sum(tally.values()) == 500
        assert min(tally) >= 3
        assert max(tally) <= 9

    def test_reproducible(self):
        spec = DiceSpec(dice=3, sides=6, bonus=2)
        assert sample_outcomes(spec, 40, 7, 200) == sample_outcomes(spec, 40, 7, 200)
