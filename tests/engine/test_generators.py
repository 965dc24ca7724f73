"""
Lodestone - Generator Algorithm Tests

Tests for the quick, complex and fixed generators and the shared
rejection sampler.
"""

import pytest

from lodestone.engine.base import MAX_MODULUS, RAND_DEG, GeneratorMode
from lodestone.engine.generators import (
    ComplexGenerator,
    FixedGenerator,
    Generator,
    QuickGenerator,
    lcrng,
)


class ScriptedGenerator(Generator):
    """Replays a fixed list of raw words."""

    mode = GeneratorMode.COMPLEX

    def __init__(self, words):
        self.words = list(words)
        self.calls = 0

    def next_word(self):
        self.calls += 1
        return self.words.pop(0)


class TestLcrng:
    def test_known_steps(self):
        assert lcrng(0) == 12345
        assert lcrng(42) == 3397979675

    def test_wraps_to_32_bits(self):
        assert 0 <= lcrng(0xFFFFFFFF) <= 0xFFFFFFFF


class TestQuickGenerator:
    """Tests for QuickGenerator."""

    def test_golden_sequence(self):
        gen = QuickGenerator(42)
        assert [gen.next_word() for _ in range(3)] == [3397979675, 3263785912, 3148160401]

    def test_value_tracks_last_word(self):
        gen = QuickGenerator(7)
        word = gen.next_word()
        assert gen.value == word

    def test_mode(self):
        assert QuickGenerator().mode is GeneratorMode.QUICK

    def test_invalid_seed_raises(self):
        with pytest.raises(ValueError):
            QuickGenerator(-1)


class TestComplexGenerator:
    """Tests for ComplexGenerator (WELL1024a)."""

    def test_golden_words(self):
        gen = ComplexGenerator(12345)
        words = [gen.next_word() for _ in range(5)]
        assert words == [2916264573, 1924233249, 4273136198, 3867076656, 3350419762]

    def test_same_seed_same_sequence(self):
        a = ComplexGenerator(99)
        b = ComplexGenerator(99)
        assert [a.next_word() for _ in range(100)] == [b.next_word() for _ in range(100)]

    def test_different_seeds_diverge(self):
        a = ComplexGenerator(1)
        b = ComplexGenerator(2)
        assert [a.next_word() for _ in range(10)] != [b.next_word() for _ in range(10)]

    def test_reseed_restarts_sequence(self):
        gen = ComplexGenerator(12345)
        first = [gen.next_word() for _ in range(10)]
        gen.seed(12345)
        assert [gen.next_word() for _ in range(10)] == first

    def test_state_shape(self):
        gen = ComplexGenerator(5)
        assert len(gen.state_words) == RAND_DEG
        assert all(0 <= w <= 0xFFFFFFFF for w in gen.state_words)

    def test_index_rotates(self):
        gen = ComplexGenerator(5)
        assert gen.index == 0
        gen.next_word()
        assert gen.index == RAND_DEG - 1
        gen.next_word()
        assert gen.index == RAND_DEG - 2

    def test_words_fit_32_bits(self):
        gen = ComplexGenerator(0xFFFFFFFF)
        assert all(0 <= gen.next_word() <= 0xFFFFFFFF for _ in range(1000))

    def test_seed_out_of_range_raises(self):
        with pytest.raises(ValueError, match="Seed must be between"):
            ComplexGenerator(1 << 32)


class TestDrawBelow:
    """Tests for the shared rejection sampler."""

    def test_modulus_one_consumes_nothing(self):
        gen = ScriptedGenerator([])
        assert gen.draw_below(1) == 0
        assert gen.calls == 0

    def test_zero_raises(self):
        with pytest.raises(ValueError):
            QuickGenerator().draw_below(0)

    def test_uses_top_28_bits(self):
        # m=2 splits the 28-bit range in half
        gen = ScriptedGenerator([0x7FFFFFFF, 0x80000000])
        assert gen.draw_below(2) == 0
        assert gen.draw_below(2) == 1

    def test_tail_values_are_rejected(self):
        # m=3: partition = 0x5555555, so 28-bit values >= 3 * partition are redrawn
        partition = MAX_MODULUS // 3
        tail = (3 * partition) << 4
        gen = ScriptedGenerator([tail, 0])
        assert gen.draw_below(3) == 0
        assert gen.calls == 2

    @pytest.mark.parametrize("m", [3, 7, 20])
    def test_each_result_owns_one_partition(self, m):
        partition = MAX_MODULUS // m
        for k in range(m):
            low = (k * partition) << 4
            high = ((k + 1) * partition - 1) << 4
            gen = ScriptedGenerator([low, high])
            assert gen.draw_below(m) == k
            assert gen.draw_below(m) == k

    @pytest.mark.parametrize("m", [2, 3, 6, 20, 1000, MAX_MODULUS])
    def test_results_in_range(self, m):
        gen = ComplexGenerator(31337)
        assert all(0 <= gen.draw_below(m) < m for _ in range(500))


class TestFixedGenerator:
    """Tests for FixedGenerator."""

    @pytest.mark.parametrize(
        "percent,m,expected",
        [
            (0, 20, 0),
            (100, 20, 19),
            (50, 20, 9),
            (50, 101, 50),
            (100, 1, 0),
        ],
    )
    def test_draw_below(self, percent, m, expected):
        assert FixedGenerator(percent).draw_below(m) == expected

    def test_mode(self):
        assert FixedGenerator(0).mode is GeneratorMode.FIXED

    def test_has_no_raw_words(self):
        with pytest.raises(TypeError, match="no raw word stream"):
            FixedGenerator(50).next_word()

    def test_invalid_percent_raises(self):
        with pytest.raises(ValueError):
            FixedGenerator(150)

    def test_zero_modulus_still_raises(self):
        with pytest.raises(ValueError):
            FixedGenerator(50).draw_below(0)
