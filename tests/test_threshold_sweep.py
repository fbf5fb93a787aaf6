import numpy as np
import pytest

from threshold_sweep import Extrapolation, SweepPoint, extrapolate_threshold, main, sweep


class TestExtrapolate:
    def test_recovers_intercept_of_exact_data(self):
        sizes = np.array([10, 20, 40, 80])
        means = 0.5927 - 0.3 * sizes ** (-3 / 4)
        fit = extrapolate_threshold(sizes, means)
        assert isinstance(fit, Extrapolation)
        assert fit.pc_inf == pytest.approx(0.5927)
        assert fit.slope == pytest.approx(-0.3)
        assert fit.r_squared == pytest.approx(1.0)
        assert fit.exponent == -3 / 4

    def test_custom_exponent(self):
        sizes = np.array([4.0, 9.0, 16.0])
        means = 0.6 + 0.1 * sizes ** -0.5
        fit = extrapolate_threshold(sizes, means, exponent=-0.5)
        assert fit.pc_inf == pytest.approx(0.6)
        assert fit.slope == pytest.approx(0.1)

    def test_needs_two_distinct_sizes(self):
        with pytest.raises(ValueError):
            extrapolate_threshold([10], [0.6])
        with pytest.raises(ValueError):
            extrapolate_threshold([10, 10], [0.6, 0.61])

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            extrapolate_threshold([10, 20, 30], [0.6, 0.61])


class TestSweep:
    def test_one_point_per_size(self):
        points = sweep([3, 5, 7], trials=10, seed=1)
        assert [p.n for p in points] == [3, 5, 7]
        for p in points:
            assert isinstance(p, SweepPoint)
            assert p.trials == 10
            assert 0 < p.mean <= 1
            assert p.confidence_lo <= p.mean <= p.confidence_hi
            assert p.elapsed_s >= 0

    def test_seed_fixes_the_whole_sweep(self):
        a = sweep([4, 6], trials=5, seed=77)
        b = sweep([4, 6], trials=5, seed=77)
        assert [p.mean for p in a] == [p.mean for p in b]
        assert [p.stddev for p in a] == [p.stddev for p in b]

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            sweep([], trials=5)
        with pytest.raises(ValueError):
            sweep([5], trials=1)
        with pytest.raises(ValueError):
            sweep([0], trials=5)


class TestMain:
    def test_prints_table_and_extrapolation(self, capsys):
        assert main(["--Lmin", "4", "--Lmax", "8", "--Lstep", "2", "--t", "5", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        for n in (4, 6, 8):
            assert f"n={n:<6d}" in out
        assert "pc(infinity)" in out

    def test_single_size_skips_extrapolation(self, capsys):
        assert main(["--Lmin", "5", "--Lmax", "5", "--t", "3", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "skipping extrapolation" in out
        assert "pc(infinity)" not in out

    @pytest.mark.parametrize(
        "argv",
        [["--Lmin", "20", "--Lmax", "10"], ["--t", "1"], ["--Lmin", "0"], ["--Lstep", "x"]],
    )
    def test_invalid_input_exits_with_error(self, argv):
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code != 0
