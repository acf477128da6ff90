"""
Unit tests for the statistics kernel.
"""

import math

import pytest

from mathcore import stats
from mathcore.errors import DimensionMismatchError, DomainError


class TestAverages:

    def test_median(self):
        assert stats.median([2, 1, 5, 8, -11]) == 2
        assert stats.median([1, 5, -1.2, 16]) == 3

    def test_mean(self):
        assert stats.mean([2j, -1, 2.2, 0.6, -11]) == pytest.approx(-1.84 + 0.4j)

    def test_geometric_mean(self):
        assert stats.geometric_mean([2, 8]) == pytest.approx(4)
        assert stats.geometric_mean([0, 5, 1.2]) == 0
        with pytest.raises(DomainError):
            stats.geometric_mean([-1, 4])

    def test_harmonic_mean(self):
        assert stats.harmonic_mean([1, 2, 4]) == pytest.approx(3 / 1.75)
        with pytest.raises(DomainError):
            stats.harmonic_mean([1, 0])

    def test_mode(self):
        assert stats.mode([-2, 33, 22.2j, 15, 33]) == 33

    def test_mode_tie_takes_first(self):
        assert stats.mode([4, 7, 7, 4]) == 4
        assert stats.mode([1, 2, 3]) == 1

    def test_empty_is_undefined(self):
        with pytest.raises(DomainError):
            stats.mean([])
        with pytest.raises(DomainError):
            stats.median([])


class TestDispersion:

    def test_variances(self):
        assert stats.population_variance([2, 3, 6, 8]) == pytest.approx(5.6875)
        assert stats.sample_variance([2, -13, 0, 8]) == pytest.approx(78.25)

    def test_complex_variance_is_real(self):
        assert stats.population_variance([-2j, 18, 3.8, 3 - 6j]) == pytest.approx(54.42)

    def test_single_value(self):
        assert stats.population_variance([5]) == 0
        assert stats.sample_variance([-8j]) == 0

    def test_standard_deviations(self):
        assert stats.population_standard_deviation([2, 3, 6, 8]) == pytest.approx(math.sqrt(5.6875))
        assert stats.sample_standard_deviation([2, -13, 0, 8]) == pytest.approx(math.sqrt(78.25))


class TestShape:

    def test_moments(self):
        data = [-14, 13, 2, -66]
        assert stats.population_moment(data, 2) == pytest.approx(1181.25)
        assert stats.population_central_moment(data, 2) == pytest.approx(917.1875)
        assert stats.population_central_moment(data, 1) == pytest.approx(0)

    def test_skewness(self):
        assert stats.population_skewness([-1, -1, -1, -1, 4]) == pytest.approx(1.5)
        assert stats.sample_skewness([-1, -1, -1, 3]) == pytest.approx(2)

    def test_kurtosis(self):
        assert stats.population_kurtosis([1, 3]) == pytest.approx(-2)
        assert stats.sample_kurtosis([-1, -1, -1, 3]) == pytest.approx(4)

    def test_complex_skewness(self):
        """Normalized by the complex second central moment, not the variance."""
        data = [-2j, 18, 3.8, 3 - 6j]
        assert stats.population_skewness(data) == pytest.approx(
            1.32062163212182 - 0.023737045200059j)
        assert stats.sample_skewness([5 - 4j, 1.3, 13.1, 3 - 6j]) == pytest.approx(
            4.03612644357173 + 0.295132430675187j)

    def test_complex_kurtosis(self):
        data = [-22, 2 - 18.4j, 0, 3]
        assert stats.population_kurtosis(data) == pytest.approx(
            -1.81674986052611 + 2.79477015182896j)
        assert stats.sample_kurtosis(data) == pytest.approx(
            -4.62562395394586 + 20.9607761387172j)

    def test_real_shape_statistics(self):
        assert stats.population_skewness([2.2, -6, 0, 6]) == pytest.approx(-0.349105920180674)
        assert stats.sample_skewness([0.4, -6, 4, 6]) == pytest.approx(-0.984814784355962)
        assert stats.population_kurtosis([-14, 13, 2, -66]) == pytest.approx(-0.928968973993598)
        assert stats.sample_kurtosis([-14, 13, 2, -66]) == pytest.approx(2.03273269504801)

    def test_zero_second_central_moment(self):
        """Non-constant complex data can still have a zero second central moment."""
        with pytest.raises(DomainError):
            stats.population_skewness([1, -1, 1j, -1j])
        with pytest.raises(DomainError):
            stats.population_kurtosis([1, -1, 1j, -1j])

    def test_constant_data(self):
        with pytest.raises(DomainError):
            stats.population_skewness([2, 2, 2])
        with pytest.raises(DomainError):
            stats.sample_kurtosis([1, 1, 1, 1])

    def test_too_few_values(self):
        with pytest.raises(DomainError):
            stats.sample_skewness([1, 2])
        with pytest.raises(DomainError):
            stats.sample_kurtosis([1, 2, 3])


class TestBivariate:

    def test_covariance(self):
        x = [-14, 13, 2, -66]
        assert stats.population_covariance(x, [1, 1.4, -111, 5.5]) == pytest.approx(-564.04375)
        assert stats.sample_covariance(x, [1, 1.4, -111, 6.6]) == pytest.approx(-770.3)

    def test_covariance_conjugates_second_argument(self):
        assert stats.population_covariance([1j, -1j], [1j, -1j]) == pytest.approx(1)

    def test_correlation(self):
        assert stats.correlation([1, 2, 3], [2, 4, 6]) == pytest.approx(1)
        assert stats.correlation([1, 2, 3], [3, 2, 1]) == pytest.approx(-1)

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            stats.population_covariance([1, 2], [1, 2, 3])


class TestSums:

    def test_sum_and_product(self):
        assert stats.total([-12, 15, 2, 6.6]) == pytest.approx(11.6)
        assert stats.product([-12, 15, 2, 6.6]) == pytest.approx(-2376)
        assert stats.total([]) == 0
        assert stats.product([]) == 1

    def test_sum_of_squares(self):
        assert stats.sum_of_squares([-12, 15, 2, 6.6]) == pytest.approx(416.56)
        assert stats.sum_of_squares([-14j, 2 - 0.2j, 2, 3 - 3j]) == pytest.approx(-188.04 - 18.8j)


class TestHistogram:

    def test_default_interval_count(self):
        assert stats.default_interval_count(1) == 1
        assert stats.default_interval_count(5) == 3
        assert stats.default_interval_count(8) == 4

    def test_default_intervals(self):
        assert stats.histogram([15, 28, 6.6, 6, -12]) == pytest.approx([0.2, 0.4, 0.4])

    def test_interval_count(self):
        assert stats.histogram([-12, -3, 6.6, -10], 2) == pytest.approx([0.75, 0.25])

    def test_edges(self):
        assert stats.histogram_edges([-12, 15, 0, 6.6], [-15, 5, 30]) == pytest.approx([0.5, 0.5])

    def test_values_outside_edges(self):
        assert stats.histogram_edges([1, 2, 100], [0, 10]) == pytest.approx([2 / 3])

    def test_invalid_edges(self):
        with pytest.raises(DomainError):
            stats.histogram_edges([1, 2], [5])
        with pytest.raises(DomainError):
            stats.histogram_edges([1, 2], [5, 1])

    def test_invalid_interval_count(self):
        with pytest.raises(DomainError):
            stats.histogram([1, 2], 0)
