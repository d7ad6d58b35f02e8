"""
Tests for mahalanobis() / calculate().

Tests the complete pipeline: design construction, backend selection,
both solve strategies, and the solution wrapper.
"""

import warnings

import numpy as np
import pytest
from scipy.spatial import distance as scipy_distance

from pymahalanobis import calculate, mahalanobis
from pymahalanobis.core.compute.tolerances import (
    PATH_EQUIVALENCE,
    REFERENCE_VALUES,
    select_tolerance,
)
from pymahalanobis.core.exceptions import (
    DegenerateInputError,
    InvalidDatasetSizeError,
    NotPositiveDefiniteError,
    SingularMatrixError,
    UnequalLengthError,
    ValidationError,
)
from pymahalanobis.descriptive import covariance_matrix, mean_vector
from pymahalanobis.distance import MahalanobisSolution


METHODS = ['cholesky', 'inverse']


def _scipy_reference(point, dataset):
    data = np.asarray(dataset, dtype=np.float64)
    VI = np.linalg.inv(np.cov(data, ddof=1))
    return scipy_distance.mahalanobis(point, data.mean(axis=1), VI)


class TestReferenceValues:

    @pytest.mark.parametrize("method", METHODS)
    def test_hand_computed(self, reference_data, method):
        point, dataset, expected = reference_data
        assert calculate(point, dataset, method=method) == pytest.approx(
            expected, abs=REFERENCE_VALUES.atol
        )

    def test_default_is_cholesky(self, reference_data):
        point, dataset, _ = reference_data
        solution = mahalanobis(point, dataset)
        assert isinstance(solution, MahalanobisSolution)
        assert solution.method == 'cholesky'
        assert solution.backend_name == 'cpu_cholesky'

    @pytest.mark.parametrize("method", METHODS)
    def test_matches_scipy(self, correlated_dataset, rng, method):
        point = rng.standard_normal(3) * 2.0
        solution = mahalanobis(point, correlated_dataset, method=method)
        tier = select_tolerance(solution.backend_name)
        np.testing.assert_allclose(
            solution.distance,
            _scipy_reference(point, correlated_dataset),
            rtol=tier.rtol,
            atol=tier.atol,
        )


class TestProperties:

    def test_paths_agree(self, correlated_dataset, rng):
        for _ in range(5):
            point = rng.standard_normal(3) * 3.0
            np.testing.assert_allclose(
                calculate(point, correlated_dataset, method='cholesky'),
                calculate(point, correlated_dataset, method='inverse'),
                rtol=PATH_EQUIVALENCE.rtol,
                atol=PATH_EQUIVALENCE.atol,
            )

    @pytest.mark.parametrize("method", METHODS)
    def test_mean_has_zero_distance(self, correlated_dataset, method):
        mu = mean_vector(correlated_dataset)
        assert calculate(mu, correlated_dataset, method=method) == 0.0

    def test_non_negative(self, correlated_dataset, rng):
        for _ in range(5):
            assert calculate(rng.standard_normal(3), correlated_dataset) >= 0.0

    @pytest.mark.parametrize("method", METHODS)
    def test_scale_invariant(self, correlated_dataset, rng, method):
        """Rescaling one variable (and the point with it) leaves D unchanged."""
        point = rng.standard_normal(3)
        scale = np.array([10.0, 1.0, 0.1])
        np.testing.assert_allclose(
            calculate(point * scale, correlated_dataset * scale[:, None], method=method),
            calculate(point, correlated_dataset, method=method),
            rtol=1e-8,
        )

    def test_scale_invariant_wide_range(self, correlated_dataset, rng):
        """Cholesky pivots are judged per row, so a 1e6 spread in units is fine."""
        point = rng.standard_normal(3)
        scale = np.array([1000.0, 1.0, 0.001])
        np.testing.assert_allclose(
            calculate(point * scale, correlated_dataset * scale[:, None]),
            calculate(point, correlated_dataset),
            rtol=1e-8,
        )

    @pytest.mark.parametrize("scale", [1e-6, 1e-13, 1e6])
    def test_units_of_whole_dataset(self, reference_data, scale):
        """Expressing every variable in other units changes neither path."""
        point, dataset, expected = reference_data
        point = np.asarray(point, dtype=np.float64) * scale
        dataset = np.asarray(dataset, dtype=np.float64) * scale
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            by_cholesky = calculate(point, dataset, method='cholesky')
            by_inverse = calculate(point, dataset, method='inverse')
        assert by_cholesky == pytest.approx(expected, abs=REFERENCE_VALUES.atol)
        np.testing.assert_allclose(
            by_inverse, by_cholesky, rtol=PATH_EQUIVALENCE.rtol, atol=PATH_EQUIVALENCE.atol
        )

    @pytest.mark.parametrize("scale", [1e-6, 1e-13])
    def test_paths_agree_on_small_values(self, correlated_dataset, rng, scale):
        point = rng.standard_normal(3) * scale
        dataset = correlated_dataset * scale
        np.testing.assert_allclose(
            calculate(point, dataset, method='inverse'),
            calculate(point, dataset, method='cholesky'),
            rtol=PATH_EQUIVALENCE.rtol,
            atol=PATH_EQUIVALENCE.atol,
        )

    def test_identity_covariance_is_euclidean(self):
        """Uncorrelated unit-variance data: D is the Euclidean distance from the mean."""
        dataset = [[1.0, -1.0, 0.0, 0.0], [0.0, 0.0, 1.0, -1.0]]
        # variance = 2/3 on both axes, covariance 0
        point = [1.0, 1.0]
        expected = np.sqrt(2.0 / (2.0 / 3.0))
        assert calculate(point, dataset) == pytest.approx(expected, rel=1e-12)

    def test_whitened_norm_is_distance(self, reference_data):
        point, dataset, _ = reference_data
        solution = mahalanobis(point, dataset)
        assert np.linalg.norm(solution.whitened) == pytest.approx(solution.distance, rel=1e-12)

    def test_squared_distance(self, reference_data):
        point, dataset, _ = reference_data
        solution = mahalanobis(point, dataset)
        assert solution.squared_distance == pytest.approx(solution.distance ** 2, rel=1e-12)

    def test_inputs_not_mutated(self, correlated_dataset):
        before = correlated_dataset.copy()
        point = np.array([0.5, 0.5, 0.5])
        for method in METHODS:
            calculate(point, correlated_dataset, method=method)
        np.testing.assert_array_equal(correlated_dataset, before)
        np.testing.assert_array_equal(point, [0.5, 0.5, 0.5])


class TestDatasetForms:

    def test_mapping(self, reference_data):
        point, dataset, expected = reference_data
        named = {'x': dataset[0], 'y': dataset[1]}
        assert calculate(point, named) == pytest.approx(expected, abs=1e-5)

    def test_numpy_int_array(self, reference_data):
        point, dataset, expected = reference_data
        assert calculate(
            np.array(point), np.array(dataset, dtype=np.int64)
        ) == pytest.approx(expected, abs=1e-5)


class TestRounding:

    def test_decimals(self, reference_data):
        point, dataset, _ = reference_data
        assert calculate(point, dataset, decimals=3) == 0.243

    def test_no_rounding_by_default(self, reference_data):
        point, dataset, _ = reference_data
        d = calculate(point, dataset)
        assert d != round(d, 8)

    def test_decimals_does_not_touch_squared(self, reference_data):
        point, dataset, _ = reference_data
        solution = mahalanobis(point, dataset, decimals=2)
        assert solution.distance == 0.24
        assert solution.squared_distance == pytest.approx(0.0592592, rel=1e-5)

    def test_invalid_decimals(self, reference_data):
        point, dataset, _ = reference_data
        with pytest.raises(ValidationError, match="decimals"):
            calculate(point, dataset, decimals=2.5)


class TestErrors:

    def test_unknown_method(self, reference_data):
        point, dataset, _ = reference_data
        with pytest.raises(ValidationError, match="Unknown method"):
            calculate(point, dataset, method='svd')

    def test_point_length_mismatch(self, reference_data):
        _, dataset, _ = reference_data
        with pytest.raises(UnequalLengthError) as exc_info:
            calculate([1.0, 2.0, 3.0], dataset)
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    def test_ragged_dataset(self):
        with pytest.raises(InvalidDatasetSizeError):
            calculate([1.0, 2.0], [[1, 2, 3], [4, 5]])

    @pytest.mark.parametrize("dataset", [[[1.0], [2.0]], [[], []]])
    def test_too_few_observations(self, dataset):
        with pytest.raises(DegenerateInputError):
            calculate([1.0, 2.0], dataset)

    def test_empty_dataset(self):
        with pytest.raises(InvalidDatasetSizeError):
            calculate([], [])

    def test_non_finite_point(self, reference_data):
        _, dataset, _ = reference_data
        with pytest.raises(ValidationError):
            calculate([np.nan, 1.0], dataset)

    def test_collinear_cholesky(self):
        """y = 2x makes the covariance matrix singular."""
        dataset = [[1, 2, 3, 4], [2, 4, 6, 8]]
        with pytest.raises(NotPositiveDefiniteError):
            calculate([1.0, 1.0], dataset, method='cholesky')

    def test_collinear_inverse(self):
        dataset = [[1, 2, 3, 4], [2, 4, 6, 8]]
        with pytest.raises(SingularMatrixError):
            calculate([1.0, 1.0], dataset, method='inverse')

    def test_constant_variable(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            calculate([1.0, 1.0], [[1, 2, 3], [5, 5, 5]])
        assert exc_info.value.pivot_index == 1

    def test_more_variables_than_observations(self, rng):
        """p > n - 1 always gives a singular sample covariance."""
        dataset = rng.standard_normal((4, 3))
        with pytest.raises(NotPositiveDefiniteError):
            calculate(np.zeros(4), dataset)


class TestWarnings:

    def test_ill_conditioned_inverse_warns(self, rng):
        x = rng.standard_normal(50)
        y = x + 1e-5 * rng.standard_normal(50)
        dataset = np.vstack([x, y])
        with pytest.warns(RuntimeWarning, match="ill-conditioned"):
            solution = mahalanobis([0.0, 0.0], dataset, method='inverse')
        assert solution.warnings
        assert solution.info['pivot_ratio'] < 1e-8

    def test_well_conditioned_is_silent(self, correlated_dataset):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            solution = mahalanobis([0.0, 0.0, 0.0], correlated_dataset, method='inverse')
        assert solution.warnings == ()


class TestSolution:

    def test_cholesky_fields(self, reference_data):
        point, dataset, _ = reference_data
        solution = mahalanobis(point, dataset)
        np.testing.assert_allclose(solution.mean_vector, [4.0, 5.2])
        np.testing.assert_allclose(
            solution.covariance_matrix, covariance_matrix(dataset), rtol=1e-14
        )
        np.testing.assert_allclose(solution.difference, [0.0, -0.2], atol=1e-14)
        assert solution.factor.shape == (2, 2)
        assert solution.inverse_covariance is None
        assert solution.p == 2
        assert solution.n == 5

    def test_inverse_fields(self, reference_data):
        point, dataset, _ = reference_data
        solution = mahalanobis(point, dataset, method='inverse')
        assert solution.factor is None
        assert solution.whitened is None
        np.testing.assert_allclose(
            solution.inverse_covariance,
            np.linalg.inv(covariance_matrix(dataset)),
            rtol=1e-10,
        )
        assert solution.backend_name == 'cpu_gauss_jordan'

    def test_float_conversion(self, reference_data):
        point, dataset, _ = reference_data
        solution = mahalanobis(point, dataset)
        assert float(solution) == solution.distance

    def test_timing_recorded(self, reference_data):
        point, dataset, _ = reference_data
        timing = mahalanobis(point, dataset).timing
        assert {'total_seconds', 'statistics', 'cholesky', 'forward_substitution'} <= set(timing)

    def test_p_value(self, reference_data):
        point, dataset, _ = reference_data
        solution = mahalanobis(point, dataset)
        # chi2(2) survival function is exp(-x/2)
        assert solution.p_value == pytest.approx(np.exp(-solution.squared_distance / 2), rel=1e-10)
        assert not solution.is_outlier(alpha=0.05)

    def test_far_point_is_outlier(self, correlated_dataset):
        solution = mahalanobis([10.0, -10.0, 10.0], correlated_dataset)
        assert solution.is_outlier(alpha=0.01)

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.1])
    def test_invalid_alpha(self, reference_data, alpha):
        point, dataset, _ = reference_data
        with pytest.raises(ValidationError, match="alpha"):
            mahalanobis(point, dataset).is_outlier(alpha=alpha)

    def test_summary(self, reference_data):
        point, dataset, _ = reference_data
        text = mahalanobis(point, {'x': dataset[0], 'y': dataset[1]}).summary()
        assert "Mahalanobis distance" in text
        assert "cholesky" in text
        assert "0.24343" in text
        assert "x" in text and "y" in text

    def test_repr(self, reference_data):
        point, dataset, _ = reference_data
        assert "MahalanobisSolution(distance=0.24343" in repr(mahalanobis(point, dataset))
