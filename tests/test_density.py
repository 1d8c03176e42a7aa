"""Test the density formulas and quality tiers.

Tests for texelarchitect.model.density:
    - density from object size and texture size
    - texture size from object size and target density
    - nearest power of two in log space
    - inclusive tier thresholds
    - degenerate input propagates inf/nan instead of raising

Run:
    pytest tests/test_density.py -v
"""
import math
import warnings

import pytest

from texelarchitect.model.density import (
    QualityTier,
    classify_density,
    compute_density,
    compute_texture_size,
    nearest_power_of_two,
)


def test_compute_density_known_values():
    assert compute_density(100, 2048) == 20.48
    assert compute_density(200, 2048) == 10.24
    assert compute_density(100, 512) == 5.12


def test_compute_density_rounds_to_two_decimals():
    assert compute_density(300, 1024) == 3.41
    assert compute_density(3, 1) == 0.33


def test_compute_texture_size_known_values():
    assert compute_texture_size(100, 10.24) == 1024
    assert compute_texture_size(250, 2.56) == 640
    assert isinstance(compute_texture_size(100, 10.24), int)


def test_compute_texture_size_rounds_half_up():
    assert compute_texture_size(1, 2.5) == 3
    assert compute_texture_size(1, 3.5) == 4
    assert compute_texture_size(1, 2.4) == 2


@pytest.mark.parametrize("object_size", [37.5, 100, 150, 333])
@pytest.mark.parametrize("texture_size", [512, 2048, 8192])
def test_density_then_size_recovers_texture(object_size, texture_size):
    density = compute_density(object_size, texture_size)
    recovered = compute_texture_size(object_size, density)
    # density carries at most 0.005 px/cm of rounding error
    assert recovered == pytest.approx(texture_size, abs=0.005 * object_size + 1)


def test_nearest_power_of_two():
    assert nearest_power_of_two(1024) == 1024
    assert nearest_power_of_two(1500) == 2048
    assert nearest_power_of_two(1400) == 1024
    assert nearest_power_of_two(1) == 1
    assert nearest_power_of_two(0.3) == 0.25


def test_nearest_power_of_two_degenerate():
    assert nearest_power_of_two(0) == 0.0
    assert math.isnan(nearest_power_of_two(-5))
    assert math.isnan(nearest_power_of_two(math.nan))
    assert nearest_power_of_two(math.inf) == math.inf


@pytest.mark.parametrize(
    "density, tier",
    [
        (25.0, QualityTier.HIGH),
        (20.0, QualityTier.HIGH),
        (19.99, QualityTier.GOOD),
        (10.0, QualityTier.GOOD),
        (9.99, QualityTier.MEDIUM),
        (5.0, QualityTier.MEDIUM),
        (4.99, QualityTier.LOW),
        (0.0, QualityTier.LOW),
        (-3.0, QualityTier.LOW),
    ],
)
def test_classify_density_thresholds(density, tier):
    assert classify_density(density) == tier


def test_classify_non_finite():
    assert classify_density(math.nan) == QualityTier.LOW
    assert classify_density(math.inf) == QualityTier.HIGH


def test_tier_colors():
    assert QualityTier.HIGH.color == "#10b981"
    assert QualityTier.GOOD.color == "#3b82f6"
    assert QualityTier.MEDIUM.color == "#f59e0b"
    assert QualityTier.LOW.color == "#ef4444"


def test_zero_object_size_does_not_raise():
    assert compute_density(0, 2048) == math.inf
    assert math.isnan(compute_density(0, 0))
    assert compute_texture_size(0, 10.24) == 0


def test_negative_and_nan_inputs_propagate():
    assert compute_density(-100, 2048) == -20.48
    assert math.isnan(compute_density(math.nan, 2048))
    assert math.isnan(compute_texture_size(math.nan, 10.24))
    assert compute_texture_size(math.inf, 10.24) == math.inf


def test_compute_density_exact_tie_rounds_up():
    # 512 / 4096 is exactly 0.125
    assert compute_density(4096, 512) == 0.13
    assert compute_density(-4096, 512) == -0.13
    assert compute_density(400, 1) == 0.0


def test_compute_density_huge_result_keeps_cents():
    assert compute_density(1e-300, 2048) == 2048 / 1e-300


def test_compute_texture_size_just_below_half():
    assert compute_texture_size(1, 0.49999999999999994) == 0
    assert compute_texture_size(1, 0.5) == 1


def test_compute_texture_size_large_odd_integer_unchanged():
    odd = float(2 ** 53 - 1)
    assert compute_texture_size(1, odd) == 2 ** 53 - 1
    assert compute_texture_size(1, float(2 ** 60)) == 2 ** 60


def test_tiny_object_size_overflows_without_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert compute_density(1e-320, 512) == math.inf
