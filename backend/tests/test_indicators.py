"""Tests for compute_indicators and IndicatorService."""

import random

import numpy as np
import pytest

from bandwatch.schemas.market import DataSource, PriceSeries
from bandwatch.services.indicators import IndicatorService, compute_indicators


@pytest.fixture
def random_walk(make_points):
    rng = random.Random(7)
    price = 100.0
    prices = []
    for _ in range(120):
        price = max(0.5, price * (1 + rng.gauss(0, 0.03)))
        prices.append(round(price, 2))
    return make_points(prices)


def test_empty_series():
    assert compute_indicators([]) == []


def test_same_length_order_and_dates(random_walk):
    result = compute_indicators(random_walk)

    assert len(result) == len(random_walk)
    assert [p.date for p in result] == [p.date for p in random_walk]
    assert [p.price for p in result] == [p.price for p in random_walk]


def test_band_ordering(random_walk):
    for point in compute_indicators(random_walk):
        assert point.lower_band <= point.moving_average <= point.upper_band


def test_first_point_collapses_to_price(random_walk):
    first = compute_indicators(random_walk)[0]
    assert first.moving_average == random_walk[0].price
    assert first.upper_band == random_walk[0].price
    assert first.lower_band == random_walk[0].price


def test_idempotent(random_walk):
    assert compute_indicators(random_walk) == compute_indicators(random_walk)


def test_input_not_mutated(random_walk):
    snapshot = [p.model_copy() for p in random_walk]
    compute_indicators(random_walk)
    assert random_walk == snapshot


def test_flat_series(flat_series):
    for point in compute_indicators(flat_series):
        assert point.moving_average == 100.0
        assert point.upper_band == 100.0
        assert point.lower_band == 100.0


def test_expanding_then_trailing_window(make_points):
    points = make_points([1.0, 2.0, 3.0, 4.0])
    result = compute_indicators(points, window_size=2)

    # index 1: window [1, 2]; index 3: window [3, 4]
    assert result[1].moving_average == 1.5
    assert result[1].upper_band == 2.5
    assert result[1].lower_band == 0.5
    assert result[3].moving_average == 3.5
    assert result[3].upper_band == 4.5
    assert result[3].lower_band == 2.5


def test_window_larger_than_series(make_points):
    points = make_points([1.0, 2.0, 3.0])
    result = compute_indicators(points, window_size=20)

    std = np.std([1.0, 2.0, 3.0])
    assert result[2].moving_average == 2.0
    assert result[2].upper_band == round(2.0 + 2 * std, 2)
    assert result[2].lower_band == round(2.0 - 2 * std, 2)


def test_rounded_at_output_only(make_points):
    prices = [10.004, 10.006, 10.013, 10.021, 9.997]
    result = compute_indicators(make_points(prices), window_size=20)

    assert result[-1].moving_average == round(float(np.mean(prices)), 2)
    assert result[-1].upper_band == round(float(np.mean(prices) + 2 * np.std(prices)), 2)


def test_window_of_one_gives_price_everywhere(random_walk):
    for source, point in zip(random_walk, compute_indicators(random_walk, window_size=1)):
        assert point.moving_average == round(source.price, 2)
        assert point.upper_band == point.lower_band == point.moving_average


@pytest.mark.parametrize("window", [0, -3])
def test_invalid_window(flat_series, window):
    with pytest.raises(ValueError):
        compute_indicators(flat_series, window_size=window)


async def test_service_execute(flat_series):
    service = IndicatorService(window_size=20)
    series = PriceSeries(symbol="FLAT", source=DataSource.MOCK, points=flat_series)

    result = await service.execute(series)

    assert len(result) == 25
    assert await service.health_check() is True
