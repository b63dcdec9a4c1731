"""
Unit tests for bundle pricing rules
"""
from decimal import Decimal

import pytest

from aldenair.cart.pricing import (
    compute_discounted_total,
    eligible_bundles,
    euros_to_minor_units,
    format_price,
    recommended_bundle,
)
from aldenair.models.bundle import BundleOffer


@pytest.fixture
def offers() -> list[BundleOffer]:
    return [
        BundleOffer(id="duo", name="Duo", discount_percent=10, quantity_required=2),
        BundleOffer(id="three", name="Drei", discount_percent=20, quantity_required=3),
        BundleOffer(id="five", name="Fünf", discount_percent=25, quantity_required=5),
        BundleOffer(id="three-alt", name="Drei B", discount_percent=20, quantity_required=3),
    ]


class TestComputeDiscountedTotal:
    @pytest.mark.parametrize(
        "subtotal,percent,expected",
        [
            (11997, 20, 9598),   # 9597.6 rounds up
            (2999, 20, 2399),    # 2399.2 rounds down
            (4499, 10, 4049),    # 4049.1
            (1005, 50, 503),     # exactly .5 rounds half-up
            (1000, 0, 1000),
            (1000, 100, 0),
            (0, 35, 0),
            (999, 12.5, 874),    # 874.125
        ],
    )
    def test_rounds_half_up_once(self, subtotal, percent, expected):
        assert compute_discounted_total(subtotal, percent) == expected

    def test_accepts_decimal_percent(self):
        assert compute_discounted_total(10000, Decimal("33.3")) == 6670


class TestEligibleBundles:
    def test_filters_by_item_count(self, offers):
        result = eligible_bundles(offers, 3)

        assert [b.id for b in result] == ["three", "three-alt", "duo"]

    def test_best_discount_first_with_stable_ties(self, offers):
        result = eligible_bundles(offers, 10)

        assert [b.id for b in result] == ["five", "three", "three-alt", "duo"]

    def test_nothing_eligible(self, offers):
        assert eligible_bundles(offers, 1) == []
        assert recommended_bundle(offers, 1) is None

    def test_recommended_is_best_offer(self, offers):
        assert recommended_bundle(offers, 4).id == "three"


class TestMoneyConversion:
    @pytest.mark.parametrize(
        "amount,expected",
        [("44.99", 4499), (44.99, 4499), (29.99, 2999), ("0.005", 1), (129, 12900), (Decimal("19.99"), 1999)],
    )
    def test_euros_to_minor_units(self, amount, expected):
        assert euros_to_minor_units(amount) == expected

    @pytest.mark.parametrize(
        "minor_units,expected",
        [(4499, "€44.99"), (5, "€0.05"), (0, "€0.00"), (120000, "€1200.00"), (-250, "-€2.50")],
    )
    def test_format_price(self, minor_units, expected):
        assert format_price(minor_units) == expected

    def test_format_price_custom_symbol(self):
        assert format_price(1999, "CHF ") == "CHF 19.99"
