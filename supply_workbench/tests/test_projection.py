"""
Unit tests for the inventory projection engine.
"""
import unittest
from datetime import date, timedelta

from supply_workbench.core.projection import (
    calculate_baseline_inventory,
    determine_inventory_status,
    project,
    simulate_replenishment,
    summarize
)
from supply_workbench.core.records import (
    ForecastPoint, InventoryObservation, ProjectionDay, ProjectionParameters
)
from supply_workbench.models import InventoryStatus, RiskLevel

MARCH_FIRST = date(2025, 3, 1)

def make_observations(*values, series_id='S1'):
    return [
        InventoryObservation(series_id=series_id, period_date=date(2025, 1, 1) + timedelta(days=i), value=value)
        for i, value in enumerate(values)
    ]

def make_forecasts(start, values, product_id='P1', location_id='L1'):
    return [
        ForecastPoint(product_id=product_id, location_id=location_id, post_date=start + timedelta(days=i), forecast=value)
        for i, value in enumerate(values)
    ]

def make_day(status, projected=100.0, cumulative=0.0):
    return ProjectionDay(
        date=MARCH_FIRST,
        projected_inventory=projected,
        forecast_demand=0.0,
        current_stock=100.0,
        cumulative_demand=cumulative,
        reorder_point=15.0,
        safety_stock=10.0,
        status=status
    )

class TestProjection(unittest.TestCase):
    """Test cases for project()."""

    def test_output_length_is_horizon_plus_one(self):
        """Test that every horizon yields horizon + 1 days."""
        observations = make_observations(500)
        forecasts = make_forecasts(MARCH_FIRST, [5] * 10)

        for horizon in (0, 1, 7, 30, 90):
            projections = project('S1', observations, forecasts, horizon, today=MARCH_FIRST)
            self.assertEqual(len(projections), horizon + 1)

    def test_horizon_zero_yields_day_zero_only(self):
        """Test that a zero horizon projects today alone."""
        projections = project('S1', make_observations(100), [], 0, today=MARCH_FIRST)

        self.assertEqual(len(projections), 1)
        self.assertEqual(projections[0].date, MARCH_FIRST)

    def test_dates_are_consecutive_from_today(self):
        """Test that day d is today + d."""
        projections = project('S1', make_observations(100), [], 5, today=date(2024, 12, 30))

        self.assertEqual(
            [day.date for day in projections],
            [date(2024, 12, 30) + timedelta(days=d) for d in range(6)]
        )
        self.assertEqual(projections[-1].to_dict()['date'], '2025-01-04')

    def test_empty_series_returns_empty_output(self):
        """Test that a series without observations is not projected."""
        forecasts = make_forecasts(MARCH_FIRST, [10] * 5)

        self.assertEqual(project('S1', [], forecasts, 10, today=MARCH_FIRST), [])

    def test_no_forecasts(self):
        """Test that missing forecasts mean zero demand and the safety stock floor."""
        projections = project('S1', make_observations(200), [], 30, today=MARCH_FIRST)

        for day in projections:
            self.assertEqual(day.forecast_demand, 0)
            self.assertEqual(day.safety_stock, 10)
            self.assertEqual(day.reorder_point, 15)
            self.assertEqual(day.projected_inventory, 200)
            self.assertEqual(day.status, InventoryStatus.OPTIMAL)

    def test_cumulative_demand_is_non_decreasing(self):
        """Test that cumulative demand never falls, even across negative forecasts."""
        forecasts = make_forecasts(MARCH_FIRST, [12, 0, 7, -5, 30, 3, 18, 0, 44, 2])
        projections = project('S1', make_observations(1000), forecasts, 60, today=MARCH_FIRST)

        cumulative = [day.cumulative_demand for day in projections]
        for previous, current in zip(cumulative, cumulative[1:]):
            self.assertGreaterEqual(current, previous)

    def test_safety_stock_and_reorder_point_are_constant(self):
        """Test that safety stock and reorder point are computed once per projection."""
        forecasts = make_forecasts(MARCH_FIRST, [10, 40, 25, 80, 5, 60])
        projections = project('S1', make_observations(300), forecasts, 45, today=MARCH_FIRST)

        self.assertEqual(len({day.safety_stock for day in projections}), 1)
        self.assertEqual(len({day.reorder_point for day in projections}), 1)
        self.assertAlmostEqual(projections[0].reorder_point, projections[0].safety_stock * 1.5)

    def test_baseline_is_sum_of_observations(self):
        """Test that the baseline sums every observation with nulls as zero."""
        observations = make_observations(600, None, 400)

        self.assertEqual(calculate_baseline_inventory(observations), 1000)

        projections = project('S1', observations, [], 3, today=MARCH_FIRST)
        for day in projections:
            self.assertEqual(day.current_stock, 1000)

    def test_constant_demand_in_march(self):
        """Test a flat 50/day forecast against 1000 units in March."""
        forecasts = make_forecasts(MARCH_FIRST, [50] * 11)
        projections = project('S1', make_observations(600, 400), forecasts, 10, today=MARCH_FIRST)

        # Flat forecast: std dev 0, safety stock falls back to the floor
        self.assertEqual(projections[0].safety_stock, 10)
        self.assertEqual(projections[0].reorder_point, 15)

        for d, day in enumerate(projections):
            self.assertAlmostEqual(day.forecast_demand, 50)
            self.assertAlmostEqual(day.cumulative_demand, 50 * (d + 1))
            self.assertAlmostEqual(day.projected_inventory, 1000 - 50 * (d + 1))
            self.assertEqual(day.status, InventoryStatus.OPTIMAL)

        # Day 0 carries demand too, so 500 is reached on day 9 and day 10 is 550
        self.assertAlmostEqual(projections[9].cumulative_demand, 500)
        self.assertAlmostEqual(projections[9].projected_inventory, 500)
        self.assertAlmostEqual(projections[10].cumulative_demand, 550)

    def test_replenishment_when_reorder_point_is_crossed(self):
        """Test that crossing the reorder point restocks to estimated capacity."""
        forecasts = make_forecasts(MARCH_FIRST, [10] * 20)
        projections = project('S1', make_observations(100), forecasts, 15, today=MARCH_FIRST)

        # Day 7: 100 - 80 = 20, above the reorder point of 15
        self.assertAlmostEqual(projections[7].projected_inventory, 20)
        # Day 8: 100 - 90 = 10 <= 15, restocked to 2 * baseline
        self.assertAlmostEqual(projections[8].projected_inventory, 200)
        self.assertEqual(projections[8].status, InventoryStatus.OPTIMAL)

        # Every later day is measured against the starting baseline and restocked again
        for day in projections[8:]:
            self.assertAlmostEqual(day.projected_inventory, 200)

        # Cumulative demand is unaffected by restocking
        self.assertAlmostEqual(projections[15].cumulative_demand, 160)

    def test_no_replenishment_on_day_zero(self):
        """Test that day 0 is never restocked."""
        forecasts = make_forecasts(MARCH_FIRST, [10] * 3)
        projections = project('S1', make_observations(5), forecasts, 2, today=MARCH_FIRST)

        self.assertEqual(projections[0].projected_inventory, 0)
        self.assertEqual(projections[0].status, InventoryStatus.STOCKOUT)
        self.assertAlmostEqual(projections[1].projected_inventory, 10)

    def test_projected_inventory_is_floored_at_zero(self):
        """Test that the displayed projection never goes negative."""
        projections = project('S1', make_observations(0), make_forecasts(MARCH_FIRST, [25]), 3, today=MARCH_FIRST)

        for day in projections:
            self.assertEqual(day.projected_inventory, 0)
            self.assertEqual(day.status, InventoryStatus.STOCKOUT)

    def test_seasonal_adjustment_is_applied(self):
        """Test that July demand is scaled by 1.2."""
        july = date(2025, 7, 10)
        projections = project('S1', make_observations(10000), make_forecasts(july, [100]), 0, today=july)

        self.assertAlmostEqual(projections[0].forecast_demand, 120)
        self.assertAlmostEqual(projections[0].cumulative_demand, 120)

    def test_custom_parameters(self):
        """Test that engine parameters override the fixed constants."""
        parameters = ProjectionParameters(min_safety_stock=50, reorder_point_factor=2.0)
        projections = project('S1', make_observations(500), [], 1, today=MARCH_FIRST, parameters=parameters)

        self.assertEqual(projections[0].safety_stock, 50)
        self.assertEqual(projections[0].reorder_point, 100)

class TestInventoryStatus(unittest.TestCase):
    """Test cases for status classification."""

    def test_status_boundaries(self):
        """Test the classification boundaries around a safety stock of 100."""
        self.assertEqual(determine_inventory_status(-5, 100), InventoryStatus.STOCKOUT)
        self.assertEqual(determine_inventory_status(0, 100), InventoryStatus.STOCKOUT)
        self.assertEqual(determine_inventory_status(1, 100), InventoryStatus.CRITICAL)
        self.assertEqual(determine_inventory_status(50, 100), InventoryStatus.CRITICAL)
        self.assertEqual(determine_inventory_status(51, 100), InventoryStatus.WARNING)
        self.assertEqual(determine_inventory_status(100, 100), InventoryStatus.WARNING)
        self.assertEqual(determine_inventory_status(101, 100), InventoryStatus.OPTIMAL)

    def test_status_from_string(self):
        """Test parsing statuses from strings."""
        self.assertEqual(InventoryStatus.from_string('Critical'), InventoryStatus.CRITICAL)
        self.assertEqual(str(InventoryStatus.STOCKOUT), 'stockout')

        with self.assertRaises(ValueError):
            InventoryStatus.from_string('unknown')

class TestReplenishment(unittest.TestCase):
    """Test cases for the replenishment simulation."""

    def test_above_reorder_point_is_untouched(self):
        self.assertEqual(simulate_replenishment(50, 100, 15), 50)

    def test_restock_to_capacity(self):
        self.assertEqual(simulate_replenishment(15, 100, 15), 200)
        self.assertEqual(simulate_replenishment(-30, 100, 15), 200)

    def test_no_negative_restock(self):
        """Test that nothing is added when capacity is not above the projection."""
        self.assertEqual(simulate_replenishment(-10, -20, 15), -10)

class TestSummary(unittest.TestCase):
    """Test cases for summarize()."""

    def test_all_optimal_is_low_risk(self):
        """Test an all-optimal projection."""
        days = [make_day(InventoryStatus.OPTIMAL, projected=100 - i, cumulative=i) for i in range(10)]
        summary = summarize(days)

        self.assertEqual(summary.stockout_days, 0)
        self.assertEqual(summary.critical_days, 0)
        self.assertEqual(summary.warning_days, 0)
        self.assertEqual(summary.min_inventory, 91)
        self.assertEqual(summary.total_demand, 9)
        self.assertEqual(summary.risk_level, RiskLevel.LOW)

    def test_any_stockout_is_high_risk(self):
        days = [make_day(InventoryStatus.OPTIMAL)] * 5 + [make_day(InventoryStatus.STOCKOUT, projected=0)]
        summary = summarize(days)

        self.assertEqual(summary.stockout_days, 1)
        self.assertEqual(summary.min_inventory, 0)
        self.assertEqual(summary.risk_level, RiskLevel.HIGH)

    def test_critical_days_threshold(self):
        """Test that more than seven critical days is medium risk."""
        seven = [make_day(InventoryStatus.CRITICAL, projected=4)] * 7 + [make_day(InventoryStatus.WARNING, projected=8)]
        eight = [make_day(InventoryStatus.CRITICAL, projected=4)] * 8

        self.assertEqual(summarize(seven).risk_level, RiskLevel.LOW)
        self.assertEqual(summarize(seven).warning_days, 1)
        self.assertEqual(summarize(eight).risk_level, RiskLevel.MEDIUM)

    def test_empty_projection(self):
        self.assertIsNone(summarize([]))

    def test_summary_of_projection(self):
        """Test summarizing a real projection end to end."""
        forecasts = make_forecasts(MARCH_FIRST, [10] * 20)
        projections = project('S1', make_observations(100), forecasts, 15, today=MARCH_FIRST)
        summary = summarize(projections)

        self.assertEqual(summary.stockout_days, 0)
        self.assertAlmostEqual(summary.min_inventory, 20)
        self.assertAlmostEqual(summary.total_demand, 160)
        self.assertEqual(summary.to_dict()['risk_level'], 'low')

if __name__ == '__main__':
    unittest.main()
