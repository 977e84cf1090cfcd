"""Tests for the cancer and MSD cost models and their aggregation."""

import math

import pytest

from orsif.core.inputs import InputSet
from orsif.model.cancer import annual_cancer_cases, calculate_cancer
from orsif.model.calculator import calculate
from orsif.model.msd import calculate_msd


class TestCancerModel:
    """Tests for calculate_cancer."""

    def test_annual_cases_amortise_lifetime_risk(self):
        """Annual cases = headcount x lifetime risk / career duration."""
        assert annual_cancer_cases(11626, 0.01, 25) == pytest.approx(4.6504)

    def test_physician_fatal_cost_2025(self, inputs_2025):
        """11626 physicians -> 2.3252 fatal cases x $13.6M."""
        cancer = calculate_cancer(inputs_2025)

        assert cancer.physicians.total_cases == pytest.approx(4.6504)
        assert cancer.physicians.fatal.cases == pytest.approx(2.3252)
        assert cancer.physicians.non_fatal.cases == pytest.approx(2.3252)
        assert cancer.physicians.fatal.cost == pytest.approx(31_622_720, rel=1e-3)
        assert cancer.physicians.non_fatal.cost == pytest.approx(581_300)

    def test_support_costs_2025(self, inputs_2025):
        cancer = calculate_cancer(inputs_2025)

        assert cancer.support.total_cases == pytest.approx(4.86)
        assert cancer.support.fatal.cost == pytest.approx(33_048_000)
        assert cancer.support.non_fatal.cost == pytest.approx(607_500)

    def test_totals_sum_groups(self, inputs_2025):
        cancer = calculate_cancer(inputs_2025)

        assert cancer.total.fatal_cases == pytest.approx(2.3252 + 2.43)
        assert cancer.total.fatal_cost == cancer.physicians.fatal.cost + cancer.support.fatal.cost
        assert cancer.total.total_cost == pytest.approx(65_859_520)
        assert cancer.total.total_cases == pytest.approx(
            cancer.total.fatal_cases + cancer.total.non_fatal_cases
        )

    def test_fatality_split(self, inputs_2025):
        """Fatal and non-fatal cases partition the annual cases."""
        inputs = inputs_2025.with_value("cancer_fatality_rate", 0.3)
        cancer = calculate_cancer(inputs)

        assert cancer.physicians.fatal.cases == pytest.approx(4.6504 * 0.3)
        assert cancer.physicians.non_fatal.cases == pytest.approx(4.6504 * 0.7)

    def test_all_fatal(self, inputs_2025):
        cancer = calculate_cancer(inputs_2025.with_value("cancer_fatality_rate", 1.0))

        assert cancer.total.non_fatal_cases == 0
        assert cancer.total.non_fatal_cost == 0

    def test_zero_career_duration_rejected(self, inputs_2025):
        with pytest.raises(ValueError, match="career_duration"):
            calculate_cancer(inputs_2025.with_value("career_duration", 0))


class TestMSDModel:
    """Tests for calculate_msd."""

    def test_msd_2025(self, inputs_2025):
        msd = calculate_msd(inputs_2025)

        assert msd.physicians.cases == pytest.approx(209.268)
        assert msd.physicians.cost_per_case == 94_285
        assert msd.physicians.cost == pytest.approx(19_730_833.38)
        assert msd.support.cases == pytest.approx(437.4)
        assert msd.support.cost == pytest.approx(20_696_018.4)
        assert msd.total.cost == pytest.approx(40_426_851.78)

    def test_same_incidence_for_both_groups(self, inputs_2025):
        """Only unit costs differ between the groups."""
        msd = calculate_msd(inputs_2025)

        assert msd.physicians.cases / inputs_2025.total_physicians == pytest.approx(
            msd.support.cases / inputs_2025.total_support
        )


class TestCalculate:
    """Tests for the aggregated calculation."""

    def test_grand_total_decomposition(self, inputs_2018, inputs_2025):
        """grand_total is exactly cancer total + MSD total."""
        for inputs in (inputs_2018, inputs_2025):
            result = calculate(inputs)
            assert result.grand_total == result.cancer.total.total_cost + result.msd.total.cost

    def test_grand_totals(self, inputs_2018, inputs_2025):
        assert calculate(inputs_2018).grand_total == pytest.approx(50_230_500)
        assert calculate(inputs_2025).grand_total == pytest.approx(106_286_371.78)

    def test_workforce(self, inputs_2025):
        workforce = calculate(inputs_2025).workforce

        assert workforce.physicians == 11626
        assert workforce.support == 24300
        assert workforce.total == 35926

    def test_breakdown_matches_components(self, inputs_2025):
        result = calculate(inputs_2025)
        breakdown = result.breakdown

        assert breakdown.fatal_cancer_physicians == result.cancer.physicians.fatal.cost
        assert breakdown.non_fatal_cancer_support == result.cancer.support.non_fatal.cost
        assert breakdown.msd_support == result.msd.support.cost
        assert sum(breakdown.to_dict().values()) == pytest.approx(result.grand_total)

    def test_deterministic(self, inputs_2025):
        """Repeated calls give identical results."""
        assert calculate(inputs_2025) == calculate(inputs_2025)

    def test_zero_workforce(self, zero_inputs):
        result = calculate(zero_inputs)
        assert result.grand_total == 0

    def test_to_dict(self, inputs_2025):
        data = calculate(inputs_2025).to_dict()

        assert set(data) == {"cancer", "msd", "grand_total", "workforce", "breakdown"}
        assert data["cancer"]["physicians"]["fatal"]["cost"] == pytest.approx(31_622_720)
        assert not math.isnan(data["grand_total"])

    def test_custom_inputs(self):
        """Small hand-checked example."""
        inputs = InputSet(
            interventional_cardiologists=100,
            interventional_radiologists=0,
            electrophysiologists=0,
            nurses=200,
            technicians=0,
            physician_cancer_risk=0.1,
            support_cancer_risk=0.05,
            cancer_fatality_rate=0.5,
            msd_annual_incidence=0.1,
            career_duration=10,
            vsl=1000,
            non_fatal_cancer_cost=100,
            msd_physician_cost=10,
            msd_support_cost=5,
        )
        result = calculate(inputs)

        # Cancer: 1 physician case/yr, 1 support case/yr, half fatal
        assert result.cancer.total.fatal_cost == pytest.approx(1000)
        assert result.cancer.total.non_fatal_cost == pytest.approx(100)
        # MSD: 10 physician cases x $10 + 20 support cases x $5
        assert result.msd.total.cost == pytest.approx(200)
        assert result.grand_total == pytest.approx(1300)
