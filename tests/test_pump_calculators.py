"""Tests for pump_calculators.py — pump power, specific speed, affinity laws, fluid properties."""

import math

import pytest
from pump_calculators import (
    CalculationError, calculate_affinity_flow, calculate_affinity_head,
    calculate_affinity_power, calculate_density, calculate_differential_head,
    calculate_differential_pressure, calculate_kinematic_viscosity,
    calculate_pump_efficiency, calculate_pump_power, calculate_specific_speed,
    calculate_suction_specific_speed, check_impeller_diameter,
)
from unit_converter import InvalidValue, UnknownUnit


# ── Pump Power & Efficiency ──

class TestPumpPower:
    def test_water_pump(self):
        result = calculate_pump_power(100, "m3h", 50, "m", 1.0, 75)
        assert result["value"] == pytest.approx(18.1667, abs=1e-4)
        assert result["unit"] == "kw"
        assert result["power_kw"] == pytest.approx(result["value"])

    def test_result_in_horsepower(self):
        kw = calculate_pump_power(100, "m3h", 50, "m", 1.0, 75)["value"]
        hp = calculate_pump_power(100, "m3h", 50, "m", 1.0, 75, result_unit="hp")["value"]
        assert hp == pytest.approx(kw / 0.745699872, rel=1e-6)

    def test_imperial_inputs(self):
        metric = calculate_pump_power(100, "m3h", 50, "m", 1.0, 75)["value"]
        imperial = calculate_pump_power(440.287, "gpm", 164.042, "ft", 1.0, 75)["value"]
        assert imperial == pytest.approx(metric, rel=1e-4)

    def test_specific_gravity_scales_power(self):
        water = calculate_pump_power(100, "m3h", 50, "m", 1.0, 75)["value"]
        brine = calculate_pump_power(100, "m3h", 50, "m", 1.2, 75)["value"]
        assert brine == pytest.approx(water * 1.2)

    def test_efficiency_above_100_rejected(self):
        with pytest.raises(CalculationError) as exc:
            calculate_pump_power(100, "m3h", 50, "m", 1.0, 120)
        assert exc.value.code == "invalid_input"

    @pytest.mark.parametrize("field", ["flow", "head", "specific_gravity", "efficiency_pct"])
    def test_non_positive_inputs_rejected(self, field):
        kwargs = dict(flow=100, flow_unit="m3h", head=50, head_unit="m",
                      specific_gravity=1.0, efficiency_pct=75)
        kwargs[field] = 0
        with pytest.raises(CalculationError):
            calculate_pump_power(**kwargs)

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnit):
            calculate_pump_power(100, "bbl", 50, "m", 1.0, 75)

    def test_efficiency_round_trip(self):
        power = calculate_pump_power(100, "m3h", 50, "m", 1.0, 75)["value"]
        result = calculate_pump_efficiency(100, "m3h", 50, "m", power, "kw", 1.0)
        assert result["value"] == pytest.approx(75.0)
        assert result["unit"] == "%"

    def test_efficiency_with_watts(self):
        result = calculate_pump_efficiency(100, "m3h", 50, "m", 18166.67, "w", 1.0)
        assert result["value"] == pytest.approx(75.0, abs=1e-3)


# ── Specific Speed ──

class TestSpecificSpeed:
    def test_metric(self):
        result = calculate_specific_speed(1450, 100, "m3h", 50, "m")
        expected = 1450 * math.sqrt(100) / 50 ** 0.75
        assert result["exact"] == pytest.approx(expected)
        assert result["value"] == int(math.floor(expected + 0.5))

    def test_overflow_rejected(self):
        with pytest.raises(CalculationError):
            calculate_specific_speed(1e308, 1e308, "m3h", 1, "m")

    def test_suction_overflow_rejected(self):
        with pytest.raises(CalculationError):
            calculate_suction_specific_speed(1e308, 1e308, "m3h", 1, "m")

    def test_zero_speed_rejected(self):
        with pytest.raises(CalculationError):
            calculate_specific_speed(0, 100, "m3h", 50, "m")

    def test_suction_specific_speed_si(self):
        result = calculate_suction_specific_speed(1450, 100, "m3h", 5, "m")
        expected = 1450 * math.sqrt(100) / 5 ** 0.75
        assert result["exact"] == pytest.approx(expected)
        assert result["standard"] == "si"
        assert len(result["steps"]) == 4

    def test_suction_specific_speed_us(self):
        result = calculate_suction_specific_speed(1450, 100, "m3h", 5, "m", standard="us")
        gpm = 100 / (0.003785411784 * 60)
        ft = 5 / 0.3048
        assert result["exact"] == pytest.approx(1450 * math.sqrt(gpm) / ft ** 0.75)

    def test_unknown_standard(self):
        with pytest.raises(CalculationError):
            calculate_suction_specific_speed(1450, 100, "m3h", 5, "m", standard="metric")


# ── Affinity Laws ──

class TestAffinity:
    def test_flow_doubles_with_speed(self):
        result = calculate_affinity_flow(q1=100, v1=1450, v2=2900)
        assert result["variable"] == "q2"
        assert result["value"] == pytest.approx(200.0)

    def test_head_squares(self):
        assert calculate_affinity_head(h1=50, v1=1450, v2=2900)["value"] == pytest.approx(200.0)

    def test_power_cubes(self):
        assert calculate_affinity_power(p1=10, v1=1450, v2=2900)["value"] == pytest.approx(80.0)

    def test_solve_for_new_speed(self):
        result = calculate_affinity_flow(q1=100, q2=200, v1=1450)
        assert result["variable"] == "v2"
        assert result["value"] == pytest.approx(2900.0)

    def test_solve_for_old_speed_from_head(self):
        result = calculate_affinity_head(h1=50, h2=200, v2=2900)
        assert result["value"] == pytest.approx(1450.0)

    def test_solve_for_old_flow(self):
        assert calculate_affinity_flow(q2=200, v1=1450, v2=2900)["value"] == pytest.approx(100.0)

    def test_more_than_one_missing(self):
        with pytest.raises(CalculationError):
            calculate_affinity_flow(q1=100, v1=1450)

    def test_nothing_missing(self):
        with pytest.raises(CalculationError):
            calculate_affinity_power(p1=10, p2=80, v1=1450, v2=2900)

    def test_power_overflow_rejected(self):
        with pytest.raises(CalculationError):
            calculate_affinity_power(p1=1, v1=1, v2=1e200)

    def test_negative_value_rejected(self):
        with pytest.raises(CalculationError):
            calculate_affinity_flow(q1=-100, v1=1450, v2=2900)


# ── Differential Head / Pressure ──

class TestDifferential:
    def test_head_from_pressures(self):
        result = calculate_differential_head(5, "bar", 1, "bar", 1.0)
        assert result["value"] == pytest.approx(40.8)
        assert result["differential_pressure_bar"] == pytest.approx(4.0)

    def test_head_mixed_units(self):
        result = calculate_differential_head(500, "kpa", 1, "bar", 1.0)
        assert result["value"] == pytest.approx(40.8)

    def test_head_in_feet(self):
        result = calculate_differential_head(5, "bar", 1, "bar", 1.0, result_unit="ft")
        assert result["value"] == pytest.approx(40.8 / 0.3048)

    def test_pressure_from_head(self):
        result = calculate_differential_pressure(40.8, "m", 1.0)
        assert result["value"] == pytest.approx(4.0)
        assert result["unit"] == "bar"

    def test_pressure_non_numeric_head(self):
        with pytest.raises(InvalidValue):
            calculate_differential_pressure("abc", "m", 1.0)


# ── Fluid Properties ──

class TestFluidProperties:
    def test_density_of_water(self):
        result = calculate_density(1, "kg", 1, "l")
        assert result["value"] == pytest.approx(1000.0)

    def test_density_in_g_per_cm3(self):
        result = calculate_density(1, "kg", 1, "l", result_unit="gcm3")
        assert result["value"] == pytest.approx(1.0)

    def test_density_overflow_rejected(self):
        with pytest.raises(CalculationError):
            calculate_density(1e308, "kg", 1e-10, "l")

    def test_zero_volume_rejected(self):
        with pytest.raises(CalculationError):
            calculate_density(1, "kg", 0, "l")

    def test_kinematic_viscosity_of_water(self):
        result = calculate_kinematic_viscosity(1, "cp", 1000, "kgm3")
        assert result["value"] == pytest.approx(1.0)
        assert result["unit"] == "cst"

    def test_kinematic_viscosity_in_stokes(self):
        result = calculate_kinematic_viscosity(100, "cp", 1, "kgl", result_unit="st")
        assert result["value"] == pytest.approx(1.0)


# ── Impeller Diameter Check ──

class TestImpellerDiameter:
    def test_within_window(self):
        result = check_impeller_diameter(200, 250, 300)
        assert result["is_met"] is True
        assert result["status"] == "API 610 Compliant"
        assert result["min_limit"] == pytest.approx(210.0)
        assert result["max_limit"] == pytest.approx(285.0)

    def test_exceeds_max(self):
        result = check_impeller_diameter(200, 290, 300)
        assert result["is_met"] is False
        assert result["status"].startswith("Exceeds")
        assert result["margin_below_max_pct"] < 0

    def test_below_min(self):
        result = check_impeller_diameter(200, 205, 300)
        assert result["is_met"] is False
        assert result["status"].startswith("Below")
        assert result["margin_above_min_pct"] < 0

    def test_rated_in_other_unit(self):
        result = check_impeller_diameter(200, 25, 300, unit="mm", rated_unit="cm")
        assert result["is_met"] is True
        assert result["unit"] == "cm"
        assert result["min_limit"] == pytest.approx(21.0)

    def test_ratios(self):
        ratios = check_impeller_diameter(200, 250, 300)["ratios"]
        assert ratios["max"] == 1.0
        assert ratios["rated"] == pytest.approx(250 / 300)
        assert ratios["min"] == pytest.approx(200 / 300)

    def test_min_not_below_max(self):
        with pytest.raises(CalculationError):
            check_impeller_diameter(300, 250, 200)
