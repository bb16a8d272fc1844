"""
Pump and fluid calculators for the engineering calculator pages.

Each calculator converts its inputs to the canonical calculator units
(m³/h, m, kW, bar, kg/m³, ...) through CALCULATOR_REGISTRY, applies the
textbook formula and returns a dict with 'value', 'unit' and 'formula'.
"""

import logging
import math
from typing import Dict, Optional

from constants import (
    GRAVITY, WATER_DENSITY, METERS_WATER_PER_BAR, SECONDS_PER_HOUR,
    IMPELLER_MIN_FACTOR, IMPELLER_MAX_FACTOR,
)
from unit_converter import ConversionError, parse_value
from unit_tables import CALCULATOR_REGISTRY

logger = logging.getLogger(__name__)


class CalculationError(ConversionError):
    """Raised when calculator inputs are physically meaningless."""
    code = "invalid_input"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _positive(value, name: str) -> float:
    """Parse *value* and raise CalculationError unless it is > 0."""
    number = parse_value(value)
    if number <= 0:
        raise CalculationError(f"{name} must be greater than zero, got {number}")
    return number


def _finite(value: float, name: str) -> float:
    """Raise CalculationError if an intermediate or final result overflowed."""
    if not math.isfinite(value):
        raise CalculationError(f"{name} is out of range for these inputs")
    return value


def _to_base(value: float, unit: str, unit_type: str) -> float:
    category = CALCULATOR_REGISTRY.get_category(unit_type)
    return _finite(category.unit(unit).to_base(value), unit_type)


def _from_base(value: float, unit: str, unit_type: str) -> float:
    category = CALCULATOR_REGISTRY.get_category(unit_type)
    return _finite(category.unit(unit).from_base(value), unit_type)


def _label(unit: str, unit_type: str) -> str:
    return CALCULATOR_REGISTRY.get_category(unit_type).unit(unit).label


# ---------------------------------------------------------------------------
# 1. Pump Power & Efficiency
# ---------------------------------------------------------------------------

def calculate_pump_power(
    flow, flow_unit: str,
    head, head_unit: str,
    specific_gravity,
    efficiency_pct,
    result_unit: str = "kw",
) -> Dict:
    """
    Shaft power required by a pump.

        P = rho * g * Q * H / eta

    with Q in m³/s, H in m and rho = 1000 * SG kg/m³.
    """
    q = _positive(flow, "flow")
    h = _positive(head, "head")
    sg = _positive(specific_gravity, "specific gravity")
    eta_pct = _positive(efficiency_pct, "efficiency")
    if eta_pct > 100:
        raise CalculationError(f"efficiency must be at most 100%, got {eta_pct}")

    q_m3s = _to_base(q, flow_unit, "flow") / SECONDS_PER_HOUR
    h_m = _to_base(h, head_unit, "head")
    rho = WATER_DENSITY * sg
    eta = eta_pct / 100

    power_kw = _finite(rho * GRAVITY * q_m3s * h_m / eta / 1_000, "power")
    result = _from_base(power_kw, result_unit, "power")

    return {
        "value": result,
        "unit": result_unit,
        "power_kw": power_kw,
        "formula": (
            f"P = {rho:g} kg/m³ * {GRAVITY} m/s² * {q_m3s:.6g} m³/s * {h_m:.6g} m"
            f" / {eta:g} = {power_kw:.6g} kW"
        ),
    }


def calculate_pump_efficiency(
    flow, flow_unit: str,
    head, head_unit: str,
    power, power_unit: str,
    specific_gravity,
) -> Dict:
    """
    Pump efficiency from hydraulic power over shaft power input.

        eta% = rho * g * Q * H / P * 100
    """
    q = _positive(flow, "flow")
    h = _positive(head, "head")
    p = _positive(power, "power")
    sg = _positive(specific_gravity, "specific gravity")

    q_m3s = _to_base(q, flow_unit, "flow") / SECONDS_PER_HOUR
    h_m = _to_base(h, head_unit, "head")
    power_w = _to_base(p, power_unit, "power") * 1_000
    rho = WATER_DENSITY * sg

    hydraulic_w = _finite(rho * GRAVITY * q_m3s * h_m, "hydraulic power")
    efficiency = _finite(hydraulic_w / power_w * 100, "efficiency")

    return {
        "value": efficiency,
        "unit": "%",
        "hydraulic_power_w": hydraulic_w,
        "formula": (
            f"eta = {hydraulic_w:.6g} W / {power_w:.6g} W * 100"
            f" = {efficiency:.2f} %"
        ),
    }


# ---------------------------------------------------------------------------
# 2. Specific Speed
# ---------------------------------------------------------------------------

def calculate_specific_speed(speed_rpm, flow, flow_unit: str, head, head_unit: str) -> Dict:
    """
    Pump specific speed Ns = N * sqrt(Q) / H^0.75, Q in m³/h and H in m.

    'value' is rounded to a whole number; 'exact' is unrounded.
    """
    n = _positive(speed_rpm, "speed")
    q = _to_base(_positive(flow, "flow"), flow_unit, "flow")
    h = _to_base(_positive(head, "head"), head_unit, "head")

    ns = _finite(n * math.sqrt(q) / h ** 0.75, "specific speed")
    return {
        "value": int(math.floor(ns + 0.5)),
        "exact": ns,
        "unit": "Ns",
        "formula": f"Ns = {n:g} * sqrt({q:.6g}) / {h:.6g}^0.75 = {ns:.2f}",
    }


def calculate_suction_specific_speed(
    speed_rpm,
    flow, flow_unit: str,
    npshr, npshr_unit: str,
    standard: str = "si",
) -> Dict:
    """
    Suction specific speed Nss = N * sqrt(Q) / NPSHr^0.75.

    *standard* 'si' evaluates with m³/h and m, 'us' with US GPM and ft.
    """
    if standard not in ("si", "us"):
        raise CalculationError(f"standard must be 'si' or 'us', got {standard!r}")

    n = _positive(speed_rpm, "speed")
    q = _to_base(_positive(flow, "flow"), flow_unit, "flow")
    npsh = _to_base(_positive(npshr, "NPSHr"), npshr_unit, "head")
    flow_label, head_label = "m³/h", "m"

    if standard == "us":
        q = _from_base(q, "gpm", "flow")
        npsh = _from_base(npsh, "ft", "head")
        flow_label, head_label = "GPM", "ft"

    numerator = _finite(n * math.sqrt(q), "suction specific speed")
    denominator = npsh ** 0.75
    nss = _finite(numerator / denominator, "suction specific speed")

    return {
        "value": int(math.floor(nss + 0.5)),
        "exact": nss,
        "unit": "Nss",
        "standard": standard,
        "steps": [
            f"N = {n:g} RPM",
            f"Q = {flow} {_label(flow_unit, 'flow')} = {q:.2f} {flow_label}",
            f"NPSHr = {npshr} {_label(npshr_unit, 'head')} = {npsh:.2f} {head_label}",
            f"Nss = {numerator:.2f} / {denominator:.4f}",
        ],
        "formula": f"Nss = (N * sqrt(Q)) / NPSHr^(3/4) = {nss:.2f}",
    }


# ---------------------------------------------------------------------------
# 3. Affinity Laws
# ---------------------------------------------------------------------------

def _solve_affinity(x1, x2, v1, v2, exponent: int, names) -> Dict:
    """
    Solve x1/x2 = (v1/v2)^exponent for whichever argument is None.

    *names* labels the four arguments in order, e.g. ('q1', 'q2', 'v1', 'v2').
    """
    values = [x1, x2, v1, v2]
    missing = [i for i, v in enumerate(values) if v is None]
    if len(missing) != 1:
        raise CalculationError(
            f"Exactly one of {', '.join(names)} must be left empty"
        )
    x1, x2, v1, v2 = [
        None if v is None else _positive(v, names[i]) for i, v in enumerate(values)
    ]

    idx = missing[0]
    try:
        if idx == 0:
            result = x2 * (v1 / v2) ** exponent
        elif idx == 1:
            result = x1 * (v2 / v1) ** exponent
        elif idx == 2:
            result = v2 * (x1 / x2) ** (1 / exponent)
        else:
            result = v1 * (x2 / x1) ** (1 / exponent)
    except OverflowError:
        raise CalculationError(f"{names[idx]} is out of range for these inputs") from None
    _finite(result, names[idx])

    return {
        "variable": names[idx],
        "value": result,
        "exponent": exponent,
    }


def calculate_affinity_flow(q1=None, q2=None, v1=None, v2=None) -> Dict:
    """Q1/Q2 = N1/N2 (or D1/D2)."""
    return _solve_affinity(q1, q2, v1, v2, 1, ("q1", "q2", "v1", "v2"))


def calculate_affinity_head(h1=None, h2=None, v1=None, v2=None) -> Dict:
    """H1/H2 = (N1/N2)²."""
    return _solve_affinity(h1, h2, v1, v2, 2, ("h1", "h2", "v1", "v2"))


def calculate_affinity_power(p1=None, p2=None, v1=None, v2=None) -> Dict:
    """P1/P2 = (N1/N2)³."""
    return _solve_affinity(p1, p2, v1, v2, 3, ("p1", "p2", "v1", "v2"))


# ---------------------------------------------------------------------------
# 4. Differential Head / Pressure
# ---------------------------------------------------------------------------

def calculate_differential_head(
    discharge_pressure, discharge_unit: str,
    suction_pressure, suction_unit: str,
    specific_gravity,
    result_unit: str = "m",
) -> Dict:
    """H = (Pd - Ps) * 10.2 / SG, pressures in bar, head in m."""
    pd = _to_base(parse_value(discharge_pressure), discharge_unit, "pressure")
    ps = _to_base(parse_value(suction_pressure), suction_unit, "pressure")
    sg = _positive(specific_gravity, "specific gravity")

    dp = pd - ps
    head_m = _finite(dp * METERS_WATER_PER_BAR / sg, "differential head")
    result = _from_base(head_m, result_unit, "head")
    return {
        "value": result,
        "unit": result_unit,
        "differential_pressure_bar": dp,
        "formula": (
            f"H = ({pd:.6g} - {ps:.6g}) bar * {METERS_WATER_PER_BAR} / {sg:g}"
            f" = {head_m:.6g} m"
        ),
    }


def calculate_differential_pressure(
    head, head_unit: str,
    specific_gravity,
    result_unit: str = "bar",
) -> Dict:
    """dP = H * SG / 10.2, head in m, pressure in bar."""
    h = _to_base(_positive(head, "head"), head_unit, "head")
    sg = _positive(specific_gravity, "specific gravity")

    dp_bar = _finite(h * sg / METERS_WATER_PER_BAR, "differential pressure")
    result = _from_base(dp_bar, result_unit, "pressure")
    return {
        "value": result,
        "unit": result_unit,
        "formula": f"dP = {h:.6g} m * {sg:g} / {METERS_WATER_PER_BAR} = {dp_bar:.6g} bar",
    }


# ---------------------------------------------------------------------------
# 5. Fluid Properties
# ---------------------------------------------------------------------------

def calculate_density(
    mass, mass_unit: str,
    volume, volume_unit: str,
    result_unit: str = "kgm3",
) -> Dict:
    """rho = m / V."""
    m = _to_base(_positive(mass, "mass"), mass_unit, "mass")
    v = _to_base(_positive(volume, "volume"), volume_unit, "volume")

    rho = _finite(m / v, "density")
    result = _from_base(rho, result_unit, "density")
    return {
        "value": result,
        "unit": result_unit,
        "formula": f"rho = {m:.6g} kg / {v:.6g} m³ = {rho:.6g} kg/m³",
    }


def calculate_kinematic_viscosity(
    dynamic_viscosity, viscosity_unit: str,
    density, density_unit: str,
    result_unit: str = "cst",
) -> Dict:
    """nu = mu / rho."""
    mu = _to_base(_positive(dynamic_viscosity, "dynamic viscosity"), viscosity_unit,
                  "dynamic_viscosity")
    rho = _to_base(_positive(density, "density"), density_unit, "density")

    nu = _finite(mu / rho, "kinematic viscosity")
    result = _from_base(nu, result_unit, "kinematic_viscosity")
    return {
        "value": result,
        "unit": result_unit,
        "formula": f"nu = {mu:.6g} Pa·s / {rho:.6g} kg/m³ = {nu:.6g} m²/s",
    }


# ---------------------------------------------------------------------------
# 6. Impeller Diameter Check (API 610)
# ---------------------------------------------------------------------------

def check_impeller_diameter(d_min, d_rated, d_max, unit: str = "mm",
                            rated_unit: Optional[str] = None) -> Dict:
    """
    Check the rated impeller against the API 610 window.

    The rated diameter must lie between 105% of the minimum and 95% of the
    maximum diameter. Limits are reported in the rated diameter's unit.
    """
    rated_unit = rated_unit or unit
    d_min_mm = _to_base(_positive(d_min, "minimum diameter"), unit, "diameter")
    d_rated_mm = _to_base(_positive(d_rated, "rated diameter"), rated_unit, "diameter")
    d_max_mm = _to_base(_positive(d_max, "maximum diameter"), unit, "diameter")

    if d_min_mm >= d_max_mm:
        raise CalculationError("minimum diameter must be smaller than maximum diameter")

    min_allowable = _finite(d_min_mm * IMPELLER_MIN_FACTOR, "minimum diameter")
    max_allowable = d_max_mm * IMPELLER_MAX_FACTOR
    margin_min = (d_rated_mm - min_allowable) / min_allowable * 100
    margin_max = (max_allowable - d_rated_mm) / max_allowable * 100
    is_met = min_allowable <= d_rated_mm <= max_allowable

    if is_met:
        status = "API 610 Compliant"
    elif d_rated_mm > max_allowable:
        status = "Exceeds Max Limit (>95%)"
    else:
        status = "Below Min Limit (<105%)"

    logger.debug(f"Impeller check {d_rated_mm:.1f} mm: {status}")
    return {
        "is_met": is_met,
        "status": status,
        "min_limit": _from_base(min_allowable, rated_unit, "diameter"),
        "max_limit": _from_base(max_allowable, rated_unit, "diameter"),
        "unit": rated_unit,
        "margin_above_min_pct": margin_min,
        "margin_below_max_pct": margin_max,
        "ratios": {
            "max": 1.0,
            "rated": d_rated_mm / d_max_mm,
            "min": d_min_mm / d_max_mm,
        },
    }
