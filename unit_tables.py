"""
Static unit tables for the converter pages and the engineering calculators.

Factors are exact by definition where one exists (international foot,
avoirdupois pound, US gallon, standard gravity, ...). Each unit lists only
its factor to the category's canonical unit; the reverse factor is derived.
"""

import math
from typing import Tuple

from unit_converter import QuantityCategory, UnitDefinition, UnitRegistry

U = UnitDefinition

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

INCH_M = 0.0254
FOOT_M = 0.3048
MILE_M = 1_609.344
NAUTICAL_MILE_M = 1_852.0
POUND_KG = 0.45359237
OUNCE_KG = POUND_KG / 16
US_GALLON_M3 = 0.003785411784
CUBIC_FOOT_M3 = FOOT_M ** 3
STANDARD_GRAVITY = 9.80665
POUND_FORCE_N = POUND_KG * STANDARD_GRAVITY
PSI_PA = POUND_FORCE_N / INCH_M ** 2
HORSEPOWER_W = 550 * FOOT_M * POUND_FORCE_N
BTU_IT_J = 1_055.05585262
ACRE_M2 = 4_046.8564224

# ---------------------------------------------------------------------------
# Converter pages
# ---------------------------------------------------------------------------

CONVERTER_QUANTITIES: Tuple[QuantityCategory, ...] = (
    QuantityCategory(
        id='mass', name='Mass Converter', canonical_label='gram', group='mass',
        about=(
            'Convert between different mass and weight units including metric '
            '(microgram, milligram, gram, kilogram, metric ton) and imperial '
            '(ounce, pound) systems. Perfect for cooking, shipping, science, and '
            'everyday weight measurements.'
        ),
        tags=('mg', 'g', 'kg', 'lb', 'oz', 'ton'),
        keywords=('weight', 'mass', 'kilogram', 'pound', 'gram', 'ounce', 'metric', 'imperial'),
        units=(
            U('mcg', 'Microgram', 1e-6),
            U('mg', 'Milligram', 0.001),
            U('g', 'Gram', 1.0),
            U('kg', 'Kilogram', 1_000.0),
            U('lb', 'Pound', POUND_KG * 1_000),
            U('oz', 'Ounce', OUNCE_KG * 1_000),
            U('ton', 'Metric Ton', 1e6),
        ),
    ),
    QuantityCategory(
        id='length', name='Length Converter', canonical_label='meter', group='length',
        about=(
            'Convert between length and distance units including millimeter, '
            'centimeter, meter, kilometer, inch, foot, yard, mile, and nautical '
            'mile. Useful for construction, travel, sports, and engineering '
            'applications.'
        ),
        units=(
            U('mm', 'Millimeter', 0.001),
            U('cm', 'Centimeter', 0.01),
            U('m', 'Meter', 1.0),
            U('km', 'Kilometer', 1_000.0),
            U('in', 'Inch', INCH_M),
            U('ft', 'Foot', FOOT_M),
            U('yd', 'Yard', 3 * FOOT_M),
            U('mi', 'Mile', MILE_M),
            U('nmi', 'Nautical Mile', NAUTICAL_MILE_M),
        ),
    ),
    QuantityCategory(
        id='area', name='Area Converter', canonical_label='square meter', group='area',
        about=(
            'Convert between area units including square millimeter, square '
            'centimeter, square meter, square kilometer, acre, hectare, and square '
            'foot. Essential for real estate, land measurement, and property '
            'calculations.'
        ),
        units=(
            U('mm²', 'Square Millimeter', 1e-6),
            U('cm²', 'Square Centimeter', 1e-4),
            U('m²', 'Square Meter', 1.0),
            U('km²', 'Square Kilometer', 1e6),
            U('acre', 'Acre', ACRE_M2),
            U('ha', 'Hectare', 10_000.0),
            U('ft²', 'Square Foot', FOOT_M ** 2),
        ),
    ),
    QuantityCategory(
        id='volume', name='Volume Converter', canonical_label='liter', group='volume',
        about=(
            'Convert between volume and capacity units including milliliter, '
            'liter, cubic meter, gallon, quart, pint, cup, and fluid ounce. '
            'Perfect for cooking, chemistry, and liquid measurements.'
        ),
        units=(
            U('ml', 'Milliliter', 0.001),
            U('L', 'Liter', 1.0),
            U('m³', 'Cubic Meter', 1_000.0),
            U('gal', 'Gallon (US)', US_GALLON_M3 * 1_000),
            U('qt', 'Quart', US_GALLON_M3 * 1_000 / 4),
            U('pt', 'Pint', US_GALLON_M3 * 1_000 / 8),
            U('cup', 'Cup', US_GALLON_M3 * 1_000 / 16),
            U('fl oz', 'Fluid Ounce', US_GALLON_M3 * 1_000 / 128),
        ),
    ),
    QuantityCategory(
        id='temperature', name='Temperature Converter', canonical_label='celsius',
        group='temperature',
        about=(
            'Convert between temperature scales including Celsius (°C), '
            'Fahrenheit (°F), Kelvin (K), and Rankine (°R). Essential for weather, '
            'cooking, science, and engineering applications worldwide.'
        ),
        units=(
            U('C', 'Celsius', 1.0),
            U('F', 'Fahrenheit', 5 / 9, offset=-160 / 9),
            U('K', 'Kelvin', 1.0, offset=-273.15),
            U('R', 'Rankine', 5 / 9, offset=-273.15),
        ),
    ),
    QuantityCategory(
        id='time', name='Time Converter', canonical_label='second', group='time',
        about=(
            'Convert between time units including millisecond, second, minute, '
            'hour, day, week, month, year, and decade. Useful for project '
            'planning, scheduling, and time calculations.'
        ),
        units=(
            U('ms', 'Millisecond', 0.001),
            U('s', 'Second', 1.0),
            U('min', 'Minute', 60.0),
            U('hr', 'Hour', 3_600.0),
            U('day', 'Day', 86_400.0),
            U('week', 'Week', 604_800.0),
            U('month', 'Month', 2_628_000.0),
            U('year', 'Year', 31_536_000.0),
            U('decade', 'Decade', 315_360_000.0),
        ),
    ),
    QuantityCategory(
        id='digital', name='Digital Storage Converter', canonical_label='byte',
        group='digital',
        about=(
            'Convert between digital storage units including bit, byte, kilobyte '
            '(KB), megabyte (MB), gigabyte (GB), and terabyte (TB). Essential for '
            'computing, file sizes, and data storage calculations.'
        ),
        units=(
            U('bit', 'Bit', 0.125),
            U('B', 'Byte', 1.0),
            U('KB', 'Kilobyte', 1024.0),
            U('MB', 'Megabyte', 1024.0 ** 2),
            U('GB', 'Gigabyte', 1024.0 ** 3),
            U('TB', 'Terabyte', 1024.0 ** 4),
        ),
    ),
    QuantityCategory(
        id='speed', name='Speed Converter', canonical_label='meter per second',
        group='speed',
        about=(
            'Convert between speed and velocity units including meters per second '
            '(m/s), kilometers per hour (km/h), miles per hour (mph), knot, and '
            'feet per second. Perfect for vehicles, wind speed, and physics '
            'calculations.'
        ),
        units=(
            U('m/s', 'Meters per Second', 1.0),
            U('km/h', 'Kilometers per Hour', 1 / 3.6),
            U('mph', 'Miles per Hour', MILE_M / 3_600),
            U('knot', 'Knot', NAUTICAL_MILE_M / 3_600),
            U('ft/s', 'Feet per Second', FOOT_M),
        ),
    ),
    QuantityCategory(
        id='pressure', name='Pressure Converter', canonical_label='pascal',
        group='pressure',
        about=(
            'Convert between pressure units including pascal (Pa), kilopascal '
            '(kPa), bar, PSI, and atmosphere (atm). Essential for tire pressure, '
            'weather, engineering, and scientific applications.'
        ),
        units=(
            U('Pa', 'Pascal', 1.0),
            U('kPa', 'Kilopascal', 1_000.0),
            U('bar', 'Bar', 100_000.0),
            U('psi', 'PSI', PSI_PA),
            U('atm', 'Atmosphere', 101_325.0),
        ),
    ),
    QuantityCategory(
        id='energy', name='Energy Converter', canonical_label='joule', group='energy',
        about=(
            'Convert between energy units including joule (J), kilojoule (kJ), '
            'calorie, kilocalorie, watt hour (Wh), and kilowatt hour (kWh). Useful '
            'for nutrition, electricity, and physics calculations.'
        ),
        units=(
            U('J', 'Joule', 1.0),
            U('kJ', 'Kilojoule', 1_000.0),
            U('cal', 'Calorie', 4.184),
            U('kcal', 'Kilocalorie', 4_184.0),
            U('Wh', 'Watt Hour', 3_600.0),
            U('kWh', 'Kilowatt Hour', 3_600_000.0),
        ),
    ),
    QuantityCategory(
        id='power', name='Power Converter', canonical_label='watt', group='power',
        about=(
            'Convert between power units including watt (W), kilowatt (kW), '
            'megawatt (MW), horsepower (hp), and BTU per hour. Essential for '
            'electrical systems, engines, and energy consumption calculations.'
        ),
        units=(
            U('W', 'Watt', 1.0),
            U('kW', 'Kilowatt', 1_000.0),
            U('MW', 'Megawatt', 1e6),
            U('hp', 'Horsepower', HORSEPOWER_W),
            U('BTU/h', 'BTU per Hour', BTU_IT_J / 3_600),
        ),
    ),
    QuantityCategory(
        id='current', name='Electric Current Converter', canonical_label='ampere',
        group='electrical',
        about=(
            'Convert between electric current units including microampere (μA), '
            'milliampere (mA), ampere (A), and kiloampere (kA). Essential for '
            'electrical engineering and circuit design.'
        ),
        units=(
            U('μA', 'Microampere', 1e-6),
            U('mA', 'Milliampere', 0.001),
            U('A', 'Ampere', 1.0),
            U('kA', 'Kiloampere', 1_000.0),
        ),
    ),
    QuantityCategory(
        id='voltage', name='Voltage Converter', canonical_label='volt',
        group='electrical',
        about=(
            'Convert between voltage units including microvolt (μV), millivolt '
            '(mV), volt (V), and kilovolt (kV). Important for electrical systems, '
            'batteries, and power distribution.'
        ),
        units=(
            U('μV', 'Microvolt', 1e-6),
            U('mV', 'Millivolt', 0.001),
            U('V', 'Volt', 1.0),
            U('kV', 'Kilovolt', 1_000.0),
        ),
    ),
    QuantityCategory(
        id='reactive-power', name='Reactive Power Converter',
        canonical_label='volt-ampere-reactive', group='electrical',
        about=(
            'Convert between reactive power units including VAR, kVAR, and MVAR. '
            'Essential for AC electrical systems and power factor calculations.'
        ),
        units=(
            U('VAR', 'Volt-Ampere Reactive', 1.0),
            U('kVAR', 'Kilovolt-Ampere Reactive', 1_000.0),
            U('MVAR', 'Megavolt-Ampere Reactive', 1e6),
        ),
    ),
    QuantityCategory(
        id='apparent-power', name='Apparent Power Converter',
        canonical_label='volt-ampere', group='electrical',
        about=(
            'Convert between apparent power units including VA, kVA, and MVA. '
            'Used in AC electrical systems for total power calculations.'
        ),
        units=(
            U('VA', 'Volt-Ampere', 1.0),
            U('kVA', 'Kilovolt-Ampere', 1_000.0),
            U('MVA', 'Megavolt-Ampere', 1e6),
        ),
    ),
    QuantityCategory(
        id='reactive-energy', name='Reactive Energy Converter',
        canonical_label='volt-ampere-reactive hour', group='electrical',
        about=(
            'Convert between reactive energy units including VARh, kVARh, and '
            'MVARh. Important for electrical energy metering and billing.'
        ),
        units=(
            U('VARh', 'Volt-Ampere Reactive Hour', 1.0),
            U('kVARh', 'Kilovolt-Ampere Reactive Hour', 1_000.0),
            U('MVARh', 'Megavolt-Ampere Reactive Hour', 1e6),
        ),
    ),
    QuantityCategory(
        id='flow-rate', name='Volume Flow Rate Converter',
        canonical_label='cubic meter per second', group='flow',
        about=(
            'Convert between volume flow rate units including cubic meters per '
            'second (m³/s), liters per second/minute, gallons per minute (GPM), '
            'and cubic feet per minute (CFM). Essential for pump systems, HVAC, '
            'and fluid dynamics.'
        ),
        units=(
            U('m³/s', 'Cubic Meters per Second', 1.0),
            U('m³/h', 'Cubic Meters per Hour', 1 / 3_600),
            U('L/s', 'Liters per Second', 0.001),
            U('L/min', 'Liters per Minute', 0.001 / 60),
            U('gpm', 'Gallons per Minute', US_GALLON_M3 / 60),
            U('cfm', 'Cubic Feet per Minute', CUBIC_FOOT_M3 / 60),
        ),
    ),
    QuantityCategory(
        id='illuminance', name='Illuminance Converter', canonical_label='lux',
        group='light',
        about=(
            'Convert between illuminance units including lux, foot-candle (fc), '
            'and phot. Used in lighting design, photography, and architectural '
            'applications.'
        ),
        units=(
            U('lux', 'Lux', 1.0),
            U('fc', 'Foot-candle', 1 / FOOT_M ** 2),
            U('phot', 'Phot', 10_000.0),
        ),
    ),
    QuantityCategory(
        id='force', name='Force Converter', canonical_label='newton', group='mechanics',
        about=(
            'Convert between force units including newton (N), kilonewton (kN), '
            'pound-force (lbf), and kilogram-force (kgf). Essential for physics, '
            'engineering, and mechanical calculations.'
        ),
        units=(
            U('N', 'Newton', 1.0),
            U('kN', 'Kilonewton', 1_000.0),
            U('lbf', 'Pound-force', POUND_FORCE_N),
            U('kgf', 'Kilogram-force', STANDARD_GRAVITY),
        ),
    ),
    QuantityCategory(
        id='torque', name='Torque Converter', canonical_label='newton meter',
        group='mechanics',
        about=(
            'Convert between torque units including newton meter (N·m), '
            'pound-foot (lb·ft), kilogram centimeter (kg·cm), and ounce-inch. '
            'Important for automotive, machinery, and mechanical engineering.'
        ),
        units=(
            U('N·m', 'Newton Meter', 1.0),
            U('lb·ft', 'Pound-foot', POUND_FORCE_N * FOOT_M),
            U('kg·cm', 'Kilogram Centimeter', STANDARD_GRAVITY * 0.01),
            U('oz·in', 'Ounce-inch', POUND_FORCE_N / 16 * INCH_M),
        ),
    ),
    QuantityCategory(
        id='density', name='Density Converter',
        canonical_label='kilogram per cubic meter', group='mechanics',
        about=(
            'Convert between density units including kg/m³, g/cm³, lb/ft³, and '
            'lb/in³. Used in material science, engineering, and physics for '
            'mass-to-volume relationships.'
        ),
        units=(
            U('kg/m³', 'Kilogram per Cubic Meter', 1.0),
            U('g/cm³', 'Gram per Cubic Centimeter', 1_000.0),
            U('lb/ft³', 'Pound per Cubic Foot', POUND_KG / CUBIC_FOOT_M3),
            U('lb/in³', 'Pound per Cubic Inch', POUND_KG / INCH_M ** 3),
        ),
    ),
    QuantityCategory(
        id='acceleration', name='Acceleration Converter',
        canonical_label='meter per second squared', group='mechanics',
        about=(
            'Convert between acceleration units including m/s², standard gravity '
            '(g), ft/s², and gal. Essential for physics, automotive, and aerospace '
            'applications.'
        ),
        units=(
            U('m/s²', 'Meter per Second Squared', 1.0),
            U('g', 'Standard Gravity', STANDARD_GRAVITY),
            U('ft/s²', 'Foot per Second Squared', FOOT_M),
            U('gal', 'Gal', 0.01),
        ),
    ),
    QuantityCategory(
        id='data-rate', name='Data Transfer Rate Converter',
        canonical_label='bits per second', group='digital',
        about=(
            'Convert between data transfer rate units including bps, kbps, Mbps, '
            'Gbps, and bytes per second. Essential for internet speed, network '
            'bandwidth, and download calculations.'
        ),
        units=(
            U('bps', 'Bits per Second', 1.0),
            U('kbps', 'Kilobits per Second', 1_000.0),
            U('Mbps', 'Megabits per Second', 1e6),
            U('Gbps', 'Gigabits per Second', 1e9),
            U('Bps', 'Bytes per Second', 8.0),
            U('KBps', 'Kilobytes per Second', 8_000.0),
        ),
    ),
    QuantityCategory(
        id='resolution', name='Resolution Converter', canonical_label='dots per inch',
        group='light',
        about=(
            'Convert between resolution units including DPI (dots per inch), PPI '
            '(pixels per inch), LPI (lines per inch), and dots per centimeter. '
            'Used in printing, displays, and image quality.'
        ),
        units=(
            U('dpi', 'Dots per Inch', 1.0),
            U('ppi', 'Pixels per Inch', 1.0),
            U('lpi', 'Lines per Inch', 1.0),
            U('dpcm', 'Dots per Centimeter', 2.54),
        ),
    ),
)

# ---------------------------------------------------------------------------
# Calculator unit types
# ---------------------------------------------------------------------------

CALCULATOR_QUANTITIES: Tuple[QuantityCategory, ...] = (
    QuantityCategory(
        id='flow', name='Flow Rate', canonical_label='m³/h',
        units=(
            U('m3h', 'm³/h', 1.0),
            U('lh', 'L/h', 0.001),
            U('lmin', 'L/min', 0.06),
            U('gpm', 'GPM (US)', US_GALLON_M3 * 60),
            U('gph', 'GPH (US)', US_GALLON_M3),
            U('cfm', 'CFM', CUBIC_FOOT_M3 * 60),
            U('m3min', 'm³/min', 60.0),
        ),
    ),
    QuantityCategory(
        id='head', name='Head', canonical_label='m',
        units=(
            U('m', 'meters (m)', 1.0),
            U('ft', 'feet (ft)', FOOT_M),
            U('cm', 'centimeters (cm)', 0.01),
            U('mm', 'millimeters (mm)', 0.001),
            U('in', 'inches (in)', INCH_M),
        ),
    ),
    QuantityCategory(
        id='power', name='Power', canonical_label='kW',
        units=(
            U('kw', 'kW', 1.0),
            U('hp', 'HP', HORSEPOWER_W / 1_000),
            U('w', 'Watts (W)', 0.001),
            U('mw', 'MW', 1_000.0),
        ),
    ),
    QuantityCategory(
        id='speed', name='Rotational Speed', canonical_label='RPM',
        units=(
            U('rpm', 'RPM', 1.0),
            U('rps', 'RPS', 60.0),
            U('rads', 'rad/s', 60 / (2 * math.pi)),
        ),
    ),
    QuantityCategory(
        id='diameter', name='Diameter', canonical_label='mm',
        units=(
            U('mm', 'mm', 1.0),
            U('cm', 'cm', 10.0),
            U('m', 'm', 1_000.0),
            U('in', 'inches', INCH_M * 1_000),
            U('ft', 'feet', FOOT_M * 1_000),
        ),
    ),
    QuantityCategory(
        id='specific_gravity', name='Specific Gravity', canonical_label='SG',
        units=(
            U('sg', 'SG', 1.0),
        ),
    ),
    QuantityCategory(
        id='pressure', name='Pressure', canonical_label='bar',
        units=(
            U('bar', 'bar', 1.0),
            U('psi', 'psi', PSI_PA / 100_000),
            U('kpa', 'kPa', 0.01),
            U('mpa', 'MPa', 10.0),
        ),
    ),
    QuantityCategory(
        id='density', name='Density', canonical_label='kg/m³',
        units=(
            U('kgm3', 'kg/m³', 1.0),
            U('gcm3', 'g/cm³', 1_000.0),
            U('lbft3', 'lb/ft³', POUND_KG / CUBIC_FOOT_M3),
            U('kgl', 'kg/L', 1_000.0),
        ),
    ),
    QuantityCategory(
        id='dynamic_viscosity', name='Dynamic Viscosity', canonical_label='Pa·s',
        units=(
            U('cp', 'cP', 0.001),
            U('mpas', 'mPa·s', 0.001),
            U('pas', 'Pa·s', 1.0),
            U('poise', 'P', 0.1),
        ),
    ),
    QuantityCategory(
        id='kinematic_viscosity', name='Kinematic Viscosity', canonical_label='m²/s',
        units=(
            U('cst', 'cSt', 1e-6),
            U('m2s', 'm²/s', 1.0),
            U('st', 'St', 1e-4),
            U('ft2s', 'ft²/s', FOOT_M ** 2),
        ),
    ),
    QuantityCategory(
        id='mass', name='Mass', canonical_label='kg',
        units=(
            U('kg', 'kg', 1.0),
            U('g', 'g', 0.001),
            U('lb', 'lb', POUND_KG),
            U('oz', 'oz', OUNCE_KG),
        ),
    ),
    QuantityCategory(
        id='volume', name='Volume', canonical_label='m³',
        units=(
            U('m3', 'm³', 1.0),
            U('cm3', 'cm³', 1e-6),
            U('l', 'L', 0.001),
            U('ft3', 'ft³', CUBIC_FOOT_M3),
            U('gal', 'gal', US_GALLON_M3),
        ),
    ),
)

CONVERTER_REGISTRY = UnitRegistry(CONVERTER_QUANTITIES)
CALCULATOR_REGISTRY = UnitRegistry(CALCULATOR_QUANTITIES)


# ---------------------------------------------------------------------------
# Module-level lookups (converter pages by default)
# ---------------------------------------------------------------------------

def get_units_for_category(category_id, registry=CONVERTER_REGISTRY):
    return registry.get_units_for_category(category_id)


def get_canonical_label(category_id, registry=CONVERTER_REGISTRY):
    return registry.get_canonical_label(category_id)


def convert_units(value, from_unit, to_unit, category_id, registry=CONVERTER_REGISTRY):
    return registry.convert(value, from_unit, to_unit, category_id)


def get_converters_in_group(group_id):
    """Converter quantities listed on one converter page, in table order."""
    return tuple(c for c in CONVERTER_REGISTRY if c.group == group_id)
