"""
Constants and static data for the engineering converter site.
Centralizes converter page groups, the calculator catalog and physical
constants shared by the calculators.
"""

# Physical constants used by the pump calculators
GRAVITY = 9.81                  # m/s²
WATER_DENSITY = 1000.0          # kg/m³ at specific gravity 1.0
METERS_WATER_PER_BAR = 10.2     # m of water column per bar
SECONDS_PER_HOUR = 3600.0

# API 610 impeller diameter window
IMPELLER_MIN_FACTOR = 1.05
IMPELLER_MAX_FACTOR = 0.95

# Search collections
KIND_CALCULATOR = 'calculator'
KIND_CONVERTER = 'converter'
SEARCH_KINDS = (KIND_CALCULATOR, KIND_CONVERTER)

# Converter page groups, in menu order. Hidden groups still convert but are
# not listed on the converters page or in search.
CONVERTER_GROUPS = [
    {'id': 'mass', 'name': 'Mass',
     'description': 'Convert weight and mass units like kg, lb, oz'},
    {'id': 'length', 'name': 'Length',
     'description': 'Convert distance and length units like m, ft, mi'},
    {'id': 'area', 'name': 'Area',
     'description': 'Convert area units like m², acre, hectare'},
    {'id': 'volume', 'name': 'Volume',
     'description': 'Convert volume units like L, gal, m³'},
    {'id': 'temperature', 'name': 'Temperature',
     'description': 'Convert temperature units like °C, °F, K'},
    {'id': 'time', 'name': 'Time',
     'description': 'Convert time units like s, min, hr, day', 'hidden': True},
    {'id': 'speed', 'name': 'Speed',
     'description': 'Convert speed units like km/h, mph, m/s'},
    {'id': 'pressure', 'name': 'Pressure',
     'description': 'Convert pressure units like Pa, bar, psi'},
    {'id': 'energy', 'name': 'Energy',
     'description': 'Convert energy units like J, kWh, cal', 'hidden': True},
    {'id': 'power', 'name': 'Power',
     'description': 'Convert power units like W, kW, hp'},
    {'id': 'digital', 'name': 'Digital',
     'description': 'Convert digital storage units like KB, MB, GB', 'hidden': True},
    {'id': 'electrical', 'name': 'Electrical',
     'description': 'Convert electrical units like A, V, VAR'},
    {'id': 'mechanics', 'name': 'Mechanics',
     'description': 'Convert mechanical units like N, torque, density', 'hidden': True},
    {'id': 'flow', 'name': 'Flow & Rate',
     'description': 'Convert flow rate units like m³/s, gpm, cfm'},
    {'id': 'light', 'name': 'Light & Optics',
     'description': 'Convert light units like lux, dpi, resolution', 'hidden': True},
]

# Calculator catalog, in page order
CALCULATORS = [
    {
        'slug': 'pump-affinity-calculator',
        'title': 'Pump Affinity Laws Calculator',
        'description': 'Calculate pump performance changes based on speed or diameter variations using affinity laws.',
        'features': ['Speed Changes', 'Diameter Changes', 'Flow, Head & Power'],
        'keywords': ['pump', 'affinity', 'speed', 'diameter', 'flow', 'head', 'power', 'performance'],
    },
    {
        'slug': 'pump-power-calculator',
        'title': 'Pump Power Calculator',
        'description': 'Calculate shaft power required for pumps based on flow rate, head, specific gravity, and efficiency.',
        'features': ['Shaft Power', 'Flow Rate', 'Differential Head'],
        'keywords': ['pump', 'power', 'shaft', 'flow', 'head', 'gravity', 'efficiency', 'hydraulic'],
    },
    {
        'slug': 'suction-specific-speed-calculator',
        'title': 'Suction Specific Speed Calculator',
        'description': 'Calculate suction specific speed (Nss) to evaluate pump cavitation performance and NPSH requirements.',
        'features': ['Suction Speed', 'NPSH Required', 'Cavitation Analysis'],
        'keywords': ['pump', 'suction', 'specific', 'speed', 'nss', 'npsh', 'cavitation', 'performance'],
    },
    {
        'slug': 'pump-specific-speed-calculator',
        'title': 'Pump Specific Speed Calculator',
        'description': 'Calculate pump specific speed (Ns) to determine pump type and optimal operating characteristics.',
        'features': ['Specific Speed', 'Pump Type', 'Performance'],
        'keywords': ['pump', 'specific', 'speed', 'ns', 'type', 'classification', 'performance', 'characteristics'],
    },
    {
        'slug': 'pump-efficiency-calculator',
        'title': 'Pump Efficiency Calculator',
        'description': 'Calculate pump efficiency based on flow rate, head, specific gravity, and shaft power input.',
        'features': ['Efficiency', 'Performance', 'Energy Analysis'],
        'keywords': ['pump', 'efficiency', 'performance', 'energy', 'shaft', 'power', 'hydraulic', 'analysis'],
    },
    {
        'slug': 'pump-differential-head',
        'title': 'Pump Differential Head Calculator',
        'description': 'Calculate pump differential head from discharge and suction pressure and specific gravity.',
        'features': ['Differential Head', 'Discharge Pressure', 'Suction Pressure'],
        'keywords': ['pump', 'differential', 'head', 'pressure', 'discharge', 'suction', 'gravity'],
    },
    {
        'slug': 'pump-differential-pressure',
        'title': 'Pump Differential Pressure Calculator',
        'description': 'Calculate pump differential pressure from differential head and specific gravity.',
        'features': ['Differential Pressure', 'Head', 'Specific Gravity'],
        'keywords': ['pump', 'differential', 'pressure', 'head', 'bar', 'gravity'],
    },
    {
        'slug': 'density-calculator',
        'title': 'Density Calculator',
        'description': 'Calculate fluid or material density from mass and volume.',
        'features': ['Mass', 'Volume', 'Density'],
        'keywords': ['density', 'mass', 'volume', 'fluid', 'material', 'rho'],
    },
    {
        'slug': 'kinematic-viscosity-calculator',
        'title': 'Kinematic Viscosity Calculator',
        'description': 'Calculate kinematic viscosity from dynamic viscosity and fluid density.',
        'features': ['Dynamic Viscosity', 'Density', 'Centistokes'],
        'keywords': ['viscosity', 'kinematic', 'dynamic', 'centistokes', 'cst', 'centipoise', 'fluid'],
    },
    {
        'slug': 'impeller-diameter-check-calculator',
        'title': 'Impeller Diameter Check Calculator',
        'description': 'Check a rated impeller diameter against the API 610 minimum and maximum diameter window.',
        'features': ['API 610', 'Rated Diameter', 'Margins'],
        'keywords': ['pump', 'impeller', 'diameter', 'api', '610', 'trim', 'check'],
    },
]
