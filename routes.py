"""
Converter Routes Blueprint.

JSON API over the conversion engine, the cross-search index and the pump
calculators, plus the converter sitemap:
- Health
- Converter / calculator unit metadata
- Conversion
- Cross-search
- Calculators
- Sitemap
"""

from flask import Blueprint, Response, current_app, jsonify, render_template_string, request

import pump_calculators
from config import Config
from converter_urls import generate_converter_urls
from constants import CONVERTER_GROUPS
from logging_config import logger
from search_service import search
from unit_converter import ConversionError, UnknownCategory
from unit_tables import CALCULATOR_REGISTRY, CONVERTER_REGISTRY, get_converters_in_group

converter_bp = Blueprint('converter_bp', __name__)

REGISTRIES = {
    'converter': CONVERTER_REGISTRY,
    'calculator': CALCULATOR_REGISTRY,
}

CALCULATOR_ENDPOINTS = {
    'pump-power': pump_calculators.calculate_pump_power,
    'pump-efficiency': pump_calculators.calculate_pump_efficiency,
    'specific-speed': pump_calculators.calculate_specific_speed,
    'suction-specific-speed': pump_calculators.calculate_suction_specific_speed,
    'affinity-flow': pump_calculators.calculate_affinity_flow,
    'affinity-head': pump_calculators.calculate_affinity_head,
    'affinity-power': pump_calculators.calculate_affinity_power,
    'differential-head': pump_calculators.calculate_differential_head,
    'differential-pressure': pump_calculators.calculate_differential_pressure,
    'density': pump_calculators.calculate_density,
    'kinematic-viscosity': pump_calculators.calculate_kinematic_viscosity,
    'impeller-diameter-check': pump_calculators.check_impeller_diameter,
}

SITEMAP_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{%- for url in urls %}
  <url><loc>{{ url }}</loc></url>
{%- endfor %}
</urlset>
"""


# ====================================================================
# Helper
# ====================================================================

def _error(e, status=400):
    return jsonify({'error': str(e), 'code': getattr(e, 'code', 'invalid_request')}), status


def _server_error():
    return jsonify({'error': 'Internal server error', 'code': 'server_error'}), 500


def _conversion_error(e):
    """Map engine errors to a client response: 404 for categories, 400 otherwise."""
    status = 404 if isinstance(e, UnknownCategory) else 400
    logger.info(f"Rejected request: {e}")
    return _error(e, status)


def _units_payload(registry, category_id):
    category = registry.get_category(category_id)
    return {
        'category': category.id,
        'name': category.name,
        'canonical_label': category.canonical_label,
        'units': [
            {'symbol': u.symbol, 'label': u.label} for u in category.units
        ],
    }


# ====================================================================
# Health
# ====================================================================

@converter_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})


# ====================================================================
# Unit metadata
# ====================================================================

@converter_bp.route('/api/converters', methods=['GET'])
def list_converters():
    groups = []
    for group in CONVERTER_GROUPS:
        groups.append({
            'id': group['id'],
            'name': group['name'],
            'description': group['description'],
            'hidden': bool(group.get('hidden')),
            'converters': [
                {'id': c.id, 'name': c.name, 'canonical_label': c.canonical_label}
                for c in get_converters_in_group(group['id'])
            ],
        })
    return jsonify({'groups': groups})


@converter_bp.route('/api/converters/<category_id>/units', methods=['GET'])
def converter_units(category_id):
    try:
        return jsonify(_units_payload(CONVERTER_REGISTRY, category_id))
    except ConversionError as e:
        return _conversion_error(e)


@converter_bp.route('/api/calculator-units/<unit_type>', methods=['GET'])
def calculator_units(unit_type):
    try:
        return jsonify(_units_payload(CALCULATOR_REGISTRY, unit_type))
    except ConversionError as e:
        return _conversion_error(e)


# ====================================================================
# Conversion
# ====================================================================

@converter_bp.route('/api/convert', methods=['POST'])
def convert():
    data = request.get_json(silent=True) or {}
    registry_name = data.get('registry', 'converter')
    registry = REGISTRIES.get(registry_name)
    if registry is None:
        return jsonify({
            'error': f"registry must be one of {', '.join(REGISTRIES)}",
            'code': 'invalid_request',
        }), 400
    try:
        result = registry.describe_conversion(
            data.get('value'),
            data.get('from_unit'),
            data.get('to_unit'),
            data.get('category'),
            decimals=current_app.config.get('RESULT_DECIMALS', Config.RESULT_DECIMALS),
        )
        return jsonify(result)
    except ConversionError as e:
        return _conversion_error(e)
    except Exception as e:
        logger.error(f"Error converting units: {e}")
        return _server_error()


# ====================================================================
# Cross-search
# ====================================================================

@converter_bp.route('/api/search', methods=['GET'])
def cross_search():
    query = request.args.get('q', '')
    kind = request.args.get('kind', Config.SEARCH_DEFAULT_KIND)
    try:
        return jsonify(search(query, kind).to_dict())
    except ValueError as e:
        return _error(e)


# ====================================================================
# Calculators
# ====================================================================

@converter_bp.route('/api/calculators/<name>', methods=['POST'])
def run_calculator(name):
    calculator = CALCULATOR_ENDPOINTS.get(name)
    if calculator is None:
        return jsonify({'error': f"Unknown calculator '{name}'", 'code': 'not_found'}), 404

    data = request.get_json(silent=True) or {}
    try:
        return jsonify(calculator(**data))
    except TypeError as e:
        # Missing or unexpected parameters
        return _error(e)
    except ConversionError as e:
        return _conversion_error(e)
    except Exception as e:
        logger.error(f"Error running calculator {name}: {e}")
        return _server_error()


# ====================================================================
# Sitemap
# ====================================================================

@converter_bp.route('/sitemap.xml', methods=['GET'])
def sitemap():
    base_url = current_app.config.get('SITE_BASE_URL', Config.SITE_BASE_URL)
    xml = render_template_string(SITEMAP_TEMPLATE, urls=generate_converter_urls(base_url))
    return Response(xml, mimetype='application/xml')
