from flask import Flask, jsonify

from config import Config
from logging_config import logger, register_request_logging
from routes import converter_bp

app = Flask(__name__)
app.secret_key = Config.FLASK_SECRET_KEY
app.config['SITE_BASE_URL'] = Config.SITE_BASE_URL
app.config['RESULT_DECIMALS'] = Config.RESULT_DECIMALS
app.json.sort_keys = False

app.register_blueprint(converter_bp)
register_request_logging(app)


@app.errorhandler(404)
def not_found(e):
    return jsonify({'error': 'Not found', 'code': 'not_found'}), 404


@app.errorhandler(500)
def server_error(e):
    logger.error(f"Unhandled server error: {e}")
    return jsonify({'error': 'Internal server error', 'code': 'server_error'}), 500


logger.info(f"Registered converter routes ({len(list(app.url_map.iter_rules()))} rules)")

if __name__ == '__main__':
    app.run(debug=Config.DEBUG, port=Config.PORT)
