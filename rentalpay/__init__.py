from flask import Flask, jsonify
from rentalpay import config
from rentalpay.routes.payment_qr import payment_qr_bp
from rentalpay.error import register_error_handlers
from rentalpay.rate_limit import limiter


def create_app(test_config=None):
    app = Flask('rentalpay')

    app.config.from_mapping(
        SECRET_KEY=config.SECRET_KEY,
        RATELIMIT_STORAGE_URI=config.RATELIMIT_STORAGE_URI,
        RATELIMIT_DEFAULT=config.RATE_LIMIT
    )

    if test_config:
        app.config.update(test_config)

    limiter.init_app(app)

    app.register_blueprint(payment_qr_bp, url_prefix='/payment-qr')

    @app.route('/health', methods=['GET'])
    @limiter.exempt
    def health():
        return jsonify({'status': 'ok'}), 200

    register_error_handlers(app)

    return app
