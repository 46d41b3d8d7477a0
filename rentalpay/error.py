from flask import jsonify, request
from flask_limiter.errors import RateLimitExceeded
from werkzeug.exceptions import HTTPException
from rentalpay.exceptions import (VietQRError,
                                  MissingRequiredField,
                                  InvalidAccountNumberFormat,
                                  BankBinNotFound,
                                  FieldTooLong)
from rentalpay.log import configure_logging
import logging


configure_logging()
logger = logging.getLogger(__name__)


def handle_vietqr_error(error: VietQRError):
    if isinstance(error, MissingRequiredField):
        logger.warning(f'Missing required field: {error.fields}')
        return jsonify({'error': str(error), 'fields': list(error.fields)}), 400

    if isinstance(error, InvalidAccountNumberFormat):
        logger.warning(f'Invalid account number format: {str(error)}')
        return jsonify({'error': str(error), 'pattern': error.pattern}), 400

    if isinstance(error, BankBinNotFound):
        logger.warning(f'Bank BIN not found: {str(error)}')
        return jsonify({'error': str(error),
                        'bank_code': error.bank_code,
                        'bank_name': error.bank_name}), 422

    if isinstance(error, FieldTooLong):
        logger.error(f'QR field too long: {str(error)}')
        return jsonify({'error': str(error), 'tag': error.tag}), 422

    logger.error(f'Unexpected VietQR error: {str(error)}')
    return jsonify({'error': 'Could not generate QR code!'}), 422


def register_error_handlers(app):
    @app.errorhandler(404)
    def route_not_found(error):
        logger.warning(f'Route not found: {str(error)}')
        return jsonify({'error': 'Route not found!'}), 404

    @app.errorhandler(401)
    def route_unauthorized(error):
        logger.warning(f'Unauthorized route: {str(error)}')
        return jsonify({'error': 'Unauthorized!'}), 401

    @app.errorhandler(RateLimitExceeded)
    def rate_limit_handler(e):
        logger.warning(
            f"RATE LIMIT exceeded | IP={request.remote_addr} | route={request.path}"
        )
        return jsonify({
            'error': 'Too many requests. Try again later.'
        }), 429

    @app.errorhandler(400)
    def invalid_data(error):
        logger.warning(f'Invalid data on route: {str(error)}')
        return jsonify({'error': 'Invalid data on route!'}), 400

    @app.errorhandler(405)
    def wrong_method(error):
        logger.warning(f'HTTP method not allowed on this route: {str(error)}')
        return jsonify({'error': 'HTTP method not allowed on this route!'}), 405

    @app.errorhandler(422)
    def unprocessable(error):
        logger.warning(f'Well-formed data, wrong logic: {str(error)}')
        return jsonify({'error': 'Well-formed data, wrong logic!'}), 422

    @app.errorhandler(VietQRError)
    def vietqr_error(error):
        return handle_vietqr_error(error)

    @app.errorhandler(Exception)
    def internal_error(error):
        if isinstance(error, HTTPException):
            logger.warning(f'HTTP error on route: {str(error)}')
            return jsonify({'error': error.description}), error.code

        logger.error(f'Unexpected error on route: {str(error)}')
        return jsonify({'error': 'Unexpected error on route!'}), 500
