from flask import Blueprint, jsonify
from rentalpay.auth import protected_route
from rentalpay.config import RATE_LIMIT
from rentalpay.error import handle_vietqr_error
from rentalpay.exceptions import VietQRError
from rentalpay.log import configure_logging
from rentalpay.orders import build_order_payment
from rentalpay.rate_limit import limiter
from rentalpay.validation import validate_json, validate_fields
from rentalpay.text import normalize_purpose
from rentalpay.vietqr import (BankAccountInfo, DYNAMIC_QR,
                              generate_vietqr_string, point_of_initiation)
from werkzeug.exceptions import HTTPException
from decimal import InvalidOperation
import logging


configure_logging()
logger = logging.getLogger(__name__)


payment_qr_bp = Blueprint('payment-qr', __name__)


RULES = {
    'amount': lambda v: isinstance(v, int) and not isinstance(v, bool) and v >= 0,
    'purpose': lambda v: isinstance(v, str),
    'bank_account': lambda v: isinstance(v, dict),
    'order': lambda v: isinstance(v, dict)
}


def _read_body(required):
    data, status = validate_json()
    if status != 200:
        return None, (jsonify(data), status)

    missing = [c for c in required if c not in data or data[c] is None]
    if missing:
        logger.warning(f"Required field: {', '.join(missing)}")
        return None, (jsonify({'error': f"Required field: {', '.join(missing)}"}), 400)

    invalid = validate_fields(data, RULES)
    if invalid:
        return None, (jsonify({'error': f'Invalid value for {invalid}!'}), 400)

    return data, None


@payment_qr_bp.route('/', methods=['POST'])
@limiter.limit(RATE_LIMIT)
@protected_route
def generate_payment_qr():
    try:
        logger.info('Generating VietQR payload...')

        data, failure = _read_body(['bank_account'])
        if failure:
            return failure

        info = BankAccountInfo.from_dict(data['bank_account'])
        qr_code_string = generate_vietqr_string(
            info, data.get('amount'), data.get('purpose'))

        method = point_of_initiation(
            data.get('amount'), normalize_purpose(data.get('purpose')))
        mode = 'dynamic' if method == DYNAMIC_QR else 'static'
        logger.info(f'VietQR payload generated ({mode}).')
        return jsonify({'qr_code_string': qr_code_string, 'mode': mode}), 200

    except VietQRError as error:
        return handle_vietqr_error(error)

    except HTTPException:
        raise

    except Exception as error:
        logger.error(f'Unexpected error while generating VietQR: {str(error)}')
        return jsonify({'error': 'Unexpected error while generating QR code!'}), 500


@payment_qr_bp.route('/orders', methods=['POST'])
@limiter.limit(RATE_LIMIT)
@protected_route
def generate_order_payment_qr():
    try:
        logger.info('Generating VietQR payload for order...')

        data, failure = _read_body(['order', 'bank_account'])
        if failure:
            return failure

        info = BankAccountInfo.from_dict(data['bank_account'])
        payment = build_order_payment(data['order'], info)

        logger.info(
            f'VietQR payload generated for order {payment.order_number}, '
            f'amount={payment.amount}.')
        return jsonify(payment.to_dict()), 200

    except VietQRError as error:
        return handle_vietqr_error(error)

    except HTTPException:
        raise

    except (InvalidOperation, TypeError, ValueError) as error:
        logger.warning(f'Invalid monetary value in order: {str(error)}')
        return jsonify({'error': 'Invalid monetary value in order!'}), 400

    except Exception as error:
        logger.error(
            f'Unexpected error while generating order VietQR: {str(error)}')
        return jsonify({'error': 'Unexpected error while generating QR code!'}), 500
