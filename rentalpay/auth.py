from datetime import datetime, timedelta, timezone
from rentalpay.config import SECRET_KEY, JWT_ALGORITHM, ACCESS_EXPIRES_MIN
from rentalpay.log import configure_logging
from flask import jsonify, request, g
from functools import wraps
import jwt
import logging


configure_logging()
logger = logging.getLogger(__name__)


vn = timezone(timedelta(hours=7))


def generate_access_token(user_id) -> str:
    now = datetime.now(vn)
    payload = {
        'sub': str(user_id),
        'type': 'access',
        'iat': int(now.timestamp()),
        'exp': int((now + timedelta(minutes=ACCESS_EXPIRES_MIN)).timestamp())
    }

    return jwt.encode(payload, SECRET_KEY, algorithm=JWT_ALGORITHM)


def validate_token(token: str, token_type: str = 'access'):
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])

        if payload.get('type') != token_type:
            logger.warning('Invalid token type.')
            return {'error': 'Invalid token type!'}, 401

        return payload, 200

    except jwt.ExpiredSignatureError:
        logger.warning('Token expired.')
        return {'error': 'Token expired!'}, 401

    except jwt.InvalidSignatureError:
        logger.warning('Invalid token signature.')
        return {'error': 'Invalid token signature!'}, 401

    except jwt.DecodeError:
        logger.warning('Malformed token.')
        return {'error': 'Malformed token!'}, 401

    except jwt.InvalidTokenError:
        logger.warning('Invalid token.')
        return {'error': 'Invalid token!'}, 401


def protected_route(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        auth = request.headers.get('Authorization')

        if not auth:
            logger.warning('Token not sent.')
            return jsonify({'error': 'Token not sent!'}), 401

        parts = auth.split()

        if len(parts) != 2 or parts[0].lower() != 'bearer':
            logger.warning('Malformed Authorization header. Use Bearer <token>')
            return jsonify({'error': 'Malformed Authorization header! Use Bearer <token>'}), 401

        payload, status = validate_token(parts[1], token_type='access')

        if status != 200:
            return jsonify(payload), status

        g.user_id = payload.get('sub')
        return func(*args, **kwargs)
    return wrapper
