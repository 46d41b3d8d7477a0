from flask import request
from rentalpay.log import configure_logging
from werkzeug.exceptions import BadRequest
import logging


configure_logging()
logger = logging.getLogger(__name__)


def validate_json():
    try:
        if not request.is_json:
            logger.warning('Request must be Content-Type: application/json.')
            return {'error': 'Request must be Content-Type: application/json!'}, 400

        data = request.get_json()
        if not data or not isinstance(data, dict):
            logger.warning('Missing or invalid data in request body.')
            return {'error': 'Missing or invalid data in request body!'}, 400

        return data, 200
    except BadRequest:
        logger.warning('Malformed JSON in request body.')
        return {'error': 'Malformed JSON. Invalid data!'}, 400


def validate_fields(data, rules):
    '''
    Checks every present field against its rule. Returns the first failing
    field name, or None when all pass.
    '''
    for field, rule in rules.items():
        if field in data and data[field] is not None and not rule(data[field]):
            logger.warning(f'Invalid value for {field}: {data.get(field)!r}')
            return field
    return None
