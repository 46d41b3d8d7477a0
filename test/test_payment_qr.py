from unittest.mock import patch


EXPECTED = ('00020101021238570010A00000072701270006970415011300110019324180208'
            'QRIBFTTA530370454061200005802VN62170813ung ho lu lut6304C15C')


def test_payment_qr_without_token(client, bank_account_json):
    resp = client.post('/payment-qr/', json={'bank_account': bank_account_json})

    assert resp.status_code == 401
    assert 'error' in resp.json


def test_payment_qr_success(client, auth_header, bank_account_json):
    resp = client.post(
        '/payment-qr/',
        headers=auth_header,
        json={
            'bank_account': bank_account_json,
            'amount': 120000,
            'purpose': 'ủng hộ lũ lụt'
        }
    )

    assert resp.status_code == 200
    assert resp.json == {'qr_code_string': EXPECTED, 'mode': 'dynamic'}


def test_payment_qr_static(client, auth_header):
    resp = client.post(
        '/payment-qr/',
        headers=auth_header,
        json={'bank_account': {
            'accountNumber': '0099999999',
            'accountHolderName': 'Test Account',
            'bankName': 'TPBank'
        }}
    )

    assert resp.status_code == 200
    assert resp.json['mode'] == 'static'
    assert resp.json['qr_code_string'].endswith('6304CBB4')


def test_payment_qr_not_json(client, auth_header):
    resp = client.post('/payment-qr/', headers=auth_header, data='abc')

    assert resp.status_code == 400
    assert 'error' in resp.json


def test_payment_qr_missing_bank_account(client, auth_header):
    resp = client.post('/payment-qr/', headers=auth_header, json={'amount': 1})

    assert resp.status_code == 400
    assert 'bank_account' in resp.json['error']


def test_payment_qr_invalid_amount(client, auth_header, bank_account_json):
    for amount in (-1, '1000', 10.5, True):
        resp = client.post(
            '/payment-qr/',
            headers=auth_header,
            json={'bank_account': bank_account_json, 'amount': amount}
        )

        assert resp.status_code == 400
        assert resp.json == {'error': 'Invalid value for amount!'}


def test_payment_qr_missing_holder_name(client, auth_header, bank_account_json):
    bank_account_json['account_holder_name'] = ''

    resp = client.post('/payment-qr/', headers=auth_header,
                       json={'bank_account': bank_account_json})

    assert resp.status_code == 400
    assert resp.json['fields'] == ['account_holder_name']


def test_payment_qr_invalid_account_number(client, auth_header, bank_account_json):
    bank_account_json['account_number'] = '123'

    resp = client.post('/payment-qr/', headers=auth_header,
                       json={'bank_account': bank_account_json})

    assert resp.status_code == 400
    assert 'Account number must be 8-16 digits' in resp.json['error']


def test_payment_qr_unknown_bank(client, auth_header, bank_account_json):
    bank_account_json.update(bank_name='UnknownBank', bank_code='UNK')

    resp = client.post('/payment-qr/', headers=auth_header,
                       json={'bank_account': bank_account_json})

    assert resp.status_code == 422
    assert resp.json['bank_code'] == 'UNK'
    assert resp.json['bank_name'] == 'UnknownBank'


def test_payment_qr_unexpected_error(client, auth_header, bank_account_json):
    with patch('rentalpay.routes.payment_qr.generate_vietqr_string',
               side_effect=RuntimeError('boom')):
        resp = client.post('/payment-qr/', headers=auth_header,
                           json={'bank_account': bank_account_json})

    assert resp.status_code == 500
    assert 'error' in resp.json


def test_order_payment_qr_success(client, auth_header, bank_account_json):
    resp = client.post(
        '/payment-qr/orders',
        headers=auth_header,
        json={
            'bank_account': bank_account_json,
            'order': {
                'order_number': 'ORD-0042',
                'order_type': 'RENT',
                'status': 'RESERVED',
                'total_amount': 500000,
                'deposit_amount': 200000,
                'security_deposit': 100000,
                'collateral_type': 'CCCD'
            }
        }
    )

    assert resp.status_code == 200
    assert resp.json['amount'] == 400000
    assert resp.json['order_number'] == 'ORD-0042'
    assert resp.json['transfer_description'] == \
        'Thu tien con lai va the chan cho don ORD-0042'
    assert resp.json['bank_account']['account_number'] == '0011001932418'
    assert '5406400000' in resp.json['qr_code_string']


def test_order_payment_qr_missing_order(client, auth_header, bank_account_json):
    resp = client.post('/payment-qr/orders', headers=auth_header,
                       json={'bank_account': bank_account_json})

    assert resp.status_code == 400
    assert resp.json == {'error': 'Required field: order'}


def test_order_payment_qr_missing_order_number(client, auth_header, bank_account_json):
    resp = client.post('/payment-qr/orders', headers=auth_header,
                       json={'bank_account': bank_account_json,
                             'order': {'order_type': 'SALE', 'total_amount': 1}})

    assert resp.status_code == 400
    assert resp.json['fields'] == ['order_number']


def test_order_payment_qr_invalid_money(client, auth_header, bank_account_json):
    resp = client.post('/payment-qr/orders', headers=auth_header,
                       json={'bank_account': bank_account_json,
                             'order': {'order_number': 'ORD-1',
                                       'order_type': 'SALE',
                                       'total_amount': 'abc'}})

    assert resp.status_code == 400
    assert resp.json == {'error': 'Invalid monetary value in order!'}


def test_health(client):
    resp = client.get('/health')

    assert resp.status_code == 200
    assert resp.json == {'status': 'ok'}


def test_route_not_found(client):
    resp = client.get('/nope')

    assert resp.status_code == 404
    assert resp.json == {'error': 'Route not found!'}


def test_method_not_allowed(client, auth_header):
    resp = client.get('/payment-qr/', headers=auth_header)

    assert resp.status_code == 405


def test_payment_qr_mode_follows_amount_and_purpose(client, auth_header, bank_account_json):
    cases = [
        ({'amount': 5000}, 'dynamic'),
        ({'purpose': 'thanh toán'}, 'dynamic'),
        ({'amount': 0, 'purpose': ''}, 'static'),
        ({'purpose': '✓'}, 'static'),
    ]

    for extra, mode in cases:
        resp = client.post('/payment-qr/', headers=auth_header,
                           json=dict(extra, bank_account=bank_account_json))

        assert resp.status_code == 200
        assert resp.json['mode'] == mode
        assert resp.json['qr_code_string'][10:12] == \
            ('12' if mode == 'dynamic' else '11')


def test_payment_qr_body_too_large(auth_header, bank_account_json):
    from rentalpay import create_app

    app = create_app({
        'TESTING': True,
        'RATELIMIT_ENABLED': False,
        'MAX_CONTENT_LENGTH': 64
    })

    with app.test_client() as client:
        resp = client.post('/payment-qr/', headers=auth_header,
                           json={'bank_account': bank_account_json,
                                 'purpose': 'x' * 500})

    assert resp.status_code == 413
    assert 'error' in resp.json
