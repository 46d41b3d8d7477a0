import pytest
from rentalpay import create_app
from rentalpay.auth import generate_access_token
from rentalpay.vietqr import BankAccountInfo


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'RATELIMIT_ENABLED': False
    })
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def auth_header():
    return {'Authorization': f'Bearer {generate_access_token(1)}'}


@pytest.fixture
def vietinbank_account():
    return BankAccountInfo(
        account_number='0011001932418',
        account_holder_name='Test Account',
        bank_name='Vietinbank',
        bank_code='ICB'
    )


@pytest.fixture
def tpbank_account():
    return BankAccountInfo(
        account_number='0099999999',
        account_holder_name='Test Account',
        bank_name='TPBank',
        bank_code='TPB'
    )


@pytest.fixture
def bank_account_json():
    return {
        'account_number': '0011001932418',
        'account_holder_name': 'Test Account',
        'bank_name': 'Vietinbank',
        'bank_code': 'ICB'
    }
