"""
VietQR (NAPAS) payload generator.

Builds the EMV Merchant Presented Mode string for an interbank transfer to a
bank account. The string is meant to be handed to a QR renderer as-is.
"""
from dataclasses import dataclass
from typing import Optional
from rentalpay.banks import resolve_bin
from rentalpay.crc import crc16
from rentalpay.exceptions import MissingRequiredField, InvalidAccountNumberFormat
from rentalpay.text import normalize_purpose
from rentalpay.tlv import tlv, group
import logging
import re


logger = logging.getLogger(__name__)


PAYLOAD_FORMAT_INDICATOR = '01'
STATIC_QR = '11'
DYNAMIC_QR = '12'
NAPAS_GUID = 'A000000727'
SERVICE_TO_ACCOUNT = 'QRIBFTTA'
CURRENCY_VND = '704'
COUNTRY_VN = 'VN'
CRC_HEADER = '6304'

ACCOUNT_NUMBER = re.compile(InvalidAccountNumberFormat.pattern)


@dataclass(frozen=True)
class BankAccountInfo:
    account_number: str
    account_holder_name: str
    bank_name: str
    bank_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        def pick(snake, camel, default=''):
            value = data.get(snake, data.get(camel, default))
            return default if value is None else value

        bank_code = pick('bank_code', 'bankCode', None)

        return cls(
            account_number=str(pick('account_number', 'accountNumber')),
            account_holder_name=str(pick('account_holder_name', 'accountHolderName')),
            bank_name=str(pick('bank_name', 'bankName')),
            bank_code=None if bank_code is None else str(bank_code)
        )

    def to_dict(self):
        return {
            'account_holder_name': self.account_holder_name,
            'account_number': self.account_number,
            'bank_name': self.bank_name,
            'bank_code': self.bank_code
        }


def validate_account(info: BankAccountInfo):
    missing = [field for field in ('account_number', 'account_holder_name')
               if not (getattr(info, field) or '').strip()]

    if missing:
        raise MissingRequiredField(
            missing,
            'Account number and account holder name are required')

    if not ACCOUNT_NUMBER.fullmatch(info.account_number):
        raise InvalidAccountNumberFormat(info.account_number)


def point_of_initiation(amount, purpose: str) -> str:
    if (amount is not None and amount > 0) or purpose:
        return DYNAMIC_QR
    return STATIC_QR


def generate_vietqr_string(
        info: BankAccountInfo,
        amount: Optional[int] = None,
        purpose: Optional[str] = None
) -> str:
    '''
    Returns the complete VietQR payload, CRC included.
    Amount is in VND and only emitted when greater than zero; purpose is
    transliterated to ASCII and cut to 25 characters.
    '''
    validate_account(info)

    bank_bin = resolve_bin(info.bank_code, info.bank_name)

    # whole VND only; a fractional amount below 1 counts as absent
    amount = None if amount is None else int(amount)
    purpose = normalize_purpose(purpose)
    has_amount = amount is not None and amount > 0
    method = point_of_initiation(amount, purpose)

    fields = [
        tlv('00', PAYLOAD_FORMAT_INDICATOR),
        tlv('01', method),
        group('38', [
            tlv('00', NAPAS_GUID),
            group('01', [
                tlv('00', bank_bin),
                tlv('01', info.account_number)
            ]),
            tlv('02', SERVICE_TO_ACCOUNT)
        ]),
        tlv('53', CURRENCY_VND)
    ]

    if has_amount:
        fields.append(tlv('54', str(amount)))

    fields.append(tlv('58', COUNTRY_VN))

    if purpose:
        fields.append(group('62', [tlv('08', purpose)]))

    payload = ''.join(fields) + CRC_HEADER
    logger.debug(f'VietQR payload built for BIN {bank_bin}, method={method}')

    return payload + crc16(payload)
