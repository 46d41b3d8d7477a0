from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from rentalpay.exceptions import MissingRequiredField
from rentalpay.vietqr import BankAccountInfo, generate_vietqr_string


ORDER_TYPE_RENT = 'RENT'
ORDER_TYPE_SALE = 'SALE'

STATUS_RESERVED = 'RESERVED'
STATUS_PICKUPED = 'PICKUPED'


@dataclass(frozen=True)
class OrderPayment:
    qr_code_string: str
    amount: int
    order_number: str
    transfer_description: str
    bank_account: BankAccountInfo

    def to_dict(self):
        return {
            'qr_code_string': self.qr_code_string,
            'amount': self.amount,
            'order_number': self.order_number,
            'transfer_description': self.transfer_description,
            'bank_account': self.bank_account.to_dict()
        }


def _money(order, field) -> Decimal:
    value = order.get(field)
    if value is None:
        return Decimal('0')
    return Decimal(str(value))


def _kind(order):
    order_type = str(order.get('order_type') or '').strip().upper()
    status = str(order.get('status') or '').strip().upper()
    return order_type, status


def amount_to_collect(order) -> int:
    '''
    SALE: the whole total. RENT reserved: what is left after the deposit
    plus the security deposit. RENT picked up: damage and late fees.
    Any other state collects nothing.
    '''
    order_type, status = _kind(order)

    if order_type == ORDER_TYPE_SALE:
        amount = _money(order, 'total_amount')
    elif order_type == ORDER_TYPE_RENT and status == STATUS_RESERVED:
        remaining = _money(order, 'total_amount') - _money(order, 'deposit_amount')
        amount = remaining + _money(order, 'security_deposit')
    elif order_type == ORDER_TYPE_RENT and status == STATUS_PICKUPED:
        amount = _money(order, 'damage_fee') + _money(order, 'late_fee')
    else:
        amount = Decimal('0')

    amount = int(amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    return max(amount, 0)


def transfer_description(order, amount: int) -> str:
    order_type, status = _kind(order)
    number = order['order_number']

    if order_type == ORDER_TYPE_RENT and status == STATUS_RESERVED:
        deposit = _money(order, 'deposit_amount')
        if deposit > 0 and abs(Decimal(amount) - deposit) < Decimal('0.01'):
            return f'Thu coc cho don {number}'

        if str(order.get('collateral_type') or '').strip():
            return f'Thu tien con lai va the chan cho don {number}'
        return f'Thu tien con lai cho don {number}'

    return f'Thanh toan don hang {number}'


def build_order_payment(order, info: BankAccountInfo) -> OrderPayment:
    order_number = str(order.get('order_number') or '').strip()
    if not order_number:
        raise MissingRequiredField(['order_number'])

    order = dict(order, order_number=order_number)
    amount = amount_to_collect(order)
    description = transfer_description(order, amount)

    qr_code_string = generate_vietqr_string(
        info,
        amount if amount > 0 else None,
        description
    )

    return OrderPayment(
        qr_code_string=qr_code_string,
        amount=amount,
        order_number=order_number,
        transfer_description=description,
        bank_account=info
    )
