class VietQRError(ValueError):
    """Base class for every failure of a payload encode call."""


class MissingRequiredField(VietQRError):
    def __init__(self, fields, message=None):
        self.fields = tuple(fields)
        super().__init__(
            message or f"Required field missing: {', '.join(self.fields)}")


class InvalidAccountNumberFormat(VietQRError):
    pattern = r'^[0-9]{8,16}$'

    def __init__(self, account_number):
        self.account_number = account_number
        super().__init__(
            'Account number must be 8-16 digits '
            f'(got {len(account_number)} characters)')


class BankBinNotFound(VietQRError):
    def __init__(self, bank_code=None, bank_name=None):
        self.bank_code = bank_code
        self.bank_name = bank_name
        super().__init__(
            f'Bank BIN code not found for bank code={bank_code!r}, '
            f'name={bank_name!r}')


class FieldTooLong(VietQRError):
    max_length = 99

    def __init__(self, tag, length):
        self.tag = tag
        self.length = length
        super().__init__(
            f'Value of tag {tag} has {length} characters, '
            f'maximum is {self.max_length}')
