from rentalpay.exceptions import FieldTooLong
import re


_TAG = re.compile(r'[0-9]{2}')


def tlv(tag: str, value: str) -> str:
    '''
    Serializes one EMV field: tag (2 digits) + length (2 digits) + value
    '''
    if not _TAG.fullmatch(tag):
        raise ValueError(f'TLV tag must be exactly 2 digits, got {tag!r}')

    if len(value) > FieldTooLong.max_length:
        raise FieldTooLong(tag, len(value))

    return f'{tag}{len(value):02d}{value}'


def group(tag: str, children) -> str:
    return tlv(tag, ''.join(children))
