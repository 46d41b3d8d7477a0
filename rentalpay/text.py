import unicodedata


PURPOSE_MAX_LENGTH = 25

# Letters that NFD does not split into base letter + mark
SUBSTITUTIONS = {
    'đ': 'd',
    'Đ': 'D',
}


def to_ascii(text: str) -> str:
    '''
    Transliterates Vietnamese (and other Latin) text to plain ASCII.
    Diacritics are removed; anything left outside ASCII is dropped.
    '''
    decomposed = unicodedata.normalize('NFD', text)

    chars = []
    for c in decomposed:
        if unicodedata.combining(c):
            continue
        c = SUBSTITUTIONS.get(c, c)
        if c.isascii():
            chars.append(c)

    return ''.join(chars)


def normalize_purpose(text) -> str:
    if not text:
        return ''
    return to_ascii(text)[:PURPOSE_MAX_LENGTH]
