import crcmod


# CRC-16/CCITT-FALSE: poly 0x1021, init 0xFFFF, MSB first, no xorout
_crc16 = crcmod.mkCrcFun(0x11021, initCrc=0xFFFF, rev=False, xorOut=0x0000)


def crc16(payload: str) -> str:
    crc = _crc16(payload.encode('ascii'))
    return f'{crc:04X}'
