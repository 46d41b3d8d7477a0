from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple
from rentalpay.exceptions import BankBinNotFound


@dataclass(frozen=True)
class Bank:
    code: str
    bin: str
    names: Tuple[str, ...]


# NAPAS BINs of the banks and wallets taking part in VietQR
BANKS = (
    Bank('ICB', '970415', ('VietinBank', 'Vietnam Joint Stock Commercial Bank for Industry and Trade')),
    Bank('VCB', '970436', ('Vietcombank', 'Bank for Foreign Trade of Vietnam')),
    Bank('BIDV', '970418', ('BIDV', 'Bank for Investment and Development of Vietnam')),
    Bank('VBA', '970405', ('Agribank', 'Vietnam Bank for Agriculture and Rural Development')),
    Bank('OCB', '970448', ('OCB', 'Orient Commercial Joint Stock Bank')),
    Bank('MB', '970422', ('MBBank', 'MB Bank', 'Military Commercial Joint Stock Bank')),
    Bank('TCB', '970407', ('Techcombank', 'Vietnam Technological and Commercial Joint Stock Bank')),
    Bank('ACB', '970416', ('ACB', 'Asia Commercial Bank')),
    Bank('VPB', '970432', ('VPBank', 'Vietnam Prosperity Joint Stock Commercial Bank')),
    Bank('TPB', '970423', ('TPBank', 'Tien Phong Commercial Joint Stock Bank')),
    Bank('STB', '970403', ('Sacombank', 'Saigon Thuong Tin Commercial Joint Stock Bank')),
    Bank('HDB', '970437', ('HDBank', 'Ho Chi Minh City Development Joint Stock Commercial Bank')),
    Bank('VCCB', '970454', ('BVBank', 'VietCapitalBank', 'Viet Capital Bank')),
    Bank('SCB', '970429', ('SCB', 'Saigon Commercial Bank')),
    Bank('VIB', '970441', ('VIB', 'Vietnam International Commercial Joint Stock Bank')),
    Bank('SHB', '970443', ('SHB', 'Saigon-Hanoi Commercial Joint Stock Bank')),
    Bank('EIB', '970431', ('Eximbank', 'Vietnam Export Import Commercial Joint Stock Bank')),
    Bank('MSB', '970426', ('MSB', 'Maritime Bank', 'Vietnam Maritime Commercial Joint Stock Bank')),
    Bank('CAKE', '546034', ('CAKE', 'CAKE by VPBank')),
    Bank('UBANK', '546035', ('Ubank', 'Ubank by VPBank')),
    Bank('TIMO', '963388', ('Timo', 'Timo by Ban Viet Bank')),
    Bank('VTLMONEY', '971005', ('ViettelMoney', 'Viettel Money')),
    Bank('VNPTMONEY', '971011', ('VNPTMoney', 'VNPT Money')),
    Bank('SGICB', '970400', ('SaigonBank', 'Saigon Bank for Industry and Trade')),
    Bank('BAB', '970409', ('BacABank', 'Bac A Commercial Joint Stock Bank')),
    Bank('PVCB', '970412', ('PVcomBank', 'Vietnam Public Joint Stock Commercial Bank')),
    Bank('MBV', '970414', ('MBV', 'OceanBank', 'Vietnam Modern Bank')),
    Bank('NCB', '970419', ('NCB', 'National Citizen Bank')),
    Bank('SHBVN', '970424', ('ShinhanBank', 'Shinhan Bank', 'Shinhan Bank Vietnam')),
    Bank('ABB', '970425', ('ABBANK', 'An Binh Commercial Joint Stock Bank')),
    Bank('VAB', '970427', ('VietABank', 'Viet A Commercial Joint Stock Bank')),
    Bank('NAB', '970428', ('NamABank', 'Nam A Commercial Joint Stock Bank')),
    Bank('PGB', '970430', ('PGBank', 'Petrolimex Group Commercial Joint Stock Bank')),
    Bank('VIETBANK', '970433', ('VietBank', 'VietnamBank', 'Vietnam Thuong Tin Commercial Joint Stock Bank')),
    Bank('BVB', '970438', ('BaoVietBank', 'Bao Viet Joint Stock Commercial Bank')),
    Bank('SEAB', '970440', ('SeABank', 'Southeast Asia Commercial Joint Stock Bank')),
    Bank('COOPBANK', '970446', ('COOPBANK', 'Co-op Bank', 'Co-operative Bank of Vietnam')),
    Bank('LPB', '970449', ('LPBank', 'LienVietPostBank', 'Loc Phat Vietnam Joint Stock Commercial Bank')),
    Bank('KLB', '970452', ('KienLongBank', 'Kien Long Commercial Joint Stock Bank')),
    Bank('GPB', '970408', ('GPBank', 'Global Petro Sole Member Limited Commercial Bank')),
    Bank('DOB', '970406', ('DongABank', 'DongA Joint Stock Commercial Bank')),
    Bank('CBB', '970444', ('CBBank', 'Vietnam Construction Joint Stock Commercial Bank')),
    Bank('VRB', '970421', ('VRB', 'Vietnam-Russia Joint Venture Bank')),
    Bank('IVB', '970434', ('IndovinaBank', 'Indovina Bank')),
    Bank('HLBVN', '970442', ('HongLeong', 'Hong Leong Bank Vietnam')),
    Bank('PBVN', '970439', ('PublicBank', 'Public Bank Vietnam')),
    Bank('WVN', '970457', ('Woori', 'Woori Bank Vietnam')),
    Bank('UOB', '970458', ('UnitedOverseas', 'United Overseas Bank Vietnam')),
    Bank('SCVN', '970410', ('StandardChartered', 'Standard Chartered Bank Vietnam')),
    Bank('KEBHANAHCM', '970466', ('KEBHanaHCM', 'KEB Hana Bank Ho Chi Minh Branch')),
    Bank('KEBHANAHN', '970467', ('KEBHanaHN', 'KEB Hana Bank Hanoi Branch')),
    Bank('HSBC', '458761', ('HSBC', 'HSBC Bank Vietnam')),
    Bank('CIMB', '422589', ('CIMB', 'CIMB Bank Vietnam')),
    Bank('KBANK', '668888', ('KBank', 'Kasikornbank')),
)


def _key(value: str) -> str:
    return value.strip().casefold()


def _build_index():
    index = {}
    for bank in BANKS:
        for key in (bank.code,) + bank.names:
            index.setdefault(_key(key), bank)
    return MappingProxyType(index)


BANKS_BY_KEY = _build_index()


def find_bank(code_or_name) -> Optional[Bank]:
    if not code_or_name or not code_or_name.strip():
        return None
    return BANKS_BY_KEY.get(_key(code_or_name))


def resolve_bin(bank_code=None, bank_name=None) -> str:
    '''
    Bank code wins over bank name; both are matched case-insensitively.
    '''
    for candidate in (bank_code, bank_name):
        bank = find_bank(candidate)
        if bank is not None:
            return bank.bin

    raise BankBinNotFound(bank_code, bank_name)
