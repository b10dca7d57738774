import error_correction.bch as bch
import qrcode_v1.constants as constants


def compute_format_bits(ecc_level_bits, mask):
    '''
    오류 정정 레벨과 마스크 번호로 15비트 포맷 정보를 계산하는 함수
    :param ecc_level_bits: 오류 정정 레벨 비트 ('01' = L)
    :param mask: 마스크 번호 0~7
    :return: 15비트 문자열
    '''
    # ecc level 비트 + 마스크 비트 = 포맷 비트
    format_bit = ecc_level_bits + format(mask, '03b')
    # 포맷 비트에 에러 정정 비트 추가
    format_bit += bch.bch_encode(int(format_bit, 2), 15, 5, bch.FORMAT_GENERATOR)
    # 포맷 비트에 XOR 연산으로 마스크 적용
    return ''.join(str(int(b) ^ int(m)) for b, m in zip(format_bit, constants.FORMAT_MASK))


def add_format_information(modules, mask):
    '''
    포맷 정보를 추가하는 함수
    :param modules: qr코드 2darray
    :param mask: 선택된 마스크 번호
    :return: 포맷 정보 추가가 완료된 qr코드 2darray
    '''
    module_count = len(modules)
    format_bit = [int(b) for b in constants.FORMAT_STRINGS[mask]]

    bit_idx = 0
    # 좌측 상단 파인더 패턴 아래 (타이밍 패턴 열 제외)
    for i in (0, 1, 2, 3, 4, 5, 7, 8):
        modules[8][i] = format_bit[bit_idx]
        bit_idx += 1
    # 좌측 상단 파인더 패턴 오른쪽, 아래에서 위로 (타이밍 패턴 행 제외)
    for i in (7, 5, 4, 3, 2, 1, 0):
        modules[i][8] = format_bit[bit_idx]
        bit_idx += 1

    bit_idx = 0
    # 좌측 하단 파인더 패턴 오른쪽, 아래에서 위로
    for i in range(module_count - 1, module_count - 8, -1):
        modules[i][8] = format_bit[bit_idx]
        bit_idx += 1
    # 우측 상단 파인더 패턴 아래
    for i in range(module_count - 8, module_count):
        modules[8][i] = format_bit[bit_idx]
        bit_idx += 1
    return modules
