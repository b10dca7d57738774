'''
버전 1, 오류 정정 레벨 L 고정 상수
'''

# 버전 1은 항상 21x21
VERSION = 1
MODULE_COUNT = VERSION * 4 + 17

ERROR_LEVEL_L = 'L'
ERROR_LEVEL_BITS = {
    ERROR_LEVEL_L: '01',
}

# 바이트 모드
MODE_BYTE = 'Byte'
MODE_BITS = {
    MODE_BYTE: '0100',
}
CHAR_COUNT_INDICATOR_LENGTH = 8
TERMINATOR = '0000'
PADDING_PATTERNS = ['11101100', '00010001']

# 데이터 코드워드 19개, 에러 정정 코드워드 7개
DATA_CODEWORDS = 19
ECC_CODEWORDS = 7
DATA_BITS = DATA_CODEWORDS * 8
ECC_BITS = ECC_CODEWORDS * 8
TOTAL_BITS = DATA_BITS + ECC_BITS

# 4(모드) + 8(길이) + 8 * n + 4(종단자) <= 152
MAX_DATA_BYTES = (DATA_BITS - len(MODE_BITS[MODE_BYTE]) - CHAR_COUNT_INDICATOR_LENGTH - len(TERMINATOR)) // 8

# 파인더 패턴 시작 위치 (x, y)
FINDER_PATTERN_POSITION = [
    (0, 0),
    (MODULE_COUNT - 7, 0),
    (0, MODULE_COUNT - 7),
]

# 다크 모듈 위치 (행, 열)
DARK_MODULE = (4 * VERSION + 9, 8)

# 마스크 번호 0~7, (i, j) = (행, 열)
MASK_BITS = list(range(8))
MASK_FUNCTION = (
    lambda i, j: (i + j) % 2 == 0,
    lambda i, j: i % 2 == 0,
    lambda i, j: j % 3 == 0,
    lambda i, j: (i + j) % 3 == 0,
    lambda i, j: (i // 2 + j // 3) % 2 == 0,
    lambda i, j: (i * j) % 2 + (i * j) % 3 == 0,
    lambda i, j: ((i * j) % 2 + (i * j) % 3) % 2 == 0,
    lambda i, j: ((i + j) % 2 + (i * j) % 3) % 2 == 0,
)

# 레벨 L의 마스크별 포맷 정보 (BCH 패리티 및 XOR 마스크 적용 완료)
FORMAT_STRINGS = (
    '111011111000100',
    '111001011110011',
    '111110110101010',
    '111100010011101',
    '110011000101111',
    '110001100011000',
    '110110001000001',
    '110100101110110',
)
FORMAT_MASK = '101010000010010'
