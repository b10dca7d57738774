import logging

import qrcode_v1.constants as constants
from qrcode_v1.exceptions import PlacementInvariantViolation

logger = logging.getLogger(__name__)


def new_matrix(module_count=constants.MODULE_COUNT):
    '''
    비어있는 qr코드 2darray와 기능 모듈 표시용 2darray 생성
    :return: (modules, is_function)
    '''
    modules = [[0] * module_count for _ in range(module_count)]
    is_function = [[False] * module_count for _ in range(module_count)]
    return modules, is_function


def add_finder_pattern(modules, is_function, start_x, start_y):
    '''
    파인더 패턴을 추가하는 함수
    :param modules: qr코드 2darray
    :param is_function: 기능 모듈 2darray
    :param start_x: 가로 시작 위치
    :param start_y: 세로 시작 위치
    '''
    for i in range(7):
        for j in range(7):
            # 7x7 검정 테두리, 5x5 흰색 테두리, 3x3 검정 중심
            border = i in (0, 6) or j in (0, 6)
            core = 2 <= i <= 4 and 2 <= j <= 4
            modules[start_y + i][start_x + j] = int(border or core)
            is_function[start_y + i][start_x + j] = True


def add_separator(modules, is_function, start_x, start_y):
    '''
    파인더 패턴 바깥에 한 칸짜리 흰색 분리자를 추가하는 함수
    '''
    module_count = len(modules)
    for i in range(start_y - 1, start_y + 8):
        for j in range(start_x - 1, start_x + 8):
            if not (0 <= i < module_count and 0 <= j < module_count):
                continue
            if i in (start_y - 1, start_y + 7) or j in (start_x - 1, start_x + 7):
                modules[i][j] = 0
                is_function[i][j] = True


def add_timing_pattern(modules, is_function):
    '''
    타이밍 패턴을 추가하는 함수
    '''
    module_count = len(modules)
    for i in range(8, module_count - 8):
        # 세로 타이밍 패턴
        modules[i][6] = int(i % 2 == 0)
        is_function[i][6] = True
        # 가로 타이밍 패턴
        modules[6][i] = int(i % 2 == 0)
        is_function[6][i] = True


def add_dark_module(modules, is_function):
    row, col = constants.DARK_MODULE
    modules[row][col] = 1
    is_function[row][col] = True


def reserve_format_information(is_function):
    '''
    포맷 정보가 들어갈 자리를 기능 모듈로 예약하는 함수
    색은 마스크 선택 후 format_info에서 정해짐
    '''
    module_count = len(is_function)
    # 좌측 상단 파인더 패턴 아래 / 오른쪽
    for i in range(9):
        is_function[8][i] = True
    for i in range(8):
        is_function[i][8] = True
    # 우측 상단 파인더 패턴 아래
    for i in range(module_count - 8, module_count):
        is_function[8][i] = True
    # 좌측 하단 파인더 패턴 오른쪽
    for i in range(module_count - 8, module_count):
        is_function[i][8] = True


def data_positions(is_function):
    '''
    데이터 비트가 들어갈 칸을 지그재그 순서대로 돌려주는 제너레이터
    우측 하단에서 시작해 두 칸 폭으로 위/아래를 번갈아 이동
    :param is_function: 기능 모듈 2darray
    :return: (행, 열) 제너레이터
    '''
    module_count = len(is_function)
    upward = True
    x = module_count - 1
    while x > 0:
        # 세로 타이밍 패턴 열은 건너뜀
        if x == 6:
            x -= 1
        rows = range(module_count - 1, -1, -1) if upward else range(module_count)
        for y in rows:
            for col in (x, x - 1):
                if not is_function[y][col]:
                    yield y, col
        upward = not upward
        x -= 2


def place_data_bits(modules, is_function, bits):
    '''
    데이터 + 에러 정정 비트를 qr코드에 배치하는 함수
    :param modules: qr코드 2darray
    :param is_function: 기능 모듈 2darray
    :param bits: 208비트 문자열
    '''
    positions = list(data_positions(is_function))
    if len(positions) != len(bits):
        raise PlacementInvariantViolation(len(bits), len(positions))

    for (y, x), bit in zip(positions, bits):
        modules[y][x] = int(bit)
    logger.debug('placed %d data bits', len(bits))


def count_function_modules(is_function):
    return sum(row.count(True) for row in is_function)


def count_data_modules(is_function):
    return sum(row.count(False) for row in is_function)


def build_matrix(bits):
    '''
    기능 패턴을 그리고 데이터를 배치한 qr코드를 만드는 함수
    순서가 중요함: 뒤 단계는 앞 단계에서 표시한 기능 모듈을 참고
    :param bits: 데이터 비트 + 에러 정정 비트
    :return: (modules, is_function)
    '''
    modules, is_function = new_matrix()
    for start_x, start_y in constants.FINDER_PATTERN_POSITION:
        add_finder_pattern(modules, is_function, start_x, start_y)
    for start_x, start_y in constants.FINDER_PATTERN_POSITION:
        add_separator(modules, is_function, start_x, start_y)
    add_timing_pattern(modules, is_function)
    add_dark_module(modules, is_function)
    reserve_format_information(is_function)
    place_data_bits(modules, is_function, bits)
    return modules, is_function
