import copy
import logging

import qrcode_v1.constants as constants

logger = logging.getLogger(__name__)


def apply_mask(modules, is_function, mask):
    '''
    기능 모듈이 아닌 칸 중 마스크 조건을 만족하는 칸의 색을 반전시키는 함수
    같은 마스크를 두 번 적용하면 원래대로 돌아옴
    :param modules: qr코드 2darray
    :param is_function: 기능 모듈 2darray
    :param mask: 마스크 번호 0~7
    :return: 마스크가 적용된 qr코드 2darray (modules 자체를 수정)
    '''
    mask_func = constants.MASK_FUNCTION[mask]
    module_count = len(modules)
    for i in range(module_count):
        for j in range(module_count):
            if not is_function[i][j] and mask_func(i, j):
                modules[i][j] ^= 1
    return modules


def evaluate_mask(modules):
    '''
    마스크를 적용한 qr코드의 패널티를 계산하는 함수
    연속 모듈(Rule 1)과 2x2 블록(Rule 2)만 계산
    :param modules: qr코드 2darray
    :return: 패널티 점수
    '''
    module_count = len(modules)
    penalty = 0

    # Rule 1: 연속된 같은 색 모듈 검출
    for i in range(module_count):
        row_count = 1
        col_count = 1
        for j in range(1, module_count):
            # 행 방향으로 연속된 모듈
            if modules[i][j] == modules[i][j - 1]:
                row_count += 1
            else:
                if row_count >= 5:
                    penalty += (row_count - 2)
                row_count = 1
            # 열 방향으로 연속된 모듈
            if modules[j][i] == modules[j - 1][i]:
                col_count += 1
            else:
                if col_count >= 5:
                    penalty += (col_count - 2)
                col_count = 1
        if row_count >= 5:
            penalty += (row_count - 2)
        if col_count >= 5:
            penalty += (col_count - 2)

    # Rule 2: 2x2 블록 패턴 검출
    for i in range(module_count - 1):
        for j in range(module_count - 1):
            if modules[i][j] == modules[i][j + 1] == modules[i + 1][j] == modules[i + 1][j + 1]:
                penalty += 3

    return penalty


def select_mask(modules, is_function):
    '''
    8개의 마스크를 모두 적용해 보고 패널티가 가장 낮은 마스크를 고르는 함수
    패널티가 같으면 번호가 낮은 마스크 선택
    :return: (마스크 번호, 마스크별 패널티 리스트)
    '''
    min_penalty = None
    min_mask = 0
    penalties = []
    for mask in constants.MASK_BITS:
        # 현재 qr코드 deepcopy 후 마스크 적용
        option = apply_mask(copy.deepcopy(modules), is_function, mask)
        penalty = evaluate_mask(option)
        penalties.append(penalty)
        logger.debug('mask %d penalty: %d', mask, penalty)
        if min_penalty is None or penalty < min_penalty:
            min_penalty = penalty
            min_mask = mask
    logger.debug('selected mask %d with penalty %d', min_mask, min_penalty)
    return min_mask, penalties
