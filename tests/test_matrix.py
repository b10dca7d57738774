import pytest

import qrcode_v1.constants as constants
import qrcode_v1.matrix as matrix
from qrcode_v1.exceptions import PlacementInvariantViolation


def function_layout():
    modules, is_function = matrix.new_matrix()
    for start_x, start_y in constants.FINDER_PATTERN_POSITION:
        matrix.add_finder_pattern(modules, is_function, start_x, start_y)
    for start_x, start_y in constants.FINDER_PATTERN_POSITION:
        matrix.add_separator(modules, is_function, start_x, start_y)
    matrix.add_timing_pattern(modules, is_function)
    matrix.add_dark_module(modules, is_function)
    matrix.reserve_format_information(is_function)
    return modules, is_function


def test_module_counts():
    _, is_function = function_layout()
    assert matrix.count_data_modules(is_function) == 208
    assert matrix.count_function_modules(is_function) + matrix.count_data_modules(is_function) == 441


@pytest.mark.parametrize('start_x, start_y', constants.FINDER_PATTERN_POSITION)
def test_finder_pattern(start_x, start_y):
    modules, is_function = function_layout()
    expected = [
        [1, 1, 1, 1, 1, 1, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 0, 1, 1, 1, 0, 1],
        [1, 0, 1, 1, 1, 0, 1],
        [1, 0, 1, 1, 1, 0, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 1, 1, 1, 1, 1, 1],
    ]
    block = [row[start_x:start_x + 7] for row in modules[start_y:start_y + 7]]
    assert block == expected
    assert all(all(row[start_x:start_x + 7]) for row in is_function[start_y:start_y + 7])


def test_separators():
    modules, is_function = function_layout()
    for i in range(8):
        for row, col in ((7, i), (i, 7), (7, 20 - i), (i, 13), (13, i), (20 - i, 7)):
            assert modules[row][col] == 0
            assert is_function[row][col]


def test_timing_patterns():
    modules, is_function = function_layout()
    assert [modules[6][i] for i in range(8, 13)] == [1, 0, 1, 0, 1]
    assert [modules[i][6] for i in range(8, 13)] == [1, 0, 1, 0, 1]
    assert all(is_function[6][i] and is_function[i][6] for i in range(21))


def test_dark_module():
    modules, is_function = function_layout()
    assert modules[13][8] == 1
    assert is_function[13][8]


def test_format_reservation():
    _, is_function = function_layout()
    for i in range(9):
        assert is_function[8][i]
        assert is_function[i][8]
    for i in range(13, 21):
        assert is_function[8][i]
        assert is_function[i][8]
    assert not is_function[9][9]


def test_zigzag_order():
    _, is_function = function_layout()
    positions = list(matrix.data_positions(is_function))
    assert positions[:4] == [(20, 20), (20, 19), (19, 20), (19, 19)]
    assert len(positions) == 208
    assert len(set(positions)) == 208
    assert all(not is_function[y][x] for y, x in positions)
    assert all(x != 6 for _, x in positions)
    # 두 번째 열 쌍은 위에서 아래로
    assert positions[24:26] == [(9, 18), (9, 17)]
    assert positions[-1] == (12, 0)


def test_place_data_bits():
    modules, is_function = function_layout()
    bits = '10' * 104
    matrix.place_data_bits(modules, is_function, bits)
    assert modules[20][20] == 1
    assert modules[20][19] == 0
    placed = ''.join(str(modules[y][x]) for y, x in matrix.data_positions(is_function))
    assert placed == bits


@pytest.mark.parametrize('length', [207, 209, 0])
def test_placement_mismatch(length):
    modules, is_function = function_layout()
    with pytest.raises(PlacementInvariantViolation) as excinfo:
        matrix.place_data_bits(modules, is_function, '1' * length)
    assert excinfo.value.bit_count == length
    assert excinfo.value.module_count == 208


def test_build_matrix_allocates_fresh_grids():
    first, first_function = matrix.build_matrix('1' * 208)
    second, second_function = matrix.build_matrix('0' * 208)
    assert first is not second
    assert first_function is not second_function
    assert first_function == second_function
    assert first[20][20] == 1 and second[20][20] == 0
