import pytest

import qrcode_v1.util as util
from qrcode_v1.exceptions import InputTooLong, InvalidCharacter, QRCodeError


def test_single_character_layout():
    bits = util.encode_data('A')
    prefix = '0100' + '00000001' + '01000001' + '0000'
    assert bits.startswith(prefix)
    assert bits[len(prefix):] == ('11101100' + '00010001') * 8
    assert len(bits) == 152


def test_character_count_field():
    bits = util.encode_data('Test')
    assert bits[4:12] == '00000100'


@pytest.mark.parametrize('length', range(18))
def test_always_152_bits(length):
    bits = util.encode_data('a' * length)
    assert len(bits) == 152
    assert set(bits) <= {'0', '1'}


def test_empty_input():
    bits = util.encode_data('')
    assert bits[:16] == '0100' + '00000000' + '0000'
    assert bits[16:24] == '11101100'


def test_full_capacity_has_no_padding():
    bits = util.encode_data('z' * 17)
    assert bits.endswith(format(ord('z'), '08b') + '0000')


def test_terminator_and_byte_alignment():
    # 4 + 8 + 8 * 16 = 140, 종단자 4비트 후 144
    bits = util.encode_data('q' * 16)
    assert bits[140:144] == '0000'
    assert bits[144:] == '11101100'


def test_pad_pattern_starts_with_ec():
    padded = util.add_terminator_and_pad('0100', 40)
    assert padded == '0100' + '0000' + '11101100' + '00010001' + '11101100' + '00010001'


def test_bytes_input():
    assert util.encode_data(b'Test') == util.encode_data('Test')


def test_latin1_characters():
    bits = util.encode_data('é')
    assert bits[12:20] == format(0xe9, '08b')


def test_input_too_long():
    with pytest.raises(InputTooLong) as excinfo:
        util.encode_data('a' * 18)
    assert excinfo.value.length == 18
    assert excinfo.value.capacity == 17
    assert isinstance(excinfo.value, QRCodeError)


def test_invalid_character():
    with pytest.raises(InvalidCharacter) as excinfo:
        util.encode_data('abĀ')
    assert excinfo.value.position == 2
    assert excinfo.value.char == 'Ā'


def test_invalid_character_is_value_error():
    with pytest.raises(ValueError):
        util.encode_data('한글')


def test_codeword_conversion():
    bits = util.encode_data('Test')
    codewords = util.bits_to_codewords(bits)
    assert len(codewords) == 19
    assert codewords[:2] == [0x40, 0x45]
    assert util.codewords_to_bits(codewords) == bits


def test_describe_data_segment():
    info = util.describe_data_segment(util.encode_data('Hello, world!'))
    assert info['mode'] == '0100'
    assert info['count'] == 13
    assert info['payload'] == b'Hello, world!'
    assert info['text'] == 'Hello, world!'
