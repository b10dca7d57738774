import qrcode_v1.constants as constants
from qrcode_v1.exceptions import InputTooLong, InvalidCharacter


def to_latin1(data):
    '''
    입력 데이터를 Latin-1 바이트로 바꾸는 함수
    :param data: str 또는 bytes
    :return: bytes
    '''
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    for position, char in enumerate(data):
        if ord(char) > 0xff:
            raise InvalidCharacter(char, position)
    return data.encode('latin-1')


def add_terminator_and_pad(encoded_data, total_bits):
    '''
    인코드 데이터에 종단자/패딩 비트 추가하는 함수
    :param encoded_data: 인코드 데이터
    :param total_bits: qr코드의 총 데이터 비트 수
    :return: 종단자/패딩 비트가 추가된 인코드 데이터
    '''

    # 남은 비트 수가 4개 이하면 남은 수 만큼 0 추가
    for _ in range(min(len(constants.TERMINATOR), total_bits - len(encoded_data))):
        encoded_data += '0'

    # 8 비트 단위로 끊을 수 있도록 0 비트 추가
    while len(encoded_data) % 8 != 0:
        encoded_data += '0'

    # 두 패딩 비트를 번갈아 가며 총 비트 수에 맞게 추가
    bytes_to_fill = (total_bits - len(encoded_data)) // 8
    for i in range(bytes_to_fill):
        encoded_data += constants.PADDING_PATTERNS[i % 2]
    return encoded_data


def encode_data(data):
    '''
    데이터를 바이트 모드 비트열로 인코딩하는 함수
    :param data: 입력 데이터 (str 또는 bytes)
    :return: 152비트 데이터 비트 문자열
    '''
    data = to_latin1(data)
    if len(data) > constants.MAX_DATA_BYTES:
        raise InputTooLong(len(data), constants.MAX_DATA_BYTES)

    # 모드 정보 + 데이터 개수 표현 비트
    encoded_data = constants.MODE_BITS[constants.MODE_BYTE]
    encoded_data += format(len(data), f'0{constants.CHAR_COUNT_INDICATOR_LENGTH}b')
    for byte in data:
        encoded_data += format(byte, '08b')

    return add_terminator_and_pad(encoded_data, constants.DATA_BITS)


def bits_to_codewords(bits):
    return [int(bits[i:i + 8], 2) for i in range(0, len(bits), 8)]


def codewords_to_bits(codewords):
    return ''.join(format(c, '08b') for c in codewords)


def describe_data_segment(bits):
    '''
    디버깅용으로 데이터 비트열의 모드, 길이, 데이터 바이트를 다시 읽는 함수
    :param bits: 인코드 데이터
    :return: dict
    '''
    count_end = 4 + constants.CHAR_COUNT_INDICATOR_LENGTH
    count = int(bits[4:count_end], 2)
    payload = bytes(bits_to_codewords(bits[count_end:count_end + count * 8]))
    return {
        'mode': bits[:4],
        'count': count,
        'payload': payload,
        'text': payload.decode('latin-1'),
    }
