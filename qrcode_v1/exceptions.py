class QRCodeError(Exception):
    pass


class InputTooLong(QRCodeError, ValueError):
    def __init__(self, length, capacity):
        self.length = length
        self.capacity = capacity
        super().__init__(f'데이터 길이({length}바이트)가 버전 1-L 최대 용량({capacity}바이트)을 넘습니다.')


class InvalidCharacter(QRCodeError, ValueError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f'{position}번째 문자 {char!r}는 Latin-1 한 바이트로 표현할 수 없습니다.')


class PlacementInvariantViolation(QRCodeError, RuntimeError):
    def __init__(self, bit_count, module_count):
        self.bit_count = bit_count
        self.module_count = module_count
        super().__init__(f'데이터 비트 수({bit_count})와 데이터 모듈 수({module_count})가 다릅니다.')
