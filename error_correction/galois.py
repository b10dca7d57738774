'''
GF(2^8) 유한체 연산
QR코드 오류 정정에 쓰이는 원시 다항식 x^8 + x^4 + x^3 + x^2 + 1 (0x11d) 사용
'''

PRIMITIVE_POLYNOMIAL = 0x11d
FIELD_SIZE = 256


class DivideByZero(ZeroDivisionError):
    '''
    유한체에서 0으로 나누거나 0의 역원을 구할 때 발생하는 오류
    '''


def init_galois_field(prim=PRIMITIVE_POLYNOMIAL):
    '''
    지수/로그 테이블 생성하는 함수
    :param prim: 원시 다항식
    :return: (지수 테이블, 로그 테이블)
    '''
    exp = [0] * (FIELD_SIZE - 1)  # 지수 테이블
    log = [None] * FIELD_SIZE  # 로그 테이블, log[0]은 정의되지 않음

    x = 1
    for i in range(FIELD_SIZE - 1):
        exp[i] = x
        log[x] = i
        x <<= 1
        if x > 0xff:
            x ^= prim
    return tuple(exp), tuple(log)


class GaloisField(object):
    def __init__(self, prim=PRIMITIVE_POLYNOMIAL):
        self.prim = prim
        # 테이블은 한 번만 만들고 이후 읽기 전용으로 공유
        self.exp, self.log = init_galois_field(prim)

    def add(self, a, b):
        # 표수가 2인 체에서 덧셈은 XOR
        return a ^ b

    def subtract(self, a, b):
        return a ^ b

    def multiply(self, a, b):
        if a == 0 or b == 0:
            return 0
        return self.exp[(self.log[a] + self.log[b]) % 255]

    def divide(self, a, b):
        if b == 0:
            raise DivideByZero('GF(256)에서 0으로 나눌 수 없습니다.')
        if a == 0:
            return 0
        return self.exp[(self.log[a] - self.log[b] + 255) % 255]

    def inverse(self, a):
        if a == 0:
            raise DivideByZero('GF(256)에서 0의 역원은 존재하지 않습니다.')
        return self.exp[(255 - self.log[a]) % 255]

    def alpha_power(self, n):
        '''
        생성원 α의 n 제곱
        지수 테이블의 주기(255)를 이용해 큰 n도 처리
        '''
        return self.exp[n % 255]


# 모든 인코딩에서 공유하는 유한체
FIELD = GaloisField()
