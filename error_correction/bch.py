'''
포맷 정보용 BCH(15, 5) 부호
GF(2) 위의 다항식이라 계수 곱셈은 AND, 덧셈은 XOR
'''

# x^10 + x^8 + x^5 + x^4 + x^2 + x + 1 (0x537)
FORMAT_GENERATOR = [1, 0, 1, 0, 0, 1, 1, 0, 1, 1, 1]


def gf2_poly_div(dividend, divisor):
    result = list(dividend)
    for i in range(len(dividend) - len(divisor) + 1):
        if result[i]:
            for j in range(1, len(divisor)):
                result[i + j] ^= divisor[j]
    return result[-(len(divisor) - 1):]


def bch_encode(data_int, n, k, gen_poly):
    '''
    k비트 데이터에 대한 (n - k)비트 BCH 패리티 계산
    :param data_int: 데이터 정수
    :param n: 부호어 길이
    :param k: 데이터 비트 수
    :param gen_poly: 생성 다항식 (최고차항부터)
    :return: 패리티 비트 문자열
    '''
    data_poly = [int(bit) for bit in format(data_int, f'0{k}b')]
    data_poly += [0] * (n - k)

    rem = gf2_poly_div(data_poly, gen_poly)
    return ''.join(str(bit) for bit in rem)
