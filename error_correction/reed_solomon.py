from error_correction.galois import FIELD


# 생성 다항식 생성
def generate_generator_polynomial(nsym, field=FIELD):
    '''
    (x - α^0)(x - α^1)...(x - α^(nsym-1)) 계산
    계수는 최고차항부터 저장 (g[0] == 1)
    '''
    g = [1]
    for i in range(nsym):
        # 표수 2에서 -α^i == α^i
        g = poly_mult(g, [1, field.alpha_power(i)], field)
    return g


# 다항식 곱셈
def poly_mult(p1, p2, field=FIELD):
    res = [0] * (len(p1) + len(p2) - 1)
    for i in range(len(p1)):
        for j in range(len(p2)):
            res[i + j] = field.add(res[i + j], field.multiply(p1[i], p2[j]))
    return res


# 다항식 나눗셈
def poly_div(dividend, divisor, field=FIELD):
    '''
    최고차항 계수가 1인 divisor로 나눈 나머지 반환
    '''
    msg_out = list(dividend)  # 나눗셈 결과 초기화
    for i in range(len(dividend) - (len(divisor) - 1)):
        coef = msg_out[i]
        if coef != 0:
            for j in range(len(divisor)):
                msg_out[i + j] ^= field.multiply(divisor[j], coef)
    return msg_out[-(len(divisor) - 1):]


# 에러 정정 코드워드 생성
def generate_ecc(data_codewords, nsym=7, field=FIELD):
    '''
    데이터 코드워드로 Reed-Solomon 에러 정정 코드워드 생성하는 함수
    :param data_codewords: 데이터 코드워드 (0~255 정수 리스트)
    :param nsym: 에러 정정 코드워드 개수
    :param field: 유한체
    :return: 에러 정정 코드워드 리스트
    '''
    gen = generate_generator_polynomial(nsym, field)
    # 데이터 뒤에 nsym개의 0 계수를 붙인 메시지 다항식
    message = list(data_codewords) + [0] * nsym
    for i in range(len(data_codewords)):
        coef = message[i]
        if coef != 0:
            for j in range(len(gen)):
                message[i + j] ^= field.multiply(gen[j], coef)
    # 남은 nsym개의 계수가 나머지 = 에러 정정 코드워드
    return message[-nsym:]


def rs_encode_msg(msg_in, nsym, field=FIELD):
    return list(msg_in) + generate_ecc(msg_in, nsym, field)
