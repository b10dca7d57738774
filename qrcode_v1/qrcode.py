from PIL import Image
import logging
import re

import error_correction.reed_solomon as reed_solomon
from error_correction.galois import FIELD
import qrcode_v1.constants as constants
import qrcode_v1.format_info as format_info
import qrcode_v1.mask as mask
import qrcode_v1.matrix as matrix
import qrcode_v1.util as util

logger = logging.getLogger(__name__)

'''
QRCode 클래스
데이터를 버전 1-L QRCode로 바꾸는 클래스
'''

class QRCode(object):
    def __init__(
        self,
        data,
        field=FIELD
    ):
        self.data = data
        self.field = field
        self.ecc_level = constants.ERROR_LEVEL_L
        self.version = constants.VERSION
        self.module_count = constants.MODULE_COUNT

        self.__make__()

    def __encode_data__(self):
        '''
        데이터를 비트로 인코딩하는 함수
        '''
        # 바이트 모드 152비트 데이터
        self.encoded_data = util.encode_data(self.data)
        logger.debug('data bits: %s', self.encoded_data)
        logger.debug('data segment: %r', util.describe_data_segment(self.encoded_data))

    def __add_error_bits__(self):
        '''
        Reed-Solomon 알고리즘으로 에러 정정 비트 추가하는 함수
        '''
        # 19개 데이터 코드워드
        data_code = util.bits_to_codewords(self.encoded_data)
        # 7개 오류 정정 코드워드
        error_code = reed_solomon.generate_ecc(data_code, constants.ECC_CODEWORDS, self.field)
        self.error_data = util.codewords_to_bits(error_code)
        logger.debug('error bits: %s', self.error_data)

    def __make__(self):
        self.__encode_data__()
        self.__add_error_bits__()

        # 기능 패턴 + 데이터 배치
        modules, self.is_function = matrix.build_matrix(self.encoded_data + self.error_data)

        # 패널티가 가장 낮은 마스크 선택 후 실제 qr코드에 적용
        self.mask, self.penalties = mask.select_mask(modules, self.is_function)
        mask.apply_mask(modules, self.is_function, self.mask)

        # ecc level, 마스크 정보를 포함한 포맷 정보 추가
        format_info.add_format_information(modules, self.mask)

        # 최종 qr코드 데이터 확정
        self.qr_data = modules

    def get_matrix(self):
        '''
        최종 qr코드를 bool 2darray로 반환 (True = 검정)
        '''
        return [[bool(m) for m in row] for row in self.qr_data]

    def to_image(self, box_size=4, border=4):
        '''
        qr코드를 흑백 이미지로 그리는 함수
        :param box_size: 모듈 한 칸의 픽셀 수
        :param border: 여백 모듈 수
        :return: PIL Image
        '''
        margin = border * box_size
        width = height = self.module_count * box_size + 2 * margin
        # 흰색 배경
        image = Image.new('1', (width, height), 255)
        pixels = image.load()

        for i in range(self.module_count):
            for j in range(self.module_count):
                for p_i in range(i * box_size + margin, (i + 1) * box_size + margin):
                    for p_j in range(j * box_size + margin, (j + 1) * box_size + margin):
                        pixels[p_j, p_i] = 0 if self.qr_data[i][j] else 255
        return image

    def save_image(self, dir=None, box_size=4, border=4):
        if dir is None:
            dir = default_filename(self.data)
        self.to_image(box_size, border).save(dir)
        logger.info('QR code saved as: %s (mask %d)', dir, self.mask)
        return dir


def default_filename(data):
    if isinstance(data, (bytes, bytearray)):
        data = data.decode('latin-1')
    return 'qrcode_' + re.sub(r'[^a-zA-Z0-9]', '_', data) + '.png'


def generate_qrcode(data):
    '''
    텍스트를 21x21 bool 2darray QR코드로 만드는 함수
    :param data: Latin-1 텍스트 (최대 17바이트)
    :return: 21x21 bool 2darray
    '''
    return QRCode(data).get_matrix()
