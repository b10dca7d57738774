import logging
import os

from qrcode_v1.qrcode import QRCode


if __name__ == '__main__':
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    test_data = [
        'Hello, world!',
        'Test',
        'A',
        'café crème',
    ]

    os.makedirs('./image', exist_ok=True)
    for data_idx, data in enumerate(test_data):
        qr = QRCode(data)
        print('원본 데이터:', data)
        print('인코딩 데이터:', qr.encoded_data)
        print('에러 정정 데이터:', qr.error_data)
        print(f'선택된 마스크: {qr.mask} 패널티: {qr.penalties[qr.mask]}')
        qr.save_image(f'./image/{data_idx}_qr.png', box_size=10)
        print()
