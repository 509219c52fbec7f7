"""출생년도 기반 띠(12지지) 계산"""
from typing import Tuple

# 12지지: 쥐(1), 소(2), 호랑이(3), 토끼(4), 용(5), 뱀(6), 말(7), 양(8), 원숭이(9), 닭(10), 개(11), 돼지(12)
ZODIAC_ANIMALS = ('쥐', '소', '호랑이', '토끼', '용', '뱀', '말', '양', '원숭이', '닭', '개', '돼지')


def zodiac_index(year: int) -> int:
    """출생년도로 띠 번호(1-12) 계산. 4년(쥐띠)을 기준으로 12년 주기"""
    return (year - 4) % 12 + 1


def zodiac_name(index: int) -> str:
    """띠 번호에 해당하는 동물 이름"""
    return ZODIAC_ANIMALS[(index - 1) % 12]


def decompose_year(year: int) -> Tuple[int, int]:
    """출생년도를 (각 자리 합, 끝 두 자리)로 분해"""
    digit_sum = sum(int(digit) for digit in str(abs(year)))
    return digit_sum, abs(year) % 100
