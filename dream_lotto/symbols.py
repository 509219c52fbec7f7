"""꿈 텍스트의 키워드를 상징 숫자로 매핑"""
from typing import List, Tuple

from .models import SymbolCandidate
from .zodiac import ZODIAC_ANIMALS

# 키워드 그룹 숫자의 이름
SYMBOL_NAMES = {
    1: '물',
    6: '물',
    3: '길',
    4: '떨어짐',
    7: '하늘/비행',
    8: '집/돈',
    9: '불',
    10: '죽음',
}


def symbol_name(number: int) -> str:
    """상징 숫자의 이름 (표에 없으면 '상징 N')"""
    return SYMBOL_NAMES.get(number, f'상징 {number}')


# (키워드, 숫자, 이름) - 테이블 순서대로 검사한다
SYMBOL_TABLE: List[Tuple[Tuple[str, ...], Tuple[int, ...], str]] = [
    (('물', '바다', '강', '비', '우물'), (1, 6), symbol_name(1)),
    (('불', '화재', '태양', '빛'), (9,), symbol_name(9)),
    (('하늘', '비행', '날다', '새'), (7,), symbol_name(7)),
    (('떨어', '추락', '넘어'), (4,), symbol_name(4)),
    (('집', '집안', '방'), (8,), symbol_name(8)),
    (('돈', '금', '보물', '옥'), (8,), symbol_name(8)),
    (('죽', '장례', '무덤'), (10,), symbol_name(10)),
    (('길', '도로', '이동'), (3,), symbol_name(3)),
] + [
    # 띠 동물은 숫자 대신 동물 이름으로 표시
    ((animal,), (position,), animal)
    for position, animal in enumerate(ZODIAC_ANIMALS, start=1)
]


def extract_symbol_candidates(text: str) -> List[SymbolCandidate]:
    """꿈 텍스트에서 상징 숫자와 출처 추출 (같은 숫자는 처음 나온 것만)"""
    text = text.lower()
    candidates: List[SymbolCandidate] = []
    seen = set()

    for keywords, numbers, label in SYMBOL_TABLE:
        if not any(keyword in text for keyword in keywords):
            continue
        for number in numbers:
            if number not in seen:
                seen.add(number)
                candidates.append(SymbolCandidate(number=number, label=label))

    return candidates


def extract_symbols(text: str) -> List[int]:
    """꿈 텍스트에서 상징 숫자만 추출"""
    return [candidate.number for candidate in extract_symbol_candidates(text)]
