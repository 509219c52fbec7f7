"""꿈 상징과 생년월일시 기반 로또 번호 생성"""
from .deriver import NumberDeriver, adjust_to_range, derive_lotto_numbers
from .models import (
    BirthProfile, ClassificationItem, DerivationOptions, DreamAnalysisRequest,
    DreamAnalysisResult, DreamInterpretation, LottoResult, SymbolCandidate
)
from .symbols import SYMBOL_TABLE, extract_symbol_candidates, extract_symbols, symbol_name
from .zodiac import ZODIAC_ANIMALS, zodiac_index, zodiac_name, decompose_year

__all__ = [
    'NumberDeriver', 'adjust_to_range', 'derive_lotto_numbers',
    'BirthProfile', 'ClassificationItem', 'DerivationOptions', 'DreamAnalysisRequest',
    'DreamAnalysisResult', 'DreamInterpretation', 'LottoResult', 'SymbolCandidate',
    'SYMBOL_TABLE', 'extract_symbol_candidates', 'extract_symbols', 'symbol_name',
    'ZODIAC_ANIMALS', 'zodiac_index', 'zodiac_name', 'decompose_year',
]
