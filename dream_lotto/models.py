"""꿈 로또 데이터 모델"""
from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional, Union

from .zodiac import zodiac_index, decompose_year

GENDER_LABELS = {'male': '남성', 'female': '여성'}


class BirthProfile(BaseModel):
    """출생 정보"""
    year: int = Field(ge=1900)
    month_day: Optional[Union[date, str]] = None  # YYYY-MM-DD
    time: Optional[str] = None  # HH:MM (24시간)

    @property
    def zodiac_index(self) -> int:
        return zodiac_index(self.year)

    @property
    def digit_sum(self) -> int:
        return decompose_year(self.year)[0]

    @property
    def last_two_digits(self) -> int:
        return decompose_year(self.year)[1]


class DerivationOptions(BaseModel):
    """번호 생성에 쓰이는 월/일/시/분 (기본값 1월 1일 12:00)"""
    month: int = 1
    day: int = 1
    hour: int = 12
    minute: int = 0


class SymbolCandidate(BaseModel):
    """꿈 상징 숫자와 그 출처"""
    number: int = Field(ge=1, le=45)
    label: str


class LottoResult(BaseModel):
    """로또 번호 6개와 각 번호의 설명"""
    numbers: List[int]
    explanations: List[str]


class ClassificationItem(BaseModel):
    """음양오행 분류 항목"""
    category: str
    confidence: int = Field(ge=0, le=100)  # 0-100 백분율
    reason: str


class DreamAnalysisRequest(BaseModel):
    """꿈해석 요청 데이터"""
    dream_text: str
    birth_year: int
    birth_month_day: Optional[str] = None
    birth_time: Optional[str] = None
    gender: Optional[str] = None  # 'male' 또는 'female'


class DreamInterpretation(BaseModel):
    """AI 모델이 돌려준 꿈 분석"""
    classifications: List[ClassificationItem] = []
    story: str = ""
    greek_myth_story: str = ""
    dream_numbers: List[int] = []


class DreamAnalysisResult(BaseModel):
    """꿈해석 결과"""
    classifications: List[ClassificationItem]
    story: str  # 동양 판타지 스토리
    greek_myth_story: str
    zodiac_name: str
    lotto_numbers: List[int]  # 생성된 로또 번호 6개
    number_explanations: List[str]  # 각 번호에 대한 설명
