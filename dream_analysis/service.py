"""꿈해석 서비스: AI 분석 + 로또 번호 생성"""
import logging
from typing import Optional

from dream_lotto import NumberDeriver
from dream_lotto.models import BirthProfile, DreamAnalysisRequest, DreamAnalysisResult
from dream_lotto.zodiac import zodiac_name
from .analyzer import DreamAnalyzer, GeminiDreamAnalyzer

logger = logging.getLogger(__name__)


class DreamAnalysisService:
    """꿈을 분석하고 결과 숫자로 로또 번호를 만든다"""

    def __init__(self, analyzer: Optional[DreamAnalyzer] = None,
                 deriver: Optional[NumberDeriver] = None):
        self.analyzer = analyzer or GeminiDreamAnalyzer()
        self.deriver = deriver or NumberDeriver()

    async def analyze(self, request: DreamAnalysisRequest) -> DreamAnalysisResult:
        interpretation = await self.analyzer.analyze(request)

        profile = BirthProfile(
            year=request.birth_year,
            month_day=request.birth_month_day,
            time=request.birth_time,
        )
        if not interpretation.dream_numbers:
            logger.info("AI가 숫자를 돌려주지 않아 키워드 매핑으로 대체")

        lotto = self.deriver.derive_for_profile(profile, request.dream_text, interpretation.dream_numbers)

        return DreamAnalysisResult(
            classifications=interpretation.classifications,
            story=interpretation.story,
            greek_myth_story=interpretation.greek_myth_story,
            zodiac_name=zodiac_name(profile.zodiac_index),
            lotto_numbers=lotto.numbers,
            number_explanations=lotto.explanations,
        )
