"""Gemini 기반 꿈 분석기"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from langchain_core.exceptions import OutputParserException
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel, Field

from config import settings
from dream_lotto.models import ClassificationItem, DreamAnalysisRequest, DreamInterpretation
from dream_lotto.zodiac import zodiac_index, zodiac_name
from .errors import LLMConfigurationError, LLMResponseError, classify_llm_error
from .prompts import DREAM_ANALYSIS_HUMAN_PROMPT, DREAM_ANALYSIS_SYSTEM_PROMPT, build_user_info

logger = logging.getLogger(__name__)

DEFAULT_CLASSIFICATION = ClassificationItem(category='오행 - 수', confidence=70, reason='꿈 내용을 분석한 결과')
DEFAULT_STORY = '꿈의 내용을 분석하여 신비로운 이야기로 재구성했습니다.'
DEFAULT_GREEK_MYTH_STORY = '꿈의 내용을 그리스 신화로 재구성했습니다.'
MAX_DREAM_NUMBERS = 5


# --- 출력 파싱용 스키마 ---
class ClassificationOutput(BaseModel):
    category: Optional[str] = Field(default=None, description="분류 카테고리명 (예: 오행 - 수, 음양 - 양)")
    confidence: Optional[float] = Field(default=None, description="신뢰도 (0-100)")
    reason: Optional[str] = Field(default=None, description="분석 이유 (50자 이내)")


class DreamInterpretationOutput(BaseModel):
    classifications: List[ClassificationOutput] = Field(description="동양사상 기반 분류 항목들")
    story: Optional[str] = Field(default=None, description="동양 판타지 소설 형식으로 재구성한 꿈 이야기 (300자 이내)")
    greek_myth_story: Optional[str] = Field(default=None, description="꿈과 가장 유사한 상황의 그리스 신화 이야기 (300자 이내)")
    dream_numbers: List[int] = Field(default_factory=list, description="꿈에서 추출한 상징 숫자들 (1-45 범위, 2-5개)")


def normalize_interpretation(output: DreamInterpretationOutput) -> DreamInterpretation:
    """모델 출력의 빈 값과 범위를 벗어난 값을 정리"""
    classifications = [
        ClassificationItem(
            category=item.category or '분류 없음',
            confidence=min(100, max(0, round(item.confidence or 0))),
            reason=item.reason or '분석 중',
        )
        for item in output.classifications
    ]
    if not classifications:
        classifications.append(DEFAULT_CLASSIFICATION)

    dream_numbers = [n for n in output.dream_numbers if 1 <= n <= 45][:MAX_DREAM_NUMBERS]
    if len(dream_numbers) != len(output.dream_numbers):
        logger.info(f"범위를 벗어나거나 초과한 AI 숫자 제외: {output.dream_numbers}")

    return DreamInterpretation(
        classifications=classifications,
        story=(output.story or '').strip() or DEFAULT_STORY,
        greek_myth_story=(output.greek_myth_story or '').strip() or DEFAULT_GREEK_MYTH_STORY,
        dream_numbers=dream_numbers,
    )


class DreamAnalyzer(ABC):
    """꿈을 분류하고 이야기와 상징 숫자를 만들어 주는 외부 모델"""

    @abstractmethod
    async def analyze(self, request: DreamAnalysisRequest) -> DreamInterpretation:
        ...


class GeminiDreamAnalyzer(DreamAnalyzer):
    """Gemini(langchain-google-genai)로 꿈을 분석"""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 temperature: Optional[float] = None, llm=None):
        """
        Args:
            api_key: Google API 키 (없으면 설정값 사용)
            model: 모델명 (없으면 설정값 사용)
            temperature: 샘플링 온도 (없으면 설정값 사용)
            llm: 미리 만든 채팅 모델 (테스트용)
        """
        self.api_key = api_key or settings.resolved_api_key
        self.model = model or settings.gemini_model
        self.temperature = settings.llm_temperature if temperature is None else temperature
        self._llm = llm
        self.parser = PydanticOutputParser(pydantic_object=DreamInterpretationOutput)

    @property
    def llm(self):
        if self._llm is None:
            if not self.api_key:
                logger.error("GOOGLE_API_KEY가 설정되지 않았습니다.")
                raise LLMConfigurationError()
            self._llm = ChatGoogleGenerativeAI(
                model=self.model,
                google_api_key=self.api_key,
                temperature=self.temperature,
            )
            logger.info(f"Gemini 모델 초기화: {self.model}")
        return self._llm

    def build_prompt(self, request: DreamAnalysisRequest) -> ChatPromptTemplate:
        user_info = build_user_info(
            request.birth_year,
            zodiac_name(zodiac_index(request.birth_year)),
            request.birth_month_day,
            request.birth_time,
            request.gender,
        )
        return ChatPromptTemplate.from_messages([
            SystemMessage(content=DREAM_ANALYSIS_SYSTEM_PROMPT.format(
                format_instructions=self.parser.get_format_instructions()
            )),
            HumanMessage(content=DREAM_ANALYSIS_HUMAN_PROMPT.format(
                user_info=user_info,
                dream_text=request.dream_text,
            )),
        ])

    async def analyze(self, request: DreamAnalysisRequest) -> DreamInterpretation:
        chain = self.build_prompt(request) | self.llm | self.parser

        try:
            logger.info("Gemini 꿈 분석 요청")
            output = await chain.ainvoke({})
        except OutputParserException as e:
            logger.error(f"Gemini 응답 파싱 실패: {e}")
            raise LLMResponseError() from e
        except Exception as e:
            logger.error(f"Gemini API 오류: {e}", exc_info=True)
            raise classify_llm_error(e) from e

        if not output.classifications:
            raise LLMResponseError()

        logger.info(f"Gemini 꿈 분석 완료: 분류 {len(output.classifications)}개, 숫자 {output.dream_numbers}")
        return normalize_interpretation(output)
