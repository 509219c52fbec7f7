"""AI 꿈 분석"""
from .analyzer import DreamAnalyzer, GeminiDreamAnalyzer, normalize_interpretation
from .errors import (
    DreamAnalysisError, LLMAuthenticationError, LLMConfigurationError, LLMModelError,
    LLMNetworkError, LLMQuotaError, LLMResponseError, classify_llm_error
)
from .service import DreamAnalysisService

__all__ = [
    'DreamAnalyzer', 'GeminiDreamAnalyzer', 'normalize_interpretation',
    'DreamAnalysisError', 'LLMAuthenticationError', 'LLMConfigurationError', 'LLMModelError',
    'LLMNetworkError', 'LLMQuotaError', 'LLMResponseError', 'classify_llm_error',
    'DreamAnalysisService',
]
