"""꿈 분석 오류와 LLM 오류 분류"""


class DreamAnalysisError(Exception):
    """HTTP 상태 코드와 사용자 메시지를 가진 꿈 분석 오류"""
    status_code = 500
    default_message = 'AI 분석 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요.'

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class LLMConfigurationError(DreamAnalysisError):
    default_message = (
        'API 키가 설정되지 않았습니다. '
        '.env 파일에 GOOGLE_API_KEY=your_api_key 형식으로 입력되어 있는지 확인해주세요.'
    )


class LLMNetworkError(DreamAnalysisError):
    status_code = 503
    default_message = '네트워크 오류가 발생했습니다. 인터넷 연결을 확인하고 잠시 후 다시 시도해주세요.'


class LLMAuthenticationError(DreamAnalysisError):
    status_code = 401
    default_message = 'API 키가 유효하지 않습니다. GOOGLE_API_KEY 설정을 확인해주세요.'


class LLMQuotaError(DreamAnalysisError):
    status_code = 429
    default_message = 'API 사용량 한도를 초과했습니다. 잠시 후 다시 시도해주세요.'


class LLMModelError(DreamAnalysisError):
    default_message = 'AI 모델을 찾을 수 없습니다. 모델명을 확인해주세요.'


class LLMResponseError(DreamAnalysisError):
    default_message = 'AI 분석 결과가 올바르지 않습니다.'


# 메시지에 포함된 단어로 오류 종류 판단 (위에서부터 순서대로)
_ERROR_PATTERNS = [
    (LLMNetworkError, ('network', 'fetch', 'econnrefused', 'connection', 'timeout', 'timed out')),
    (LLMAuthenticationError, ('api key', 'api_key', 'authentication', 'unauthorized',
                              'permission denied', 'permissiondenied', '401', '403')),
    (LLMQuotaError, ('quota', 'rate limit', 'too many requests', 'resource exhausted',
                     'resourceexhausted', '429')),
    (LLMModelError, ('model', 'not found', 'notfound')),
]


def classify_llm_error(error: Exception) -> DreamAnalysisError:
    """LLM 클라이언트 예외를 DreamAnalysisError로 변환"""
    if isinstance(error, DreamAnalysisError):
        return error

    text = f"{type(error).__name__} {error}".lower()
    for error_class, patterns in _ERROR_PATTERNS:
        if any(pattern in text for pattern in patterns):
            return error_class()

    return DreamAnalysisError(
        f'AI 분석 중 오류가 발생했습니다: {error}. 잠시 후 다시 시도해주세요.'
    )
