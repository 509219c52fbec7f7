#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 공통 설정

제공:
- 프로젝트 루트 경로 등록
- 가짜 꿈 분석기와 FastAPI 테스트 클라이언트
- 예시 꿈 텍스트
"""

import os
import sys

import pytest

# 프로젝트 루트를 경로에 추가
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from dream_analysis import DreamAnalysisService, DreamAnalyzer  # noqa: E402
from dream_lotto.models import ClassificationItem, DreamInterpretation  # noqa: E402

# 우물(물 → 1, 6)과 뱀(6)만 들어 있는 꿈
WELL_AND_SNAKE_DREAM = "어두운 밤에 깊은 우물 속에서 커다란 뱀 한 마리가 나를 쳐다보고 있었다"
# 어떤 키워드도 들어 있지 않은 꿈
PLAIN_DREAM = "그냥 평범한 하루였고 특별한 일은 없었다고 생각했다"


class FakeDreamAnalyzer(DreamAnalyzer):
    """정해진 결과(또는 예외)를 돌려주는 분석기"""

    def __init__(self, interpretation: DreamInterpretation = None, error: Exception = None):
        self.interpretation = interpretation or DreamInterpretation(
            classifications=[ClassificationItem(category='오행 - 수', confidence=80, reason='우물과 물의 기운')],
            story='🐍 우물 속 뱀이 선비에게 길을 알려 주었다.',
            greek_myth_story='🌊 포세이돈의 샘에서 뱀이 모습을 드러냈다.',
            dream_numbers=[10, 25],
        )
        self.error = error
        self.requests = []

    async def analyze(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.interpretation


@pytest.fixture
def fake_analyzer():
    return FakeDreamAnalyzer()


@pytest.fixture
def app():
    from api.main import app
    return app


@pytest.fixture
def client(app, fake_analyzer):
    """가짜 분석기를 주입한 테스트 클라이언트"""
    from fastapi.testclient import TestClient
    from api.main import get_analysis_service

    app.dependency_overrides[get_analysis_service] = lambda: DreamAnalysisService(analyzer=fake_analyzer)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def dream_payload():
    return {
        "dream_text": WELL_AND_SNAKE_DREAM,
        "birth_year": 1990,
    }
