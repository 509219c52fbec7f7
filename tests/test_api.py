"""API endpoint 테스트"""

from datetime import date

import pytest

from dream_analysis import LLMQuotaError

from conftest import WELL_AND_SNAKE_DREAM


class TestRoot:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["version"] == "1.0.0"


class TestDreamAnalysis:
    def test_success(self, client, dream_payload, fake_analyzer):
        response = client.post("/api/dream-analysis", json=dream_payload)
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["lotto_numbers"] == [1, 10, 20, 22, 25, 39]
        assert len(data["number_explanations"]) == 6
        assert data["zodiac_name"] == "말"
        assert data["classifications"][0]["category"] == "오행 - 수"
        assert fake_analyzer.requests[0].birth_year == 1990

    def test_passes_optional_fields(self, client, dream_payload, fake_analyzer):
        payload = dict(dream_payload, birth_month_day="1990-05-15", birth_time="07:30", gender="male")
        assert client.post("/api/dream-analysis", json=payload).status_code == 200
        request = fake_analyzer.requests[0]
        assert (request.birth_month_day, request.birth_time, request.gender) == ("1990-05-15", "07:30", "male")

    @pytest.mark.parametrize("overrides", [
        {"dream_text": "짧은 꿈"},
        {"dream_text": "      공백만 많은 꿈       "},
        {"dream_text": "꿈" * 2001},
        {"birth_year": 1899},
        {"birth_year": date.today().year + 1},
    ])
    def test_validation(self, client, dream_payload, fake_analyzer, overrides):
        response = client.post("/api/dream-analysis", json=dict(dream_payload, **overrides))
        assert response.status_code == 400
        assert fake_analyzer.requests == []

    def test_llm_error_status(self, client, dream_payload, fake_analyzer):
        fake_analyzer.error = LLMQuotaError()
        response = client.post("/api/dream-analysis", json=dream_payload)
        assert response.status_code == 429
        assert response.json()["detail"] == LLMQuotaError.default_message

    def test_unexpected_error(self, client, dream_payload, fake_analyzer):
        fake_analyzer.error = RuntimeError("unexpected")
        response = client.post("/api/dream-analysis", json=dream_payload)
        assert response.status_code == 500
        assert "unexpected" in response.json()["detail"]


class TestDreamReports:
    def test_text_report(self, client, dream_payload):
        response = client.post("/api/dream-analysis/report", json=dream_payload)
        assert response.status_code == 200
        body = response.json()
        assert "1990년 (말띠)" in body["report"]
        assert "01 10 20 22 25 39" in body["report"]
        assert body["data"]["lotto_numbers"] == [1, 10, 20, 22, 25, 39]

    def test_pdf_report(self, client, dream_payload):
        response = client.post("/api/dream-analysis/pdf", json=dream_payload)
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")


class TestLotto:
    def test_keyword_fallback(self, client, dream_payload):
        response = client.post("/api/lotto", json=dream_payload)
        assert response.status_code == 200
        assert response.json()["data"]["numbers"] == [1, 3, 20, 22, 25, 39]

    def test_with_dream_numbers(self, client, dream_payload):
        response = client.post("/api/lotto", json=dict(dream_payload, dream_numbers=[10, 25]))
        data = response.json()["data"]
        assert data["numbers"] == [1, 10, 20, 22, 25, 39]
        assert data["explanations"][1] == "꿈 상징 숫자 1 (AI 분석 숫자)"

    def test_validation(self, client, dream_payload):
        response = client.post("/api/lotto", json=dict(dream_payload, birth_year=1800))
        assert response.status_code == 400

    def test_too_many_dream_numbers(self, client, dream_payload):
        response = client.post("/api/lotto", json=dict(dream_payload, dream_numbers=list(range(1, 21))))
        assert response.status_code == 422

    def test_visual(self, client):
        response = client.get("/api/lotto/visual", params={
            "birth_year": 1990,
            "dream_text": WELL_AND_SNAKE_DREAM,
            "dream_numbers": [10, 25],
        })
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.content.startswith(b"\x89PNG")
