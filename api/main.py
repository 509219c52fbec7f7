"""FastAPI 애플리케이션"""
from fastapi import FastAPI, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field
import io
import logging

from config import settings
from dream_analysis import DreamAnalysisError, DreamAnalysisService
from dream_lotto import NumberDeriver
from dream_lotto.models import DreamAnalysisRequest, DreamAnalysisResult
from reports import ReportGenerator, PDFGenerator

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.DEBUG if settings.debug else logging.INFO
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="꿈해몽 로또 API",
    description="꿈을 음양오행으로 해석하고 로또 번호를 생성하는 API",
    version="1.0.0"
)

# 초기화
deriver = NumberDeriver()
report_generator = ReportGenerator()
_analysis_service: Optional[DreamAnalysisService] = None


def get_analysis_service() -> DreamAnalysisService:
    """꿈해석 서비스 (첫 요청 시 생성)"""
    global _analysis_service
    if _analysis_service is None:
        _analysis_service = DreamAnalysisService(deriver=deriver)
    return _analysis_service


# 요청 모델
class DreamRequest(BaseModel):
    dream_text: str
    birth_year: int
    birth_month_day: Optional[str] = None
    birth_time: Optional[str] = None
    gender: Optional[str] = None

    def to_analysis_request(self) -> DreamAnalysisRequest:
        return DreamAnalysisRequest(**self.model_dump())


class LottoRequest(DreamRequest):
    dream_numbers: Optional[List[int]] = Field(default=None, max_length=5)


def validate_dream_request(dream_text: str, birth_year: int):
    """입력 검증 (실패 시 400)"""
    if not dream_text or len(dream_text.strip()) < settings.dream_text_min_length:
        raise HTTPException(
            status_code=400,
            detail=f"꿈 내용은 최소 {settings.dream_text_min_length}자 이상 입력해주세요."
        )
    if len(dream_text) > settings.dream_text_max_length:
        raise HTTPException(
            status_code=400,
            detail=f"꿈 내용은 {settings.dream_text_max_length}자 이하로 입력해주세요."
        )
    if birth_year < settings.min_birth_year or birth_year > date.today().year:
        raise HTTPException(status_code=400, detail="올바른 출생년도를 입력해주세요.")


async def run_analysis(request: DreamRequest, service: DreamAnalysisService) -> DreamAnalysisResult:
    validate_dream_request(request.dream_text, request.birth_year)
    try:
        return await service.analyze(request.to_analysis_request())
    except DreamAnalysisError as e:
        logger.error(f"꿈해석 실패 ({e.status_code}): {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"꿈해석 API 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"오류가 발생했습니다: {e}")


# API endpoints
@app.get("/")
async def root():
    """루트 endpoint"""
    return {
        "message": "꿈해몽 로또 API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.post("/api/dream-analysis")
async def analyze_dream(request: DreamRequest,
                        service: DreamAnalysisService = Depends(get_analysis_service)):
    """꿈해석 및 로또 번호 생성"""
    result = await run_analysis(request, service)
    return {
        "success": True,
        "data": result.model_dump()
    }


@app.post("/api/dream-analysis/report")
async def analyze_dream_report(request: DreamRequest,
                               service: DreamAnalysisService = Depends(get_analysis_service)):
    """꿈해석 결과와 텍스트 리포트"""
    result = await run_analysis(request, service)
    report = report_generator.generate_text_report(request.to_analysis_request(), result)
    return {
        "success": True,
        "report": report,
        "data": result.model_dump()
    }


@app.post("/api/dream-analysis/pdf")
async def analyze_dream_pdf(request: DreamRequest,
                            service: DreamAnalysisService = Depends(get_analysis_service)):
    """꿈해석 PDF 리포트"""
    result = await run_analysis(request, service)
    try:
        pdf = PDFGenerator().generate_pdf(request.to_analysis_request(), result)
    except Exception as e:
        logger.error(f"PDF 생성 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"PDF 생성 중 오류가 발생했습니다: {e}")

    return StreamingResponse(
        io.BytesIO(pdf),
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=dream_report.pdf"}
    )


@app.post("/api/lotto")
async def generate_lotto(request: LottoRequest):
    """AI 분석 없이 로또 번호만 생성"""
    validate_dream_request(request.dream_text, request.birth_year)
    result = deriver.derive(
        request.birth_year,
        request.dream_text,
        request.dream_numbers,
        request.birth_month_day,
        request.birth_time
    )
    return {
        "success": True,
        "data": result.model_dump()
    }


@app.get("/api/lotto/visual")
async def generate_lotto_visual(
    birth_year: int,
    dream_text: str,
    birth_month_day: Optional[str] = None,
    birth_time: Optional[str] = None,
    dream_numbers: Optional[List[int]] = Query(None)
):
    """로또 번호 이미지"""
    validate_dream_request(dream_text, birth_year)
    result = deriver.derive(birth_year, dream_text, dream_numbers, birth_month_day, birth_time)
    visual = report_generator.generate_visual_ticket(result.numbers)

    return StreamingResponse(
        io.BytesIO(visual),
        media_type="image/png",
        headers={"Content-Disposition": "attachment; filename=lotto.png"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
