"""PDF 리포트 생성"""
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from xml.sax.saxutils import escape
from io import BytesIO

from dream_lotto.models import GENDER_LABELS, DreamAnalysisRequest, DreamAnalysisResult
from .generator import ball_color

# reportlab 내장 한글 CID 폰트
KOREAN_FONT = 'HYGothic-Medium'


def _register_fonts():
    if KOREAN_FONT not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(UnicodeCIDFont(KOREAN_FONT))


def _pdf_text(text: str) -> str:
    """Paragraph용 문자열: 마크업 이스케이프, CID 폰트에 없는 BMP 밖 문자(이모티콘) 제거"""
    return escape(''.join(ch for ch in text if ord(ch) <= 0xFFFF))


class PDFGenerator:
    """꿈해석 PDF 리포트 생성기"""

    def __init__(self):
        _register_fonts()
        self.styles = getSampleStyleSheet()
        self._setup_styles()

    def _setup_styles(self):
        """스타일 설정"""
        self.styles.add(ParagraphStyle(
            name='DreamTitle',
            parent=self.styles['Heading1'],
            fontName=KOREAN_FONT,
            fontSize=24,
            textColor=colors.HexColor('#2C3E50'),
            spaceAfter=30,
            alignment=TA_CENTER
        ))

        self.styles.add(ParagraphStyle(
            name='DreamHeading',
            parent=self.styles['Heading2'],
            fontName=KOREAN_FONT,
            fontSize=16,
            textColor=colors.HexColor('#34495E'),
            spaceAfter=12,
            spaceBefore=12
        ))

        self.styles.add(ParagraphStyle(
            name='DreamBody',
            parent=self.styles['Normal'],
            fontName=KOREAN_FONT,
            fontSize=11,
            leading=16,
            textColor=colors.HexColor('#2C3E50'),
            alignment=TA_JUSTIFY,
            spaceAfter=6
        ))

    def generate_pdf(self, request: DreamAnalysisRequest, result: DreamAnalysisResult) -> bytes:
        """PDF 리포트 생성"""
        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4)
        story = []

        story.append(Paragraph("꿈해몽 로또 리포트", self.styles['DreamTitle']))
        story.append(Spacer(1, 10*mm))

        user_info = f"출생년도: {request.birth_year}년 ({result.zodiac_name}띠)<br/>"
        if request.birth_month_day:
            user_info += f"출생월일: {_pdf_text(request.birth_month_day)}<br/>"
        if request.birth_time:
            user_info += f"출생시각: {_pdf_text(request.birth_time)}<br/>"
        if request.gender in GENDER_LABELS:
            user_info += f"성별: {GENDER_LABELS[request.gender]}<br/>"
        story.append(Paragraph(user_info, self.styles['DreamBody']))
        story.append(Spacer(1, 10*mm))

        # 로또 번호
        story.append(Paragraph("로또 번호", self.styles['DreamHeading']))
        story.append(self._numbers_table(result.lotto_numbers))
        story.append(Spacer(1, 5*mm))
        for number, explanation in zip(result.lotto_numbers, result.number_explanations):
            story.append(Paragraph(f"{number} : {_pdf_text(explanation)}", self.styles['DreamBody']))
        story.append(Spacer(1, 10*mm))

        # 분류
        story.append(Paragraph("음양오행 분류", self.styles['DreamHeading']))
        classification_data = [['분류', '신뢰도', '이유']] + [
            [Paragraph(_pdf_text(item.category), self.styles['DreamBody']),
             f"{item.confidence}%",
             Paragraph(_pdf_text(item.reason), self.styles['DreamBody'])]
            for item in result.classifications
        ]
        classification_table = Table(classification_data, colWidths=[45*mm, 25*mm, 110*mm])
        classification_table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#3498DB')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('FONTNAME', (0, 0), (-1, -1), KOREAN_FONT),
            ('FONTSIZE', (0, 0), (-1, 0), 12),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 8),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('GRID', (0, 0), (-1, -1), 1, colors.black),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#ECF0F1')])
        ]))
        story.append(classification_table)
        story.append(Spacer(1, 10*mm))

        # 이야기
        story.append(Paragraph("동양 판타지 이야기", self.styles['DreamHeading']))
        story.append(Paragraph(_pdf_text(result.story), self.styles['DreamBody']))
        story.append(Paragraph("그리스 신화 이야기", self.styles['DreamHeading']))
        story.append(Paragraph(_pdf_text(result.greek_myth_story), self.styles['DreamBody']))

        story.append(Spacer(1, 20*mm))
        story.append(Paragraph("리포트는 자동으로 생성되었습니다", self.styles['DreamBody']))

        doc.build(story)
        buffer.seek(0)
        return buffer.getvalue()

    def _numbers_table(self, numbers) -> Table:
        table = Table([[str(n) for n in numbers]], colWidths=[25*mm] * len(numbers))
        style = [
            ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('FONTNAME', (0, 0), (-1, -1), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 20),
            ('TEXTCOLOR', (0, 0), (-1, -1), colors.white),
            ('TOPPADDING', (0, 0), (-1, -1), 12),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 12),
            ('GRID', (0, 0), (-1, -1), 2, colors.white),
        ]
        for col, number in enumerate(numbers):
            r, g, b = ball_color(number)
            style.append(('BACKGROUND', (col, 0), (col, 0), colors.Color(r / 255, g / 255, b / 255)))
        table.setStyle(TableStyle(style))
        return table


def generate_pdf_report(request: DreamAnalysisRequest, result: DreamAnalysisResult) -> bytes:
    """PDF 생성 헬퍼"""
    generator = PDFGenerator()
    return generator.generate_pdf(request, result)
