"""꿈해석 텍스트 리포트와 로또 용지 이미지 생성"""
from typing import List, Optional, Sequence
from PIL import Image, ImageDraw, ImageFont
import io
import os
import logging

from dream_lotto.models import GENDER_LABELS, DreamAnalysisRequest, DreamAnalysisResult

logger = logging.getLogger(__name__)

# 한국 로또 공 색상 (번호 구간별)
BALL_COLORS = [
    (10, (251, 196, 0)),    # 1-10 노랑
    (20, (105, 200, 242)),  # 11-20 파랑
    (30, (255, 114, 114)),  # 21-30 빨강
    (40, (170, 170, 170)),  # 31-40 회색
    (45, (176, 216, 64)),   # 41-45 초록
]

FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
    "C:/Windows/Fonts/arialbd.ttf",  # Windows
]

SEPARATOR = "━" * 40


def ball_color(number: int):
    """번호 구간에 맞는 공 색상"""
    for upper, color in BALL_COLORS:
        if number <= upper:
            return color
    return BALL_COLORS[-1][1]


def confidence_bar(confidence: int, width: int = 10) -> str:
    """신뢰도를 막대로 표시"""
    filled = round(confidence / 100 * width)
    return "█" * filled + "░" * (width - filled)


class ReportGenerator:
    """꿈해석 결과 텍스트/이미지 리포트 생성기"""

    def generate_text_report(self, request: DreamAnalysisRequest, result: DreamAnalysisResult) -> str:
        """텍스트 리포트 생성"""
        report = f"""
╔════════════════════════════════════════╗
║         꿈해몽 로또 리포트             ║
╚════════════════════════════════════════╝

📅 출생년도: {request.birth_year}년 ({result.zodiac_name}띠)
"""
        if request.birth_month_day:
            report += f"🗓 출생월일: {request.birth_month_day}\n"
        if request.birth_time:
            report += f"⏰ 출생시각: {request.birth_time}\n"
        if request.gender in GENDER_LABELS:
            report += f"👤 성별: {GENDER_LABELS[request.gender]}\n"

        report += f"\n{SEPARATOR}\n\n☯️ 음양오행 분류:\n\n"
        for item in result.classifications:
            report += f"• {item.category} {confidence_bar(item.confidence)} {item.confidence}%\n"
            report += f"  {item.reason}\n"

        report += f"\n{SEPARATOR}\n\n🐉 동양 판타지 이야기:\n\n{result.story}\n"
        report += f"\n{SEPARATOR}\n\n⚡ 그리스 신화 이야기:\n\n{result.greek_myth_story}\n"

        report += f"\n{SEPARATOR}\n\n🎱 로또 번호: {' '.join(f'{n:02d}' for n in result.lotto_numbers)}\n\n"
        report += self._format_explanations(result.lotto_numbers, result.number_explanations)

        report += f"\n{SEPARATOR}\n"
        report += "✨ 리포트는 자동으로 생성되었습니다\n"

        return report

    def _format_explanations(self, numbers: Sequence[int], explanations: Sequence[str]) -> str:
        return "".join(
            f"  {number:2d} ← {explanation}\n"
            for number, explanation in zip(numbers, explanations)
        )

    def _load_font(self, size: int):
        for path in FONT_PATHS:
            if os.path.exists(path):
                try:
                    return ImageFont.truetype(path, size)
                except OSError as e:
                    logger.warning(f"폰트를 불러올 수 없음 {path}: {e}")
        return ImageFont.load_default()

    def generate_visual_ticket(self, numbers: List[int], label: Optional[str] = "DREAM LOTTO") -> bytes:
        """로또 번호 6개를 색깔 공으로 그린 PNG 이미지"""
        ball_size = 90
        margin = 20
        label_height = 40 if label else 0
        width = margin + len(numbers) * (ball_size + margin)
        height = ball_size + margin * 2 + label_height

        img = Image.new('RGB', (width, height), color='white')
        draw = ImageDraw.Draw(img)
        font = self._load_font(40)

        for i, number in enumerate(numbers):
            x = margin + i * (ball_size + margin)
            y = margin
            draw.ellipse([x, y, x + ball_size, y + ball_size],
                         fill=ball_color(number), outline=(60, 60, 60), width=2)

            text = str(number)
            bbox = draw.textbbox((0, 0), text, font=font)
            text_width = bbox[2] - bbox[0]
            text_height = bbox[3] - bbox[1]
            draw.text(
                (x + (ball_size - text_width) // 2 - bbox[0], y + (ball_size - text_height) // 2 - bbox[1]),
                text,
                fill=(255, 255, 255),
                font=font
            )

        if label:
            label_font = self._load_font(20)
            bbox = draw.textbbox((0, 0), label, font=label_font)
            draw.text(
                ((width - (bbox[2] - bbox[0])) // 2, ball_size + margin * 2),
                label,
                fill=(0, 0, 0),
                font=label_font
            )

        img_bytes = io.BytesIO()
        img.save(img_bytes, format='PNG')
        return img_bytes.getvalue()
