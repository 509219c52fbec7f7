"""꿈 상징과 생년월일시로 로또 번호 생성"""
from datetime import date, datetime
from typing import List, Optional, Sequence, Set, Tuple, Union
import logging

from .models import BirthProfile, DerivationOptions, LottoResult, SymbolCandidate
from .symbols import extract_symbol_candidates
from .zodiac import zodiac_index, decompose_year

logger = logging.getLogger(__name__)

MIN_NUMBER = 1
MAX_NUMBER = 45
PICK_COUNT = 6
MAX_ATTEMPTS = 45

AI_LABEL = 'AI 분석 숫자'
PADDING_LABEL = '보정 숫자'


def adjust_to_range(number: int) -> int:
    """숫자를 1-45 범위로 조정"""
    if number < MIN_NUMBER:
        return ((number % MAX_NUMBER) + MAX_NUMBER) % MAX_NUMBER + 1
    if number > MAX_NUMBER:
        return ((number - 1) % MAX_NUMBER) + 1
    return number


def parse_month_day(birth_month_day: Optional[Union[date, str]]) -> Tuple[int, int]:
    """생년월일에서 (월, 일) 추출. 없거나 잘못된 값이면 (1, 1)"""
    if not birth_month_day:
        return 1, 1
    if isinstance(birth_month_day, date):
        return birth_month_day.month, birth_month_day.day
    try:
        parsed = datetime.strptime(birth_month_day.strip(), '%Y-%m-%d')
    except (AttributeError, ValueError):
        logger.debug(f"출생월일을 해석할 수 없어 기본값 사용: {birth_month_day!r}")
        return 1, 1
    return parsed.month, parsed.day


def parse_time(birth_time: Optional[str]) -> Tuple[int, int]:
    """출생시각에서 (시, 분) 추출. 없거나 잘못된 값이면 (12, 0)"""
    if not birth_time:
        return 12, 0
    try:
        hour_part, minute_part = birth_time.strip().split(':')[:2]
        hour, minute = int(hour_part), int(minute_part)
    except (AttributeError, ValueError):
        logger.debug(f"출생시각을 해석할 수 없어 기본값 사용: {birth_time!r}")
        return 12, 0
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return 12, 0
    return hour, minute


class NumberDeriver:
    """생년월일시와 꿈 상징 숫자로 로또 번호 6개를 만드는 클래스"""

    # 중복 회피와 보정에 쓰는 이동 간격
    COLLISION_STEP = 7
    PADDING_STEP = 11
    PADDING_DEFAULT_AVERAGE = 23

    def resolve_options(self, birth_month_day=None, birth_time=None) -> DerivationOptions:
        """선택 입력값을 기본값과 함께 한 번에 정리"""
        month, day = parse_month_day(birth_month_day)
        hour, minute = parse_time(birth_time)
        return DerivationOptions(month=month, day=day, hour=hour, minute=minute)

    def resolve_symbols(self, dream_text: str,
                        model_numbers: Optional[Sequence[int]] = None) -> List[SymbolCandidate]:
        """AI 추출 숫자가 있으면 그것을, 없으면 키워드 매핑 결과를 사용"""
        if model_numbers:
            return [
                SymbolCandidate(number=n, label=AI_LABEL)
                for n in model_numbers if MIN_NUMBER <= n <= MAX_NUMBER
            ]
        logger.debug("AI 추출 숫자가 없어 키워드 매핑 사용")
        return extract_symbol_candidates(dream_text)

    def derive_for_profile(self, profile: BirthProfile, dream_text: str,
                           model_numbers: Optional[Sequence[int]] = None) -> LottoResult:
        return self.derive(profile.year, dream_text, model_numbers, profile.month_day, profile.time)

    def derive(self, birth_year: int, dream_text: str,
               model_numbers: Optional[Sequence[int]] = None,
               birth_month_day: Optional[Union[date, str]] = None,
               birth_time: Optional[str] = None) -> LottoResult:
        """로또 번호 6개(오름차순)와 설명 생성"""
        candidates = self.build_candidates(
            birth_year, dream_text, model_numbers, birth_month_day, birth_time
        )
        accepted = self.deduplicate(candidates)
        self.fill_missing(accepted)

        accepted.sort(key=lambda pair: pair[0])
        return LottoResult(
            numbers=[number for number, _ in accepted],
            explanations=[explanation for _, explanation in accepted],
        )

    def build_candidates(self, birth_year: int, dream_text: str,
                         model_numbers: Optional[Sequence[int]] = None,
                         birth_month_day: Optional[Union[date, str]] = None,
                         birth_time: Optional[str] = None) -> List[Tuple[int, str]]:
        """규칙별 후보 번호 7개를 생성 순서대로 반환"""
        zodiac_number = zodiac_index(birth_year)
        digit_sum, last_two = decompose_year(birth_year)
        options = self.resolve_options(birth_month_day, birth_time)
        month, day, hour, minute = options.month, options.day, options.hour, options.minute
        symbols = self.resolve_symbols(dream_text, model_numbers)

        candidates: List[Tuple[int, str]] = []

        # 1. 띠 숫자 × 3 + 월
        zodiac_based = adjust_to_range(zodiac_number * 3 + month)
        candidates.append((zodiac_based,
                           f'띠 숫자 × 3 + 월 ({zodiac_number} × 3 + {month} = {zodiac_based})'))

        # 2. 출생년도 합 × 2 + 일
        year_sum_based = adjust_to_range(digit_sum * 2 + day)
        candidates.append((year_sum_based,
                           f'출생년도 합 × 2 + 일 ({digit_sum} × 2 + {day} = {year_sum_based})'))

        # 3. (끝 두 자리 × 월) % 45 + 1
        last_two_based = adjust_to_range((last_two * month) % 45 + 1)
        candidates.append((last_two_based,
                           f'출생년도 끝 두 자리 × 월 ({last_two} × {month} = {last_two_based})'))

        # 4. (년도 합 × 월 × 일) % 45 + 1
        date_combined = adjust_to_range((digit_sum * month * day) % 45 + 1)
        candidates.append((date_combined,
                           f'생년월일 조합 ({digit_sum} × {month} × {day} = {date_combined})'))

        # 5. (시 × 2 + 분) % 45 + 1
        time_based = adjust_to_range((hour * 2 + minute) % 45 + 1)
        candidates.append((time_based,
                           f'출생시각 ({hour}시 × 2 + {minute}분 = {time_based})'))

        # 6. 첫 번째 꿈 상징 숫자
        if symbols:
            first = adjust_to_range(symbols[0].number)
            candidates.append((first, f'꿈 상징 숫자 1 ({symbols[0].label})'))
        else:
            fallback = adjust_to_range((month * day + hour) % 45 + 1)
            candidates.append((fallback,
                               f'생년월일+시각 조합 ({month} × {day} + {hour} = {fallback})'))

        # 7. 두 번째 꿈 상징 숫자, 변형 숫자 또는 조정 숫자
        if len(symbols) > 1:
            second = adjust_to_range(symbols[1].number)
            candidates.append((second, f'꿈 상징 숫자 2 ({symbols[1].label})'))
        elif symbols:
            seed = symbols[0].number
            variant = adjust_to_range((seed * 2 + minute) % 45 + 1)
            candidates.append((variant,
                               f'꿈 상징 숫자 변형 ({seed} × 2 + {minute}분 = {variant})'))
        else:
            adjusted = self._difference_based(candidates)
            candidates.append((adjusted, f'조정 숫자 (차이값 기반: {adjusted})'))

        return candidates

    def _difference_based(self, candidates: List[Tuple[int, str]]) -> int:
        """지금까지 나온 숫자들의 합과 처음/마지막 차이로 조정 숫자 계산"""
        numbers = [number for number, _ in candidates]
        total = sum(numbers)
        diff = abs(numbers[0] - numbers[-1]) or 1
        return adjust_to_range((total % diff) + diff)

    def deduplicate(self, candidates: List[Tuple[int, str]]) -> List[Tuple[int, str]]:
        """생성 순서대로 중복을 피해 최대 6개 선택"""
        accepted: List[Tuple[int, str]] = []
        used: Set[int] = set()

        for number, explanation in candidates:
            if len(accepted) >= PICK_COUNT:
                break

            final = adjust_to_range(number)
            attempts = 0
            while final in used and attempts < MAX_ATTEMPTS:
                final = adjust_to_range((final + attempts * self.COLLISION_STEP + 1) % 45 + 1)
                attempts += 1

            if final not in used:
                accepted.append((final, explanation))
                used.add(final)

        return accepted

    def fill_missing(self, accepted: List[Tuple[int, str]]) -> List[Tuple[int, str]]:
        """6개가 안 되면 기존 숫자의 평균으로 보정 숫자 추가"""
        used = {number for number, _ in accepted}

        while len(accepted) < PICK_COUNT:
            count = len(accepted)
            average = sum(used) // count if count else self.PADDING_DEFAULT_AVERAGE
            candidate = adjust_to_range((average * 2 + count * 5) % 45 + 1)

            attempts = 0
            while candidate in used and attempts < MAX_ATTEMPTS:
                candidate = adjust_to_range((candidate + self.PADDING_STEP) % 45 + 1)
                attempts += 1

            if candidate in used:
                logger.warning(f"보정 숫자를 찾지 못함: {sorted(used)}")
                break

            accepted.append((candidate, PADDING_LABEL))
            used.add(candidate)

        return accepted


_default_deriver = NumberDeriver()


def derive_lotto_numbers(birth_year: int, dream_text: str,
                         model_numbers: Optional[Sequence[int]] = None,
                         birth_month_day: Optional[Union[date, str]] = None,
                         birth_time: Optional[str] = None) -> LottoResult:
    """기본 NumberDeriver로 로또 번호 생성"""
    return _default_deriver.derive(birth_year, dream_text, model_numbers, birth_month_day, birth_time)
