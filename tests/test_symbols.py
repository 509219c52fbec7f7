"""꿈 키워드 → 상징 숫자 매핑 테스트"""

import pytest

from dream_lotto import NumberDeriver, extract_symbol_candidates, extract_symbols, symbol_name

from conftest import PLAIN_DREAM, WELL_AND_SNAKE_DREAM


class TestExtractSymbols:
    def test_well_and_snake(self):
        # 물 그룹(1, 6)과 뱀(6)이 합쳐져 중복 없이 1, 6
        assert extract_symbols(WELL_AND_SNAKE_DREAM) == [1, 6]

    def test_no_keywords(self):
        assert extract_symbols(PLAIN_DREAM) == []

    def test_empty_text(self):
        assert extract_symbols("") == []

    def test_table_order(self):
        assert extract_symbols("호랑이가 불타는 집으로 들어갔다") == [9, 8, 3]

    def test_duplicate_groups_collapse(self):
        # 집(8)과 돈(8)
        assert extract_symbols("집에서 돈을 주웠다") == [8]

    def test_animal_positions(self):
        assert extract_symbols("돼지") == [12]
        assert extract_symbols("원숭이") == [9]

    def test_deterministic(self):
        text = "하늘을 나는 용과 바다의 뱀"
        assert extract_symbols(text) == extract_symbols(text)


class TestSymbolCandidates:
    def test_labels_follow_first_group(self):
        candidates = extract_symbol_candidates(WELL_AND_SNAKE_DREAM)
        assert [(c.number, c.label) for c in candidates] == [(1, '물'), (6, '물')]

    def test_animal_label(self):
        candidates = extract_symbol_candidates("토끼")
        assert [(c.number, c.label) for c in candidates] == [(4, '토끼')]

    def test_house_and_money_share_name(self):
        assert [(c.number, c.label) for c in extract_symbol_candidates("집 안에서 돈을 주웠다")] == [(8, '집/돈')]
        assert [(c.number, c.label) for c in extract_symbol_candidates("금반지")] == [(8, '집/돈')]


class TestSymbolName:
    @pytest.mark.parametrize("number, name", [
        (1, '물'),
        (6, '물'),
        (3, '길'),
        (4, '떨어짐'),
        (7, '하늘/비행'),
        (8, '집/돈'),
        (9, '불'),
        (10, '죽음'),
        (2, '상징 2'),
        (45, '상징 45'),
    ])
    def test_names(self, number, name):
        assert symbol_name(number) == name

    def test_explanation_uses_symbol_name(self):
        candidates = NumberDeriver().build_candidates(1990, "집에 들어가는 꿈을 꾸었다")
        assert candidates[5] == (8, '꿈 상징 숫자 1 (집/돈)')
        assert candidates[6][1].startswith('꿈 상징 숫자 변형 (8 × 2')
