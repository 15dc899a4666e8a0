"""Fuzzy search helpers (오타/부분 입력 허용 검색).

점수 규칙 (0~1):
- 정규화 후 완전 일치: 1.0
- 한쪽이 다른 쪽을 포함: 0.8 (고정 보너스, 거리 기반 아님)
- 그 외: 1 - levenshtein / max(len)

포함 보너스가 편집거리 점수보다 우선한다는 점을 호출부(재료 매칭)가
전제로 하므로 분기 순서와 상수를 바꾸지 말 것.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Sequence, TypeVar

from rapidfuzz.distance import Levenshtein

T = TypeVar("T")

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class FuzzySearchOptions:
    """퍼지 검색 옵션

    Attributes:
        threshold: 결과에 포함될 최소 점수 (높을수록 엄격)
        case_sensitive: 대소문자 구분 여부
        normalize: 악센트/특수문자 제거 및 공백 정리 여부
    """

    threshold: float = 0.3
    case_sensitive: bool = False
    normalize: bool = True


DEFAULT_OPTIONS = FuzzySearchOptions()


@dataclass
class FuzzyMatch(Generic[T]):
    """검색 결과 (item, 점수, 점수를 만든 텍스트)"""

    item: T
    score: float
    matched_text: str


def normalize_string(text: str, lowercase: bool = True) -> str:
    """비교용 문자열 정규화

    예: "  Limé-Juice!! " -> "limejuice"
    """
    if lowercase:
        text = text.lower()
    text = unicodedata.normalize("NFD", text)
    text = _COMBINING_MARKS.sub("", text)
    text = _NON_WORD.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def levenshtein_distance(a: str, b: str) -> int:
    """편집거리 (삽입/삭제/치환 비용 모두 1)"""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str, options: Optional[FuzzySearchOptions] = None) -> float:
    """두 문자열의 유사도 (0~1)"""
    opts = options or DEFAULT_OPTIONS

    s1, s2 = a, b
    if not opts.case_sensitive:
        s1 = s1.lower()
        s2 = s2.lower()

    if opts.normalize:
        s1 = normalize_string(s1, lowercase=not opts.case_sensitive)
        s2 = normalize_string(s2, lowercase=not opts.case_sensitive)

    if not s1 and not s2:
        return 0.0

    if s1 == s2:
        return 1.0

    if s2 in s1 or s1 in s2:
        return 0.8

    max_length = max(len(s1), len(s2))
    return 1 - (levenshtein_distance(s1, s2) / max_length)


def fuzzy_search(
    items: Iterable[T],
    query: str,
    extract_text: Callable[[T], str],
    options: Optional[FuzzySearchOptions] = None,
) -> list[FuzzyMatch[T]]:
    """항목 목록에서 query와 유사한 항목을 점수 내림차순으로 반환

    빈 검색어는 임계값과 무관하게 항상 빈 결과.
    """
    if not query.strip():
        return []

    opts = options or DEFAULT_OPTIONS
    results: list[FuzzyMatch[T]] = []

    for item in items:
        text = extract_text(item)
        score = similarity(query, text, opts)
        if score >= opts.threshold:
            results.append(FuzzyMatch(item=item, score=score, matched_text=text))

    # sort는 stable → 동점은 입력 순서 유지
    results.sort(key=lambda r: r.score, reverse=True)
    return results


def fuzzy_search_multi(
    items: Iterable[T],
    query: str,
    extract_texts: Callable[[T], Sequence[str]],
    options: Optional[FuzzySearchOptions] = None,
) -> list[FuzzyMatch[T]]:
    """여러 텍스트 필드(이름 + 별칭 등) 중 최고 점수로 항목을 평가"""
    if not query.strip():
        return []

    opts = options or DEFAULT_OPTIONS
    results: list[FuzzyMatch[T]] = []

    for item in items:
        best_score = 0.0
        best_text = ""
        for text in extract_texts(item):
            score = similarity(query, text, opts)
            if score > best_score:
                best_score = score
                best_text = text

        if best_score >= opts.threshold:
            results.append(FuzzyMatch(item=item, score=best_score, matched_text=best_text))

    results.sort(key=lambda r: r.score, reverse=True)
    return results


def fuzzy_search_strings(
    items: Iterable[str],
    query: str,
    options: Optional[FuzzySearchOptions] = None,
) -> list[FuzzyMatch[str]]:
    """문자열 목록 전용 단축 함수"""
    return fuzzy_search(items, query, lambda item: item, options)


def is_fuzzy_match(query: str, target: str, threshold: float = 0.6) -> bool:
    """query가 target과 threshold 이상 유사한지"""
    return similarity(query, target) >= threshold
