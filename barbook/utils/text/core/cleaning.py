"""Text cleaning helpers."""

from __future__ import annotations

import math
import re
from typing import Any

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}


def is_non_empty(value: Any) -> bool:
    """공백 제거 후에도 내용이 있는 문자열인지"""
    return isinstance(value, str) and len(value.strip()) > 0


def escape_html(text: str) -> str:
    """HTML 템플릿에 삽입할 문자열 이스케이프"""
    return re.sub(r"[&<>\"']", lambda m: _HTML_ESCAPES[m.group(0)], text)


def normalize_search_term(text: str) -> str:
    """사용자 검색어 정규화 (소문자 + 공백 전부 제거)

    예: "Lime Juice" -> "limejuice"
    """
    return re.sub(r"\s+", "", text.lower())


def split_words(text: str) -> list[str]:
    """소문자 단어 목록 (단어 시작 매칭용)"""
    return [w for w in re.split(r"\s+", text.lower().strip()) if w]


def score_match(name: str, term: str) -> int:
    """단순 관련도 점수 (낮을수록 관련도 높음)

    - starts:     이름이 검색어로 시작하면 0, 아니면 100
    - word_start: 어느 단어든 검색어로 시작하면 0, 아니면 50
    - contains:   포함(공백 제거 비교 포함)이면 1, 아니면 200
    """
    n = name.lower()
    t = term.lower().strip()
    t_compact = normalize_search_term(t)
    words = split_words(n)

    starts = 0 if n.startswith(t) else 100
    word_start = 0 if any(w.startswith(t) for w in words) else 50
    contains = 1 if (t in n or t_compact in normalize_search_term(n)) else 200

    return starts + word_start + contains


def _to_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def format_price(value: Any) -> str:
    """가격 표시: "$12.00", 값이 없거나 숫자가 아니면 "—" """
    number = _to_number(value)
    if number is None:
        return "—"
    return f"${number:.2f}"


def normalize_amount(value: Any) -> str:
    """분량 표시: 정수면 소수점 없이, 아니면 불필요한 0 제거

    예: 2.0 -> "2", 0.75 -> "0.75", "splash" -> "splash"
    """
    number = _to_number(value)
    if number is None:
        return "" if value is None else str(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)
