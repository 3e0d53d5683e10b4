"""Localized message catalog.

Rule ids, metric names and JSON keys never change with the locale; only the
human-readable text does. ``en`` is the default, ``ko`` the Korean
translation.
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import ConfigError
from .ranking import Rank
from .syntax import NodeKind

_EN: dict[str, str] = {
    "anonymous": "<anonymous>",
    # Rule violations
    "violation.loose-equality": "Use '{strict}' instead of '{operator}'",
    "violation.parameter-as-flag": "Do not use parameter '{name}' directly as a condition flag",
    "violation.magic-number": "Replace magic number '{value}' with a named constant",
    "violation.max-parameters": "Function '{name}' has {count} parameters (max {limit})",
    # Suggestions
    "suggest.hotspot": "{kind} in '{function}' at line {line} is nested {level} levels deep. Flatten it with early returns or guard clauses.",
    "suggest.hotspot.module": "{kind} at line {line} is nested {level} levels deep. Flatten it with early returns or guard clauses.",
    "suggest.deep-nesting": "Nesting depth is {depth}. Reduce it with early returns or guard clauses.",
    "suggest.long-function": "Function '{name}' is {length} lines long (lines {start}-{end}). Split it into smaller units of {limit} lines or fewer.",
    "suggest.cognitive": "Cognitive complexity is {complexity}. Split the logic into smaller functions to improve readability.",
    "suggest.loose-equality": "'==' or '!=' is used in {count} place(s). Replace them with '===' and '!=='.",
    "suggest.parameter-as-flag": "Parameters are used as flags in {count} place(s). Split the function or consider a strategy object.",
    "suggest.magic-number": "Found {count} magic number(s). Declare them as meaningfully named constants.",
    "suggest.max-parameters": "{count} function(s) take more than {limit} parameters. Group them into an options object.",
    "suggest.clean": "The code is clean! Keep it this way.",
    # Rank descriptions
    "rank.S": "Perfect - clean, easy to understand code",
    "rank.A": "Excellent - highly readable and maintainable",
    "rank.B": "Good - some room for improvement",
    "rank.C": "Caution - complexity or style needs work",
    "rank.D": "Poor - refactoring recommended",
    "rank.F": "Critical - refactoring required urgently",
    # Construct labels
    "kind.if_statement": "if statement",
    "kind.conditional_expression": "ternary expression",
    "kind.switch_case": "switch case",
    "kind.for_statement": "for loop",
    "kind.for_in_statement": "for...in loop",
    "kind.for_of_statement": "for...of loop",
    "kind.while_statement": "while loop",
    "kind.do_while_statement": "do...while loop",
    "kind.catch_clause": "catch clause",
    # Report text
    "report.title": "Style Rank Analysis Result",
    "report.rank": "Rank: {rank} ({description})",
    "report.overall": "Overall rank",
    "report.complexity": "Complexity",
    "report.composite": "Composite score",
    "report.cyclomatic": "Cyclomatic complexity",
    "report.cognitive": "Cognitive complexity",
    "report.nesting": "Max nesting depth",
    "report.length-penalty": "Length penalty",
    "report.hotspots": "Complexity hotspots",
    "report.long-functions": "Long functions",
    "report.violations": "Clean code violations ({count})",
    "report.suggestions": "Suggestions",
    "report.no-violations": "No violations",
    "report.more": "... and {count} more",
    "report.show-more": "Show more",
    "report.summary": "{count} file(s) analyzed",
    "report.file": "File",
    "report.rank-column": "Rank",
    "report.violations-column": "Violations",
    "report.lines": "{count} lines",
    "report.line": "Line {line}",
    "report.line-range": "Line {start}-{end}",
    "report.nesting-level": "nesting level {level}",
    "report.flatten-hint": "Reduce nesting with early returns",
    "report.split-hint": "Split the function into {limit} lines or fewer",
    "report.clean": "The code is clean!",
    "report.clean-detail": "Nothing to improve",
    "status.tooltip": "Cyclomatic complexity: {complexity} (grade {grade})\n{description}",
}

_KO: dict[str, str] = {
    "anonymous": "익명 함수",
    "violation.loose-equality": "'{operator}' 대신 '{strict}'를 사용하세요",
    "violation.parameter-as-flag": "파라미터 '{name}'를 조건문 플래그로 직접 사용하지 마세요",
    "violation.magic-number": "매직 넘버 '{value}' 대신 상수를 사용하세요",
    "violation.max-parameters": "함수 '{name}'의 파라미터가 {count}개입니다 (최대 {limit}개)",
    "suggest.hotspot": "{kind} ('{function}' 함수, Line {line}) - 중첩 레벨 {level}. Early return 패턴이나 Guard Clause로 중첩을 줄이세요.",
    "suggest.hotspot.module": "{kind} (Line {line}) - 중첩 레벨 {level}. Early return 패턴이나 Guard Clause로 중첩을 줄이세요.",
    "suggest.deep-nesting": "중첩 깊이가 {depth}입니다. Early return 패턴이나 Guard Clause로 개선하세요.",
    "suggest.long-function": "함수 '{name}'의 길이가 {length}줄입니다 (Line {start}-{end}). {limit}줄 이하의 작은 단위로 분리하세요.",
    "suggest.cognitive": "인지 복잡도가 {complexity}입니다. 로직을 작은 함수로 분리하여 가독성을 높여주세요.",
    "suggest.loose-equality": "'==' 연산자를 {count}곳에서 사용 중입니다. 모두 '==='로 변경해주세요.",
    "suggest.parameter-as-flag": "파라미터 플래그를 {count}곳에서 사용 중입니다. 함수를 분리하거나 전략 패턴을 고려해주세요.",
    "suggest.magic-number": "매직 넘버가 {count}개 발견되었습니다. 의미 있는 상수명으로 선언해주세요.",
    "suggest.max-parameters": "{count}개 함수의 파라미터가 {limit}개를 초과합니다. 객체로 그룹화 해주세요.",
    "suggest.clean": "코드가 깔끔합니다! 현재 상태를 유지하세요.",
    "rank.S": "완벽 - 클린하고 이해하기 쉬운 코드",
    "rank.A": "우수 - 가독성과 유지보수성이 높은 코드",
    "rank.B": "양호 - 약간의 개선 여지가 있는 코드",
    "rank.C": "주의 - 복잡도 또는 코드 스타일 개선 필요",
    "rank.D": "나쁨 - 즉시 리팩토링 권장",
    "rank.F": "위험 - 긴급 리팩토링 필수",
    "kind.if_statement": "if문",
    "kind.conditional_expression": "삼항 연산자",
    "kind.switch_case": "switch case",
    "kind.for_statement": "for문",
    "kind.for_in_statement": "for...in문",
    "kind.for_of_statement": "for...of문",
    "kind.while_statement": "while문",
    "kind.do_while_statement": "do...while문",
    "kind.catch_clause": "catch절",
    "report.title": "Style Rank 분석 결과",
    "report.rank": "등급: {rank} ({description})",
    "report.overall": "종합 등급",
    "report.complexity": "복잡도 분석",
    "report.composite": "CCS",
    "report.cyclomatic": "순환 복잡도",
    "report.cognitive": "인지 복잡도",
    "report.nesting": "최대 중첩 깊이",
    "report.length-penalty": "길이 페널티",
    "report.hotspots": "복잡도 핫스팟",
    "report.long-functions": "긴 함수",
    "report.violations": "클린 코드 위반 ({count}건)",
    "report.suggestions": "개선 제안",
    "report.no-violations": "위반 사항 없음",
    "report.more": "... 외 {count}건",
    "report.show-more": "더 보기",
    "report.summary": "파일 {count}개 분석",
    "report.file": "파일",
    "report.rank-column": "등급",
    "report.violations-column": "위반",
    "report.lines": "{count}줄",
    "report.line": "Line {line}",
    "report.line-range": "Line {start}-{end}",
    "report.nesting-level": "중첩 레벨 {level}",
    "report.flatten-hint": "Early return 패턴을 사용하여 중첩을 줄이세요",
    "report.split-hint": "함수를 {limit}줄 이하로 분리하세요",
    "report.clean": "코드가 깔끔합니다!",
    "report.clean-detail": "개선 사항이 없습니다",
    "status.tooltip": "순환 복잡도: {complexity} ({grade}등급)\n{description}",
}

CATALOGS: dict[str, dict[str, str]] = {"en": _EN, "ko": _KO}


class Messages:
    """Message lookup and formatting for one locale."""

    def __init__(self, locale: str = "en") -> None:
        if locale not in CATALOGS:
            raise ConfigError(
                f"Unsupported locale '{locale}' (available: {', '.join(sorted(CATALOGS))})",
                {"locale": locale},
            )
        self.locale = locale
        self._templates = CATALOGS[locale]

    def __call__(self, key: str, **kwargs: Any) -> str:
        return self._templates[key].format(**kwargs)

    @property
    def anonymous(self) -> str:
        return self._templates["anonymous"]

    def rank_description(self, rank: Rank) -> str:
        return self._templates[f"rank.{rank.value}"]

    def kind_label(self, kind: NodeKind) -> str:
        return self._templates.get(f"kind.{kind.value}", kind.value)


def get_messages(locale: str = "en") -> Messages:
    """Return the message catalog for ``locale``.

    Raises:
        ConfigError: If the locale is not supported
    """
    return Messages(locale)
