"""
Deterministic scoring for small HTML code samples.

Shallow and explainable: every signal is a textual pattern with a fixed point
value. Three dimensions (markup, style, script) start at 50, get adjusted by the
rule tables below, are clamped to 0-100 and combined with fixed weights.
"""


from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Optional

from arbiter.analyze import (
    INLINE_STYLE_PATTERN,
    RegexMatcher,
    extract_script_block,
    extract_style_block,
)


POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"

BASE_SCORE = 50

# Short-script override
MIN_SCRIPT_LENGTH = 50
MIN_DOCUMENT_LENGTH = 500
LITTLE_LOGIC_SCORE = 10

ERROR_MESSAGE = "Error: code could not be read or is empty."
LITTLE_LOGIC_MESSAGE = "JS: Little or no logic detected."


@dataclass(frozen=True)
class Weights:
    markup: float = 0.30
    style: float = 0.35
    script: float = 0.35

    def __post_init__(self) -> None:
        values = (self.markup, self.style, self.script)
        if any(v < 0 for v in values):
            raise ValueError(f"Weights must be non-negative, got {values}")
        if abs(sum(values) - 1.0) > 1e-9:
            raise ValueError(f"Weights must sum to 1.0, got {sum(values)}")


DEFAULT_WEIGHTS = Weights()


@dataclass(frozen=True)
class Rule:
    pattern: str
    delta: int
    kind: str
    message: str


@dataclass(frozen=True)
class CountRule:
    """Fires when `pattern` matches more than `threshold` times. `message` takes {count}."""

    pattern: str
    threshold: int
    delta: int
    kind: str
    message: str
    flags: int = 0


@dataclass(frozen=True)
class ScoreBreakdown:
    markup: int
    style: int
    script: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FeedbackItem:
    kind: str
    message: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


@dataclass(frozen=True)
class EvaluationResult:
    total: int
    breakdown: ScoreBreakdown
    feedback: tuple[FeedbackItem, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "breakdown": self.breakdown.to_dict(),
            "feedback": [f.to_dict() for f in self.feedback],
        }


MARKUP_RULES: tuple[Rule, ...] = (
    Rule(r"<!DOCTYPE html>", 10, POSITIVE, "HTML: Doctype declared correctly."),
    Rule(r"""<meta name=["']viewport["']""", 10, POSITIVE, "HTML: Meta viewport (mobile friendly)."),
    Rule(
        r"<(main|article|section|header|footer|nav|aside)",
        15,
        POSITIVE,
        "HTML: Modern semantic tags in use.",
    ),
    Rule(r"aria-|role=", 10, POSITIVE, "HTML: Accessibility attributes (ARIA) found."),
    Rule(r"onclick=", -15, NEGATIVE, "HTML: Inline JS (onclick) detected. Bad practice."),
    Rule(r"<font|<center|<br>", -10, NEGATIVE, "HTML: Obsolete tags / old-style layout."),
)

STYLE_RULES: tuple[Rule, ...] = (
    Rule(r":root", 15, POSITIVE, "CSS: Custom properties (:root)."),
    Rule(r"@media", 15, POSITIVE, "CSS: Responsive design (@media queries)."),
    Rule(r"display:\s*(flex|grid)", 15, POSITIVE, "CSS: Modern layout (Flexbox/Grid)."),
    Rule(r"animation:|transition:", 10, POSITIVE, "CSS: Native animations."),
    Rule(r"backdrop-filter|linear-gradient", 5, POSITIVE, "CSS: Advanced visual styling."),
)

# Counted over the whole document, not just the <style> block.
INLINE_STYLE_RULE = CountRule(
    INLINE_STYLE_PATTERN,
    3,
    -15,
    NEGATIVE,
    "CSS: Too many inline styles ({count} tags).",
)

SCRIPT_RULES: tuple[Rule, ...] = (
    Rule(r"(const|let)\s", 10, POSITIVE, "JS: Modern variable declarations (ES6)."),
    Rule(r"=>|class\s", 15, POSITIVE, "JS: Modern syntax (arrow functions/classes)."),
    Rule(r"\.addEventListener", 15, POSITIVE, "JS: Safe event handling."),
    Rule(r"try\s*\{|catch", 10, POSITIVE, "JS: Error handling detected."),
    Rule(r"querySelector|getElementById", 5, POSITIVE, "JS: Standard DOM access."),
    Rule(r"var\s", -10, NEUTRAL, 'JS: Use of "var" (prefer let/const).'),
    Rule(r"alert\(", -10, NEGATIVE, "JS: Use of alert() (poor UX)."),
)


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class Arbiter:
    """
    Scores one HTML document per `evaluate` call.

    Holds only read-only configuration, so one instance can be shared freely.
    """

    def __init__(self, weights: Weights = DEFAULT_WEIGHTS, matcher: Optional[RegexMatcher] = None):
        self.weights = weights
        self.matcher = matcher if matcher is not None else RegexMatcher()

    def _apply_rules(self, rules: tuple[Rule, ...], text: str, feedback: list[FeedbackItem]) -> int:
        delta = 0
        for rule in rules:
            if self.matcher.search(rule.pattern, text):
                delta += rule.delta
                feedback.append(FeedbackItem(rule.kind, rule.message))
        return delta

    def _apply_count_rule(self, rule: CountRule, text: str, feedback: list[FeedbackItem]) -> int:
        count = self.matcher.count(rule.pattern, text, flags=rule.flags)
        if count > rule.threshold:
            feedback.append(FeedbackItem(rule.kind, rule.message.format(count=count)))
            return rule.delta
        return 0

    def evaluate(self, raw_document) -> EvaluationResult:
        if not isinstance(raw_document, str) or not raw_document:
            return error_result()

        feedback: list[FeedbackItem] = []

        # Markup
        markup = BASE_SCORE + self._apply_rules(MARKUP_RULES, raw_document, feedback)

        # Style
        css = extract_style_block(raw_document)
        style = BASE_SCORE + self._apply_rules(STYLE_RULES, css, feedback)
        style += self._apply_count_rule(INLINE_STYLE_RULE, raw_document, feedback)

        # Script
        js = extract_script_block(raw_document)
        script = BASE_SCORE + self._apply_rules(SCRIPT_RULES, js, feedback)
        if len(js) < MIN_SCRIPT_LENGTH and len(raw_document) > MIN_DOCUMENT_LENGTH:
            script = LITTLE_LOGIC_SCORE
            feedback.append(FeedbackItem(NEUTRAL, LITTLE_LOGIC_MESSAGE))

        breakdown = ScoreBreakdown(
            markup=clamp(markup),
            style=clamp(style),
            script=clamp(script),
        )
        return EvaluationResult(
            total=self.total_for(breakdown),
            breakdown=breakdown,
            feedback=tuple(feedback),
        )

    def total_for(self, breakdown: ScoreBreakdown) -> int:
        w = self.weights
        return round_half_up(
            breakdown.markup * w.markup
            + breakdown.style * w.style
            + breakdown.script * w.script
        )


def error_result() -> EvaluationResult:
    return EvaluationResult(
        total=0,
        breakdown=ScoreBreakdown(markup=0, style=0, script=0),
        feedback=(FeedbackItem(NEGATIVE, ERROR_MESSAGE),),
    )


_default_arbiter = Arbiter()


def evaluate(raw_document) -> EvaluationResult:
    return _default_arbiter.evaluate(raw_document)
