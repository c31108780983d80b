from __future__ import annotations

from app.domain.entities.answer import AnswerComparison, AnswerResult

CORRECT_THRESHOLD = 0.5


def tokenize(text: str) -> list[str]:
    return (text or "").lower().split()


def _token_matches(reference_token: str, submitted_tokens: list[str]) -> bool:
    return any(
        reference_token in token or token in reference_token
        for token in submitted_tokens
    )


def match_ratio(submitted_text: str, reference_text: str) -> float:
    """
    Fraction of reference tokens found among the submitted tokens.

    A reference token counts as found when some submitted token contains it
    or is contained by it. Tokens keep their punctuation and duplicates, so
    a one-letter submitted token matches every reference token holding that
    letter.
    """
    reference_tokens = tokenize(reference_text)
    if not reference_tokens:
        return 0.0

    submitted_tokens = tokenize(submitted_text)
    if not submitted_tokens:
        return 0.0

    matched = sum(1 for ref in reference_tokens if _token_matches(ref, submitted_tokens))
    return matched / len(reference_tokens)


def evaluate(submitted_text: str, reference_text: str, point_value: int) -> AnswerResult:
    ratio = match_ratio(submitted_text, reference_text)
    is_correct = ratio >= CORRECT_THRESHOLD
    return AnswerResult(
        match_ratio=ratio,
        is_correct=is_correct,
        points_awarded=point_value if is_correct else 0,
    )


def evaluate_comparison(comparison: AnswerComparison) -> AnswerResult:
    return evaluate(
        submitted_text=comparison.submitted_text,
        reference_text=comparison.reference_text,
        point_value=comparison.point_value,
    )
