#!/usr/bin/env python3
"""
Score an answer against a reference answer without running the API.

Usage:
  python3 scripts/score_answer.py "the dog ran fast" "dog fast" --points 15
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.utils.answer_evaluator import evaluate, tokenize


def main() -> int:
    parser = argparse.ArgumentParser(description="Keyword-overlap answer scoring")
    parser.add_argument("reference", help="Stored correct answer")
    parser.add_argument("answer", help="Submitted answer")
    parser.add_argument("--points", type=int, default=10, help="Point value of the question")
    args = parser.parse_args()

    submitted = tokenize(args.answer)
    print(f"reference tokens: {tokenize(args.reference)}")
    print(f"submitted tokens: {submitted}")

    result = evaluate(args.answer, args.reference, args.points)
    print(f"match_ratio: {result.match_ratio:.2f}")
    print(f"is_correct: {result.is_correct}")
    print(f"points_awarded: {result.points_awarded}")
    return 0 if result.is_correct else 1


if __name__ == "__main__":
    sys.exit(main())
