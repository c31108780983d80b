from __future__ import annotations

import json
import logging
from typing import Any

from openai import OpenAI

from app.application.exceptions import LLMContractError, LLMUpstreamError
from app.application.ports.llm import LLMPort
from app.core.config import settings
from app.domain.entities.memory import MemoryView
from app.domain.entities.question import GeneratedQuestion
from app.infrastructure.llm.prompts import build_generate_prompt


logger = logging.getLogger(__name__)


class OpenAILLM(LLMPort):
    """
    OpenAI-backed adapter implementing LLMPort.

    Contract guarantees:
    - generate_questions returns list[GeneratedQuestion] with difficulty in 1-5 and points in 5-20
    - Raises:
        LLMUpstreamError: networking/provider failures
        LLMContractError: invalid JSON or wrong schema/shape
    """

    def __init__(self, client: OpenAI | None = None) -> None:
        self.client = client or OpenAI(api_key=settings.OPENAI_API_KEY)

    def generate_questions(self, memory: MemoryView, count: int) -> list[GeneratedQuestion]:
        if count <= 0:
            return []

        prompt = build_generate_prompt(memory=memory, count=count)
        text = self._call_text(
            model=settings.OPENAI_MODEL_GENERATE,
            prompt=prompt,
            temperature=settings.OPENAI_TEMPERATURE_GENERATE,
        )

        data = _parse_json(text)
        if isinstance(data, dict):
            data = data.get("questions")
        if not isinstance(data, list):
            raise LLMContractError("Generate: 'questions' must be a list of objects.")

        out: list[GeneratedQuestion] = []
        for item in data:
            if not isinstance(item, dict):
                raise LLMContractError("Generate: each question must be an object.")
            try:
                question = str(item["question"]).strip()
                answer = str(item["correct_answer"]).strip()
                difficulty = int(item.get("difficulty", 3))
                points = int(item.get("points", 10))
            except (KeyError, TypeError, ValueError) as e:
                raise LLMContractError(f"Generate: invalid question shape: {e}")

            if not question or not answer:
                logger.warning("Dropping question without text or answer", extra={"reason": "empty"})
                continue

            out.append(
                GeneratedQuestion(
                    question=question,
                    correct_answer=answer,
                    difficulty=min(5, max(1, difficulty)),
                    points=min(20, max(5, points)),
                )
            )

        return out

    def _call_text(self, model: str, prompt: str, temperature: float) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": "Return only valid JSON. Do not include markdown or extra text."},
                    {"role": "user", "content": prompt},
                ],
                temperature=temperature,
                max_tokens=1400,
                response_format={"type": "json_object"},
            )
        except Exception as e:
            raise LLMUpstreamError(f"OpenAI API error: {e}") from e

        content = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        if not content:
            raise LLMContractError("LLM returned empty response text.")

        return content


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        pass

    # Fall back to the outermost array when the model wraps JSON in prose.
    start, end = text.find("["), text.rfind("]")
    if start != -1 and end > start:
        try:
            return json.loads(text[start : end + 1])
        except ValueError:
            pass

    snippet = text[:200].replace("\n", " ")
    raise LLMContractError(f"Generate: invalid JSON. Snippet: {snippet!r}")
