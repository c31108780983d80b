from abc import ABC, abstractmethod

from app.domain.entities.memory import MemoryView
from app.domain.entities.question import GeneratedQuestion


class LLMPort(ABC):
    @abstractmethod
    def generate_questions(self, memory: MemoryView, count: int) -> list[GeneratedQuestion]:
        """
        Generate recall questions about a memory.

        Requirements:
        - Each question must carry a non-empty correct answer drawn from the description
        - difficulty is 1-5, points are 5-20 (adapter clamps out-of-range values)
        - May return more or fewer than `count`; use case caps to `count`

        Args:
            memory: Memory joined with its contributor (description, relationship, date)
            count: Target number of questions

        Returns:
            List of GeneratedQuestion

        Raises:
            LLMUpstreamError: provider failure
            LLMContractError: unparseable or malformed output
        """
        raise NotImplementedError
