from app.domain.entities.memory import MemoryView


def build_generate_prompt(memory: MemoryView, count: int) -> str:
    event_date = memory.memory.event_date
    date_line = f"  date: This happened on {event_date}\n" if event_date else ""

    return (
        "You help someone with amnesia recall details of their own life.\n"
        "Return ONLY valid JSON. No markdown. No extra text.\n"
        "Output schema:\n"
        "  {\"questions\": [\n"
        "    {\"question\": \"Question text here?\", \"correct_answer\": \"Correct answer here\", "
        "\"difficulty\": 3, \"points\": 15}\n"
        "  ]}\n"
        "Rules:\n"
        f"  - Return EXACTLY {count} questions in the questions array.\n"
        "  - Make each question specific to the description provided.\n"
        "  - Include a short correct answer taken from the description.\n"
        "  - difficulty is an integer from 1 to 5.\n"
        "  - points is an integer from 5 to 20, higher for harder questions.\n"
        "\n"
        "Memory:\n"
        f"  description: {memory.memory.description}\n"
        f"  relationship: This memory is from a {memory.relationship_type} named {memory.contributor_name}\n"
        f"{date_line}"
    )
