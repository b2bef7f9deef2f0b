from enum import Enum


class AiAction(str, Enum):
    SUMMARIZE = "SUMMARIZE"
    QUIZ = "QUIZ"
    ELABORATE = "ELABORATE"
    FIX_GRAMMAR = "FIX_GRAMMAR"


# action -> (system instruction, prompt lead-in)
_TEMPLATES: dict[AiAction, tuple[str, str]] = {
    AiAction.SUMMARIZE: (
        "You are an expert academic summarizer.",
        "Summarize the following study notes into concise bullet points. "
        "Highlight key concepts:",
    ),
    AiAction.QUIZ: (
        "You are a teacher creating a pop quiz.",
        "Create 3 short multiple-choice questions based on these notes to test "
        "understanding. Include the answer key at the bottom:",
    ),
    AiAction.ELABORATE: (
        "You are a tutor explaining complex topics to a student.",
        "Explain the concepts in these notes in simpler terms and provide a "
        "real-world example:",
    ),
    AiAction.FIX_GRAMMAR: (
        "You are a professional editor.",
        "Proofread the following notes. Fix grammar, spelling, and improve "
        "clarity without changing the meaning:",
    ),
}


def build_action_prompt(text: str, action: AiAction) -> tuple[str, str]:
    """Return ``(prompt, system_instruction)`` for ``action`` applied to ``text``."""
    instruction, lead = _TEMPLATES[AiAction(action)]
    return f"{lead}\n\n{text}", instruction


def action_label(action: AiAction) -> str:
    if action == AiAction.SUMMARIZE:
        return "Summary"
    if action == AiAction.QUIZ:
        return "Quiz"
    return "Insight"
