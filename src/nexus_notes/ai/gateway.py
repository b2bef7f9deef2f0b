import logging

from nexus_notes.ai.actions import AiAction, build_action_prompt
from nexus_notes.ai.config import AiConfig
from nexus_notes.ai.generate import build_generator
from nexus_notes.ai.generator import TextGenerator

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "API Key is missing. Please configure the environment."
SERVICE_ERROR_MESSAGE = "An error occurred while communicating with the AI assistant."
EMPTY_RESPONSE_MESSAGE = "No response generated."
FALLBACK_MESSAGES = frozenset({MISSING_API_KEY_MESSAGE, SERVICE_ERROR_MESSAGE, EMPTY_RESPONSE_MESSAGE})


def is_fallback_message(text: str | None) -> bool:
    return text in FALLBACK_MESSAGES


def request_ai_action(
    note_content: str,
    action: AiAction,
    generator: TextGenerator | None = None,
    config: AiConfig | None = None,
) -> str:
    """Run one AI action over ``note_content`` and return display text.

    Never raises for service problems: a missing credential or any failed
    request comes back as one of the fixed messages above, and the caller
    cannot tell those failure modes apart.
    """
    try:
        if generator is None:
            generator = build_generator(config)
        if not generator.is_configured():
            return MISSING_API_KEY_MESSAGE
    except Exception as exc:
        logger.error("could not prepare AI provider for %s: %s", AiAction(action).value, exc)
        return SERVICE_ERROR_MESSAGE

    prompt, instruction = build_action_prompt(note_content, action)
    try:
        result = generator.generate(prompt, instruction)
    except Exception as exc:
        logger.error("%s request failed for %s: %s", generator.name, AiAction(action).value, exc)
        return SERVICE_ERROR_MESSAGE

    if not result.success:
        logger.error("%s request failed for %s: %s", generator.name, AiAction(action).value, result.error)
        return SERVICE_ERROR_MESSAGE

    return result.content or EMPTY_RESPONSE_MESSAGE
