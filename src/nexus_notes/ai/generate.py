from nexus_notes.ai.config import AiConfig, get_ai_config
from nexus_notes.ai.gemini import GeminiGenerator
from nexus_notes.ai.generator import TextGenerator
from nexus_notes.ai.lmstudio import LmStudioGenerator


def build_generator(config: AiConfig | None = None) -> TextGenerator:
    if config is None:
        config = get_ai_config()

    if config.provider == "lmstudio":
        return LmStudioGenerator(
            base_url=config.lmstudio_url,
            model=config.model.replace("lmstudio:", ""),
            temperature=config.temperature,
        )
    return GeminiGenerator(
        api_key=config.api_key,
        model=config.model,
        temperature=config.temperature,
    )
