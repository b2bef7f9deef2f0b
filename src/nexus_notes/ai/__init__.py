from nexus_notes.ai.actions import AiAction, action_label, build_action_prompt
from nexus_notes.ai.config import AiConfig, get_ai_config, save_ai_config
from nexus_notes.ai.gateway import request_ai_action
from nexus_notes.ai.generate import build_generator
from nexus_notes.ai.generator import GenerationResult, TextGenerator

__all__ = [
    "AiAction",
    "action_label",
    "build_action_prompt",
    "AiConfig",
    "get_ai_config",
    "save_ai_config",
    "request_ai_action",
    "build_generator",
    "GenerationResult",
    "TextGenerator",
]
