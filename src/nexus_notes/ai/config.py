import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from nexus_notes.config import DEFAULT_STATE_FILE

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "gemini"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_LMSTUDIO_URL = "http://localhost:1234"
DEFAULT_TEMPERATURE = 0.7
PROVIDERS = ("gemini", "lmstudio")


@dataclass
class AiConfig:
    provider: str = DEFAULT_PROVIDER
    model: str = DEFAULT_MODEL
    api_key: str = ""
    lmstudio_url: str = DEFAULT_LMSTUDIO_URL
    temperature: float = DEFAULT_TEMPERATURE

    def to_dict(self) -> dict[str, Any]:
        return {
            "provider": self.provider,
            "model": self.model,
            "api_key": self.api_key,
            "lmstudio_url": self.lmstudio_url,
            "temperature": self.temperature,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AiConfig":
        return cls(
            provider=data.get("provider", DEFAULT_PROVIDER),
            model=data.get("model", DEFAULT_MODEL),
            api_key=data.get("api_key", ""),
            lmstudio_url=data.get("lmstudio_url", DEFAULT_LMSTUDIO_URL),
            temperature=float(data.get("temperature", DEFAULT_TEMPERATURE)),
        )


def _get_config_path() -> Path:
    base = os.getenv("NEXUS_NOTES_STATE_FILE", DEFAULT_STATE_FILE)
    return Path(base).parent / "ai_config.json"


def _env_api_key() -> str:
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")


def get_ai_config() -> AiConfig:
    """Resolve the AI settings; the only place the API key is looked up.

    ``ai_config.json`` wins when readable. A key left empty there, or a
    missing or unreadable file, falls back to the environment.
    """
    config_path = _get_config_path()
    if config_path.exists():
        try:
            with open(config_path) as f:
                data = json.load(f)
            config = AiConfig.from_dict(data)
            if not config.api_key:
                config.api_key = _env_api_key()
            return config
        except (OSError, json.JSONDecodeError, AttributeError, TypeError, ValueError) as exc:
            logger.warning("ignoring unreadable %s: %s", config_path, exc)

    return AiConfig(
        provider=os.getenv("NEXUS_NOTES_AI_PROVIDER", DEFAULT_PROVIDER),
        model=os.getenv("NEXUS_NOTES_AI_MODEL", DEFAULT_MODEL),
        api_key=_env_api_key(),
        lmstudio_url=os.getenv("NEXUS_NOTES_LMSTUDIO_URL", DEFAULT_LMSTUDIO_URL),
    )


def save_ai_config(config: AiConfig) -> None:
    if config.provider not in PROVIDERS:
        raise ValueError(f"provider must be one of: {', '.join(PROVIDERS)}")

    config_path = _get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
