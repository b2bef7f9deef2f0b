from typing import Any

import httpx

from nexus_notes.ai.config import DEFAULT_LMSTUDIO_URL, DEFAULT_TEMPERATURE
from nexus_notes.ai.generator import GenerationResult


def call_lmstudio(
    prompt: str,
    system_instruction: str,
    model: str = "local-model",
    base_url: str = DEFAULT_LMSTUDIO_URL,
    temperature: float = DEFAULT_TEMPERATURE,
    max_tokens: int = 1000,
    timeout: float = 30.0,
) -> dict[str, Any]:
    try:
        response = httpx.post(
            f"{base_url}/v1/chat/completions",
            json={
                "model": model,
                "messages": [
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": prompt},
                ],
                "temperature": temperature,
                "max_tokens": max_tokens,
            },
            timeout=timeout,
        )
        response.raise_for_status()
        data = response.json()

        content = data.get("choices", [{}])[0].get("message", {}).get("content", "")
        return {
            "success": True,
            "content": content,
            "model": model,
            "provider": "lmstudio",
        }
    except Exception as e:
        return {
            "success": False,
            "error": str(e),
            "content": "",
            "model": model,
            "provider": "lmstudio",
        }


def check_lmstudio_available(base_url: str = DEFAULT_LMSTUDIO_URL) -> bool:
    try:
        response = httpx.get(f"{base_url}/v1/models", timeout=5.0)
        return response.status_code == 200
    except Exception:
        return False


class LmStudioGenerator:
    """Local OpenAI-compatible server; needs no credential."""

    def __init__(
        self,
        base_url: str = DEFAULT_LMSTUDIO_URL,
        model: str = "local-model",
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self.base_url = base_url
        self.model = model
        self.temperature = temperature

    @property
    def name(self) -> str:
        return "lmstudio"

    def is_configured(self) -> bool:
        return True

    def generate(self, prompt: str, instruction: str) -> GenerationResult:
        result = call_lmstudio(
            prompt=prompt,
            system_instruction=instruction,
            model=self.model,
            base_url=self.base_url,
            temperature=self.temperature,
        )
        return GenerationResult.from_dict(result)
