from typing import Any

import httpx

from nexus_notes.ai.config import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from nexus_notes.ai.generator import GenerationResult

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


def call_gemini(
    prompt: str,
    system_instruction: str,
    model: str = DEFAULT_MODEL,
    api_key: str | None = None,
    temperature: float = DEFAULT_TEMPERATURE,
    timeout: float = 60.0,
) -> dict[str, Any]:
    if not api_key:
        return {
            "success": False,
            "error": "No Gemini API key configured",
            "content": "",
            "model": model,
            "provider": "gemini",
        }

    try:
        response = httpx.post(
            f"{GEMINI_BASE_URL}/models/{model}:generateContent",
            headers={"x-goog-api-key": api_key},
            json={
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "systemInstruction": {"parts": [{"text": system_instruction}]},
                "generationConfig": {"temperature": temperature},
            },
            timeout=timeout,
        )
        response.raise_for_status()
        data = response.json()

        candidates = data.get("candidates") or [{}]
        parts = candidates[0].get("content", {}).get("parts", [])
        content = "".join(part.get("text", "") for part in parts)
        return {
            "success": True,
            "content": content,
            "model": model,
            "provider": "gemini",
        }
    except httpx.HTTPStatusError as e:
        return {
            "success": False,
            "error": f"HTTP {e.response.status_code}: {e.response.text[:200]}",
            "content": "",
            "model": model,
            "provider": "gemini",
        }
    except Exception as e:
        return {
            "success": False,
            "error": str(e),
            "content": "",
            "model": model,
            "provider": "gemini",
        }


class GeminiGenerator:
    def __init__(
        self,
        api_key: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature

    @property
    def name(self) -> str:
        return "gemini"

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def generate(self, prompt: str, instruction: str) -> GenerationResult:
        result = call_gemini(
            prompt=prompt,
            system_instruction=instruction,
            model=self.model,
            api_key=self.api_key,
            temperature=self.temperature,
        )
        return GenerationResult.from_dict(result)
