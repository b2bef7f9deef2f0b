import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch


class AiConfigTests(unittest.TestCase):
    def test_default_config_values(self):
        from nexus_notes.ai.config import AiConfig

        config = AiConfig()
        self.assertEqual(config.provider, "gemini")
        self.assertEqual(config.model, "gemini-2.5-flash")
        self.assertEqual(config.api_key, "")
        self.assertEqual(config.lmstudio_url, "http://localhost:1234")
        self.assertEqual(config.temperature, 0.7)

    def test_config_to_dict_and_from_dict(self):
        from nexus_notes.ai.config import AiConfig

        original = AiConfig(
            provider="lmstudio",
            model="lmstudio:local",
            api_key="test-key",
            lmstudio_url="http://localhost:9999",
            temperature=0.2,
        )

        restored = AiConfig.from_dict(original.to_dict())

        self.assertEqual(restored, original)

    def test_get_ai_config_reads_env_vars_without_file(self):
        from nexus_notes.ai.config import get_ai_config

        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {
                "NEXUS_NOTES_STATE_FILE": str(Path(temp_dir) / "state.json"),
                "GEMINI_API_KEY": "env-key",
                "NEXUS_NOTES_AI_PROVIDER": "lmstudio",
                "NEXUS_NOTES_LMSTUDIO_URL": "http://custom:5678",
            }):
                config = get_ai_config()

        self.assertEqual(config.api_key, "env-key")
        self.assertEqual(config.provider, "lmstudio")
        self.assertEqual(config.lmstudio_url, "http://custom:5678")

    def test_get_ai_config_falls_back_to_api_key_env(self):
        from nexus_notes.ai.config import get_ai_config

        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {
                "NEXUS_NOTES_STATE_FILE": str(Path(temp_dir) / "state.json"),
                "API_KEY": "legacy-key",
            }, clear=True):
                config = get_ai_config()

        self.assertEqual(config.api_key, "legacy-key")

    def test_save_and_reload_from_file(self):
        from nexus_notes.ai.config import AiConfig, get_ai_config, save_ai_config

        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {"NEXUS_NOTES_STATE_FILE": str(Path(temp_dir) / "state.json")}):
                save_ai_config(AiConfig(api_key="file-key", model="gemini-2.0-flash"))
                stored = json.loads((Path(temp_dir) / "ai_config.json").read_text())
                config = get_ai_config()

        self.assertEqual(stored["api_key"], "file-key")
        self.assertEqual(config.api_key, "file-key")
        self.assertEqual(config.model, "gemini-2.0-flash")

    def test_unreadable_file_falls_back_to_env(self):
        from nexus_notes.ai.config import get_ai_config

        with tempfile.TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / "ai_config.json").write_text("{broken")
            with patch.dict(os.environ, {
                "NEXUS_NOTES_STATE_FILE": str(Path(temp_dir) / "state.json"),
                "GEMINI_API_KEY": "env-key",
            }):
                config = get_ai_config()

        self.assertEqual(config.api_key, "env-key")

    def test_config_path_that_is_a_directory_falls_back_to_env(self):
        from nexus_notes.ai.config import get_ai_config

        with tempfile.TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / "ai_config.json").mkdir()
            with patch.dict(os.environ, {
                "NEXUS_NOTES_STATE_FILE": str(Path(temp_dir) / "state.json"),
                "GEMINI_API_KEY": "env-key",
            }, clear=True):
                with self.assertLogs("nexus_notes.ai.config", level="WARNING"):
                    config = get_ai_config()

        self.assertEqual(config.api_key, "env-key")
        self.assertEqual(config.provider, "gemini")

    def test_file_without_key_takes_key_from_env(self):
        from nexus_notes.ai.config import AiConfig, get_ai_config, save_ai_config

        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {
                "NEXUS_NOTES_STATE_FILE": str(Path(temp_dir) / "state.json"),
                "GEMINI_API_KEY": "env-key",
            }, clear=True):
                save_ai_config(AiConfig(api_key="", model="gemini-2.0-flash"))
                config = get_ai_config()

        self.assertEqual(config.api_key, "env-key")
        self.assertEqual(config.model, "gemini-2.0-flash")

    def test_file_key_wins_over_env(self):
        from nexus_notes.ai.config import AiConfig, get_ai_config, save_ai_config

        with tempfile.TemporaryDirectory() as temp_dir:
            with patch.dict(os.environ, {
                "NEXUS_NOTES_STATE_FILE": str(Path(temp_dir) / "state.json"),
                "GEMINI_API_KEY": "env-key",
            }, clear=True):
                save_ai_config(AiConfig(api_key="file-key"))
                config = get_ai_config()

        self.assertEqual(config.api_key, "file-key")

    def test_save_rejects_unknown_provider(self):
        from nexus_notes.ai.config import AiConfig, save_ai_config

        with self.assertRaises(ValueError) as ctx:
            save_ai_config(AiConfig(provider="invalid"))
        self.assertIn("provider must be", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
