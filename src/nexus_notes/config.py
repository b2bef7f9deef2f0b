import logging
import os
from dataclasses import dataclass

DEFAULT_STATE_FILE = ".nexus_notes/state.json"
DEFAULT_STORAGE_KEY = "nexus_notes_data"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class NotesConfig:
    state_file: str
    storage_key: str
    log_level: str


def get_notes_config() -> NotesConfig:
    return NotesConfig(
        state_file=os.getenv("NEXUS_NOTES_STATE_FILE", DEFAULT_STATE_FILE),
        storage_key=os.getenv("NEXUS_NOTES_STORAGE_KEY", DEFAULT_STORAGE_KEY),
        log_level=os.getenv("NEXUS_NOTES_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str | None = None) -> None:
    level_name = (level or get_notes_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
