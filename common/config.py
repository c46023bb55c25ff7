"""
common/config.py
----------------
Pipeline settings for the roomscan service / CLI.

Values come from the environment (optionally a local .env file):
  ROOMSCAN_ATTACHMENT_THRESHOLD  max wall-to-opening distance in meters (1.0)
  ROOMSCAN_LOG_LEVEL             logging level name (INFO)
  ROOMSCAN_OUTPUT_DIR            CLI output directory (outputs)
"""

import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

DEFAULT_ATTACHMENT_THRESHOLD = 1.0


class PipelineSettings(BaseModel):
    attachment_threshold: float = Field(DEFAULT_ATTACHMENT_THRESHOLD, gt=0)
    log_level: str = "INFO"
    output_dir: str = "outputs"


def load_settings() -> PipelineSettings:
    """Read settings from the environment after loading .env."""
    load_dotenv()
    values = {
        "attachment_threshold": os.getenv("ROOMSCAN_ATTACHMENT_THRESHOLD"),
        "log_level": os.getenv("ROOMSCAN_LOG_LEVEL"),
        "output_dir": os.getenv("ROOMSCAN_OUTPUT_DIR"),
    }
    return PipelineSettings(**{k: v for k, v in values.items() if v})
