import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

load_dotenv()


class FormConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    font_size: str = "Paragraph"
    line_height: str = "Paragraph"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "FormConfig":
        return cls(
            font_size=os.getenv("PROFILE_FORM_FONT_SIZE", "Paragraph"),
            line_height=os.getenv("PROFILE_FORM_LINE_HEIGHT", "Paragraph"),
            log_level=os.getenv("PROFILE_FORM_LOG_LEVEL", "WARNING"),
        )
