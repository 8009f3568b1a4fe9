"""
Configuration module for Chat Forms.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from agents import ModelSettings

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class ChatFormsConfig:
    """Configuration settings for Chat Forms."""

    # OpenAI settings
    openai_api_key: str = ""
    default_model: str = "gpt-4.1-nano-2025-04-14"

    # Model settings for deterministic behavior
    default_temperature: float = 0.0
    default_max_tokens: int | None = None

    # Chat server settings
    server_host: str = "0.0.0.0"
    server_port: int = 9110

    # Logging
    log_level: str = "INFO"

    # Tracing settings
    enable_tracing: bool = True
    trace_to_console: bool = False
    trace_workflow_name: str = "chat-forms"

    def get_model_settings(self) -> ModelSettings:
        """Get ModelSettings instance with configured defaults."""
        return ModelSettings(
            temperature=self.default_temperature,
            max_tokens=self.default_max_tokens,
        )

    @classmethod
    def from_env(cls) -> "ChatFormsConfig":
        """
        Create configuration from environment variables.

        Unset variables fall back to the class field defaults.
        """
        _defaults = cls()

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", _defaults.openai_api_key),
            default_model=os.getenv("OPENAI_MODEL", _defaults.default_model),
            default_temperature=float(os.getenv("CHAT_FORMS_TEMPERATURE", str(_defaults.default_temperature))),
            server_host=os.getenv("CHAT_FORMS_HOST", _defaults.server_host),
            server_port=int(os.getenv("CHAT_FORMS_PORT", str(_defaults.server_port))),
            log_level=os.getenv("CHAT_FORMS_LOG_LEVEL", _defaults.log_level).upper(),
            enable_tracing=os.getenv("OPENAI_AGENTS_DISABLE_TRACING", "0" if _defaults.enable_tracing else "1") != "1",
            trace_to_console=_env_flag("CHAT_FORMS_TRACE_CONSOLE", _defaults.trace_to_console),
        )


config = ChatFormsConfig.from_env()


def get_config() -> ChatFormsConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> ChatFormsConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
