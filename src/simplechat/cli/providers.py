"""Provider factory functions for CLI.

Centralizes creation of the LLM provider from environment variables.
Hides configuration details from command implementations.
"""

import os
from typing import Any

from rich.console import Console

from ..chat import DEFAULT_SYSTEM_PROMPT
from ..llm import create_llm_provider
from ..llm.providers.openrouter import OPENROUTER_BASE_URL, OPENROUTER_DEFAULT_MODEL

# Default console for output
_console = Console()

DEFAULT_REFERER = "http://localhost"
DEFAULT_TITLE = "simplechat"


def resolve_llm_config() -> dict[str, Any]:
    """Resolve provider configuration from environment variables.

    Returns:
        Dict with 'provider', 'api_key_env', 'api_key' and provider kwargs

    Environment variables:
        LLM_PROVIDER: Provider type (openrouter, openai; default: openrouter)
        OPENROUTER_API_KEY: OpenRouter API key (for openrouter provider)
        OPENROUTER_MODEL: OpenRouter model (default: mistralai/mistral-7b-instruct)
        OPENROUTER_BASE_URL: API base URL, e.g. a trusted proxy
            (default: https://openrouter.ai/api/v1)
        OPENROUTER_REFERER: Origin sent as HTTP-Referer (default: http://localhost)
        OPENAI_API_KEY: API key (for openai provider)
        OPENAI_CHAT_MODEL: Model (default: gpt-4o-mini)
        OPENAI_BASE_URL: Base URL of any OpenAI-compatible endpoint
    """
    llm_provider = os.getenv("LLM_PROVIDER", "openrouter").lower()

    if llm_provider == "openrouter":
        return {
            "provider": "openrouter",
            "api_key_env": "OPENROUTER_API_KEY",
            "api_key": os.getenv("OPENROUTER_API_KEY"),
            "model": os.getenv("OPENROUTER_MODEL", OPENROUTER_DEFAULT_MODEL),
            "base_url": os.getenv("OPENROUTER_BASE_URL", OPENROUTER_BASE_URL),
            "referer": os.getenv("OPENROUTER_REFERER", DEFAULT_REFERER),
            "title": DEFAULT_TITLE,
        }

    if llm_provider == "openai":
        return {
            "provider": "openai",
            "api_key_env": "OPENAI_API_KEY",
            "api_key": os.getenv("OPENAI_API_KEY"),
            "model": os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini"),
            "base_url": os.getenv("OPENAI_BASE_URL"),
        }

    return {"provider": llm_provider, "api_key_env": None, "api_key": None}


def get_system_prompt() -> str:
    """Get the system instruction (SIMPLECHAT_SYSTEM_PROMPT or the default)."""
    return os.getenv("SIMPLECHAT_SYSTEM_PROMPT") or DEFAULT_SYSTEM_PROMPT


def get_llm(console: Console | None = None) -> Any | None:
    """Create LLM provider from environment variables.

    A missing API key is only warned about: the request is still made and
    the authorization failure surfaces as the fallback reply.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if the provider is unknown
    """
    con = console or _console
    config = resolve_llm_config()
    provider = config.pop("provider")
    api_key_env = config.pop("api_key_env")

    if api_key_env is None:
        con.print(f"[red]Error: Unknown LLM provider: {provider}[/red]")
        return None

    if not config["api_key"]:
        con.print(f"[yellow]Warning: {api_key_env} not set, requests will be rejected[/yellow]")
        config["api_key"] = ""

    return create_llm_provider(provider, **config)


def require_llm(console: Console | None = None) -> Any:
    """Get LLM provider, raising error if not configured.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance

    Raises:
        SystemExit: If LLM provider is not configured
    """
    import typer

    con = console or _console
    llm = get_llm(con)
    if not llm:
        con.print("[red]Error: LLM provider not configured[/red]")
        raise typer.Exit(code=1)
    return llm
