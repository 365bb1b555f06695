"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..chat import SendPipeline
from ..transcript import TranscriptStore
from .providers import get_system_prompt, require_llm, resolve_llm_config

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="simplechat",
    help="Minimal chat client for hosted LLM completion endpoints",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

_LEVEL_STYLES = {
    "debug": "dim",
    "info": "cyan",
    "warning": "yellow",
    "error": "red",
}


def _console_debug_callback(verbose: bool):
    """Build a debug callback that prints diagnostics to the console.

    Warnings and errors are always shown; debug and info only with --verbose.
    """
    def callback(level: str, component: str, message: str) -> None:
        if level in ("debug", "info") and not verbose:
            return
        style = _LEVEL_STYLES.get(level, "white")
        console.print(f"[{style}]\\[{escape(component)}] {escape(message)}[/{style}]")

    return callback


def _build_pipeline(llm, system_prompt: str | None, model: str | None, verbose: bool) -> SendPipeline:
    pipeline = SendPipeline(
        llm,
        TranscriptStore(),
        system_prompt=system_prompt or get_system_prompt(),
        model=model,
    )
    pipeline.set_debug_callback(_console_debug_callback(verbose))
    return pipeline


@app.command(name="tui")
def tui_command(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier (overrides the provider default)"
    ),
    system_prompt: str | None = typer.Option(
        None,
        "--system-prompt",
        help="System instruction sent with every message"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive chat widget."""
    async def _tui():
        from ..ui import run_textual_tui

        llm = require_llm(console)
        try:
            await run_textual_tui(
                llm=llm,
                system_prompt=system_prompt or get_system_prompt(),
                model=model,
                log_level=log_level,
            )
        finally:
            await llm.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def chat(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier (overrides the provider default)"
    ),
    system_prompt: str | None = typer.Option(
        None,
        "--system-prompt",
        help="System instruction sent with every message"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print request diagnostics"
    ),
):
    """Line-based chat on the console."""
    async def _chat():
        llm = require_llm(console)

        try:
            pipeline = _build_pipeline(llm, system_prompt, model, verbose)

            console.print("[bold cyan]Simplechat[/bold cyan]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip().lower() in ("exit", "quit", "q"):
                    console.print("[dim]Goodbye![/dim]")
                    break

                reply = await pipeline.send(user_input)
                if reply is None:
                    continue

                console.print(f"[bold green]Assistant:[/bold green] {escape(reply.text)}\n")
        finally:
            await llm.close()

    asyncio.run(_chat())


@app.command()
def ask(
    message: str = typer.Argument(..., help="Message to send"),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier (overrides the provider default)"
    ),
    system_prompt: str | None = typer.Option(
        None,
        "--system-prompt",
        help="System instruction sent with the message"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print request diagnostics"
    ),
):
    """Send one message and print the reply."""
    async def _ask():
        llm = require_llm(console)
        try:
            pipeline = _build_pipeline(llm, system_prompt, model, verbose)
            reply = await pipeline.send(message)
        finally:
            await llm.close()

        if reply is None:
            console.print("[yellow]Nothing to send: message is empty[/yellow]")
            raise typer.Exit(code=1)

        console.print(reply.text, markup=False, highlight=False)

    asyncio.run(_ask())


@app.command()
def info():
    """Show the resolved provider configuration."""
    config = resolve_llm_config()

    if config["api_key_env"] is None:
        console.print(f"[red]Error: Unknown LLM provider: {config['provider']}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="LLM Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Provider", config["provider"])
    table.add_row("Model", config["model"])
    table.add_row("Base URL", config.get("base_url") or "(SDK default)")
    if "referer" in config:
        table.add_row("Referer", config["referer"])
    table.add_row(
        config["api_key_env"],
        "set" if config["api_key"] else "[yellow]not set[/yellow]",
    )
    table.add_row("System prompt", escape(get_system_prompt()))

    console.print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
