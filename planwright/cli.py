"""
CLI interface for planwright.

Thin presentation layer over the planning core. One-shot commands
(plan, chat), an interactive session, and launchers for the HTTP API
and the MCP server.
"""

import asyncio
import logging
import signal
import time
from pathlib import Path

import typer
import yaml

from planwright.config.loader import get_config_path, load_config
from planwright.config.schema import PlannerConfig
from planwright.errors import Cancelled, ChatProviderFailed, PhaseFailed
from planwright.logging_config import configure_logging, level_for
from planwright.models.messages import PlanRequest, Role
from planwright.models.plan import PlanDocument
from planwright.models.session import SessionMode, SessionState
from planwright.planning import (
    CancellationToken,
    ChatOrchestrator,
    PlanningOrchestrator,
    PlanRenderer,
    create_orchestrators,
)

logger = logging.getLogger(__name__)

EXIT_FAILED = 1
EXIT_INVALID = 2
EXIT_CANCELLED = 130

app = typer.Typer(
    name="planwright",
    help="Technical planning assistant: web research, component analysis, synthesis.",
    no_args_is_help=True,
)


def _fmt_duration(seconds: float) -> str:
    """Format seconds as human-readable duration (e.g. '5m17s', '42s')."""
    s = int(seconds)
    if s < 60:
        return f"{s}s"
    m, s = divmod(s, 60)
    return f"{m}m{s:02d}s"


_PHASE_DESCRIPTIONS = {
    "foundational_research": "Researching the landscape...",
    "foundational_research_complete": "Research done",
    "component_analysis": "Analysing components...",
    "component_analysis_complete": "Component analysis done",
    "synthesis": "Writing the plan...",
    "synthesis_complete": "Plan written",
}


def _get_phase_description(phase: str) -> str:
    return _PHASE_DESCRIPTIONS.get(phase, phase.replace("_", " ").capitalize())


def _run(coro):
    """Run async function from sync CLI context."""
    return asyncio.run(coro)


def _setup(verbose: bool = False) -> tuple[PlannerConfig, PlanningOrchestrator, ChatOrchestrator]:
    """Load config, configure CLI logging and build orchestrators. Exits on config errors."""
    try:
        config = load_config()
    except Exception as e:
        typer.echo(f"Error: invalid configuration ({get_config_path()}): {e}", err=True)
        raise typer.Exit(EXIT_INVALID)

    level = logging.DEBUG if verbose else level_for(config.output.verbosity)
    configure_logging(json_format=False, level=level)

    try:
        planner, chat_orchestrator = create_orchestrators(config)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_FAILED)
    return config, planner, chat_orchestrator


def _install_cancel_handler(token: CancellationToken) -> bool:
    """
    Route the first Ctrl+C to the request's token.

    After the first press the handler is removed, so a second press
    interrupts the process as usual.

    Returns:
        True if a loop signal handler was installed
    """
    loop = asyncio.get_running_loop()

    def _on_sigint() -> None:
        typer.echo("\nCancelling after the current step (Ctrl+C again to abort)...", err=True)
        token.cancel("interrupted by user")
        loop.remove_signal_handler(signal.SIGINT)

    try:
        loop.add_signal_handler(signal.SIGINT, _on_sigint)
        return True
    except (NotImplementedError, RuntimeError):
        # No loop signal handlers on Windows or off the main thread
        return False


def _remove_cancel_handler(installed: bool) -> None:
    if installed:
        asyncio.get_running_loop().remove_signal_handler(signal.SIGINT)


async def _run_plan(planner: PlanningOrchestrator, request: PlanRequest, console) -> PlanDocument:
    """Run create_plan with a spinner and Ctrl+C wired to the token."""
    from rich.status import Status

    token = CancellationToken()
    installed = _install_cancel_handler(token)
    start = time.monotonic()

    with Status("[dim]Starting...[/dim]", console=console, spinner="dots") as status:

        def _progress(progress: float, phase: str) -> None:
            desc = _get_phase_description(phase)
            if phase.endswith("_complete"):
                console.print(f"[green]✓[/green] {desc}  [dim]{_fmt_duration(time.monotonic() - start)}[/dim]")
            status.update(f"[dim]{desc}[/dim]  {progress * 100:.0f}%")

        try:
            return await planner.create_plan(request, token, progress_callback=_progress)
        finally:
            _remove_cancel_handler(installed)


async def _run_chat(chat_orchestrator: ChatOrchestrator, request: PlanRequest, console) -> str:
    """Run one chat turn with a spinner and Ctrl+C wired to the token."""
    from rich.status import Status

    token = CancellationToken()
    installed = _install_cancel_handler(token)
    try:
        with Status("[dim]Thinking...[/dim]", console=console, spinner="dots"):
            return await chat_orchestrator.chat(request, token)
    finally:
        _remove_cancel_handler(installed)


def _write_output(markdown: str, output: Path | None, console) -> None:
    if output:
        output.write_text(markdown, encoding="utf-8")
        console.print(f"[dim]Saved:[/dim] {output}")


@app.command()
def plan(
    description: str = typer.Argument(..., help="What you want to build"),
    output: Path = typer.Option(None, "--output", "-o", help="Also write the plan to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Research, analyse and write a technical plan for DESCRIPTION."""
    from rich.console import Console

    config, planner, _ = _setup(verbose)
    console = Console(stderr=True)

    try:
        request = PlanRequest.from_text(description)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_INVALID)

    start = time.monotonic()
    try:
        doc = _run(_run_plan(planner, request, console))
    except (Cancelled, KeyboardInterrupt):
        typer.echo("\nCancelled.", err=True)
        raise typer.Exit(EXIT_CANCELLED)
    except PhaseFailed as e:
        console.print(f"[red]✗ Failed[/red] in {e.phase}: {e.cause}")
        raise typer.Exit(EXIT_FAILED)

    console.print(
        f"[green]✓ Done[/green]  searches: {doc.searches_used}/{doc.max_searches}"
        f"  time: {_fmt_duration(time.monotonic() - start)}"
    )
    markdown = PlanRenderer().render(doc)
    _write_output(markdown, output, console)
    typer.echo(markdown)


@app.command()
def chat(
    message: str = typer.Argument(..., help="Message to send"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Send one chat message (no web search) and print the reply."""
    from rich.console import Console

    _, _, chat_orchestrator = _setup(verbose)
    console = Console(stderr=True)

    try:
        request = PlanRequest.from_text(message)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_INVALID)

    try:
        reply = _run(_run_chat(chat_orchestrator, request, console))
    except (Cancelled, KeyboardInterrupt):
        typer.echo("\nCancelled.", err=True)
        raise typer.Exit(EXIT_CANCELLED)
    except ChatProviderFailed as e:
        console.print(f"[red]✗ Failed[/red]: {e.cause}")
        raise typer.Exit(EXIT_FAILED)

    typer.echo(reply)


_SESSION_HELP = (
    "Commands: /plan (plan mode), /chat (chat mode), /clear, /history, /quit. "
    "Anything else is sent in the current mode."
)


async def _session_turn(
    line: str,
    state: SessionState,
    planner: PlanningOrchestrator,
    chat_orchestrator: ChatOrchestrator,
    console,
) -> bool:
    """
    Handle one line of session input.

    Returns:
        False when the session should end
    """
    text = line.strip()
    if not text:
        return True

    command = text.lower()
    if command in ("/quit", "/exit"):
        return False
    if command == "/help":
        console.print(_SESSION_HELP)
        return True
    if command == "/clear":
        state.clear()
        console.print("[dim]History cleared.[/dim]")
        return True
    if command == "/history":
        if not state.turns:
            console.print("[dim](empty)[/dim]")
        for turn in state.turns:
            who = "you" if turn.role is Role.USER else "assistant"
            console.print(f"[bold]{who}:[/bold] {turn.content}")
        return True
    if command in ("/plan", "/chat"):
        state.set_mode(SessionMode.PLAN if command == "/plan" else SessionMode.CHAT)
        console.print(f"[dim]Mode: {state.mode.value}[/dim]")
        return True
    if text.startswith("/"):
        console.print(f"[yellow]Unknown command[/yellow] {text}. {_SESSION_HELP}")
        return True

    state.add_user(text)
    request = state.snapshot()
    try:
        if state.mode is SessionMode.PLAN:
            doc = await _run_plan(planner, request, console)
            markdown = PlanRenderer().render(doc)
            console.print(markdown, markup=False)
            state.add_assistant(doc.final_text)
        else:
            reply = await _run_chat(chat_orchestrator, request, console)
            console.print(reply, markup=False)
            state.add_assistant(reply)
    except Cancelled:
        state.discard_pending_user_turn()
        console.print("[yellow]Cancelled.[/yellow]")
    except PhaseFailed as e:
        state.discard_pending_user_turn()
        console.print(f"[red]✗ Failed[/red] in {e.phase}: {e.cause}")
    except ChatProviderFailed as e:
        state.discard_pending_user_turn()
        console.print(f"[red]✗ Failed[/red]: {e.cause}")
    return True


@app.command()
def session(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Interactive session: chat about an idea, then switch to /plan."""
    from rich.console import Console

    _, planner, chat_orchestrator = _setup(verbose)
    console = Console()
    state = SessionState()
    console.print(f"[bold]planwright session[/bold]  {_SESSION_HELP}")

    # One loop for the whole session; the LLM and HTTP clients are bound to it
    loop = asyncio.new_event_loop()
    try:
        while True:
            line = console.input(f"[bold]{state.mode.value}>[/bold] ")
            if not loop.run_until_complete(
                _session_turn(line, state, planner, chat_orchestrator, console)
            ):
                break
    except (EOFError, KeyboardInterrupt):
        typer.echo("", err=True)
    finally:
        loop.close()


@app.command()
def api(
    host: str = typer.Option(None, "--host", help="Bind host (default from config)"),
    port: int = typer.Option(None, "--port", help="Bind port (default from config)"),
):
    """Serve the HTTP API under /planner."""
    from planwright.web import run_api

    config = load_config()
    configure_logging(json_format=True, level=level_for(config.output.verbosity))
    run_api(config, host=host, port=port)


@app.command()
def serve():
    """Start the MCP server on stdio."""
    from planwright.__main__ import main

    asyncio.run(main())


@app.command("config")
def show_config():
    """Print the config file location and effective values."""
    config = load_config()
    values = config.model_dump(mode="json")
    if values["deepseek"].get("api_key"):
        values["deepseek"]["api_key"] = "***"

    typer.echo(f"# {get_config_path()}")
    typer.echo(yaml.safe_dump(values, default_flow_style=False, sort_keys=False).rstrip())


if __name__ == "__main__":
    app()
