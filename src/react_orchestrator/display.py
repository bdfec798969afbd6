# display.py
# All terminal output for the orchestration engine.
#
# This module owns presentation entirely. The engine, supervisor, planner and
# orchestrator never format strings for the user; they call named functions
# here. Replace `console` (e.g. Console(quiet=True)) to silence a run.
#
# Colour language:
#   cyan: orchestration / routing events
#   blue: model calls
#   yellow: planning
#   green: success / final answers
#   red: failures and halts
#   magenta: ReACT internals (Thought / Action / Observation)

from collections.abc import Iterable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from react_orchestrator.models import AgentDescriptor, Plan

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _label(tag: str, color: str) -> Text:
    t = Text()
    t.append(f" {tag} ", style=f"bold white on {color}")
    return t


def _mono(value: str, max_len: int = 120) -> str:
    if len(value) > max_len:
        return escape(value[:max_len]) + "…"
    return escape(value)


# ---------------------------------------------------------------------------
# Run entry
# ---------------------------------------------------------------------------


def banner(mode: str, model: str) -> None:
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]ReAct Orchestrator[/bold cyan]\n"
            "[dim]Think → Act → Observe, with plan-execute or supervised delegation[/dim]\n\n"
            f"[dim]Mode  :[/dim] [white]{mode}[/white]\n"
            f"[dim]Model :[/dim] [white]{model}[/white]",
            border_style="cyan",
            padding=(1, 4),
        )
    )


def task_received(task: str) -> None:
    console.print()
    console.print(Rule("[cyan]NEW TASK[/cyan]", style="cyan"))
    console.print(
        Panel(
            f"[white]{escape(task)}[/white]",
            title=_label("TASK", "cyan"),
            border_style="cyan",
            padding=(0, 2),
        )
    )


# ---------------------------------------------------------------------------
# Think-act-observe loop
# ---------------------------------------------------------------------------


def agent_start(agent: str, task: str) -> None:
    console.print()
    console.print(
        _label(agent.upper(), "cyan"),
        f"[cyan] → Running loop for:[/cyan] [white]{_mono(task, 100)}[/white]",
    )


def prompt_sent(iteration: int, prompt: str) -> None:
    console.print(
        f"  [blue]Prompt #{iteration}[/blue]  [dim]{_mono(prompt.replace(chr(10), ' '), 160)}[/dim]"
    )


def react_thought(thought: str) -> None:
    console.print(f"  [magenta]Thought[/magenta]  [dim white]{_mono(thought, 200)}[/dim white]")


def react_action(tool: str, args: str) -> None:
    console.print(
        f"  [magenta]Action[/magenta]   [bold white]{escape(tool)}[/bold white]  [dim]{_mono(args, 140)}[/dim]"
    )


def react_observation(observation: str) -> None:
    console.print(f"  [magenta]Observe[/magenta]  [white]{_mono(observation, 140)}[/white]")


def tool_not_found(tool_name: str) -> None:
    console.print(
        Panel(
            f"[bold red]Tool [white]{escape(repr(tool_name))}[/white] is not registered.[/bold red]\n"
            "[dim]The model requested an action outside the registry. Halting.[/dim]",
            title=_label("TOOL NOT FOUND ✗", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )


def tool_failed(tool_name: str, reason: str) -> None:
    console.print(
        Panel(
            f"[bold red]Tool [white]{escape(repr(tool_name))}[/white] failed.[/bold red]\n\n[white]{escape(reason)}[/white]",
            title=_label("TOOL ERROR ✗", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )


# ---------------------------------------------------------------------------
# Supervisor
# ---------------------------------------------------------------------------


def workers_listed(descriptors: Iterable[AgentDescriptor]) -> None:
    console.print()
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan", padding=(0, 1))
    table.add_column("Worker", style="bold white")
    table.add_column("Description", style="dim white")
    for descriptor in descriptors:
        table.add_row(escape(descriptor.name), escape(descriptor.description))
    console.print(table)


def routing_decision(worker: str, task: str) -> None:
    console.print(
        Panel(
            f"[bold white]{escape(worker)}[/bold white]  [dim]←[/dim]  [white]{escape(task)}[/white]",
            title=_label("SUPERVISOR: ROUTED", "cyan"),
            border_style="cyan",
            padding=(0, 2),
        )
    )


def worker_not_found(worker: str) -> None:
    console.print(
        Panel(
            f"[bold red]Worker [white]{escape(repr(worker))}[/white] is not in the directory.[/bold red]",
            title=_label("WORKER NOT FOUND ✗", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )


# ---------------------------------------------------------------------------
# Plan-execute
# ---------------------------------------------------------------------------


def plan_parsed(plan: Plan) -> None:
    console.print()
    table = Table(
        box=box.SIMPLE_HEAVY,
        border_style="yellow",
        show_header=True,
        header_style="bold yellow",
        padding=(0, 1),
    )
    table.add_column("#", justify="center", width=4)
    table.add_column("Step", style="white")

    for index, step in enumerate(plan.steps, start=1):
        table.add_row(str(index), escape(step))

    console.print(
        Panel(
            table,
            title=_label("PLANNER: PLAN PARSED", "yellow"),
            subtitle=f"[dim]{len(plan)} step(s)[/dim]",
            border_style="yellow",
            padding=(0, 1),
        )
    )


def step_start(index: int, total: int, step: str) -> None:
    console.print()
    console.print(f"[bold cyan]  STEP [{index}/{total}][/bold cyan]  [white]{escape(step)}[/white]")


def step_result(index: int, result: str) -> None:
    console.print(f"  [bold green]✓ Step {index} done[/bold green]  [dim]{_mono(result, 120)}[/dim]")


# ---------------------------------------------------------------------------
# Tools listing
# ---------------------------------------------------------------------------


def tools_table(rows: Iterable[tuple[str, str]]) -> None:
    table = Table(box=box.SIMPLE_HEAVY, show_header=True, header_style="bold cyan", padding=(0, 1))
    table.add_column("Tool", style="bold white")
    table.add_column("Description", style="dim white")
    for name, description in rows:
        table.add_row(escape(name), escape(description))
    console.print(table)


# ---------------------------------------------------------------------------
# Final result
# ---------------------------------------------------------------------------


def final_result(result: str) -> None:
    console.print()
    console.print(
        Panel(
            f"[white]{escape(result)}[/white]",
            title=_label("RESULT", "green"),
            border_style="green",
            padding=(1, 2),
        )
    )
    console.print()


def halt(reason: str) -> None:
    console.print()
    console.print(
        Panel(
            f"[bold white]{escape(reason)}[/bold white]",
            title=_label("HALT", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )
    console.print()
