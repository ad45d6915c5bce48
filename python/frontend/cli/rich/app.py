"""Rich terminal frontend — tile row, rule table, and match colours.

Uses the ``rich`` library for styled output on top of the shared input
handler and backend. The cursor picks a tile; space grabs it so the
arrow keys slide it along the row.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.engine.matcher import MatchState, classify
from backend.models.tiles import symbol
from frontend.cli.input_handler import get_key

console = Console()

_MATCH_STYLES: dict[MatchState, str] = {
    MatchState.FULL: "bold black on green",
    MatchState.PARTIAL: "bold black on yellow",
    MatchState.NONE: "bold white on grey23",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- rendering ----------------------------------------------------------------


def _render_row(game: GamePlay, cursor: int | None = None, held: bool = False) -> Table:
    """Return a Rich Table with one cell per slot, coloured by match state."""
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(game.tile_count):
        table.add_column(width=3, justify="center")

    statuses = game.statuses()
    table.add_row(
        *(
            Text(f" {symbol(tile)} ", style=_MATCH_STYLES[statuses[tile]])
            for tile in game.state.arrangement
        )
    )
    if cursor is not None:
        marker = "[bold magenta]◆[/bold magenta]" if held else "[cyan]▲[/cyan]"
        table.add_row(*(marker if i == cursor else "" for i in range(game.tile_count)))
    return table


def _render_rules(state: GameState) -> Table:
    """Return a table listing every tile's rules and its current status."""
    table = Table(box=rich.box.ROUNDED, border_style="dim", show_lines=False)
    table.add_column("Tile", justify="center", style="bold")
    table.add_column("Rules")
    table.add_column("Status", justify="center")

    for tile, tile_rules in enumerate(state.rules):
        status = classify(tile_rules, state.arrangement, tile)
        text = ", ".join(rule.describe() for rule in tile_rules) or "[dim]-[/dim]"
        table.add_row(
            symbol(tile),
            text,
            Text(status.value, style=_MATCH_STYLES[status]),
        )
    return table


def _controls() -> Text:
    controls = Text()
    controls.append("  ←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("AD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  grab/drop   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  new   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, cursor: int, held: bool, status: str = "") -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")

    panel = Panel(
        Group(
            Align.center(_render_row(game, cursor, held)),
            Text(""),
            Align.center(_render_rules(game.state)),
        ),
        title=f"[bold cyan]Sortle  {game.tile_count} tiles[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _draw_help() -> None:
    console.clear()
    body = Text()
    body.append("Sort the tiles into the one order that satisfies every rule.\n\n")
    body.append("green", style="bold green")
    body.append("   all of the tile's rules hold\n")
    body.append("yellow", style="bold yellow")
    body.append("  some of them hold\n")
    body.append("grey", style="bold")
    body.append("    none of them hold\n\n")
    body.append("before X / after X", style="cyan")
    body.append("  relative order to tile X\n")
    body.append("N away from X", style="cyan")
    body.append("       exactly N slots apart\n")
    body.append("at position N", style="cyan")
    body.append("       fixed slot, counted from the left\n")

    console.print()
    console.print(
        Align.center(
            Panel(body, title="[bold]HOW TO PLAY[/bold]", border_style="bright_blue")
        )
    )
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SORTED!", style="bold green")
    congrats.append("  Every rule holds.  ", style="green")
    congrats.append("★\n", style="bold yellow")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")

    panel = Panel(
        Group(
            Align.center(_render_row(game)),
            Align.center(congrats),
            Align.center(stats),
        ),
        title=f"[bold green]Sortle  {game.tile_count} tiles[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    hint = Solver.hint(game.state.rules, game.state.arrangement)
    if hint is None:
        return "[green]Already solved![/green]"
    tile, destination = hint
    game.move(tile, destination)
    return (
        f"[cyan]Hint:[/cyan] moved [bold]{symbol(tile)}[/bold] "
        f"to position {destination + 1}"
    )


def _auto_solve(game: GamePlay) -> str:
    steps = 0
    while (hint := Solver.hint(game.state.rules, game.state.arrangement)) is not None:
        game.move(*hint)
        steps += 1
        console.clear()
        console.print()
        console.print(
            Align.center(
                Panel(
                    Align.center(_render_row(game)),
                    title="[bold cyan]Auto-Solve[/bold cyan]",
                    border_style="cyan",
                    padding=(1, 2),
                )
            )
        )
        sys.stdout.flush()
        time.sleep(0.3)
    if steps == 0:
        return "[green]Already solved![/green]"
    return f"[bold green]Solved in {steps} moves![/bold green]"


# -- game loop ----------------------------------------------------------------


def _play_game(tile_count: int, rng: random.Random) -> None:
    while True:
        game = GamePlay(tile_count, seed=rng.randrange(2**32))
        cursor = 0
        held = False
        status = ""

        while not game.is_won:
            _draw_game(game, cursor, held, status)
            status = ""
            key = get_key()

            if key in ("left", "right"):
                step = -1 if key == "left" else 1
                if held:
                    game.shift(game.state.arrangement[cursor], step)
                cursor = max(0, min(tile_count - 1, cursor + step))
            elif key in ("grab", "enter"):
                held = not held
            elif key == "hint":
                held = False
                status = _apply_hint(game)
            elif key == "solve":
                held = False
                status = _auto_solve(game)
            elif key == "help":
                _draw_help()
            elif key == "restart":
                break
            elif key == "quit":
                return

        if not game.is_won:
            continue

        # -- win ---------------------------------------------------------------
        game.state.pause()
        _draw_win(game)
        console.print(
            Align.center(
                Text("\n  Press R to play again, Q to quit.\n", style="dim")
            )
        )

        while True:
            key = get_key()
            if key == "restart":
                break
            if key == "quit":
                return


# -- public entry points ------------------------------------------------------


def show_puzzle(state: GameState) -> None:
    """Print a generated puzzle, its unique solution, and the start row."""
    solution = Solver.solve(state.rules, state.tile_count)
    start = " ".join(symbol(tile) for tile in state.arrangement)
    answer = " ".join(symbol(tile) for tile in solution)

    console.print(_render_rules(state))
    console.print(Text.assemble(("Start:    ", "dim"), (start, "bold")))
    console.print(Text.assemble(("Solution: ", "dim"), (answer, "bold green")))


def run(tile_count: int, seed: int | None = None) -> None:
    """Launch the Rich CLI. Each new puzzle draws its seed from *seed*."""
    try:
        _play_game(tile_count, random.Random(seed))
    finally:
        console.clear()
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
