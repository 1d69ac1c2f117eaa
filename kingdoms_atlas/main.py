"""Main entry point - REPL for inspecting a map data snapshot."""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from pydantic import ValidationError

from kingdoms_atlas.config import AtlasSettings
from kingdoms_atlas.errors import AtlasError
from kingdoms_atlas.models.cells import CellKind
from kingdoms_atlas.models.entities import Id, Kingdom, Player
from kingdoms_atlas.models.game_world import GameWorld
from kingdoms_atlas.systems.lookup import NameIndex
from kingdoms_atlas.systems.world_builder import WorldBuilder


console = Console()

HISTORY_DIR = Path.home() / ".kingdoms_atlas"


class Explorer:
    """Holds a built world plus the name indexes the REPL looks things up in."""
    
    def __init__(self, world: GameWorld, settings: Optional[AtlasSettings] = None):
        self.world = world
        self.settings = settings or AtlasSettings()
        self.kingdom_names = NameIndex(world.kingdoms)
        self.player_names = NameIndex(world.players)
    
    @classmethod
    def from_file(cls, path: Path, settings: Optional[AtlasSettings] = None) -> "Explorer":
        """Read a snapshot file and build its world."""
        settings = settings or AtlasSettings()
        raw_text = Path(path).read_text(encoding="utf-8")
        world = WorldBuilder(settings).from_raw_data(raw_text)
        return cls(world, settings)
    
    def find_kingdom(self, name: str) -> Optional[tuple[Id, Kingdom]]:
        kid = self.kingdom_names.get(name)
        if kid is None:
            return None
        return kid, self.world.kingdoms[kid]
    
    def find_player(self, name: str) -> Optional[tuple[Id, Player]]:
        pid = self.player_names.get(name)
        if pid is None:
            return None
        return pid, self.world.players[pid]


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def print_help() -> None:
    """Print help information."""
    table = Table(title="Commands", show_header=True, header_style="bold magenta")
    table.add_column("Command", style="cyan")
    table.add_column("Description")
    
    commands = [
        ("summary", "Show world totals and cell counts"),
        ("kingdoms", "List kingdoms by victory points"),
        ("kingdom <name>", "Show a kingdom's players"),
        ("player <name>", "Show a player's villages"),
        ("cell <x> <y>", "Show how a cell is classified"),
        ("help", "Show this help"),
        ("quit", "Exit"),
    ]
    
    for cmd, desc in commands:
        table.add_row(cmd, desc)
    
    console.print(table)


def _not_found(kind: str, name: str, index: NameIndex, threshold: int) -> None:
    console.print(f"[red]Unknown {kind}: {name}[/red]")
    suggestion = index.suggest(name, threshold)
    if suggestion:
        console.print(f"[yellow]Did you mean '{suggestion}'?[/yellow]")


def handle_kingdoms(explorer: Explorer) -> None:
    """List every kingdom."""
    world = explorer.world
    if not world.kingdoms:
        console.print("[dim]No kingdoms in this snapshot[/dim]")
        return
    
    table = Table(title="Kingdoms", header_style="bold magenta")
    table.add_column("Tag", style="cyan")
    table.add_column("Id", justify="right")
    table.add_column("Victory points", justify="right")
    table.add_column("Players", justify="right")
    table.add_column("Villages", justify="right")
    
    ranked = sorted(world.kingdoms.items(), key=lambda item: item[1].victory_points, reverse=True)
    for kid, kingdom in ranked:
        table.add_row(
            kingdom.name,
            str(kid),
            str(kingdom.victory_points),
            str(len(kingdom.player_ids)),
            str(len(world.kingdom_villages(kid))),
        )
    
    console.print(table)


def handle_kingdom(explorer: Explorer, name: str) -> None:
    """Show one kingdom's players."""
    found = explorer.find_kingdom(name)
    if found is None:
        _not_found("kingdom", name, explorer.kingdom_names, explorer.settings.suggest_threshold)
        return
    
    kid, kingdom = found
    world = explorer.world
    table = Table(header_style="bold magenta")
    table.add_column("Player", style="cyan")
    table.add_column("Tribe")
    table.add_column("Role")
    table.add_column("Villages", justify="right")
    table.add_column("Population", justify="right")
    
    for pid in kingdom.player_ids:
        player = world.players[pid]
        villages = world.player_villages(pid)
        table.add_row(
            player.name,
            player.tribe.value,
            player.role.value,
            str(len(villages)),
            str(sum(v.population for v in villages)),
        )
    
    console.print(Panel(
        table,
        title=f"{kingdom.name} ({kid})",
        subtitle=f"{kingdom.victory_points} victory points",
    ))


def handle_player(explorer: Explorer, name: str) -> None:
    """Show one player's villages."""
    found = explorer.find_player(name)
    if found is None:
        _not_found("player", name, explorer.player_names, explorer.settings.suggest_threshold)
        return
    
    pid, player = found
    table = Table(header_style="bold magenta")
    table.add_column("Village", style="cyan")
    table.add_column("Coords")
    table.add_column("Population", justify="right")
    table.add_column("Capital")
    table.add_column("City")
    
    for village in explorer.world.player_villages(pid):
        table.add_row(
            village.name,
            f"({village.x}|{village.y})",
            str(village.population),
            "yes" if village.is_capital else "",
            "yes" if village.is_city else "",
        )
    
    console.print(Panel(
        table,
        title=f"{player.name} ({pid})",
        subtitle=f"{player.tribe.value}, {player.role.value}, {player.treasures} treasures",
    ))


def handle_cell(explorer: Explorer, parts: list[str]) -> None:
    """Describe the cell at a coordinate."""
    if len(parts) < 3:
        console.print("[red]Usage: cell <x> <y>[/red]")
        return
    try:
        x, y = int(parts[1]), int(parts[2])
    except ValueError:
        console.print("[red]Coordinates must be numbers[/red]")
        return
    
    world = explorer.world
    cell = world.cell_at(x, y)
    if cell is None:
        console.print(f"[dim]No cell at ({x}|{y})[/dim]")
        return
    
    def kingdom_label(kid: Optional[Id]) -> str:
        if kid is None or kid not in world.kingdoms:
            return "none"
        return world.kingdoms[kid].name
    
    console.print(f"[bold]({x}|{y})[/bold]: {cell.kind.value}")
    if cell.kind == CellKind.OCCUPIED:
        village = world.villages[cell.village_id]
        player = world.players[cell.player_id]
        console.print(f"  Village: {village.name} (pop {village.population})")
        console.print(f"  Player: {player.name}")
        console.print(f"  Kingdom: {kingdom_label(cell.kingdom_id)}")
    else:
        console.print(f"  Influenced by: {kingdom_label(cell.influenced_by)}")


def dispatch(explorer: Explorer, command: str) -> bool:
    """Run one REPL command. Returns False when the REPL should stop."""
    parts = command.strip().split()
    if not parts:
        return True
    cmd = parts[0].lower()
    rest = command.strip()[len(parts[0]):].strip()
    
    if cmd in ("quit", "exit"):
        return False
    elif cmd == "help":
        print_help()
    elif cmd == "summary":
        console.print(explorer.world.summary())
    elif cmd == "kingdoms":
        handle_kingdoms(explorer)
    elif cmd == "kingdom":
        if not rest:
            console.print("[red]Usage: kingdom <name>[/red]")
        else:
            handle_kingdom(explorer, rest)
    elif cmd == "player":
        if not rest:
            console.print("[red]Usage: player <name>[/red]")
        else:
            handle_player(explorer, rest)
    elif cmd == "cell":
        handle_cell(explorer, parts)
    else:
        console.print(f"[red]Unknown command: {cmd}[/red] [dim](type 'help')[/dim]")
    return True


def main():
    """Main entry point."""
    try:
        settings = AtlasSettings.from_env()
    except ValidationError as e:
        console.print(f"[red]Invalid KINGDOMS_ATLAS_* settings: {escape(str(e))}[/red]")
        sys.exit(1)
    setup_logging(settings.log_level)
    
    if len(sys.argv) != 2:
        console.print("[yellow]Usage: python -m kingdoms_atlas.main <snapshot.json>[/yellow]")
        sys.exit(1)
    
    try:
        explorer = Explorer.from_file(Path(sys.argv[1]), settings)
    except (OSError, AtlasError) as e:
        console.print(f"[red]Failed to load snapshot: {e}[/red]")
        sys.exit(1)
    
    console.print(Panel(
        explorer.world.summary(),
        title="Snapshot loaded",
        border_style="green",
    ))
    console.print("\n[dim]Type 'help' for commands[/dim]\n")
    
    HISTORY_DIR.mkdir(exist_ok=True)
    session = PromptSession(
        history=FileHistory(str(HISTORY_DIR / "command_history")),
        auto_suggest=AutoSuggestFromHistory(),
    )
    
    while True:
        try:
            command = session.prompt("> ")
            if not dispatch(explorer, command):
                break
        except KeyboardInterrupt:
            console.print("\n[dim]Type 'quit' to exit[/dim]")
        except EOFError:
            break


if __name__ == "__main__":
    main()
