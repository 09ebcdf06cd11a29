"""Mansion map exploration along a fixed binary tree of rooms."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, TypeVar

MAX_PATH = 128

_RULE = "=============================================="
_MENU_NUMBER = re.compile(r"\s*([+-]?\d+)")

# (room, left exit, right exit); None as the first name stands for the hall.
_MANSION_EDGES: tuple[tuple[Optional[str], Optional[str], Optional[str]], ...] = (
    (None, "Sala de Estar", "Corredor"),
    ("Sala de Estar", "Biblioteca", "Cozinha"),
    ("Corredor", "Escritorio", "Jardim"),
    ("Biblioteca", "Adega", "Deposito"),
    ("Cozinha", None, "Despensa"),
    ("Jardim", None, "Estufa"),
)

_DIRECTIONS = {"e": ("left", "esquerda"), "d": ("right", "direita")}

RoomT = TypeVar("RoomT")
Writer = Callable[[str], object]


@dataclass
class Room:
    """A room of the mansion with up to two exits."""

    name: str
    left: Optional[Room] = None
    right: Optional[Room] = None

    def is_leaf(self) -> bool:
        """Return True when the room has no exits."""
        return self.left is None and self.right is None


def _build_mansion(make_room: Callable[[str], RoomT], hall_name: str) -> RoomT:
    """Create the rooms of the fixed layout with ``make_room`` and link them."""
    rooms: dict[str, RoomT] = {}

    def room(name: str) -> RoomT:
        if name not in rooms:
            rooms[name] = make_room(name)
        return rooms[name]

    hall = room(hall_name)
    for parent, left, right in _MANSION_EDGES:
        node = hall if parent is None else room(parent)
        if left is not None:
            node.left = room(left)
        if right is not None:
            node.right = room(right)
    return hall


def build_map() -> Room:
    """Build the fixed mansion map and return the entrance hall."""
    return _build_mansion(Room, "Hall de entrada")


def read_option(stream: TextIO) -> str:
    """Read a line and return its first non-blank character in lower case.

    End of input or a blank line counts as 's' (leave).
    """
    stripped = stream.readline().lstrip()
    return stripped[0].lower() if stripped else "s"


def _menu_choice(line: str) -> int:
    """Parse a leading integer from a menu line; anything else is 0."""
    match = _MENU_NUMBER.match(line)
    return int(match.group(1)) if match else 0


def _streams(
    stdin: Optional[TextIO], stdout: Optional[TextIO]
) -> tuple[TextIO, TextIO]:
    return (
        sys.stdin if stdin is None else stdin,
        sys.stdout if stdout is None else stdout,
    )


def _banner(out: Writer, title: str) -> None:
    out(f"\n{_RULE}\n{title}\n{_RULE}\n")


def _write_paths(room, out: Writer, note_dead_end: bool = False) -> None:
    """Write the exits of ``room`` followed by the choice prompt."""
    if room.left is not None:
        out(f"  (e) Esquerda: {room.left.name}\n")
    if room.right is not None:
        out(f"  (d) Direita : {room.right.name}\n")
    if note_dead_end and room.left is None and room.right is None:
        out("  Nenhum. (fim de caminho)\n")
    out("  (s) Sair da exploracao\n")
    out("Escolha [e/d/s]: ")


def _navigate(current, option: str, out: Writer, where: str = ""):
    """Apply a menu option: the next room, ``current`` if unmoved, None to leave."""
    if option == "s":
        out("\nExploracao encerrada pelo jogador.\n")
        return None
    if option in _DIRECTIONS:
        attr, word = _DIRECTIONS[option]
        target = getattr(current, attr)
        if target is None:
            out(f"Nao ha caminho a {word}{where}.\n")
            return current
        return target
    out("Opcao invalida. Use 'e', 'd' ou 's'.\n")
    return current


def _run_menu(
    label: str,
    session: Callable[[TextIO, TextIO], object],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run the main menu, starting ``session`` whenever option 1 is chosen."""
    stdin, stdout = _streams(stdin, stdout)
    while True:
        stdout.write(f"\n===== Menu =====\n1 - {label}\n0 - Sair\nOpcao: ")
        line = stdin.readline()
        if not line:
            break
        choice = _menu_choice(line)
        if choice == 1:
            session(stdin, stdout)
        elif choice == 0:
            break
        else:
            stdout.write("Opcao invalida.\n")
    stdout.write("Programa encerrado. Ate a proxima!\n")
    return 0


def explore(
    root: Optional[Room],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> list[str]:
    """Walk the map interactively and return the names of the rooms visited."""
    stdin, stdout = _streams(stdin, stdout)
    out = stdout.write

    if root is None:
        out("Mapa vazio.\n")
        return []

    path: list[str] = []
    current = root
    _banner(out, "        Detective Quest - Mansao Enigma        ")
    out("Bem-vindo(a)! Iniciando no Hall de entrada.\n")

    while True:
        if len(path) < MAX_PATH:
            path.append(current.name)

        if current.is_leaf():
            out(f"\nVoce chegou ao fim do caminho em: {current.name}\n")
            break

        out(f"\nVoce esta em: {current.name}\nCaminhos disponiveis:\n")
        _write_paths(current, out, note_dead_end=True)
        following = _navigate(
            current, read_option(stdin), out, f" a partir de {current.name}"
        )
        if following is None:
            break
        current = following

    out("\n---------- Salas visitadas ----------\n")
    if path:
        out(" -> ".join(path) + "\n")
    out("-------------------------------------\n")
    return path


def main(argv: Optional[list[str]] = None) -> int:
    """Run the menu loop on standard input and output."""
    root = build_map()
    return _run_menu(
        "Explorar a mansao",
        lambda stdin, stdout: explore(root, stdin, stdout),
    )


if __name__ == "__main__":
    raise SystemExit(main())