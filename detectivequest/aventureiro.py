"""Mansion exploration that collects clues into an ordered collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO

from detectivequest.novato import (
    Writer,
    _banner,
    _build_mansion,
    _navigate,
    _run_menu,
    _streams,
    _write_paths,
    read_option,
)

_LISTING_TOP = "\n=========== Pistas coletadas (ordem alfabetica) ===========\n"
_LISTING_BOTTOM = "===========================================================\n"

_ROOM_CLUES = {
    "Hall de Entrada": "Pegadas de lama",
    "Corredor": "Perfume forte",
    "Biblioteca": "Livro fora do lugar",
    "Escritorio": "Janela entreaberta",
    "Jardim": "Luva perdida",
    "Adega": "Taça quebrada",
    "Despensa": "Rastro de açúcar",
    "Estufa": "Terra revolvida",
}


@dataclass
class ClueRoom:
    """A room of the mansion that may hold a clue."""

    name: str
    clue: Optional[str] = None
    left: Optional[ClueRoom] = None
    right: Optional[ClueRoom] = None

    def __post_init__(self) -> None:
        if not self.clue:
            self.clue = None


class ClueTree:
    """Collected clues kept in alphabetical order with their counts."""

    def __init__(self, clues: Iterable[str] = ()) -> None:
        self._counts: dict[str, int] = {}
        for clue in clues:
            self.insert(clue)

    def insert(self, text: Optional[str]) -> None:
        """Add a clue; empty clues are ignored, repeats raise the count."""
        if not text:
            return
        self._counts[text] = self._counts.get(text, 0) + 1

    def items(self) -> list[tuple[str, int]]:
        """Return (clue, count) pairs in alphabetical order."""
        return sorted(self._counts.items())

    def format_lines(self) -> list[str]:
        """Return the listing lines shown to the player."""
        return [
            f"- {text} (x{count})" if count > 1 else f"- {text}"
            for text, count in self.items()
        ]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._counts))

    def __len__(self) -> int:
        return len(self._counts)


def _write_clue_listing(clues: ClueTree, out: Writer) -> None:
    """Write the alphabetical listing of collected clues."""
    out(_LISTING_TOP)
    if clues:
        for entry in clues.format_lines():
            out(entry + "\n")
    else:
        out("(Nenhuma pista coletada)\n")
    out(_LISTING_BOTTOM)


def build_map() -> ClueRoom:
    """Build the fixed mansion map with its clues and return the hall."""
    return _build_mansion(
        lambda name: ClueRoom(name, _ROOM_CLUES.get(name)), "Hall de Entrada"
    )


def explore(
    hall: Optional[ClueRoom],
    clues: ClueTree,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> ClueTree:
    """Walk the map interactively, adding each room's clue to ``clues``."""
    stdin, stdout = _streams(stdin, stdout)
    out = stdout.write

    if hall is None:
        out("Mapa inexistente.\n")
        return clues

    _banner(out, "   Detective Quest - Coleta de Pistas (BST)   ")

    current = hall
    if current.clue:
        clues.insert(current.clue)
        out(f"Voce esta no {current.name}.\n")
        out(f'Pista encontrada aqui: "{current.clue}"\n')
    else:
        out(f"Voce esta no {current.name}. (Sem pista aqui)\n")

    while True:
        out(f'\nCaminhos disponiveis a partir de "{current.name}":\n')
        _write_paths(current, out)
        following = _navigate(current, read_option(stdin), out)
        if following is None:
            break
        if following is current:
            continue
        current = following

        if current.clue:
            clues.insert(current.clue)
            out(f"\nVoce entrou em: {current.name}\n")
            out(f'Pista encontrada: "{current.clue}"\n')
        else:
            out(f"\nVoce entrou em: {current.name} (Sem pista aqui)\n")

    return clues


def main(argv: Optional[list[str]] = None) -> int:
    """Run the menu loop on standard input and output."""
    hall = build_map()

    def session(stdin: TextIO, stdout: TextIO) -> None:
        clues = explore(hall, ClueTree(), stdin, stdout)
        _write_clue_listing(clues, stdout.write)

    return _run_menu("Explorar mansao e coletar pistas", session)


if __name__ == "__main__":
    raise SystemExit(main())