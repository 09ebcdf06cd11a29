"""Final chapter: explore the mansion, collect clues and accuse a suspect."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

from detectivequest.aventureiro import ClueTree, _write_clue_listing
from detectivequest.novato import (
    Room,
    _banner,
    _build_mansion,
    _navigate,
    _run_menu,
    _streams,
    _write_paths,
    read_option,
)

_HASH_MASK = (1 << 64) - 1
DEFAULT_CAPACITY = 101
GUILTY_THRESHOLD = 2

_ROOM_CLUES: dict[str, Optional[str]] = {
    "Hall de Entrada": "Pegadas de lama",
    "Sala de Estar": "Almofada fora do lugar",
    "Corredor": "Perfume forte",
    "Biblioteca": "Livro raro deslocado",
    "Cozinha": None,
    "Escritorio": "Janela entreaberta",
    "Jardim": "Luva de couro",
    "Adega": "Taça com batom",
    "Deposito": None,
    "Despensa": "Rastro de acucar",
    "Estufa": "Terra revolvida",
}

_SUSPECTS = (
    ("Pegadas de lama", "Jardineiro"),
    ("Almofada fora do lugar", "Sra. Branca"),
    ("Perfume forte", "Srta. Violeta"),
    ("Livro raro deslocado", "Professor Carvalho"),
    ("Janela entreaberta", "Sr. Mostarda"),
    ("Luva de couro", "Sr. Mostarda"),
    ("Taca com batom", "Srta. Violeta"),
    ("Rastro de acucar", "Dra. Orquidea"),
    ("Terra revolvida", "Jardineiro"),
)


def djb2(text: str) -> int:
    """Return the 64-bit DJB2 hash of the UTF-8 bytes of ``text``."""
    value = 5381
    for byte in text.encode("utf-8"):
        value = (value * 33 + byte) & _HASH_MASK
    return value


class SuspectTable:
    """Map from clue text to the suspect it points to."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._buckets: list[dict[str, str]] = [{} for _ in range(capacity)]

    def _bucket(self, clue: str) -> dict[str, str]:
        return self._buckets[djb2(clue) % self.capacity]

    def add(self, clue: str, suspect: str) -> None:
        """Associate ``clue`` with ``suspect``, replacing any earlier one."""
        self._bucket(clue)[clue] = suspect

    def find(self, clue: str) -> Optional[str]:
        """Return the suspect for ``clue``, or None if it is unknown."""
        return self._bucket(clue).get(clue)

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and clue in self._bucket(clue)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets:
            yield from bucket


def clue_for_room(name: str) -> Optional[str]:
    """Return the clue found in the named room, or None."""
    return _ROOM_CLUES.get(name)


def build_map() -> Room:
    """Build the fixed mansion map and return the entrance hall."""
    return _build_mansion(Room, "Hall de Entrada")


def build_suspect_table() -> SuspectTable:
    """Return the table of clue-to-suspect associations of the story."""
    table = SuspectTable(DEFAULT_CAPACITY)
    for clue, suspect in _SUSPECTS:
        table.add(clue, suspect)
    return table


def count_clues_for(clues: ClueTree, table: SuspectTable, accused: str) -> int:
    """Count collected clues (with repeats) that point to ``accused``."""
    return sum(
        count for text, count in clues.items() if table.find(text) == accused
    )


def explore(
    hall: Optional[Room],
    clues: ClueTree,
    table: SuspectTable,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> ClueTree:
    """Walk the map, collecting each room's clue and naming its suspect."""
    stdin, stdout = _streams(stdin, stdout)
    out = stdout.write

    if hall is None:
        out("Mapa inexistente.\n")
        return clues

    current = hall
    _banner(out, "    Detective Quest - Exploracao Final        ")

    while True:
        out(f"\nVoce esta em: {current.name}\n")

        clue = clue_for_room(current.name)
        if clue:
            clues.insert(clue)
            suspect = table.find(clue)
            if suspect is not None:
                out(f'Pista encontrada: "{clue}" -> suspeito associado: {suspect}\n')
            else:
                out(f'Pista encontrada: "{clue}" (sem suspeito associado)\n')
        else:
            out("Nenhuma pista encontrada aqui.\n")

        out(f'\nCaminhos disponiveis a partir de "{current.name}":\n')
        _write_paths(current, out)
        following = _navigate(current, read_option(stdin), out)
        if following is None:
            break
        current = following

    return clues


def judge(
    clues: ClueTree,
    table: SuspectTable,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Optional[bool]:
    """List the clues, read an accusation and give the verdict.

    Returns True for guilty, False for insufficient evidence and None when
    no accusation was made.
    """
    stdin, stdout = _streams(stdin, stdout)
    out = stdout.write

    _write_clue_listing(clues, out)

    out('Informe o nome do suspeito para acusacao (ex.: "Srta. Violeta"): ')
    line = stdin.readline()
    if not line:
        out("Entrada invalida. Encerrando julgamento.\n")
        return None
    accused = line.rstrip()
    if not accused:
        out("Nenhum nome informado. Encerrando julgamento.\n")
        return None

    total = count_clues_for(clues, table, accused)
    if total >= GUILTY_THRESHOLD:
        out("\nVEREDITO: CULPADO!\n")
        out(f"Ha pelo menos {total} pista(s) que apontam para {accused}. Caso encerrado.\n")
        return True
    out("\nVEREDITO: INSUFICIENTE.\n")
    out(f"Apenas {total} pista(s) apontam para {accused}. Investigacao inconclusiva.\n")
    return False


def main(argv: Optional[list[str]] = None) -> int:
    """Run the menu loop on standard input and output."""
    hall = build_map()
    table = build_suspect_table()

    def session(stdin: TextIO, stdout: TextIO) -> None:
        clues = explore(hall, ClueTree(), table, stdin, stdout)
        judge(clues, table, stdin, stdout)

    return _run_menu("Explorar mansao e coletar pistas", session)


if __name__ == "__main__":
    raise SystemExit(main())