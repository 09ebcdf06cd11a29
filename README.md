# detectivequest

A small terminal detective game in three chapters. You walk through a fixed
mansion that is laid out as a binary tree. You start at the entrance hall and
choose a path in each room:

- `e`: go left
- `d`: go right
- `s`: stop exploring

Only the first non-blank character of a line counts, and case does not
matter. A blank line or the end of input means `s`. The game text is in
Portuguese.

## Chapters

**Novato**: explore the mansion. The walk ends when you reach a room with
no exits or when you choose to stop. The game then shows the rooms you
visited, in order.

```
detectivequest-novato
```

**Aventureiro**: some rooms hold a clue. A clue is collected automatically
when you enter its room, and the clue in the hall is collected at the start.
The walk goes on until you choose to stop. The game then lists the collected
clues in alphabetical order. A clue found more than once is shown with its
count, for example `(x2)`.

```
detectivequest-aventureiro
```

**Mestre**: clues point to suspects. Each time you are in a room, its clue is
collected and its associated suspect is shown. After you stop, the game lists
the clues and asks for the name of the suspect to accuse.

- The verdict is *CULPADO* when at least two collected clues, repeats
  included, point to that suspect.
- Otherwise the verdict is *INSUFICIENTE*.
- If you give an empty name, the trial ends without a verdict.

```
detectivequest-mestre
```

Each chapter opens with a menu:

- `1` starts an exploration. The clues start empty every time.
- `0` quits. End of input also quits.
- Any other number is rejected as an invalid option.

## Using it from Python

Each chapter is a module: `detectivequest.novato`,
`detectivequest.aventureiro` and `detectivequest.mestre`. Each module has:

- `build_map()`, which returns the entrance hall of the mansion.
- `explore(...)`, which runs one walk over the given input and output streams. When a stream is left out, the standard stream is used.
- `main()`, which runs the whole menu.

What each `explore` gives back:

- `novato.explore(root, stdin, stdout)` returns the list of visited room names.
- `aventureiro.explore(hall, clues, stdin, stdout)` fills a `ClueTree` and returns it.
- `mestre.explore(hall, clues, table, stdin, stdout)` fills a `ClueTree` and returns it.

The other parts:

- `ClueTree` keeps the collected clues with their counts. Use `insert`, `items` and `format_lines`, iterate over it, or take `len`.
- `mestre.SuspectTable` maps clue text to a suspect, through `add` and `find`.
- `mestre.build_suspect_table()` returns the table used by the story.
- `mestre.count_clues_for(clues, table, accused)` counts the clues that point to a suspect.
- `mestre.judge(clues, table, stdin, stdout)` runs the accusation. It returns `True` (guilty), `False` (insufficient) or `None` (no accusation).

```python
import io
from detectivequest import aventureiro, mestre

table = mestre.build_suspect_table()
print(table.find("Perfume forte"))  # Srta. Violeta

clues = aventureiro.ClueTree(["Perfume forte", "Perfume forte"])
print(mestre.count_clues_for(clues, table, "Srta. Violeta"))  # 2

out = io.StringIO()
verdict = mestre.judge(clues, table, io.StringIO("Srta. Violeta\n"), out)
print(verdict)  # True
```

## What it does not do

- The mansion, the clues and the suspects are fixed. They cannot be loaded from a file or changed from the command line.
- There is no way to save a game. Nothing is stored between runs.

## Running the tests

```
pip install -e .[test]
pytest
```