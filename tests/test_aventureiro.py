import io
import sys

from detectivequest.aventureiro import ClueRoom, ClueTree, build_map, explore, main


def run(text, hall=None):
    clues = ClueTree()
    out = io.StringIO()
    result = explore(build_map() if hall is None else hall, clues, io.StringIO(text), out)
    return result, out.getvalue()


def test_clue_tree_orders_alphabetically():
    tree = ClueTree(["b", "a", "c"])
    assert list(tree) == ["a", "b", "c"]
    assert len(tree) == 3


def test_clue_tree_counts_repeats():
    tree = ClueTree()
    tree.insert("a")
    tree.insert("a")
    tree.insert("b")
    assert tree.items() == [("a", 2), ("b", 1)]
    assert tree.format_lines() == ["- a (x2)", "- b"]


def test_clue_tree_ignores_empty():
    tree = ClueTree()
    tree.insert("")
    tree.insert(None)
    assert len(tree) == 0
    assert tree.items() == []


def test_clue_room_empty_clue_is_none():
    assert ClueRoom("X", "").clue is None
    assert ClueRoom("X", "pista").clue == "pista"


def test_build_map_clues():
    hall = build_map()
    assert hall.name == "Hall de Entrada"
    assert hall.clue == "Pegadas de lama"
    assert hall.left.clue is None
    assert hall.right.right.right.clue == "Terra revolvida"
    assert hall.left.right.right.clue == "Rastro de açúcar"


def test_explore_collects_along_path():
    clues, output = run("d\nd\nd\ns\n")
    assert list(clues) == [
        "Luva perdida",
        "Pegadas de lama",
        "Perfume forte",
        "Terra revolvida",
    ]
    assert 'Pista encontrada: "Terra revolvida"' in output


def test_explore_quit_collects_hall_clue_only():
    clues, output = run("s\n")
    assert clues.items() == [("Pegadas de lama", 1)]
    assert 'Pista encontrada aqui: "Pegadas de lama"' in output
    assert "Exploracao encerrada pelo jogador." in output


def test_explore_room_without_clue():
    clues, output = run("e\ns\n")
    assert list(clues) == ["Pegadas de lama"]
    assert "Voce entrou em: Sala de Estar (Sem pista aqui)" in output


def test_explore_no_path_at_leaf():
    clues, output = run("d\nd\nd\nd\ns\n")
    assert "Nao ha caminho a direita." in output
    assert len(clues) == 4


def test_explore_invalid_option():
    _, output = run("q\ns\n")
    assert "Opcao invalida. Use 'e', 'd' ou 's'." in output


def test_explore_hall_without_clue():
    clues, output = run("s\n", hall=ClueRoom("Vazio"))
    assert len(clues) == 0
    assert "Voce esta no Vazio. (Sem pista aqui)" in output


def test_explore_missing_map():
    clues = ClueTree()
    out = io.StringIO()
    explore(None, clues, io.StringIO(""), out)
    assert out.getvalue() == "Mapa inexistente.\n"
    assert len(clues) == 0


def test_main_lists_clues(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\ne\ne\ns\n0\n"))
    assert main() == 0
    output = capsys.readouterr().out
    assert "- Livro fora do lugar\n- Pegadas de lama\n" in output
    assert output.endswith("Programa encerrado. Ate a proxima!\n")


def test_main_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main() == 0
    assert "Opcao invalida.\n" in capsys.readouterr().out