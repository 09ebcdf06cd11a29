import io
import sys

import pytest

from detectivequest.novato import MAX_PATH, Room, build_map, explore, main, read_option


def run(text, root=None):
    out = io.StringIO()
    path = explore(build_map() if root is None else root, io.StringIO(text), out)
    return path, out.getvalue()


def test_build_map_structure():
    hall = build_map()
    assert hall.name == "Hall de entrada"
    assert hall.left.name == "Sala de Estar"
    assert hall.right.name == "Corredor"
    assert hall.left.left.left.name == "Adega"
    assert hall.left.right.left is None
    assert hall.left.right.right.name == "Despensa"
    assert hall.right.right.right.name == "Estufa"


def test_is_leaf():
    hall = build_map()
    assert not hall.is_leaf()
    assert hall.right.right.right.is_leaf()
    assert Room("X").is_leaf()


@pytest.mark.parametrize(
    "line, expected",
    [("  E\n", "e"), ("d\n", "d"), ("", "s"), ("   \n", "s"), ("xyz\n", "x")],
)
def test_read_option(line, expected):
    assert read_option(io.StringIO(line)) == expected


def test_explore_to_leaf():
    path, output = run("e\ne\ne\n")
    assert path == ["Hall de entrada", "Sala de Estar", "Biblioteca", "Adega"]
    assert "Voce chegou ao fim do caminho em: Adega" in output
    assert "Hall de entrada -> Sala de Estar -> Biblioteca -> Adega\n" in output


def test_explore_quit_immediately():
    path, output = run("s\n")
    assert path == ["Hall de entrada"]
    assert "Exploracao encerrada pelo jogador." in output


def test_explore_eof_leaves():
    path, output = run("")
    assert path == ["Hall de entrada"]
    assert "Exploracao encerrada pelo jogador." in output


def test_explore_invalid_option_repeats_room():
    path, output = run("x\ns\n")
    assert path == ["Hall de entrada", "Hall de entrada"]
    assert "Opcao invalida. Use 'e', 'd' ou 's'." in output


def test_explore_missing_left_path():
    path, output = run("e\nd\ne\ns\n")
    assert path == ["Hall de entrada", "Sala de Estar", "Cozinha", "Cozinha"]
    assert "Nao ha caminho a esquerda a partir de Cozinha." in output


def test_explore_path_limit():
    path, _ = run("x\n" * 200 + "s\n")
    assert len(path) == MAX_PATH


def test_explore_empty_map():
    out = io.StringIO()
    assert explore(None, io.StringIO(""), out) == []
    assert out.getvalue() == "Mapa vazio.\n"


def test_main_explore_then_exit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\ns\n0\n"))
    assert main() == 0
    output = capsys.readouterr().out
    assert "Mansao Enigma" in output
    assert output.endswith("Programa encerrado. Ate a proxima!\n")


def test_main_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("7\n0\n"))
    assert main() == 0
    assert "Opcao invalida.\n" in capsys.readouterr().out


def test_main_non_numeric_exits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc\n1\n"))
    assert main() == 0
    assert "Mansao Enigma" not in capsys.readouterr().out