import io

import pytest

from dirtree.shell import Shell, main, render_tree
from dirtree.tree import Entry

ERROR = "[ERROR] gunakan eop diakhir kalimat! Silahkan masukan inputan baru\n"
BYE = "meoww, bye! ~bubu\n"


@pytest.fixture
def shell():
    sh = Shell()
    sh.execute("tambah directory docs 0;")
    sh.execute("tambah file a.txt 5;")
    return sh


def test_missing_eop_reports_error():
    sh = Shell()
    assert sh.execute("list") == ERROR
    assert sh.root.children == []


def test_add_creates_children_in_order(shell):
    assert [c.name for c in shell.root.children] == ["docs", "a.txt"]
    assert shell.root.children[1].kind == "file"
    assert shell.root.children[1].size == 5


def test_adding_file_updates_directory_sizes(shell):
    assert shell.root.size == shell.root.total_size()
    assert shell.root.children[0].size == 0


def test_add_size_parses_leading_integer():
    sh = Shell()
    sh.execute("tambah file x 12abc;")
    sh.execute("tambah file y abc;")
    assert [c.size for c in sh.root.children] == [12, 0]


def test_list_output(shell):
    expected = (
        "----- list file di root -----\n"
        "[d] root (5kB)\n"
        " ├──[d] docs (0kB)\n"
        " └──[f] a.txt (5kB)\n"
        "\n"
    )
    assert shell.execute("list;") == expected


def test_list_in_subdirectory(shell):
    assert shell.execute("pindah_ke docs;") == ""
    shell.execute("tambah file b 3;")
    expected = "----- list file di docs -----\n[d] docs (3kB)\n └──[f] b (3kB)\n\n"
    assert shell.execute("list;") == expected


def test_move_to_missing_directory(shell):
    assert shell.execute("pindah_ke nope;") == "gagal pindah: direktori nope tidak ditemukan\n\n"
    assert shell.current is shell.root


def test_move_to_file_fails(shell):
    assert shell.execute("pindah_ke a.txt;") == "gagal pindah: a.txt bukan direktori\n\n"
    assert shell.current is shell.root


def test_move_to_directory(shell):
    shell.execute("pindah_ke docs;")
    assert shell.current is shell.root.children[0]


def test_search_found(shell):
    assert shell.execute("cari a.txt;") == "hasil pencarian: file a.txt (5kB) ditemukan! :3\n\n"


def test_search_only_below_current(shell):
    shell.execute("pindah_ke docs;")
    assert shell.execute("cari a.txt;") == "hasil pencarian: file/direktori a.txt tidak ditemukan :(\n\n"


def test_remove_updates_sizes(shell):
    shell.execute("hapus a.txt;")
    assert [c.name for c in shell.root.children] == ["docs"]
    assert shell.root.size == 0


def test_remove_missing_is_silent(shell):
    assert shell.execute("hapus ghost;") == ""
    assert len(shell.root.children) == 2


def test_reset_clears_tree(shell):
    shell.execute("pindah_ke docs;")
    shell.execute("reset;")
    assert shell.root.children == []
    assert shell.current is shell.root
    assert shell.root.size == 0


def test_exit_finishes_only_on_exact_tape():
    sh = Shell()
    assert sh.execute("exit ;") == BYE
    assert sh.finished is False
    assert sh.execute("exit;") == BYE
    assert sh.finished is True


def test_unknown_command_produces_nothing(shell):
    assert shell.execute("frobnicate x;") == ""
    assert len(shell.root.children) == 2


def test_render_tree_matches_list_body(shell):
    listing = shell.execute("list;")
    assert listing.endswith(render_tree(shell.root, shell.root) + "\n")


def test_render_tree_single_directory():
    node = Entry("directory", "solo", 0)
    assert render_tree(node, node) == "[d] solo (0kB)\n"


def test_main_stops_at_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("list\n   exit;\nlist;\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == ERROR + BYE


def test_main_splits_long_lines(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a" * 500 + ";\n"))
    main([])
    assert capsys.readouterr().out == ERROR


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("exit;\n"))
    assert main() == 0
    assert capsys.readouterr().out == BYE