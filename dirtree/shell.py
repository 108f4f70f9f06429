"""An interactive shell that edits a directory tree with ';'-terminated commands."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable, Iterator

from dirtree.tape import has_eop, take_words
from dirtree.tree import DIRECTORY, FILE, Entry

MAX_TAPE_LENGTH = 500
EXIT_TAPE = "exit;"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse the leading integer of ``text``; text without one counts as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _is_last_child(node: Entry, parent: Entry | None) -> bool:
    return parent is not None and bool(parent.children) and parent.children[-1] is node


def _render_lines(node: Entry, root: Entry, parent: Entry | None) -> Iterator[str]:
    depth = root.depth_of(node.name)
    space = -1 if depth is None else depth
    indent = " " + "    " * (space - 1) if space > 0 else ""
    branch = "└──" if _is_last_child(node, parent) else "├──"

    if node.kind == DIRECTORY:
        prefix = branch if space != 0 else ""
        yield f"{indent}{prefix}[d] {node.name} ({node.size}kB)\n"
    elif node.kind == FILE:
        yield f"{indent}{branch}[f] {node.name} ({node.size}kB)\n"
    else:
        yield indent

    for child in node.children:
        yield from _render_lines(child, root, node)


def render_tree(node: Entry, root: Entry) -> str:
    """Render ``node`` and everything below it, indenting by depth within ``root``."""
    return "".join(_render_lines(node, root, node))


class Shell:
    """Holds the tree and the current directory, and runs commands on them."""

    def __init__(self) -> None:
        self.root = Entry(DIRECTORY, "root", 0)
        self.current = self.root
        self.finished = False
        self._commands: dict[str, Callable[[str], str]] = {
            "tambah": self._add,
            "hapus": self._remove,
            "list": self._list,
            "pindah_ke": self._move_to,
            "cari": self._search,
            "reset": self._reset,
            "exit": self._exit,
        }

    def execute(self, tape: str) -> str:
        """Run one command tape and return the text it produces."""
        if not has_eop(tape):
            return "[ERROR] gunakan eop diakhir kalimat! Silahkan masukan inputan baru\n"
        (command,) = take_words(tape, 1)
        handler = self._commands.get(command)
        output = handler(tape) if handler else ""
        if tape == EXIT_TAPE:
            self.finished = True
        return output

    def _add(self, tape: str) -> str:
        _, kind, name, size = take_words(tape, 4)
        self.current.add_child(Entry(kind, name, _to_int(size)))
        if kind == FILE:
            self.root.update_sizes()
        return ""

    def _remove(self, tape: str) -> str:
        _, name = take_words(tape, 2)
        parent = self.root.find_parent_of(name)
        target = self.root.find(name)
        if parent is not None and target is not None:
            parent.remove_child(name)
            self.root.update_sizes()
        return ""

    def _list(self, tape: str) -> str:
        header = f"----- list file di {self.current.name} -----\n"
        return header + render_tree(self.current, self.current) + "\n"

    def _move_to(self, tape: str) -> str:
        _, name = take_words(tape, 2)
        found = self.root.find(name)
        if found is None:
            return f"gagal pindah: direktori {name} tidak ditemukan\n\n"
        if not found.is_directory():
            return f"gagal pindah: {name} bukan direktori\n\n"
        self.current = found
        return ""

    def _search(self, tape: str) -> str:
        _, name = take_words(tape, 2)
        found = self.current.find(name)
        if found is None:
            return f"hasil pencarian: file/direktori {name} tidak ditemukan :(\n\n"
        return f"hasil pencarian: {found.kind} {found.name} ({found.size}kB) ditemukan! :3\n\n"

    def _reset(self, tape: str) -> str:
        self.root.children.clear()
        self.current = self.root
        self.root.update_sizes()
        return ""

    def _exit(self, tape: str) -> str:
        return "meoww, bye! ~bubu\n"


def _read_tapes(lines: Iterable[str]) -> Iterator[str]:
    """Yield command tapes: leading whitespace skipped, at most 500 characters each."""
    for line in lines:
        rest = line.rstrip("\n").lstrip()
        while rest:
            yield rest[:MAX_TAPE_LENGTH]
            rest = rest[MAX_TAPE_LENGTH:].lstrip()


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input until an exit command or end of input."""
    shell = Shell()
    for tape in _read_tapes(sys.stdin):
        sys.stdout.write(shell.execute(tape))
        sys.stdout.flush()
        if shell.finished:
            break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())