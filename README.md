# dirtree

An interactive shell over an in-memory directory tree. You can add files and
directories, remove them, move between directories, search by name and list
the tree with box-drawing branches. Directory sizes are kept as the total of
the files beneath them.

## Installing

```
pip install .
```

## Running

```
dirtree
```

The shell reads commands from standard input, one per line, and stops at
`exit;` or at the end of input. Every command must end with `;`. A line
without it is rejected with an error, and the shell waits for the next one.
Leading whitespace is skipped, and a line longer than 500 characters is
handled as several commands of at most 500 characters each.

| Command | Effect |
| --- | --- |
| `tambah <type> <name> <size>;` | Add an entry (`file` or `directory`) as the last child of the current directory |
| `hapus <name>;` | Find, breadth first from `root`, the first directory with a child of that name and remove that child with everything below it |
| `list;` | Print the tree below the current directory |
| `pindah_ke <name>;` | Make the shallowest entry with that name the current directory, if it is a directory |
| `cari <name>;` | Search the current directory and everything below it, breadth first |
| `reset;` | Empty the tree and go back to `root` |
| `exit;` | Leave the shell |

Sizes are whole numbers of kB; a size that does not start with a number counts
as 0. Adding a file, or removing any entry, recomputes the size of every
directory as the total of the files below it. Adding a directory leaves the
sizes as they are. Words that are not a known command are ignored silently.

### Example session

```
tambah directory docs 0;
pindah_ke docs;
tambah file notes.txt 12;
pindah_ke root;
list;
----- list file di root -----
[d] root (12kB)
 └──[d] docs (12kB)
     └──[f] notes.txt (12kB)

exit;
meoww, bye! ~bubu
```

In a listing, each line is indented by the level of the shallowest entry with
that name, so entries that share a name are drawn at the same indentation.

## Using it from Python

```python
from dirtree.shell import Shell, render_tree

shell = Shell()
shell.execute("tambah file a.txt 5;")
print(render_tree(shell.root, shell.root))
```

`Shell.execute` runs one command and returns the text it would print;
`Shell.root` and `Shell.current` hold the tree and the current directory, and
`Shell.finished` becomes true after `exit;`.

`dirtree.tree.Entry` holds the tree itself, with `is_directory`, `add_child`,
`remove_child` (raises `KeyError` when no child has the name), `find`,
`find_parent_of`, `walk_level_order`, `depth_of`, `total_size` and
`update_sizes`. `dirtree.tape` has the helpers that split a `;`-terminated
command line into words: `has_eop`, `iter_words` and `take_words`.

## What it does not do

The tree lives only in memory: nothing is saved to or loaded from disk, and
it has no connection to the real file system.

## Tests

```
pip install .[test]
pytest
```