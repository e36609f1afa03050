# gitcode

`gitcode` is a small command-line tool that works with git's loose object
format. It sets up its own repository directory, hashes files as blobs,
prints objects and lists the entries of tree objects.

## Installation

```
pip install .
```

This installs the `gitcode` command. The same entry point can be run as
`python -m gitcode.cli`.

## Commands

### Initialise a repository

```
gitcode init
```

Creates `.gitCode/` in the current directory, with `objects/`, `refs/` and
a `HEAD` file containing `ref: refs/heads/main`. Running it again in the
same place is harmless; `HEAD` is rewritten.

### Hash a file

```
gitcode hash-object <filename>
gitcode hash-object -w <filename>
```

Prints the SHA-1 (in hex) of the file stored as a `blob` object, that is
of `blob <size>\0<content>`. With `-w`, the zlib-compressed object is also
written to `.gitCode/objects/<first two hex digits>/<remaining digits>`;
the directories are created as needed.

### Inspect an object

```
gitcode cat-file -t <hash>   # object type
gitcode cat-file -s <hash>   # object size
gitcode cat-file -p <hash>   # object content
gitcode cat-file -e <hash>   # exit status only: does the object exist?
```

Exactly one option and one hash are taken.

### List a tree

```
gitcode ls-tree <hash>
gitcode ls-tree --name-only <hash>
```

Each line shows the mode, the type (`tree` for mode `40000`, otherwise
`blob`), the hash and, after a tab, the name. With `--name-only`, only the
names are printed.

`cat-file` and `ls-tree` read objects from `.git/objects/` in the current
directory, so they work inside an ordinary git checkout. `hash-object -w`
writes to `.gitCode/objects/`, so objects it writes are not read back by
these two commands.

## Exit status

Every command exits with `0` when it succeeds. It exits with `1` on a
missing or unknown command, bad usage, an unreadable file or object, or a
compression failure, and the reason is written to standard error.

## Library use

The same operations are available from Python:

```python
from gitcode.hash_object import blob_object, object_hash
from gitcode.zlib_codec import compress, decompress

data = blob_object(b"hello\n")
print(object_hash(data))
assert decompress(compress(data)) == data
```

- `gitcode.repository.init_repository(root)` creates the `.gitCode`
  layout under `root` and returns its path.
- `gitcode.hash_object.write_object(data, digest, root)` stores a full
  object compressed under its hash and returns the file written.
- `gitcode.cat_file.read_object(object_hash, root)` returns the
  decompressed bytes of an object from `.git/objects`, header included;
  `split_object` splits those bytes into type, size and body.
- `gitcode.ls_tree.parse_tree(content)` turns the body of a tree object
  into `TreeEntry` values (`mode`, `type`, `hash`, `name`), and
  `format_entry(entry, name_only)` renders one as `ls-tree` prints it.
- `gitcode.hashing` holds small helpers such as `object_path` and
  `to_lower`.

Failures are raised as subclasses of `gitcode.errors.GitCodeError`:
`UsageError`, `ObjectNotFoundError` and `CompressionError`.

`gitcode.models` also defines `Author`, `Commit` and `GitObject` records.

## What it does not do

`gitcode` does not create commits or trees, does not write or update
branches and refs beyond the initial `HEAD`, and has no staging area,
log, checkout or network operations. The `Author` and `Commit` records
are plain data; no command builds or stores commit objects from them.