# wdfunpack

Read WDF archives and extract their contents.

A WDF archive does not store file names. Each index entry holds only a 32-bit
hash of its name (its UID), a data offset, a size and a free-space field. To
get files back out you need a list of candidate names: a `.lst` file with one
name per line. Each name is normalised (ASCII letters lower-cased, `/` turned
into `\`) and hashed. If the hash matches an index entry, that entry's data is
written to disk. Names are handled as bytes; text is encoded with the GBK code
page.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

```
wdfunpack ARCHIVE.wdf NAMES.lst OUTPUT_DIR
```

Each name in the list is extracted to `OUTPUT_DIR`, keeping its folder
structure, and produces one log line:

- `[Extracted] name (UID=0x........)` when the name was found and written.
- `[Not found] name (UID=0x........)` when no entry in the archive has that hash.
- `[Write failed] path (UID=0x........) err=N` or
  `[Read failed] name (UID=0x........) offset=0x........ err=N` on I/O errors.

The command ends with `Done: N extracted, M failed`. If the archive or the
list cannot be opened, or the archive is not a valid WDF file, it prints an
error to standard error and exits with status 1.

## Library use

```python
from wdfunpack.unpacker import WDFUnpacker, WdfError

with WDFUnpacker() as unpacker:
    unpacker.open("data.wdf")
    print(len(unpacker), "entries")

    result = unpacker.extract_file("ui/button.png", "out/ui/button.png")
    print(result.ok, hex(result.uid), result.message)

    batch = unpacker.extract_by_lst("names.lst", "out")
    print(batch.success, batch.fail)
    for line in batch.logs:
        print(line)
```

- `WDFUnpacker(path)` opens an archive at construction; `open` does the same
  later, closing any archive already open. Both raise `WdfError` when the file
  is not a valid WDF archive (bad signature, truncated header or index), and
  `OSError` when it cannot be opened.
- `index` gives the entries as `IndexEntry(uid, offset, size, space)` records;
  `path` is the open archive's path.
- `extract_file` returns an `ExtractResult(ok, uid, message)`; a missing entry
  or an I/O failure is reported in the result rather than raised. It raises
  `WdfError` only if no archive is open.
- `extract_by_lst` returns a `BatchResult(logs, success, fail)`. Each message
  is also emitted on the `wdfunpack.unpacker` logger at INFO level.

### Name hashing

```python
from wdfunpack.hashing import adjust_name, string_id

adjust_name("UI/Button.PNG")        # b'ui\\button.png'
uid = string_id(adjust_name("UI/Button.PNG"))
```

`string_id` hashes its input as given; only the first 256 bytes count, and a
NUL byte ends the name.

### Name dictionaries

`DictionaryManager` keeps a set of path fragments gathered from known names,
along with the search parameters `depth`, `tries` and `exts` and a list of
`sample_formats`. It reads and writes these in a UTF-8 text file:

```python
from wdfunpack.dictionary import DictionaryManager

manager = DictionaryManager()
manager.load("dict.txt")          # returns False if the file cannot be opened
manager.add_path_fragments("maps/city_01/ground.png")
manager.set_params(4, 1000, ["png", "tga"])
manager.save("dict.txt")
```

Dictionary file layout:

1. The first line holds the parameters, for example
   `depth=3;tries=500;exts=png,dds,bmp`. Missing values default to depth 3,
   500 tries and the extensions `png,dds,bmp`.
2. Up to six lines of sample formats follow: lines containing `xxx`, such as
   `xxx/xxx.xxx`. If there are none, six default formats are used.
3. The remaining lines are fragments, one per line. Empty lines and lines
   starting with `#` are ignored. `save` writes fragments in sorted order.

## What it does not do

The package only reads archives. It cannot create or modify WDF files, list
names it was not given, or guess names: the dictionary's parameters and
fragments are stored and loaded, but nothing in the package uses them to
generate candidate names. There is no graphical interface; the command line
tool is the only front end.