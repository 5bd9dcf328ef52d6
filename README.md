# dfalex

A small lexical-analysis toolkit built from three pieces:

- `dfalex.buffer.CircularBuffer`, a fixed-size ring buffer (five slots by
  default, one of them kept free, so it holds four values when full);
- `dfalex.buffer.SourceFilter`, which drops `#` comments up to the end of
  the line, everything between two runs of three double quotes, every double
  quote, every newline, and spaces: all of them, or with
  `keep_single_space=True` every space after the first one in a run;
- two table-driven automata in `dfalex.dfa`:
  - the identifier automaton accepts an assignment target: a letter or
    underscore, then letters, digits or underscores, then optional spaces,
    and a final `=`. Nothing may come after the `=`;
  - the reserved-word automaton accepts exactly `if`, `is`, `def`, `from`,
    `True`, `False`, `class`, `while`, `import` and `return`.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
dfalex [path] [--trace]
```

`path` defaults to `archivo.txt` in the current directory. The file is read
as Latin-1 text.

Without `--trace`, spaces are collapsed to one. Each character that passes
the filter is printed as `Encolando: <char>`. At every newline, and once more
at the end of the input, the line is given a verdict: `Identificador`,
`Palabra reservada` or `Rechazado`. The identifier automaton is checked
first.

With `--trace`, every space is dropped and no line is classified. The
command prints the buffer traffic instead: `Encolando: <char>` for each
character pushed and `Valor ignorado` for each character the filter drops.
Whenever the buffer fills, and once more at the end, it prints
`Desencolando: <char>` for each character drained.

If the file cannot be opened, an error goes to standard error and the exit
status is 1.

## Library use

```python
from dfalex.dfa import classify, TokenKind, LineRecognizer
from dfalex.dfa import identifier_step, reserved_word_step
from dfalex.buffer import CircularBuffer, SourceFilter, BufferFullError

classify("count =")   # TokenKind.IDENTIFIER
classify("while")     # TokenKind.RESERVED_WORD
classify("3x")        # TokenKind.REJECTED

recognizer = LineRecognizer()
for char in "else":
    recognizer.feed(char)
recognizer.result()   # TokenKind.REJECTED
recognizer.reset()

buffer = CircularBuffer(5)
buffer.push("a")
buffer.pop()          # "a"
buffer.drain()        # [] — removes and returns everything, oldest first

source_filter = SourceFilter(keep_single_space=True)
source_filter.feed("#")   # None: the comment runs to the end of the line
```

`classify` runs both automata over the text as it stands and applies no
filtering. `CircularBuffer.push` raises `BufferFullError` on a full buffer,
and `pop` raises `BufferEmptyError` on an empty one. The value of each
`TokenKind` member is the verdict text that the command prints.

`dfalex.cli` also provides `trace_buffer(chars)` and
`recognise_lines(chars)`. These generators yield the command's output lines
for any iterable of characters, so text that does not come from a file can
be processed the same way.

## Limitations

Each line is judged as a whole: either the line is an assignment target, or
it is one of the reserved words, or it is rejected. The package does not
split a line into a stream of tokens. It does not recognise operators,
numbers or string literals, and it builds no syntax tree.