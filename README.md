# minishell

Building blocks for a small POSIX-style shell, in plain Python with no
third-party dependencies.

## Modules

### `minishell.shelltypes`

The shell's data model:

- `TokenType`: `AND`, `OR`, `IN`, `OUT`, `HEREDOC`, `APPEND`, `PIPE`, `WORD`,
  `EOL`, `LPAREN` and `RPAREN`.
- `AstType`: `CMD`, `AND`, `OR`, `PIPE` and `SUBSHELL`.
- `RedirType`: `IN`, `OUT`, `APPEND` and `HEREDOC`.
- `ExitCode`: an `IntEnum` with `OK` (0), `KO` (1), `BUILTIN` (2), `EXEC` (126),
  `NOENT` (127), `INVAL` (128) and `SEGV` (255).
- `Token`: a frozen record with a `word` and a `type`.
- `Redir`: a redirection `type` and the `filename` it refers to.
- `AstNode`: a syntax-tree node with a `type`, optional `left` and `right`
  children, and `redirs` and `command` lists.
  `add_command(word)` appends a word and `add_redirs(redirs)` appends
  redirections in order.

### `minishell.strings`

String helpers that follow the behaviour of the traditional string routines.

- `atoi(text)` skips leading whitespace and accepts one optional sign. It
  stops at the first non-digit and returns 0 when there are no digits. Values
  outside the 64-bit range saturate, and the result is then narrowed to a
  signed 32-bit integer.
- `itoa(number)` renders an integer in decimal.
- `split(text, sep)` splits on a single separator character and drops empty
  words.
- `strtrim(text, chars)` removes the characters in `chars` from both ends.
- `substr(text, start, length)` returns at most `length` characters starting
  at `start`.
- `strnstr(haystack, needle, length)` searches only the first `length`
  characters. It returns the index of the match, 0 for an empty needle, or -1
  when there is no match.
- `strncmp(s1, s2, n)` and `strcmp(s1, s2)` return the code-point difference
  at the first mismatch, or 0 when the strings are equal.
- `strlcpy(src, size)` returns `(copied_text, len(src))`.
- `strlcat(dest, src, size)` returns `(result, would_be_length)`.
- `strjoin(s1, s2)` concatenates, treating `None` as absent. It returns
  `None` only if both arguments are `None`.
- `strndup(text, length)` returns the first `length` characters.

Negative sizes, starts and lengths raise `ValueError`.

### `minishell.printf`

A printf formatter. It supports the conversions `c s p d i u x X %`, the flags
`- 0 + space #`, a field width and a precision.

- `sprintf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args)` writes the text to standard output and returns its
  length.
- `parse_spec(fmt, pos)` parses the directive that starts just after a `%` at
  index `pos`. It returns a `FormatSpec` and the index of the conversion
  character.
- `hex_address(value)` renders `0x` followed by lower-case hex digits.

The argument types are checked as follows:

- `%d` and `%i` take 32-bit signed values, and `%u`, `%x` and `%X` take 32-bit
  unsigned values.
- `%s` with `None` prints `(null)`, and `%p` with `None` prints `0x0`.
- A wrong argument type raises `TypeError`.
- Too few arguments raises `ValueError`.

### `minishell.lines`

`LineReader(fd)` reads a file descriptor in chunks of 42 bytes.

- `read_line()` returns the next line with its trailing newline. It returns
  `None` at end of input.
- Iterating over the reader yields every remaining line.
- The last line has no newline if the input does not end with one.
- Bytes are decoded as UTF-8 with `surrogateescape`.
- The reader never closes the descriptor.
- A negative descriptor raises `ValueError`, and read errors propagate as
  `OSError`.

## What this package does not do

The package has only data types and helpers. It has no tokenizer, parser,
variable or wildcard expansion, command execution, builtins, signal handling
or interactive prompt. It installs no command to run.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from minishell.strings import atoi, split, strtrim
from minishell.printf import sprintf
from minishell.lines import LineReader

atoi("  -42abc")            # -42
split("a  b c", " ")        # ["a", "b", "c"]
strtrim("xxhixx", "x")      # "hi"

sprintf("%05d|%-4s|%#x", 42, "ab", 255)   # "00042|ab  |0xff"

import os
read_fd, write_fd = os.pipe()
os.write(write_fd, b"one\ntwo")
os.close(write_fd)
for line in LineReader(read_fd):
    print(repr(line))       # 'one\n', then 'two'
```