# minish

An interactive shell front end. It shows a coloured prompt
(`user@host ~/path $ `), reads lines and keeps their history, splits each
line into words, pipes and redirections, and prints the tokens it found.

## Running

```
minish
```

At the prompt:

- Type a line to see how it is tokenized. The tokens are printed twice: once
  as `[index] type=<number>, value='<text>'` lines, then as a table framed by
  `--- TOKENS ---`.
- `history -c` clears the line history and prints `history cleared`.
- Ctrl-C drops the current line and shows a fresh prompt.
- Ctrl-\ is ignored.
- Ctrl-D prints `exit` and leaves the shell.

The loop is the `Shell` class in `minish.shell`. `Shell.run()` reads lines
until input ends. `Shell.handle_input(line)` records a line and returns
`False` at end of input. `Shell.process(line)` tokenizes a line, prints it and
returns the tokens. `Shell` takes an optional `input_func`, `out` and `err`, so
it can be driven without a terminal. `main()` installs the signal handlers and
runs the shell.

## What it does not do

minish does not run commands. It has no built-in commands apart from
`history -c`. It does not expand variables, open redirection files or read
here-documents. Lines are tokenized and shown, nothing more.

## Tokenizer

```python
from minish.tokens import tokenize, format_tokens

tokens = tokenize('cat "my file" | grep x >> out.txt')
print(format_tokens(tokens))
```

`tokenize` returns a list of `Token` objects. Each one has a `value` and a
`type`. The type is a `TokenType`: `WORD`, `PIPE`, `REDIR_IN` (`<`),
`REDIR_OUT` (`>`), `APPEND` (`>>`) or `HEREDOC` (`<<`). A token also has
`quoted` and `expandable` fields. `tokenize` always leaves these at their
defaults, `0` and `True`.

Quotes are removed from words: `"a b"` becomes the single word `a b`, and
`'x'y` becomes `xy`.

Syntax errors are written to `err`, which is standard error by default.
Tokenizing then goes on where it can, and the tokens found so far are kept:

- An unclosed quote writes `minishell: syntax error: unclosed quote`. The rest
  of the line is skipped.
- The operators `||`, `<<<`, `><` and `<>` each write a
  `syntax error near unexpected token` message and are skipped.

The building blocks can also be used on their own:

- `is_space`
- `is_operator`
- `operator_len`
- `operator_type`
- `operator_exclusion`
- `remove_quotes`
- `extract_word`, which raises `UnclosedQuoteError`
- `format_token_indices`

## Prompt

```python
from minish.prompt import Prompt

prompt = Prompt.from_environment()
print(prompt.plain())     # user@host:~/path$
print(prompt.colored())   # the same pieces, coloured, for readline
```

`current_directory(cwd, home)` shows a leading home directory as `~`.

`username(environ)` gives `USER`, or `user` when that is not set.

`hostname(environ)` gives `HOSTNAME` if set. Otherwise it gives the system
host name, or `host` when that cannot be read.

`join_all(first, *args)` joins strings up to the first `None`.

## Helpers

`minish.cformat`

- `cformat(fmt, *args)` formats with `%c %s %d %i %u %x %X %p %%`. An unknown
  conversion is written without its `%`. A missing argument raises
  `TypeError`.
- `cprintf` writes the result to a file and returns its length.
- `itoahex` and `format_decimal` convert single values.

`minish.conversions`

- `atoi` and `itoa` work on 32-bit signed values.
- `atoi_base` takes bases 2 to 16.
- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` test a
  character or a character code.

`minish.textutils`

- `split(text, sep)` splits on one character and drops empty pieces.
- `strtrim(text, charset)` strips those characters from both ends.
- `strnstr(haystack, needle, length)` returns the index of a match that lies
  within the first `length` characters, or `None` when there is none.
- `strncmp(a, b, n)` returns the difference of the first codes that differ.
- `substr(text, start, length)` returns a slice. It returns `""` when `start`
  is past the end.