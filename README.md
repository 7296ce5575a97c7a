# minish

An interactive shell prompt. It reads a command line, keeps asking for more
lines while a single or double quote is still open, and splits the input into
tokens: words, pipes, redirections (`<`, `>`, `<<`, `>>`) and quoted strings.
Each token is printed with its type and how it was quoted.

## Running it

```
pip install .
minish
```

At the `minishell$` prompt, type a command line:

```
minishell$ cat < in.txt | grep "a b" >> 'out file'
token: [cat], type: WORD, quoted: 0
token: [<], type: REDIR_IN, quoted: 0
token: [in.txt], type: WORD, quoted: 0
token: [|], type: PIPE, quoted: 0
token: [grep], type: WORD, quoted: 0
token: [a b], type: QUOTE_DOUBLE, quoted: 2
token: [>>], type: APPEND, quoted: 0
token: [out file], type: QUOTE_SINGLE, quoted: 1
```

An unclosed quote brings up a `> ` continuation prompt; the lines are joined
with a newline. End of input (Ctrl-D) prints `exit` and leaves the shell.
Where the `readline` module is available, non-empty command lines are added
to the line-editing history.

## Tokenizing rules

- Whitespace (space, tab, newline, vertical tab, form feed, carriage return)
  separates tokens.
- `|`, `<`, `>`, `<<` and `>>` are operator tokens, with or without
  surrounding spaces.
- A quoted section runs to the matching quote, or to the end of the text if
  there is none. The quotes are not part of the token value. An empty quoted
  section (`''` or `""`) produces no token.
- `Token.quoted` is 0 for unquoted text, 1 for single quotes and 2 for double
  quotes.

## Using it as a library

```python
from minish.lexer import tokenize, TokenType
from minish.shell import format_tokens, has_unclosed_quotes

tokens = tokenize("echo hi | wc -l")
assert tokens[2].type is TokenType.PIPE
print(format_tokens(tokens), end="")

has_unclosed_quotes("echo 'abc")   # True
```

`minish.shell.read_command` takes any callable that, given a prompt, returns
the next line or `None` at end of input, so it can be driven without a
terminal.

## What it does not do

minish only reads and tokenizes command lines. It does not run commands,
has no built-in commands such as `cd`, `echo` or `exit`, does not expand
`$` variables, does not set up pipes, redirections or here-documents, and does
not handle Ctrl-C or Ctrl-\ specially. `TokenType.VAR` exists but the
tokenizer never produces it.

## Tests

```
pip install .[test]
pytest
```