"""Interactive prompt that reads command lines and prints their tokens."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from minish.lexer import Token, TokenType, tokenize

try:
    import readline as _readline
except ImportError:  # pragma: no cover - platforms without readline
    _readline = None

PROMPT = "\001\033[1;36m\002minishell$ \001\033[0m\002"
CONTINUATION_PROMPT = "> "

_TYPE_LABELS = {
    TokenType.WORD: "WORD",
    TokenType.PIPE: "PIPE",
    TokenType.REDIR_IN: "REDIR_IN",
    TokenType.REDIR_OUT: "REDIR_OUT",
    TokenType.APPEND: "APPEND",
    TokenType.HEREDOC: "HEREDOC",
    TokenType.QUOTE_SINGLE: "QUOTE_SINGLE",
    TokenType.QUOTE_DOUBLE: "QUOTE_DOUBLE",
}


def has_unclosed_quotes(text: str) -> bool:
    """Return True if ``text`` leaves a single or double quote open."""
    in_single = False
    in_double = False
    for char in text:
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
    return in_single or in_double


def format_token(token: Token) -> str:
    """Describe one token on a single line."""
    label = _TYPE_LABELS.get(token.type, "UNKNOWN")
    return f"token: [{token.value}], type: {label}, quoted: {token.quoted}"


def format_tokens(tokens: Iterable[Token]) -> str:
    """Describe each token on its own newline-terminated line."""
    return "".join(f"{format_token(token)}\n" for token in tokens)


def read_command(read_line: Callable[[str], Optional[str]]) -> Optional[str]:
    """Read a command, asking for more lines while a quote is open.

    ``read_line`` is called with a prompt and returns a line, or None at
    end of input. Returns None if no first line could be read.
    """
    line = read_line(PROMPT)
    if line is None:
        return None
    while has_unclosed_quotes(line):
        next_line = read_line(CONTINUATION_PROMPT)
        if next_line is None:
            break
        line = f"{line}\n{next_line}"
    return line


def _read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def main(argv: Optional[list[str]] = None) -> int:
    """Run the prompt loop until end of input."""
    if _readline is not None:
        _readline.set_auto_history(False)
    while True:
        command = read_command(_read_line)
        if command is None:
            print("exit")
            break
        if command and _readline is not None:
            _readline.add_history(command)
        print(format_tokens(tokenize(command)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())