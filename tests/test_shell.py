import pytest

from minish.lexer import Token, TokenType, tokenize
from minish.shell import (
    CONTINUATION_PROMPT,
    PROMPT,
    format_token,
    format_tokens,
    has_unclosed_quotes,
    main,
    read_command,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", False),
        ("echo hi", False),
        ("echo 'hi'", False),
        ("echo \"hi\"", False),
        ("echo 'hi", True),
        ("echo \"hi", True),
        ("echo \"it's\"", False),
        ("echo 'say \"x'", False),
        ("'a' 'b", True),
    ],
)
def test_has_unclosed_quotes(text, expected):
    assert has_unclosed_quotes(text) is expected


def test_format_token_word():
    assert format_token(Token(TokenType.WORD, "ls", 0)) == "token: [ls], type: WORD, quoted: 0"


def test_format_token_var_is_unknown():
    line = format_token(Token(TokenType.VAR, "HOME", 0))
    assert "type: UNKNOWN" in line


@pytest.mark.parametrize(
    "kind, label",
    [
        (TokenType.PIPE, "PIPE"),
        (TokenType.REDIR_IN, "REDIR_IN"),
        (TokenType.REDIR_OUT, "REDIR_OUT"),
        (TokenType.APPEND, "APPEND"),
        (TokenType.HEREDOC, "HEREDOC"),
        (TokenType.QUOTE_SINGLE, "QUOTE_SINGLE"),
        (TokenType.QUOTE_DOUBLE, "QUOTE_DOUBLE"),
    ],
)
def test_format_token_labels(kind, label):
    assert f"type: {label}," in format_token(Token(kind, "v", 1))


def test_format_tokens_one_line_per_token():
    tokens = tokenize("echo 'a b' | wc > out")
    output = format_tokens(tokens)
    lines = output.splitlines()
    assert len(lines) == len(tokens)
    assert lines == [format_token(t) for t in tokens]
    assert output.endswith("\n")


def test_format_tokens_empty():
    assert format_tokens([]) == ""


def _reader(lines):
    prompts = []
    source = iter(lines)

    def read_line(prompt):
        prompts.append(prompt)
        return next(source, None)

    return read_line, prompts


def test_read_command_single_line():
    read_line, prompts = _reader(["ls -l"])
    assert read_command(read_line) == "ls -l"
    assert prompts == [PROMPT]


def test_read_command_end_of_input():
    read_line, _ = _reader([])
    assert read_command(read_line) is None


def test_read_command_joins_continuation_lines():
    read_line, prompts = _reader(["echo 'a", "b", "c'"])
    assert read_command(read_line) == "echo 'a\nb\nc'"
    assert prompts == [PROMPT, CONTINUATION_PROMPT, CONTINUATION_PROMPT]


def test_read_command_unclosed_at_end_of_input():
    read_line, _ = _reader(["echo \"open"])
    assert read_command(read_line) == "echo \"open"


def test_main_prints_tokens_and_exit(monkeypatch, capsys):
    lines = iter(["ls | wc", ""])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = format_tokens(tokenize("ls | wc"))
    assert out == expected + "exit\n"