"""Tokenize shell input into argument strings, handling quotes and escapes."""

BACKSLASH = "\\"
SPACE = " "

# Characters a backslash may escape inside double quotes besides '"' and '\'
_DQUOTE_ESCAPABLE = "$`"


def tokenize(line: str) -> list[str]:
    """Tokenize a shell input line.

    Single quotes make everything up to the closing quote literal.
    Double quotes keep a backslash literal unless it precedes '"', '\\',
    '$' or '`'. Outside quotes a backslash escapes the next character.
    Words are separated by runs of spaces; an argument is only produced
    when at least one character was collected, so a bare '""' yields nothing.

    Unterminated quotes and a trailing backslash are not errors:
    'echo "abc' -> ['echo', 'abc'].
    """
    tokens: list[str] = []
    current: list[str] = []
    in_single = False
    in_double = False
    pending_escape = False

    for ch in line:
        match ch:
            case "'":
                if pending_escape and in_double:
                    current.append(BACKSLASH)
                if pending_escape or in_double:
                    current.append(ch)
                else:
                    in_single = not in_single
                pending_escape = False

            case '"':
                if pending_escape or in_single:
                    current.append(ch)
                else:
                    in_double = not in_double
                pending_escape = False

            case "\\":
                if pending_escape or in_single:
                    current.append(ch)
                    pending_escape = False
                else:
                    pending_escape = True

            case " ":
                if in_single or in_double or pending_escape:
                    if pending_escape and in_double:
                        current.append(BACKSLASH)
                    current.append(ch)
                elif current:
                    tokens.append("".join(current))
                    current = []
                pending_escape = False

            case _:
                if pending_escape and in_double and ch not in _DQUOTE_ESCAPABLE:
                    current.append(BACKSLASH)
                current.append(ch)
                pending_escape = False

    if current:
        tokens.append("".join(current))
    return tokens


def join_tokens(tokens: list[str]) -> str:
    """Join tokens back into a line for messages (no quoting is added)."""
    return SPACE.join(tokens)
