from typing import List


class ReplSyntaxError(Exception):
    def __init__(self, column, message):
        self.column = column
        self.message = message

        super().__init__(f'{message} at column {column}')

def parse_args(line: str) -> List[str]:
    """Split `line` on spaces like a (very small) shell.

    Double quotes group words, and inside quotes a backslash escapes only
    ``"`` and ``\\``:

        >>> parse_args('add "two words" x')
        ['add', 'two words', 'x']
    """
    parsed = []
    accum = ''
    escape = False
    quote = None

    for i, token in enumerate(line):
        if quote is not None:
            if escape:
                if token not in '\\"':
                    raise ReplSyntaxError(i, f'Cannot escape {token!r}')
                accum += token
                escape = False
            elif token == '\\':
                escape = True
            elif token == '"':
                quote = None
            else:
                accum += token
        elif token in ' \t':
            if accum:
                parsed.append(accum)
                accum = ''
        elif token == '"':
            quote = i
        else:
            accum += token

    if quote is not None:
        raise ReplSyntaxError(quote, 'Unterminated quote')

    if accum:
        parsed.append(accum)

    return parsed
