QUOTE = '"'


def _split(text: str):
    in_quotes = False
    start = 0
    for i, ch in enumerate(text):
        if ch == QUOTE:
            in_quotes = not in_quotes
        elif ch == " " and not in_quotes:
            yield text[start:i]
            start = i + 1
    yield text[start:]


def _trim_quotes(arg: str) -> str:
    if len(arg) >= 2 and arg[0] == QUOTE and arg[-1] == QUOTE:
        return arg[1:-1]
    return arg


def tokenize(text: str | None) -> list[str]:
    """
    Split slash-command text into arguments the way a shell would, minus escapes.
    - spaces separate arguments unless inside double quotes
    - one pair of surrounding quotes is removed from each argument
    - unbalanced quotes are kept as-is; empty arguments are dropped
    """
    args = (_trim_quotes(piece.strip()) for piece in _split(text or ""))
    return [a for a in args if a]
