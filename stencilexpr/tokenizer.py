"""
Quote-aware splitting of expression tokens.

Quotes are kept in the produced words; stripping them is left to
`trim_quotation_marks`, which only filter arguments go through.
"""

_QUOTES = ("'", '"')


def smart_split(value: str, separator: str) -> list[str]:
    """
    Split `value` on `separator`, leaving quoted phrases together.

    Empty words are dropped, so `a||b` splits the same way as `a|b`.
    An unterminated quote swallows the remainder of the input, separators
    included.

    Examples:
        >>> smart_split("a|b|c", "|")
        ['a', 'b', 'c']
        >>> smart_split("greet:'hello, world'", ",")
        ["greet:'hello, world'"]
    """
    words: list[str] = []
    word: list[str] = []
    terminator = separator

    for ch in value:
        if ch == terminator:
            if ch != separator:
                word.append(ch)
                terminator = separator
                continue
            if word:
                words.append("".join(word))
                word = []
            continue

        if terminator == separator and ch in _QUOTES:
            terminator = ch
        word.append(ch)

    if word:
        words.append("".join(word))
    return words


def split_and_trim(value: str, separator: str) -> list[str]:
    # Words made only of spaces are dropped like empty ones.
    words = (word.strip(" ") for word in smart_split(value, separator))
    return [word for word in words if word]


def trim_quotation_marks(value: str) -> str:
    return value.strip('"').strip("'")


def parse_filter_components(token: str) -> tuple[str, list[str] | None]:
    """
    Split a filter such as `default:"N/A"` into its name and arguments.

    Returns `(name, None)` when there is no `:` argument list. Only the first
    `:` separates name from arguments and anything after a second unquoted `:`
    is dropped, so `default:12:30` yields `("default", ["12"])`; quote the
    argument (`default:"12:30"`) to keep it whole.
    """
    components = split_and_trim(token, ":")
    if not components:
        return "", None
    if len(components) == 1:
        return components[0], None

    arguments = [
        trim_quotation_marks(argument)
        for argument in split_and_trim(components[1], ",")
    ]
    return components[0], arguments
