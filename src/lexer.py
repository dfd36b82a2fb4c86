""" Lexical analysis for shell commands. """
import enum
from typing import NamedTuple

from exceptions import UnclosedQuoteError

# inside double quotes a backslash is only dropped before these
DQUOTE_ESCAPABLE = set('\\$"\n')
SPECIAL_CHARS = set(" '\"\\")


class Quote(enum.Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class Step(NamedTuple):
    """ Result of feeding one character to the lexer. """
    quote: Quote
    escaping: bool
    text: str         # appended to the current word
    split: bool       # the current word ends here


class Word(str):
    """
    A token produced by tokenize().

    Behaves exactly like the string it holds. `quoted` is True when a
    quote or a backslash contributed to the word, so that an operator
    such as '>' typed inside quotes is never taken for a redirection.
    """
    def __new__(cls, text="", quoted=False):
        word = super().__new__(cls, text)
        word.quoted = quoted
        return word


def step(quote: Quote, escaping: bool, ch: str) -> Step:
    """ Transition function of the quote/escape state machine. """
    if escaping:
        if quote is Quote.DOUBLE and ch not in DQUOTE_ESCAPABLE:
            return Step(quote, False, "\\" + ch, False)
        return Step(quote, False, ch, False)

    if ch == "\\" and quote is not Quote.SINGLE:
        return Step(quote, True, "", False)

    if ch == "'" and quote is not Quote.DOUBLE:
        quote = Quote.NONE if quote is Quote.SINGLE else Quote.SINGLE
        return Step(quote, False, "", False)

    if ch == '"' and quote is not Quote.SINGLE:
        quote = Quote.NONE if quote is Quote.DOUBLE else Quote.DOUBLE
        return Step(quote, False, "", False)

    if ch == " " and quote is Quote.NONE:
        return Step(quote, False, "", True)

    return Step(quote, False, ch, False)


def tokenize(line: str) -> list[Word]:
    """
    Split a line into words.

    Raises UnclosedQuoteError if a single or double quote is left open.
    """
    words = []
    buf = ""
    quoted = False
    quote = Quote.NONE
    escaping = False

    for ch in line:
        before = quote
        quote, escaping, text, split = step(quote, escaping, ch)

        if split:
            if buf:
                words.append(Word(buf, quoted))
                buf = ""
            quoted = False
            continue

        if escaping or quote is not before:
            quoted = True
        buf += text

    if quote is not Quote.NONE:
        raise UnclosedQuoteError(quote.value)

    if buf:
        words.append(Word(buf, quoted))
    return words


def try_tokenize(line: str) -> tuple[list[Word], bool]:
    """ Like tokenize(), but report an unclosed quote as ([], False). """
    try:
        return tokenize(line), True
    except UnclosedQuoteError:
        return [], False


def quote_word(word: str) -> str:
    """ Quote a word so that tokenize() gives it back unchanged. """
    if not word:
        return "''"
    if not any(c in SPECIAL_CHARS for c in word):
        return word
    if "'" not in word:
        return f"'{word}'"
    escaped = word.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def join_words(words) -> str:
    return " ".join(quote_word(w) for w in words)
