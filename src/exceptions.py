""" Exceptions raised inside the shell. """


class ShellExit(Exception):
    """ Raised by the exit builtin to leave the read loop. """
    def __init__(self, status: int = 0):
        super().__init__(status)
        self.status = status


class UnclosedQuoteError(ValueError):
    """ A line ended while a quote was still open. """
    def __init__(self, quote: str):
        super().__init__(f"Unclosed {quote} quote")
        self.quote = quote
