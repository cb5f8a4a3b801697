"""Exceptions raised by the theory builders and parsers."""


class FretlabError(ValueError):
    """Base class for all fretlab input errors."""


class InvalidNoteName(FretlabError):
    """Note name not found in the sharp or flat spelling table."""

    def __init__(self, name: str):
        super().__init__(f"Invalid note name: {name}")
        self.name = name


class UnknownChordType(FretlabError):
    """Chord type identifier is not registered."""

    def __init__(self, chord_type: str):
        super().__init__(f"Unknown chord type: {chord_type}")
        self.chord_type = chord_type


class UnknownScaleType(FretlabError):
    """Scale type identifier is not registered."""

    def __init__(self, scale_type: str):
        super().__init__(f"Unknown scale type: {scale_type}")
        self.scale_type = scale_type


class InvalidRomanNumeral(FretlabError):
    def __init__(self, numeral: str):
        super().__init__(f"Invalid roman numeral: {numeral}")
        self.numeral = numeral


class InvalidChordSymbol(FretlabError):
    def __init__(self, symbol: str):
        super().__init__(f"Invalid chord symbol: {symbol}")
        self.symbol = symbol
