class HuffmanError(ValueError):
    """Base class for every codec failure."""

class EmptyInput(HuffmanError):
    """No symbols to build a tree from."""

class Overflow(HuffmanError):
    """A symbol count does not fit the container's count field."""

class MalformedTree(HuffmanError):
    """Internal node without two children (bug, not bad input)."""

class CorruptData(HuffmanError):
    """Container header, table or payload is inconsistent."""

class TruncatedStream(HuffmanError, EOFError):
    """Container or bitstream ends before the recorded length."""
