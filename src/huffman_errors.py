# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every failure raised by the Huffman codec."""


class OutOfDataError(HuffmanError, EOFError):
    """The bit reader ran out of input before the payload was complete."""


class MalformedTreeError(HuffmanError, ValueError):
    """A serialized tree decoded into something that cannot drive a decode."""
