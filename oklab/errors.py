class TransparentColorError(ZeroDivisionError):
    """Raised when a fully transparent color has to be un-premultiplied.

    A premultiplied pixel with zero alpha carries no color information, so
    there is nothing to divide back out. Subclasses ``ZeroDivisionError`` so
    generic numeric handlers still catch it.
    """
