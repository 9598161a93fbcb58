"""
Error taxonomy for the tessera list and picture libraries.

Every error is raised where the violation happens and is left to propagate;
nothing in the library retries or recovers. Each class also derives from the
closest builtin so callers can catch ``IndexError`` or ``ValueError`` the
usual way.
"""


class TesseraError(Exception):
    """Base class for all tessera errors"""
    pass


class EmptyListError(TesseraError, LookupError):
    """head/tail requested from an empty list"""
    reason = "empty list"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: {self.reason}")


class UnsupportedOperationError(EmptyListError):
    """foldl1/foldr1 on an empty list (there is no seed element)"""
    reason = "empty list has no seed element"


class IndexOutOfRangeError(TesseraError, IndexError):
    """List index outside [0, length)"""
    def __init__(self, index: int, length: int | None = None):
        self.index = index
        self.length = length
        if length is None:
            msg = f"at({index}): index out of range"
        else:
            msg = f"at({index}): index out of range for list of length {length}"
        super().__init__(msg)


class InvalidArgumentError(TesseraError, ValueError):
    """An argument outside the domain an operation accepts"""
    pass


class EmptyCollectionError(TesseraError, ValueError):
    """Maximum (or similar reduction) requested over no elements"""
    pass
