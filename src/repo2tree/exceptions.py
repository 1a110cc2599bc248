class TokenizerNotAvailableError(Exception):
    """
    Exception raised when attempting to use token counting functionality without the required tokenizer package.

    The `tiktoken` package is an optional dependency that must be explicitly installed using
    the 'token_counting' extra.

    Attributes:
        message (str): Detailed error message including installation instructions.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        self.message = (
            f"{message} To enable token counting, install repo2tree with the 'token_counting' "
            "extra: 'pip install repo2tree[token_counting]'."
        )
        super().__init__(self.message)


class TokenizationError(Exception):
    """
    Exception raised when token counting fails during execution.

    Example:
        >>> error = TokenizationError("Failed to tokenize: invalid input")
        >>> str(error)
        'Failed to tokenize: invalid input'
    """

    pass


class OutputDestinationError(Exception):
    """
    Exception raised when the report cannot be written to the requested destination.

    This is the only error that aborts a run. Problems met while walking the repository
    are absorbed and logged instead.

    Attributes:
        path (str): The output path that could not be written.
        reason (str): Description of the underlying failure.

    Example:
        >>> error = OutputDestinationError("/readonly/tree.txt", "Permission denied")
        >>> str(error)
        'Cannot write output to /readonly/tree.txt: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write output to {path}: {reason}")
