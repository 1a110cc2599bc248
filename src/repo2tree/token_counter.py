"""Line, character and token counting for rendered tree reports.

Token counts use OpenAI's tiktoken library, installed with the optional
``token_counting`` extra. They tell how much of a language model's context
window the tree report will take; tokenizers of well-supported models such as
``gpt-4`` give useful approximations for other models too.
"""

import importlib.util
from typing import Any, NamedTuple, Optional

from repo2tree.exceptions import TokenizationError, TokenizerNotAvailableError


class CountResult(NamedTuple):
    lines: int
    tokens: Optional[int]
    characters: int


def tiktoken_available() -> bool:
    """Check if the tiktoken library is installed."""
    return importlib.util.find_spec("tiktoken") is not None


class TokenCounter:
    """Running totals of lines, characters and, optionally, tokens.

    Lines and characters are always counted. Tokens are counted only when a model
    is given, in which case tiktoken must be installed.

    Attributes:
        model (Optional[str]): Model whose tokenizer is used, or None to skip token counting.
        encoder (Optional[Any]): The tiktoken encoding for the model.

    Example:
        >>> counter = TokenCounter()
        >>> counter.count("repo/\\n└── main.py\\n")
        CountResult(lines=2, tokens=None, characters=18)
        >>> counter.total_lines
        2
        >>> print(counter.total_tokens)
        None

    Raises:
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
        ValueError: If tiktoken has no tokenizer for the model.
    """

    def __init__(self, model: Optional[str] = None) -> None:
        self.model = model
        self.encoder: Optional[Any] = None
        if model is not None:
            self.encoder = self._load_encoder(model)

        self.total_lines = 0
        self.total_characters = 0
        self.total_tokens: Optional[int] = None if self.encoder is None else 0

    @staticmethod
    def _load_encoder(model: str) -> Any:
        if not tiktoken_available():
            raise TokenizerNotAvailableError()

        # Imported lazily since tiktoken is an optional dependency
        import tiktoken

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{model}'. Consider using a well-supported "
                "model like 'gpt-4' (cl100k_base encoding); its counts approximate most other models."
            )

    def count(self, text: str) -> CountResult:
        """Count a piece of text and add it to the running totals.

        Args:
            text: The text to count.

        Returns:
            CountResult: Newlines, tokens (None without a model) and characters in ``text``.

        Raises:
            TokenizationError: If the tokenizer fails on the text.
        """
        lines = text.count("\n")
        characters = len(text)
        tokens = None

        if self.encoder is not None:
            try:
                tokens = len(self.encoder.encode(text))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {e}")
            self.total_tokens = (self.total_tokens or 0) + tokens

        self.total_lines += lines
        self.total_characters += characters
        return CountResult(lines=lines, tokens=tokens, characters=characters)

    def reset(self) -> None:
        """Reset the running totals, keeping the tokenizer."""
        self.total_lines = 0
        self.total_characters = 0
        self.total_tokens = None if self.encoder is None else 0
