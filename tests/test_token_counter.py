from unittest.mock import MagicMock, patch

import pytest

from repo2tree.exceptions import TokenizationError, TokenizerNotAvailableError
from repo2tree.token_counter import CountResult, TokenCounter, tiktoken_available


@pytest.fixture
def mock_encoder():
    encoder = MagicMock()
    encoder.encode.side_effect = lambda text: [0] * len(text)  # Mock tokenization
    return encoder


@pytest.fixture
def counter_with_model(mock_encoder):
    pytest.importorskip("tiktoken")
    with patch("repo2tree.token_counter.tiktoken_available", return_value=True), patch(
        "tiktoken.encoding_for_model", return_value=mock_encoder
    ):
        yield TokenCounter(model="gpt-4")


def test_tiktoken_available():
    with patch("importlib.util.find_spec", return_value=object()):
        assert tiktoken_available() is True
    with patch("importlib.util.find_spec", return_value=None):
        assert tiktoken_available() is False


def test_count_without_model():
    counter = TokenCounter()
    result = counter.count("repo/\n└── a.py\n")
    assert result == CountResult(lines=2, tokens=None, characters=15)
    assert counter.total_lines == 2
    assert counter.total_characters == 15
    assert counter.total_tokens is None


def test_count_with_model(counter_with_model):
    result = counter_with_model.count("Hello, world!")
    assert result.tokens == 13
    assert result.lines == 0
    assert result.characters == 13
    counter_with_model.count("ab\n")
    assert counter_with_model.total_tokens == 16
    assert counter_with_model.total_lines == 1


def test_reset(counter_with_model):
    counter_with_model.count("abc\n")
    counter_with_model.reset()
    assert counter_with_model.total_tokens == 0
    assert counter_with_model.total_lines == 0
    assert counter_with_model.total_characters == 0


def test_model_without_tiktoken():
    with patch("repo2tree.token_counter.tiktoken_available", return_value=False):
        with pytest.raises(TokenizerNotAvailableError):
            TokenCounter(model="gpt-4")
        # No model requested, so no tokenizer is needed
        assert TokenCounter().encoder is None


def test_unknown_model():
    pytest.importorskip("tiktoken")
    with patch("repo2tree.token_counter.tiktoken_available", return_value=True), patch(
        "tiktoken.encoding_for_model", side_effect=KeyError("nope")
    ):
        with pytest.raises(ValueError, match="Could not load tokenizer for model 'nope-model'"):
            TokenCounter(model="nope-model")


def test_tokenization_error(counter_with_model, mock_encoder):
    mock_encoder.encode.side_effect = RuntimeError("boom")
    with pytest.raises(TokenizationError, match="boom"):
        counter_with_model.count("text")
