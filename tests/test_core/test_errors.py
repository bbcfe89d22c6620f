"""Tests for the encoder error taxonomy."""

import pytest

from catenc.core import errors

ALL_ERRORS = [
    errors.BoundsError, errors.CodeLengthError, errors.TargetLengthError,
    errors.InvalidArgumentError, errors.UnknownCategoryError,
    errors.VocabularyFormatError,
]


@pytest.mark.parametrize("cls", ALL_ERRORS)
def test_documented_and_rooted(cls):
    assert issubclass(cls, errors.EncoderError)
    assert cls.__doc__ and cls.__doc__.strip()


def test_invalid_argument_is_value_error():
    assert issubclass(errors.InvalidArgumentError, ValueError)


def test_messages():
    assert "out of bounds" in str(errors.BoundsError(5, 3))
    assert "does not cover" in str(errors.CodeLengthError(1, 2))
    assert "expected 2" in str(errors.TargetLengthError(2, 1))
