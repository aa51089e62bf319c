"""Unit tests for domain error to HTTP error mapping."""

import pytest

from agora.domain.error import (
    CapabilityUnsupportedError,
    DomainError,
    DuplicateVoteError,
    NotFoundError,
    ValidationError,
)
from agora.interface.error import to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    def test_validation_error_carries_field(self):
        exc = to_http_exception(ValidationError("body", "Comment body cannot be empty"))

        assert exc.status_code == 422
        assert exc.detail == {"field": "body", "message": "Comment body cannot be empty"}

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (DuplicateVoteError("c1", "u1"), 409),
            (CapabilityUnsupportedError("meeting"), 422),
            (NotFoundError("Comment", "c1"), 404),
            (DomainError("unexpected"), 400),
        ],
    )
    def test_status_codes(self, error, status_code):
        assert to_http_exception(error).status_code == status_code
