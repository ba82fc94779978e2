"""Tests for relsign.core.errors module."""

from relsign.core.errors import ErrorCode


class TestErrorCodeValues:
    def test_values_are_stable(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.ENV_ERROR == 2
        assert ErrorCode.BUILD_ERROR == 3
        assert ErrorCode.IO_ERROR == 5
