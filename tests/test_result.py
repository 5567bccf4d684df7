import pytest

from passcheck import Failure, PasswordRejectedError, Success


class TestSuccess:
    def test_is_truthy(self):
        assert Success().ok is True
        assert bool(Success())

    def test_raise_for_failure_is_noop(self):
        Success().raise_for_failure()


class TestFailure:
    def test_behaves_like_message_sequence(self):
        failure = Failure(("first", "second"))

        assert failure.ok is False
        assert not failure
        assert len(failure) == 2
        assert list(failure) == ["first", "second"]

    def test_raise_for_failure(self):
        failure = Failure(("too short", "no digit"))

        with pytest.raises(PasswordRejectedError) as exc_info:
            failure.raise_for_failure()

        assert exc_info.value.violations == ("too short", "no digit")
        assert str(exc_info.value) == "Password rejected:\n  - too short\n  - no digit"
