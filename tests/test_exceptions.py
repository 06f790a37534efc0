"""Tests for the exception hierarchy and re-exports."""

from debugstr.exceptions import CliError, InvalidArgumentError


class TestExceptionHierarchy:
    def test_cli_error_is_exception(self):
        assert issubclass(CliError, Exception)

    def test_invalid_argument_is_cli_error(self):
        assert issubclass(InvalidArgumentError, CliError)

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)

    def test_exit_codes(self):
        assert CliError.exit_code == 1
        assert InvalidArgumentError.exit_code == 1

    def test_init_re_exports(self):
        from debugstr import CliError as InitCliError
        from debugstr import InvalidArgumentError as InitInvalidArgumentError

        assert InitCliError is CliError
        assert InitInvalidArgumentError is InvalidArgumentError


class TestInvalidArgumentAttrs:
    def test_attrs(self):
        err = InvalidArgumentError("maximum_line_length", 25, 7)
        assert err.param == "maximum_line_length"
        assert err.bound == 25
        assert err.value == 7

    def test_message_names_param_and_bound(self):
        msg = str(InvalidArgumentError("maximum_line_length", 25, 7))
        assert msg.startswith("[ERROR] maximum_line_length")
        assert "25" in msg
