"""Tests for specifier parsing."""

import pytest

from semrange import (
    EmptyInputError,
    IncorrectSeparatorError,
    NotANumberError,
    Operator,
    Version,
    exact_version,
    parse_version,
    parse_versions,
)


class TestParseVersion:
    """Single specifier parsing."""

    def test_major_only(self):
        assert parse_version("1") == Version.of_exact(exact_version(1))

    def test_major_and_minor(self):
        assert parse_version("1.1") == Version.of_exact(exact_version(1, 1))

    def test_major_minor_patch(self):
        version = parse_version("1.56.3").exact
        assert (version.major, version.minor, version.patch) == (1, 56, 3)
        assert version.operator is Operator.EXACT

    def test_zero_major_is_kept(self):
        """A leading zero field is a real value, not an unset one."""
        version = parse_version("0.9.0").exact
        assert (version.major, version.minor, version.patch) == (0, 9, 0)

    def test_upper_bound_of_component(self):
        version = parse_version("65535.65535.65535").exact
        assert (version.major, version.minor, version.patch) == (65535, 65535, 65535)

    @pytest.mark.parametrize(
        "symbol, operator",
        [
            ("=", Operator.EXACT),
            (">", Operator.GREATER),
            (">=", Operator.GREATER_EQ),
            ("<", Operator.LESS),
            ("<=", Operator.LESS_EQ),
            ("~", Operator.TILDE),
            ("^", Operator.CARET),
            ("*", Operator.WILDCARD),
        ],
    )
    def test_operators(self, symbol, operator):
        version = parse_version(f"{symbol}1.0.0").exact
        assert version.operator is operator
        assert (version.major, version.minor, version.patch) == (1, 0, 0)

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            parse_version("")

    def test_operator_without_version(self):
        with pytest.raises(EmptyInputError):
            parse_version(">=")

    @pytest.mark.parametrize("source", ["something", "1.something", "1.1.something"])
    def test_not_a_number(self, source):
        with pytest.raises(NotANumberError) as excinfo:
            parse_version(source)
        assert excinfo.value == NotANumberError("something")
        assert excinfo.value.text == "something"

    def test_overflow(self):
        with pytest.raises(NotANumberError) as excinfo:
            parse_version("1.65536.0")
        assert excinfo.value.text == "65536"

    def test_very_long_digit_run(self):
        """Runs too long for int() still report the offending text."""
        run = "9" * 5000
        with pytest.raises(NotANumberError) as excinfo:
            parse_version(run)
        assert excinfo.value.text == run

    def test_leading_zeros_do_not_count_towards_length(self):
        version = parse_version("0000001.00065535").exact
        assert (version.major, version.minor) == (1, 65535)

    def test_trailing_separator(self):
        with pytest.raises(NotANumberError) as excinfo:
            parse_version("1.")
        assert excinfo.value.text == ""

    def test_doubled_separator(self):
        with pytest.raises(NotANumberError) as excinfo:
            parse_version("1..2")
        assert excinfo.value.text == ""

    def test_extra_field_is_part_of_patch(self):
        with pytest.raises(NotANumberError) as excinfo:
            parse_version("1.2.3.4")
        assert excinfo.value.text == "3.4"

    def test_signs_and_non_ascii_digits_rejected(self):
        with pytest.raises(NotANumberError):
            parse_version("+1")
        with pytest.raises(NotANumberError):
            parse_version("1.٣")

    def test_whitespace_is_not_stripped(self):
        with pytest.raises(NotANumberError) as excinfo:
            parse_version(" 1.0.0")
        assert excinfo.value.text == " 1"


class TestParseVersions:
    """``||``-separated lists."""

    def test_two_entries_with_whitespace(self):
        assert parse_versions("1.0.0 ||2.0.0") == [
            Version.of_exact(exact_version(1, 0, 0)),
            Version.of_exact(exact_version(2, 0, 0)),
        ]

    def test_single_entry(self):
        assert parse_versions("1.2") == [Version.of_exact(exact_version(1, 2))]

    def test_order_and_operators_preserved(self):
        versions = parse_versions(">=2.0  ||  <1 || ~1.5.0")
        assert [str(v) for v in versions] == [">=2.0", "<1", "~1.5.0"]

    def test_junk_instead_of_separator(self):
        with pytest.raises(IncorrectSeparatorError):
            parse_versions("1.0.0xx2")

    def test_space_instead_of_separator(self):
        with pytest.raises(IncorrectSeparatorError):
            parse_versions("1.0.0 2.0.0")

    def test_single_pipe(self):
        with pytest.raises(IncorrectSeparatorError):
            parse_versions("1.0.0 | 2.0.0")

    @pytest.mark.parametrize("source", ["", "   ", "||", "1.0.0 ||", "|| 1.0.0", "1 |||| 2"])
    def test_missing_entries(self, source):
        with pytest.raises(IncorrectSeparatorError):
            parse_versions(source)

    def test_entry_errors_propagate(self):
        with pytest.raises(NotANumberError) as excinfo:
            parse_versions("1.0.0 || 2.something")
        assert excinfo.value.text == "something"

    def test_very_long_digit_run_in_entry(self):
        run = "1" * 5000
        with pytest.raises(NotANumberError) as excinfo:
            parse_versions("1.0.0 || 1." + run)
        assert excinfo.value.text == run

    def test_whitespace_at_list_ends_ignored(self):
        assert parse_versions("  1.0.0 || 2.0.0 ") == [
            Version.of_exact(exact_version(1, 0, 0)),
            Version.of_exact(exact_version(2, 0, 0)),
        ]

    def test_entry_with_only_operator(self):
        with pytest.raises(EmptyInputError):
            parse_versions("1.0.0 || >=")
