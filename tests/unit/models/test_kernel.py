"""Test the numeric kernel's digit accumulation and consistency checks."""
import pytest

from numscan.errors import InconsistentStateError, InvalidDigitError
from numscan.models.kernel import NumericKernel, NumericSign, NumericValueType
from tests.factories import make_kernel


class TestAccumulation:
    def test_value_type_follows_digits(self):
        kernel = NumericKernel()
        assert kernel.value_type == NumericValueType.NONE
        kernel.add_integer_digit("4")
        assert kernel.value_type == NumericValueType.INTEGER
        kernel.add_fractional_digit("0")
        assert kernel.value_type == NumericValueType.FLOATING_POINT

    def test_non_zero_flag(self):
        kernel = NumericKernel()
        kernel.add_integer_digit("0")
        assert kernel.is_non_zero is False
        kernel.add_fractional_digit("7")
        assert kernel.is_non_zero is True

    @pytest.mark.parametrize("digit", ["a", "12", "", "٣", 5])
    def test_rejects_non_digits(self, digit):
        kernel = NumericKernel()
        with pytest.raises(InvalidDigitError) as exc_info:
            kernel.add_integer_digit(digit, context="kernel")
        assert exc_info.value.digit == digit
        assert kernel.integer_digits == []

    def test_counts_and_strings(self):
        kernel = make_kernel("4654", "00")
        assert kernel.integer_string == "4654"
        assert kernel.fractional_string == "00"
        assert kernel.number_of_integer_digits == 4
        assert kernel.number_of_fractional_digits == 2

    def test_empty(self):
        kernel = make_kernel("12", "5", NumericSign.NEGATIVE)
        kernel.empty()
        assert kernel.integer_digits == []
        assert kernel.fractional_digits == []
        assert kernel.sign == NumericSign.ZERO
        assert kernel.is_non_zero is False
        assert kernel.value_type == NumericValueType.NONE


class TestSign:
    def test_set_sign_from_int(self):
        kernel = NumericKernel()
        kernel.set_sign(-1)
        assert kernel.sign is NumericSign.NEGATIVE

    def test_set_sign_rejects_unknown(self):
        kernel = make_kernel("5")
        with pytest.raises(InconsistentStateError, match=r"^row 3: sign_value") as exc_info:
            kernel.set_sign(2, context="row 3")
        assert exc_info.value.invariant == "sign_value"
        assert kernel.sign == NumericSign.POSITIVE


class TestValidate:
    def test_positive_integer(self):
        kernel = NumericKernel()
        for digit in "123":
            kernel.add_integer_digit(digit)
        kernel.set_sign(NumericSign.POSITIVE)
        kernel.validate()
        assert kernel.is_non_zero

    def test_valid_kernels(self):
        make_kernel("4654", "00", NumericSign.NEGATIVE).validate()
        make_kernel("0").validate()
        make_kernel("0", "00", NumericSign.NEGATIVE).validate()

    def _invariant(self, kernel):
        with pytest.raises(InconsistentStateError) as exc_info:
            kernel.validate()
        return exc_info.value.invariant

    def test_no_digits(self):
        assert self._invariant(NumericKernel()) == "digits_present"

    def test_fraction_without_integer(self):
        kernel = NumericKernel()
        kernel.add_fractional_digit("5")
        kernel.set_sign(NumericSign.POSITIVE)
        assert self._invariant(kernel) == "integer_before_fraction"

    def test_non_digit_stored_directly(self):
        kernel = make_kernel("1")
        kernel.integer_digits.append("x")
        assert self._invariant(kernel) == "digits_only"

    def test_stale_non_zero_flag(self):
        kernel = make_kernel("0")
        kernel.integer_digits.append("5")
        assert self._invariant(kernel) == "non_zero_flag"

    def test_zero_sign_with_non_zero_value(self):
        kernel = make_kernel("5", sign=NumericSign.ZERO)
        assert self._invariant(kernel) == "sign_matches_value"
        assert not kernel.is_valid()

    def test_context_in_message(self):
        with pytest.raises(InconsistentStateError, match=r"^row 3: digits_present"):
            NumericKernel().validate(context="row 3")

    @pytest.mark.parametrize(
        "integer, fraction, sign",
        [
            ("", "", NumericSign.ZERO),
            ("5", "", NumericSign.ZERO),
            ("12", "50", NumericSign.ZERO),
        ],
    )
    def test_failed_validation_leaves_kernel_unchanged(self, integer, fraction, sign):
        kernel = make_kernel(integer, fraction, sign)
        before = kernel.clone()
        with pytest.raises(InconsistentStateError):
            kernel.validate()
        assert kernel == before


class TestRendering:
    def test_negative_float(self):
        assert str(make_kernel("4654", "00", NumericSign.NEGATIVE)) == "-4654.00"

    def test_positive_integer(self):
        assert str(make_kernel("42")) == "42"

    def test_empty_renders_zero(self):
        assert str(NumericKernel()) == "0"

    def test_clone_independent(self):
        kernel = make_kernel("1")
        copy = kernel.clone()
        copy.add_integer_digit("2")
        assert kernel.integer_string == "1"
        assert copy.integer_string == "12"

    def test_listing(self):
        listing = make_kernel("7", "5", NumericSign.NEGATIVE).parameter_listing()
        assert "Number Sign: NEGATIVE" in listing
        assert "Numeric Value Type: floating_point" in listing
