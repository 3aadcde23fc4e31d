"""Test data factories for building specs and kernels."""
from numscan.models.kernel import NumericKernel, NumericSign
from numscan.models.separators import SeparatorSpec
from numscan.scanning.collection import SpecCollection


def make_sign_collection(
    leading: str | None = "-",
    trailing: str | None = None,
    paired: tuple[str, str] | None = ("(", ")"),
) -> SpecCollection:
    """Build a collection in leading, trailing, paired order, skipping any set to None."""
    collection = SpecCollection()
    if leading is not None:
        collection.add_leading(leading)
    if trailing is not None:
        collection.add_trailing(trailing)
    if paired is not None:
        collection.add_leading_and_trailing(*paired)
    return collection


def make_separators(
    decimal: str = ".",
    grouping: str = ",",
    group_size: int = 3,
) -> tuple[SeparatorSpec, list[SeparatorSpec]]:
    return (
        SeparatorSpec.new_decimal(decimal),
        [SeparatorSpec.new_integer_grouping(grouping, group_size)],
    )


def make_kernel(
    integer: str = "",
    fraction: str = "",
    sign: NumericSign | None = None,
) -> NumericKernel:
    """Build a kernel from digit strings; the sign defaults to what the digits imply."""
    kernel = NumericKernel()
    for digit in integer:
        kernel.add_integer_digit(digit)
    for digit in fraction:
        kernel.add_fractional_digit(digit)
    if sign is None:
        sign = NumericSign.POSITIVE if kernel.is_non_zero else NumericSign.ZERO
    kernel.set_sign(sign)
    return kernel
