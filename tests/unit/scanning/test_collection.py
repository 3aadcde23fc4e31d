"""Test SpecCollection ordering and validation."""
import pytest

from numscan.errors import ConfigurationError, EmptyCollectionError, InvalidMemberError
from numscan.models.symbols import SignPosition, SymbolSpec
from numscan.scanning.collection import SpecCollection
from tests.factories import make_sign_collection


class TestAdd:
    def test_shortcuts_append_in_order(self):
        collection = SpecCollection()
        leading = collection.add_leading("-")
        trailing = collection.add_trailing("-")
        paired = collection.add_leading_and_trailing("(", ")")
        assert list(collection) == [leading, trailing, paired]
        assert len(collection) == 3
        assert collection[2] is paired

    def test_invalid_spec_not_appended(self):
        collection = make_sign_collection()
        with pytest.raises(ConfigurationError):
            collection.add(SymbolSpec())
        assert len(collection) == 2

    def test_rejects_other_types(self):
        with pytest.raises(ConfigurationError, match="expected a SymbolSpec"):
            SpecCollection().add("-")

    def test_construct_from_specs(self, leading_minus, parentheses):
        collection = SpecCollection([leading_minus, parentheses])
        assert collection[0] is leading_minus
        assert collection[1] is parentheses


class TestValidate:
    def test_empty(self):
        collection = SpecCollection()
        with pytest.raises(EmptyCollectionError):
            collection.validate()
        assert not collection.is_valid()

    def test_empty_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            SpecCollection().validate(context="signs")

    def test_reports_first_invalid_member(self):
        collection = make_sign_collection()
        collection._specs.append(SymbolSpec(SignPosition.AFTER))
        collection._specs.append(SymbolSpec())
        with pytest.raises(InvalidMemberError) as exc_info:
            collection.validate(context="US")
        assert exc_info.value.index == 2
        assert "trailing_symbols" in str(exc_info.value)
        assert str(exc_info.value).startswith("US: member [2]")

    def test_valid(self, us_signs):
        us_signs.validate()
        assert us_signs.is_valid()


class TestProcessingState:
    def test_found_spec(self):
        collection = make_sign_collection(trailing="-")
        assert collection.found_spec() is None
        collection[1].match_trailing_at("5-", 1)
        assert collection.found_spec() == (1, collection[1])

    def test_paired_found_only_when_complete(self):
        collection = make_sign_collection(leading=None)
        collection[0].match_leading_at("(5)", 0)
        assert collection.found_spec() is None
        collection[0].match_trailing_at("(5)", 2)
        assert collection.found_spec() == (0, collection[0])

    def test_reset_clears_every_member(self):
        collection = make_sign_collection(trailing="-")
        for spec in collection:
            spec.set_found_first_numeric_digit(True)
        collection.reset_processing_state()
        assert not any(spec.found_first_numeric_digit for spec in collection)

    def test_clone_is_independent(self, us_signs):
        copy = us_signs.clone()
        copy[0].match_leading_at("-", 0)
        assert copy[0].found_leading
        assert not us_signs[0].found_leading
        assert len(copy) == len(us_signs)
