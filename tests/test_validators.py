"""
Tests for the validators module.
"""

from bookify.models import BookletOptions
from bookify.validators import ImpositionValidator


class TestBookletValidation:
    """Tests for ImpositionValidator.validate_booklet."""

    def test_full_signatures_have_no_issues(self):
        """Test that a document filling its sheets exactly passes cleanly."""
        result = ImpositionValidator.validate_booklet(16, BookletOptions(layout="four-up"))

        assert result.is_valid
        assert not result.has_issues()

    def test_padding_warning(self):
        """Test that added blank pages are reported."""
        result = ImpositionValidator.validate_booklet(6, BookletOptions(layout="two-up"))

        assert result.is_valid
        assert result.warnings == ["2 blank page(s) will be added to fill 2 sheet(s)"]

    def test_empty_document_is_an_error(self):
        result = ImpositionValidator.validate_booklet(0, BookletOptions())

        assert not result.is_valid
        assert "no pages" in result.errors[0]

    def test_target_pads_further(self):
        """Test blank count with a legacy target larger than the document."""
        options = BookletOptions(layout="two-up", target_page_count=16)
        result = ImpositionValidator.validate_booklet(10, options)

        assert result.warnings == ["6 blank page(s) will be added to fill 4 sheet(s)"]

    def test_target_smaller_than_document(self):
        """Test that an ignored target is reported."""
        options = BookletOptions(layout="two-up", target_page_count=16)
        result = ImpositionValidator.validate_booklet(20, options)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "target is ignored" in result.warnings[0]

    def test_thick_booklet_warning(self):
        """Test that a booklet with many sheets is flagged."""
        result = ImpositionValidator.validate_booklet(200, BookletOptions(layout="two-up"))

        assert result.is_valid
        assert any("too thick" in w for w in result.warnings)


class TestDoubleSidedValidation:
    """Tests for ImpositionValidator.validate_double_sided."""

    def test_even_page_count(self):
        result = ImpositionValidator.validate_double_sided(10)

        assert result.is_valid
        assert not result.has_issues()

    def test_odd_page_count_warning(self):
        result = ImpositionValidator.validate_double_sided(7)

        assert result.is_valid
        assert "odd number of pages" in result.warnings[0]

    def test_empty_document_is_an_error(self):
        result = ImpositionValidator.validate_double_sided(0)

        assert not result.is_valid
