"""Unit tests for remote file display formatting."""

from __future__ import annotations

import pytest

from audit_catalog.domain.services.formatting import format_audit_name, format_file_size


class TestFormatAuditName:
    """Tests for format_audit_name."""

    def test_dashes_become_title_cased_words(self) -> None:
        assert (
            format_audit_name("lemonad-core-security-audit.pdf")
            == "Lemonad Core Security Audit"
        )

    def test_underscores_become_spaces(self) -> None:
        assert format_audit_name("stackfi_avax_review.pdf") == "Stackfi Avax Review"

    def test_rest_of_word_is_untouched(self) -> None:
        assert format_audit_name("iLemonati-NFT-audit.pdf") == "ILemonati NFT Audit"

    def test_only_trailing_extension_is_stripped(self) -> None:
        assert format_audit_name("notes.pdf-draft.pdf") == "Notes.Pdf Draft"

    def test_custom_extension(self) -> None:
        assert format_audit_name("dex-review.md", extension=".md") == "Dex Review"

    def test_name_without_extension(self) -> None:
        assert format_audit_name("readme") == "Readme"

    def test_digits_are_kept(self) -> None:
        assert format_audit_name("v2-router-2026.pdf") == "V2 Router 2026"

    def test_non_ascii_letters_do_not_start_words(self) -> None:
        assert format_audit_name("über-audit.pdf") == "üBer Audit"


class TestFormatFileSize:
    """Tests for format_file_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (500, "500 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (2048, "2.0 KB"),
            (1536, "1.5 KB"),
            (1280, "1.3 KB"),
            (1331, "1.3 KB"),
            (1024 * 1024 - 1, "1024.0 KB"),
            (1024 * 1024, "1.0 MB"),
            (5_242_880, "5.0 MB"),
            (2_359_296, "2.3 MB"),
        ],
    )
    def test_thresholds(self, size: int, expected: str) -> None:
        assert format_file_size(size) == expected

    def test_negative_size_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            format_file_size(-1)
