"""Tests for Content-Disposition headers on file downloads."""

import pytest

from app.api.responses import ascii_file_name, attachment_headers
from app.application.eea_report_service import ReportType, report_file_name


class TestAsciiFileName:

    @pytest.mark.parametrize(
        "file_name,expected",
        [
            ("cv.pdf", "cv.pdf"),
            ("Zoë Nel CV.docx", "Zoe Nel CV.docx"),
            ('my "best" cv.pdf', "my best cv.pdf"),
            ("line\r\nbreak.txt", "linebreak.txt"),
            ("履歴書.pdf", "download.pdf"),
            ("履歴書", "download"),
        ],
    )
    def test_fallback(self, file_name, expected):
        assert ascii_file_name(file_name) == expected


class TestAttachmentHeaders:

    def test_headers_are_latin_1_encodable(self):
        headers = attachment_headers("Ολυμπία_CV.pdf")

        headers["Content-Disposition"].encode("latin-1")

    def test_keeps_exact_name_as_utf8(self):
        disposition = attachment_headers("résumé.pdf")["Content-Disposition"]

        assert disposition == "attachment; filename=\"resume.pdf\"; filename*=UTF-8''r%C3%A9sum%C3%A9.pdf"

    def test_report_name_with_unicode_company(self):
        file_name = report_file_name(ReportType.EEA2, "Ṣipho Bütler Holdings", "xlsx")

        disposition = attachment_headers(file_name)["Content-Disposition"]

        disposition.encode("latin-1")
        assert "filename*=UTF-8''" in disposition
