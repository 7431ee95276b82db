"""
Tests for the Requirement Extractor.
"""

import pytest

from rfp_analyzer.analysis.extractor import RequirementExtractor, extract_requirements
from rfp_analyzer.analysis.models import Criticality


@pytest.mark.unit
class TestRequirementExtractor:

    def setup_method(self):
        self.extractor = RequirementExtractor()

    def test_skips_paragraphs_without_requirement_language(self):
        text = "Intro paragraph.\n\nVendor must comply.\n\nNothing here.\n\nThe system shall log events."

        reqs = self.extractor.extract(text)

        assert [(r.id, r.description) for r in reqs] == [
            ("REQ-001", "Vendor must comply."),
            ("REQ-002", "The system shall log events."),
        ]

    def test_ids_are_sequential_without_gaps(self):
        paragraphs = []
        for i in range(12):
            paragraphs.append(f"Filler paragraph {i}.")
            paragraphs.append(f"Item {i} is mandatory.")

        reqs = self.extractor.extract("\n\n".join(paragraphs))

        assert [r.id for r in reqs] == [f"REQ-{n:03d}" for n in range(1, 13)]

    def test_each_call_restarts_numbering(self):
        first = self.extractor.extract("A must.\n\nB must.")
        second = self.extractor.extract("C must.")

        assert [r.id for r in first] == ["REQ-001", "REQ-002"]
        assert [r.id for r in second] == ["REQ-001"]

    @pytest.mark.parametrize("paragraph,expected", [
        ("The vendor must respond, and should be brief.", Criticality.MANDATORY),
        ("Offerors SHALL register.", Criticality.MANDATORY),
        ("Attendance is mandatory.", Criticality.MANDATORY),
        ("This requirement should be met.", Criticality.RECOMMENDED),
        ("Training is required where it may help.", Criticality.OPTIONAL),
        ("An optional demo is required.", Criticality.OPTIONAL),
        ("Requirement 4 covers reporting.", Criticality.OPTIONAL),
    ])
    def test_criticality_precedence(self, paragraph, expected):
        reqs = self.extractor.extract(paragraph)

        assert len(reqs) == 1
        assert reqs[0].criticality == expected

    def test_substring_matching(self):
        # 'mustard' contains 'must'
        reqs = self.extractor.extract("Bring mustard to the picnic.")

        assert len(reqs) == 1
        assert reqs[0].criticality == Criticality.MANDATORY

    def test_deadline_extraction(self):
        assert self.extractor.extract_deadline("Submit proposals by March 5, 2026 for review.") == "March 5, 2026"
        assert self.extractor.extract_deadline("Submit proposals soon.") == ""
        assert self.extractor.extract_deadline("Due BY june 1,  2025") == "june 1,  2025"
        assert self.extractor.extract_deadline("by 2025") == ""

    def test_deadline_digits_are_ascii_only(self):
        # Arabic-Indic digits
        assert self.extractor.extract_deadline("Ship by June ٣٠, ٢٠٢٥") == ""
        assert self.extractor.extract_deadline("Ship by Juné 30, 2025") == ""

    def test_deadline_accepts_non_breaking_space(self):
        assert self.extractor.extract_deadline("Ship by June\u00a030,\u30002025") == "June\u00a030,\u30002025"

    def test_requirement_carries_deadline(self):
        reqs = self.extractor.extract("Proposals must be submitted by March 5, 2026 for review.")

        assert reqs[0].deadline == "March 5, 2026"

    def test_requirement_without_deadline(self):
        reqs = self.extractor.extract("Proposals must be submitted electronically.")

        assert reqs[0].deadline == ""

    def test_page_reference_is_not_resolved(self):
        reqs = self.extractor.extract("Vendors shall comply.\n\nVendors must sign.")

        assert all(r.page_reference == "N/A" for r in reqs)

    def test_paragraphs_are_trimmed(self):
        reqs = self.extractor.extract("  \n\n   Vendors must comply.  \n\n\n\n")

        assert [r.description for r in reqs] == ["Vendors must comply."]

    def test_single_newline_does_not_split(self):
        reqs = self.extractor.extract("Line one must\nline two")

        assert len(reqs) == 1
        assert reqs[0].description == "Line one must\nline two"

    def test_empty_text(self):
        assert self.extractor.extract("") == []
        assert self.extractor.extract("\n\n  \n\n") == []

    def test_module_helper(self):
        assert extract_requirements("It shall work.")[0].id == "REQ-001"
