"""
Tests for the Question Detector.
"""

import pytest

from rfp_analyzer.analysis.question_detector import (
    QuestionDetector,
    QuestionKind,
    identify_questions,
)


@pytest.mark.unit
class TestQuestionDetector:

    def setup_method(self):
        self.detector = QuestionDetector()

    def test_explicit_question_mark(self):
        matches = self.detector.detect_detailed("Can vendors provide 24/7 support?")

        assert [m.text for m in matches] == ["Can vendors provide 24/7 support"]
        assert matches[0].kind == QuestionKind.EXPLICIT

    def test_implicit_question_phrase(self):
        matches = self.detector.detect_detailed("Vendors must provide 24/7 support")

        assert [m.text for m in matches] == ["Vendors must provide 24/7 support"]
        assert matches[0].kind == QuestionKind.IMPLICIT

    def test_plain_statement_is_not_a_question(self):
        assert self.detector.detect("Vendors provide support daily") == []

    @pytest.mark.parametrize("sentence", [
        "The bidder SHALL PROVIDE three references.",
        "A bid bond is required.",
        "Insurance certificates are required.",
        "Please describe your staffing model.",
        "Please Explain any subcontracting arrangements.",
    ])
    def test_each_implicit_phrase(self, sentence):
        assert self.detector.detect(sentence) == [sentence.rstrip(".")]

    def test_order_and_mixed_sentences(self):
        text = "Welcome. Please describe your team! What is your fee? Thanks."

        assert self.detector.detect(text) == ["Please describe your team", "What is your fee"]

    def test_duplicates_are_kept(self):
        assert self.detector.detect("Is it ready? Is it ready?") == ["Is it ready", "Is it ready"]

    def test_punctuation_runs_split_once(self):
        text = "Is this required?! Yes... Vendors must provide logs"

        matches = self.detector.detect_detailed(text)

        assert [(m.text, m.kind) for m in matches] == [
            ("Is this required", QuestionKind.EXPLICIT),
            ("Vendors must provide logs", QuestionKind.IMPLICIT),
        ]

    def test_segments_are_trimmed_but_keep_inner_newlines(self):
        text = "INTRODUCTION\n\nVendors must provide references."

        assert self.detector.detect(text) == ["INTRODUCTION\n\nVendors must provide references"]

    @pytest.mark.parametrize("text", ["", "   ", "...", "?!?", "\n\n"])
    def test_empty_and_punctuation_only(self, text):
        assert self.detector.detect(text) == []

    def test_classify(self):
        assert self.detector.classify("Who owns the data", "?") == QuestionKind.EXPLICIT
        assert self.detector.classify("Access is required", ".") == QuestionKind.IMPLICIT
        assert self.detector.classify("Deliver the goods", ".") is None

    def test_module_helper(self):
        assert identify_questions("Why? Because.") == ["Why"]
