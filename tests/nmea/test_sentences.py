"""Tests for sentence identification."""

import pytest

from tests.helpers import GGA_VALID, RMC_VALID, make_sentence
from tracklog import is_not_relevant
from tracklog.nmea.sentences import sentence_id


class TestSentenceId:
    """Tests for sentence_id function."""

    def test_id_is_text_before_first_comma(self):
        assert sentence_id(RMC_VALID) == "$GPRMC"

    def test_no_comma(self):
        assert sentence_id("$GPGGA*56") is None


class TestIsNotRelevant:
    """Tests for is_not_relevant function."""

    @pytest.mark.parametrize("name", ["GPGGA", "GNGGA", "GPGSA", "GNGSA"])
    def test_gga_and_gsa_families(self, name):
        assert is_not_relevant(make_sentence(f"{name},1,2,3")) is True

    def test_full_gga_sentence(self):
        assert is_not_relevant(GGA_VALID) is True

    @pytest.mark.parametrize("name", ["GPRMC", "GNRMC", "GPGLL", "GPVTG", "GLGGA", "GPGGAX"])
    def test_other_sentences_are_relevant(self, name):
        assert is_not_relevant(make_sentence(f"{name},1,2,3")) is False

    def test_sentence_without_fields_is_relevant(self):
        assert is_not_relevant("$GPGGA*56") is False
