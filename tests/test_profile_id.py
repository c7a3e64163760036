"""
Tests for LinkedIn profile ID extraction.
"""

import pytest

from linkedin_leads.profile_id import DecodeResult, decode_profile_token, extract_profile_id


@pytest.mark.parametrize(
    "url",
    [
        "https://www.linkedin.com/in/John-Doe-123/",
        "linkedin.com/in/john-doe-123",
        "https://in.linkedin.com/in/John-Doe-123?x=1#y",
        "http://linkedin.com/in/john-doe-123#about",
        "//www.linkedin.com/in/JOHN-DOE-123/details/experience/",
        "/in/john-doe-123",
        "   https://www.linkedin.com/in/john-doe-123   ",
    ],
)
def test_url_variants_share_one_id(url):
    """Protocol, subdomain, trailing slash, query and fragment don't change the ID."""
    assert extract_profile_id(url) == "john-doe-123"


def test_marker_is_case_insensitive():
    assert extract_profile_id("https://www.linkedin.com/IN/Jane-Smith") == "jane-smith"


@pytest.mark.parametrize("value", ["", "   ", None, 42, 3.5, ["linkedin.com/in/a"], {"url": "x"}])
def test_non_string_or_empty_input_has_no_id(value):
    assert extract_profile_id(value) is None


@pytest.mark.parametrize(
    "value",
    [
        "https://www.linkedin.com/company/acme",
        "https://www.linkedin.com/in/",
        "https://www.linkedin.com/in/?trk=1",
        "John Doe",
    ],
)
def test_values_without_profile_segment_have_no_id(value):
    assert extract_profile_id(value) is None


def test_percent_encoded_id_is_decoded():
    assert extract_profile_id("https://www.linkedin.com/in/John%20Doe") == "john doe"
    assert extract_profile_id("linkedin.com/in/j%C3%A9r%C3%B4me-l") == "jérôme-l"


def test_malformed_escape_falls_back_to_raw_token():
    assert extract_profile_id("linkedin.com/in/Bad%ZZid") == "bad%zzid"
    assert extract_profile_id("linkedin.com/in/trailing%") == "trailing%"


def test_invalid_utf8_escape_falls_back_to_raw_token():
    assert extract_profile_id("linkedin.com/in/caf%E9") == "caf%e9"


def test_decode_profile_token_reports_outcome():
    assert decode_profile_token("john%2Ddoe") == DecodeResult(True, "john-doe")
    assert decode_profile_token("plain") == DecodeResult(True, "plain")
    assert decode_profile_token("50%off") == DecodeResult(False, "50%off")
    assert decode_profile_token("%FF%FE") == DecodeResult(False, "%FF%FE")


def test_id_that_decodes_to_whitespace_is_absent():
    assert extract_profile_id("linkedin.com/in/%20%20") is None
