"""Tests for payload unification and the end-to-end extraction corpus."""

import pytest
from pydantic import ValidationError

from booking_agent.extraction import (
    extract_booking_info,
    extract_call_metadata,
    normalize_date,
    normalize_time,
)
from booking_agent.schemas.booking import BookingInfo
from tests.payloads import ASSISTANT_ID, BUSINESS_PHONE, make_payload
from tests.corpus import CORPUS

E2E_SUMMARY = "James successfully booked a men's haircut for Thursday, March 5th, 2026 at 3 PM."


@pytest.mark.parametrize("case", CORPUS, ids=[case["id"] for case in CORPUS])
def test_corpus(case):
    info = extract_booking_info(make_payload(case["summary"], case["transcript"]))
    extracted = info.model_dump(include=set(case["expected"]))
    assert extracted == case["expected"]


class TestPayloadShapes:
    def test_nested_message_with_analysis_and_artifact(self):
        info = extract_booking_info(make_payload(E2E_SUMMARY, nested=True))
        assert info.name == "James"
        assert info.customer_phone == "+14165550123"

    def test_top_level_fields(self):
        payload = {
            "summary": E2E_SUMMARY,
            "transcript": "",
            "customer": {"number": "+14165550199"},
        }
        info = extract_booking_info(payload)
        assert info.name == "James"
        assert info.customer_phone == "+14165550199"

    def test_direct_fields_preferred_over_nested(self):
        payload = {
            "message": {
                "summary": "Zed successfully booked a beard trim.",
                "analysis": {"summary": E2E_SUMMARY},
            }
        }
        assert extract_booking_info(payload).name == "Zed"

    def test_transcript_fallback_to_artifact(self):
        payload = {
            "message": {
                "summary": "The caller booked a beard trim.",
                "artifact": {"transcript": "User: my name is Tony"},
            }
        }
        assert extract_booking_info(payload).name == "Tony"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"message": None},
            {"message": "not a dict"},
            {"message": {"summary": 42, "transcript": ["a", "b"], "customer": "x"}},
            {"message": {"analysis": None, "artifact": 3}},
        ],
    )
    def test_malformed_payloads_degrade_to_empty_record(self, payload):
        info = extract_booking_info(payload)
        assert info == BookingInfo()

    def test_missing_customer_number(self):
        info = extract_booking_info(make_payload(E2E_SUMMARY, customer_number=None))
        assert info.customer_phone is None


class TestEndToEnd:
    def test_extract_then_normalize(self):
        info = extract_booking_info(make_payload(E2E_SUMMARY))
        assert info.name == "James"
        assert info.service == "men's haircut"
        assert info.date == "Thursday, March 5th, 2026"
        assert info.time == "3 PM"
        assert normalize_date(info.date) == "2026-03-05"
        assert normalize_time(info.time) == "15:00:00"

    def test_customer_name_is_not_a_special_request(self):
        summary = "Marco called to book a haircut with Marco for Friday, March 6th, 2026 at 2 PM."
        info = extract_booking_info(make_payload(summary))
        assert info.name == "Marco"
        assert info.special_requests is None

    def test_repeatable(self):
        payload = make_payload(E2E_SUMMARY, "my name is Tony")
        first = extract_booking_info(payload)
        assert all(extract_booking_info(payload) == first for _ in range(3))

    def test_booking_info_is_immutable(self):
        info = extract_booking_info(make_payload(E2E_SUMMARY))
        with pytest.raises(ValidationError):
            info.name = "Someone"


class TestCallMetadata:
    def test_reads_call_assistant_and_phone(self):
        metadata = extract_call_metadata(make_payload(E2E_SUMMARY, call_id="call-xyz"))
        assert metadata.call_id == "call-xyz"
        assert metadata.assistant_id == ASSISTANT_ID
        assert metadata.business_phone == BUSINESS_PHONE

    def test_assistant_id_falls_back_to_assistant_object(self):
        payload = {"message": {"call": {"id": "c1"}, "assistant": {"id": "asst-2"}}}
        assert extract_call_metadata(payload).assistant_id == "asst-2"

    def test_empty_payload(self):
        metadata = extract_call_metadata({})
        assert metadata.call_id is None
        assert metadata.assistant_id is None
        assert metadata.business_phone is None
