from booking_agent.extraction.normalizers import normalize_date, normalize_time
from booking_agent.extraction.orchestrator import extract_booking_info, extract_call_metadata

__all__ = [
    "extract_booking_info",
    "extract_call_metadata",
    "normalize_date",
    "normalize_time",
]
