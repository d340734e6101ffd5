"""Recorded-style call summaries with the booking fields they must produce.

Add a case here before tuning any extraction rule.
"""

CORPUS = [
    {
        "id": "leading_subject_basic",
        "summary": "James successfully booked a men's haircut for Thursday, March 5th, 2026 at 3 PM.",
        "transcript": "",
        "expected": {
            "name": "James",
            "service": "men's haircut",
            "date": "Thursday, March 5th, 2026",
            "time": "3 PM",
            "special_requests": None,
        },
    },
    {
        "id": "child_booking",
        "summary": (
            "The user, Mike, booked a kid's haircut for his son, Bobby, "
            "on Saturday, April 11th, 2026 at 10:30 AM."
        ),
        "transcript": "",
        "expected": {
            "name": "Bobby",
            "service": "kid's haircut",
            "date": "Saturday, April 11th, 2026",
            "time": "10:30 AM",
            "special_requests": None,
        },
    },
    {
        "id": "combined_services_quoted_request",
        "summary": (
            "Marcus called to book a men's haircut and beard trim, requesting a "
            '"skin fade with a hard part". The appointment is confirmed for '
            "Friday, May 1st, 2026 at 2 PM."
        ),
        "transcript": "",
        "expected": {
            "name": "Marcus",
            "service": "men's haircut and beard trim",
            "date": "Friday, May 1st, 2026",
            "time": "2 PM",
            "special_requests": "skin fade with a hard part",
        },
    },
    {
        "id": "changed_service",
        "summary": (
            "The customer, Derek, originally asked for a haircut but changed the "
            "request to a beard trim for Tuesday, June 2nd, 2026 at 11 AM."
        ),
        "transcript": "",
        "expected": {
            "name": "Derek",
            "service": "beard trim",
            "date": "Tuesday, June 2nd, 2026",
            "time": "11 AM",
            "special_requests": None,
        },
    },
    {
        "id": "haircut_with_style",
        "summary": "Andre booked a haircut with a low fade for Wednesday, February 25th, 2026 at 7 PM.",
        "transcript": "",
        "expected": {
            "name": "Andre",
            "service": "men's haircut",
            "date": "Wednesday, February 25th, 2026",
            "time": "7 PM",
            "special_requests": "low fade",
        },
    },
    {
        "id": "name_from_transcript",
        "summary": "The caller booked a beard trim for Monday, March 16th, 2026 at 4:15 PM.",
        "transcript": (
            "AI: Hi, this is Sarah from the barbershop. "
            "User: Hi Sarah, my name is Tony and I'd like a beard trim."
        ),
        "expected": {
            "name": "Tony",
            "service": "beard trim",
            "date": "Monday, March 16th, 2026",
            "time": "4:15 PM",
            "special_requests": None,
        },
    },
    {
        "id": "hairstyle_keywords_in_transcript",
        "summary": (
            "Luis successfully scheduled a men's haircut for Sunday, March 8th, 2026 "
            "at 1 PM. The appointment is confirmed."
        ),
        "transcript": "User: Can I get a taper and a line up?",
        "expected": {
            "name": "Luis",
            "service": "men's haircut",
            "date": "Sunday, March 8th, 2026",
            "time": "1 PM",
            "special_requests": "taper, line up",
        },
    },
    {
        "id": "unquoted_request",
        "summary": (
            "Omar successfully booked a men's haircut, requesting a mid fade, "
            "for Friday, March 13th, 2026 at 9 AM."
        ),
        "transcript": "",
        "expected": {
            "name": "Omar",
            "service": "men's haircut",
            "date": "Friday, March 13th, 2026",
            "time": "9 AM",
            "special_requests": "mid fade",
        },
    },
    {
        "id": "no_details",
        "summary": "The call ended before any details were collected.",
        "transcript": "",
        "expected": {
            "name": None,
            "service": "appointment",
            "date": None,
            "time": None,
            "special_requests": None,
        },
    },
]
