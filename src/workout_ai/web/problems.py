"""Problem-details error responses."""

from fastapi.responses import JSONResponse

PROBLEM_MEDIA_TYPE = "application/problem+json"

GENERATION_FAILED = "workout_generation_failed"
PLAN_UNPARSEABLE = "workout_plan_unparseable"
REPLACEMENT_FAILED = "exercise_replacement_failed"
LOOKUP_FAILED = "workout_lookup_failed"
PROGRESS_FAILED = "progress_lookup_failed"


def problem_response(code: str, status_code: int = 500) -> JSONResponse:
    """Build an RFC 7807 response carrying only an opaque error code.

    Exception details stay in the server log.
    """
    return JSONResponse(
        status_code=status_code,
        media_type=PROBLEM_MEDIA_TYPE,
        content={
            "type": "about:blank",
            "title": "An error occurred while processing your request.",
            "status": status_code,
            "detail": code,
        },
    )
