"""
Utility functions for endpoint operations.
"""
import time
from fastapi import Response


def start_timer() -> float:
    return time.perf_counter()


def format_duration(start: float) -> str:
    """Milliseconds elapsed since start, e.g. '1.234ms'."""
    return f"{(time.perf_counter() - start) * 1000:.3f}ms"


def set_response_headers(response: Response, max_age: int, duration: str) -> None:
    """Attach the cache lifetime and processing duration to a response."""
    response.headers["Cache-Control"] = f"public, max-age={max_age}"
    response.headers["X-Response-Time"] = duration
