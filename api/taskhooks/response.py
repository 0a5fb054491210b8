"""Standard response envelope for the TaskHooks API."""

from typing import Any


def single_response(item: Any) -> dict:
    return {"data": item}
