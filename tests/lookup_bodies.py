"""
Canned lookup responses shared by the test modules.
"""

from unittest.mock import MagicMock


FOUND_BODY = '{"resultCount":1,"results":[{"bundleId":"com.skout.SKOUT"}]}'
EMPTY_BODY = '{"resultCount":0,"results":[]}'
NO_BUNDLE_BODY = '{"resultCount":1,"results":[{}]}'


def make_response(text="", status_error=None):
    """
    Build a stand-in for a requests.Response.

    Args:
        text: Body returned by ``.text``
        status_error: Exception raised by ``raise_for_status``, if any
    """
    resp = MagicMock()
    resp.text = text
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    return resp
