import json
import logging
import os
import re
import requests

logger = logging.getLogger("ItunesLookup")

LOOKUP_URL = 'https://itunes.apple.com/lookup?'
REQUEST_TIMEOUT = 10
FAILURE_LOG_PATH = "logs/lookup_failures.log"

_NUMERIC_ID = re.compile(r'[0-9]+')
_LINE_BREAK = re.compile(r'\r\n|\r|\n')
_JSON_WHITESPACE = " \t\r\n"

_logging_configured = False


def configure_logging():
    global _logging_configured
    if _logging_configured:
        return
    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')

    os.makedirs(os.path.dirname(FAILURE_LOG_PATH), exist_ok=True)
    failure_log_handler = logging.FileHandler(FAILURE_LOG_PATH)
    failure_log_handler.setLevel(logging.ERROR)
    failure_log_handler.setFormatter(logging.Formatter('[%(asctime)s] [%(levelname)s] %(message)s'))
    logger.addHandler(failure_log_handler)

    _logging_configured = True


def build_lookup_url(app_id):
    """Return the lookup URL for a store id or bundle id, or None for a blank id.

    The id is appended as-is, without percent-encoding.
    """
    if app_id is None:
        return None
    app_id = str(app_id)
    if not app_id:
        return None

    # all digits is a store id, anything else is a bundle id
    if _NUMERIC_ID.fullmatch(app_id):
        query_parameter = f"id={app_id}"
    else:
        query_parameter = f"bundleId={app_id}"
    return LOOKUP_URL + query_parameter


def _close_response(resp, url):
    try:
        resp.close()
    except Exception as e:
        logger.error(f"Failed to close response for {url}: {e}", exc_info=True)


def fetch_lookup_response(url):
    """GET the url and return its body with line breaks and blank lines dropped.

    Any failure is logged and reported as None.
    """
    if not url:
        return None

    try:
        resp = requests.get(url, timeout=REQUEST_TIMEOUT, stream=True)
    except Exception as e:
        logger.error(f"Lookup request failed for {url}: {e}", exc_info=True)
        return None

    try:
        resp.raise_for_status()
        body = resp.text
    except Exception as e:
        logger.error(f"Failed to read lookup response from {url}: {e}", exc_info=True)
        return None
    finally:
        _close_response(resp, url)

    return ''.join(line for line in _LINE_BREAK.split(body) if line)


def _reject_constant(name):
    raise ValueError(f"Invalid JSON constant: {name}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _result_count(value):
    # numeric counts are truncated, anything else counts as zero
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def extract_bundle_id(json_text):
    """Pull results[0].bundleId out of a raw lookup response, or None."""
    if not json_text:
        return None

    try:
        # trailing content after the first document is ignored
        data, _ = _DECODER.raw_decode(json_text.lstrip(_JSON_WHITESPACE))
    except Exception as e:
        logger.error(f"Malformed lookup response: {e}", exc_info=True)
        return None

    if not isinstance(data, dict):
        return None

    if _result_count(data.get('resultCount', 0)) < 1:
        return None

    results = data.get('results')
    if not isinstance(results, list) or not results:
        return None

    first = results[0]
    if not isinstance(first, dict):
        return None

    bundle_id = first.get('bundleId')
    if not isinstance(bundle_id, str):
        return None
    return bundle_id


def get_bundle_id(app_id):
    url = build_lookup_url(app_id)
    if url is None:
        return None

    logger.info(f"Looking up bundle id for app_id: {app_id}")
    return extract_bundle_id(fetch_lookup_response(url))
