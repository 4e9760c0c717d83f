# =============================================================================
# core/wds.py  —  Statistics Canada Web Data Service (WDS) fetcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Downloads a StatCan table as JSON from the public WDS "jsonDownload"
#   endpoint (free, no API key) and returns the leading records.
#
# FAIL-FAST CONTRACT:
#   Exactly one GET per call, bounded by a 20 second timeout.  No retries,
#   no backoff.  Anything that goes wrong raises a StatCanError subclass and
#   the caller (core/retrieval.py) decides whether to fall back to sample
#   data or report the failure.
#
#     TransportError  → non-2xx status, timeout, DNS/connection failure
#     DecodeError     → body isn't JSON, isn't an array, or is empty
# =============================================================================

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any

logger = logging.getLogger(__name__)

WDS_DOWNLOAD_URL = (
    "https://www150.statcan.gc.ca/t1/tbl1/en/dtbl!downloadTbl/jsonDownload?pid={pid}"
)
USER_AGENT = "StatCanAthenaAgent/1.0"
FETCH_TIMEOUT_SECONDS = 20


class StatCanError(Exception):
    """Base class for failures talking to the WDS endpoint."""


class TransportError(StatCanError):
    """The request failed or came back with a non-success status."""


class DecodeError(StatCanError):
    """The response body was not a non-empty JSON array."""


def product_id(table_id: str) -> str:
    """Derive the 8-digit WDS product ID from a table ID.

    "17-10-0005-01" → "17100005" (the trailing "01" view suffix is dropped).
    Identifiers are passed through verbatim; fetch_table percent-encodes them.
    """
    return table_id.replace("-", "")[:8]


def fetch_table(table_id: str, max_rows: int = 20) -> list[dict[str, Any]]:
    """Fetch the first `max_rows` records of a StatCan table.

    Args:
        table_id: StatCan table ID, e.g. "17-10-0005-01".
        max_rows: How many leading records to keep.

    Returns:
        A list of flat record dicts, in the order the API returned them.

    Raises:
        TransportError: on a non-2xx status, timeout or network failure.
        DecodeError: if the body isn't a non-empty JSON array.
    """
    url = WDS_DOWNLOAD_URL.format(pid=urllib.parse.quote(product_id(table_id), safe=""))
    req = urllib.request.Request(
        url,
        headers={"Accept": "*/*", "User-Agent": USER_AGENT},
    )
    logger.debug("GET %s", url)

    try:
        with urllib.request.urlopen(req, timeout=FETCH_TIMEOUT_SECONDS) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as e:
        raise TransportError(f"WDS API error {e.code}") from e
    except OSError as e:
        # URLError, socket timeouts and connection resets all land here.
        raise TransportError(f"WDS request failed: {e}") from e
    except (ValueError, http.client.HTTPException) as e:
        # Malformed URLs (InvalidURL, UnicodeEncodeError) and truncated bodies.
        raise TransportError(f"WDS request failed: {e!r}") from e

    if not 200 <= status < 300:
        raise TransportError(f"WDS API error {status}")

    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"WDS response is not valid JSON: {e}") from e

    if not isinstance(data, list) or not data:
        raise DecodeError("No data returned")

    return data[:max_rows]
