import json
from typing import Any, Dict, List

from bs4 import BeautifulSoup
from loguru import logger

# Element that carries the embedded JSON array of matches
PAYLOAD_ELEMENT_ID = "matches-data"


class ExtractionError(Exception):
    """Base exception for payload extraction errors."""

    pass


class PayloadMissingError(ExtractionError):
    """The page has no (or an empty) payload element."""

    pass


class PayloadMalformedError(ExtractionError):
    """The payload element exists but does not hold a JSON array."""

    pass


def extract_matches(html: str) -> List[Dict[str, Any]]:
    """Pulls the raw match records out of the listing page.

    Only the ``#matches-data`` element is checked. Entries of the array that
    are not JSON objects are dropped.

    Raises:
        PayloadMissingError: the element is absent or has no text.
        PayloadMalformedError: the text is not a JSON array.
    """
    soup = BeautifulSoup(html, "html.parser")
    element = soup.find(id=PAYLOAD_ELEMENT_ID)
    payload = ""
    if element is not None:
        payload = element.string if element.string is not None else element.get_text()

    if not payload:
        logger.warning(f"No '#{PAYLOAD_ELEMENT_ID}' payload found on the page.")
        raise PayloadMissingError("Matches data script not found on the page.")

    try:
        raw_matches = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.error(f"Could not decode '#{PAYLOAD_ELEMENT_ID}' payload: {e}")
        raise PayloadMalformedError(f"Invalid matches JSON: {e}") from e

    if not isinstance(raw_matches, list):
        logger.error(
            f"Expected a JSON array in '#{PAYLOAD_ELEMENT_ID}', got {type(raw_matches).__name__}"
        )
        raise PayloadMalformedError(
            f"Matches payload is a {type(raw_matches).__name__}, expected an array"
        )

    records = []
    for raw_match in raw_matches:
        if not isinstance(raw_match, dict):
            logger.warning(
                f"Skipping non-dictionary item in matches payload: {type(raw_match)}"
            )
            continue
        records.append(raw_match)

    logger.debug(f"Extracted {len(records)} raw match records.")
    return records
