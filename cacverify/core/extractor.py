"""
Extraction of a matching business record from registry search results.

The results page has no stable layout, so extraction runs an ordered list of
independent strategies. The first strategy that returns a record wins; later
strategies are never consulted and matches are not ranked.
"""
import re
from typing import Callable, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag
from loguru import logger

from cacverify.core.matcher import business_names_match
from cacverify.core.normalizer import LEGAL_SUFFIXES, normalize_business_name
from cacverify.models.verification import RegistryRecord


Strategy = Callable[[BeautifulSoup, str, Sequence[str]], Optional[RegistryRecord]]

CONTAINER_SELECTORS: Tuple[str, ...] = (
    ".search-result-item",
    ".result-item",
    ".company-info",
    ".entity-info",
    ".result",
    'div[class*="result"]',
    'div[class*="company"]',
)
HEADING_TAGS: Tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "strong", "b")
HEADING_SIBLING_LIMIT = 10

RC_LOOKBACK_LINES = 5
STATUS_LOOKBACK_LINES = 10
RC_LOOKAHEAD_LINES = 5

RC_NUMBER_PATTERN = re.compile(r"RC[:\s-]*(\d+)", re.IGNORECASE)
RC_DASH_PATTERN = re.compile(r"RC\s*-\s*(\d+)", re.IGNORECASE)
LONG_NUMBER_PATTERN = re.compile(r"\b\d{5,}\b")
IDENTIFIER_DIGITS = re.compile(r"\d{5,}")
STATUS_PATTERN = re.compile(r"Status:\s*(\w+)", re.IGNORECASE)
CAPS_LIMITED_PATTERN = re.compile(r"\b([A-Z][A-Z\s]+(?:LIMITED|LTD))\b")
LIMITED_PATTERN = re.compile(r"\b([\w\s]+(?:Limited|Ltd)\.?)\b", re.IGNORECASE)


def _is_match(text: str, business_name: str, suffixes: Sequence[str]) -> bool:
    # Blank or punctuation-only text would otherwise be a substring of anything.
    if not normalize_business_name(text, suffixes):
        return False
    return business_names_match(text, business_name, suffixes)


def clean_rc_number(text: str) -> Optional[str]:
    """Strip an ``RC`` prefix from a registration-number cell."""
    text = text.strip()
    if not text:
        return None
    rc_match = RC_NUMBER_PATTERN.search(text)
    if rc_match:
        return rc_match.group(1)
    return text


def _looks_like_identifier(text: str) -> bool:
    return "RC" in text or "-" in text or IDENTIFIER_DIGITS.search(text) is not None


def extract_company_name_from_text(text: str) -> str:
    """Pick the most name-like span out of a block of text.

    Prefers an all-caps name ending in LIMITED/LTD, then any name ending in
    Limited/Ltd, then the first line of the block.
    """
    caps_match = CAPS_LIMITED_PATTERN.search(text)
    if caps_match:
        return caps_match.group(1).strip()

    limited_match = LIMITED_PATTERN.search(text)
    if limited_match:
        return limited_match.group(1).strip()

    return text.split("\n")[0].strip()


def table_strategy(
    soup: BeautifulSoup,
    business_name: str,
    suffixes: Sequence[str] = LEGAL_SUFFIXES,
) -> Optional[RegistryRecord]:
    """Match the first cell of each table row against the business name."""
    tables = soup.find_all("table")
    logger.debug(f"Found {len(tables)} tables")

    for table in tables:
        for row in table.find_all("tr"):
            cells = row.find_all("td")
            if len(cells) < 2:
                continue

            company_name = cells[0].get_text().strip()
            if not _is_match(company_name, business_name, suffixes):
                continue

            second_cell = cells[1].get_text().strip()
            rc_number = None
            if len(cells) >= 3 or _looks_like_identifier(second_cell):
                rc_number = clean_rc_number(second_cell)

            return RegistryRecord(official_name=company_name, rc_number=rc_number, strategy="table")

    return None


def container_strategy(
    soup: BeautifulSoup,
    business_name: str,
    suffixes: Sequence[str] = LEGAL_SUFFIXES,
) -> Optional[RegistryRecord]:
    """Match result/company/entity blocks by their full text."""
    containers: List[Tag] = []
    for selector in CONTAINER_SELECTORS:
        containers.extend(soup.select(selector))
    logger.debug(f"Found {len(containers)} candidate result containers")

    for container in containers:
        text = container.get_text().strip()
        if not _is_match(text, business_name, suffixes):
            continue

        rc_number = None
        rc_match = RC_NUMBER_PATTERN.search(text)
        if rc_match:
            rc_number = rc_match.group(1)
        else:
            number_match = LONG_NUMBER_PATTERN.search(text)
            if number_match:
                rc_number = number_match.group(0)

        return RegistryRecord(
            official_name=extract_company_name_from_text(text),
            rc_number=rc_number,
            strategy="container",
        )

    return None


def heading_strategy(
    soup: BeautifulSoup,
    business_name: str,
    suffixes: Sequence[str] = LEGAL_SUFFIXES,
) -> Optional[RegistryRecord]:
    """Match headings and bold text, then look at following siblings for the RC number."""
    for tag_name in HEADING_TAGS:
        for heading in soup.find_all(tag_name):
            text = heading.get_text().strip()
            if not _is_match(text, business_name, suffixes):
                continue

            rc_number = None
            siblings = [s for s in heading.next_siblings if isinstance(s, Tag)]
            for sibling in siblings[:HEADING_SIBLING_LIMIT]:
                rc_match = RC_NUMBER_PATTERN.search(sibling.get_text().strip())
                if rc_match:
                    rc_number = rc_match.group(1)
                    break

            return RegistryRecord(official_name=text, rc_number=rc_number, strategy="heading")

    return None


def find_matching_line(
    lines: List[str],
    business_name: str,
    lookback: int,
    suffixes: Sequence[str] = LEGAL_SUFFIXES,
) -> Optional[int]:
    """Index of the last matching line among the final ``lookback`` lines."""
    stop = max(len(lines) - lookback, 0)
    for i in range(len(lines) - 1, stop - 1, -1):
        line = lines[i].strip()
        if line and _is_match(line, business_name, suffixes):
            return i
    return None


def find_rc_number_after(lines: List[str], index: int) -> Optional[str]:
    """First ``RC - <digits>`` number within ``RC_LOOKAHEAD_LINES`` lines from ``index``."""
    for line in lines[index: index + RC_LOOKAHEAD_LINES]:
        rc_match = RC_DASH_PATTERN.search(line)
        if rc_match:
            return rc_match.group(1)
    return None


def free_text_strategy(
    soup: BeautifulSoup,
    business_name: str,
    suffixes: Sequence[str] = LEGAL_SUFFIXES,
) -> Optional[RegistryRecord]:
    """Fallback for pages without structured markup.

    Pairs an ``RC - <digits>`` occurrence with a matching name on one of the
    lines just above it; failing that, anchors on ``Status: ACTIVE`` lines.
    """
    root = soup.body if soup.body is not None else soup
    all_text = root.get_text()

    for rc_match in RC_DASH_PATTERN.finditer(all_text):
        lines = all_text[: rc_match.start()].strip().split("\n")
        index = find_matching_line(lines, business_name, RC_LOOKBACK_LINES, suffixes)
        if index is not None:
            return RegistryRecord(
                official_name=lines[index].strip(),
                rc_number=rc_match.group(1),
                strategy="free_text_rc",
            )

    for status_match in STATUS_PATTERN.finditer(all_text):
        if status_match.group(1).upper() != "ACTIVE":
            continue

        lines = all_text[: status_match.start()].strip().split("\n")
        index = find_matching_line(lines, business_name, STATUS_LOOKBACK_LINES, suffixes)
        if index is None:
            continue

        return RegistryRecord(
            official_name=lines[index].strip(),
            rc_number=find_rc_number_after(lines, index),
            strategy="free_text_status",
        )

    return None


DEFAULT_STRATEGIES: Tuple[Strategy, ...] = (
    table_strategy,
    container_strategy,
    heading_strategy,
    free_text_strategy,
)


def extract_registry_record(
    html: str,
    business_name: str,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    suffixes: Sequence[str] = LEGAL_SUFFIXES,
) -> Optional[RegistryRecord]:
    """Find the record matching ``business_name`` on a search results page.

    Args:
        html: Search results markup (full page or fragment)
        business_name: Name the caller asked to verify
        strategies: Ordered extraction strategies
        suffixes: Legal suffixes ignored when comparing names

    Returns:
        The first record any strategy confirms, or None when nothing matches
    """
    try:
        soup = BeautifulSoup(html or "", "html.parser")
    except ParserRejectedMarkup as e:
        logger.warning(f"Search results markup rejected by parser: {e}")
        return None

    for strategy in strategies:
        try:
            record = strategy(soup, business_name, suffixes)
        except Exception as e:
            logger.warning(f"Extraction strategy {strategy.__name__} failed: {e}")
            continue
        if record is not None:
            logger.debug(
                f"Found match via {record.strategy}: {record.official_name}, RC: {record.rc_number}"
            )
            return record

    return None
