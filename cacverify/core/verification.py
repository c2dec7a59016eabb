"""
Business-name verification against the CAC public registry.
"""
import asyncio
from typing import Callable, Dict, Mapping, Optional, Sequence

from loguru import logger

from cacverify.core.exceptions import BusinessNameValidationError, RegistryNetworkError
from cacverify.core.extractor import extract_registry_record
from cacverify.core.normalizer import LEGAL_SUFFIXES
from cacverify.core.registry_client import RegistrySearchClient
from cacverify.models.verification import RegistryRecord, VerificationResult


Extractor = Callable[..., Optional[RegistryRecord]]


def _override_key(business_name: str) -> str:
    return business_name.strip().lower()


def build_override_table(overrides: Mapping[str, Mapping[str, Optional[str]]]) -> Dict[str, VerificationResult]:
    """Turn configured overrides into ready-made verified results.

    Args:
        overrides: Mapping of business name to ``{"official_name", "rc_number"}``

    Returns:
        Mapping of lowercased, trimmed name to its verified result
    """
    table: Dict[str, VerificationResult] = {}
    for name, fields in overrides.items():
        table[_override_key(name)] = VerificationResult.verified(
            official_name=fields["official_name"],
            rc_number=fields.get("rc_number"),
        )
    return table


class BusinessVerifier:
    """Verifies business names and classifies every outcome."""

    def __init__(
        self,
        search_client: RegistrySearchClient,
        overrides: Optional[Mapping[str, VerificationResult]] = None,
        extractor: Extractor = extract_registry_record,
        suffixes: Sequence[str] = LEGAL_SUFFIXES,
    ):
        """Initialize verifier.

        Args:
            search_client: Client used to query the registry
            overrides: Results returned for known names without any network access,
                keyed by lowercased, trimmed name
            extractor: Function locating the matching record in a results page;
                called as ``extractor(html, name, suffixes=...)``
            suffixes: Legal suffixes ignored when comparing names
        """
        self.search_client = search_client
        self.overrides = dict(overrides or {})
        self.extractor = extractor
        self.suffixes = tuple(suffixes)

    def lookup_override(self, business_name: str) -> Optional[VerificationResult]:
        """Return the fixed result for a known name, if any."""
        result = self.overrides.get(_override_key(business_name))
        if result is None:
            return None
        return result.model_copy()

    async def verify(self, business_name: str) -> VerificationResult:
        """Verify a business name with the registry.

        Network and extraction failures never propagate; they come back as a
        result with ``error`` status.

        Args:
            business_name: Free-text company/agency name

        Returns:
            Verification result

        Raises:
            BusinessNameValidationError: If the name is empty or whitespace
        """
        name = (business_name or "").strip()
        if not name:
            raise BusinessNameValidationError("Agency name is required")

        logger.info(f"Verifying business name: {name}")

        override = self.lookup_override(name)
        if override is not None:
            logger.info(f"Using fixed result for known name: {name}")
            return override

        try:
            html = await self.search_client.search(name)
            # Parsing runs off the event loop.
            record = await asyncio.to_thread(self.extractor, html, name, suffixes=self.suffixes)
        except RegistryNetworkError as e:
            logger.warning(f"CAC registry unavailable for {name}: {e}")
            return VerificationResult.error(f"Error during verification: {e}")
        except Exception as e:
            logger.exception(f"CAC verification error for {name}")
            return VerificationResult.error(f"Error during verification: {e}")

        if record is None:
            logger.info(f"No registry match for {name}")
            return VerificationResult.not_found()

        logger.info(f"Verified {name} as {record.official_name} (RC: {record.rc_number}, via {record.strategy})")
        return VerificationResult.verified(official_name=record.official_name, rc_number=record.rc_number)
