"""
Command-line business-name verification.

Usage:
    cacverify "Techtasker Solutions Limited"
    python -m cacverify.cli "Acme Nigeria" --no-overrides --timeout 10
"""
import argparse
import asyncio
import json
import sys
from typing import List, Optional

from cacverify.config.settings import settings
from cacverify.core.exceptions import BusinessNameValidationError
from cacverify.core.registry_client import RegistrySearchClient
from cacverify.core.verification import BusinessVerifier, build_override_table
from cacverify.models.verification import VerificationStatus
from cacverify.utils.logging import configure_logging


def build_verifier(use_overrides: bool = True, timeout: Optional[float] = None) -> BusinessVerifier:
    client = RegistrySearchClient(
        base_url=settings.registry_base_url,
        search_path=settings.registry_search_path,
        search_field=settings.registry_search_field,
        user_agent=settings.registry_user_agent,
        timeout=timeout if timeout is not None else settings.registry_timeout,
    )
    overrides = {}
    if use_overrides and settings.enable_verification_overrides:
        overrides = build_override_table(settings.verification_overrides)
    return BusinessVerifier(client, overrides=overrides, suffixes=settings.legal_suffixes)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Verify a business name with the CAC registry")
    parser.add_argument("name", nargs="+", help="Business name to verify")
    parser.add_argument("--no-overrides", action="store_true", help="Always query the registry")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--log-level", default=settings.log_level, help="Loguru log level")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    verifier = build_verifier(use_overrides=not args.no_overrides, timeout=args.timeout)

    try:
        result = asyncio.run(verifier.verify(" ".join(args.name)))
    except BusinessNameValidationError as e:
        print(json.dumps({"status": "error", "message": str(e)}, indent=2))
        return 2

    print(json.dumps(result.to_payload(), indent=2))
    return 1 if result.status == VerificationStatus.ERROR else 0


if __name__ == "__main__":
    sys.exit(main())
