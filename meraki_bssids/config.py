from __future__ import annotations

import argparse
import logging
import os
import re
from dataclasses import dataclass
from getpass import getpass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# ---------------- Constants ----------------
BASE_URL: str = "https://api.meraki.com/api/v1"
REQUEST_TIMEOUT: int = 300  # seconds
API_KEY_ENV: str = "MERAKI_DASHBOARD_API_KEY"
MAX_API_KEY_ATTEMPTS: int = 4


class ConfigError(Exception):
    """Raised when the run cannot be configured (e.g. no usable API key)."""


@dataclass
class Settings:
    api_key: str = ""
    base_url: str = BASE_URL
    timeout: int = REQUEST_TIMEOUT
    output_dir: str = ""
    org_number: Optional[int] = None   # 1-based, as shown in the org list
    name_filter: Optional[str] = None
    use_sdk: bool = False
    enabled_only: bool = False
    static_commands: bool = False
    assume_yes: bool = False
    debug: bool = False
    log_dir: str = "."

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Settings":
        return cls(
            api_key=args.api_key or os.getenv(API_KEY_ENV, ""),
            base_url=args.base_url,
            timeout=args.timeout,
            output_dir=args.output_dir or default_output_dir(),
            org_number=args.org,
            name_filter=args.name_filter,
            use_sdk=args.sdk,
            enabled_only=args.enabled_only,
            static_commands=args.static_commands,
            assume_yes=args.yes,
            debug=args.debug,
            log_dir=args.log_dir,
        )


def default_output_dir() -> str:
    """The user's Documents folder when it exists, otherwise the working directory."""
    docs = os.path.join(os.path.expanduser("~"), "Documents")
    if os.path.isdir(docs):
        return docs
    return os.getcwd()


def validate_api_key(key: str) -> bool:
    # Meraki keys are 40 hex chars
    return bool(re.fullmatch(r"[A-Fa-f0-9]{40}", key or ""))


def resolve_api_key(
    settings: Settings,
    prompt: Callable[[str], str] = getpass,
    max_attempts: int = MAX_API_KEY_ATTEMPTS,
) -> str:
    """
    Return a usable API key.
    - A key from --api-key or the environment is used with surrounding whitespace removed.
    - Otherwise prompt (hidden) up to max_attempts times, validating the format.
    """
    if settings.api_key:
        logger.info("Using API key from command line/environment")
        settings.api_key = settings.api_key.strip()
        return settings.api_key

    attempts = 0
    while attempts < max_attempts:
        key = prompt("Enter your Meraki API key (hidden): ").strip()
        if validate_api_key(key):
            settings.api_key = key
            return key
        attempts += 1
        logger.error("Invalid API key attempt %d", attempts)
        print(f"❌ Invalid API key. ({max_attempts - attempts} attempt(s) left)")
    raise ConfigError("Maximum API key attempts reached")
