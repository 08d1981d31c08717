from __future__ import annotations

import logging
from typing import Callable, List, Sequence, TypeVar

from .models import Organization

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_ORG_ATTEMPTS: int = 3


class SelectionError(Exception):
    """Raised when the operator does not make a valid selection."""


def select_by_index(items: Sequence[T], index: int) -> T:
    """Zero-based pick with bounds checking (negative indexes are rejected)."""
    if index < 0 or index >= len(items):
        raise IndexError(f"selection {index} out of range (0-{len(items) - 1})")
    return items[index]


def print_organizations(orgs: List[Organization]) -> None:
    print("Organizations:")
    for idx, org in enumerate(orgs, 1):
        print(f"{idx}. {org.get('name', '<no name>')} (ID: {org.get('id', '<no id>')})")


def prompt_organization(
    orgs: List[Organization],
    input_func: Callable[[str], str] = input,
    max_attempts: int = MAX_ORG_ATTEMPTS,
) -> Organization:
    print_organizations(orgs)
    attempts = 0
    while attempts < max_attempts:
        raw = input_func("Select organization by number: ").strip()
        try:
            org = select_by_index(orgs, int(raw) - 1)
        except (ValueError, IndexError):
            attempts += 1
            logger.warning("Invalid organisation selection: %r", raw)
            print(f"Invalid selection. {max_attempts - attempts} attempt(s) left.")
            continue
        logger.info("Selected org %s (%s)", org.get("name", ""), org.get("id", ""))
        return org
    raise SelectionError(f"No valid organization selected after {max_attempts} attempts")


def prompt_name_filter(input_func: Callable[[str], str] = input) -> str:
    return input_func("Filter APs by name (partial, Enter for all): ").strip()


def confirm(question: str, input_func: Callable[[str], str] = input) -> bool:
    return input_func(f"{question} (y/n): ").strip().lower() in {"y", "yes"}
