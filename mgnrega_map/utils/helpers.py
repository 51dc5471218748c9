"""Display helpers shared by legends, labels and map URLs."""

from __future__ import annotations

import re

_CRORE = 10_000_000
_LAKH = 100_000
_THOUSAND = 1_000


def format_indian_number(amount: float) -> str:
    """Format a rupee amount with Indian units (Cr, L, K), two decimals.

    Examples:
        ``25_000_000`` → ``"₹2.50 Cr"``, ``150_000`` → ``"₹1.50 L"``,
        ``999`` → ``"₹999.00"``.
    """
    if amount >= _CRORE:
        return f"₹{amount / _CRORE:.2f} Cr"
    if amount >= _LAKH:
        return f"₹{amount / _LAKH:.2f} L"
    if amount >= _THOUSAND:
        return f"₹{amount / _THOUSAND:.2f} K"
    return f"₹{amount:.2f}"


def state_name_to_slug(state_name: str) -> str:
    """Convert a state name to the slug used in map URLs.

    ``"Jammu & Kashmir"`` → ``"jammu-and-kashmir"``.
    """
    slug = re.sub(r"\s+", "-", state_name.lower())
    slug = slug.replace("&", "and")
    return re.sub(r"[^a-z0-9-]", "", slug)
