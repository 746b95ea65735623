"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "MIRRORCHECK"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ MIRRORCHECK",
    "     // incremental integrity checks for archive mirrors",
)
SUMMARY_TITLE: str = "Verification summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} manifest verifier"))
