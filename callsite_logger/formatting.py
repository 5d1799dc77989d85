"""Terminal highlighting for call-site locations."""

# ANSI: underline, green, bold
HIGHLIGHT = "\033[4;32;1m"
RESET = "\033[0m"


def format_location(location: str, highlight_enabled: bool) -> str:
    """Return location as-is, or wrapped in the ANSI highlight when enabled."""
    if not highlight_enabled:
        return location
    return f"{HIGHLIGHT}{location}{RESET}"
