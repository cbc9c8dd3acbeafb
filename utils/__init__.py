"""
disk-endurance-bench Utilities
Console formatting, colors, and unit helpers shared by the CLI and benchmarks.
"""

import sys

# ANSI color codes
COLORS = {
    "HEADER": "\033[95m",
    "BLUE": "\033[94m",
    "CYAN": "\033[96m",
    "GREEN": "\033[92m",
    "YELLOW": "\033[93m",
    "RED": "\033[91m",
    "BOLD": "\033[1m",
    "ENDC": "\033[0m",
}

BANNER_WIDTH = 60


def color_text(text, color_name):
    """Apply color to text if output is a terminal"""
    if sys.stdout.isatty() and color_name in COLORS:
        return f"{COLORS[color_name]}{text}{COLORS['ENDC']}"
    return text


def _banner(title, fill, edge, color):
    separator = fill * BANNER_WIDTH
    print()
    print(color_text(separator, color))
    print(color_text(f"{edge} {title.center(BANNER_WIDTH - 4)} {edge}", "BOLD"))
    print(color_text(separator, color))
    print()


def print_header(title):
    """Print a top-level banner, used once per program phase."""
    _banner(title, "#", "#", "BLUE")


def print_subheader(title):
    _banner(title, "-", "|", "CYAN")


def print_section(title):
    """Print a section separator"""
    separator = "=" * BANNER_WIDTH
    print()
    print(color_text(separator, "GREEN"))
    print(color_text(f" {title} ", "BOLD"))
    print(color_text(separator, "GREEN"))
    print()


def print_warning(message):
    print(color_text(f"! WARNING: {message}", "YELLOW"))


def print_error(message):
    """Print an error message"""
    print(color_text(f"! ERROR: {message}", "RED"))


def print_info(message):
    print(color_text(f"* {message}", "CYAN"))


def print_success(message):
    print(color_text(f"✓ {message}", "GREEN"))


def print_bullet(message):
    print(f"  {message}")


def ask(prompt):
    """Read a line from the user with a bold prompt."""
    return input(color_text(prompt, "BOLD")).strip()


def format_gib(num_bytes):
    """Format a byte count as GiB with two decimals (e.g. '18.12 GiB')."""
    return f"{num_bytes / (1024 ** 3):.2f} GiB"


def format_hours(seconds):
    """Format a duration in seconds as hours with two decimals."""
    return f"{seconds / 3600:.2f}"
