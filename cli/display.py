"""Terminal rendering of evaluation results.

Text meter, colour band and suggestion list for the CLI flows.
"""

from core.scoring import EvaluationResult


METER_WIDTH = 20

# ANSI colours per band
_BAND_COLOURS = {
    "danger": "\033[31m",
    "poor": "\033[33m",
    "fair": "\033[93m",
    "good": "\033[32m",
}
_RESET = "\033[0m"


def meter_band(score: int) -> str:
    """Map a score to its meter colour band."""
    if score < 30:
        return "danger"
    if score < 50:
        return "poor"
    if score < 70:
        return "fair"
    return "good"


def render_meter(score: int, width: int = METER_WIDTH, colour: bool = False) -> str:
    """Render a bar filled to score percent of width.

    Args:
        score: Score in 0-100
        width: Bar width in characters
        colour: Wrap the filled part in the band's ANSI colour

    Returns:
        Meter string like "[#########-----------]"
    """
    score = max(0, min(100, score))
    filled = round(width * score / 100)
    bar = "#" * filled
    if colour and bar:
        bar = f"{_BAND_COLOURS[meter_band(score)]}{bar}{_RESET}"
    return "[" + bar + "-" * (width - filled) + "]"


def format_report(result: EvaluationResult, colour: bool = False) -> list[str]:
    """Build the lines printed after a password is evaluated."""
    lines = [
        f"Strength: {result.rating.value} ({result.score}%)",
        f"Meter:    {render_meter(result.score, colour=colour)}",
        f"Entropy:  {result.entropy_bits} bits",
    ]

    if result.flags.is_common:
        lines.append("[Common password]")

    lines.append("Suggestions:")
    lines.extend(f"  - {tip}" for tip in result.suggestions)
    return lines


def print_report(result: EvaluationResult, colour: bool = True) -> None:
    for line in format_report(result, colour=colour):
        print(line)
