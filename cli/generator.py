"""Password generation CLI flows.

Handles password generation, secure preview, and strength analysis.
Copies generated passwords to the clipboard instead of echoing them so
they stay out of terminal scrollback.
"""

import pyperclip

from core import QUICK_GENERATE_LENGTH, evaluate, generate_password
from core.events import log_event, summarize_result
from core.scoring import EvaluationResult

from cli.display import print_report
from cli.prompts import prompt_for_password_length, confirm_action


def _try_copy_to_clipboard(text: str) -> bool:
    """Attempt to copy text to clipboard.

    Args:
        text: Text to copy to clipboard

    Returns:
        True if successfully copied, False otherwise
    """
    try:
        pyperclip.copy(text)
        return True
    except pyperclip.PyperclipException:
        return False


def _mask_password(password: str, show_chars: int = 4) -> str:
    """Create a masked version of password showing only first/last chars.

    Args:
        password: Password to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked password string like "Ab12****xy9!"
    """
    if len(password) <= show_chars * 2:
        return "*" * len(password)

    return password[:show_chars] + "*" * (len(password) - show_chars * 2) + password[-show_chars:]


def preview_and_analyze(password: str, secure_display: bool = True) -> EvaluationResult:
    """Display a generated password securely and analyze its strength.

    By default, copies password to clipboard instead of displaying in terminal
    to prevent exposure in shell history. Falls back to masked display if
    clipboard is unavailable.

    Args:
        password: Password to analyze
        secure_display: If True, use clipboard/masked display (default: True)

    Returns:
        Evaluation of the password
    """
    if secure_display:
        if _try_copy_to_clipboard(password):
            print("\n[PASSWORD COPIED TO CLIPBOARD]")
            print(f"Preview (masked): {_mask_password(password)}")
        else:
            # Clipboard unavailable - show masked with reveal option
            print(f"\nGenerated Password (masked): {_mask_password(password)}")
            if confirm_action("Show full password? WARNING: visible in terminal history."):
                print(f"Full Password: {password}")
    else:
        print(f"\nGenerated Password: {password}")

    result = evaluate(password)
    print_report(result)
    return result


def _generate_and_report(length: int) -> EvaluationResult:
    password = generate_password(length)
    result = preview_and_analyze(password)
    log_event("generate", "SUCCESS", {"requested_length": length, **summarize_result(result)})
    return result


def generate_password_flow() -> None:
    """Full interactive flow for generating a password."""
    print("\n--- Password Generation ---")

    length = prompt_for_password_length()
    if length is None:
        print("Canceled password generation.")
        return

    _generate_and_report(length)


def quick_generate_flow() -> None:
    """Generate a password of the default quick length without prompts."""
    print(f"\n--- Quick Generate ({QUICK_GENERATE_LENGTH} characters) ---")
    _generate_and_report(QUICK_GENERATE_LENGTH)
