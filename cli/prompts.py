"""Shared CLI prompt utilities.

Common input prompts and validation used across CLI flows.
"""

from typing import Optional

from core import MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH


def prompt_for_password_length() -> Optional[int]:
    """Prompt user for valid password length.

    Returns:
        Length as integer, or None to cancel
    """
    while True:
        val = input(
            f"Enter password length ({MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH}, or 'q' to cancel): "
        ).strip().lower()

        if val in ['q', 'exit']:
            return None

        try:
            length = int(val)
            if MIN_PASSWORD_LENGTH <= length <= MAX_PASSWORD_LENGTH:
                return length
            print(f"Please enter a number between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}.")
        except ValueError:
            print("Invalid input. Enter a number.")


def confirm_action(prompt: str) -> bool:
    """Ask a yes/no question.

    Returns:
        True only if the user answers 'y'
    """
    response = input(f"{prompt} (y/n): ").strip().lower()
    return response == 'y'
