"""Password testing CLI flows.

Allows users to check the strength of a password they type in.
"""

import getpass

from core import evaluate
from core.events import log_event, summarize_result

from cli.display import print_report


def test_password_flow() -> None:
    """Read a password without echo and print its strength report."""
    print("\n--- Test a Password ---")

    user_pwd = getpass.getpass("Enter the password you want to test (hidden): ")
    if not user_pwd:
        print("No password entered.")
        return

    result = evaluate(user_pwd)
    print_report(result)
    log_event("evaluate", "SUCCESS", summarize_result(result))
