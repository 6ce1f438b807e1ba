"""CLI package for the Password Strength Meter.

Provides modular CLI flows for testing and generating passwords.
"""

from cli.activity import view_activity_flow
from cli.generator import generate_password_flow, quick_generate_flow
from cli.tester import test_password_flow

__all__ = [
    "generate_password_flow",
    "quick_generate_flow",
    "test_password_flow",
    "view_activity_flow",
]
