# Password Strength Meter
# Purpose: check how strong a password is and generate strong random replacements.
# Nothing typed or generated here is saved; only password-free scores are logged.

from cli import generate_password_flow, quick_generate_flow, test_password_flow, view_activity_flow
from core import QUICK_GENERATE_LENGTH


# main app menu and selection options
def main_menu():
    while True:
        print("\n=== Password Strength Meter ===")
        print("1. Test a password")
        print("2. Generate a password")
        print(f"3. Quick generate ({QUICK_GENERATE_LENGTH} characters)")
        print("4. Recent activity")
        print("5. Exit")

        choice = input("Choose an option (1-5): ").strip()
        if choice == '1':
            test_password_flow()
        elif choice == '2':
            generate_password_flow()
        elif choice == '3':
            quick_generate_flow()
        elif choice == '4':
            view_activity_flow()
        elif choice == '5':
            print("Exiting the program. Goodbye.")
            break
        else:
            print("Invalid choice. Please enter a number from 1 to 5.")


def main():
    try:
        main_menu()
    except (KeyboardInterrupt, EOFError):
        print("\nExiting the program. Goodbye.")


if __name__ == "__main__":
    main()
