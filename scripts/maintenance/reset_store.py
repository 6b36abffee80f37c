"""
Reset the persisted GIF Match state.

DANGEROUS: This forgets every fetched gif and the current selection!

Usage:
    python -m scripts.maintenance.reset_store
    python -m scripts.maintenance.reset_store --yes --theme
"""

import argparse

from core import storage


def main(argv=None):
    parser = argparse.ArgumentParser(description="Forget the stored gif library and selection")
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt"
    )
    parser.add_argument(
        "--theme",
        action="store_true",
        help="Also reset the theme back to light"
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override DATABASE_URL"
    )
    args = parser.parse_args(argv)

    print("=" * 60)
    print("WARNING: Reset GIF Match Storage")
    print("=" * 60)
    print()
    print("This will DELETE:")
    print("  - Every gif fetched so far")
    print("  - The chosen gif selection")
    if args.theme:
        print("  - The theme preference")
    print()

    if not args.yes:
        response = input("Are you sure you want to reset? (type 'yes' to confirm): ")
        if response.lower() != "yes":
            print("\nCancelled. No changes made.")
            return False

    library_store = storage.open_store(args.database_url)
    library_store.clear_library()
    if args.theme:
        library_store.clear_theme()
    print("✓ Storage reset complete!")
    return True


if __name__ == "__main__":
    main()
