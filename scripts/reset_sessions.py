#!/usr/bin/env python3
"""
PROOF360 E2E - Session Reset Script
===============================================================================
Delete stored browser sessions so the next test run performs a fresh login.

Usage:
    python scripts/reset_sessions.py           # all user types
    python scripts/reset_sessions.py admin     # only the admin session
    python scripts/reset_sessions.py --status  # show session age without deleting
"""

import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tests.e2e.helpers.constants import SESSION_DIR, UserType  # noqa: E402
from tests.e2e.helpers.sessions import SessionStore  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def print_status(store: SessionStore) -> None:
    print(f"\nStored sessions in {store.session_dir}:")
    print("=" * 60)
    for user_type in UserType:
        age = store.age_seconds(user_type)
        if age is None:
            print(f"{user_type:<8} none")
            continue
        state = "valid" if store.has_valid_session(user_type) else "expired/invalid"
        refresh = " (refresh due)" if store.needs_refresh(user_type) else ""
        print(f"{user_type:<8} {age / 60:5.1f} min old, {state}{refresh}")


def main():
    """Session reset entry point"""
    import argparse

    parser = argparse.ArgumentParser(description='Clear stored Proof360 E2E sessions')
    parser.add_argument(
        'user_type',
        nargs='?',
        choices=[*UserType, 'all'],
        default='all',
        help='User type to reset (default: all)'
    )
    parser.add_argument(
        '--session-dir',
        default=str(SESSION_DIR),
        help='Directory holding the stored sessions'
    )
    parser.add_argument(
        '--status',
        action='store_true',
        help='Show stored sessions instead of deleting them'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    store = SessionStore(args.session_dir)

    if args.status:
        print_status(store)
        return

    if args.user_type == 'all':
        print("🔄 Clearing stored sessions for all user types...")
        store.clear_all()
        print("✅ All sessions cleared! Next test run will perform a fresh login.")
    else:
        print(f"🔄 Clearing stored session for {args.user_type} user...")
        store.clear(args.user_type)
        print(f"✅ {args.user_type} session cleared! Next test run will perform a fresh login.")


if __name__ == '__main__':
    main()
