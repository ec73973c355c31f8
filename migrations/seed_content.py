"""
Seed Script: Default portfolio content
Creates the content tables and fills every empty section with the default
demo content. Sections that already have rows are left untouched.
Optionally creates an admin account.

Usage:
    python migrations/seed_content.py
    python migrations/seed_content.py --admin-email me@example.com --admin-password secret
"""

import os
import sys
import argparse

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from extensions import db
from models import AdminUser
from utils.security import create_admin_user
from utils.seed import seed_empty_sections


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Seed default portfolio content')
    parser.add_argument('--config', default=os.environ.get('FLASK_ENV', 'development'))
    parser.add_argument('--admin-email')
    parser.add_argument('--admin-password')
    return parser.parse_args(argv)


def main(argv=None):
    """Main seeding function"""
    args = parse_args(argv)

    print("=" * 60)
    print("Portfolio Content Seed")
    print("=" * 60)

    app = create_app(args.config)
    with app.app_context():
        print("\nCreating database tables...")
        db.create_all()
        print("[OK] Database tables created")

        if args.admin_email and args.admin_password:
            if AdminUser.query.filter_by(email=args.admin_email.strip().lower()).first():
                print(f"  [SKIP] Admin {args.admin_email} already exists")
            else:
                create_admin_user(args.admin_email, args.admin_password)
                print(f"  [OK] Created admin {args.admin_email}")

        print("\nSeeding empty sections...")
        inserted = seed_empty_sections()
        if not inserted:
            print("  [SKIP] Every section already has content")
        for name, count in inserted.items():
            print(f"  [OK] {name}: {count} row(s)")

    print("\n" + "=" * 60)
    print("Seed completed successfully!")
    print("=" * 60)


if __name__ == '__main__':
    main()
