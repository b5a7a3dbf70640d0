#!/usr/bin/env python3
"""
Script to create an admin user for the Janatar Bhasha dashboard.
Same as `flask create-admin`, but asks for confirmation first.
"""

from getpass import getpass

from janatar_bhasha import create_app, db
from janatar_bhasha.commands import create_admin_user
from janatar_bhasha.exceptions import InvalidInput


def main():
    print("=" * 60)
    print("Janatar Bhasha - Admin User Creation")
    print("=" * 60)
    print()

    print("Enter admin user details:")
    email = input("Email: ").strip().lower()
    name = input("Full Name: ").strip()
    password = getpass("Password: ")

    print()
    print("Creating admin user with:")
    print(f"  Email: {email}")
    print(f"  Name: {name}")
    print()

    confirm = input("Proceed? (yes/no): ").lower()
    if confirm != 'yes':
        print("Admin creation cancelled.")
        return

    app = create_app()
    with app.app_context():
        db.create_all()
        try:
            user, created = create_admin_user(email, password, name)
        except InvalidInput as e:
            print(f"Error: {e.message}")
            return

        if created:
            print(f"Admin user created successfully: {user.email}")
            print("You can now log in at /login")
        else:
            print(f"User {user.email} already exists, updated to admin role.")


if __name__ == '__main__':
    main()
