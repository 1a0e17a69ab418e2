"""Create an API key bound to an existing user and print the raw token once."""
import argparse

from app.db import open_session
from app.models import ApiKey, User
from app.utils.apikey import gen_key


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("username", help="Owner of the new key")
    parser.add_argument("--name", default="cli-key", help="Label stored with the key")
    args = parser.parse_args()

    db = open_session()
    try:
        user = db.query(User).filter(User.username == args.username).first()
        if user is None:
            raise SystemExit(f"Unknown user: {args.username}")

        raw_token, prefix, key_hash = gen_key()
        api_key = ApiKey(name=args.name, prefix=prefix, key_hash=key_hash, user_id=user.id)
        db.add(api_key)
        db.commit()
        db.refresh(api_key)

        print("==========================================")
        print("API key created; it will not be shown again:")
        print(f"    Authorization: Bearer {raw_token}")
        print(f"(DB id: {api_key.id}, user: {user.username})")
        print("==========================================")
    finally:
        db.close()


if __name__ == "__main__":
    main()
