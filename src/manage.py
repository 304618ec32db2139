"""Attraction Reviews management CLI.

Creates and drops the database schema, and seeds or purges synthetic reviews.
Against the default in-memory store, seeding only lasts for the life of the
command; use PROTEAN_ENV=production to seed PostgreSQL.

Usage:
    python src/manage.py setup-db                      # Create review tables
    python src/manage.py drop-db                       # Drop review tables
    python src/manage.py seed                          # Seed every attraction 001..100
    python src/manage.py seed --attraction-id 200 -n 5 # Seed one attraction
    python src/manage.py purge --attraction-id 200     # Delete one attraction's reviews
"""

import argparse
import sys


def _domain():
    from reviews.domain import reviews

    reviews.init()
    return reviews


def setup_database():
    from reviews.utils.db import setup_db

    domain = _domain()
    print("Creating reviews database schema...")
    providers = setup_db(domain)
    if providers:
        print(f"  Schema ready on: {', '.join(providers)}")
    else:
        print("  No SQL provider configured; nothing to create.")


def drop_database():
    from reviews.utils.db import drop_db

    domain = _domain()
    print("Dropping reviews database schema...")
    providers = drop_db(domain)
    if providers:
        print(f"  Schema dropped on: {', '.join(providers)}")
    else:
        print("  No SQL provider configured; nothing to drop.")


def seed(attraction_id=None, count=5, min_per=None, max_per=None):
    from reviews.seeding.data_generators import generate_test_data, seed_data
    from reviews.seeding.loader import load_reviews

    domain = _domain()
    custom = domain.config.get("custom", {})

    if attraction_id:
        payloads = generate_test_data(attraction_id, count=count)
    else:
        payloads = seed_data(
            min_per=min_per or custom.get("REVIEWS_PER_ATTRACTION_MIN", 1),
            max_per=max_per or custom.get("REVIEWS_PER_ATTRACTION_MAX", 8),
        )

    with domain.domain_context():
        review_ids = load_reviews(payloads)
    print(f"Seeded {len(review_ids)} reviews.")


def purge(attraction_id):
    from reviews.seeding.loader import purge_attraction

    domain = _domain()
    with domain.domain_context():
        removed = purge_attraction(attraction_id)
    print(f"Deleted {removed} reviews for attraction {attraction_id}.")


def main():
    parser = argparse.ArgumentParser(description="Attraction Reviews management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create the review tables")
    subparsers.add_parser("drop-db", help="Drop the review tables")

    seed_parser = subparsers.add_parser("seed", help="Seed synthetic reviews")
    seed_parser.add_argument("--attraction-id", help="Seed a single attraction instead of 001..100")
    seed_parser.add_argument("-n", "--count", type=int, default=5, help="Reviews for --attraction-id (default: 5)")
    seed_parser.add_argument("--min-per", type=int, help="Minimum reviews per attraction for a full seed")
    seed_parser.add_argument("--max-per", type=int, help="Maximum reviews per attraction for a full seed")

    purge_parser = subparsers.add_parser("purge", help="Delete all reviews of one attraction")
    purge_parser.add_argument("--attraction-id", required=True, help="Attraction whose reviews are deleted")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed(args.attraction_id, args.count, args.min_per, args.max_per)
    elif args.command == "purge":
        purge(args.attraction_id)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
