"""
Replace the course catalog with the default courses (ids restart at 1). Run from project root:
  python -m videobelajar.scripts.seed_courses [--yes]
"""
import argparse
import sys

from videobelajar.core.database import SessionLocal
from videobelajar.core.logging_config import configure_logging
from videobelajar.services.courses import reset_default_courses


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reset the courses table to the default catalog.")
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Do not ask for confirmation before deleting existing courses",
    )
    args = parser.parse_args(argv)

    configure_logging()

    if not args.yes:
        answer = input("This deletes every course. Continue? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Aborted.")
            return 1

    db = SessionLocal()
    try:
        courses = reset_default_courses(db)
        for course in courses:
            print(f"{course.id}\t{course.category}\t{course.title}")
    finally:
        db.close()
    print(f"Seeded {len(courses)} courses.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
