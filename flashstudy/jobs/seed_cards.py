"""
Seed the database with sample flashcards.

Inserts a starter deck of programming, database, web, DevOps, git and
testing questions. Cards that come with a rating get it applied through
the normal rating update, so seeded cards start with study_count 1 and a
last_studied_at timestamp rather than a rating they were never given.

Usage:
    python -m flashstudy.jobs.seed_cards           # add sample cards
    python -m flashstudy.jobs.seed_cards --fresh   # delete all cards first
"""

import argparse
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from flashstudy.db.database import async_session_factory, init_db
from flashstudy.db.operations import delete_all_cards, insert_card, update_card_rating
from flashstudy.models.card import Difficulty

logger = logging.getLogger(__name__)

# (front, back, initial rating)
SAMPLE_CARDS: list[tuple[str, str, Difficulty]] = [
    # Programming concepts
    (
        "What is a closure in JavaScript?",
        "A closure is a function that has access to variables in its outer (enclosing) "
        "lexical scope, even after the outer function has returned.",
        Difficulty.MEDIUM,
    ),
    (
        "What does REST stand for?",
        "REST stands for Representational State Transfer. It is an architectural style "
        "for designing networked applications.",
        Difficulty.EASY,
    ),
    (
        "What is the difference between PUT and PATCH in HTTP?",
        "PUT replaces the entire resource, while PATCH applies partial modifications "
        "to a resource.",
        Difficulty.MEDIUM,
    ),
    (
        "What is dependency injection?",
        "Dependency injection is a design pattern where dependencies are provided to a "
        "class rather than the class creating them itself, promoting loose coupling.",
        Difficulty.HARD,
    ),
    # Database concepts
    (
        "What is a primary key?",
        "A primary key is a unique identifier for a record in a database table. "
        "It cannot be NULL and must be unique.",
        Difficulty.EASY,
    ),
    (
        "What is database normalization?",
        "Normalization is the process of organizing data in a database to reduce "
        "redundancy and improve data integrity.",
        Difficulty.MEDIUM,
    ),
    (
        "What is the difference between INNER JOIN and LEFT JOIN?",
        "INNER JOIN returns only matching rows from both tables, while LEFT JOIN returns "
        "all rows from the left table and matching rows from the right table "
        "(with NULLs for non-matches).",
        Difficulty.MEDIUM,
    ),
    # Web development
    (
        "What is CORS?",
        "CORS (Cross-Origin Resource Sharing) is a security feature that allows or "
        "restricts web applications running at one origin to access resources from a "
        "different origin.",
        Difficulty.MEDIUM,
    ),
    (
        "What is the difference between authentication and authorization?",
        "Authentication verifies who you are (identity), while authorization determines "
        "what you can access (permissions).",
        Difficulty.EASY,
    ),
    (
        "What is a JWT?",
        "JWT (JSON Web Token) is a compact, URL-safe means of representing claims to be "
        "transferred between two parties. It is commonly used for authentication.",
        Difficulty.MEDIUM,
    ),
    # Docker & DevOps
    (
        "What is Docker?",
        "Docker is a platform that uses containerization to package applications and "
        "their dependencies into portable containers that can run consistently across "
        "different environments.",
        Difficulty.EASY,
    ),
    (
        "What is the difference between a Docker image and a container?",
        "An image is a read-only template with instructions for creating a container. "
        "A container is a runnable instance of an image.",
        Difficulty.MEDIUM,
    ),
    # Git & version control
    (
        "What is the difference between git merge and git rebase?",
        "Git merge combines branches by creating a new merge commit, preserving history. "
        "Git rebase moves or combines commits to a new base, creating a linear history.",
        Difficulty.HARD,
    ),
    (
        "What is a git stash?",
        "Git stash temporarily saves uncommitted changes so you can work on something "
        "else, then reapply them later.",
        Difficulty.EASY,
    ),
    # Testing
    (
        "What is unit testing?",
        "Unit testing is the practice of testing individual units or components of code "
        "in isolation to ensure they work correctly.",
        Difficulty.EASY,
    ),
    (
        "What is Test-Driven Development (TDD)?",
        "TDD is a development approach where you write tests before writing the actual "
        "code, following the Red-Green-Refactor cycle.",
        Difficulty.MEDIUM,
    ),
]


async def seed_cards(
    session: AsyncSession,
    cards: list[tuple[str, str, Difficulty]] = SAMPLE_CARDS,
) -> int:
    """
    Insert sample cards into an open session.

    Returns:
        Number of cards inserted
    """
    for front, back, difficulty in cards:
        db_card = await insert_card(session, front, back)
        if difficulty is not Difficulty.NOT_STUDIED:
            await update_card_rating(session, db_card.id, difficulty)

    return len(cards)


async def run_seed(fresh: bool = False) -> int:
    """
    Seed the configured database.

    Args:
        fresh: Delete every existing card before inserting

    Returns:
        Number of cards inserted
    """
    await init_db()

    async with async_session_factory() as session:
        if fresh:
            removed = await delete_all_cards(session)
            logger.info("Removed %d existing cards", removed)

        count = await seed_cards(session)
        await session.commit()

    logger.info("Seeded %d flashcards", count)
    return count


def main() -> None:
    """CLI entry point for seeding sample cards."""
    parser = argparse.ArgumentParser(description="Seed the flashcards table with sample data.")
    parser.add_argument(
        "--fresh",
        action="store_true",
        help="delete all existing cards before seeding",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_seed(fresh=args.fresh))


if __name__ == "__main__":
    main()
