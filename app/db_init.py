"""
Schema initialisation and sample data.

    python -m app.db_init                          # create tables
    python -m app.db_init --seed                   # ... and insert sample content
    python -m app.db_init --create-admin EMAIL     # ... and an admin (password prompted)

Every step is idempotent: tables are created only when missing and sample
rows only when their slug is absent.
"""

import argparse
import asyncio
import getpass
import logging
from datetime import datetime, timedelta, timezone

from app.config import settings
from app.database import Database
from app.exceptions import DuplicateResourceError
from app.services.auth_service import create_admin
from app.services.content_kinds import BLOG, EVENTS, RESOURCES
from app.services.localized_repository import LocalizedRepository

logger = logging.getLogger(__name__)

SAMPLE_BLOG_POST = {
    "fields": {
        "slug": "test-article",
        "status": "published",
        "featured_image": "/assets/hero-sustainable-building.jpg",
        "read_time": 5,
    },
    "translations": [
        {
            "language": "fr",
            "title": "Article de Test",
            "excerpt": "Ceci est un article de test pour vérifier la configuration de la base de données.",
            "content": "<h1>Article de Test</h1><p>Contenu de test en français.</p>",
            "author": "Admin",
            "category": "Test",
            "tags": ["test", "postgresql"],
        },
        {
            "language": "en",
            "title": "Test Article",
            "excerpt": "This is a test article to verify the database configuration.",
            "content": "<h1>Test Article</h1><p>Test content in English.</p>",
            "author": "Admin",
            "category": "Test",
            "tags": ["test", "postgresql"],
        },
        {
            "language": "ar",
            "title": "مقال تجريبي",
            "excerpt": "هذا مقال تجريبي للتحقق من إعداد قاعدة البيانات.",
            "content": "<h1>مقال تجريبي</h1><p>محتوى تجريبي بالعربية.</p>",
            "author": "Admin",
            "category": "تجريبي",
            "tags": ["تجريبي", "postgresql"],
        },
    ],
}


def _sample_event() -> dict:
    start = datetime.now(timezone.utc).replace(hour=9, minute=0, second=0, microsecond=0) + timedelta(days=30)
    return {
        "fields": {
            "slug": "green-building-forum",
            "start_date": start,
            "end_date": start + timedelta(hours=8),
            "location": "Tunis",
            "status": "published",
        },
        "translations": [
            {"language": "fr", "title": "Forum du bâtiment durable", "category": "Forum", "tags": ["forum"]},
            {"language": "en", "title": "Green Building Forum", "category": "Forum", "tags": ["forum"]},
            {"language": "ar", "title": "منتدى البناء المستدام", "category": "منتدى", "tags": ["منتدى"]},
        ],
    }


SAMPLE_RESOURCE = {
    "fields": {
        "slug": "energy-efficiency-guide",
        "file_url": "/files/energy-efficiency-guide.pdf",
        "file_type": "application/pdf",
        "status": "published",
    },
    "translations": [
        {"language": "fr", "title": "Guide de l'efficacité énergétique", "type": "guide", "category": "Énergie"},
        {"language": "en", "title": "Energy Efficiency Guide", "type": "guide", "category": "Energy"},
        {"language": "ar", "title": "دليل كفاءة الطاقة", "type": "دليل", "category": "الطاقة"},
    ],
}


async def init_schema(database: Database) -> None:
    await database.create_all()
    logger.info("Database schema ready")


async def seed_sample_data(database: Database) -> list[str]:
    """Insert the sample blog post, event and resource. Returns the slugs inserted."""
    inserted = []
    for kind, sample in ((BLOG, SAMPLE_BLOG_POST), (EVENTS, _sample_event()), (RESOURCES, SAMPLE_RESOURCE)):
        repository = LocalizedRepository(kind, database, settings.supported_languages)
        try:
            await repository.create(sample["fields"], sample["translations"])
        except DuplicateResourceError:
            logger.info(f"Sample {kind.name.lower()} '{sample['fields']['slug']}' already present")
            continue
        inserted.append(sample["fields"]["slug"])
    return inserted


async def _run(seed: bool, admin_email: str | None) -> None:
    database = Database.from_settings(settings)
    database.init()
    try:
        await init_schema(database)
        if seed:
            inserted = await seed_sample_data(database)
            print(f"Sample data inserted: {', '.join(inserted) or 'nothing new'}")
        if admin_email:
            password = settings.admin_password or getpass.getpass(f"Password for {admin_email}: ")
            admin = await create_admin(admin_email, password, database)
            print(f"Admin {admin_email} {'created' if admin else 'already exists'}")
    finally:
        await database.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the database schema and optional sample data.")
    parser.add_argument("--seed", action="store_true", help="Insert sample blog post, event and resource")
    parser.add_argument("--create-admin", metavar="EMAIL", help="Create an admin account")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    asyncio.run(_run(args.seed, args.create_admin))


if __name__ == "__main__":
    main()
