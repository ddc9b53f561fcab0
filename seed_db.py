"""
Database Seed Script
Upserts sample categories and published designs by slug.
"""

import asyncio
import re
import sys
from decimal import Decimal
sys.path.append('src')

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from infrastructure.config import get_logger, setup_logger
from infrastructure.database import CategoryModel, DesignModel, close_db, init_db
from infrastructure.database.session import get_session_maker

logger = get_logger(__name__)

UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=900&q=80"

SAMPLE_DESIGNS = [
    {
        "slug": "sunset-horizon",
        "title": "Sunset Horizon",
        "description": "A vibrant gradient design inspired by beach sunsets and soft ocean breezes.",
        "price": Decimal("27.99"),
        "image": "1498050108023-c5249f4df085",
        "category": "Nature",
        "tags": ["nature", "sunset", "gradient"],
        "rating": 4.8,
        "review_count": 142,
    },
    {
        "slug": "retro-wave",
        "title": "Retro Wave",
        "description": "Bold neon lines and a classic synthwave palette for lovers of the 80s aesthetic.",
        "price": Decimal("24.99"),
        "image": "1521572267360-ee0c2909d518",
        "category": "Pop Culture",
        "tags": ["retro", "synthwave", "neon"],
        "rating": 4.6,
        "review_count": 98,
    },
    {
        "slug": "minimal-monstera",
        "title": "Minimal Monstera",
        "description": "A clean, minimalist outline of monstera leaves on a neutral background.",
        "price": Decimal("22.50"),
        "image": "1524504388940-b1c1722653e1",
        "category": "Minimalist",
        "tags": ["minimalist", "botanical", "lineart"],
        "rating": 4.9,
        "review_count": 205,
    },
    {
        "slug": "galactic-dreams",
        "title": "Galactic Dreams",
        "description": "An illustrated journey through space featuring planets, comets, and starfields.",
        "price": Decimal("29.99"),
        "image": "1500530855697-b586d89ba3ee",
        "category": "Illustration",
        "tags": ["space", "illustration", "galaxy"],
        "rating": 4.7,
        "review_count": 167,
    },
    {
        "slug": "bold-typography",
        "title": "Bold Statement",
        "description": "High-impact typography design to make your message stand out loud and clear.",
        "price": Decimal("21.50"),
        "image": "1522202176988-66273c2fd55f",
        "category": "Typography",
        "tags": ["typography", "bold", "statement"],
        "rating": 4.5,
        "review_count": 86,
    },
    {
        "slug": "urban-photography",
        "title": "Urban Reflections",
        "description": "Street photography capturing neon reflections in the heart of the city.",
        "price": Decimal("26.00"),
        "image": "1498050108023-c5249f4df085",
        "category": "Photography",
        "tags": ["photography", "urban", "nightlife"],
        "rating": 4.4,
        "review_count": 64,
    },
    {
        "slug": "abstract-flow",
        "title": "Abstract Flow",
        "description": "Dynamic curved shapes and pastel gradients that create a calming visual flow.",
        "price": Decimal("23.75"),
        "image": "1526481280695-3c46917e2e8f",
        "category": "Abstract",
        "tags": ["abstract", "pastel", "fluid"],
        "rating": 4.3,
        "review_count": 72,
    },
    {
        "slug": "wanderlust-map",
        "title": "Wanderlust Map",
        "description": "Hand-drawn world map with travel icons for the adventure seekers.",
        "price": Decimal("28.50"),
        "image": "1500534314209-a25ddb2bd429",
        "category": "Illustration",
        "tags": ["travel", "illustration", "map"],
        "rating": 4.9,
        "review_count": 231,
    },
]


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


async def seed_database():
    """Upsert categories and designs; safe to run repeatedly."""
    await init_db()
    try:
        async with get_session_maker()() as session:
            categories: dict[str, CategoryModel] = {}
            for name in sorted({item["category"] for item in SAMPLE_DESIGNS}):
                slug = slugify(name)
                category = await session.scalar(select(CategoryModel).where(CategoryModel.slug == slug))
                if category is None:
                    category = CategoryModel(name=name, slug=slug)
                    session.add(category)
                categories[name] = category
            
            for item in SAMPLE_DESIGNS:
                design = await session.scalar(
                    select(DesignModel)
                    .where(DesignModel.slug == item["slug"])
                    .options(selectinload(DesignModel.categories))
                )
                if design is None:
                    design = DesignModel(slug=item["slug"], categories=[])
                    session.add(design)
                
                design.title = item["title"]
                design.description = item["description"]
                design.price = item["price"]
                design.image_url = UNSPLASH.format(item["image"])
                design.tags = [tag.lower() for tag in item["tags"]]
                design.average_rating = item["rating"]
                design.review_count = item["review_count"]
                design.is_published = True
                design.categories = [categories[item["category"]]]
            
            await session.commit()
            logger.info(f"✅ Seeded {len(categories)} categories and {len(SAMPLE_DESIGNS)} designs")
    except Exception as e:
        logger.error(f"❌ Failed to seed database: {e}", exc_info=True)
        raise
    finally:
        await close_db()

if __name__ == "__main__":
    setup_logger(log_format="text")
    asyncio.run(seed_database())
