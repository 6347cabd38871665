"""Seed the database with initial data."""

from datetime import datetime, timedelta
from typing import Final
from uuid import UUID

from loguru import logger
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.bid.models import Bid
from bidmarket.category.models import Category
from bidmarket.config.config import settings
from bidmarket.product.auction_status import AuctionStatus
from bidmarket.product.models import Product
from bidmarket.utils.clock import utc_now

__all__ = ["seed_db"]


CATEGORY_ELECTRONICS_ID = UUID("1a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a")
CATEGORY_PHONES_ID = UUID("2a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a")
CATEGORY_CAMERAS_ID = UUID("3a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a")
CATEGORY_FASHION_ID = UUID("4a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a")
CATEGORY_SHOES_ID = UUID("5a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a")
CATEGORY_PAGING_ID = UUID("6a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a")
CATEGORY_DELETE_ID = UUID("7a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a")

PRODUCT_READ_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a01")
PRODUCT_CAMERA_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a02")
PRODUCT_TRIPOD_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a03")
PRODUCT_PUT_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a04")
PRODUCT_PUT_BIDS_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a05")
PRODUCT_DELETE_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a06")
PRODUCT_BID_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a07")
PRODUCT_BID_LOW_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a08")
PRODUCT_BUY_NOW_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a09")
PRODUCT_ENDED_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a10")
PRODUCT_EXPIRED_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a11")
PRODUCT_SCHEDULED_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a12")
PRODUCT_NEAR_END_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a13")
PRODUCT_NO_EXTEND_ID = UUID("8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a14")

PAGING_PRODUCT_COUNT: Final = 60
PAGING_BASE_PRICE: Final = 20_000
PAGING_PRICE_STEP: Final = 1_000


async def seed_db(session: AsyncSession) -> None:
    """Seed the database with initial test data.

    Populates the database with a small category tree, auctions in every
    status with some bids, and a ``Paging`` category holding enough auctions
    to page through.

    Args:
        session: The SQLModel async database session.
    """
    if not settings.clear_db_on_restart:
        result = await session.exec(select(Category))
        if result.first() is not None:
            return

    now = utc_now()

    session.add_all(_categories(now))
    await session.flush()

    session.add_all([
        _product(
            PRODUCT_READ_ID,
            "Leica M6 Film Camera",
            CATEGORY_CAMERAS_ID,
            now,
            description="<p>Classic 35mm rangefinder, fully serviced.</p>",
            seller_name="Tran Minh",
            image_urls=[
                "https://img.bidmarket.test/leica-front.jpg",
                "https://img.bidmarket.test/leica-back.jpg",
            ],
            start_price=5_000_000,
            current_price=5_200_000,
            price_step=100_000,
            buy_now_price=9_000_000,
            bid_count=2,
            highest_bidder_name="Le Thi Hoa",
            created_minutes_ago=120,
        ),
        _product(
            PRODUCT_CAMERA_ID,
            "Canon AE-1 Camera",
            CATEGORY_CAMERAS_ID,
            now,
            description="<p>SLR body with 50mm lens.</p>",
            start_price=2_500_000,
            price_step=50_000,
            created_minutes_ago=110,
        ),
        _product(
            PRODUCT_TRIPOD_ID,
            "Manfrotto Tripod",
            CATEGORY_CAMERAS_ID,
            now,
            description="<p>Sturdy aluminium tripod for any camera.</p>",
            start_price=800_000,
            price_step=20_000,
            created_minutes_ago=100,
        ),
        _product(
            PRODUCT_PUT_ID,
            "iPhone 12 Pro Max",
            CATEGORY_PHONES_ID,
            now,
            start_price=10_000_000,
            price_step=200_000,
        ),
        _product(
            PRODUCT_PUT_BIDS_ID,
            "Samsung Galaxy S21",
            CATEGORY_PHONES_ID,
            now,
            start_price=6_000_000,
            current_price=6_000_000,
            price_step=100_000,
            bid_count=1,
            highest_bidder_name="Pham Quoc Bao",
        ),
        _product(
            PRODUCT_DELETE_ID,
            "Nike Air Jordan 1",
            CATEGORY_SHOES_ID,
            now,
            start_price=3_000_000,
            current_price=3_000_000,
            price_step=100_000,
            bid_count=1,
            highest_bidder_name="Vo Thanh Tam",
        ),
        _product(
            PRODUCT_BID_ID,
            "Sony WH-1000XM4 Headphones",
            CATEGORY_ELECTRONICS_ID,
            now,
            start_price=2_000_000,
            price_step=100_000,
        ),
        _product(
            PRODUCT_BID_LOW_ID,
            "Nintendo Switch OLED",
            CATEGORY_ELECTRONICS_ID,
            now,
            start_price=2_800_000,
            current_price=3_000_000,
            price_step=100_000,
            bid_count=1,
            highest_bidder_name="Dang Huu Loc",
        ),
        _product(
            PRODUCT_BUY_NOW_ID,
            "Apple Watch Series 7",
            CATEGORY_ELECTRONICS_ID,
            now,
            start_price=3_000_000,
            price_step=100_000,
            buy_now_price=4_000_000,
        ),
        _product(
            PRODUCT_ENDED_ID,
            "Adidas Ultraboost",
            CATEGORY_SHOES_ID,
            now,
            start_price=1_500_000,
            price_step=50_000,
            status=AuctionStatus.ENDED,
            start_offset=timedelta(days=-10),
            end_offset=timedelta(days=-1),
        ),
        _product(
            PRODUCT_EXPIRED_ID,
            "Converse Chuck 70",
            CATEGORY_SHOES_ID,
            now,
            start_price=900_000,
            price_step=20_000,
            start_offset=timedelta(days=-3),
            end_offset=timedelta(hours=-1),
        ),
        _product(
            PRODUCT_SCHEDULED_ID,
            "Pixel 8 Pro",
            CATEGORY_PHONES_ID,
            now,
            start_price=12_000_000,
            price_step=200_000,
            status=AuctionStatus.SCHEDULED,
            start_offset=timedelta(days=2),
            end_offset=timedelta(days=9),
        ),
        _product(
            PRODUCT_NEAR_END_ID,
            "GoPro Hero 11",
            CATEGORY_ELECTRONICS_ID,
            now,
            start_price=4_000_000,
            price_step=100_000,
            auto_extend_enabled=True,
            end_offset=timedelta(minutes=3),
        ),
        _product(
            PRODUCT_NO_EXTEND_ID,
            "DJI Mini 3 Drone",
            CATEGORY_ELECTRONICS_ID,
            now,
            start_price=7_000_000,
            price_step=100_000,
            end_offset=timedelta(minutes=3),
        ),
    ])
    session.add_all(_paging_products(now))
    await session.flush()

    session.add_all([
        Bid(
            product_id=PRODUCT_READ_ID,
            bidder_name="Nguyen Van Anh",
            amount=5_100_000,
            created_at=now - timedelta(minutes=90),
        ),
        Bid(
            product_id=PRODUCT_READ_ID,
            bidder_name="Le Thi Hoa",
            amount=5_200_000,
            created_at=now - timedelta(minutes=60),
        ),
        Bid(
            product_id=PRODUCT_PUT_BIDS_ID,
            bidder_name="Pham Quoc Bao",
            amount=6_000_000,
            created_at=now - timedelta(minutes=30),
        ),
        Bid(
            product_id=PRODUCT_DELETE_ID,
            bidder_name="Vo Thanh Tam",
            amount=3_000_000,
            created_at=now - timedelta(minutes=30),
        ),
        Bid(
            product_id=PRODUCT_BID_LOW_ID,
            bidder_name="Dang Huu Loc",
            amount=3_000_000,
            created_at=now - timedelta(minutes=20),
        ),
    ])
    await session.commit()
    logger.info("Database seeded with initial data")


def _categories(now: datetime) -> list[Category]:
    return [
        Category(
            id=CATEGORY_ELECTRONICS_ID,
            name="Electronics",
            slug="electronics",
            level=1,
            created_at=now,
            updated_at=now,
        ),
        Category(
            id=CATEGORY_PHONES_ID,
            name="Phones",
            slug="phones",
            parent_id=CATEGORY_ELECTRONICS_ID,
            level=2,
            created_at=now,
            updated_at=now,
        ),
        Category(
            id=CATEGORY_CAMERAS_ID,
            name="Cameras",
            slug="cameras",
            parent_id=CATEGORY_ELECTRONICS_ID,
            level=2,
            created_at=now,
            updated_at=now,
        ),
        Category(
            id=CATEGORY_FASHION_ID,
            name="Fashion",
            slug="fashion",
            level=1,
            created_at=now,
            updated_at=now,
        ),
        Category(
            id=CATEGORY_SHOES_ID,
            name="Shoes",
            slug="shoes",
            parent_id=CATEGORY_FASHION_ID,
            level=2,
            created_at=now,
            updated_at=now,
        ),
        Category(
            id=CATEGORY_PAGING_ID,
            name="Paging",
            slug="paging",
            level=1,
            created_at=now,
            updated_at=now,
        ),
        Category(
            id=CATEGORY_DELETE_ID,
            name="Stamps",
            slug="stamps",
            level=1,
            created_at=now,
            updated_at=now,
        ),
    ]


def _paging_products(now: datetime) -> list[Product]:
    """Auctions ``Paging Lot 01`` to ``60``, cheapest and oldest first."""
    return [
        _product(
            None,
            f"Paging Lot {number:02d}",
            CATEGORY_PAGING_ID,
            now,
            start_price=PAGING_BASE_PRICE + number * PAGING_PRICE_STEP,
            price_step=PAGING_PRICE_STEP,
            created_minutes_ago=24 * 60 - number,
            end_offset=timedelta(days=10, hours=number),
        )
        for number in range(1, PAGING_PRODUCT_COUNT + 1)
    ]


def _product(  # noqa: PLR0913
    product_id: UUID | None,
    title: str,
    category_id: UUID,
    now: datetime,
    *,
    start_price: int,
    price_step: int,
    current_price: int | None = None,
    description: str | None = None,
    seller_name: str = "Bidmarket Seller",
    image_urls: list[str] | None = None,
    buy_now_price: int | None = None,
    bid_count: int = 0,
    highest_bidder_name: str | None = None,
    status: AuctionStatus = AuctionStatus.ACTIVE,
    auto_extend_enabled: bool = False,
    created_minutes_ago: int = 60,
    start_offset: timedelta = timedelta(days=-1),
    end_offset: timedelta = timedelta(days=7),
) -> Product:
    created_at = now - timedelta(minutes=created_minutes_ago)
    product = Product(
        title=title,
        description=description,
        category_id=category_id,
        seller_name=seller_name,
        image_urls=image_urls or [],
        start_price=start_price,
        current_price=current_price if current_price is not None else start_price,
        price_step=price_step,
        buy_now_price=buy_now_price,
        bid_count=bid_count,
        highest_bidder_name=highest_bidder_name,
        start_at=now + start_offset,
        end_at=now + end_offset,
        status=status,
        auto_extend_enabled=auto_extend_enabled,
        created_at=created_at,
        updated_at=created_at,
    )
    if product_id is not None:
        product.id = product_id
    return product
