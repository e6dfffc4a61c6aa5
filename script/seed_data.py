#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Create Ticket Types - remote, in-person without hotel, in-person with hotel
2. Create Hotels - hotels with rooms of different capacities
3. Create Demo User - enrollment + PAID hotel ticket + session, prints the bearer token

Notes:
- Safe to re-run: rows that already exist (matched by name / email) are reused
- Schema must exist first, run `python script/reset_database.py` or `alembic upgrade head`
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import dispose_engines, get_session_maker
from src.service.hotel.domain.enum.ticket_status import TicketStatus
from src.service.hotel.driven_adapter.model import (
    EnrollmentModel,
    HotelModel,
    RoomModel,
    SessionModel,
    TicketModel,
    TicketTypeModel,
    UserModel,
)
from src.service.hotel.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


DEMO_EMAIL = 'hotel-demo@t.com'
# Sign-in is handled by another service; seeded accounts only authenticate via session token
UNUSABLE_PASSWORD = '!'


@dataclass
class TicketTypeConfig:
    """Ticket type seed configuration"""
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool


@dataclass
class HotelConfig:
    """Hotel seed configuration"""
    name: str
    image: str
    rooms: list[tuple[str, int]] = field(default_factory=list)  # (name, capacity)


TICKET_TYPES = [
    TicketTypeConfig(name='Online', price=100, is_remote=True, includes_hotel=False),
    TicketTypeConfig(name='Presencial', price=250, is_remote=False, includes_hotel=False),
    TicketTypeConfig(name='Presencial + Hotel', price=600, is_remote=False, includes_hotel=True),
]

HOTELS = [
    HotelConfig(
        name='Driven Resort',
        image='https://images.unsplash.com/photo-1566073771259-6a8506099945',
        rooms=[('101', 1), ('102', 2), ('103', 3)],
    ),
    HotelConfig(
        name='Driven Palace',
        image='https://images.unsplash.com/photo-1551882547-ff40c63fe5fa',
        rooms=[('201', 2), ('202', 2), ('203', 3), ('204', 1)],
    ),
    HotelConfig(
        name='Driven World',
        image='https://images.unsplash.com/photo-1542314831-068cd1dbfeeb',
        rooms=[('301', 3), ('302', 3)],
    ),
]


async def create_ticket_types(session: AsyncSession) -> dict[str, int]:
    """Create ticket types

    Returns:
        dict: ticket type name -> id
    """
    print(f'🎟️  Creating {len(TICKET_TYPES)} ticket types...')
    ids: dict[str, int] = {}

    for config in TICKET_TYPES:
        result = await session.execute(
            select(TicketTypeModel).where(TicketTypeModel.name == config.name)
        )
        ticket_type = result.scalar_one_or_none()

        if ticket_type is None:
            ticket_type = TicketTypeModel(
                name=config.name,
                price=config.price,
                is_remote=config.is_remote,
                includes_hotel=config.includes_hotel,
            )
            session.add(ticket_type)
            await session.flush()
            print(f'   ✅ Created ticket type: ID={ticket_type.id}, Name={config.name}')
        else:
            print(f'   ⏭️  Ticket type exists: ID={ticket_type.id}, Name={config.name}')

        ids[config.name] = ticket_type.id

    return ids


async def create_hotels(session: AsyncSession) -> None:
    print(f'🏨 Creating {len(HOTELS)} hotels...')

    for config in HOTELS:
        result = await session.execute(select(HotelModel).where(HotelModel.name == config.name))
        hotel = result.scalar_one_or_none()

        if hotel is not None:
            print(f'   ⏭️  Hotel exists: ID={hotel.id}, Name={config.name}')
            continue

        hotel = HotelModel(name=config.name, image=config.image)
        session.add(hotel)
        await session.flush()

        for room_name, capacity in config.rooms:
            session.add(RoomModel(name=room_name, capacity=capacity, hotel_id=hotel.id))

        print(f'   ✅ Created hotel: ID={hotel.id}, Name={config.name}, Rooms={len(config.rooms)}')


async def create_demo_user(session: AsyncSession, *, ticket_type_id: int) -> str:
    """Create a user whose ticket grants hotel access

    Returns:
        str: bearer token of the user's session
    """
    print('👤 Creating demo user...')

    result = await session.execute(select(UserModel).where(UserModel.email == DEMO_EMAIL))
    user = result.scalar_one_or_none()

    if user is None:
        user = UserModel(email=DEMO_EMAIL, password=UNUSABLE_PASSWORD)
        session.add(user)
        await session.flush()

        enrollment = EnrollmentModel(
            name='Hotel Demo',
            cpf='12345678909',
            birthday=datetime(1990, 1, 1, tzinfo=timezone.utc),
            phone='21999999999',
            user_id=user.id,
        )
        session.add(enrollment)
        await session.flush()

        session.add(
            TicketModel(
                enrollment_id=enrollment.id,
                ticket_type_id=ticket_type_id,
                status=TicketStatus.PAID.value,
            )
        )
        print(f'   ✅ Created user: ID={user.id}, Email={DEMO_EMAIL} (enrollment + PAID ticket)')
    else:
        print(f'   ⏭️  User exists: ID={user.id}, Email={DEMO_EMAIL}')

    token = JwtAuth().create_jwt_token(user_id=user.id)
    session.add(SessionModel(user_id=user.id, token=token))
    print('   ✅ Created session')
    return token


async def verify_data() -> None:
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    async with get_session_maker()() as session:
        for model in [TicketTypeModel, HotelModel, RoomModel, UserModel, TicketModel]:
            result = await session.execute(select(func.count()).select_from(model))
            print(f'   {model.__tablename__} count: {result.scalar()}')

    print('   ✅ Data verification completed!')


async def _seed_data() -> str:
    """Seed everything in a single transaction"""
    async with get_session_maker()() as session:
        try:
            ticket_type_ids = await create_ticket_types(session)
            print()

            await create_hotels(session)
            print()

            token = await create_demo_user(
                session, ticket_type_id=ticket_type_ids['Presencial + Hotel']
            )
            print()

            await session.commit()
            print('✅ All data committed successfully!')
            return token

        except Exception as e:
            await session.rollback()
            print(f'❌ Rolling back: {e}')
            raise


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        token = await _seed_data()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print(f'📋 Demo account: {DEMO_EMAIL}')
        print(f'   Authorization: Bearer {token}')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)

    finally:
        await dispose_engines()


if __name__ == '__main__':
    asyncio.run(main())
