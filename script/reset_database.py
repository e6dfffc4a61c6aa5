#!/usr/bin/env python3
"""
Database Reset Script
Reset database structure

Features:
1. Drop & Recreate Database - completely wipe the database
2. Run Alembic Migrations - create the latest schema

Notes:
- This script only resets database structure, does not seed data
- To seed demo data, run `python script/seed_data.py`
- A SQLite DATABASE_URL is reset by deleting the database file
"""

import asyncio
import os
import subprocess
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine

from src.platform.config.core_setting import settings
from src.platform.constant.path import BASE_DIR

DB_WAIT_SECONDS = 1


def _parse_db_connection(database_url: str) -> tuple[str, str]:
    """Parse database URL and return (server_url, db_name)"""
    db_name = database_url.split('/')[-1]
    server_url = database_url.rsplit('/', 1)[0]
    return server_url, db_name


async def _terminate_connections(conn: AsyncConnection, db_name: str) -> None:
    """Terminate all connections to the specified database"""
    await conn.execute(
        text("""
        SELECT pg_terminate_backend(pid)
        FROM pg_stat_activity
        WHERE datname = :db_name AND pid <> pg_backend_pid();
        """),
        {'db_name': db_name},
    )


async def _drop_and_create_db(server_url: str, db_name: str) -> None:
    """Drop and recreate database"""
    admin_engine = create_async_engine(f'{server_url}/postgres', isolation_level='AUTOCOMMIT')

    try:
        async with admin_engine.connect() as conn:
            await _terminate_connections(conn, db_name)

            await conn.execute(text(f'DROP DATABASE IF EXISTS "{db_name}";'))
            print(f"   ✅ Database '{db_name}' dropped")

            await asyncio.sleep(DB_WAIT_SECONDS)

            await conn.execute(text(f'CREATE DATABASE "{db_name}";'))
            print(f"   ✅ Database '{db_name}' created")
    finally:
        await admin_engine.dispose()


def _remove_sqlite_file(database_url: str) -> None:
    database = make_url(database_url).database
    if not database or database == ':memory:':
        return

    db_file = Path(database)
    if db_file.exists():
        db_file.unlink()
        print(f"   ✅ SQLite file '{db_file}' removed")


def _run_alembic_migrations() -> None:
    """Run Alembic migrations"""
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
        env=os.environ.copy(),
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')
    if result.stdout:
        print(f'   📋 Output: {result.stdout.strip()}')


async def drop_and_recreate_database():
    """Completely drop and recreate database"""
    database_url = settings.DATABASE_URL_ASYNC

    print('🗑️ Dropping database...')
    if database_url.startswith('sqlite'):
        _remove_sqlite_file(database_url)
    else:
        server_url, db_name = _parse_db_connection(database_url)
        print(f'Database name: {db_name}')
        await _drop_and_create_db(server_url, db_name)

    print('🏗️ Running database migrations...')
    print('   ⏸️ Ensuring no FastAPI app is running during migration...')
    _run_alembic_migrations()
    print('Database recreation completed!')


async def main():
    print('🔄 Starting database reset...')
    print('=' * 50)

    try:
        await drop_and_recreate_database()

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed demo data, run: python script/seed_data.py')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)


if __name__ == '__main__':
    asyncio.run(main())
