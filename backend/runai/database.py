from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from runai.config import SQLALCHEMY_DATABASE_URL


def use_immediate_transactions(engine):
    """
    SQLite has no row locks: make every transaction take the database write
    lock up front so concurrent plan activations queue on the busy timeout
    instead of failing a lock upgrade.
    """
    @event.listens_for(engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


connect_args = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    use_immediate_transactions(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
