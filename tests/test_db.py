from rental_service.db import build_engine, engine_options

POSTGRES_URL = "postgresql+psycopg2://u:p@h/db"


def test_postgres_engine_is_pooled_and_bounded():
    engine = build_engine(POSTGRES_URL, pool_size=3, max_overflow=4, statement_timeout_ms=1500)
    try:
        assert engine.pool.size() == 3
    finally:
        engine.dispose()

    options = engine_options(POSTGRES_URL, pool_size=3, max_overflow=4, statement_timeout_ms=1500)
    assert options["pool_size"] == 3
    assert options["max_overflow"] == 4
    assert options["connect_args"] == {"options": "-c statement_timeout=1500"}


def test_zero_timeout_sets_no_statement_timeout():
    options = engine_options(POSTGRES_URL, pool_size=3, max_overflow=4, statement_timeout_ms=0)
    assert "connect_args" not in options
    assert options["pool_size"] == 3


def test_sqlite_gets_no_pool_sizing_or_timeout():
    options = engine_options("sqlite://", pool_size=3, max_overflow=4, statement_timeout_ms=1500)
    assert options == {"pool_pre_ping": True}

    engine = build_engine("sqlite://", statement_timeout_ms=1500)
    engine.dispose()
