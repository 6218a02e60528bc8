import pytest
from rental_service.query_builder import QueryBuilder


@pytest.mark.parametrize(
    "build, expected",
    [
        (
            lambda qb: qb.select().columns("*").from_("users"),
            "SELECT * FROM users",
        ),
        (
            lambda qb: qb.select().columns("id", "name", "age").from_("users"),
            "SELECT id, name, age FROM users",
        ),
        (
            lambda qb: qb.select().columns("id").columns("name", "age").from_("users"),
            "SELECT id, name, age FROM users",
        ),
        (
            lambda qb: qb.select().columns("*").from_("users")
            .join("orders ON users.id = orders.user_id")
            .join("payments ON users.id = payments.user_id"),
            "SELECT * FROM users JOIN orders ON users.id = orders.user_id JOIN payments ON users.id = payments.user_id",
        ),
        (
            lambda qb: qb.select().columns("*").from_("users").where("age > 18").where("country = 'USA'"),
            "SELECT * FROM users WHERE age > 18 AND country = 'USA'",
        ),
        (
            lambda qb: qb.select().columns("*").from_("users").limit(10),
            "SELECT * FROM users LIMIT :limit",
        ),
        (
            lambda qb: qb.select().columns("*").from_("users").offset(20),
            "SELECT * FROM users OFFSET :offset",
        ),
        (
            lambda qb: qb.select().columns("*").from_("users").order_by("name ASC"),
            "SELECT * FROM users ORDER BY name ASC",
        ),
        (
            lambda qb: qb.select()
            .columns("users.name", "orders.order_id", "payments.amount")
            .from_("users")
            .join("orders ON users.id = orders.user_id")
            .join("payments ON users.id = payments.user_id")
            .where("users.age > 18")
            .order_by("users.name ASC")
            .limit(10)
            .offset(20),
            "SELECT users.name, orders.order_id, payments.amount FROM users"
            " JOIN orders ON users.id = orders.user_id JOIN payments ON users.id = payments.user_id"
            " WHERE users.age > 18 ORDER BY users.name ASC LIMIT :limit OFFSET :offset",
        ),
    ],
    ids=["basic", "columns", "columns-appended", "joins", "where", "limit", "offset", "order-by", "complex"],
)
def test_render(build, expected):
    assert build(QueryBuilder()).render() == expected


def test_limit_and_offset_are_bound_parameters():
    qb = QueryBuilder().select().columns("*").from_("users").limit(10).offset(20)
    assert qb.params == {"limit": 10, "offset": 20}


def test_last_call_wins_for_single_clauses():
    qb = (
        QueryBuilder().select().columns("*")
        .from_("users").from_("accounts")
        .order_by("id").order_by("name")
        .limit(1).limit(5)
    )
    assert qb.render() == "SELECT * FROM accounts ORDER BY name LIMIT :limit"
    assert qb.params == {"limit": 5}


def test_duplicate_columns_are_kept():
    assert QueryBuilder().select().columns("id", "id").from_("t").render() == "SELECT id, id FROM t"


def test_where_binds_parameters():
    qb = QueryBuilder().select().columns("*").from_("users").where("age > :age", age=18).where("country = :country", country="USA")
    assert qb.render() == "SELECT * FROM users WHERE age > :age AND country = :country"
    assert qb.params == {"age": 18, "country": "USA"}


def test_clause_calls_do_not_mutate_the_receiver():
    base = QueryBuilder().select().columns("*").from_("users")
    filtered = base.where("age > :age", age=18).limit(3)

    assert base.render() == "SELECT * FROM users"
    assert base.params == {}
    assert filtered.render() == "SELECT * FROM users WHERE age > :age LIMIT :limit"


def test_render_is_repeatable():
    qb = QueryBuilder().select().columns("*").from_("users").where("id = :id", id=1)
    assert qb.render() == qb.render() == str(qb)


def test_from_subquery_nests_and_merges_params():
    inner = QueryBuilder().select().columns("id", "price").from_("rentals").where("price >= :price_min", price_min=10)
    outer = QueryBuilder().select().columns("sq.id").from_subquery(inner, "sq").where("sq.id <> :skip", skip=3).limit(2)

    assert outer.render() == (
        "SELECT sq.id FROM (SELECT id, price FROM rentals WHERE price >= :price_min) sq"
        " WHERE sq.id <> :skip LIMIT :limit"
    )
    assert outer.params == {"price_min": 10, "skip": 3, "limit": 2}


def test_statement_carries_bound_values():
    stmt = QueryBuilder().select().columns("*").from_("users").where("id = :id", id=7).statement()
    compiled = stmt.compile()
    assert str(compiled) == "SELECT * FROM users WHERE id = :id"
    assert compiled.params == {"id": 7}
