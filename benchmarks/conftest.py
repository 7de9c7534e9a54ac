"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_script() -> str:
    """Generate a large multi-statement script (~100KB)."""
    statements = []
    for i in range(1000):
        statements.append(f"""
-- statement group {i}
CREATE TABLE t{i} (id INT, name TEXT);
INSERT INTO t{i} VALUES ({i}, 'row {i}', -{i * 7});
/* fetch
   everything */
SELECT id, name AS n FROM t{i};
""")
    return "\n".join(statements)


@pytest.fixture
def real_world_queries() -> list[str]:
    """Collection of short queries a REPL would see."""
    return [
        "SELECT * FROM users;",
        "select id, email from accounts;",
        "CREATE TABLE orders (id INT, total INT, note TEXT);",
        "INSERT INTO orders VALUES (1, 2500, 'first order');",
        "INSERT INTO notes VALUES (2, 'multi\nline ''quoted'' text');",
    ]
