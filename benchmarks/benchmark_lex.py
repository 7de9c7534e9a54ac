"""Benchmark the sqlexer lexer.

Run with:
    pytest benchmarks/benchmark_lex.py -v --benchmark-only

Or for quick numbers:
    python benchmarks/benchmark_lex.py
"""

import time

import pytest

from sqlexer import lex


@pytest.mark.benchmark(group="lex-large-script")
def test_benchmark_large_script(benchmark, large_script):
    tokens = benchmark(lex, large_script)
    assert tokens


@pytest.mark.benchmark(group="lex-queries")
def test_benchmark_queries(benchmark, real_world_queries):
    def lex_all():
        for query in real_world_queries:
            lex(query)

    benchmark(lex_all)


def main() -> None:
    script = "SELECT id, name FROM users; INSERT INTO t VALUES (1, 'x');\n" * 2000
    lex(script)  # Warmup

    iterations = 10
    start = time.perf_counter()
    for _ in range(iterations):
        tokens = lex(script)
    elapsed = time.perf_counter() - start

    print(f"{len(script):,} chars -> {len(tokens):,} tokens")
    print(f"{elapsed / iterations * 1000:.2f} ms per lex")


if __name__ == "__main__":
    main()
