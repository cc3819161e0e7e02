"""Benchmark htmlreflow on generated documents.

Checks that formatting time grows linearly with input size, including on
pathological input (unterminated tags and comments) that forces the lexer
through its fallback path.

Run:
    python benchmarks/benchmark_format.py
"""

import time
from collections.abc import Callable


def generate_document(sections: int) -> str:
    """Generate a page with nested markup, attributes and verbatim regions."""
    parts = ["<!doctype html>\n<html>\n<body>"]
    for i in range(sections):
        parts.append(f"""
<section id="s{i}"   class="card  grid"
data-index={i}>
<h2>Section   {i}</h2>
<p>This is paragraph {i} with <b>bold</b>, <i>italic</i>, and a link to
<a href="https://example.com/{i}/page">an example page that is fairly long</a>.</p>
<pre>  keep   this   {i}  </pre>
<script>if (a < {i}) {{ render("</div>"); }}</script>
<img src="img/{i}.png" alt=""><br>
</section>
""")
    parts.append("</body>\n</html>\n")
    return "".join(parts)


def generate_pathological(size: int) -> str:
    """Generate input that never closes a tag or comment."""
    return "<a b='c " * (size // 8) + "<!-- " * (size // 40)


def benchmark(func: Callable[[str], str], doc: str, iterations: int = 5) -> float:
    """Return the mean time of func(doc) in seconds."""
    func(doc)  # Warmup

    start = time.perf_counter()
    for _ in range(iterations):
        func(doc)
    return (time.perf_counter() - start) / iterations


def main() -> None:
    from htmlreflow import format

    print("=" * 60)
    print("htmlreflow format() scaling")
    print("=" * 60)
    print(f"{'input':<16} {'size':>10} {'time (ms)':>12} {'µs/KB':>10}")
    print("-" * 60)

    for sections in (10, 100, 1000):
        doc = generate_document(sections)
        elapsed = benchmark(format, doc)
        per_kb = elapsed * 1e6 / (len(doc) / 1024)
        print(f"{'document':<16} {len(doc):>10,} {elapsed * 1000:>12.2f} {per_kb:>10.1f}")

    for size in (10_000, 100_000):
        doc = generate_pathological(size)
        elapsed = benchmark(format, doc, iterations=1)
        per_kb = elapsed * 1e6 / (len(doc) / 1024)
        print(f"{'pathological':<16} {len(doc):>10,} {elapsed * 1000:>12.2f} {per_kb:>10.1f}")


if __name__ == "__main__":
    main()
