"""
Lisp Reader Demo

Walks through what the reader does with well-formed and malformed input:
1. Parse a small program from examples/circle_square.lisp
2. Inspect the value tree
3. Show how each kind of malformed input is reported
4. Opt in to tab-as-whitespace

Run: pip install -e . && python examples/demo/demo.py
"""

from pathlib import Path

from lisp_reader import (
    List, Number, ReaderConfig, ReaderError, Str, Symbol, parse_all,
)

print("=== Lisp Reader Demo ===\n")

# 1. Parse a program
source_path = Path(__file__).resolve().parent.parent / "circle_square.lisp"
values = parse_all(source_path.read_text(encoding="utf-8"))
print(f"1. Parsed {source_path.name}")
print(f"   Top-level forms: {len(values)}\n")

# 2. Inspect the tree
define = values[1]
print("2. Second form")
print(f"   {define!r}")
print(f"   Head: {define[0]!r}, params: {define[1]!r}\n")
assert define == List([
    Symbol("define"),
    List([Symbol("square"), Symbol("x")]),
    List([Symbol("*"), Symbol("x"), Symbol("x")]),
])
assert values[-1][1] == Str("area of circle with radius 10")
assert values[0][2] == Number(314)

# 3. Malformed input
print("3. Malformed input")
for bad in ["", "(a (b c)", '"never closed', "(quote #t)"]:
    try:
        parse_all(bad)
    except ReaderError as e:
        print(f"   {bad!r:20} -> {type(e).__name__}: {e}")
print()

# 4. Tabs
tabbed = "(a\tb)"
with_tabs = ReaderConfig(whitespace=" \t\r\n")
try:
    parse_all(tabbed)
except ReaderError as e:
    print(f"4. Default config rejects tabs: {e}")
print(f"   With tabs enabled: {parse_all(tabbed, with_tabs)!r}")

print("\n=== All checks passed ===")
