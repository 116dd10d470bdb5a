"""
Benchmark suite for treejson parsing and dumping performance.

Compares treejson against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed, dumping speed and memory usage across data shapes.
"""
