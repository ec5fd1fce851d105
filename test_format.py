"""test_format.py — Status-panel text and the share link.

Run: python test_format.py
"""
from __future__ import annotations
import re, sys, traceback

from ui.format import duration_string, percent_string, size_string
from ui.share import SHARE_INTENT, share_text, share_url


# ════════════════════════════════════════════════════════════════════════
#  Sizes
# ════════════════════════════════════════════════════════════════════════

def test_size_small_units():
    assert re.fullmatch(r"\d+cm\d+mm\d+μm", size_string(-2.5)), size_string(-2.5)
    assert re.fullmatch(r"\d+mm\d+μm\d+nm", size_string(-3.0)), size_string(-3.0)


def test_size_metres_and_kilometres():
    assert size_string(0.0) == "1m0cm0mm"
    assert size_string(3.0) == "1km0m0cm0mm"
    assert size_string(16.0) == "10,000,000,000,000km"


def test_size_scientific():
    assert size_string(20.0) == "1.000000 x 10^17 km"
    assert size_string(1000.0).endswith("x 10^997 km")
    assert size_string(5000.0) == "1.000000 x 10^4,997 km"


# ════════════════════════════════════════════════════════════════════════
#  Percent / duration
# ════════════════════════════════════════════════════════════════════════

def test_percent_rounds_up():
    assert percent_string(0.5) == "50%"
    assert percent_string(0.001) == "1%"
    assert percent_string(0.0) == "0%"
    assert percent_string(1.0) == "100%"


def test_duration_units():
    assert duration_string(-5) == "0 s"
    assert duration_string(59) == "59 s"
    assert duration_string(61) == "1 min 1 s"
    assert duration_string(3661) == "1 h 1 min"
    assert duration_string(90000) == "1 d 1 h"
    assert duration_string(20 * 86400) == "20 d"
    assert duration_string(400 * 86400) == "1 y 34 d"


# ════════════════════════════════════════════════════════════════════════
#  Share link
# ════════════════════════════════════════════════════════════════════════

def test_share_url_is_encoded():
    text = share_text("Mo & Co", "1m0cm0mm")
    assert text == 'I grew my marimo "Mo & Co" to 1m0cm0mm.'
    url = share_url(text)
    assert url.startswith(SHARE_INTENT)
    query = url[len(SHARE_INTENT):]
    assert " " not in query and "&" not in query and '"' not in query
    assert query.startswith("I%20grew%20my%20marimo%20%22Mo%20%26%20Co%22")


# ════════════════════════════════════════════════════════════════════════
#  MAIN
# ════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    tests = [(name, fn) for name, fn in sorted(globals().items())
             if name.startswith("test_") and callable(fn)]
    passed = failed = 0
    for name, fn in tests:
        try:
            fn()
            passed += 1
            print(f"  [PASS] {name}")
        except Exception:
            failed += 1
            print(f"  [FAIL] {name}")
            traceback.print_exc()
    print(f"\n{'=' * 50}\n  Results: {passed} passed, {failed} failed\n{'=' * 50}")
    sys.exit(1 if failed else 0)
