#!/usr/bin/env python3

"""
Regression runner for the logistic forecast engine API, executed against a live server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List

import httpx

BASE_URL = os.getenv("LOGISTIC_BASE_URL", "http://localhost:4323/api/v1")
HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    section: str = ""


def series(*pairs: tuple) -> List[Dict[str, Any]]:
    return [{"period": p, "value": v} for p, v in pairs]


GROWING = series((2010, 1000), (2011, 1100), (2012, 1210), (2013, 1331))
SATURATING = series(
    (2000, 100), (2001, 180), (2002, 310), (2003, 480), (2004, 640),
    (2005, 760), (2006, 830), (2007, 870), (2008, 890), (2009, 898),
)
GAPPED = series((2020, 100), (2022, 300), (2023, 0), (2024, 420))


CASES: list[Case] = [
    Case("liveness", "GET", "/health", section="Health"),

    # ── Forecast ─────────────────────────────────────────
    Case("growing series", "POST", "/forecast", section="Forecast",
         body={"series": GROWING, "horizon": 2}),
    Case("saturating series", "POST", "/forecast", section="Forecast",
         body={"series": SATURATING, "horizon": 10}),
    Case("gaps and zero value", "POST", "/forecast", section="Forecast",
         body={"series": GAPPED, "horizon": 3}),
    Case("single point", "POST", "/forecast", section="Forecast",
         body={"series": series((2020, 500)), "horizon": 3}),
    Case("empty series", "POST", "/forecast", section="Forecast",
         body={"series": [], "horizon": 2}),
    Case("zero horizon", "POST", "/forecast", section="Forecast",
         body={"series": GROWING, "horizon": 0}),

    # ── Export / Import ──────────────────────────────────
    Case("export csv", "POST", "/forecast/export", section="Export",
         body={"series": SATURATING, "horizon": 5}),
    Case("import csv", "POST", "/forecast/import", section="Export",
         body={"content": "Year,Population\n2020,100\n2021,150\n2022,210\n"}),
    Case("import bad csv", "POST", "/forecast/import", section="Export",
         body={"content": "Year,Population\n2020,abc\n2021,150\n"}, expect=422),

    # ── Scenario ─────────────────────────────────────────
    Case("faster growth", "POST", "/forecast/scenario", section="Scenario",
         body={"series": SATURATING, "horizon": 6, "r": 2.0}),
    Case("negative shock", "POST", "/forecast/scenario", section="Scenario",
         body={"series": SATURATING, "horizon": 6, "shock_pct": -20, "shock_index": 12}),

    # ── Synthetic ────────────────────────────────────────
    Case("random series", "POST", "/series/synthetic", section="Synthetic",
         body={"mode": "random", "count": 15, "seed": 7}),
    Case("logistic series", "POST", "/series/synthetic", section="Synthetic",
         body={"mode": "logistic", "count": 10, "p0": 500, "r": 1.8, "K": 5000}),

    # ── Validation ───────────────────────────────────────
    Case("negative horizon", "POST", "/forecast", section="Validation",
         body={"series": GROWING, "horizon": -1}, expect=422),
    Case("horizon too large", "POST", "/forecast", section="Validation",
         body={"series": GROWING, "horizon": 100000}, expect=422),
    Case("non-numeric value", "POST", "/forecast", section="Validation",
         body={"series": [{"period": 2020, "value": "many"}], "horizon": 1}, expect=422),
]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    attempt = 0
    last_exc: Exception | None = None
    while attempt < 2:
        try:
            if case.method == "GET":
                r = await client.get(case.path)
            else:
                r = await client.request(case.method, case.path, json=case.body or None)
            ok = r.status_code == case.expect
            body: Any = None
            try:
                body = r.json()
            except Exception:
                body = r.text
            if ok:
                return True, "", body
            return False, f"{r.status_code} {r.reason_phrase}: {body}", body
        except httpx.TransportError as exc:
            last_exc = exc
            attempt += 1
            if attempt < 2:
                await asyncio.sleep(0.1)
                continue
            return False, f"transport error: {exc}", None
    return False, str(last_exc), None


async def main():
    import json
    import argparse

    parser = argparse.ArgumentParser(description="Run API test cases")
    parser.add_argument("--section", help="only run cases from this section name")
    parser.add_argument("--label", help="only run the case with this exact label")
    parser.add_argument("--quiet", action="store_true", help="do not print response bodies")
    args = parser.parse_args()
    selected: list[Case] = []
    for c in CASES:
        if args.section and c.section != args.section:
            continue
        if args.label and c.label != args.label:
            continue
        selected.append(c)
    if not selected:
        print("no matching cases (check --section or --label)")
        sys.exit(1)

    passed = failed = 0
    current_section = ""

    async with httpx.AsyncClient(base_url=BASE_URL, headers=HEADERS, timeout=30) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n── {current_section} {'─' * max(0, 44 - len(current_section))}")

            ok, detail, body = await run_case(client, case)
            if isinstance(body, (dict, list)):
                pretty = json.dumps(body, indent=2)
            elif body is not None:
                pretty = str(body)
            else:
                pretty = "<no response>"

            if ok:
                passed += 1
                print(f"  ✓ PASS  {case.method} {case.path} — {case.label}")
            else:
                failed += 1
                print(f"  ✗ FAIL  {case.method} {case.path} — {case.label} (expected {case.expect})")
                if detail:
                    print(f"         {detail}")
            if not args.quiet:
                print(f"         response:\n{pretty}")

    total = passed + failed
    print(f"\n{'━' * 43}")
    print(f"  Results: {passed} passed / {failed} failed / {total} total")
    print(f"  {'All tests passed ✓' if failed == 0 else f'{failed} test(s) failed ✗'}")
    print(f"{'━' * 43}\n")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
