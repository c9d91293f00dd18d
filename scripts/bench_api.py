from __future__ import annotations

import argparse
import asyncio
import json
import statistics
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

from bank_client import pages
from bank_client.api import build_client
from bank_client.form import CustomerInputForm

GET_ENDPOINTS = [
    pages.TARGET_DISTRIBUTION_PATH,
    pages.JOB_SUCCESS_RATE_PATH,
    pages.AGE_DISTRIBUTION_PATH,
    pages.BALANCE_DURATION_PATH,
    pages.MODEL_INFO_PATH,
]


def p95(xs: list[float]) -> float:
    xs = sorted(xs)
    if not xs:
        return 0.0
    k = int(0.95 * (len(xs) - 1))
    return float(xs[k])


def summarize(timings: Dict[str, List[float]], errors: Dict[str, int]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for endpoint, t in timings.items():
        out[endpoint] = {
            "n_ok": len(t),
            "n_errors": int(errors.get(endpoint, 0)),
            "mean_ms": float(statistics.mean(t)) if t else 0.0,
            "p95_ms": p95(t),
        }
    return out


async def run_bench(client: httpx.AsyncClient, n: int) -> Dict[str, Any]:
    payload = CustomerInputForm().to_request().model_dump()
    timings: Dict[str, List[float]] = {p: [] for p in [*GET_ENDPOINTS, pages.PREDICT_PATH]}
    errors: Dict[str, int] = {}

    for _ in range(n):
        for path in timings:
            t0 = time.perf_counter()
            if path == pages.PREDICT_PATH:
                r = await client.post(path, json=payload)
            else:
                r = await client.get(path)
            if r.is_success:
                timings[path].append((time.perf_counter() - t0) * 1000.0)
            else:
                errors[path] = errors.get(path, 0) + 1

    return summarize(timings, errors)


async def _main(base_url: Optional[str], n: int) -> Dict[str, Any]:
    async with build_client(base_url=base_url) as client:
        report = await run_bench(client, n)
        return {"base_url": str(client.base_url), "n": int(n), "endpoints": report}


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--base-url", default=None)
    ap.add_argument("--n", type=int, default=20)
    ap.add_argument("--out", default="")
    args = ap.parse_args()

    report = asyncio.run(_main(args.base_url, args.n))

    out = Path(args.out) if args.out else Path("outputs/perf/bench_latest.json")
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
    print(json.dumps(report, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
