#!/usr/bin/env python3
"""Benchmark permission checks: latency (p50, p95, p99) and QPS.

Usage:
  export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
  uv run python scripts/bench_check.py [--num-checks 500] [--trace]

Without KEYCLOAK_CLIENT_SECRET the script sends the X-Dev-User-Id header
instead of a bearer token (server must run with DEBUG=true in development).
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx

CHECKS = [
    ("dashboard", "read"),
    ("requests", "read_all"),
    ("hardware", "approve"),
    ("tickets", "close"),
    ("rbac", "manage"),
]


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark permission checks")
    parser.add_argument("--num-checks", type=int, default=200, help="Number of check requests")
    parser.add_argument("--trace", action="store_true", help="Request resolution traces")
    parser.add_argument("--output", type=str, default="/results/bench_check.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    keycloak_url = os.environ.get("KEYCLOAK_URL", "http://localhost:8080")
    realm = os.environ.get("KEYCLOAK_REALM", "crowdhub")
    client_id = os.environ.get("KEYCLOAK_CLIENT_ID", "crowdhub-api")
    client_secret = os.environ.get("KEYCLOAK_CLIENT_SECRET", "")
    user = os.environ.get("BENCH_USER", "testuser")
    password = os.environ.get("BENCH_PASSWORD", "testpass")

    headers = {"Content-Type": "application/json"}
    if client_secret:
        print("Getting token...")
        token = get_token(keycloak_url, realm, client_id, client_secret, user, password)
        headers["Authorization"] = f"Bearer {token}"
    else:
        headers["X-Dev-User-Id"] = os.environ.get("BENCH_USER_ID", user)

    latencies: list[float] = []
    errors = 0
    allowed = 0
    print(f"Running {args.num_checks} permission checks...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        for i in range(args.num_checks):
            resource, action = CHECKS[i % len(CHECKS)]
            t0 = time.perf_counter()
            r = client.post(
                f"{api_url}/v1/rbac/check",
                json={"resource": resource, "action": action, "includeTrace": args.trace},
                headers=headers,
            )
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
                if r.json().get("allowed"):
                    allowed += 1
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful checks.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Permission check benchmark (checks={n}, allowed={allowed}, errors={errors}, "
        f"trace={args.trace})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
