#!/usr/bin/env python
"""
Doctr Smoke Test
================
Quick end-to-end check against a running server.

Usage:
    python scripts/smoke_test.py [--base-url http://localhost:8000] [--user admin --password password]

Creates one doctor, reads, updates and deletes it again. Existing rows are left alone.
"""

import argparse
import base64
import json
import sys
import time
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen


def call(base_url, path, method="GET", body=None, auth=None):
    """Returns (status, parsed body or None). Connection errors propagate as URLError."""
    url = path if path.startswith("http") else f"{base_url.rstrip('/')}{path}"
    headers = {"Accept": "application/json"}
    data = None
    if body is not None:
        data = json.dumps(body).encode("utf-8")
        headers["Content-Type"] = "application/json"
    if auth:
        token = base64.b64encode(f"{auth[0]}:{auth[1]}".encode("utf-8")).decode("ascii")
        headers["Authorization"] = f"Basic {token}"

    req = Request(url, data=data, headers=headers, method=method)
    try:
        response = urlopen(req, timeout=10)
        status, raw = response.status, response.read()
    except HTTPError as e:
        status, raw = e.code, e.read()
    return status, (json.loads(raw) if raw else None)


def check(label, status, expected):
    if status == expected:
        print(f"  [OK] {label} -> {status}")
        return True
    print(f"  [FAIL] {label} -> {status} (expected {expected})")
    return False


def main():
    parser = argparse.ArgumentParser(description="Doctr Smoke Test")
    parser.add_argument("--base-url", default="http://localhost:8000", help="Server base URL")
    parser.add_argument("--user", default="admin")
    parser.add_argument("--password", default="password")
    parser.add_argument("--wait", type=int, default=0, help="Seconds to wait before testing")
    args = parser.parse_args()

    if args.wait:
        print(f"Waiting {args.wait} seconds for the server...")
        time.sleep(args.wait)

    auth = (args.user, args.password)

    print("=" * 60)
    print("  Doctr Smoke Test")
    print(f"  Base URL: {args.base_url}")
    print("=" * 60)

    results = []
    try:
        print("\n[1] ENDPOINTS")
        print("-" * 60)
        status, _ = call(args.base_url, "/api/health/")
        results.append(check("GET /api/health/", status, 200))
        status, _ = call(args.base_url, "/api/doctors")
        results.append(check("GET /api/doctors (no auth)", status, 401))
        status, _ = call(args.base_url, "/api/doctors", auth=auth)
        results.append(check("GET /api/doctors", status, 200))

        print("\n[2] CRUD ROUND TRIP")
        print("-" * 60)
        doctor = {
            "firstName": "Smoke",
            "lastName": "Test",
            "address": "1, Station Road",
            "city": "Tenali",
            "pincode": "522201",
        }
        status, created = call(args.base_url, "/api/doctors", "POST", doctor, auth)
        results.append(check("POST /api/doctors", status, 201))
        if status == 201:
            href = created["_links"]["self"]["href"]

            status, _ = call(args.base_url, href, auth=auth)
            results.append(check("GET doctor", status, 200))

            status, _ = call(args.base_url, href, "PUT", {**doctor, "city": "Guntur", "pincode": "522002"}, auth)
            results.append(check("PUT doctor", status, 200))

            status, _ = call(args.base_url, href, "PUT", {**doctor, "pincode": "12A45"}, auth)
            results.append(check("PUT doctor (bad pincode)", status, 400))

            status, _ = call(args.base_url, href, "DELETE", auth=auth)
            results.append(check("DELETE doctor", status, 204))

            status, _ = call(args.base_url, href, auth=auth)
            results.append(check("GET deleted doctor", status, 404))
    except URLError as e:
        print(f"  [FAIL] Connection error: {e.reason}")
        results.append(False)

    passed = sum(results)
    total = len(results)

    print("\n" + "=" * 60)
    print(f"  RESULT: {passed}/{total} checks passed")
    print("=" * 60)

    if passed == total:
        print("\n  [SUCCESS] All smoke checks passed!")
        return 0
    print(f"\n  [FAILED] {total - passed} checks failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
