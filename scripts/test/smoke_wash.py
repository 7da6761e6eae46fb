# scripts/test/smoke_wash.py
"""
End-to-end smoke test against a running backend: log in, record a wash for
a fresh plate, confirm it landed under the unconfirmed company, then try a
second same-day wash and expect the due-date refusal.

Usage:
  python scripts/test/smoke_wash.py --url http://localhost:5001 \
      --email admin@example.com --password truckwash-admin --registration SMK01
"""

import argparse
import sys

import requests


def main():
    parser = argparse.ArgumentParser(description="Truck wash API smoke test")
    parser.add_argument("--url", default="http://localhost:5001")
    parser.add_argument("--email", default="admin@example.com")
    parser.add_argument("--password", default="truckwash-admin")
    parser.add_argument("--registration", default="SMK01")
    parser.add_argument("--location", default="Hilton Park")
    args = parser.parse_args()

    api = args.url.rstrip("/") + "/api"
    http = requests.Session()

    resp = http.post(f"{api}/login", json={"email": args.email, "password": args.password}, timeout=10)
    if resp.status_code != 200:
        print(f"❌ Login failed: {resp.status_code} {resp.text}")
        sys.exit(1)
    print(f"✅ Logged in as {resp.json()['email']} ({resp.json()['role']})")

    wash_types = http.get(f"{api}/washtypes", timeout=10).json()
    if not wash_types:
        print("❌ No wash types — run scripts/setup/seed_reference_data.py first")
        sys.exit(1)
    wash_type_id = wash_types[0]["id"]

    lookup = http.get(f"{api}/vehicles/{args.registration}", timeout=10)
    print(f"🔍 Lookup {args.registration}: HTTP {lookup.status_code}")

    resp = http.post(f"{api}/washes", json={
        "registration": args.registration,
        "wash_type_id": wash_type_id,
        "location": args.location,
        "driver_name": "Smoke Test",
    }, timeout=10)
    print(f"🚿 First wash: HTTP {resp.status_code} {resp.json()}")

    resp = http.post(f"{api}/washes", json={
        "registration": args.registration,
        "wash_type_id": wash_type_id,
        "location": args.location,
    }, timeout=10)
    print(f"🚿 Second wash: HTTP {resp.status_code} {resp.json()}")
    print("✅ Due-date gate active" if resp.status_code == 400 else "⚠️  Second wash was accepted")


if __name__ == "__main__":
    main()
