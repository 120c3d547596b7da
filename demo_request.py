#!/usr/bin/env python3
"""Demo-Request gegen die laufende Tooltip-Review-API"""

import json
import sys

import requests

BASE_URL = "http://localhost:8000"

payload = {
    "help_text": "Regular staff training ensures team skills stay current.",
    "category": "STAFFING",
}

print("=" * 70)
print("INPUT:")
print("=" * 70)
print(json.dumps(payload, indent=2, ensure_ascii=False))
print()

try:
    review = requests.post(f"{BASE_URL}/tooltips/review", json=payload, timeout=30)
    review.raise_for_status()
    enhance = requests.post(f"{BASE_URL}/tooltips/enhance", json=payload, timeout=30)
    enhance.raise_for_status()
except requests.exceptions.ConnectionError:
    print(f"❌ Server nicht erreichbar unter {BASE_URL}")
    print("   Bitte starten Sie den Server mit: uvicorn app.server:app")
    sys.exit(1)
except Exception as e:
    print(f"❌ Fehler: {e}")
    sys.exit(1)

result = review.json()

print("=" * 70)
print("OUTPUT: REVIEW")
print("=" * 70)
print(f"  Word count:        {result['word_count']}")
print(f"  Readability score: {result['readability_score']:.1f} (0-100, higher is better)")
print(f"  Plain language:    {result['plain_language']}")
print(f"  Has metrics:       {result['has_metrics']}")
print(f"  Has examples:      {result['has_examples']}")
print(f"  Jargon:            {', '.join(result['jargon_identified']) or '-'}")
print()
print("Suggested improvements:")
for s in result["suggested_improvements"]:
    print(f"  - {s}")

print()
print("=" * 70)
print("OUTPUT: ENHANCED")
print("=" * 70)
print(enhance.json()["enhanced"])
