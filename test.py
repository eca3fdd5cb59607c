"""
Manual smoke test against a running server:

    uvicorn jobguard.main:app --reload
    python test.py
"""
import requests

BASE = "http://localhost:8000"

JOB_TEXT = (
    "URGENT: Work-from-home Package Handler. Earn $3,000/week reshipping parcels, "
    "no experience needed, immediate start. Send a $150 registration fee via gift card "
    "to recruiting.dept.usa@yahoo.com to receive your starter kit."
)

response = requests.post(f"{BASE}/scan", json={"job_text": JOB_TEXT}, timeout=120)

print(f"status:  {response.status_code}")

if response.status_code == 200:
    data = response.json()
    verdict = data["verdict"]
    print(f"verdict: {verdict['status']} (risk {verdict['risk_score']}, trust {verdict['trust_score']})")
    print(f"reason:  {verdict['primary_reason']}")
    for flag in verdict["red_flags"]:
        print(f"  flag:  {flag}")
    for rec in verdict["recommendations"]:
        print(f"  step:  {rec}")
    print(f"history: {data['history']['count']} entries")
else:
    print(response.text)
