#!/usr/bin/env python3
"""Smoke test for a running Memoraid API."""

import sys
import uuid

import httpx


BASE_URL = "http://127.0.0.1:8000"


def main():
    """Walk register -> contributor -> memory -> questions -> answer -> progress."""
    print("\n🚀 Testing Memoraid API\n")

    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0).raise_for_status()
        print("✅ Server is running\n")
    except Exception:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn app.main:app --reload --port 8000")
        sys.exit(1)

    client = httpx.Client(base_url=f"{BASE_URL}/api", timeout=30.0)
    try:
        email = f"smoke-{uuid.uuid4().hex[:8]}@example.com"
        reg = client.post("/auth/register", json={"name": "Smoke", "email": email, "password": "pw"})
        reg.raise_for_status()
        user = reg.json()["user"]
        headers = {"Authorization": f"Bearer {reg.json()['token']}"}
        print(f"✅ Registered {user['email']}")

        contributor = client.post(
            "/memories/contributor",
            json={
                "name": "Maria",
                "email": "maria@example.com",
                "relationshipType": "sister",
                "relationshipYears": 30,
                "userId": user["id"],
            },
        )
        contributor.raise_for_status()

        photo = client.post("/memories/upload", files={"photo": ("smoke.jpg", b"smoke", "image/jpeg")})
        photo.raise_for_status()

        memory = client.post(
            "/memories",
            json={
                "contributorId": contributor.json()["id"],
                "photoUrl": photo.json()["photoUrl"],
                "description": "We had a picnic by the lake. Grandpa caught a fish.",
            },
        )
        memory.raise_for_status()
        memory_id = memory.json()["memory"]["id"]
        print(f"✅ Memory {memory_id}")

        generated = client.post(f"/questions/generate/{memory_id}", headers=headers)
        generated.raise_for_status()
        questions = generated.json()["questions"]
        for i, q in enumerate(questions, 1):
            print(f"  {i}. {q['question']} ({q['points']} pts)")

        first = questions[0]
        answer = client.post(
            f"/questions/answer/{first['id']}",
            json={"answer": first["correct_answer"]},
            headers=headers,
        )
        answer.raise_for_status()
        print(f"✅ {answer.json()['message']} {answer.json()['result']}")

        progress = client.get("/questions/progress", headers=headers)
        progress.raise_for_status()
        print(f"✅ Progress: {progress.json()['progress']}")
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
