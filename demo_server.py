"""
Demo script for the signup endpoints.

Starts a local server and shows how to send the same payload to both
endpoints.
"""

import uvicorn

from signup_lab.config import settings

if __name__ == "__main__":
    base_url = f"http://{settings.HOST}:{settings.BIND_PORT}"
    payload = '{"username": ["<script>alert(1)</script>"], "password": "x"}'

    print("=" * 60)
    print("Starting Signup Type Confusion Lab")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print(f"   - Vulnerable signup:  POST {base_url}/vulnerable/signup")
    print(f"   - Secure signup:      POST {base_url}/secure/signup")
    if not settings.is_production():
        print(f"   - API Docs:                {base_url}/docs")
    print()
    print("📝 Try the array payload on both:")
    for path in ("/vulnerable/signup", "/secure/signup"):
        print(f'   curl -X POST "{base_url}{path}" \\')
        print('     -H "Content-Type: application/json" \\')
        print(f"     -d '{payload}'")
    print()
    print("=" * 60)
    print(f"Starting server on {base_url}")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "signup_lab.main:app",
        host=settings.HOST,
        port=settings.BIND_PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower()
    )
