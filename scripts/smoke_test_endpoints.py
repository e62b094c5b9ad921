from starlette.testclient import TestClient

# Ensure project root (parent of scripts/) is on sys.path
import os, sys
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Import the FastAPI app
try:
    from app.main import app
except Exception as e:
    print("Failed to import FastAPI app:", e)
    raise


def run_smoke_tests() -> int:
    """Run minimal checks against the ASGI app without starting a server."""
    with TestClient(app) as client:
        def check(method: str, path: str, expected: set[int], **kwargs):
            resp = client.request(method, path, follow_redirects=False, **kwargs)
            print(f"{method} {path} -> {resp.status_code}")
            if resp.status_code not in expected:
                raise AssertionError(f"Unexpected status {resp.status_code} for {method} {path}")
            return resp

        # Basic health endpoints
        check("GET", "/health", {200})
        check("GET", "/api/v1/health", {200})
        # OpenAPI/Docs endpoints
        check("GET", "/api/v1/openapi.json", {200})
        check("GET", "/api/v1/docs", {200, 307, 308})

        # Customer and attachment round trip
        created = check("POST", "/api/v1/customers", {201}, json={"name": "Smoke", "email": "smoke@example.com"})
        customer_id = created.json()["id"]
        check("GET", f"/api/v1/customers/{customer_id}", {200})
        upload = check(
            "POST", f"/api/v1/customers/{customer_id}/attachments", {201},
            files={"file": ("smoke.bin", b"\x00\x01\x02", "application/octet-stream")},
        )
        check("GET", f"/api/v1/customers/{customer_id}/attachments/{upload.json()['id']}", {200})
        check("DELETE", f"/api/v1/customers/{customer_id}", {204})
        check("GET", f"/api/v1/customers/{customer_id}", {404})

        print("SMOKE TESTS PASSED")
        return 0


if __name__ == "__main__":
    raise SystemExit(run_smoke_tests())
