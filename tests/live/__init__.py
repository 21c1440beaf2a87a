"""Live integration tests against an httpbin server.

These tests send real requests and are excluded from regular test runs.

Usage:
    # httpbin.org
    pytest -m live -v tests/live

    # a local httpbin, e.g. `docker run -p 8080:80 kennethreitz/httpbin`
    HTTPBIN_URL=http://localhost:8080 pytest -m live -v tests/live
"""
