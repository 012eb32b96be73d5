"""
Pytest configuration for mdprint tests.
"""

import pytest


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "e2e: mark test as end-to-end test driving a real Chromium (slow)"
    )


@pytest.fixture(scope="session")
def chromium_available():
    """Skip unless Playwright can launch Chromium (for E2E tests only)"""
    try:
        from playwright.sync_api import Error, sync_playwright
    except ImportError:
        pytest.skip("playwright not installed")

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True, args=["--no-sandbox"])
            browser.close()
    except Error as e:
        pytest.skip(f"Chromium not available: {e}")
    return True
