"""
Test configuration and fixtures
"""
import pytest
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from pagination import Paginator, PaginationService


@pytest.fixture(scope="session")
def app():
    """Create application for testing"""
    app = create_app()
    app.config.update({
        "TESTING": True,
    })

    with app.app_context():
        yield app


@pytest.fixture(scope="session")
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def pagination_service():
    """Provide a PaginationService with fixed defaults, independent of the environment."""
    return PaginationService(
        per_page=20,
        max_pages_to_show=10,
        url_pattern="/items?page=(:num)",
        previous_text="Previous",
        next_text="Next",
    )


@pytest.fixture
def paginator():
    """20 pages of 50 items, positioned on page 8."""
    return Paginator(1000, 50, 8, "/items/page/(:num)")
