import pytest
from bs4 import BeautifulSoup

from config.config import Config
from renderer.post_renderer import PostRenderer


class FakeLoader:
    """Loader stand-in: returns fixed posts or raises a fixed error."""

    def __init__(self, posts=None, error=None):
        self.posts = posts or []
        self.error = error
        self.calls = 0

    def __call__(self, config):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def fetch_posts(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.posts


@pytest.fixture
def config(tmp_path):
    return Config(site_root=str(tmp_path))


@pytest.fixture
def renderer(config):
    return PostRenderer(config)


@pytest.fixture
def page_soup():
    return BeautifulSoup('<main id="posts-container"><p>Loading...</p></main>', "html.parser")


@pytest.fixture
def container(page_soup):
    return page_soup.find(id="posts-container")


@pytest.fixture
def sample_records():
    return [
        {
            "id": 1,
            "title": "Category Theory for Programmers",
            "excerpt": "Functors and friends.",
            "tags": ["x", "math"],
            "date": "2024-03-15",
            "author": "Jane",
            "url": "https://example.com/ct",
        },
        {
            "id": 2,
            "title": "Gardening Basics",
            "description": "Soil, water and sun.",
            "tags": ["garden"],
        },
    ]
