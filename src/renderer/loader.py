"""Retrieval of the posts resource."""

import json
from pathlib import Path
from urllib.parse import urljoin

import aiofiles
import aiohttp
from pydantic import ValidationError

from common import logger
from common.exceptions import ParseOrRuntimeError, RetrievalError
from config.config import Config
from models.models import Post


class PostLoader:
    """Загрузчик списка постов из JSON-ресурса."""

    def __init__(self, config: Config):
        self.config = config
        self.session = None

    async def __aenter__(self) -> "PostLoader":
        if self.config.is_remote:
            timeout = aiohttp.ClientTimeout(total=self.config.request_timeout)
            self.session = aiohttp.ClientSession(timeout=timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.session:
            await self.session.close()
            self.session = None

    @property
    def resource_location(self) -> str:
        """URL or file path of the posts resource."""
        if self.config.is_remote:
            base_url = self.config.site_root
            if not base_url.endswith("/"):
                base_url += "/"
            return urljoin(base_url, self.config.posts_path)
        return str(Path(self.config.site_root) / self.config.posts_path)

    async def fetch_posts(self) -> list:
        """Получение и разбор постов."""
        location = self.resource_location
        logger.info("[PostLoader] Fetching posts from %s", location)
        if self.config.is_remote:
            body = await self._fetch_url(location)
        else:
            body = await self._read_file(location)
        posts = self.parse_posts(body)
        logger.info("[PostLoader] Loaded %d posts", len(posts))
        return posts

    async def _fetch_url(self, url: str) -> str:
        """Один HTTP запрос, без повторных попыток."""
        if not self.session:
            timeout = aiohttp.ClientTimeout(total=self.config.request_timeout)
            self.session = aiohttp.ClientSession(timeout=timeout)
        try:
            async with self.session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise RetrievalError(response.status)
                return await response.text()
        except aiohttp.ClientError as e:
            raise RetrievalError(message=f"Network error: {e}") from e
        except TimeoutError as e:
            raise RetrievalError(message=f"Request to {url} timed out") from e

    async def _read_file(self, path: str) -> str:
        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise RetrievalError(404, f"HTTP error! status: 404 ({path})") from e
        except OSError as e:
            raise RetrievalError(message=f"Error reading {path}: {e}") from e

    @staticmethod
    def parse_posts(body: str) -> list:
        """Разбор JSON-массива постов."""
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ParseOrRuntimeError(f"Invalid JSON: {e}") from e
        if not isinstance(data, list):
            raise ParseOrRuntimeError(f"Expected a JSON array of posts, got {type(data).__name__}")
        try:
            return [Post.model_validate(record) for record in data]
        except ValidationError as e:
            raise ParseOrRuntimeError(f"Invalid post record: {e}") from e
