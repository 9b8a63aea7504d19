import pytest
from pydantic import ValidationError

from common.exceptions import RetrievalError
from models.models import LoadResult, Post


def test_numbers_are_coerced_to_text():
    post = Post.model_validate({"id": 7, "title": 2024, "tags": ["a", 1]})
    assert post.id == "7"
    assert post.title == "2024"
    assert post.tags == ["a", "1"]


def test_missing_title_is_empty():
    assert Post.model_validate({"id": "1"}).title == ""
    assert Post.model_validate({"id": "1", "title": None}).title == ""


@pytest.mark.parametrize("tags", ["not-an-array", {"a": 1}, 5, None])
def test_non_list_tags_are_absent(tags):
    assert Post.model_validate({"tags": tags}).tags is None


def test_excerpt_fallbacks():
    assert Post(excerpt="E", description="D").excerpt_text == "E"
    assert Post(description="D").excerpt_text == "D"
    assert Post().excerpt_text == ""


def test_link_defaults_to_placeholder():
    assert Post().link == "#"
    assert Post(url="https://example.com").link == "https://example.com"


def test_extra_fields_are_kept():
    post = Post.model_validate({"id": "1", "category": "news"})
    assert post.model_extra == {"category": "news"}


def test_non_text_title_is_rejected():
    with pytest.raises(ValidationError):
        Post.model_validate({"title": {"nested": True}})


def test_load_result():
    assert LoadResult().ok
    failed = LoadResult(error=RetrievalError(500))
    assert not failed.ok
    assert failed.posts == []
