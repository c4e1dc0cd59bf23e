"""
Unit tests for the local content index.
"""

import datetime
import json

import pytest
from pydantic import ValidationError

from post_card.content import ContentIndex, Document
from post_card.core.exceptions import ConfigurationException


class TestContentIndex:
    """Test cases for ContentIndex lookups and loading."""

    @pytest.fixture
    def index(self):
        return ContentIndex(
            [
                Document(url="/2024/01/01/first", title="First"),
                Document(url="/about/", title="About"),
                Document(url="/2024/02/01/second", title="Second"),
            ]
        )

    def test_exact_match(self, index):
        assert index.find_by_reference("/2024/02/01/second").title == "Second"

    def test_match_with_leading_slash_added(self, index):
        assert index.find_by_reference("2024/01/01/first").title == "First"

    def test_match_with_trailing_slash_removed(self, index):
        assert index.find_by_reference("/2024/01/01/first/").title == "First"

    def test_document_url_with_trailing_slash(self, index):
        assert index.find_by_reference("/about/").title == "About"
        assert index.find_by_reference("about/").title == "About"

    def test_not_found(self, index):
        assert index.find_by_reference("/2024/03/01/missing") is None
        assert index.find_by_reference("") is None

    def test_add(self, index):
        index.add(Document(url="/new", title="New"))

        assert index.find_by_reference("/new").title == "New"

    def test_from_json(self, tmp_path):
        path = tmp_path / "documents.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "url": "/2024/05/05/post",
                        "title": "From JSON",
                        "date": "2024-05-05",
                        "excerpt": "Loaded",
                        "layout": "post",
                    }
                ]
            ),
            encoding="utf-8",
        )

        document = ContentIndex.from_json(path).find_by_reference("/2024/05/05/post")

        assert document.title == "From JSON"
        assert document.excerpt == "Loaded"
        assert document.date is not None
        assert document.date.year == 2024

    @pytest.mark.parametrize(
        "content",
        ["not json", json.dumps({"url": "/x"}), json.dumps([{"title": "no url"}])],
    )
    def test_from_json_rejects_bad_files(self, tmp_path, content):
        path = tmp_path / "documents.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationException):
            ContentIndex.from_json(path)

    def test_from_json_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationException):
            ContentIndex.from_json(tmp_path / "missing.json")

    def test_document_accepts_date_and_datetime(self):
        assert Document(url="/a", date=datetime.date(2024, 1, 1)).date == datetime.date(2024, 1, 1)
        assert Document(url="/b", date=datetime.datetime(2024, 1, 1, 8)).date.hour == 8

    def test_from_json_accepts_front_matter_dates(self, tmp_path):
        path = tmp_path / "documents.json"
        path.write_text(
            json.dumps(
                [{"url": "/2024/01/01/hello", "title": "Hello", "date": "2024-01-01 10:00:00 +0100"}]
            ),
            encoding="utf-8",
        )

        document = ContentIndex.from_json(path).find_by_reference("/2024/01/01/hello")

        assert document.date == datetime.date(2024, 1, 1)

    def test_unparseable_date_string_is_rejected(self):
        with pytest.raises(ValidationError):
            Document(url="/a", date="sometime last week")
