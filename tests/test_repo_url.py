"""Tests for GitHub repository URL parsing."""

import pytest

from core.errors import ExtractorError, InvalidRepoUrlError
from core.services.repo_url import parse_repo_url


class TestParseRepoUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/facebook/react",
            "https://github.com/facebook/react/",
            "https://github.com/facebook/react.git",
            "git@github.com:facebook/react.git",
            "git@github.com:facebook/react",
            "HTTPS://GitHub.com/facebook/react",
            "  https://github.com/facebook/react  ",
        ],
    )
    def test_valid_urls(self, url):
        ref = parse_repo_url(url)
        assert ref.owner == "facebook"
        assert ref.repo == "react"
        assert ref.full_name == "facebook/react"

    def test_dotted_repo_name(self):
        ref = parse_repo_url("https://github.com/vitest-dev/vitest.dev.git")
        assert ref.repo == "vitest.dev"

    @pytest.mark.parametrize(
        "url",
        [
            "https://notgithub.com/owner/repo",
            "https://github.com/owner",
            "https://github.com/owner/repo/tree/main/docs",
            "github.com/owner/repo",
            "",
        ],
    )
    def test_invalid_urls(self, url):
        with pytest.raises(InvalidRepoUrlError, match="Invalid GitHub repository URL"):
            parse_repo_url(url)

    def test_invalid_url_is_an_extractor_error(self):
        with pytest.raises(ExtractorError):
            parse_repo_url("nope")
