from enum import Enum

import pytest

from apiservice.models.endpoint import Endpoint, match_endpoint, match_endpoints


class TestEndpoint:
    def test_values(self):
        assert Endpoint.REPOSITORIES.value == "search/repositories"
        assert Endpoint.USERS.value == "users"

    def test_lookup_by_value(self):
        assert Endpoint("users") is Endpoint.USERS
        with pytest.raises(ValueError):
            Endpoint("orgs")


class TestMatchEndpoint:
    def test_single_segment(self):
        assert match_endpoint(["users", "octocat"], Endpoint) == (
            Endpoint.USERS,
            ("octocat",),
        )

    def test_multi_segment(self):
        assert match_endpoint(["search", "repositories"], Endpoint) == (
            Endpoint.REPOSITORIES,
            (),
        )

    def test_partial_multi_segment(self):
        assert match_endpoint(["search"], Endpoint) is None

    def test_unknown(self):
        assert match_endpoint(["orgs", "github"], Endpoint) is None

    def test_all_matches_longest_first(self):
        class GistEndpoint(str, Enum):
            GISTS = "gists"
            PUBLIC_GISTS = "gists/public"

        assert match_endpoints(["gists", "public"], GistEndpoint) == [
            (GistEndpoint.PUBLIC_GISTS, ()),
            (GistEndpoint.GISTS, ("public",)),
        ]
