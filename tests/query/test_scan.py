"""Tests for the property search in cas_properties.core.query.scan.

These tests verify match semantics against relaxed names, result ordering,
duplicate handling, idempotence and propagation of catalog failures.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from cas_properties.core.errors import CatalogAccessError, PatternSyntaxError
from cas_properties.core.query import MatchQuery, PropertyPattern, find, find_by_property


class TestFind:
    """Tests for find()."""

    def test_non_strict_substring_match(self, accept_users):
        """A non-strict pattern matches when any relaxed name contains it."""
        query = MatchQuery.build("accept", strict=False)
        results = find(query, [("cas.authn.accept.users", accept_users)])
        assert list(results) == ["cas.authn.accept.users"]
        assert results["cas.authn.accept.users"] is accept_users

    def test_strict_match_on_canonical_form(self, accept_users):
        query = MatchQuery.build(r"^cas\.authn\.accept\.users$", strict=True)
        results = find(query, [("cas.authn.accept.users", accept_users)])
        assert list(results) == ["cas.authn.accept.users"]

    def test_strict_match_rejects_partial_pattern(self, accept_users):
        query = MatchQuery.build("accept", strict=True)
        assert find(query, [("cas.authn.accept.users", accept_users)]) == {}

    def test_strict_match_on_relaxed_form(self, accept_users):
        """Strict matching may hit a relaxed spelling rather than the key itself."""
        query = MatchQuery.build("CAS_AUTHN_ACCEPT_USERS", strict=True)
        results = find(query, [("cas.authn.accept.users", accept_users)])
        assert list(results) == ["cas.authn.accept.users"]

    def test_dotted_key_found_by_kebab_pattern(self, accept_users):
        query = MatchQuery.build("cas-authn")
        results = find(query, [("cas.authn.accept.users", accept_users)])
        assert list(results) == ["cas.authn.accept.users"]

    def test_camel_case_key_found_by_flat_underscore_pattern(self, accept_users):
        query = MatchQuery.build("cas_authn_accept_users", strict=True)
        results = find(query, [("cas.authn.acceptUsers", accept_users)])
        assert list(results) == ["cas.authn.acceptUsers"]

    def test_directly_constructed_query(self, accept_users, server_name):
        query = MatchQuery(pattern=PropertyPattern("accept"))
        catalog = [(accept_users.name, accept_users), (server_name.name, server_name)]
        assert list(find(query, catalog)) == ["cas.authn.accept.users"]

    def test_camel_case_key_found_by_kebab_pattern(self, accept_users):
        query = MatchQuery.build("accept-users")
        results = find(query, [("cas.authn.acceptUsers", accept_users)])
        assert list(results) == ["cas.authn.acceptUsers"]

    def test_result_preserves_catalog_order(self, repository):
        """Matching keys come back in catalog order, never re-sorted."""
        results = find(MatchQuery.build("accept"), repository)
        assert list(results) == ["cas.authn.accept.users", "cas.authn.accept.name"]

    def test_result_order_with_reversed_catalog(self, accept_users, server_name, accept_name):
        catalog = [
            (accept_name.name, accept_name),
            (server_name.name, server_name),
            (accept_users.name, accept_users),
        ]
        results = find(MatchQuery.build("accept"), catalog)
        assert list(results) == ["cas.authn.accept.name", "cas.authn.accept.users"]

    def test_duplicate_keys_recorded_once(self, accept_users, server_name):
        """The first occurrence of a repeated key wins."""
        catalog = [
            ("cas.authn.accept.users", accept_users),
            ("cas.authn.accept.users", server_name),
        ]
        results = find(MatchQuery.build(".+"), catalog)
        assert len(results) == 1
        assert results["cas.authn.accept.users"] is accept_users

    def test_default_pattern_matches_everything(self, repository):
        results = find(MatchQuery.build(".+"), repository)
        assert list(results) == [
            "cas.authn.accept.users",
            "cas.server.name",
            "cas.authn.accept.name",
        ]

    def test_no_match_is_empty_result(self, repository):
        assert find(MatchQuery.build("no-such-property"), repository) == {}

    def test_empty_catalog(self):
        assert find(MatchQuery.build(".+"), []) == {}

    def test_accepts_mapping_catalog(self, accept_users, server_name):
        catalog = {"cas.authn.accept.users": accept_users, "cas.server.name": server_name}
        results = find(MatchQuery.build("server"), catalog)
        assert list(results) == ["cas.server.name"]

    def test_accepts_generator_catalog(self, repository):
        pairs = ((k, v) for k, v in repository.items())
        results = find(MatchQuery.build("accept"), pairs)
        assert list(results) == ["cas.authn.accept.users", "cas.authn.accept.name"]

    def test_case_sensitive_by_default(self, accept_users):
        query = MatchQuery.build("aCCEPT")
        assert find(query, [("cas.authn.accept.users", accept_users)]) == {}

    def test_ignore_case_query(self, accept_users):
        query = MatchQuery.build("aCCEPT", ignore_case=True)
        assert list(find(query, [("cas.authn.accept.users", accept_users)])) == [
            "cas.authn.accept.users"
        ]

    def test_idempotent(self, repository):
        first = find(MatchQuery.build("accept"), repository)
        second = find(MatchQuery.build("accept"), repository)
        assert first == second
        assert list(first) == list(second)

    def test_metadata_passed_through_unmodified(self, repository):
        results = find(MatchQuery.build(".+"), repository)
        for key, meta in results.items():
            assert repository.get(key) is meta

    def test_catalog_failure_propagates(self, accept_users):
        def failing_catalog():
            yield ("cas.authn.accept.users", accept_users)
            raise CatalogAccessError("metadata source is malformed")

        with pytest.raises(CatalogAccessError, match="malformed"):
            find(MatchQuery.build(".+"), failing_catalog())

    def test_arbitrary_catalog_errors_propagate_unchanged(self):
        def failing_catalog():
            raise OSError("disk gone")
            yield  # pragma: no cover

        with pytest.raises(OSError, match="disk gone"):
            find(MatchQuery.build(".+"), failing_catalog())

    def test_each_key_expanded(self, repository):
        """Every catalog key goes through relaxed-name expansion."""
        with patch("cas_properties.core.query.scan.expand", side_effect=lambda k: (k,)) as mock_expand:
            find(MatchQuery.build("nothing"), repository)
        assert [c.args[0] for c in mock_expand.call_args_list] == [
            "cas.authn.accept.users",
            "cas.server.name",
            "cas.authn.accept.name",
        ]


class TestFindByProperty:
    """Tests for find_by_property()."""

    def test_non_strict_search(self, repository):
        results = find_by_property("accept", repository)
        assert list(results) == ["cas.authn.accept.users", "cas.authn.accept.name"]

    def test_same_as_find_non_strict(self, repository):
        assert find_by_property("server", repository) == find(
            MatchQuery.build("server", strict=False), repository
        )

    def test_invalid_pattern(self, repository):
        with pytest.raises(PatternSyntaxError):
            find_by_property("(abc", repository)
