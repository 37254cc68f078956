"""
Property-based tests for payload normalization.

Feature: branch-protection-report
"""

import copy
from collections.abc import Iterator
from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from branch_protection_report.normalize import enabled_flag, is_url, strip_urls

url_strategy = st.builds(
    lambda scheme, path: f"{scheme}://api.github.com/{path}",
    st.sampled_from(["http", "https"]),
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz/", max_size=20),
)

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**31), max_value=2**31),
    st.text(max_size=20),
    url_strategy,
)

json_trees = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(st.text(max_size=10), children, max_size=5),
    ),
    max_leaves=30,
)

# Payload roots are always containers
json_documents = st.one_of(
    st.lists(json_trees, max_size=5),
    st.dictionaries(st.text(max_size=10), json_trees, max_size=5),
)


def leaves(value: Any) -> Iterator[Any]:
    """Every scalar in a JSON tree, mapping keys excluded."""
    if isinstance(value, dict):
        for item in value.values():
            yield from leaves(item)
    elif isinstance(value, list):
        for item in value:
            yield from leaves(item)
    else:
        yield value


@given(tree=json_trees)
@settings(max_examples=200)
def test_strip_urls_is_idempotent(tree: Any) -> None:
    once = strip_urls(tree)

    assert strip_urls(once) == once


@given(tree=json_documents)
@settings(max_examples=200)
def test_no_url_survives_at_any_depth(tree: Any) -> None:
    stripped = strip_urls(tree)

    assert not any(is_url(leaf) for leaf in leaves(stripped))


@given(tree=json_documents)
@settings(max_examples=200)
def test_non_url_values_survive_unchanged(tree: Any) -> None:
    """Exactly the non-URL scalars remain, in their original order."""
    expected = [leaf for leaf in leaves(tree) if not is_url(leaf)]

    assert list(leaves(strip_urls(tree))) == expected


@given(tree=json_trees)
@settings(max_examples=100)
def test_strip_urls_does_not_mutate_input(tree: Any) -> None:
    original = copy.deepcopy(tree)

    strip_urls(tree)

    assert tree == original


def test_strip_urls_on_protection_payload() -> None:
    payload = {
        "url": "https://api.github.com/repos/acme/api/branches/main/protection",
        "required_signatures": {
            "url": "https://api.github.com/repos/acme/api/branches/main/protection/required_signatures",
            "enabled": False,
        },
        "restrictions": {
            "users_url": "https://api.github.com/x",
            "users": [{"login": "carol", "html_url": "https://github.com/carol"}],
            "teams": [],
        },
        "note": "htt is not a url",
        "mirror": "ftp://example.test",
    }

    assert strip_urls(payload) == {
        "required_signatures": {"enabled": False},
        "restrictions": {"users": [{"login": "carol"}], "teams": []},
        "note": "htt is not a url",
        "mirror": "ftp://example.test",
    }


def test_strip_urls_treats_any_http_prefix_as_url() -> None:
    assert strip_urls(["httpbin", "HTTP://upper", "x"]) == ["HTTP://upper", "x"]


@given(root=json_scalars)
def test_root_scalar_returned_unchanged(root: Any) -> None:
    assert strip_urls(root) == root


def test_root_url_is_kept_but_nested_url_is_dropped() -> None:
    assert strip_urls("https://api.github.com/") == "https://api.github.com/"
    assert strip_urls(["https://api.github.com/"]) == []
    assert strip_urls({"url": "https://api.github.com/"}) == {}


def test_enabled_flag() -> None:
    assert enabled_flag({"url": "https://x", "enabled": True}) is True
    assert enabled_flag({"enabled": False}) is False
    assert enabled_flag(True) is True
    assert enabled_flag(False) is False
    assert enabled_flag(None) is None
    assert enabled_flag({}) is None
    assert enabled_flag("yes") is None
