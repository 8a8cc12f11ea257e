# test_log_paths.py
#
# Unit tests for relative log path validation.
# Scope:
# - log_paths.is_valid_relative_path: single and multiple candidates
# - log_paths.RELATIVE_PATH_RE: grammar edge cases

import pytest

from log_paths import is_valid_relative_path, RELATIVE_PATH_RE


# -----------------------------
# Accepted paths
# -----------------------------

@pytest.mark.parametrize(
    "path",
    [
        "log",
        "notes.txt",
        "logs/app.log",
        "../escape",
        "./local.log",
        "a/b/c/d.log",
        "dir/with:colon",
        "name%20with%20escapes",
        "user@host.log",
        "weird!$&'()*+,;=.log",
        "trailing/",
        "~backup",
    ],
)
def test_well_formed_relative_paths_are_accepted(path):
    assert is_valid_relative_path(path) is True


# -----------------------------
# Rejected paths
# -----------------------------

@pytest.mark.parametrize(
    "path",
    [
        "",
        "/escape",
        "/var/log/app.log",
        "//server/share",
        "http://example.com/log",
        "file:notes.txt",
        "C:notes.txt",
        "C:\\logs\\app.log",
        "logs\\app.log",
        "has space.log",
        "tab\there",
        "line\nbreak",
        "query?x=1",
        "frag#ment",
        "bad%zzescape",
        "trailing%2",
        "nul\x00byte",
    ],
)
def test_malformed_or_absolute_paths_are_rejected(path):
    assert is_valid_relative_path(path) is False


def test_none_is_rejected():
    assert is_valid_relative_path(None) is False


@pytest.mark.parametrize("value", [123, b"log", ["log"]])
def test_non_string_values_are_rejected(value):
    assert is_valid_relative_path(value) is False


# -----------------------------
# Multiple candidates
# -----------------------------

def test_all_valid_candidates_pass():
    assert is_valid_relative_path("app.log", "meta_log") is True


def test_one_invalid_candidate_fails_all():
    assert is_valid_relative_path("app.log", "/meta_log") is False


def test_one_none_candidate_fails_all():
    assert is_valid_relative_path("app.log", None) is False


def test_no_candidates_is_not_valid():
    assert is_valid_relative_path() is False


def test_parent_segment_accepted_but_root_rejected():
    # Dot segments are syntax, not location; only a leading "/" makes a path absolute.
    assert is_valid_relative_path("../escape") is True
    assert is_valid_relative_path("/escape") is False


def test_colon_only_rejected_in_first_segment():
    assert RELATIVE_PATH_RE.fullmatch("a:b") is None
    assert RELATIVE_PATH_RE.fullmatch("a/b:c") is not None
