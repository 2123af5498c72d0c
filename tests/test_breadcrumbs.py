# Tests for breadcrumb derivation.
# Created: 2026-10-19

import pytest

from pawpicker.breadcrumbs import derive_breadcrumbs
from pawpicker.models import Breadcrumb


def test_nested_path():
    assert derive_breadcrumbs("/a/b/c") == [
        Breadcrumb(name="a", path="/a"),
        Breadcrumb(name="b", path="/a/b"),
        Breadcrumb(name="c", path="/a/b/c"),
    ]


@pytest.mark.parametrize("path", ["", "/", "//"])
def test_root_and_empty_have_no_segments(path):
    assert derive_breadcrumbs(path) == []


def test_empty_segments_dropped():
    crumbs = derive_breadcrumbs("/home//user/")
    assert [(c.name, c.path) for c in crumbs] == [("home", "/home"), ("user", "/home/user")]


def test_single_segment():
    assert derive_breadcrumbs("/srv") == [Breadcrumb(name="srv", path="/srv")]


def test_names_with_spaces_kept_verbatim():
    crumbs = derive_breadcrumbs("/Users/me/My Documents")
    assert crumbs[-1] == Breadcrumb(name="My Documents", path="/Users/me/My Documents")
