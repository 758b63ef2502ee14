"""Tests for projecting listings onto directory views."""

from datetime import datetime, timezone

import pytest

from bucket_browser.core.exceptions import ListingFailedError, ValidationError
from bucket_browser.namespace import (
    FileNode,
    ListingResult,
    NamespaceProjector,
    VirtualPath,
    project_listing,
)

from conftest import entry, page


def listing(prefix, keys=(), prefixes=()):
    return ListingResult(
        prefix=prefix,
        entries=tuple(k if not isinstance(k, str) else entry(k) for k in keys),
        common_prefixes=tuple(prefixes),
        page_count=1,
    )


class TestProjectListing:
    """Test project_listing."""

    def test_root_folders_and_files(self):
        """Test a root listing splits into folders and files."""
        view = project_listing(
            VirtualPath.root(), listing("", keys=["a.txt"], prefixes=["folder1/"])
        )

        assert [f.name for f in view.folders] == ["folder1"]
        assert [f.name for f in view.files] == ["a.txt"]
        assert view.folders[0].full_key == "folder1/"
        assert view.folders[0].type_info is None
        assert view.files[0].type_info.display_name == "Text File"

    def test_nested_prefix(self):
        """Test names are relative to the listed prefix."""
        path = VirtualPath.parse("/docs/2024/")
        view = project_listing(
            path,
            listing(
                "docs/2024/",
                keys=["docs/2024/report.pdf"],
                prefixes=["docs/2024/q1/", "docs/2024/q2/"],
            ),
        )

        assert [f.name for f in view.folders] == ["q1", "q2"]
        assert view.files[0].name == "report.pdf"
        assert view.files[0].full_key == "docs/2024/report.pdf"
        assert view.prefix == "docs/2024/"

    def test_full_key_is_prefix_plus_name(self):
        """Test every node's key is its directory prefix plus its name."""
        view = project_listing(
            VirtualPath.parse("/p/"),
            listing("p/", keys=["p/x.csv", "p/.env"], prefixes=["p/sub/"]),
        )
        for node in view.folders:
            assert node.full_key == "p/" + node.name + "/"
        for node in view.files:
            assert node.full_key == "p/" + node.name

    def test_deeper_keys_excluded(self):
        """Test keys below the current level never appear as files."""
        view = project_listing(
            VirtualPath.root(), listing("", keys=["top.txt", "deep/nested/file.txt"])
        )
        assert [f.name for f in view.files] == ["top.txt"]

    def test_folder_marker_objects(self):
        """Test zero-byte folder markers are not listed as files."""
        view = project_listing(
            VirtualPath.parse("/data/"),
            listing(
                "data/",
                keys=[entry("data/", size=0), entry("data/raw/", size=0), "data/x.bin"],
                prefixes=["data/raw/"],
            ),
        )
        assert [f.name for f in view.folders] == ["raw"]
        assert [f.name for f in view.files] == ["x.bin"]

    def test_foreign_keys_ignored(self):
        """Test keys outside the prefix are dropped."""
        view = project_listing(
            VirtualPath.parse("/a/"),
            listing("a/", keys=["b/other.txt", "a/mine.txt"], prefixes=["b/c/"]),
        )
        assert [f.name for f in view.files] == ["mine.txt"]
        assert view.folders == ()

    def test_duplicate_folder_names_collapse(self):
        """Test two prefixes mapping to one folder name yield one node."""
        view = project_listing(
            VirtualPath.root(), listing("", prefixes=["dup/", "dup/"])
        )
        assert len(view.folders) == 1

    def test_hidden_nodes_filtered(self):
        """Test show_hidden=False removes dot-prefixed folders and files."""
        result = listing("", keys=[".env", "app.py"], prefixes=[".git/", "src/"])

        shown = project_listing(VirtualPath.root(), result)
        hidden = project_listing(VirtualPath.root(), result, show_hidden=False)

        assert {n.name for n in shown.nodes} == {".env", "app.py", ".git", "src"}
        assert {n.name for n in hidden.nodes} == {"app.py", "src"}

    def test_metadata_carried(self):
        """Test size and timestamp come from the listing entry."""
        view = project_listing(VirtualPath.root(), listing("", keys=[entry("a.bin", size=10, day=3)]))
        node = view.files[0]
        assert node.size == 10
        assert node.last_modified == datetime(2024, 1, 3, tzinfo=timezone.utc)

    def test_stored_content_type_used(self):
        """Test the stored content type classifies unknown names."""
        view = project_listing(
            VirtualPath.root(),
            listing("", keys=[entry("blob", stored_content_type="video/mp4")]),
        )
        assert view.files[0].type_info.category == "Video"

    def test_breadcrumbs_use_root_label(self):
        """Test breadcrumbs are built from the path with the given label."""
        view = project_listing(
            VirtualPath.parse("/a/b/"), listing("a/b/"), root_label="my-bucket"
        )
        assert [c.name for c in view.breadcrumbs] == ["my-bucket", "a", "b"]


class TestFileNode:
    """Test FileNode construction rules."""

    def test_folder_without_type(self):
        """Test folders cannot carry classification."""
        from bucket_browser.classification import classify

        with pytest.raises(ValidationError):
            FileNode(name="x", full_key="x/", is_folder=True, type_info=classify("x"))

    def test_is_hidden(self):
        """Test dot-prefixed names are hidden."""
        assert FileNode(name=".cache", full_key=".cache/", is_folder=True).is_hidden
        assert not FileNode(name="cache", full_key="cache/", is_folder=True).is_hidden


class TestNamespaceProjector:
    """Test the projector end to end with a scripted lister."""

    def test_get_directory_view_merges_pages(self, scripted_lister):
        """Test a paginated listing is projected as one view."""
        lister = scripted_lister(
            [
                page(keys=["p/a.txt"], prefixes=["p/one/"], token="t1"),
                page(keys=["p/b.txt"], prefixes=["p/two/"]),
            ]
        )
        projector = NamespaceProjector(lister, root_label="bucket", page_size=1)
        view = projector.get_directory_view(VirtualPath.parse("/p/"))

        assert [f.name for f in view.folders] == ["one", "two"]
        assert [f.name for f in view.files] == ["a.txt", "b.txt"]
        assert view.breadcrumbs[0].name == "bucket"
        assert lister.calls[0]["prefix"] == "p/"
        assert lister.calls[0]["max_keys"] == 1

    def test_root_uses_empty_prefix(self, scripted_lister):
        """Test the root directory is listed with an empty prefix."""
        lister = scripted_lister([page(keys=["a.txt"], prefixes=["folder1/"])])
        view = NamespaceProjector(lister).get_directory_view(VirtualPath.root())

        assert lister.calls[0]["prefix"] == ""
        assert [f.name for f in view.folders] == ["folder1"]

    def test_show_hidden_option(self, scripted_lister):
        """Test the projector applies its show_hidden option."""
        lister = scripted_lister([page(keys=[".hidden", "shown"])])
        view = NamespaceProjector(lister, show_hidden=False).get_directory_view(
            VirtualPath.root()
        )
        assert [f.name for f in view.files] == ["shown"]

    def test_failure_propagates(self):
        """Test listing errors reach the caller with no partial view."""

        class FailingLister:
            def list_page(self, prefix, delimiter, max_keys, continuation_token=None):
                raise RuntimeError("boom")

        with pytest.raises(ListingFailedError):
            NamespaceProjector(FailingLister()).get_directory_view(VirtualPath.root())

    @pytest.mark.parametrize("options", [{"page_size": 0}, {"max_pages": 0}, {"page_size": -5}])
    def test_non_positive_limits_rejected(self, scripted_lister, options):
        """Test explicit zero or negative limits are rejected, not replaced by defaults."""
        with pytest.raises(ValidationError, match="must be positive"):
            NamespaceProjector(scripted_lister([page()]), **options)
