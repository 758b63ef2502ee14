"""Command-line interface for bucket-browser.

Commands:
    - ls: Show one folder of a bucket with typed, sorted entries
    - classify: Show how object names would be classified
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .classification import FOLDER_ICON, FileTypeClassifier
from .cli_params import (
    AccessKeyOption,
    EndpointUrlOption,
    ProfileOption,
    RegionOption,
    SecretKeyOption,
    SessionTokenOption,
    build_client_config,
)
from .core import settings
from .formatting import format_file_size, format_timestamp
from .namespace import (
    FileNode,
    NamespaceProjector,
    SortDirection,
    SortField,
    VirtualPath,
    resolve_content_types,
    resolve_sort_options,
    sort_nodes,
)
from .objectstorage import S3ClientManager, S3ObjectLister

app = typer.Typer(
    name="bucket-browser",
    help="Browse S3-compatible buckets as a folder tree.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"bucket-browser {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Bucket-Browser: folder-style listings of object storage.
    """
    pass


def _render_node(node: FileNode) -> str:
    if node.is_folder:
        return f"{FOLDER_ICON} {node.name}/"
    info = node.type_info
    icon = info.icon if info else ""
    display_name = info.display_name if info else ""
    return (
        f"{icon} {node.name:<40} {display_name:<28} "
        f"{format_file_size(node.size):>10}  {format_timestamp(node.last_modified)}"
    )


@app.command("ls")
def ls_cmd(
    path: Annotated[str, typer.Argument(help="Folder to list, as s3://bucket/prefix/")],
    sort_by: Annotated[
        Optional[SortField],
        typer.Option("--sort", help="Sort field [default: from settings]", case_sensitive=False),
    ] = None,
    descending: Annotated[
        Optional[bool],
        typer.Option("--desc/--asc", help="Sort direction (folders always first)"),
    ] = None,
    show_hidden: Annotated[
        Optional[bool],
        typer.Option("--show-hidden/--hide-hidden", help="Include dotfiles"),
    ] = None,
    content_types: Annotated[
        bool,
        typer.Option(
            "--content-types",
            help="Look up stored content types for files (one request per file)",
        ),
    ] = False,
    page_size: Annotated[
        int, typer.Option("--page-size", help="Keys requested per listing page")
    ] = settings.page_size,
    max_pages: Annotated[
        int, typer.Option("--max-pages", help="Abort after this many pages")
    ] = settings.max_pages,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = "us-east-1",
    endpoint_url: EndpointUrlOption = None,
    aws_profile: ProfileOption = None,
) -> None:
    """
    List one folder of a bucket.

    Examples:
        bucket-browser ls s3://bucket/ --aws-profile myprofile
        bucket-browser ls s3://bucket/photos/2024/ --sort modified --desc
        bucket-browser ls s3://bucket/ --endpoint-url http://localhost:9000
    """
    try:
        if descending is None:
            requested_direction = settings.sort_direction
        else:
            requested_direction = SortDirection.desc if descending else SortDirection.asc
        field, direction = resolve_sort_options(
            sort_by if sort_by is not None else settings.sort_by, requested_direction
        )

        bucket, key = S3ClientManager.parse_s3_path(path)
        config = build_client_config(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
        )

        lister = S3ObjectLister(config, bucket)
        projector = NamespaceProjector(
            lister,
            root_label=bucket,
            page_size=page_size,
            max_pages=max_pages,
            show_hidden=show_hidden,
        )
        view = projector.get_directory_view(VirtualPath.parse(key))
        if content_types:
            view, _ = resolve_content_types(view, lister)

        typer.echo(" / ".join(crumb.name for crumb in view.breadcrumbs))
        for node in sort_nodes(view.folders, view.files, field, direction):
            typer.echo(f"  {_render_node(node)}")

        total_bytes = sum(node.size or 0 for node in view.files)
        typer.echo(
            f"{len(view.folders)} folders, {len(view.files)} files "
            f"({format_file_size(total_bytes)})"
        )

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("classify")
def classify_cmd(
    names: Annotated[list[str], typer.Argument(help="File names or keys to classify")],
    content_type: Annotated[
        Optional[str],
        typer.Option("--content-type", help="Stored Content-Type to fall back on"),
    ] = None,
) -> None:
    """
    Show the type assigned to each name.

    Examples:
        bucket-browser classify archive.tar.gz .gitignore script.min.js
        bucket-browser classify upload-1234 --content-type image/png
    """
    classifier = FileTypeClassifier()
    for name in names:
        info = classifier.classify(name, content_type)
        typer.echo(
            f"{info.icon} {name}: {info.display_name} "
            f"[{info.category}, {info.mime_type}]"
        )


if __name__ == "__main__":
    app()
