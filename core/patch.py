"""Apply selected upgrades to a manifest and write it back."""

import json
import logging

from rich.console import Console
from rich.text import Text

from .models import ManifestDocument, PatchRow, UpdateChoice
from .table import render_table
from .ui import ARROW, print_notice
from .ui import console as default_console

logger = logging.getLogger(__name__)


def serialize_manifest(content: dict) -> str:
    """Pretty-print manifest content the way it is stored on disk."""
    return json.dumps(content, indent=2, ensure_ascii=False) + "\n"


def apply_updates(updates: list[UpdateChoice], content: dict) -> list[PatchRow]:
    """Rewrite the range of every chosen dependency in place.

    Only existing values are replaced, so key order is untouched.
    """
    rows = []
    for update in updates:
        deps = content[update.category_key]
        rows.append(PatchRow(
            package_name=update.package_name,
            old_range=deps[update.package_name],
            new_range=update.latest_range,
        ))
        deps[update.package_name] = update.latest_range
    return rows


def patch_manifest(
    updates: list[UpdateChoice],
    manifest: ManifestDocument,
    console: Console | None = None,
) -> list[PatchRow]:
    """Apply updates, write the manifest and print a before/after summary.

    Args:
        updates: Confirmed choices, in confirmation order
        manifest: Loaded manifest; its content is mutated
        console: Console receiving the summary

    Returns:
        The summary rows

    Raises:
        OSError: the manifest could not be written
    """
    out = console or default_console
    rows = apply_updates(updates, manifest.content)

    target = manifest.target_path
    target.write_text(serialize_manifest(manifest.content), encoding="utf-8")
    logger.debug("Wrote %d updates to %s", len(rows), target)

    table = render_table([
        [Text(f"  {row.package_name}"), Text(str(row.old_range)), Text(ARROW), Text(row.new_range)]
        for row in rows
    ])
    out.print()
    for line in table:
        out.print(line)
    print_notice(f"\nSuccessfully updated {manifest.relative_path}", out)
    return rows
