# Breadcrumb derivation for resolved remote paths.
# Created: 2026-10-19

from __future__ import annotations

from pawpicker.models import Breadcrumb


def derive_breadcrumbs(resolved_path: str) -> list[Breadcrumb]:
    """Split *resolved_path* into cumulative ``(name, path)`` segments.

    ``"/a/b/c"`` becomes ``a → /a``, ``b → /a/b``, ``c → /a/b/c``.
    The root itself is not a segment; an empty or ``"/"`` path yields ``[]``.
    """
    crumbs: list[Breadcrumb] = []
    prefix = ""
    for part in resolved_path.split("/"):
        if not part:
            continue
        prefix = f"{prefix}/{part}"
        crumbs.append(Breadcrumb(name=part, path=prefix))
    return crumbs
