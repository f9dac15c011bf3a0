"""Event path composition."""

from __future__ import annotations

from collections.abc import Sequence

PATH_SEPARATOR = "."


def compose_path(segments: Sequence[str], base_path: str | None = None) -> str:
    """Join *segments* with ``.``, prefixed by ``base_path.`` when one is set.

    An empty or ``None`` base path adds nothing, so a path never starts with
    the separator.
    """
    joined = PATH_SEPARATOR.join(segments)
    if not base_path:
        return joined
    return f"{base_path}{PATH_SEPARATOR}{joined}"


__all__ = ["PATH_SEPARATOR", "compose_path"]
