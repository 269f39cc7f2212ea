"""
Path safety utilities.

Keeps player config lookups inside the configured config directory so a
crafted player name or index entry cannot read arbitrary files.
"""

from __future__ import annotations

from pathlib import Path


def ensure_within(base: Path, path: Path) -> Path:
	"""
	Ensure a path is within the specified base directory.

	Parameters:
		base: The allowed base directory.
		path: The path to validate.

	Returns:
		The original path if valid.

	Raises:
		ValueError: If path escapes the base directory.
	"""
	resolved_base = base.resolve()
	resolved_path = path.resolve()
	if resolved_path == resolved_base or resolved_path.is_relative_to(
	    resolved_base):
		return path
	raise ValueError(f"Path {resolved_path} escapes base {resolved_base}")


__all__ = ["ensure_within"]
