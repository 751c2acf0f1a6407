"""
Blob path utilities for artifact locations.
"""

import posixpath

from src.storage.params import FORWARD_SLASH


class ArtifactPaths:
    """
    Path handling for artifacts stored as blobs.

    A storage path has the form "{container}/{blob path}", e.g.
    "artifacts/builds/42/logs/out.txt" lives in container "artifacts"
    under blob "builds/42/logs/out.txt".
    """

    @staticmethod
    def get_container_and_path(path: str) -> tuple[str, str] | None:
        """
        Split a path into container name and blob path.

        Args:
            path: Slash-delimited path like "container/dir/file.txt"

        Returns:
            Tuple of (container_name, blob_path), or None if the path
            has no non-empty segment
        """
        segments = [segment for segment in path.split(FORWARD_SLASH) if segment]
        if not segments:
            return None
        container_name = segments[0]
        blob_path = FORWARD_SLASH.join(segments[1:]).lstrip(FORWARD_SLASH)
        return container_name, blob_path

    @staticmethod
    def split_container_and_path(path: str) -> tuple[str, str]:
        """Like get_container_and_path, but raise ValueError for empty paths."""
        container_and_path = ArtifactPaths.get_container_and_path(path)
        if container_and_path is None:
            raise ValueError("Path should not be empty")
        return container_and_path

    @staticmethod
    def append_path_prefix(path_prefix: str, file_name: str) -> str:
        """
        Join a path prefix and a file name into a normalized relative path.

        Args:
            path_prefix: Prefix like "builds/42/"; may be empty
            file_name: Name relative to the prefix

        Returns:
            file_name unchanged when the prefix is empty, otherwise the joined
            path with "." and ".." segments resolved
        """
        prefix = path_prefix.rstrip(FORWARD_SLASH)
        if not prefix:
            return file_name
        return ArtifactPaths.normalize_relative_path(f"{prefix}{FORWARD_SLASH}{file_name}")

    @staticmethod
    def normalize_relative_path(path: str) -> str:
        """Collapse ".", ".." and repeated slashes in a relative path."""
        normalized = posixpath.normpath(path.replace("\\", FORWARD_SLASH))
        if normalized == ".":
            return ""
        return normalized.lstrip(FORWARD_SLASH)
