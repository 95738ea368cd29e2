# SPDX-License-Identifier: MIT

# File nodes: a generated file and the files it is generated from

import pathlib
from enum import Enum
from typing import Optional


class NodeStatus(Enum):
    Unknown = "unknown"
    UpToDate = "uptodate"
    OutOfDate = "outofdate"


class Node:
    explicit_deps: list["Node"]

    def __init__(self, **args):
        "Base class for a Node, an entry in the generation dependency graph."
        self.explicit_deps = args.get("dependencies", [])

    def status(self) -> NodeStatus:
        return NodeStatus.Unknown


class FileNode(Node):
    """A file in the file system, which may not exist yet, for example
    a module that has not been generated."""

    path: pathlib.Path

    def __init__(self, path: pathlib.Path | str, **args):
        super().__init__(**args)
        self.path = pathlib.Path(path)

    def mtime(self) -> Optional[float]:
        """Modification time, or None if the file does not exist."""
        try:
            return self.path.stat().st_mtime
        except FileNotFoundError:
            return None

    def status(self) -> NodeStatus:
        """OutOfDate if this file is missing or any file dependency is newer."""
        mtime = self.mtime()
        if mtime is None:
            return NodeStatus.OutOfDate
        for dep in self.explicit_deps:
            if not isinstance(dep, FileNode):
                continue
            dep_mtime = dep.mtime()
            if dep_mtime is not None and dep_mtime > mtime:
                return NodeStatus.OutOfDate
        return NodeStatus.UpToDate

    def __repr__(self) -> str:
        return f"FileNode({str(self.path)!r})"


def is_stale(source: pathlib.Path | str, target: pathlib.Path | str) -> bool:
    """True if target is missing or older than source."""
    node = FileNode(target, dependencies=[FileNode(source)])
    return node.status() is NodeStatus.OutOfDate
