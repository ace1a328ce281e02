"""Deleting duplicate folder subtrees from a file system listing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class _Folder:
    children: dict[str, _Folder] = field(default_factory=dict)
    signature: str = ""


def _build(paths: list[list[str]]) -> _Folder:
    root = _Folder()
    for path in paths:
        node = root
        for name in path:
            node = node.children.setdefault(name, _Folder())
    return root


def _sign(node: _Folder, counts: Counter[str]) -> str:
    parts = sorted((name, _sign(child, counts)) for name, child in node.children.items())
    node.signature = "".join(f"({name}{sub})" for name, sub in parts)
    if node.signature:
        counts[node.signature] += 1
    return node.signature


def _prune(node: _Folder, counts: Counter[str]) -> None:
    node.children = {
        name: child
        for name, child in node.children.items()
        if not (child.signature and counts[child.signature] > 1)
    }
    for child in node.children.values():
        _prune(child, counts)


def _walk(node: _Folder, prefix: list[str]) -> Iterator[list[str]]:
    for name, child in node.children.items():
        path = [*prefix, name]
        yield path
        yield from _walk(child, path)


def delete_duplicate_folder(paths: list[list[str]]) -> list[list[str]]:
    """Remove every folder whose non-empty subtree appears more than once."""
    root = _build(paths)
    counts: Counter[str] = Counter()
    _sign(root, counts)
    _prune(root, counts)
    return list(_walk(root, []))