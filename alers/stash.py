"""Keyed stores of loaded resources and resolution of resource paths."""

from __future__ import annotations

import itertools
import logging
from pathlib import Path
from typing import Dict, Generic, Iterator, List, Optional, TypeVar, Union

log = logging.getLogger(__name__)

R = TypeVar("R")

_DEFAULT_ROOT = Path(__file__).resolve().parent.parent


def find_resource_path(path: str, root: Union[str, Path, None] = None) -> str:
    """Path of a file under the 'resources' directory of the project root."""
    base = _DEFAULT_ROOT if root is None else Path(root)
    return str(base / "resources" / path)


class Stash(Generic[R]):
    """Resources of one kind, loaded through a loader and addressed by key.

    Keys are never reused, so a removed key stays invalid.
    """

    def __init__(self, loader, root: Union[str, Path, None] = None):
        self.loader = loader
        self.root = root
        self._resources: Dict[int, R] = {}
        self._keys = itertools.count()

    def load(self, path: str) -> List[int]:
        """Load every resource the loader finds at the resource path."""
        resource_path = find_resource_path(path, self.root)
        loaded = self.loader.load(resource_path)
        log.info("load: %s", resource_path)
        return [self.register(resource) for resource in loaded]

    def register(self, resource: R) -> int:
        key = next(self._keys)
        self._resources[key] = resource
        return key

    def get(self, key: int) -> Optional[R]:
        return self._resources.get(key)

    def remove(self, key: int) -> None:
        self._resources.pop(key, None)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._resources.values()))

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, key: object) -> bool:
        return key in self._resources