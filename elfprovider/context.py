"""Contexts shared by the controller manager, its controllers and reconciles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Protocol, runtime_checkable

DEFAULT_REQUEUE = timedelta(seconds=20)
"""How long to wait before a reconcile is requeued."""

_DEFAULT_PREFIX = "cape-"

DEFAULT_SYNC_PERIOD = timedelta(minutes=10)
DEFAULT_POD_NAME = _DEFAULT_PREFIX + "controller-manager"
DEFAULT_POD_NAMESPACE = _DEFAULT_PREFIX + "system"
DEFAULT_LEADER_ELECTION_ID = DEFAULT_POD_NAME + "-runtime"

_NO_CREDENTIAL = ""


@runtime_checkable
class KubeObject(Protocol):
    """A named, namespaced resource that knows its group, version and kind."""

    name: str
    namespace: str

    def group_version_kind(self) -> Any:
        """Return the group, version and kind of the resource."""


@runtime_checkable
class PatchHelper(Protocol):
    """Writes an object and its status back to the API server."""

    def patch(self, ctx: Any, obj: Any) -> None:
        """Patch ``obj`` using ``ctx``; raise on failure."""


def _describe(obj: KubeObject) -> str:
    return f"{obj.group_version_kind()} {obj.namespace}/{obj.name}"


class _Delegating:
    """Looks up missing attributes on a parent context."""

    _parent_field = ""

    def __getattr__(self, attr: str) -> Any:
        parent_field = type(self)._parent_field
        if attr == parent_field or attr.startswith("__"):
            raise AttributeError(attr)
        parent = self.__dict__.get(parent_field)
        if parent is None:
            raise AttributeError(attr)
        return getattr(parent, attr)


@dataclass
class ControllerManagerContext:
    """State of the controller manager that owns the controllers."""

    name: str = DEFAULT_POD_NAME
    namespace: str = DEFAULT_POD_NAMESPACE
    leader_election_id: str = DEFAULT_LEADER_ELECTION_ID
    leader_election_namespace: str = ""
    watch_namespace: str = ""
    client: Any = None
    logger: logging.Logger | None = None
    scheme: Any = None
    max_concurrent_reconciles: int = 0

    def __str__(self) -> str:
        return self.name


@dataclass
class ControllerContext(_Delegating):
    """State of a single controller; falls back to its manager's state."""

    _parent_field = "controller_manager_context"

    controller_manager_context: ControllerManagerContext
    name: str = ""
    logger: logging.Logger | None = None

    def __str__(self) -> str:
        return f"{self.controller_manager_context}/{self.name}"


@dataclass
class ClusterContext(_Delegating):
    """State of one ElfCluster reconcile."""

    _parent_field = "controller_context"

    controller_context: ControllerContext
    elf_cluster: KubeObject
    cluster: Any = None
    patch_helper: PatchHelper | None = None
    logger: logging.Logger | None = None
    username: str = ""
    password: str = field(default=_NO_CREDENTIAL, repr=False)

    def __str__(self) -> str:
        return _describe(self.elf_cluster)

    def patch(self) -> None:
        """Write the ElfCluster and its status back to the API server."""
        if self.patch_helper is None:
            raise RuntimeError(f"no patch helper for {self}")
        self.patch_helper.patch(self, self.elf_cluster)


@dataclass
class MachineContext(_Delegating):
    """State of one ElfMachine reconcile."""

    _parent_field = "controller_context"

    controller_context: ControllerContext
    elf_machine: KubeObject
    cluster: Any = None
    machine: Any = None
    elf_cluster: Any = None
    logger: logging.Logger | None = None
    patch_helper: PatchHelper | None = None

    def __str__(self) -> str:
        return _describe(self.elf_machine)

    def patch(self) -> None:
        """Write the ElfMachine and its status back to the API server."""
        if self.patch_helper is None:
            raise RuntimeError(f"no patch helper for {self}")
        self.patch_helper.patch(self, self.elf_machine)