"""Classification of errors returned by the Tower VM service."""

from __future__ import annotations

VM_NOT_FOUND = "VM_NOT_FOUND"
VM_DUPLICATE = "VM_DUPLICATE"


def is_vm_not_found(err: BaseException) -> bool:
    """Return True if the error reports that the VM does not exist."""
    return str(err) == VM_NOT_FOUND


def is_vm_duplicate(err: BaseException) -> bool:
    """Return True if the error reports a duplicate VM."""
    return VM_DUPLICATE in str(err)