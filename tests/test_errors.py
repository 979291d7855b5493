from elfprovider.errors import is_vm_duplicate, is_vm_not_found


def test_is_vm_not_found_exact_message():
    assert is_vm_not_found(Exception("VM_NOT_FOUND")) is True


def test_is_vm_not_found_requires_exact_match():
    assert is_vm_not_found(Exception("error: VM_NOT_FOUND")) is False
    assert is_vm_not_found(Exception("VM_TEMPLATE_NOT_FOUND")) is False


def test_is_vm_duplicate_substring():
    assert is_vm_duplicate(RuntimeError("create failed: VM_DUPLICATE name")) is True
    assert is_vm_duplicate(RuntimeError("VM_DUPLICATE")) is True


def test_is_vm_duplicate_other_error():
    assert is_vm_duplicate(RuntimeError("VM_NOT_FOUND")) is False