# elfprovider

Building blocks for a Kubernetes machine provider that runs cluster nodes as
virtual machines on ELF, managed through Tower. The package is pure Python
and has no runtime dependencies.

## Modules

### `elfprovider.machines`

- `convert_uuid_to_provider_id(uuid)` returns `"elf://<uuid>"`. If the input
  is not a UUID, it returns `""`.
- `convert_provider_id_to_uuid(provider_id)` returns the UUID inside an
  `elf://` provider ID. If the input is `None`, empty or malformed, it
  returns `""`. UUID matching ignores case.
- `is_uuid(uuid)` checks for the canonical `8-4-4-4-12` hex form.
- `get_network_status(ips)` splits a comma-separated address list into
  `NetworkStatus(network_index, ip_addrs)` entries. It skips `127.0.0.1`,
  `169.254.*` and `172.17.0*` addresses. Each kept address keeps its
  position in the list as its index.
- `is_control_plane_machine(labels)` is true when the labels contain
  `cluster.x-k8s.io/control-plane`.
- `NoMachineIPAddrError` is a `LookupError` for a machine that has no usable
  address.

### `elfprovider.tower`

This module converts values into the numbers the Tower API expects:

- `tower_int32(value)` and `tower_cpu(cpu)` wrap a value into the signed
  32-bit range.
- `tower_float64(value)` returns the value as a float.
- `tower_memory(memory_mib)` converts MiB to bytes.
- `tower_disk(disk_gib)` converts GiB to bytes. The GiB count is taken as a
  signed 32-bit value.

### `elfprovider.errors`

- `is_vm_not_found(err)` is true when the error's text is exactly
  `VM_NOT_FOUND`.
- `is_vm_duplicate(err)` is true when the error's text contains
  `VM_DUPLICATE`.

### `elfprovider.version`

`get()` returns a frozen `Info` with these parts:

- the build fields, taken from the module-level `GIT_*` and `BUILD_DATE`
  values, which are empty by default;
- the Python version, the implementation name and the `os/arch` platform.

`str(info)` is the git version. `info.to_dict()` returns the fields that are
not empty, under camelCase keys such as `gitVersion`.

### `elfprovider.context`

This module holds the dataclasses that controllers pass around:

- `ControllerManagerContext`. Its `str()` is the manager's name.
- `ControllerContext`. Its `str()` is `manager/controller`.
- `ClusterContext`. Its `str()` is `<gvk> <namespace>/<name>` of the
  ElfCluster.
- `MachineContext`. Its `str()` is `<gvk> <namespace>/<name>` of the
  ElfMachine.

Two of these contexts look up attributes they do not define on the context
one level above them:

- `ControllerContext` falls back to its manager context.
- Cluster and machine contexts fall back to their controller context.

`ClusterContext.patch()` and `MachineContext.patch()` hand the context and
its object to the `patch_helper`, which can be any object with a
`patch(ctx, obj)` method. If there is no helper, they raise `RuntimeError`.

The module also defines defaults as constants:

| Constant | Value |
| --- | --- |
| `DEFAULT_REQUEUE` | 20 s |
| `DEFAULT_SYNC_PERIOD` | 10 min |
| `DEFAULT_POD_NAME` | `cape-controller-manager` |
| `DEFAULT_POD_NAMESPACE` | `cape-system` |
| `DEFAULT_LEADER_ELECTION_ID` | `cape-controller-manager-runtime` |

## Example

```python
from elfprovider.machines import (
    convert_provider_id_to_uuid,
    convert_uuid_to_provider_id,
    get_network_status,
)
from elfprovider.tower import tower_memory

provider_id = convert_uuid_to_provider_id("12345678-1234-1234-1234-123456789abc")
# "elf://12345678-1234-1234-1234-123456789abc"

convert_provider_id_to_uuid(provider_id)
# "12345678-1234-1234-1234-123456789abc"

get_network_status("127.0.0.1,116.116.116.116")
# [NetworkStatus(network_index=1, ip_addrs=["116.116.116.116"])]

tower_memory(2048)
# 2147483648.0
```

## What it does not do

This package does not talk to Tower or to a Kubernetes API server. It has:

- no VM service client;
- no controller manager or reconcilers;
- no command-line program.

The contexts take the client, logger and patch helper that you supply.

## Tests

The tests use pytest, which the `test` extra installs.