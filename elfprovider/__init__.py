"""Provider IDs, network status, Tower value conversions, error checks, version info and controller contexts for ELF machines."""

__version__ = "0.1.0"
__all__ = ["__version__"]