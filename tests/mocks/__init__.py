"""Mock implementations and vectors for testing."""

from .addresses import (
    ANDREAS,
    P2SH_ADDRESS,
    SEGWIT_ADDRESS,
    SEGWIT_PROGRAM,
    TAPROOT_ADDRESS,
    TESTNET_SEGWIT_ADDRESS,
)
from .extras import (
    BrokenKeyExtras,
    LightningError,
    LightningExtras,
    LightningState,
    RecordingExtras,
    TempOnlyExtras,
    TruthyExtras,
)

__all__ = [
    "ANDREAS",
    "P2SH_ADDRESS",
    "SEGWIT_ADDRESS",
    "SEGWIT_PROGRAM",
    "TAPROOT_ADDRESS",
    "TESTNET_SEGWIT_ADDRESS",
    "LightningExtras",
    "LightningState",
    "LightningError",
    "RecordingExtras",
    "TempOnlyExtras",
    "TruthyExtras",
    "BrokenKeyExtras",
]
