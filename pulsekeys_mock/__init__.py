"""Mock server package (PulseKeys checkpoint gating API).

Every endpoint is stubbed: sessions, checkpoints, proofs and keys are minted
or echoed per request and never tracked across requests.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
