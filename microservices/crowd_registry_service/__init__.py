"""
Crowd Registry Service

Registry core for crowdsourced campaigns providing:
- Fungible token ledger (fixed supply minted once to the deployer)
- User registry with mirrored reward balances
- Campaign store with owner-gated performance updates
- Off-chain computation request/response correlation
- Single-owner access control with two-step ownership transfer
"""

__version__ = "1.0.0"
__service__ = "crowd_registry_service"
