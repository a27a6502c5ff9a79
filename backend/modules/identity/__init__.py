"""
Identity module.

Verifies humanID exchange tokens.

Public API:
- IIdentityVerifier: Interface used by the session module
- HumanIDVerifier: humanID REST implementation
- IdentityVerificationFailedError
"""

from .interfaces import IIdentityVerifier
from .client import HumanIDVerifier
from .exceptions import IdentityVerificationFailedError

__all__ = [
    "IIdentityVerifier",
    "HumanIDVerifier",
    "IdentityVerificationFailedError",
]
