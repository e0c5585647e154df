"""
Validators package.

Provides validation functions for KYC form input.
"""

from app.validators.kyc import KycField, validate_field, validate_section


__all__ = [
    "KycField",
    "validate_field",
    "validate_section",
]
