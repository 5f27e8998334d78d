"""Internal modules for the DocWal SDK.

These are not intended for direct use in application code.

Modules:
    http - Shared HTTP client configuration
    redaction - Secret redaction for debug output
"""
