"""Internal modules for Served SDK.

WARNING: These modules are implementation details of ServedClient and the
API facades. They are not intended for direct use in application code.

Modules:
    http - Shared HTTP client configuration
    transport - Request sending and response interpretation
    crud - Generic list/get/create/update/delete resource clients
    module - Base classes for API module facades
    tracing - Request tracing via httpx event hooks
"""
