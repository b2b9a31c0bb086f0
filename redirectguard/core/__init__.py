# redirectguard/core/__init__.py
"""
Core components: errors, HTTP message layer, redirect resolution.

No IO happens in core/; transports live in infra/.
"""
