# redirectguard/infra/__init__.py
"""
Infrastructure - IO-dependent implementations (network transports)
"""
