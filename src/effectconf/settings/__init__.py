"""Bootstrap settings management.

This package provides:
- StoreSettings: where to load configuration values from, loaded from effectconf.yaml
"""
