"""Microapp scaffolding engine for multi-package React Native workspaces."""

__version__ = "1.0.0"
