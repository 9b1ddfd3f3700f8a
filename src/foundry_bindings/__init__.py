"""Resolve shared backing-resource definitions for Azure AI Foundry projects."""

__version__ = "0.1.0"
