"""Kernel – error hierarchy shared by every layer."""
