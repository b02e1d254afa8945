"""Shared helpers for effectconf packages."""
