"""Installer and runner for the standalone tailwindcss CLI.

Core design goals:
- Explicit configuration, passed into every call
- Platform-aware release selection
- Idempotent project scaffolding
- Output streamed straight from the child process
- Centralized logging
"""

__all__ = []
